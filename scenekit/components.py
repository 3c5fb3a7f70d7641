"""Component types attached to entities in the scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from scenekit.matrix4f import Matrix4f
from scenekit.resources import NameIndex
from scenekit.vector3f import Vector3f
from scenekit.world import Entity


def _lookup(index: NameIndex, key: str) -> Entity:
    entity = index.get(key)
    if entity is None:
        raise KeyError(f"no entity is named {key!r}")
    return entity


@dataclass
class Ambient:
    """A material's ambient colour."""

    color: Vector3f = field(default_factory=lambda: Vector3f(0.1, 0.1, 0.1))


@dataclass
class Diffuse:
    """A material's diffuse colour."""

    color: Vector3f = field(default_factory=lambda: Vector3f(1.0, 1.0, 1.0))


@dataclass
class Specular:
    """A material's specular colour."""

    color: Vector3f = field(default_factory=lambda: Vector3f(1.0, 1.0, 1.0))


@dataclass
class Shininess:
    """A material's specular exponent."""

    value: float = 80.0


@dataclass
class BufferData:
    """Flat vertex data, several floats per vertex."""

    data: list[float]


@dataclass
class Dimensions:
    """How many floats make up one vertex in a buffer."""

    size: int


@dataclass
class Camera:
    """Marks an entity as a camera."""


@dataclass
class DirectionalLight:
    """Marks an entity as a directional light."""


@dataclass
class PointLight:
    """Marks an entity as a point light."""


@dataclass
class ClearColor:
    """The colour a camera's viewport is cleared to."""

    red: float
    green: float
    blue: float
    alpha: float

    @classmethod
    def black(cls) -> ClearColor:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> ClearColor:
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def transparent(cls) -> ClearColor:
        return cls(0.0, 0.0, 0.0, 0.0)


@dataclass
class Viewport:
    """The region of the screen a camera draws to."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class Geometry:
    """Refers to the entity holding vertex positions."""

    model: Entity

    @classmethod
    def find(cls, index: NameIndex, name: str) -> Geometry:
        return cls(_lookup(index, f"geometry_{name}"))


@dataclass
class Coloring:
    """Refers to the entity holding vertex colours."""

    model: Entity


@dataclass
class Material:
    """Refers to the entity holding material properties."""

    model: Entity

    @classmethod
    def find(cls, index: NameIndex, name: str) -> Material:
        return cls(_lookup(index, f"material_{name}"))


@dataclass
class Normals:
    """Refers to the entity holding vertex normals."""

    model: Entity

    @classmethod
    def find(cls, index: NameIndex, name: str) -> Normals:
        return cls(_lookup(index, f"normals_{name}"))


@dataclass
class TexCoords:
    """Refers to the entity holding texture coordinates."""

    model: Entity

    @classmethod
    def find(cls, index: NameIndex, name: str) -> TexCoords:
        return cls(_lookup(index, f"texcoords_{name}"))


@dataclass
class Texture:
    """Refers to the entity holding a texture image."""

    model: Entity

    @classmethod
    def find(cls, index: NameIndex, path: str) -> Texture:
        return cls(_lookup(index, path))


@dataclass
class FileToLoad:
    """A file waiting to be fetched."""

    src: str
    loading: bool = False


@dataclass
class FileContent:
    """The text of a fetched file."""

    text: str


@dataclass
class GeometryGroup:
    """Names a group of loaded models to be expanded into child entities."""

    name: str


@dataclass
class Name:
    """A unique name by which an entity can be looked up."""

    value: str


@dataclass
class ModelsToLoad:
    """Object and material files to load, each with the entity loading it."""

    object_filenames: dict[str, Optional[Entity]] = field(default_factory=dict)
    material_filenames: dict[str, Optional[Entity]] = field(default_factory=dict)
    preloading: bool = False
    preloaded: bool = False

    @classmethod
    def create(
        cls, object_filenames: Iterable[str], material_filenames: Iterable[str]
    ) -> ModelsToLoad:
        """Files to load, none of them started yet."""
        return cls(dict.fromkeys(object_filenames), dict.fromkeys(material_filenames))


@dataclass
class SceneParent:
    """The entity this one is positioned relative to."""

    entity: Entity


@dataclass
class LocalTransform:
    """Transform relative to the scene parent."""

    matrix: Matrix4f


@dataclass
class WorldTransform:
    """Transform relative to the world origin."""

    matrix: Matrix4f


@dataclass
class InverseWorldTransform:
    """Inverse of the world transform."""

    matrix: Matrix4f


@dataclass
class ProjectionTransform:
    """A camera's projection."""

    matrix: Matrix4f