"""Systems that give geometry default materials, colours and texture coordinates."""

from __future__ import annotations

from scenekit.components import (
    Ambient,
    BufferData,
    Coloring,
    Diffuse,
    Dimensions,
    Geometry,
    Material,
    Shininess,
    Specular,
    TexCoords,
)
from scenekit.world import Entity, World

_TEXCOORD_DIMENSIONS = 2


def create_blank_texcoords(length: int) -> list[float]:
    """A buffer of zeroed texture coordinates."""
    return [0.0] * length


def color_every_vertex_white(geometry_data: BufferData) -> list[float]:
    """A colour buffer with a full-intensity value for every float of geometry."""
    return [1.0 for _ in geometry_data.data]


def _buffer_of(world: World, model: Entity) -> BufferData:
    data = world.storage(BufferData).get(model)
    if data is None:
        raise KeyError(f"geometry model {model} has no buffer data")
    return data


def _without(world: World, component_type: type) -> list[tuple[Entity, Geometry]]:
    present = world.storage(component_type)
    return [
        (entity, geometry)
        for entity, geometry in world.storage(Geometry).items()
        if entity not in present
    ]


class MaterialDefault:
    """Gives geometry without a material the default material."""

    def run(self, world: World) -> None:
        materials = world.storage(Material)
        to_add: list[tuple[Entity, Material]] = []

        for entity, geometry in _without(world, Material):
            existing = materials.get(geometry.model)
            if existing is not None:
                to_add.append((entity, Material(existing.model)))
                continue

            model = world.create_entity(Ambient(), Diffuse(), Specular(), Shininess())
            to_add.append((geometry.model, Material(model)))
            to_add.append((entity, Material(model)))

        for entity, material in to_add:
            materials.insert(entity, material)


class ColoringDefault:
    """Gives geometry without a colouring a buffer that colours every vertex white."""

    def run(self, world: World) -> None:
        colorings = world.storage(Coloring)
        buffers = world.storage(BufferData)
        dimensions = world.storage(Dimensions)

        colorings_to_add: list[tuple[Entity, Coloring]] = []
        dimensions_to_add: list[tuple[Entity, Dimensions]] = []

        for entity, geometry in _without(world, Coloring):
            existing = colorings.get(geometry.model)
            if existing is not None:
                colorings_to_add.append((entity, Coloring(existing.model)))
                continue

            geometry_data = _buffer_of(world, geometry.model)
            coloring_data = color_every_vertex_white(geometry_data)
            geometry_dimensions = dimensions.get(geometry.model)
            if geometry_dimensions is None:
                raise KeyError(f"geometry model {geometry.model} has no dimensions")

            model = world.create_entity()
            buffers.insert(model, BufferData(coloring_data))
            dimensions_to_add.append((model, Dimensions(geometry_dimensions.size)))

            colorings_to_add.append((geometry.model, Coloring(model)))
            colorings_to_add.append((entity, Coloring(model)))

        for entity, coloring in colorings_to_add:
            colorings.insert(entity, coloring)
        for entity, size in dimensions_to_add:
            dimensions.insert(entity, size)


class TexcoordsDefault:
    """Gives geometry without texture coordinates a buffer of zeroed ones."""

    def run(self, world: World) -> None:
        texcoords = world.storage(TexCoords)
        buffers = world.storage(BufferData)
        dimensions = world.storage(Dimensions)

        texcoords_to_add: list[tuple[Entity, TexCoords]] = []
        dimensions_to_add: list[tuple[Entity, Dimensions]] = []

        for entity, geometry in _without(world, TexCoords):
            existing = texcoords.get(geometry.model)
            if existing is not None:
                texcoords_to_add.append((entity, TexCoords(existing.model)))
                continue

            geometry_data = _buffer_of(world, geometry.model)
            blank = create_blank_texcoords(len(geometry_data.data))

            model = world.create_entity()
            buffers.insert(model, BufferData(blank))
            dimensions_to_add.append((model, Dimensions(_TEXCOORD_DIMENSIONS)))

            texcoords_to_add.append((geometry.model, TexCoords(model)))
            texcoords_to_add.append((entity, TexCoords(model)))

        for entity, coords in texcoords_to_add:
            texcoords.insert(entity, coords)
        for entity, size in dimensions_to_add:
            dimensions.insert(entity, size)