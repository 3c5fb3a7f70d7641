"""Flat-shaded vertex normals for triangle geometry."""

from __future__ import annotations

from collections import deque

from scenekit.components import BufferData, Dimensions, Geometry, Normals
from scenekit.triangle import Triangle
from scenekit.vector3f import Vector3f

from scenekit.world import Entity, World

_FLOATS_PER_TRIANGLE = 9


def vertex_normals(buffer_data: BufferData) -> BufferData:
    """Give every vertex of each 3D triangle that triangle's surface normal."""
    data = buffer_data.data
    if len(data) % _FLOATS_PER_TRIANGLE:
        raise ValueError(
            f"triangle data needs a multiple of {_FLOATS_PER_TRIANGLE} floats, got {len(data)}"
        )

    normals: list[float] = []
    for chunk in zip(*[iter(data)] * _FLOATS_PER_TRIANGLE):
        triangle = Triangle(
            Vector3f(*chunk[0:3]), Vector3f(*chunk[3:6]), Vector3f(*chunk[6:9])
        )
        normals.extend(list(triangle.surface_normal()) * 3)
    return BufferData(normals)


class VertexNormals:
    """Gives geometry without normals a buffer of flat-shaded normals.

    Geometry is assumed to be 3D; for 2D the normals would always face the camera.
    """

    def setup(self, world: World) -> None:
        for component_type in (Geometry, Normals, BufferData, Dimensions):
            world.storage(component_type)

    def run(self, world: World) -> None:
        geometries = world.storage(Geometry)
        normals = world.storage(Normals)
        buffers = world.storage(BufferData)

        to_add: deque[tuple[Entity, Normals]] = deque()

        for entity, geometry in geometries.items():
            if entity in normals:
                continue

            existing = normals.get(geometry.model)
            if existing is not None:
                to_add.append((entity, Normals(existing.model)))
                continue

            vertices = buffers.get(geometry.model)
            if vertices is None:
                raise KeyError(f"geometry model {geometry.model} has no buffer data")

            model = world.create_entity(vertex_normals(vertices), Dimensions(3))
            to_add.appendleft((geometry.model, Normals(model)))
            to_add.append((entity, Normals(model)))

        for entity, component in to_add:
            normals.insert(entity, component)