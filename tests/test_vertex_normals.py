import pytest

from scenekit.components import BufferData, Dimensions, Geometry, Normals
from scenekit.vertex_normals import VertexNormals, vertex_normals
from scenekit.world import World

VERTICES = [
    0., 0., 0.,
    1., 0., 0.,
    0., 1., 0.,

    0., 0., 0.,
    0., 0., 2.,
    0., 1., 0.,
]


def setup():
    world = World()
    system = VertexNormals()
    system.setup(world)
    return world, system


def test_it_creates_an_entity_to_hold_normal_data_and_associates_it_with_model_and_instance():
    world, system = setup()
    geometry_model = world.create_entity(BufferData(list(VERTICES)))
    instance = world.create_entity(Geometry(geometry_model))

    system.run(world)

    normals = world.storage(Normals)
    model_normals = normals.get(geometry_model)
    instance_normals = normals.get(instance)

    assert model_normals == instance_normals

    data = world.storage(BufferData).get(instance_normals.model)
    assert data.data == [
        0., 0., 1.,
        0., 0., 1.,
        0., 0., 1.,

        -2., 0., 0.,
        -2., 0., 0.,
        -2., 0., 0.,
    ]


def test_the_normal_buffer_has_three_dimensions():
    world, system = setup()
    geometry_model = world.create_entity(BufferData(list(VERTICES)))
    instance = world.create_entity(Geometry(geometry_model))

    system.run(world)

    model = world.storage(Normals).get(instance).model
    assert world.storage(Dimensions).get(model) == Dimensions(3)


def test_later_instances_reuse_the_models_normals():
    world, system = setup()
    geometry_model = world.create_entity(BufferData(list(VERTICES)))
    first = world.create_entity(Geometry(geometry_model))
    system.run(world)

    second = world.create_entity(Geometry(geometry_model))
    entities_before = len(world.entities())
    system.run(world)

    normals = world.storage(Normals)
    assert normals.get(second) == normals.get(first)
    assert len(world.entities()) == entities_before


def test_vertex_normals_keeps_the_length_of_the_data():
    result = vertex_normals(BufferData(list(VERTICES)))

    assert len(result.data) == len(VERTICES)


def test_vertex_normals_rejects_partial_triangles():
    with pytest.raises(ValueError):
        vertex_normals(BufferData([0., 0., 0., 1.]))


def test_geometry_without_buffer_data_raises():
    world, system = setup()
    geometry_model = world.create_entity()
    world.create_entity(Geometry(geometry_model))

    with pytest.raises(KeyError):
        system.run(world)