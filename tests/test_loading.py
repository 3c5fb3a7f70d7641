import pytest

from scenekit.components import (
    FileToLoad,
    Geometry,
    GeometryGroup,
    LocalTransform,
    ModelsToLoad,
    Name,
    SceneParent,
)
from scenekit.loading import GroupExpander, ModelPreloader, NameIndexer
from scenekit.matrix4f import Matrix4f
from scenekit.resources import ModelGroups, NameIndex
from scenekit.world import World


def _preloading_world():
    world = World()
    entity = world.create_entity(ModelsToLoad.create(["a.obj"], ["a.mtl"]))
    return world, world.storage(ModelsToLoad).get(entity)


def test_preloader_starts_a_load_for_every_file():
    world, models = _preloading_world()
    ModelPreloader().run(world)

    files = world.storage(FileToLoad)
    assert files.get(models.object_filenames["a.obj"]).src == "a.obj"
    assert files.get(models.material_filenames["a.mtl"]).src == "a.mtl"
    assert models.material_filenames["a.mtl"].id < models.object_filenames["a.obj"].id
    assert models.preloading is True
    assert models.preloaded is False


def test_preloader_does_not_start_loads_twice():
    world, models = _preloading_world()
    preloader = ModelPreloader()
    preloader.run(world)
    preloader.run(world)
    assert len(world.storage(FileToLoad)) == 2
    assert models.preloaded is False


def test_preloader_marks_models_preloaded_once_files_arrive():
    world, models = _preloading_world()
    preloader = ModelPreloader()
    preloader.run(world)

    files = world.storage(FileToLoad)
    for loader in [*models.object_filenames.values(), *models.material_filenames.values()]:
        files.remove(loader)
    preloader.run(world)

    assert models.preloaded is True
    assert models.preloading is False


def test_group_expander_creates_a_child_per_model():
    world = World()
    first = world.create_entity()
    second = world.create_entity()
    groups = ModelGroups()
    groups.add("skull.obj", first)
    groups.add("skull.obj", second)
    world.insert_resource(groups)
    parent = world.create_entity(GeometryGroup("skull.obj"))

    GroupExpander().run(world)

    assert parent not in world.storage(GeometryGroup)
    children = [c for c, p in world.storage(SceneParent).items() if p.entity == parent]
    assert len(children) == 2
    assert {world.storage(Geometry).get(c).model for c in children} == {first, second}
    for child in children:
        assert world.storage(LocalTransform).get(child).matrix == Matrix4f.identity()


def test_group_expander_rejects_unknown_groups():
    world = World()
    world.insert_resource(ModelGroups())
    world.create_entity(GeometryGroup("missing.obj"))
    with pytest.raises(KeyError):
        GroupExpander().run(world)


def test_name_indexer_tracks_names():
    world = World()
    indexer = NameIndexer()
    indexer.setup(world)

    entity = world.create_entity(Name("cube"))
    indexer.run(world)
    index = world.resource(NameIndex)
    assert index.get("cube") == entity

    world.storage(Name).remove(entity)
    indexer.run(world)
    assert index.get("cube") is None
    assert entity not in index.reverse


def test_name_indexer_picks_up_renames():
    world = World()
    indexer = NameIndexer()
    indexer.setup(world)
    entity = world.create_entity(Name("cube"))
    indexer.run(world)

    world.storage(Name).insert(entity, Name("box"))
    indexer.run(world)
    assert world.resource(NameIndex).get("box") == entity
    assert world.resource(NameIndex).reverse[entity] == "box"


def test_name_indexer_must_be_set_up():
    with pytest.raises(RuntimeError):
        NameIndexer().run(World())