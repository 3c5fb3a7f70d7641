"""Systems that start model file loads, expand model groups and index names."""

from __future__ import annotations

from typing import Optional

from scenekit.components import (
    FileToLoad,
    Geometry,
    GeometryGroup,
    LocalTransform,
    ModelsToLoad,
    Name,
    SceneParent,
)
from scenekit.matrix4f import Matrix4f
from scenekit.resources import ModelGroups, NameIndex
from scenekit.world import World


def _file_lists(models: ModelsToLoad) -> tuple[dict, dict]:
    return models.material_filenames, models.object_filenames


class ModelPreloader:
    """Starts loading every file a ModelsToLoad names and notes when all are in."""

    def run(self, world: World) -> None:
        self._start_loading_files(world)
        self._check_if_files_are_loaded(world)

    @staticmethod
    def _start_loading_files(world: World) -> None:
        for _, models in world.storage(ModelsToLoad).items():
            if models.preloading or models.preloaded:
                continue
            for filenames in _file_lists(models):
                for filename in list(filenames):
                    filenames[filename] = world.create_entity(FileToLoad(filename))
            models.preloading = True

    @staticmethod
    def _check_if_files_are_loaded(world: World) -> None:
        files_to_load = world.storage(FileToLoad)
        for _, models in world.storage(ModelsToLoad).items():
            if models.preloaded:
                continue
            models.preloading = False
            for filenames in _file_lists(models):
                for filename, loader in filenames.items():
                    if loader is None:
                        raise RuntimeError(f"no load was started for {filename!r}")
                    if loader in files_to_load:
                        models.preloading = True
            if not models.preloading:
                models.preloaded = True


class GroupExpander:
    """Replaces each GeometryGroup with one child entity per model in the group."""

    def run(self, world: World) -> None:
        model_groups = world.resource(ModelGroups)
        groups = world.storage(GeometryGroup)

        expanded = []
        for parent, group in groups.items():
            try:
                members = model_groups[group.name]
            except KeyError:
                raise KeyError(f"no models were loaded for group {group.name!r}") from None

            living = sorted((m for m in members if world.is_alive(m)), key=lambda e: e.id)
            for geometry_model in living:
                world.create_entity(
                    SceneParent(parent),
                    Geometry(geometry_model),
                    LocalTransform(Matrix4f.identity()),
                )
            expanded.append(parent)

        for entity in expanded:
            groups.remove(entity)


class NameIndexer:
    """Keeps the NameIndex resource in step with Name components."""

    def __init__(self) -> None:
        self._reader: Optional[int] = None

    def setup(self, world: World) -> None:
        world.default_resource(NameIndex)
        self._reader = world.storage(Name).register_reader()

    def run(self, world: World) -> None:
        if self._reader is None:
            raise RuntimeError("NameIndexer must be set up before it runs")

        names = world.storage(Name)
        index = world.default_resource(NameIndex)
        dirty = {event.entity_id for event in names.read(self._reader)}

        for entity_id in sorted(dirty):
            entity = world.entity_by_id(entity_id)
            if entity is None:
                continue
            name = names.get(entity)
            if name is None:
                index.remove(entity)
            else:
                index.insert(name.value, entity)