"""Systems that derive world transforms and their inverses."""

from __future__ import annotations

from scenekit.components import (
    InverseWorldTransform,
    LocalTransform,
    SceneParent,
    WorldTransform,
)
from scenekit.hierarchy import SceneHierarchy
from scenekit.matrix4f import Matrix4f
from scenekit.world import Entity, Storage, World


class _Tracking:
    """Keeps the event readers a system registers during setup."""

    def __init__(self) -> None:
        self._readers: dict[str, int] = {}

    def _reader(self, key: str) -> int:
        try:
            return self._readers[key]
        except KeyError:
            raise RuntimeError(f"{type(self).__name__} must be set up before it runs") from None


class SceneGraph(_Tracking):
    """Combines local transforms down the hierarchy into world transforms."""

    def __init__(self) -> None:
        super().__init__()
        self._dirty: set[int] = set()

    def setup(self, world: World) -> None:
        """Start tracking changes; the Hierarchy must already be in the world."""
        self._readers["locals"] = world.storage(LocalTransform).register_reader()
        self._readers["parents"] = world.resource(SceneHierarchy).track()

    def run(self, world: World) -> None:
        hierarchy = world.resource(SceneHierarchy)
        locals_ = world.storage(LocalTransform)
        worlds = world.storage(WorldTransform)
        parents = world.storage(SceneParent)

        self._dirty = {event.entity_id for event in locals_.read(self._reader("locals"))}
        self._dirty.update(event.entity.id for event in hierarchy.read(self._reader("parents")))

        for entity in [e for e in worlds if e not in locals_]:
            worlds.remove(entity)

        for root, local in locals_.items():
            if root.id in self._dirty and root not in parents:
                worlds.insert(root, WorldTransform(Matrix4f(list(local.matrix))))

        for child in hierarchy.all():
            self._refresh(child, parents, locals_, worlds)

    def _refresh(self, child: Entity, parents: Storage, locals_: Storage, worlds: Storage) -> None:
        parent = parents.get(child)
        if parent is None:
            return

        if parent.entity.id in self._dirty:
            self._dirty.add(child.id)
        elif child.id not in self._dirty:
            return

        local = locals_.get(child)
        if local is None:
            return

        parent_world = worlds.get(parent.entity)
        if parent_world is None:
            worlds.remove(child)
        else:
            worlds.insert(child, WorldTransform(parent_world.matrix.multiply(local.matrix)))


class InverseWorld(_Tracking):
    """Keeps an inverse of every changed world transform."""

    def setup(self, world: World) -> None:
        self._readers["worlds"] = world.storage(WorldTransform).register_reader()

    def run(self, world: World) -> None:
        worlds = world.storage(WorldTransform)
        inverses = world.storage(InverseWorldTransform)

        dirty = {event.entity_id for event in worlds.read(self._reader("worlds"))}
        for entity_id in sorted(dirty):
            entity = world.entity_by_id(entity_id)
            if entity is None:
                continue
            transform = worlds.get(entity)
            if transform is None:
                inverses.remove(entity)
            else:
                inverses.insert(entity, InverseWorldTransform(transform.matrix.inverse()))