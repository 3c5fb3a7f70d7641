"""Parent/child relationships between entities, kept in step with SceneParent."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from scenekit.components import SceneParent
from scenekit.world import Entity, EventKind, World


class HierarchyEventKind(Enum):
    MODIFIED = "modified"
    REMOVED = "removed"


@dataclass(frozen=True)
class HierarchyEvent:
    """An entity that joined, moved within or left the hierarchy."""

    kind: HierarchyEventKind
    entity: Entity


class SceneHierarchy:
    """The tree of entities that have a SceneParent, with change events."""

    def __init__(self, parent_reader: int) -> None:
        self._parent_reader = parent_reader
        self._parent_of: dict[Entity, Entity] = {}
        self._readers: dict[int, list[HierarchyEvent]] = {}
        self._next_reader = 0

    def all(self) -> list[Entity]:
        """Every entity with a parent, each listed after its own parent."""
        order: list[Entity] = []
        seen: set[Entity] = set()
        for entity in self._parent_of:
            chain: list[Entity] = []
            current = entity
            while current in self._parent_of and current not in seen and current not in chain:
                chain.append(current)
                current = self._parent_of[current]
            for member in reversed(chain):
                seen.add(member)
                order.append(member)
        return order

    def track(self) -> int:
        """Start collecting hierarchy events; returns the reader's handle."""
        reader = self._next_reader
        self._next_reader += 1
        self._readers[reader] = []
        return reader

    def read(self, reader: int) -> list[HierarchyEvent]:
        """The events since this reader last read, oldest first."""
        try:
            queue = self._readers[reader]
        except KeyError:
            raise KeyError(f"unknown reader {reader}") from None
        events = list(queue)
        queue.clear()
        return events

    def parent(self, entity: Entity) -> Optional[Entity]:
        return self._parent_of.get(entity)

    def children(self, entity: Entity) -> list[Entity]:
        return [child for child, parent in self._parent_of.items() if parent == entity]

    def _emit(self, kind: HierarchyEventKind, entity: Entity) -> None:
        event = HierarchyEvent(kind, entity)
        for queue in self._readers.values():
            queue.append(event)

    def _entity_for(self, entity_id: int, world: World) -> Optional[Entity]:
        for entity in self._parent_of:
            if entity.id == entity_id:
                return entity
        return world.entity_by_id(entity_id)

    def _with_descendants(self, roots: Iterable[Entity]) -> set[Entity]:
        doomed = set(roots)
        frontier = list(doomed)
        while frontier:
            current = frontier.pop()
            for child in self.children(current):
                if child not in doomed:
                    doomed.add(child)
                    frontier.append(child)
        return doomed

    def _maintain(self, world: World) -> None:
        parents = world.storage(SceneParent)
        changes: dict[EventKind, set[int]] = {kind: set() for kind in EventKind}
        for event in parents.read(self._parent_reader):
            changes[event.kind].add(event.entity_id)

        roots = {
            entity
            for entity in (self._entity_for(i, world) for i in changes[EventKind.REMOVED])
            if entity is not None
        }
        roots.update(entity for entity in self._parent_of if not world.is_alive(entity))

        if roots:
            doomed = self._with_descendants(roots)
            for entity in doomed:
                self._parent_of.pop(entity, None)
            for entity in sorted(doomed):
                self._emit(HierarchyEventKind.REMOVED, entity)

        changed_ids = changes[EventKind.INSERTED] | changes[EventKind.MODIFIED]
        for entity_id in sorted(changed_ids):
            entity = world.entity_by_id(entity_id)
            if entity is None:
                continue
            component = parents.get(entity)
            if component is None:
                continue
            self._parent_of.pop(entity, None)
            self._parent_of[entity] = component.entity
            self._emit(HierarchyEventKind.MODIFIED, entity)


class Hierarchy:
    """Keeps the SceneHierarchy resource up to date with SceneParent components.

    Removing a parent from the hierarchy would drop its whole subtree, so the
    children of removed entities are re-added by re-inserting their SceneParent.
    """

    def __init__(self, world: World) -> None:
        reader = world.storage(SceneParent).register_reader()
        hierarchy = SceneHierarchy(reader)
        world.insert_resource(hierarchy)
        self._reader = hierarchy.track()

    def run_now(self, world: World) -> None:
        hierarchy = world.resource(SceneHierarchy)
        hierarchy._maintain(world)

        removed_ids = {
            event.entity.id
            for event in hierarchy.read(self._reader)
            if event.kind is HierarchyEventKind.REMOVED
        }

        parents = world.storage(SceneParent)
        orphans = [child for child, parent in parents.items() if parent.entity.id in removed_ids]
        for child in orphans:
            component = parents.remove(child)
            parents.insert(child, component)

        if removed_ids:
            hierarchy._maintain(world)