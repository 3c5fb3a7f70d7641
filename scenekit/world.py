"""Entities, component storages with change events, and world-wide resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

C = TypeVar("C")
R = TypeVar("R")


@dataclass(frozen=True, order=True)
class Entity:
    """A handle to a thing in the world; ids are reused with a new generation."""

    id: int
    generation: int = 0


class EventKind(Enum):
    INSERTED = "inserted"
    MODIFIED = "modified"
    REMOVED = "removed"


@dataclass(frozen=True)
class ComponentEvent:
    """A change to one entity's component in a storage."""

    kind: EventKind
    entity_id: int


class Storage(Generic[C]):
    """Components of one type keyed by entity, reporting changes to readers."""

    def __init__(self, is_alive: Callable[[Entity], bool]) -> None:
        self._is_alive = is_alive
        self._components: dict[Entity, C] = {}
        self._readers: dict[int, list[ComponentEvent]] = {}
        self._next_reader = 0

    def _emit(self, kind: EventKind, entity: Entity) -> None:
        event = ComponentEvent(kind, entity.id)
        for queue in self._readers.values():
            queue.append(event)

    def insert(self, entity: Entity, component: C) -> Optional[C]:
        """Attach a component, returning the one it replaced, if any."""
        if not self._is_alive(entity):
            raise ValueError(f"cannot insert a component for dead entity {entity}")
        replacing = entity in self._components
        previous = self._components.get(entity)
        self._components[entity] = component
        self._emit(EventKind.MODIFIED if replacing else EventKind.INSERTED, entity)
        return previous

    def remove(self, entity: Entity) -> Optional[C]:
        """Detach and return the entity's component, or None if it had none."""
        if entity not in self._components:
            return None
        component = self._components.pop(entity)
        self._emit(EventKind.REMOVED, entity)
        return component

    def get(self, entity: Entity) -> Optional[C]:
        return self._components.get(entity)

    def modified(self, entity: Entity) -> C:
        """Report that the entity's component was changed in place and return it."""
        try:
            component = self._components[entity]
        except KeyError:
            raise KeyError(f"entity {entity} has no component in this storage") from None
        self._emit(EventKind.MODIFIED, entity)
        return component

    def register_reader(self) -> int:
        """Start collecting change events; returns the reader's handle."""
        reader = self._next_reader
        self._next_reader += 1
        self._readers[reader] = []
        return reader

    def read(self, reader: int) -> list[ComponentEvent]:
        """The events since this reader last read, oldest first."""
        try:
            queue = self._readers[reader]
        except KeyError:
            raise KeyError(f"unknown reader {reader}") from None
        events = list(queue)
        queue.clear()
        return events

    def items(self) -> list[tuple[Entity, C]]:
        """(entity, component) pairs in entity id order."""
        return sorted(self._components.items(), key=lambda pair: pair[0].id)

    def __contains__(self, entity: object) -> bool:
        return entity in self._components

    def __iter__(self) -> Iterator[Entity]:
        return iter(sorted(self._components, key=lambda e: e.id))

    def __len__(self) -> int:
        return len(self._components)


class World:
    """Owns entities, their component storages and shared resources."""

    def __init__(self) -> None:
        self._live: dict[int, Entity] = {}
        self._generations: dict[int, int] = {}
        self._free: list[int] = []
        self._next_id = 0
        self._storages: dict[type, Storage[Any]] = {}
        self._resources: dict[type, Any] = {}

    def create_entity(self, *components: Any) -> Entity:
        """Create an entity, attaching the given components to it."""
        if self._free:
            entity_id = self._free.pop()
        else:
            entity_id = self._next_id
            self._next_id += 1
        generation = self._generations.get(entity_id, -1) + 1
        self._generations[entity_id] = generation
        entity = Entity(entity_id, generation)
        self._live[entity_id] = entity
        for component in components:
            self.storage(type(component)).insert(entity, component)
        return entity

    def delete_entity(self, entity: Entity) -> None:
        """Remove an entity and all of its components."""
        if not self.is_alive(entity):
            raise ValueError(f"entity {entity} is not alive")
        for storage in self._storages.values():
            storage.remove(entity)
        del self._live[entity.id]
        self._free.append(entity.id)

    def is_alive(self, entity: Entity) -> bool:
        return self._live.get(entity.id) == entity

    def entities(self) -> list[Entity]:
        """Living entities in id order."""
        return [self._live[entity_id] for entity_id in sorted(self._live)]

    def entity_by_id(self, entity_id: int) -> Optional[Entity]:
        """The living entity with this id, if there is one."""
        return self._live.get(entity_id)

    def storage(self, component_type: type[C]) -> Storage[C]:
        storage = self._storages.get(component_type)
        if storage is None:
            storage = Storage(self.is_alive)
            self._storages[component_type] = storage
        return storage

    def insert_resource(self, resource: Any) -> None:
        """Store a resource, replacing any other of the same type."""
        self._resources[type(resource)] = resource

    def resource(self, resource_type: type[R]) -> R:
        """The resource of this type; raises KeyError if there is none."""
        try:
            return self._resources[resource_type]
        except KeyError:
            raise KeyError(f"no {resource_type.__name__} resource in the world") from None

    def default_resource(self, resource_type: type[R]) -> R:
        """The resource of this type, created with no arguments if missing."""
        if resource_type not in self._resources:
            self._resources[resource_type] = resource_type()
        return self._resources[resource_type]