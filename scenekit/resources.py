"""World-wide resources: timing, keyboard state, name lookup and model groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Hashable, Optional

_LOWERCASE_CODES = range(97, 123)
_CASE_OFFSET = 32


@dataclass
class GameTiming:
    """Settings and accumulated time for the fixed-step update loop."""

    updates_per_second: int = 60
    pause_updates_after: float = 1.0
    time_since_update: float = 0.0

    def fixed_update_time(self) -> float:
        """Seconds between fixed updates."""
        return 1.0 / self.updates_per_second


class Key(IntEnum):
    """Keys the game responds to."""

    A = 0
    B = 1
    C = 2

    @classmethod
    def lookup(cls, code: int) -> Optional[Key]:
        """The key for a key code, treating lower-case codes as upper-case."""
        if code in _LOWERCASE_CODES:
            code -= _CASE_OFFSET
        return _KEY_CODES.get(code)


_KEY_CODES = {65: Key.A, 66: Key.B, 67: Key.C}


@dataclass
class Keyboard:
    """Which keys are held, and which changed state this update."""

    pressing: set[Key] = field(default_factory=set)
    just_pressed: set[Key] = field(default_factory=set)
    just_released: set[Key] = field(default_factory=set)


@dataclass
class NameIndex:
    """A two-way mapping between names and entities."""

    index: dict[str, Hashable] = field(default_factory=dict)
    reverse: dict[Hashable, str] = field(default_factory=dict)

    def get(self, name: str) -> Optional[Hashable]:
        return self.index.get(name)

    def insert(self, name: str, entity: Hashable) -> None:
        self.index[name] = entity
        self.reverse[entity] = name

    def remove(self, entity: Hashable) -> None:
        """Forget an entity's name; raises KeyError if it has none."""
        name = self.reverse.pop(entity)
        del self.index[name]


class ModelGroups(dict):
    """Sets of geometry entities keyed by the file they were loaded from."""

    def add(self, name: str, entity: Hashable) -> None:
        self.setdefault(name, set()).add(entity)