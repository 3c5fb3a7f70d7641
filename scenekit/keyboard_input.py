"""The system that turns key presses into Keyboard state."""

from __future__ import annotations

from enum import Enum

from scenekit.resources import Key, Keyboard
from scenekit.world import World


class _Direction(Enum):
    DOWN = "down"
    UP = "up"


class KeyboardInput:
    """Queues key events as they arrive and applies them on each update."""

    def __init__(self) -> None:
        self._events: list[tuple[Key, _Direction]] = []

    def key_down(self, code: int, repeat: bool = False) -> None:
        """Record a key press; auto-repeats are ignored."""
        if repeat:
            return
        key = Key.lookup(code)
        if key is not None:
            self._events.append((key, _Direction.DOWN))

    def key_up(self, code: int) -> None:
        key = Key.lookup(code)
        if key is not None:
            self._events.append((key, _Direction.UP))

    def setup(self, world: World) -> None:
        world.default_resource(Keyboard)

    def run(self, world: World) -> None:
        keyboard = world.default_resource(Keyboard)
        keyboard.just_pressed.clear()
        keyboard.just_released.clear()

        for key, direction in self._events:
            if direction is _Direction.DOWN:
                keyboard.pressing.add(key)
                keyboard.just_pressed.add(key)
            else:
                keyboard.pressing.discard(key)
                keyboard.just_released.add(key)

        self._events.clear()