"""A fixed-timestep update loop with a render on every frame."""

from __future__ import annotations

import itertools
import time
from typing import Callable, Optional

from scenekit.resources import GameTiming
from scenekit.world import World

WorldCallback = Callable[[World], None]


class GameLoop:
    """Runs updates at a fixed rate and renders once per frame."""

    def __init__(self, world: Optional[World] = None) -> None:
        self.world = world if world is not None else World()
        self.world.default_resource(GameTiming)
        self._previous: Optional[float] = None

    def before(self, callback: WorldCallback) -> None:
        """Run a one-off callback, such as setup, against the world."""
        callback(self.world)

    def frame(self, current: float, update: WorldCallback, render: WorldCallback) -> None:
        """Advance to time `current` in seconds: run due updates, then render."""
        previous = current if self._previous is None else self._previous

        timing = self.world.resource(GameTiming)
        timing.time_since_update += current - previous
        if timing.time_since_update > timing.pause_updates_after:
            timing.time_since_update = timing.pause_updates_after

        while timing.time_since_update >= timing.fixed_update_time():
            update(self.world)
            timing = self.world.resource(GameTiming)
            timing.time_since_update -= timing.fixed_update_time()

        render(self.world)
        self._previous = current

    def run(
        self,
        update: WorldCallback,
        render: WorldCallback,
        clock: Optional[Callable[[], float]] = None,
        frames: Optional[int] = None,
    ) -> None:
        """Run frames, forever unless a number of frames is given."""
        clock = clock if clock is not None else time.perf_counter
        self._previous = clock()
        ticks = itertools.count() if frames is None else range(frames)
        for _ in ticks:
            self.frame(clock(), update, render)