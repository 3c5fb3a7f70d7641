import pytest

from scenekit.game_loop import GameLoop
from scenekit.resources import GameTiming


class Recorder:
    def __init__(self):
        self.calls = 0

    def __call__(self, world):
        self.calls += 1


def make_loop(updates_per_second=4):
    loop = GameLoop()
    loop.world.resource(GameTiming).updates_per_second = updates_per_second
    return loop


def run_frames(times, update=None):
    loop = make_loop()
    update = update or Recorder()
    render = Recorder()
    for time in times:
        loop.frame(time, update, render)
    return loop.world.resource(GameTiming), update, render


def test_new_loop_has_default_timing():
    timing = GameLoop().world.resource(GameTiming)
    assert (timing.updates_per_second, timing.pause_updates_after) == (60, 1.0)


def test_before_passes_the_world():
    loop = GameLoop()
    seen = []
    loop.before(seen.append)
    assert seen == [loop.world]


@pytest.mark.parametrize("times, updates", [
    ([10.0], 0),  # the first frame only renders
    ([0.0, 0.75], 3),  # one update per fixed step
    ([0.0, 100.0], 4),  # long pauses are clamped
])
def test_updates_and_renders_per_frame(times, updates):
    _, update, render = run_frames(times)
    assert (update.calls, render.calls) == (updates, len(times))


def test_leftover_time_carries_over():
    timing, update, _ = run_frames([0.0, 0.3])
    assert update.calls == 1
    assert 0.0 <= timing.time_since_update < timing.fixed_update_time()


def test_run_calls_render_once_per_frame():
    loop = make_loop()
    times = iter([0.0, 0.25, 0.5, 0.75])
    update, render = Recorder(), Recorder()
    loop.run(update, render, clock=lambda: next(times), frames=3)
    assert render.calls == 3
    assert update.calls == render.calls


def test_updates_see_timing_changes():
    def slow_down(world):
        world.resource(GameTiming).updates_per_second = 1

    timing, _, _ = run_frames([0.0, 0.5], update=slow_down)
    assert timing.updates_per_second == 1
    assert timing.time_since_update < 0.0