from __future__ import annotations

import pytest

from desertdash.app.game_loop import GameLoop


class FakeScheduler:
    def __init__(self) -> None:
        self.pending: dict[int, tuple[int, object]] = {}
        self.cancelled: list[int] = []
        self._next_id = 0

    def after(self, ms, func):
        self._next_id += 1
        self.pending[self._next_id] = (ms, func)
        return self._next_id

    def after_cancel(self, id):
        self.cancelled.append(id)
        self.pending.pop(id, None)

    def run_next(self) -> None:
        id_ = min(self.pending)
        _, func = self.pending.pop(id_)
        func()


def _loop(root, calls, **kw):
    return GameLoop(
        root=root,
        update_fn=lambda: calls.append("update"),
        render_fn=lambda: calls.append("render"),
        **kw,
    )


def test_tick_runs_update_then_render():
    root, calls = FakeScheduler(), []
    loop = _loop(root, calls)

    loop.start()
    root.run_next()
    root.run_next()

    assert calls == ["update", "render", "update", "render"]
    assert loop.frames == 2
    assert len(root.pending) == 1


def test_frame_interval_from_fps():
    root = FakeScheduler()
    _loop(root, [], fps=50).start()
    ((ms, _),) = root.pending.values()
    assert ms == 20


def test_start_twice_schedules_once():
    root = FakeScheduler()
    loop = _loop(root, [])
    loop.start()
    loop.start()
    assert len(root.pending) == 1


def test_stop_cancels_pending_tick():
    root, calls = FakeScheduler(), []
    loop = _loop(root, calls)
    loop.start()

    loop.stop()

    assert root.pending == {}
    assert root.cancelled == [1]
    assert not loop.running
    assert calls == []


def test_stop_from_inside_update_ends_loop():
    root = FakeScheduler()
    calls: list[str] = []

    def update():
        calls.append("update")
        loop.stop()

    loop = GameLoop(root=root, update_fn=update, render_fn=lambda: calls.append("render"))
    loop.start()
    root.run_next()

    assert calls == ["update", "render"]
    assert root.pending == {}


def test_exception_stops_and_propagates():
    root = FakeScheduler()

    def update():
        raise RuntimeError("boom")

    loop = GameLoop(root=root, update_fn=update, render_fn=lambda: None)
    loop.start()

    with pytest.raises(RuntimeError):
        root.run_next()

    assert not loop.running
    assert root.pending == {}
