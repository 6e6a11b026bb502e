from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    # The subset of tk.Misc the loop needs.
    def after(self, ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


class GameLoop:
    """
    Fixed-rate frame driver: every tick runs update then render, synchronously.
    Frames never overlap; stop() drops the pending tick.
    """

    def __init__(
        self,
        *,
        root: Scheduler,
        update_fn: Callable[[], None],
        render_fn: Callable[[], None],
        fps: int = 60,
    ) -> None:
        self._root = root
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))

        self._running = False
        self._after_id: Any = None
        self.frames = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            self._root.after_cancel(self._after_id)
            self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        try:
            self._update_fn()
            self._render_fn()
        except Exception:
            # Fail fast rather than keep drawing a corrupt state.
            logger.exception("frame %d failed; stopping game loop", self.frames)
            self.stop()
            raise

        self.frames += 1
        if self._running:
            self._schedule_next()
