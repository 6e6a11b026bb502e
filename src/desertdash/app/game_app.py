from __future__ import annotations

import logging
import tkinter as tk
from concurrent.futures import Future

from desertdash.app.game_loop import GameLoop
from desertdash.app.session import GameSession, GameStatus
from desertdash.domain.physics import DEFAULT_PHYSICS, PhysicsConfig
from desertdash.infra.level_source import LevelLoad, LevelSource, load_level_in_background
from desertdash.ui.input_mapper import TkInputMapper
from desertdash.ui.tk_canvas_view import TkCanvasView
from desertdash.ui.touch_controls import TouchControls

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(
        self,
        source: LevelSource,
        *,
        physics: PhysicsConfig = DEFAULT_PHYSICS,
        fps: int = 60,
        menu_notice: str | None = None,
    ) -> None:
        self.root = tk.Tk()
        self.root.title("Desert Dash")

        self.source = source
        self.menu_notice = menu_notice

        # One place for content widgets
        self.content = tk.Frame(self.root)
        self.content.pack(fill="both", expand=True)

        self.input = TkInputMapper(self.root)
        self.session = GameSession(physics=physics)

        # Level generation runs off the Tk thread; polled from the loop.
        self._pending: Future[LevelLoad] | None = None

        self.play_view = TkCanvasView(
            self.content,
            width=int(physics.viewport_width),
            height=int(physics.world_bottom),
        )
        self.touch = TouchControls(self.content, on_press=self.input.press, on_release=self.input.release)
        self.touch.pack(side="bottom", fill="x")

        self.root.bind("<Return>", lambda _e: self._start())
        self.root.bind("<Escape>", lambda _e: self._show_menu())
        self.root.bind("<KeyPress-r>", lambda _e: self._restart_same_level())

        self.loop = GameLoop(
            root=self.root,
            render_fn=self._render,
            update_fn=self._update,
            fps=fps,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._show_menu()

    def run(self) -> None:
        self.root.mainloop()

    # ---------- Screen transitions ----------

    def _show_menu(self) -> None:
        if self.session.status is GameStatus.LOADING:
            return
        self.loop.stop()
        self.session.to_menu()
        self.play_view.render_menu(self.menu_notice)

    def _start(self) -> None:
        # Menu or result screen -> fetch a fresh level.
        if self.session.status not in (GameStatus.MENU, GameStatus.GAME_OVER, GameStatus.VICTORY):
            return
        self.session.begin_loading()
        self._pending = load_level_in_background(self.source)
        self.loop.start()

    def _restart_same_level(self) -> None:
        if not self.session.round_over:
            return
        self.session.restart()
        self.loop.start()

    # ---------- Game loop ----------

    def _update(self) -> None:
        status = self.session.status

        if status is GameStatus.LOADING:
            if self._pending is not None and self._pending.done():
                result = self._pending.result()
                self._pending = None
                notice = None
                if result.used_fallback:
                    logger.info("Starting on the fallback level: %s", result.notice)
                    notice = result.notice
                self.session.start_round(result.level, notice=notice)
            return

        if self.session.playing:
            self.session.advance(self.input.sample())

    def _render(self) -> None:
        status = self.session.status

        if status is GameStatus.LOADING:
            self.play_view.render_loading(self.loop.frames)
            return

        state = self.session.state
        if state is None:
            return
        self.play_view.render_game(state, notice=self.session.notice)

        if self.session.round_over:
            self.play_view.render_result(won=self.session.won, score=self.session.final_score)
            # No more frames until the player restarts.
            self.loop.stop()

    def _on_close(self) -> None:
        self.loop.stop()
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.root.destroy()
