from __future__ import annotations
import tkinter as tk
from desertdash.app.controls import ControlState
from desertdash.domain.input_state import InputState


class TkInputMapper:
    def __init__(self, root: tk.Tk, controls: ControlState | None = None) -> None:
        self.controls = controls or ControlState()

        root.bind("<KeyPress>", self._on_key_down)
        root.bind("<KeyRelease>", self._on_key_up)
        root.bind("<FocusOut>", self._on_focus_out)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key_down(self, evt: tk.Event) -> None:
        self.controls.key_down(evt.keysym)

    def _on_key_up(self, evt: tk.Event) -> None:
        self.controls.key_up(evt.keysym)

    def _on_focus_out(self, _evt: tk.Event) -> None:
        self.controls.release_all()

    def press(self, control: str) -> None:
        self.controls.press(control)

    def release(self, control: str) -> None:
        self.controls.release(control)

    def sample(self) -> InputState:
        # Held semantics: nothing is consumed.
        return self.controls.sample()
