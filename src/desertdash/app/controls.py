from __future__ import annotations

from desertdash.domain.input_state import InputState


CONTROLS = ("left", "right", "jump")

# Tk keysyms -> named control. Letters are stored lowercase: Shift changes
# the reported keysym between press and release.
DEFAULT_KEYMAP: dict[str, str] = {
    "Left": "left",
    "a": "left",
    "Right": "right",
    "d": "right",
    "Up": "jump",
    "w": "jump",
    "space": "jump",
}


class ControlState:
    """
    Held-state table for keys and on-screen buttons.

    A control is held while any key bound to it or its on-screen button is
    down. Sampling never consumes anything: the simulation sees held state.
    """

    def __init__(self, keymap: dict[str, str] | None = None) -> None:
        source = DEFAULT_KEYMAP if keymap is None else keymap
        self._keymap = {_normalize(k): v for k, v in source.items()}
        self._keys_down: set[str] = set()
        self._buttons_down: set[str] = set()

    def key_down(self, keysym: str) -> None:
        keysym = _normalize(keysym)
        if keysym in self._keymap:
            self._keys_down.add(keysym)

    def key_up(self, keysym: str) -> None:
        self._keys_down.discard(_normalize(keysym))

    def press(self, control: str) -> None:
        if control not in CONTROLS:
            raise ValueError(f"unknown control {control!r}")
        self._buttons_down.add(control)

    def release(self, control: str) -> None:
        self._buttons_down.discard(control)

    def release_all(self) -> None:
        # Focus loss: key-up events may never arrive.
        self._keys_down.clear()
        self._buttons_down.clear()

    def is_held(self, control: str) -> bool:
        if control in self._buttons_down:
            return True
        return any(self._keymap[k] == control for k in self._keys_down)

    def sample(self) -> InputState:
        return InputState(
            left=self.is_held("left"),
            right=self.is_held("right"),
            jump=self.is_held("jump"),
        )


def _normalize(keysym: str) -> str:
    return keysym.lower() if len(keysym) == 1 else keysym
