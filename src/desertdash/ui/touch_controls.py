from __future__ import annotations

import tkinter as tk
from collections.abc import Callable


class TouchControls(tk.Frame):
    """On-screen left/right/jump buttons. Held while the pointer is down."""

    def __init__(
        self,
        master: tk.Misc,
        *,
        on_press: Callable[[str], None],
        on_release: Callable[[str], None],
    ) -> None:
        super().__init__(master, bg="#111827")

        left_group = tk.Frame(self, bg="#111827")
        left_group.pack(side="left", padx=8, pady=8)
        self._button(left_group, "◀", "left", on_press, on_release).pack(side="left", padx=4)
        self._button(left_group, "▶", "right", on_press, on_release).pack(side="left", padx=4)

        self._button(self, "▲", "jump", on_press, on_release, bg="#ef4444").pack(side="right", padx=12, pady=8)

    def _button(
        self,
        master: tk.Misc,
        text: str,
        control: str,
        on_press: Callable[[str], None],
        on_release: Callable[[str], None],
        *,
        bg: str = "#374151",
    ) -> tk.Label:
        # Labels rather than Buttons: tk.Button fires on release only.
        btn = tk.Label(master, text=text, width=4, height=2, bg=bg, fg="white", font=("TkDefaultFont", 16, "bold"))
        btn.bind("<ButtonPress-1>", lambda _e: on_press(control))
        btn.bind("<ButtonRelease-1>", lambda _e: on_release(control))
        btn.bind("<Leave>", lambda _e: on_release(control))
        return btn
