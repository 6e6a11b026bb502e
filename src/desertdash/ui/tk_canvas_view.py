from __future__ import annotations

import math
import tkinter as tk

from desertdash.domain.game_objects import ObjectKind
from desertdash.domain.game_state import WorldState

_FONT = ("TkDefaultFont", 14)
_TITLE_FONT = ("TkDefaultFont", 28, "bold")

# Parked (stomped) enemies are below this and are not drawn.
_DRAW_LIMIT_Y = 2000.0

_FILL = {
    ObjectKind.PLATFORM: "#654321",
    ObjectKind.PLAYER: "#3b82f6",
    ObjectKind.ENEMY: "#ef4444",
    ObjectKind.COIN: "#eab308",
    ObjectKind.FLAG: "#10b981",
}


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self._w = width
        self._h = height

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="#0f172a")
        self.canvas.pack(fill="both", expand=True)

    # ---------- Screens ----------

    def render_menu(self, notice: str | None) -> None:
        c = self.canvas
        c.delete("all")
        c.configure(bg="#1e293b")
        c.create_text(self._w / 2, self._h / 2 - 80, text="Desert Dash", fill="white", font=_TITLE_FONT)
        c.create_text(
            self._w / 2,
            self._h / 2 - 30,
            text="Jump, dodge enemies and grab the gold!",
            fill="#94a3b8",
            font=_FONT,
        )
        if notice:
            c.create_text(self._w / 2, self._h / 2 + 10, text=notice, fill="#fde68a", font=_FONT)
        c.create_text(
            self._w / 2,
            self._h / 2 + 60,
            text="Press Enter to start  |  Arrows / WASD / Space to move",
            fill="white",
            font=_FONT,
        )

    def render_loading(self, frame: int) -> None:
        c = self.canvas
        c.delete("all")
        c.configure(bg="#0f172a")
        dots = "." * (1 + (frame // 20) % 3)
        c.create_text(self._w / 2, self._h / 2, text=f"Building the world{dots}", fill="white", font=_TITLE_FONT)

    def render_result(self, *, won: bool, score: int) -> None:
        c = self.canvas
        c.create_rectangle(0, 0, self._w, self._h, fill="black", stipple="gray50", outline="")
        title = "Victory!" if won else "Game over"
        color = "#facc15" if won else "#ef4444"
        c.create_text(self._w / 2, self._h / 2 - 50, text=title, fill=color, font=_TITLE_FONT)
        c.create_text(self._w / 2, self._h / 2, text=f"Final score: {score}", fill="white", font=_FONT)
        c.create_text(
            self._w / 2,
            self._h / 2 + 40,
            text="Enter = play again   Esc = menu",
            fill="#cbd5e1",
            font=_FONT,
        )

    # ---------- Gameplay ----------

    def render_game(self, state: WorldState, *, notice: str | None = None) -> None:
        c = self.canvas
        c.delete("all")
        c.configure(bg=state.theme_color)

        cam = math.floor(state.camera_x)

        for p in state.platforms:
            c.create_rectangle(p.x - cam, p.y, p.right - cam, p.bottom, fill=_FILL[p.kind], outline="")
            # Grass top
            c.create_rectangle(p.x - cam, p.y, p.right - cam, p.y + 5, fill="#22c55e", outline="")

        for e in state.enemies:
            if e.neutralized or e.y >= _DRAW_LIMIT_Y:
                continue
            x = e.x - cam
            c.create_rectangle(x, e.y, x + e.w, e.bottom, fill=_FILL[e.kind], outline="")
            c.create_rectangle(x + 5, e.y + 5, x + 13, e.y + 13, fill="white", outline="")
            c.create_rectangle(x + 18, e.y + 5, x + 26, e.y + 13, fill="white", outline="")

        for coin in state.coins:
            if coin.collected:
                continue
            x = coin.x - cam
            c.create_oval(x, coin.y, x + coin.w, coin.bottom, fill=_FILL[coin.kind], outline="#fef08a", width=2)

        f = state.flag
        fx = f.x - cam
        c.create_rectangle(fx, f.y, fx + 5, f.bottom, fill="white", outline="")
        c.create_polygon(fx + 5, f.y, fx + 40, f.y + 20, fx + 5, f.y + 40, fill=_FILL[f.kind], outline="")

        pl = state.player
        px = pl.x - cam
        c.create_rectangle(px, pl.y, px + pl.w, pl.bottom, fill=_FILL[pl.kind], outline="")
        # Hat
        c.create_rectangle(px - 2, pl.y - 5, px + pl.w + 2, pl.y + 5, fill="#ef4444", outline="")

        c.create_text(20, 20, anchor="nw", text=f"Score: {state.score}", fill="black", font=_TITLE_FONT)
        if notice:
            c.create_text(20, 60, anchor="nw", text=notice, fill="black", font=_FONT)
