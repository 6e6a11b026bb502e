from __future__ import annotations

import re
from typing import Any

from desertdash.domain.game_objects import PLATFORM_THICKNESS, Platform, new_coin, new_enemy
from desertdash.domain.level import DEFAULT_THEME_COLOR, LevelData, end_flag, ground_platform
from desertdash.infra.exceptions import LevelDecodeError


_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# JSON schema sent to the generator; mirrors what decode_generated_level accepts.
WIRE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "platforms": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "x": {"type": "NUMBER"},
                    "y": {"type": "NUMBER"},
                    "width": {"type": "NUMBER"},
                },
            },
        },
        "enemies": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {"x": {"type": "NUMBER"}, "y": {"type": "NUMBER"}},
            },
        },
        "coins": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {"x": {"type": "NUMBER"}, "y": {"type": "NUMBER"}},
            },
        },
        "themeHue": {"type": "STRING"},
    },
}


def decode_generated_level(obj: Any) -> LevelData:
    """
    Build a level from the generator's wire shape:
    { platforms: [{x, y, width}], enemies: [{x, y}], coins: [{x, y}], themeHue }

    A full-width ground is always prepended and the flag always placed near
    the far end, whatever the generator returned.
    """
    try:
        if not isinstance(obj, dict):
            raise LevelDecodeError("level must be a JSON object.")

        raw_platforms = _list_field(obj, "platforms")
        raw_enemies = _list_field(obj, "enemies")
        raw_coins = _list_field(obj, "coins")

        platforms = [ground_platform()]
        for i, rp in enumerate(raw_platforms):
            x, y = _xy(rp, f"platforms[{i}]")
            width = _number(rp, "width", f"platforms[{i}]")
            if width <= 0:
                raise LevelDecodeError(f"platforms[{i}].width must be > 0.")
            platforms.append(Platform(x=x, y=y, w=width, h=PLATFORM_THICKNESS))

        enemies = [new_enemy(*_xy(re, f"enemies[{i}]")) for i, re in enumerate(raw_enemies)]
        coins = [new_coin(*_xy(rc, f"coins[{i}]")) for i, rc in enumerate(raw_coins)]

        theme = obj.get("themeHue")
        if theme is not None and not isinstance(theme, str):
            raise LevelDecodeError("themeHue must be a string.")

        return LevelData(
            platforms=tuple(platforms),
            enemies=tuple(enemies),
            coins=tuple(coins),
            flag=end_flag(),
            theme_color=theme if theme and _HEX_COLOR.fullmatch(theme) else DEFAULT_THEME_COLOR,
        )
    except LevelDecodeError:
        raise
    except Exception as e:
        raise LevelDecodeError(f"Failed to decode level: {e}") from e


def _list_field(obj: dict, key: str) -> list:
    value = obj.get(key)
    if not isinstance(value, list):
        raise LevelDecodeError(f"{key} must be a list.")
    return value


def _xy(item: Any, where: str) -> tuple[float, float]:
    if not isinstance(item, dict):
        raise LevelDecodeError(f"{where} must be an object.")
    return _number(item, "x", where), _number(item, "y", where)


def _number(item: dict, key: str, where: str) -> float:
    value = item.get(key)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LevelDecodeError(f"{where}.{key} must be a number.")
    return float(value)
