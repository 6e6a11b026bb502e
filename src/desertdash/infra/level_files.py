from __future__ import annotations

import json
from pathlib import Path

from desertdash.domain.level import LevelData
from desertdash.infra.exceptions import LevelDecodeError
from desertdash.infra.level_codec import decode_generated_level


def load_level_from_path(path: Path) -> LevelData:
    try:
        data = path.read_text(encoding="utf-8")
        obj = json.loads(data)
        return decode_generated_level(obj)
    except LevelDecodeError:
        raise
    except Exception as e:
        raise LevelDecodeError(f"Failed to load level from {path}: {e}") from e
