from __future__ import annotations

import json
import logging
import random
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import requests

from desertdash.domain.level import FALLBACK_LEVEL, GENERATED_LENGTH, GROUND_Y, LevelData, generate_level
from desertdash.domain.rng import RandomSource
from desertdash.infra.exceptions import LevelDecodeError, LevelSourceError, MissingCredentialsError
from desertdash.infra.level_codec import WIRE_SCHEMA, decode_generated_level
from desertdash.infra.level_files import load_level_from_path
from desertdash.infra.settings import Settings

logger = logging.getLogger(__name__)


class LevelSource(Protocol):
    name: str

    def fetch(self) -> LevelData:
        """Produce a level or raise LevelSourceError / LevelDecodeError."""
        ...


_PROMPT = f"""Generate a JSON for a 2D platformer level.
The level is {GENERATED_LENGTH:.0f} units long.
Ground level is at y={GROUND_Y:.0f}.
Include:
1. 'platforms': array of objects {{x, y, width}}. Height is always 20. Make sure they are reachable by jumping.
2. 'enemies': array of objects {{x, y}}. They are 30x30 size.
3. 'coins': array of objects {{x, y}}.
4. 'themeHue': a hex color string for the sky background.

Output MUST be valid JSON matching this schema."""


class GeminiLevelSource:
    """Asks the Gemini generateContent REST endpoint for a level."""

    name = "gemini"

    def __init__(self, settings: Settings, *, session: requests.Session | None = None) -> None:
        self._settings = settings
        self._session = session or requests.Session()

    def fetch(self) -> LevelData:
        if not self._settings.has_api_key:
            raise MissingCredentialsError("No API key configured for level generation.")

        url = f"{self._settings.endpoint}/models/{self._settings.model}:generateContent"
        body = {
            "contents": [{"parts": [{"text": _PROMPT}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": WIRE_SCHEMA,
            },
        }

        try:
            resp = self._session.post(
                url,
                json=body,
                headers={"x-goog-api-key": self._settings.api_key or ""},
                timeout=self._settings.timeout_s,
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            raise LevelSourceError(f"Level generation request failed: {e}") from e
        except ValueError as e:
            raise LevelSourceError(f"Level generation returned non-JSON response: {e}") from e

        text = _response_text(payload)
        try:
            obj = json.loads(text or "{}")
        except ValueError as e:
            raise LevelDecodeError(f"Generated level is not valid JSON: {e}") from e

        return decode_generated_level(obj)


def _response_text(payload: Any) -> str:
    try:
        parts = payload["candidates"][0]["content"]["parts"]
        return "".join(str(p.get("text", "")) for p in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise LevelSourceError(f"Unexpected generateContent response shape: {e}") from e


class FileLevelSource:
    name = "file"

    def __init__(self, path: Path) -> None:
        self._path = path

    def fetch(self) -> LevelData:
        return load_level_from_path(self._path)


class RandomLevelSource:
    name = "random"

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng or random.Random()

    def fetch(self) -> LevelData:
        return generate_level(self._rng)


class FallbackLevelSource:
    name = "fallback"

    def fetch(self) -> LevelData:
        return FALLBACK_LEVEL


@dataclass(frozen=True)
class LevelLoad:
    level: LevelData
    used_fallback: bool
    notice: str | None = None  # advisory text for the player, never an error


def load_level(source: LevelSource, *, fallback: LevelData = FALLBACK_LEVEL) -> LevelLoad:
    """
    Fetch a level, substituting the fallback on any source failure.
    Never raises for source errors: generation must not block a round.
    """
    try:
        level = source.fetch()
    except MissingCredentialsError as e:
        logger.warning("%s; using fallback level.", e)
        return LevelLoad(level=fallback, used_fallback=True, notice="No API key found: playing the default level.")
    except (LevelSourceError, LevelDecodeError) as e:
        logger.error("Level source %r failed: %s", source.name, e)
        return LevelLoad(level=fallback, used_fallback=True, notice="Level generation failed: playing the default level.")

    logger.info(
        "Loaded level from %r: %d platforms, %d enemies, %d coins",
        source.name,
        len(level.platforms),
        len(level.enemies),
        len(level.coins),
    )
    return LevelLoad(level=level, used_fallback=False)


def load_level_in_background(source: LevelSource) -> Future[LevelLoad]:
    """
    Run load_level on a daemon thread. A request still in flight when the
    window closes does not keep the process alive until its timeout.
    """
    future: Future[LevelLoad] = Future()

    def _work() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(load_level(source))
        except Exception as e:
            future.set_exception(e)

    threading.Thread(target=_work, name=f"level-source-{source.name}", daemon=True).start()
    return future
