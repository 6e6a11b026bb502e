from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_S = 15.0

# First non-empty wins.
_API_KEY_VARS = ("DESERTDASH_API_KEY", "GEMINI_API_KEY", "API_KEY")


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    timeout_s: float = DEFAULT_TIMEOUT_S

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if env is None else env

        api_key = next((env[k] for k in _API_KEY_VARS if env.get(k)), None)

        raw_timeout = env.get("DESERTDASH_TIMEOUT")
        try:
            timeout_s = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_S
        except ValueError as e:
            raise ValueError(f"DESERTDASH_TIMEOUT must be a number, got {raw_timeout!r}") from e
        if timeout_s <= 0:
            raise ValueError("DESERTDASH_TIMEOUT must be > 0")

        return cls(
            api_key=api_key,
            model=env.get("DESERTDASH_MODEL") or DEFAULT_MODEL,
            endpoint=(env.get("DESERTDASH_ENDPOINT") or DEFAULT_ENDPOINT).rstrip("/"),
            timeout_s=timeout_s,
        )
