from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from desertdash.infra.level_source import (
    FallbackLevelSource,
    FileLevelSource,
    GeminiLevelSource,
    LevelSource,
    RandomLevelSource,
)
from desertdash.infra.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="desertdash", description="Side-scrolling platformer")
    parser.add_argument(
        "--source",
        choices=("gemini", "file", "random", "fallback"),
        default="gemini",
        help="where levels come from (default: gemini, falls back to the built-in level)",
    )
    parser.add_argument("--level", type=Path, help="level JSON for --source file")
    parser.add_argument("--seed", type=int, help="seed for --source random")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser


def build_source(args: argparse.Namespace, settings: Settings) -> LevelSource:
    if args.source == "file":
        if args.level is None:
            raise SystemExit("--source file requires --level PATH")
        return FileLevelSource(args.level)
    if args.source == "random":
        return RandomLevelSource(random.Random(args.seed))
    if args.source == "fallback":
        return FallbackLevelSource()
    return GeminiLevelSource(settings)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    source = build_source(args, settings)

    notice = None
    if args.source == "gemini" and not settings.has_api_key:
        notice = "No API key found: the default level will be used instead of a generated one."

    # Tk is only needed for the window itself.
    from desertdash.app.game_app import GameApp

    GameApp(source, fps=args.fps, menu_notice=notice).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
