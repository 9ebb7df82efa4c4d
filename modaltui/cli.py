"""Command-line front door for modaltui.

Parses CLI options, loads and validates configuration, and sets up logging.
Then dispatches into the interactive dispatch loop.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from .errors import ChannelError, ConfigError
from .highlight import colorize_json, dump_json
from .logging_config import setup_logging
from .render.theme import available_theme_names
from .runtime import App, load_config

logger = logging.getLogger(__name__)


def _positive_float(value: str) -> float:
    """argparse type for positive rates."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modaltui",
        description="Modal terminal UI with chorded, mode-scoped keybindings.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to the JSON config file.")
    parser.add_argument("--tick-rate", type=_positive_float, default=None, help="Ticks per second.")
    parser.add_argument("--frame-rate", type=_positive_float, default=None, help="Frames per second.")
    parser.add_argument(
        "--theme",
        default=None,
        choices=available_theme_names(),
        help="UI theme name.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO or $MODALTUI_LOG_LEVEL).")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs here instead of the default.")
    parser.add_argument(
        "--print-keybindings",
        action="store_true",
        help="Print the resolved keybindings as JSON and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the application until it quits.

    Configuration problems exit with a message before the terminal is
    touched; a dead action bus exits with a non-zero status after teardown.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        raise SystemExit(f"modaltui: {exc}") from None

    overrides: dict[str, object] = {}
    if args.tick_rate is not None:
        overrides["tick_rate"] = args.tick_rate
    if args.frame_rate is not None:
        overrides["frame_rate"] = args.frame_rate
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.no_color:
        overrides["no_color"] = True
    if overrides:
        config = replace(config, **overrides)

    if args.print_keybindings:
        data = config.keybindings.to_config()
        if not args.no_color and sys.stdout.isatty():
            sys.stdout.write(colorize_json(data))
        else:
            sys.stdout.write(dump_json(data))
        return

    if not os.isatty(sys.stdin.fileno()):
        raise SystemExit("modaltui: stdin is not a terminal")

    try:
        log_path = setup_logging(args.log_level, args.log_file)
    except ValueError as exc:
        raise SystemExit(f"modaltui: {exc}") from None
    logger.info("Starting modaltui (config: %s, log: %s)", config.source or "defaults", log_path)

    app = App(config)
    try:
        app.run()
    except ConfigError as exc:
        logger.error("Startup failed: %s", exc)
        raise SystemExit(f"modaltui: {exc}") from None
    except ChannelError as exc:
        logger.exception("Dispatch loop stopped")
        raise SystemExit(f"modaltui: {exc}") from None


if __name__ == "__main__":
    main()
