"""Syntax-highlighted JSON for terminal output."""

from __future__ import annotations

import json

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer


def dump_json(data: object) -> str:
    return json.dumps(data, indent=2) + "\n"


def colorize_json(data: object, style: str = "default") -> str:
    """Return ``data`` as indented JSON with ANSI colors."""
    return highlight(dump_json(data), JsonLexer(), TerminalFormatter(style=style))
