"""modaltui: a modal terminal UI runtime with chorded keybindings.

Only ``main`` is exported here; the runtime lives in the subpackages.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the CLI; imported on first call so ``import modaltui`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
