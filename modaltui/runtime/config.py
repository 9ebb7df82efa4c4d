"""JSON configuration: keybindings and loop timing.

The config file lives in the platform config directory and is optional;
built-in defaults cover every mode. Unlike preference files, a config that
exists but is malformed is a startup error, never silently ignored.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..actions import BaseAction
from ..errors import ConfigError
from ..input.bindings import KeyBindings, parse_mode_entries
from ..input.keys import KeySequence
from ..input.resolver import ChordPolicy
from ..mode import Mode
from ..render.theme import available_theme_names, normalize_theme_name

APP_NAME = "modaltui"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "MODALTUI_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_TICK_RATE = 4.0
DEFAULT_FRAME_RATE = 30.0
DEFAULT_PROCESSING_DELAY = 1.0

_COMMON_BINDINGS: list[list[str]] = [
    ["<q>", "Engine.Quit"],
    ["<ctrl-c>", "Engine.Quit"],
    ["<ctrl-d>", "Engine.Quit"],
    ["<ctrl-z>", "Engine.Suspend"],
    ["<?>", "Engine.ToggleShowHelp"],
    ["<m>", "Engine.ToggleShowModeSwitcher"],
    ["<up>", "Home.NavigateList(Up)"],
    ["<down>", "Home.NavigateList(Down)"],
]

DEFAULT_KEYBINDINGS: dict[str, list[list[str]]] = {
    Mode.MainMenu.value: _COMMON_BINDINGS
    + [
        ["<h>", "Home.NavigateList(Left)"],
        ["<left>", "Home.NavigateList(Left)"],
        ["<l>", "Home.NavigateList(Right)"],
        ["<right>", "Home.NavigateList(Right)"],
        ["<enter>", "Engine.ChangeMode(Home)"],
        ["<g><h>", "Engine.ChangeMode(Home)"],
    ],
    Mode.Home.value: _COMMON_BINDINGS
    + [
        ["<j>", "Home.ScheduleIncrement"],
        ["<k>", "Home.ScheduleDecrement"],
        ["<J>", "Home.Increment(1)"],
        ["<K>", "Home.Decrement(1)"],
        ["</>", "Home.EnterInsert"],
        ["<h>", "Home.NavigateList(Left)"],
        ["<l>", "Home.NavigateList(Right)"],
        ["<g><g>", "Home.EnterNormal"],
        ["<g><m>", "Engine.ChangeMode(MainMenu)"],
        ["<esc>", "Engine.ChangeMode(MainMenu)"],
    ],
    # Free-text entry: Home captures raw keys, so only chords that cannot be
    # typed as text are bound here.
    Mode.Insert.value: [
        ["<ctrl-c>", "Engine.Quit"],
        ["<ctrl-z>", "Engine.Suspend"],
    ],
}


@dataclass(frozen=True)
class Config:
    """Resolved, validated runtime configuration."""

    keybindings: KeyBindings = field(default_factory=lambda: KeyBindings.from_config(DEFAULT_KEYBINDINGS))
    tick_rate: float = DEFAULT_TICK_RATE
    frame_rate: float = DEFAULT_FRAME_RATE
    chord_policy: ChordPolicy = ChordPolicy.DISCARD_OLDEST
    redraw_on_resize: bool = True
    processing_delay: float = DEFAULT_PROCESSING_DELAY
    theme: str = "default"
    no_color: bool = False
    source: Path | None = None


def resolve_config_path(path: Path | str | None = None) -> Path:
    """Pick the config file: explicit path, then ``$MODALTUI_CONFIG``, then default."""
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return CONFIG_PATH


def load_config_data(path: Path) -> dict[str, object]:
    """Read the JSON object at ``path``; a missing file yields ``{}``."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"malformed JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must contain a JSON object, got {type(data).__name__}")
    return data


def merge_keybindings(user: object) -> KeyBindings:
    """Overlay user keybindings on the defaults, per mode and per sequence."""
    tables: dict[Mode, dict[KeySequence, BaseAction]] = {
        Mode.parse(mode_name): dict(parse_mode_entries(Mode.parse(mode_name), entries))
        for mode_name, entries in DEFAULT_KEYBINDINGS.items()
    }
    if user is None:
        return KeyBindings(tables)
    if not isinstance(user, Mapping):
        raise ConfigError("'keybindings' must be an object keyed by mode name")
    for mode_name, entries in user.items():
        mode = Mode.parse(str(mode_name))
        tables[mode].update(parse_mode_entries(mode, entries))
    return KeyBindings(tables)


def _positive_float(data: Mapping[str, object], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"'{key}' must be a positive number, got {value!r}")
    return float(value)


def _non_negative_float(data: Mapping[str, object], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ConfigError(f"'{key}' must be a non-negative number, got {value!r}")
    return float(value)


def _bool(data: Mapping[str, object], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}")
    return value


def _chord_policy(data: Mapping[str, object]) -> ChordPolicy:
    value = data.get("chord_policy", ChordPolicy.DISCARD_OLDEST.value)
    try:
        return ChordPolicy(value)
    except ValueError:
        known = ", ".join(policy.value for policy in ChordPolicy)
        raise ConfigError(f"'chord_policy' must be one of {known}, got {value!r}") from None


def _theme(data: Mapping[str, object]) -> str:
    value = data.get("theme", "default")
    if not isinstance(value, str) or value.strip().lower() not in available_theme_names():
        known = ", ".join(available_theme_names())
        raise ConfigError(f"'theme' must be one of {known}, got {value!r}")
    return normalize_theme_name(value)


def config_from_data(data: Mapping[str, object], source: Path | None = None) -> Config:
    """Validate a decoded config object into a ``Config``."""
    return Config(
        keybindings=merge_keybindings(data.get("keybindings")),
        tick_rate=_positive_float(data, "tick_rate", DEFAULT_TICK_RATE),
        frame_rate=_positive_float(data, "frame_rate", DEFAULT_FRAME_RATE),
        chord_policy=_chord_policy(data),
        redraw_on_resize=_bool(data, "redraw_on_resize", True),
        processing_delay=_non_negative_float(data, "processing_delay", DEFAULT_PROCESSING_DELAY),
        theme=_theme(data),
        source=source,
    )


def load_config(path: Path | str | None = None) -> Config:
    """Load, merge, and validate configuration.

    Raises ``ConfigError`` with the file path and offending entry on any
    problem; the dispatch loop never starts with a half-valid config.
    """
    config_path = resolve_config_path(path)
    data = load_config_data(config_path)
    try:
        return config_from_data(data, source=config_path if data else None)
    except ConfigError as exc:
        raise type(exc)(f"{config_path}: {exc}") from None


__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_KEYBINDINGS",
    "Config",
    "config_from_data",
    "load_config",
    "load_config_data",
    "merge_keybindings",
    "resolve_config_path",
]
