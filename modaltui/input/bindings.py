"""Per-mode keybinding tables.

A ``KeyBindings`` instance is built once from configuration and never
mutated. Lookups are exact-match only; ``has_prefix`` tells the resolver
whether a partial chord can still complete.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..actions import BaseAction, format_action, parse_action
from ..errors import ConfigError
from ..mode import Mode
from .keys import KeySequence, format_key_sequence, parse_key_sequence

ModeBindings = Mapping[KeySequence, BaseAction]


class KeyBindings:
    """Immutable ``Mode -> (key sequence -> action)`` mapping."""

    def __init__(self, tables: Mapping[Mode, Mapping[KeySequence, BaseAction]]) -> None:
        missing = [mode.value for mode in Mode if mode not in tables]
        if missing:
            raise ConfigError(f"keybindings missing for mode(s): {', '.join(missing)}")
        frozen: dict[Mode, ModeBindings] = {}
        prefixes: dict[Mode, frozenset[KeySequence]] = {}
        for mode in Mode:
            table = dict(tables[mode])
            for keys in table:
                if not keys:
                    raise ConfigError(f"empty key sequence in {mode.value} keybindings")
            frozen[mode] = MappingProxyType(table)
            prefixes[mode] = frozenset(keys[:end] for keys in table for end in range(1, len(keys)))
        self._tables = MappingProxyType(frozen)
        self._prefixes = MappingProxyType(prefixes)

    @classmethod
    def from_config(cls, raw: Mapping[str, object]) -> KeyBindings:
        """Build bindings from ``{mode: [[keys, action], ...]}`` or ``{mode: {keys: action}}``.

        Every entry is validated; the first problem raises ``ConfigError``
        naming the mode and the offending entry.
        """
        if not isinstance(raw, Mapping):
            raise ConfigError("keybindings must be an object keyed by mode name")
        tables: dict[Mode, dict[KeySequence, BaseAction]] = {}
        for mode_name, entries in raw.items():
            mode = Mode.parse(str(mode_name))
            tables[mode] = parse_mode_entries(mode, entries)
        return cls(tables)

    @property
    def modes(self) -> tuple[Mode, ...]:
        return tuple(self._tables)

    def for_mode(self, mode: Mode) -> ModeBindings:
        return self._tables[mode]

    def lookup(self, mode: Mode, keys: KeySequence) -> BaseAction | None:
        """Return the action bound to exactly ``keys`` in ``mode``."""
        table = self._tables.get(mode)
        if table is None:
            return None
        return table.get(tuple(keys))

    def has_prefix(self, mode: Mode, keys: KeySequence) -> bool:
        """Return whether some longer sequence in ``mode`` starts with ``keys``."""
        prefixes = self._prefixes.get(mode)
        return prefixes is not None and tuple(keys) in prefixes

    def iter_bindings(self, mode: Mode) -> Iterator[tuple[KeySequence, BaseAction]]:
        yield from self._tables[mode].items()

    def to_config(self) -> dict[str, list[list[str]]]:
        """Serializable form accepted by ``from_config``."""
        return {
            mode.value: [[format_key_sequence(keys), format_action(action)] for keys, action in table.items()]
            for mode, table in self._tables.items()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyBindings):
            return NotImplemented
        return {mode: dict(table) for mode, table in self._tables.items()} == {
            mode: dict(table) for mode, table in other._tables.items()
        }

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = ", ".join(f"{mode.value}={len(table)}" for mode, table in self._tables.items())
        return f"KeyBindings({counts})"


def _iter_entries(mode: Mode, entries: object) -> Iterator[tuple[object, object]]:
    if isinstance(entries, Mapping):
        yield from entries.items()
        return
    if not isinstance(entries, list):
        raise ConfigError(f"{mode.value} keybindings must be a list of [keys, action] pairs or an object")
    for index, entry in enumerate(entries):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ConfigError(f"{mode.value} keybinding #{index} must be a [keys, action] pair, got {entry!r}")
        yield entry[0], entry[1]


def parse_mode_entries(mode: Mode, entries: object) -> dict[KeySequence, BaseAction]:
    """Parse one mode's entries, rejecting conflicting duplicate sequences."""
    table: dict[KeySequence, BaseAction] = {}
    for raw_keys, raw_action in _iter_entries(mode, entries):
        try:
            keys = parse_key_sequence(raw_keys)  # type: ignore[arg-type]
            action = parse_action(raw_action)  # type: ignore[arg-type]
        except ConfigError as exc:
            raise type(exc)(f"{mode.value} keybinding {raw_keys!r} -> {raw_action!r}: {exc}") from None
        existing = table.get(keys)
        if existing is not None and existing != action:
            raise ConfigError(
                f"{mode.value} keybinding {raw_keys!r} bound to both "
                f"{format_action(existing)} and {format_action(action)}"
            )
        table[keys] = action
    return table


__all__ = ["KeyBindings", "ModeBindings", "parse_mode_entries"]
