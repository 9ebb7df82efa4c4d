"""Textual encoding of actions for logs and keybinding config.

Grammar: ``Family.Variant`` or ``Family.Variant(args)``. Integer and enum
arguments are comma separated; text arguments (``Error``, ``CompleteInput``)
take everything between the first ``(`` and the final ``)`` verbatim.
"""

from __future__ import annotations

from collections.abc import Callable

from ..errors import ActionParseError, ConfigError, UnknownActionFamily
from ..mode import Mode
from .base import BaseAction
from .engine import ENGINE_ACTIONS, EngineAction
from .home import HOME_ACTIONS, HomeAction, ListNavDirection

ACTION_FAMILIES: dict[str, dict[str, type[BaseAction]]] = {
    EngineAction.FAMILY: {cls.__name__: cls for cls in ENGINE_ACTIONS},
    HomeAction.FAMILY: {cls.__name__: cls for cls in HOME_ACTIONS},
}


def _parse_uint(raw: str) -> int:
    value = raw.strip()
    if not value.isascii() or not value.isdigit():
        raise ValueError(f"expected a non-negative integer, got {raw.strip()!r}")
    return int(value)


def _parse_direction(raw: str) -> ListNavDirection:
    value = raw.strip()
    try:
        return ListNavDirection(value)
    except ValueError:
        known = ", ".join(direction.value for direction in ListNavDirection)
        raise ValueError(f"unknown list navigation direction {value!r} (expected one of: {known})") from None


def _parse_mode(raw: str) -> Mode:
    try:
        return Mode.parse(raw)
    except ConfigError as exc:
        raise ValueError(str(exc)) from None


_ARG_PARSERS: dict[str, Callable[[str], object]] = {
    "uint": _parse_uint,
    "direction": _parse_direction,
    "mode": _parse_mode,
}


def format_action(action: BaseAction) -> str:
    """Return the textual form, e.g. ``Engine.Resize(80, 24)``."""
    head = f"{action.FAMILY}.{action.name}"
    if not action.ARGS:
        return head
    return f"{head}({', '.join(str(value) for value in action.arguments())})"


def _split_call(text: str, rest: str) -> tuple[str, str | None]:
    open_idx = rest.find("(")
    if open_idx == -1:
        if ")" in rest:
            raise ActionParseError(f"unbalanced parenthesis in action {text!r}")
        return rest, None
    if not rest.endswith(")"):
        raise ActionParseError(f"missing closing parenthesis in action {text!r}")
    return rest[:open_idx], rest[open_idx + 1 : -1]


def parse_action(text: str) -> BaseAction:
    """Decode ``text`` into an action.

    Raises ``UnknownActionFamily`` when the ``Family.`` prefix is missing or
    unknown and ``ActionParseError`` for any other malformed input.
    """
    if not isinstance(text, str):
        raise ActionParseError(f"action must be a string, got {type(text).__name__}")
    stripped = text.strip()
    family_name, dot, rest = stripped.partition(".")
    family = ACTION_FAMILIES.get(family_name) if dot else None
    if family is None:
        known = ", ".join(ACTION_FAMILIES)
        raise UnknownActionFamily(f"unknown action family in {text!r} (expected one of: {known})")

    variant_name, raw_args = _split_call(text, rest)
    cls = family.get(variant_name)
    if cls is None:
        raise ActionParseError(f"unknown {family_name} action {variant_name!r} in {text!r}")

    kinds = cls.ARGS
    if not kinds:
        if raw_args is not None:
            raise ActionParseError(f"{family_name}.{variant_name} takes no arguments: {text!r}")
        return cls()
    if raw_args is None:
        raise ActionParseError(f"{family_name}.{variant_name} expects {len(kinds)} argument(s): {text!r}")

    if kinds == ("text",):
        return cls(raw_args)

    parts = raw_args.split(",")
    if len(parts) != len(kinds):
        raise ActionParseError(
            f"{family_name}.{variant_name} expects {len(kinds)} argument(s), got {len(parts)}: {text!r}"
        )
    values: list[object] = []
    for kind, part in zip(kinds, parts):
        try:
            values.append(_ARG_PARSERS[kind](part))
        except ValueError as exc:
            raise ActionParseError(f"invalid argument for {family_name}.{variant_name} in {text!r}: {exc}") from None
    return cls(*values)
