"""Key descriptors used in keybinding config.

Config writes key sequences as angle-bracket descriptors (``<g><g>``,
``<ctrl-c>``, ``<esc>``). Internally a key is the token string produced by
``read_key``.
"""

from __future__ import annotations

import re

from ..errors import ConfigError

KeySequence = tuple[str, ...]

_DESCRIPTOR_RE = re.compile(r"<([^<>]+|<|>)>")

NAMED_KEYS: dict[str, str] = {
    "enter": "ENTER",
    "return": "ENTER",
    "esc": "ESC",
    "escape": "ESC",
    "tab": "TAB",
    "backtab": "BACKTAB",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "del": "DELETE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "home": "HOME",
    "end": "END",
    "pageup": "PAGE_UP",
    "pagedown": "PAGE_DOWN",
    "space": " ",
    "lt": "<",
    "gt": ">",
}

_TOKEN_TO_NAME: dict[str, str] = {}
for _name, _token in NAMED_KEYS.items():
    _TOKEN_TO_NAME.setdefault(_token, _name)


def parse_key(descriptor: str) -> str:
    """Convert the body of one ``<...>`` descriptor into a key token."""
    if len(descriptor) == 1:
        return descriptor
    lowered = descriptor.strip().lower()
    if lowered in NAMED_KEYS:
        return NAMED_KEYS[lowered]
    if lowered.startswith("ctrl-") and len(lowered) == len("ctrl-") + 1:
        letter = lowered[-1]
        if "a" <= letter <= "z":
            return f"CTRL_{letter.upper()}"
    raise ConfigError(f"unknown key descriptor <{descriptor}>")


def parse_key_sequence(raw: str) -> KeySequence:
    """Parse ``"<g><g>"`` into ``("g", "g")``.

    The whole string must be made of descriptors; stray text is rejected.
    """
    if not isinstance(raw, str):
        raise ConfigError(f"key sequence must be a string, got {type(raw).__name__}")
    text = raw.strip()
    keys: list[str] = []
    pos = 0
    while pos < len(text):
        match = _DESCRIPTOR_RE.match(text, pos)
        if match is None:
            raise ConfigError(f"malformed key sequence {raw!r} at offset {pos}")
        keys.append(parse_key(match.group(1)))
        pos = match.end()
    if not keys:
        raise ConfigError("key sequence must contain at least one key")
    return tuple(keys)


def key_to_descriptor(key: str) -> str:
    """Return the config descriptor for one key token."""
    name = _TOKEN_TO_NAME.get(key)
    if name is not None:
        return f"<{name}>"
    if key.startswith("CTRL_") and len(key) == len("CTRL_") + 1:
        return f"<ctrl-{key[-1].lower()}>"
    return f"<{key}>"


def format_key_sequence(keys: KeySequence) -> str:
    return "".join(key_to_descriptor(key) for key in keys)


__all__ = [
    "KeySequence",
    "NAMED_KEYS",
    "parse_key",
    "parse_key_sequence",
    "key_to_descriptor",
    "format_key_sequence",
]
