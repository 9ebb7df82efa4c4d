"""Input layer: raw key decoding, keybinding tables, and chord resolution."""

from .bindings import KeyBindings, parse_mode_entries
from .keys import KeySequence, format_key_sequence, key_to_descriptor, parse_key, parse_key_sequence
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .resolver import ChordPolicy, KeyBindingResolver

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeySequence",
    "parse_key",
    "parse_key_sequence",
    "key_to_descriptor",
    "format_key_sequence",
    "KeyBindings",
    "parse_mode_entries",
    "ChordPolicy",
    "KeyBindingResolver",
]
