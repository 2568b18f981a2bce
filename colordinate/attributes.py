# attributes.py

from typing import Tuple

# Closed, ordered set of style toggles understood by `:highlight gui=...`.
HIGHLIGHT_ATTRS: Tuple[str, ...] = (
    "bold",
    "italic",
    "reverse",
    "standout",
    "underline",
    "undercurl",
    "strikethrough",
)


def is_highlight_attr(value) -> bool:
    """Return True if value is one of the recognized style toggles."""
    return isinstance(value, str) and value in HIGHLIGHT_ATTRS


def ordered_attrs(values) -> list[str]:
    """Return the recognized attributes in values, in enumeration order, without duplicates."""
    present = set(values)
    return [attr for attr in HIGHLIGHT_ATTRS if attr in present]
