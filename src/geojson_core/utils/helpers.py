import math
import re
from typing import Any

# Culture-invariant floating-point literal: optional sign, digits with an
# optional fractional part (or a bare fraction), optional exponent. ASCII digits
# only.
FLOAT_LITERAL = re.compile(
    r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII
)

# Whitespace allowed around a literal.
LITERAL_WHITESPACE = ' \t\n\v\f\r'


def parse_float(text: str) -> float | None:
    """Parse a culture-invariant floating-point literal.

    Surrounding ASCII whitespace is ignored. Non-ASCII digits or whitespace,
    thousands separators, digit-group underscores, decimal commas and the
    special values `inf` and `nan` are not accepted, and literals that overflow
    to infinity are rejected. Returns `None` if the text is not a valid
    literal."""

    stripped = text.strip(LITERAL_WHITESPACE)
    if FLOAT_LITERAL.fullmatch(stripped) is None:
        return None
    value = float(stripped)
    if not math.isfinite(value):
        return None
    return value


def deep_update(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    for key, value in overlay.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_update(base[key], value)
        else:
            base[key] = value
    return base


def lower_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively lower-case dictionary keys so that differently capitalized
    spellings of the same setting merge correctly."""
    return {
        k.lower(): lower_keys(v) if isinstance(v, dict) else v
        for k, v in data.items()
    }
