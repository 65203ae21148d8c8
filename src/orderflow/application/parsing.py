"""Input coercion shared by the command handlers."""

from __future__ import annotations

from typing import Any

from orderflow.domain.exceptions import InvalidRequestError


def parse_int(value: Any, field_name: str) -> int:
    """Coerce an int or a string holding an int; reject bools and floats."""
    if isinstance(value, bool):
        raise InvalidRequestError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in "+-" else text
        # isdecimal, not isdigit: int() refuses superscripts like "²".
        if digits.isdecimal():
            return int(text)
    raise InvalidRequestError(f"{field_name} must be an integer")
