"""Base-36 encoding of list versions.

Versions are embedded in sort instructions as compact base-36 strings
(digits, then upper-case letters), e.g. ``35 -> "Z"``, ``36 -> "10"``.
"""

from __future__ import annotations

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_base36(value: int) -> str:
    """Return the base-36 representation of a non-negative integer.

    Examples
    --------
    >>> to_base36(0)
    '0'
    >>> to_base36(1295)
    'ZZ'
    """
    if value < 0:
        raise ValueError(f"value must be >= 0, got {value}")
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def from_base36(text: str) -> int:
    """Parse a base-36 string (either letter case).

    Raises
    ------
    ValueError
        If *text* is empty, signed, or contains a non base-36 character.
    """
    if not text or not text.isalnum() or not text.isascii():
        raise ValueError(f"invalid base-36 value: {text!r}")
    return int(text, 36)
