"""Splitting hex text into fixed-width pieces and reading small integers."""

from guesser.constants import LENGTH_BITS

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def chunk(text: str, width: int) -> list[str]:
    """Split text into pieces of ``width`` characters.

    The last piece is shorter when ``len(text)`` is not a multiple of
    ``width``. An empty string yields an empty list.
    """
    return [text[i : i + width] for i in range(0, len(text), width)]


def strip_leading_zeros(text: str) -> str:
    return text.lstrip("0")


def is_hex_digits(text: str) -> bool:
    """True for a non-empty run of bare hex digits (no prefix, no sign)."""
    return bool(text) and _HEX_DIGITS.issuperset(text)


def try_parse_uint(text: str, bits: int = LENGTH_BITS) -> int | None:
    """Parse hex digits as an unsigned integer of at most ``bits`` bits.

    Returns None for empty text, non-hex text or values that overflow.
    """
    if not is_hex_digits(text):
        return None
    value = int(text, 16)
    if value.bit_length() > bits:
        return None
    return value
