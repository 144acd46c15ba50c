"""Guess the plausible semantic types of a single 32-byte word.

The rules are tried in order and the first match wins, so the zero and
max patterns pre-empt the selector check, which pre-empts the address
check and so on. Each rule returns every type the bits are consistent
with rather than picking one; ``bool`` and a small ``uint8`` share the
same encoding, and so do a right-padded short string and a selector.
"""

from guesser.chunker import chunk, strip_leading_zeros, try_parse_uint
from guesser.constants import (
    EMPTY_4,
    EMPTY_32,
    MASK_4,
    MAX_U128,
    MAX_U128_VALUE,
    MAX_U256,
    SELECTOR_WIDTH,
)
from guesser.word_types import TypeCandidateSet, WordType

ADDRESS_DIGITS = 40


def classify(word: str) -> TypeCandidateSet:
    """Return the ordered candidate types for a 64-digit hex word."""
    word = word.lower()
    if word == EMPTY_32:
        return TypeCandidateSet.of(WordType.ANY_ZERO)
    if word in (MAX_U128, MAX_U128_VALUE):
        return TypeCandidateSet.of(WordType.MAX_UINT128)
    if word == MAX_U256:
        return TypeCandidateSet.of(WordType.ANY_MAX)

    halves = chunk(word, SELECTOR_WIDTH)
    first = halves[0] if halves else ""
    second = halves[1] if len(halves) > 1 else ""

    if first != EMPTY_4 and first != MASK_4 and second == EMPTY_4:
        return TypeCandidateSet.of(WordType.SELECTOR, WordType.STRING, WordType.BYTES)

    if first == MASK_4:
        if second == MASK_4:
            return TypeCandidateSet.of(WordType.INT)
        return TypeCandidateSet.of(WordType.INT, WordType.STRING, WordType.BYTES)

    if len(strip_leading_zeros(word)) == ADDRESS_DIGITS:
        return TypeCandidateSet.of(WordType.ADDRESS, WordType.BYTES20, WordType.UINT)

    value = try_parse_uint(word, bits=256)
    if value is not None:
        if value <= 1:
            return TypeCandidateSet.of(WordType.UINT8, WordType.BYTES1, WordType.BOOL)
        if value <= 8:
            return TypeCandidateSet.of(WordType.UINT8, WordType.BYTES1)

    return TypeCandidateSet.of(WordType.UINT, WordType.INT, WordType.BYTES)


def classify_all(words: list[str]) -> list[TypeCandidateSet]:
    return [classify(word) for word in words]
