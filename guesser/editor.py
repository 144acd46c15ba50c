"""Realigning a word sequence after a nested call or a zero boundary word is found.

Both edits keep the total number of hex digits unchanged: they move a
selector-width run of zeros from one end of the affected region to the
other and re-chunk, which shifts every later word boundary by four bytes.
"""

from dataclasses import dataclass

from guesser.chunker import chunk
from guesser.constants import EMPTY_4, SELECTOR_WIDTH, WORD_WIDTH
from guesser.errors import IndexOutOfRange
from utils.logging import get_logger

logger = get_logger("guesser.editor")

# remainders of (length * 2) % WORD_WIDTH
SELECTOR_ALIGNED = SELECTOR_WIDTH
STRING_ALIGNED = WORD_WIDTH - SELECTOR_WIDTH


@dataclass(frozen=True)
class Extraction:
    """A nested call cut out of a word sequence."""

    selector: str
    words: list[str]
    skip: int | None


def _check_index(words: list[str], index: int) -> None:
    if not 0 <= index < len(words):
        raise IndexOutOfRange(f"word index {index} outside sequence of {len(words)} words")


def pad_zero_word(words: list[str], index: int) -> list[str]:
    """Push a selector-width zero run in front of ``words[index]``.

    The same number of digits is trimmed from the end of the last word so
    the sequence keeps its length.

    Raises:
        IndexOutOfRange: ``index`` is outside the sequence or the last word
            is too short to trim.
    """
    _check_index(words, index)
    edited = list(words)
    edited[index] = EMPTY_4 + edited[index]
    if len(edited[-1]) < SELECTOR_WIDTH:
        raise IndexOutOfRange(f"last word has {len(words[-1])} digits, cannot trim {SELECTOR_WIDTH}")
    edited[-1] = edited[-1][: len(edited[-1]) - SELECTOR_WIDTH]
    return chunk("".join(edited), WORD_WIDTH)


def splice_nested(words: list[str], index: int) -> list[str]:
    """Drop the selector digits at the front of ``words[index]`` and re-chunk.

    A selector-width zero delimiter is appended at the end, so the nested
    call's own parameters land on word boundaries.

    Raises:
        IndexOutOfRange: ``index`` is outside the sequence.
    """
    _check_index(words, index)
    edited = list(words)
    edited[index] = edited[index][SELECTOR_WIDTH:]
    return chunk("".join(edited) + EMPTY_4, WORD_WIDTH)


def extract_by_length(words: list[str], index: int, length: int) -> Extraction | None:
    """Cut ``length`` bytes starting at ``words[index]`` and read them as a call.

    A region whose digit count leaves a selector-width remainder modulo a
    word is a selector followed by whole words. A region that leaves the
    complementary remainder would need string realignment, which is not
    supported yet. Anything else is not a call.

    Args:
        words: Current word sequence.
        index: Word where the region starts.
        length: Declared region length in bytes.

    Returns:
        The extraction, or None when the region is not a nested call.
        ``skip`` is the number of whole words the walk can jump over, None
        for a bare selector.

    Raises:
        IndexOutOfRange: The region runs past the end of the sequence.
    """
    _check_index(words, index)
    tail = "".join(words[index:])
    digits = length * 2
    if digits > len(tail):
        raise IndexOutOfRange(f"length {length} at word {index} needs {digits} digits, {len(tail)} available")

    region = tail[:digits]
    remainder = digits % WORD_WIDTH
    if remainder == SELECTOR_ALIGNED:
        selector = region[:SELECTOR_WIDTH]
        nested = chunk(region[SELECTOR_WIDTH:], WORD_WIDTH)
        skip = None if length == 4 else (length - 8) * 2 // WORD_WIDTH
        return Extraction(selector=selector, words=nested, skip=skip)
    if remainder == STRING_ALIGNED:
        logger.debug("length %s at word %s ends on a string boundary, not supported", length, index)
    return None
