"""Selector detection: the outer call's framing and selectors hidden inside words."""

from eth_utils import remove_0x_prefix

from guesser.chunker import chunk, try_parse_uint
from guesser.constants import BYTE_WIDTH, EMPTY_4, MASK_4, SELECTOR_WIDTH, WORD_WIDTH
from guesser.errors import IntegerParseFailure, MalformedFraming


def normalize_calldata(calldata: str) -> str:
    """Drop an optional 0x/0X prefix and lower-case the digits."""
    if not calldata:
        raise MalformedFraming("calldata is empty")
    return remove_0x_prefix(calldata.strip()).lower()


def scan_selector(word: str) -> tuple[str | None, str]:
    """Look for a 4-byte selector at the front of a word.

    A word embeds a selector when its first four bytes are neither all
    zero nor all 0xff and the next four bytes are zero. Short right-padded
    strings match too; the classifier keeps that ambiguity.

    Args:
        word: A 64-digit hex word.

    Returns:
        The selector (or None) and the word with the selector digits zeroed.
    """
    halves = chunk(word, SELECTOR_WIDTH)
    if len(halves) < 2:
        return None, word
    first, second = halves[0], halves[1]
    if first != EMPTY_4 and first != MASK_4 and second == EMPTY_4:
        return first, EMPTY_4 + word[SELECTOR_WIDTH:]
    return None, word


def split_framing(data: str) -> tuple[str, list[str]]:
    """Split normalized calldata into the outer selector and its parameter words.

    Word-aligned input keeps the selector's place in the first word as zero
    digits. Any other length is treated as selector-prefixed: the first
    four bytes are the selector and the remaining bytes are repacked into
    words, the last one short when the bytes do not divide evenly.

    Args:
        data: Output of ``normalize_calldata``.

    Returns:
        The 8-digit selector and the list of parameter words.

    Raises:
        MalformedFraming: The input is shorter than a selector.
        IntegerParseFailure: The selector digits are not hex.
    """
    if len(data) < SELECTOR_WIDTH:
        raise MalformedFraming(f"calldata has {len(data)} hex digits, need at least {SELECTOR_WIDTH}")

    if len(data) % WORD_WIDTH == 0:
        words = chunk(data, WORD_WIDTH)
        selector = words[0][:SELECTOR_WIDTH]
        words[0] = EMPTY_4 + words[0][SELECTOR_WIDTH:]
    else:
        pieces = chunk(data, BYTE_WIDTH)
        selector = "".join(pieces[:4])
        words = chunk("".join(pieces[4:]), WORD_WIDTH)

    if try_parse_uint(selector, bits=32) is None:
        raise IntegerParseFailure(f"selector {selector!r} is not hex")
    return selector, words


def parse_framing(calldata: str) -> tuple[str, list[str]]:
    """Normalize raw calldata once and split it with ``split_framing``."""
    return split_framing(normalize_calldata(calldata))
