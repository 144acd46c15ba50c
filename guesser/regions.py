"""Offset candidates and the dynamic-region (array/string) check.

The walk records every small word-aligned value as an offset candidate.
Turning a candidate into a confirmed array or string boundary is not
implemented: the detector below only rejects candidates that cannot be a
dynamic region and reports the rest as unsupported. The resolution stage
that runs it is off unless explicitly enabled.
"""

from dataclasses import dataclass
from enum import Enum

from guesser.chunker import strip_leading_zeros, try_parse_uint
from guesser.constants import MAX_U256, SMALL_VALUE_DIGITS, WORD_WIDTH
from utils.logging import get_logger

logger = get_logger("guesser.regions")

WORD_BYTES = WORD_WIDTH // 2


@dataclass(frozen=True)
class OffsetCandidate:
    """A word that may point at a dynamic value's length field."""

    index: int
    value: int  # offset divided by 64
    length: int = 0  # placeholder until lengths are resolved


class RegionStatus(Enum):
    REJECTED = "rejected"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class RegionVerdict:
    index: int
    status: RegionStatus
    reason: str


def _reject(index: int, reason: str) -> RegionVerdict:
    return RegionVerdict(index, RegionStatus.REJECTED, reason)


def detect_dynamic_region(words: list[str], index: int) -> RegionVerdict:
    """Check whether ``words[index]`` can be an offset to a length field.

    Every check that can rule the region out is applied. A region that
    survives them is reported as UNSUPPORTED, never as confirmed.
    """
    if not 0 <= index < len(words):
        return _reject(index, "index outside sequence")

    trimmed = strip_leading_zeros(words[index])
    if len(trimmed) > SMALL_VALUE_DIGITS:
        return _reject(index, "value wider than two bytes")
    offset = try_parse_uint(trimmed)
    if offset is None:
        return _reject(index, "offset does not parse")
    if offset % WORD_BYTES != 0:
        return _reject(index, "offset not word aligned")

    target = index + offset // WORD_BYTES
    if target >= len(words):
        return _reject(index, "offset points past the end")
    length = try_parse_uint(strip_leading_zeros(words[target]))
    if length is None:
        return _reject(index, "length does not parse")
    if target + length >= len(words):
        return _reject(index, "region runs past the end")

    if length % 2 == 0:
        last = target + length
        for i in range(target + 1, last):
            if words[i] == MAX_U256:
                return _reject(index, f"filler word at {i}")
        padding = (WORD_BYTES - length % WORD_BYTES) * 2
        tail = words[last][-padding:]
        if tail != "0" * padding:
            return _reject(index, f"element {last} is not zero padded")

    return RegionVerdict(index, RegionStatus.UNSUPPORTED, "confirmation not implemented")


def resolve_dynamic_regions(
    words: list[str], offsets: list[OffsetCandidate], enabled: bool
) -> list[RegionVerdict]:
    """Run the dynamic-region check over every offset candidate.

    Disabled, this returns an empty list and the candidates stay as
    recorded by the walk.
    """
    if not enabled:
        return []
    verdicts = [detect_dynamic_region(words, candidate.index) for candidate in offsets]
    logger.debug(
        "resolved %s offset candidates: %s rejected",
        len(verdicts),
        sum(v.status is RegionStatus.REJECTED for v in verdicts),
    )
    return verdicts
