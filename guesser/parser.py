"""Decode calldata into a selector, parameter words and nested calls.

The walk over a call's words is a step function over ``WalkState``: each
step either leaves the words alone, realigns them around a zero boundary
word, or cuts a nested call out of them. Nested calls are walked the same
way from an explicit worklist, up to a configured depth.
"""

from dataclasses import dataclass, field

from guesser.chunker import strip_leading_zeros, try_parse_uint
from guesser.classifier import classify_all
from guesser.constants import EMPTY_32, OFFSET_CEILING, SMALL_VALUE_DIGITS, WORD_WIDTH
from guesser.editor import extract_by_length, pad_zero_word, splice_nested
from guesser.errors import IndexOutOfRange
from guesser.regions import OffsetCandidate, RegionVerdict, resolve_dynamic_regions
from guesser.selector import normalize_calldata, scan_selector, split_framing
from guesser.word_types import TypeCandidateSet
from utils.config import Config
from utils.logging import get_logger

logger = get_logger("guesser.parser")


@dataclass
class CallRecord:
    """One decoded call: its selector, its words and the calls nested in it."""

    selector: str
    raw_params: list[str]
    params: list[str] = field(default_factory=list)
    nested: list["CallRecord"] = field(default_factory=list)
    types: list[TypeCandidateSet] = field(default_factory=list)
    depth: int = 1


@dataclass
class DecodedCalldata:
    """Result of decoding one calldata string."""

    calldata: str
    selector: str
    raw_params: list[str]
    params: list[str]
    nested: list[CallRecord] = field(default_factory=list)
    offsets: list[OffsetCandidate] = field(default_factory=list)
    regions: list[RegionVerdict] = field(default_factory=list)
    # per-word annotations of the outer call; not produced yet
    main_details: list[TypeCandidateSet] = field(default_factory=list)


@dataclass(frozen=True)
class WalkState:
    words: tuple[str, ...]
    cursor: int = 0
    skip: int = 0

    @property
    def done(self) -> bool:
        return self.cursor >= len(self.words)


@dataclass(frozen=True)
class StepResult:
    state: WalkState
    nested: CallRecord | None = None
    offset: OffsetCandidate | None = None


def _offset_candidate(word: str, cursor: int) -> OffsetCandidate | None:
    trimmed = strip_leading_zeros(word)
    if len(trimmed) > SMALL_VALUE_DIGITS:
        return None
    value = try_parse_uint(trimmed)
    if value is None:
        return None
    if value < cursor * WORD_WIDTH + OFFSET_CEILING and value % WORD_WIDTH == 0:
        return OffsetCandidate(cursor, value // WORD_WIDTH)
    return None


def step(state: WalkState) -> StepResult:
    """Process the word under the cursor and move past it.

    Raises:
        IndexOutOfRange: A zero-word realignment could not trim the last word.
    """
    words = list(state.words)
    cursor = state.cursor + state.skip
    if cursor >= len(words):
        return StepResult(WalkState(tuple(words), cursor))

    if words[cursor] == EMPTY_32:
        words = pad_zero_word(words, cursor)
        cursor += 1
        if cursor >= len(words):
            return StepResult(WalkState(tuple(words), cursor))

    word = words[cursor]
    selector, _ = scan_selector(word)
    if selector is not None:
        nested = None
        skip = 0
        length = try_parse_uint(strip_leading_zeros(words[cursor - 1])) if cursor > 0 else None
        extraction = None
        if length is not None:
            try:
                extraction = extract_by_length(words, cursor, length)
            except IndexOutOfRange as e:
                logger.debug("dropping nested call candidate %s: %s", selector, e)
        if extraction is not None:
            logger.debug("nested call %s at word %s, %s bytes", extraction.selector, cursor, length)
            nested = CallRecord(selector=extraction.selector, raw_params=extraction.words)
            if extraction.skip is not None:
                words = splice_nested(words, cursor)
                skip = extraction.skip
        return StepResult(WalkState(tuple(words), cursor + 1, skip), nested=nested)

    offset = _offset_candidate(word, cursor)
    return StepResult(WalkState(tuple(words), cursor + 1), offset=offset)


def walk(words: list[str]) -> tuple[list[str], list[CallRecord], list[OffsetCandidate]]:
    """Step through a call's words until the cursor reaches the end.

    Returns:
        The edited words, the nested calls found, and the offset candidates.
    """
    state = WalkState(tuple(words))
    nested: list[CallRecord] = []
    offsets: list[OffsetCandidate] = []
    while not state.done:
        result = step(state)
        state = result.state
        if result.nested is not None:
            nested.append(result.nested)
        if result.offset is not None:
            offsets.append(result.offset)
    return list(state.words), nested, offsets


def _expand_nested(children: list[CallRecord], max_depth: int) -> None:
    """Walk nested calls depth-first with an explicit stack."""
    stack = list(reversed(children))
    while stack:
        record = stack.pop()
        if record.depth > max_depth:
            logger.debug("nesting depth %s reached at %s, not walking its words", max_depth, record.selector)
            record.params = list(record.raw_params)
        else:
            params, record.nested, _ = walk(record.raw_params)
            # realignment only applies around a child call
            record.params = params if record.nested else list(record.raw_params)
            for child in record.nested:
                child.depth = record.depth + 1
            stack.extend(reversed(record.nested))
        record.types = classify_all(record.params)


def decode_calldata(calldata: str, resolve_regions: bool | None = None) -> DecodedCalldata:
    """Decode a calldata hex string without an ABI.

    Args:
        calldata: Hex string, optional 0x prefix, any case.
        resolve_regions: Run the dynamic-region stage over the offset
            candidates. None uses ``Config.get_resolve_dynamic_regions()``.

    Returns:
        The decoded call with nested calls and their candidate types.

    Raises:
        MalformedFraming: The input has no usable selector.
        IntegerParseFailure: The selector is not hex.
        IndexOutOfRange: A realignment edit could not be applied.
    """
    data = normalize_calldata(calldata)
    selector, raw_params = split_framing(data)
    params, nested, offsets = walk(raw_params)
    _expand_nested(nested, Config.get_max_nesting_depth())

    if resolve_regions is None:
        resolve_regions = Config.get_resolve_dynamic_regions()
    regions = resolve_dynamic_regions(params, offsets, resolve_regions)

    logger.debug("decoded %s: %s words, %s nested calls", selector, len(params), len(nested))
    return DecodedCalldata(
        calldata=data,
        selector=selector,
        raw_params=raw_params,
        params=params,
        nested=nested,
        offsets=offsets,
        regions=regions,
    )
