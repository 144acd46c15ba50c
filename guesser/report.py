"""Render a decoded calldata result as plain-text lines."""

from eth_abi import decode
from eth_utils import to_checksum_address

from guesser.constants import WORD_WIDTH
from guesser.parser import CallRecord, DecodedCalldata
from guesser.resolver import resolve_selector
from guesser.word_types import TypeCandidateSet, WordType

_SIGNED = {WordType.INT}
_UNSIGNED = {WordType.UINT, WordType.UINT8, WordType.ANY_ZERO}


def _preview_word(word: str, types: TypeCandidateSet) -> str:
    """Show a word as a value of its leading candidate type."""
    if len(word) != WORD_WIDTH:
        return "0x" + word
    try:
        raw = bytes.fromhex(word)
    except ValueError:
        return word

    primary = types.primary
    if primary is WordType.ADDRESS:
        return to_checksum_address("0x" + word[-40:])
    if primary is WordType.SELECTOR:
        return "0x" + word[:8]
    if primary is WordType.ANY_MAX:
        return "max"
    if primary is WordType.MAX_UINT128:
        return str(2**128 - 1)
    if primary in _SIGNED:
        return str(decode(["int256"], raw)[0])
    if primary in _UNSIGNED:
        return str(decode(["uint256"], raw)[0])
    return "0x" + word


def _method_line(selector: str, resolve: bool, remote: bool | None) -> str:
    line = f"Method ID: 0x{selector}"
    if resolve:
        signature = resolve_selector(selector, remote=remote)
        if signature:
            line += f" ({signature})"
    return line


def _word_lines(words: list[str], indent: str) -> list[str]:
    return [f"{indent}[{i}] {word}" for i, word in enumerate(words)]


def _call_lines(record: CallRecord, index: int, indent: str, resolve: bool, remote: bool | None) -> list[str]:
    lines = [f"{indent}[{index}] {_method_line(record.selector, resolve, remote)}"]
    inner = indent + "    "
    for i, word in enumerate(record.params):
        if i < len(record.types):
            types = record.types[i]
            lines.append(f"{inner}[{i}] {word} {types} -> {_preview_word(word, types)}")
        else:
            lines.append(f"{inner}[{i}] {word}")
    for i, child in enumerate(record.nested):
        lines.extend(_call_lines(child, i, inner, resolve, remote))
    return lines


def format_decoded_lines(decoded: DecodedCalldata, resolve: bool = False, remote: bool | None = None) -> list[str]:
    """Format a decoded result for display.

    Args:
        decoded: Output of ``decode_calldata``.
        resolve: Append known function signatures to method ids.
        remote: Passed to ``resolve_selector``; None defers to config.

    Returns:
        Lines without trailing newlines.
    """
    lines = ["---------- Params ----------", _method_line(decoded.selector, resolve, remote)]
    lines.append("Raw Params:")
    lines.extend(_word_lines(decoded.raw_params, "    "))
    lines.append("Params:")
    lines.extend(_word_lines(decoded.params, "    "))
    lines.append(f"Nested Calls: {len(decoded.nested)}")
    for i, record in enumerate(decoded.nested):
        lines.extend(_call_lines(record, i, "    ", resolve, remote))
    if decoded.regions:
        lines.append("Dynamic Regions:")
        for verdict in decoded.regions:
            lines.append(f"    [{verdict.index}] {verdict.status.value}: {verdict.reason}")
    return lines
