"""Errors raised while decoding calldata.

Only framing problems and out-of-range edits abort a decode. Failed
heuristic guesses (an offset that does not parse, a length that does not
line up) are not errors and never surface here.
"""


class DecodeError(ValueError):
    """Base class for every decode failure."""


class MalformedFraming(DecodeError):
    """The input cannot be split into a selector and parameter words."""


class IndexOutOfRange(DecodeError):
    """An edit or extraction reached past the end of the word sequence."""


class IntegerParseFailure(DecodeError):
    """Mandatory framing data is not a hex integer."""
