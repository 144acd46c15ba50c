"""Fixed hex-digit patterns and widths used by the calldata heuristics."""

BYTE_WIDTH = 2  # hex digits
SELECTOR_WIDTH = 8
WORD_WIDTH = 64

# selector-width runs
EMPTY_4 = "0" * SELECTOR_WIDTH
MASK_4 = "f" * SELECTOR_WIDTH

# word-width patterns
EMPTY_32 = "0" * WORD_WIDTH
MAX_U256 = "f" * WORD_WIDTH
# 16 bytes of 0xff followed by 16 zero bytes, as the pattern is laid out in calldata
MAX_U128 = "f" * 32 + "0" * 32
# numeric 2**128 - 1, right aligned
MAX_U128_VALUE = "0" * 32 + "f" * 32

# offsets larger than cursor * WORD_WIDTH + OFFSET_CEILING are treated as plain numbers
OFFSET_CEILING = 1920
# offsets and lengths are only considered when they fit in two bytes
SMALL_VALUE_DIGITS = 4
# declared lengths are parsed as 128-bit values
LENGTH_BITS = 128
