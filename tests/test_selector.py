"""Tests for guesser/selector.py."""

import unittest

from calldata_samples import MULTICALL, MULTICALL_WORDS, NORMAL_FN, NORMAL_FN_WORDS

from guesser.errors import IntegerParseFailure, MalformedFraming
from guesser.selector import normalize_calldata, parse_framing, scan_selector, split_framing


class TestScanSelector(unittest.TestCase):
    """Tests for scan_selector."""

    def test_embedded_selector(self):
        word = "88316456" + "0" * 24 + "c011a73ee8576fb46f5e1c5751ca3b9f"
        selector, blanked = scan_selector(word)
        self.assertEqual(selector, "88316456")
        self.assertEqual(blanked, "0" * 32 + "c011a73ee8576fb46f5e1c5751ca3b9f")
        self.assertEqual(len(blanked), 64)

    def test_zero_prefix_is_not_selector(self):
        self.assertEqual(scan_selector("0" * 64), (None, "0" * 64))

    def test_mask_prefix_is_not_selector(self):
        word = "ffffffff" + "0" * 56
        self.assertEqual(scan_selector(word), (None, word))

    def test_nonzero_second_half_is_not_selector(self):
        word = "12345678" + "00000001" + "0" * 48
        self.assertIsNone(scan_selector(word)[0])

    def test_short_word(self):
        self.assertEqual(scan_selector("12345678"), (None, "12345678"))


class TestParseFraming(unittest.TestCase):
    """Tests for parse_framing."""

    def test_selector_prefixed(self):
        selector, words = parse_framing(NORMAL_FN)
        self.assertEqual(selector, "5d842074")
        self.assertEqual(words, NORMAL_FN_WORDS)

    def test_multicall_framing(self):
        selector, words = parse_framing(MULTICALL)
        self.assertEqual(selector, "ac9650d8")
        self.assertEqual(words, MULTICALL_WORDS)

    def test_without_prefix_and_uppercase(self):
        selector, words = parse_framing(NORMAL_FN[2:].upper())
        self.assertEqual(selector, "5d842074")
        self.assertEqual(words, NORMAL_FN_WORDS)

    def test_uppercase_prefix(self):
        self.assertEqual(parse_framing("0X" + NORMAL_FN[2:])[0], "5d842074")

    def test_short_tail_word(self):
        selector, words = parse_framing("0xa9059cbb" + "11" * 33)
        self.assertEqual(selector, "a9059cbb")
        self.assertEqual(words, ["1" * 64, "11"])

    def test_odd_digit_count(self):
        selector, words = parse_framing("a9059cbb123")
        self.assertEqual(selector, "a9059cbb")
        self.assertEqual(words, ["123"])

    def test_selector_only(self):
        self.assertEqual(parse_framing("0xa9059cbb"), ("a9059cbb", []))

    def test_word_aligned_keeps_width(self):
        data = "deadbeef" + "0" * 55 + "1" + "2" * 64
        selector, words = parse_framing(data)
        self.assertEqual(selector, "deadbeef")
        self.assertEqual(words, ["0" * 63 + "1", "2" * 64])
        self.assertTrue(all(len(w) == 64 for w in words))

    def test_word_aligned_reconstructs_input(self):
        data = "deadbeef" + "ab" * 28 + "cd" * 32
        selector, words = parse_framing(data)
        rebuilt = selector + words[0][8:] + "".join(words[1:])
        self.assertEqual(rebuilt, data)

    def test_empty_input(self):
        for data in ("", "0x", None):
            with self.assertRaises(MalformedFraming):
                parse_framing(data)

    def test_too_short(self):
        with self.assertRaises(MalformedFraming):
            parse_framing("0x1234")

    def test_non_hex_selector(self):
        with self.assertRaises(IntegerParseFailure):
            parse_framing("0xzzzzzzzz00")

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            parse_framing("0x12")

    def test_normalize(self):
        self.assertEqual(normalize_calldata("  0xABCD "), "abcd")

    def test_split_expects_normalized_data(self):
        self.assertEqual(split_framing(NORMAL_FN[2:]), parse_framing(NORMAL_FN))
        with self.assertRaises(IntegerParseFailure):
            split_framing(NORMAL_FN)

    def test_prefix_stripped_once(self):
        with self.assertRaises(IntegerParseFailure):
            parse_framing("0x" + NORMAL_FN)


if __name__ == "__main__":
    unittest.main()
