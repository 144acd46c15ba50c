"""Tests for guesser/chunker.py."""

import unittest

from guesser.chunker import chunk, is_hex_digits, strip_leading_zeros, try_parse_uint


class TestChunk(unittest.TestCase):
    """Tests for chunk."""

    def test_even_split(self):
        self.assertEqual(chunk("aabbccdd", 2), ["aa", "bb", "cc", "dd"])

    def test_short_last_piece(self):
        self.assertEqual(chunk("aabbc", 2), ["aa", "bb", "c"])

    def test_empty(self):
        self.assertEqual(chunk("", 64), [])

    def test_width_larger_than_text(self):
        self.assertEqual(chunk("abc", 8), ["abc"])

    def test_piece_count_and_reconstruction(self):
        text = "0123456789abcdef" * 9 + "012"
        for width in (2, 8, 64):
            pieces = chunk(text, width)
            self.assertEqual(len(pieces), -(-len(text) // width))
            self.assertEqual("".join(pieces), text)
            self.assertTrue(all(len(p) == width for p in pieces[:-1]))

    def test_rechunking_is_stable(self):
        words = chunk("ab" * 80, 64)
        self.assertEqual(chunk("".join(words), 64), words)


class TestParsing(unittest.TestCase):
    """Tests for strip_leading_zeros and try_parse_uint."""

    def test_strip_leading_zeros(self):
        self.assertEqual(strip_leading_zeros("000164"), "164")
        self.assertEqual(strip_leading_zeros("0000"), "")

    def test_parse_hex(self):
        self.assertEqual(try_parse_uint("164"), 356)
        self.assertEqual(try_parse_uint("FF"), 255)

    def test_empty_does_not_parse(self):
        self.assertIsNone(try_parse_uint(""))

    def test_non_hex_does_not_parse(self):
        self.assertIsNone(try_parse_uint("xyz"))
        self.assertIsNone(try_parse_uint("0x10"))
        self.assertIsNone(try_parse_uint("-1"))

    def test_overflow(self):
        self.assertEqual(try_parse_uint("f" * 32), 2**128 - 1)
        self.assertIsNone(try_parse_uint("1" + "0" * 32))
        self.assertEqual(try_parse_uint("f" * 64, bits=256), 2**256 - 1)

    def test_is_hex_digits(self):
        self.assertTrue(is_hex_digits("deadBEEF"))
        self.assertFalse(is_hex_digits(""))
        self.assertFalse(is_hex_digits("0x00"))


if __name__ == "__main__":
    unittest.main()
