"""Tests for guesser/editor.py."""

import unittest

from guesser.editor import Extraction, extract_by_length, pad_zero_word, splice_nested
from guesser.errors import IndexOutOfRange

A = "a" * 8 + "b" * 56
C = "c" * 64
D = "d" * 64


class TestPadZeroWord(unittest.TestCase):
    """Tests for pad_zero_word."""

    def test_shifts_following_words(self):
        words = ["0" * 64, "1" * 64, "2" * 64]
        result = pad_zero_word(words, 0)
        self.assertEqual(result, ["0" * 64, "0" * 8 + "1" * 56, "1" * 8 + "2" * 56])

    def test_keeps_total_length(self):
        words = ["0" * 64, "1" * 64, "2" * 40]
        result = pad_zero_word(words, 0)
        self.assertEqual(len("".join(result)), len("".join(words)))

    def test_last_word(self):
        words = ["1" * 64, "0" * 64]
        self.assertEqual(pad_zero_word(words, 1), words)

    def test_does_not_modify_input(self):
        words = ["0" * 64, "1" * 64]
        pad_zero_word(words, 0)
        self.assertEqual(words, ["0" * 64, "1" * 64])

    def test_index_out_of_range(self):
        with self.assertRaises(IndexOutOfRange):
            pad_zero_word(["0" * 64], 1)

    def test_last_word_too_short(self):
        with self.assertRaises(IndexOutOfRange):
            pad_zero_word(["0" * 64, "ab"], 0)


class TestSpliceNested(unittest.TestCase):
    """Tests for splice_nested."""

    def test_realigns_after_selector(self):
        self.assertEqual(splice_nested([A, C], 0), ["b" * 56 + "c" * 8, "c" * 56 + "0" * 8])

    def test_words_before_index_untouched(self):
        result = splice_nested([D, A, C], 1)
        self.assertEqual(result[0], D)
        self.assertEqual(len(result), 3)

    def test_index_out_of_range(self):
        with self.assertRaises(IndexOutOfRange):
            splice_nested([A], 3)


class TestExtractByLength(unittest.TestCase):
    """Tests for extract_by_length."""

    def test_selector_and_one_word(self):
        result = extract_by_length([A, C, D], 0, 36)
        self.assertEqual(result, Extraction("aaaaaaaa", ["b" * 56 + "c" * 8], 0))

    def test_selector_and_two_words(self):
        result = extract_by_length([A, C, D], 0, 68)
        self.assertEqual(result.selector, "aaaaaaaa")
        self.assertEqual(result.words, ["b" * 56 + "c" * 8, "c" * 56 + "d" * 8])
        self.assertEqual(result.skip, 1)

    def test_bare_selector(self):
        self.assertEqual(extract_by_length([A, C], 0, 4), Extraction("aaaaaaaa", [], None))

    def test_starts_at_index(self):
        result = extract_by_length([C, A], 1, 4)
        self.assertEqual(result.selector, "aaaaaaaa")

    def test_word_multiple_is_not_a_call(self):
        self.assertIsNone(extract_by_length([A, C, D], 0, 32))

    def test_string_boundary_not_supported(self):
        self.assertIsNone(extract_by_length([A, C, D], 0, 28))

    def test_length_past_end(self):
        with self.assertRaises(IndexOutOfRange):
            extract_by_length([A, C, D], 0, 200)

    def test_index_out_of_range(self):
        with self.assertRaises(IndexOutOfRange):
            extract_by_length([A], 2, 4)


if __name__ == "__main__":
    unittest.main()
