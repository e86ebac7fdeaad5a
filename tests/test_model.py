"""Unit tests for the paragraph store."""

import unittest

import pytest

from paraedit.errors import IndexOutOfBounds
from paraedit.model import FixedMode, ParagraphStore, RawMode, split_ascii_whitespace


class TestParagraphStore(unittest.TestCase):
    """Test paragraph store mutations and bounds checks."""

    def setUp(self):
        self.store = ParagraphStore(["zero", "one", "two"])

    def test_starts_empty(self):
        store = ParagraphStore()
        self.assertEqual(len(store), 0)
        self.assertTrue(store.is_empty())
        self.assertEqual(store.last_index(), -1)

    def test_append_keeps_call_order(self):
        store = ParagraphStore()
        for text in ["first", "second", "third"]:
            store.append(text)
        self.assertEqual(store.paragraphs, ["first", "second", "third"])

    def test_append_returns_new_index(self):
        self.assertEqual(self.store.append("three"), 3)

    def test_insert_shifts_later_paragraphs(self):
        self.store.insert_at(1, "new")
        self.assertEqual(self.store.paragraphs, ["zero", "new", "one", "two"])

    def test_insert_at_length_appends(self):
        self.store.insert_at(3, "last")
        self.assertEqual(self.store.paragraphs[-1], "last")
        self.assertEqual(len(self.store), 4)

    def test_insert_past_length_fails_unchanged(self):
        with self.assertRaises(IndexOutOfBounds) as ctx:
            self.store.insert_at(4, "nope")
        self.assertEqual(ctx.exception.index, 4)
        self.assertEqual(ctx.exception.length, 3)
        self.assertEqual(self.store.paragraphs, ["zero", "one", "two"])

    def test_delete_shifts_down(self):
        removed = self.store.delete_at(0)
        self.assertEqual(removed, "zero")
        self.assertEqual(self.store.paragraphs, ["one", "two"])
        self.assertEqual(self.store.get(0), "one")

    def test_delete_at_length_fails_unchanged(self):
        with self.assertRaises(IndexOutOfBounds):
            self.store.delete_at(3)
        self.assertEqual(len(self.store), 3)

    def test_replace_in_place(self):
        previous = self.store.replace_at(2, "TWO")
        self.assertEqual(previous, "two")
        self.assertEqual(self.store.paragraphs, ["zero", "one", "TWO"])

    def test_replace_out_of_bounds_fails_unchanged(self):
        with self.assertRaises(IndexOutOfBounds):
            self.store.replace_at(5, "x")
        self.assertEqual(self.store.paragraphs, ["zero", "one", "two"])

    def test_negative_indices_rejected(self):
        with self.assertRaises(IndexOutOfBounds):
            self.store.delete_at(-1)
        with self.assertRaises(IndexOutOfBounds):
            self.store.insert_at(-1, "x")
        self.assertEqual(len(self.store), 3)

    def test_get_returns_none_out_of_range(self):
        self.assertEqual(self.store.get(1), "one")
        self.assertIsNone(self.store.get(3))
        self.assertIsNone(self.store.get(-1))

    def test_paragraphs_is_a_copy(self):
        paragraphs = self.store.paragraphs
        paragraphs.append("sneaky")
        self.assertEqual(len(self.store), 3)


def test_word_index_sorted_indices():
    store = ParagraphStore(["a b c", "a b", "a", "a d", "a e"])
    index = store.word_index()
    assert index["a"] == [0, 1, 2, 3, 4]
    assert index["b"] == [0, 1]
    assert index["e"] == [4]


def test_word_index_counts_paragraph_once():
    store = ParagraphStore(["x x x", "y"])
    assert store.word_index()["x"] == [0]


def test_word_index_case_and_punctuation():
    store = ParagraphStore(["Word word word."])
    index = store.word_index()
    assert set(index) == {"Word", "word", "word."}


def test_split_ascii_whitespace():
    assert split_ascii_whitespace("  add\t 3 \r\n") == ["add", "3"]
    assert split_ascii_whitespace("") == []
    # Non-breaking space is not ASCII whitespace
    assert split_ascii_whitespace("a\u00a0b c") == ["a\u00a0b", "c"]


def test_format_modes():
    assert RawMode() == RawMode()
    assert FixedMode(10) == FixedMode(10)
    assert FixedMode(10) != FixedMode(11)
    with pytest.raises(ValueError):
        FixedMode(0)
