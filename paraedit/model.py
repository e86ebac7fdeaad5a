"""Document model: the paragraph store and the print format modes."""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .errors import IndexOutOfBounds

logger = logging.getLogger(__name__)

# ASCII whitespace only: space, tab, LF, VT, FF, CR
_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0b\x0c\r]+")


def split_ascii_whitespace(text: str) -> list[str]:
    """Split text on runs of ASCII whitespace, dropping empty pieces."""
    return [piece for piece in _ASCII_WHITESPACE.split(text) if piece]


@dataclass(frozen=True)
class RawMode:
    """Print paragraphs verbatim."""


@dataclass(frozen=True)
class FixedMode:
    """Print paragraphs word-wrapped at ``width`` columns."""
    width: int

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")


FormatMode = Union[RawMode, FixedMode]


class ParagraphStore:
    _paragraphs: list[str]

    def __init__(self, paragraphs: Optional[list[str]] = None):
        self._paragraphs = list(paragraphs) if paragraphs else []

    def __len__(self) -> int:
        return len(self._paragraphs)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paragraphs))

    def __repr__(self) -> str:
        return f"ParagraphStore({self._paragraphs!r})"

    @property
    def paragraphs(self) -> list[str]:
        """A copy of the paragraphs, in order."""
        return list(self._paragraphs)

    def is_empty(self) -> bool:
        return not self._paragraphs

    def last_index(self) -> int:
        """Index of the last paragraph, or -1 for an empty document."""
        return len(self._paragraphs) - 1

    def get(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._paragraphs):
            return self._paragraphs[index]
        return None

    def _check_index(self, index: int, upper: int):
        # upper is exclusive
        if index < 0 or index >= upper:
            raise IndexOutOfBounds(index, len(self._paragraphs))

    def append(self, text: str) -> int:
        """Append a paragraph and return its index."""
        self._paragraphs.append(text)
        logger.debug("appended paragraph %d", len(self._paragraphs) - 1)
        return len(self._paragraphs) - 1

    def insert_at(self, index: int, text: str) -> int:
        """Insert before ``index``; ``index == len(self)`` appends.

        Raises:
            IndexOutOfBounds: if ``index > len(self)``.
        """
        self._check_index(index, len(self._paragraphs) + 1)
        self._paragraphs.insert(index, text)
        logger.debug("inserted paragraph at %d", index)
        return index

    def delete_at(self, index: int) -> str:
        """Remove the paragraph at ``index`` and return its text."""
        self._check_index(index, len(self._paragraphs))
        removed = self._paragraphs.pop(index)
        logger.debug("deleted paragraph %d", index)
        return removed

    def replace_at(self, index: int, text: str) -> str:
        """Overwrite the paragraph at ``index`` and return the previous text."""
        self._check_index(index, len(self._paragraphs))
        previous = self._paragraphs[index]
        self._paragraphs[index] = text
        logger.debug("replaced paragraph %d", index)
        return previous

    def word_index(self) -> dict[str, list[int]]:
        """Build an inverted index of the document.

        Words are split on ASCII whitespace and compared case-sensitively;
        punctuation stays part of the word.

        Returns:
            Mapping of word to the sorted indices of the paragraphs containing it.
        """
        index: dict[str, set[int]] = {}
        for i, paragraph in enumerate(self._paragraphs):
            for word in split_ascii_whitespace(paragraph):
                index.setdefault(word, set()).add(i)
        return {word: sorted(found) for word, found in index.items()}
