"""paraedit - A line-mode paragraph editor."""

from .model import ParagraphStore, RawMode, FixedMode, FormatMode
from .view import wrap_paragraph, render_paragraphs
from .editor import Editor

__all__ = [
    'ParagraphStore',
    'RawMode',
    'FixedMode',
    'FormatMode',
    'wrap_paragraph',
    'render_paragraphs',
    'Editor',
]
