"""Rendering of paragraphs for the print command."""

from typing import Iterable

from .constants import EditorConstants
from .model import FixedMode, FormatMode


def wrap_paragraph(paragraph: str, num_columns: int) -> list[str]:
    """Word-wrap a paragraph into lines of at most ``num_columns`` characters.

    Greedy: each line ends at the last space at or before column
    ``num_columns``, and the run of spaces at the break is dropped. A line
    with no usable space is broken hard at ``num_columns``. An empty
    paragraph is one empty line.
    """
    if num_columns <= 0:
        raise ValueError(f"num_columns must be positive, got {num_columns}")

    lines: list[str] = []
    rest = paragraph
    while len(rest) > num_columns:
        # A space at position num_columns still leaves a full-width line
        break_at = rest.rfind(" ", 0, num_columns + 1)
        line = rest[:break_at].rstrip(" ") if break_at > 0 else ""
        if line:
            lines.append(line)
            rest = rest[break_at:].lstrip(" ")
        else:
            lines.append(rest[:num_columns])
            rest = rest[num_columns:].lstrip(" ")
    if rest or not lines:
        lines.append(rest)
    return lines


def _number_prefix(index: int) -> str:
    return f"{index}{EditorConstants.INDEX_SEPARATOR}"


def render_paragraph(index: int, paragraph: str, format_mode: FormatMode) -> list[str]:
    """Render one numbered paragraph.

    In fixed mode, wrapped lines get a hanging indent so they line up under
    the paragraph text rather than under its number.
    """
    prefix = _number_prefix(index)
    if not isinstance(format_mode, FixedMode):
        return [prefix + paragraph]

    indent = " " * len(prefix)
    wrapped = wrap_paragraph(paragraph, format_mode.width)
    return [prefix + wrapped[0]] + [indent + line for line in wrapped[1:]]


def render_paragraphs(paragraphs: Iterable[str], format_mode: FormatMode) -> list[str]:
    lines: list[str] = []
    for i, paragraph in enumerate(paragraphs):
        lines.extend(render_paragraph(i, paragraph, format_mode))
    return lines
