"""Constants and configuration for the paraedit editor."""

from .model import RawMode


class EditorConstants:
    """Central configuration constants for the editor."""

    # Command line
    COMMAND_PROMPT = ""  # Rendered as "> "
    PROMPT_SUFFIX = "> "
    EXIT_COMMAND = "exit"

    # Follow-up prompts for free-form text
    INSERT_TEXT_PROMPT = "text to insert"
    SEARCH_TEXT_PROMPT = "text to search"
    REPLACE_TEXT_PROMPT = "text to replace"

    # Placeholder inserted by the dummy command
    DUMMY_PARAGRAPH_TEXT = "this is a dummy paragraph text"

    # The index command reports words found in MORE than this many paragraphs
    INDEX_MIN_PARAGRAPHS = 3

    # Format command keywords
    FORMAT_RAW = "raw"
    FORMAT_FIXED = "fix"

    # Separator between a paragraph number and its text when printing
    INDEX_SEPARATOR = ": "

    # Print mode at the start of a session
    DEFAULT_FORMAT_MODE = RawMode()
