"""Command pattern implementation for editor verbs."""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, TYPE_CHECKING

from .constants import EditorConstants
from .errors import (
    InvalidFormatMode,
    InvalidIndexSyntax,
    IndexOutOfBounds,
    InvalidWidthSyntax,
    NothingToDelete,
    NothingToReplace,
    UnknownCommand,
)
from .model import FixedMode, FormatMode, ParagraphStore, RawMode
from .view import render_paragraphs

if TYPE_CHECKING:
    from .terminal import TerminalInterface

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class SetFormatMode:
    """Effect asking the session to switch its format mode."""
    mode: FormatMode


# A command returns None or an effect for the dispatcher to apply
Effect = Optional[SetFormatMode]


def parse_index(tokens: list[str]) -> Optional[int]:
    """Return the paragraph index given after the verb, or None if absent.

    Raises:
        InvalidIndexSyntax: if the token is not a non-negative integer.
    """
    if len(tokens) < 2:
        return None
    token = tokens[1]
    if not _DIGITS.fullmatch(token):
        raise InvalidIndexSyntax(token)
    return int(token)


class EditorCommand(ABC):
    """Base class for editor commands."""

    usage: str = ""

    @abstractmethod
    def execute(self, tokens: list[str], model: ParagraphStore,
                terminal: 'TerminalInterface') -> Effect:
        """Execute the command.

        Args:
            tokens: The tokenized command line, verb first
            model: Paragraph store to operate on
            terminal: Used for follow-up prompts and output

        Returns:
            An effect for the dispatcher to apply, or None
        """
        pass

    def resolve(self, format_mode: FormatMode) -> 'EditorCommand':
        """Return the command that should run under ``format_mode``."""
        return self


class InsertCommand(EditorCommand):
    """Base class for commands that add one paragraph."""

    def execute(self, tokens, model, terminal):
        index = parse_index(tokens)
        text = self._text(terminal)
        if index is None:
            index = model.append(text)
        else:
            model.insert_at(index, text)
        terminal.write(f"Added paragraph {index}.")
        return None

    @abstractmethod
    def _text(self, terminal: 'TerminalInterface') -> str:
        """Produce the paragraph text."""
        pass


class AddCommand(InsertCommand):
    usage = "add [index]        insert a paragraph (appends without index)"

    def _text(self, terminal):
        return terminal.read_text(EditorConstants.INSERT_TEXT_PROMPT)


class DummyCommand(InsertCommand):
    usage = "dummy [index]      insert a placeholder paragraph"

    def _text(self, terminal):
        return EditorConstants.DUMMY_PARAGRAPH_TEXT


class DelCommand(EditorCommand):
    usage = "del [index]        delete a paragraph (the last one without index)"

    def execute(self, tokens, model, terminal):
        index = parse_index(tokens)
        if model.is_empty():
            raise NothingToDelete()
        if index is None:
            index = model.last_index()
        model.delete_at(index)
        terminal.write(f"Deleted paragraph {index}.")
        return None


class ReplaceCommand(EditorCommand):
    usage = "replace [index]    replace text in a paragraph (the last one without index)"

    def execute(self, tokens, model, terminal):
        index = parse_index(tokens)
        if model.is_empty():
            raise NothingToReplace()
        if index is None:
            index = model.last_index()
        original = model.get(index)
        if original is None:
            raise IndexOutOfBounds(index, len(model))

        search = terminal.read_text(EditorConstants.SEARCH_TEXT_PROMPT)
        replacement = terminal.read_text(EditorConstants.REPLACE_TEXT_PROMPT)
        if not search:
            terminal.write("Nothing to search for; paragraph unchanged.")
            return None

        count = original.count(search)
        model.replace_at(index, original.replace(search, replacement))
        terminal.write(f"Replaced {count} occurrence(s) in paragraph {index}.")
        return None


class PrintCommand(EditorCommand):
    """Print every paragraph verbatim with its number."""

    usage = "print              show the document"

    def execute(self, tokens, model, terminal):
        terminal.write_lines(render_paragraphs(model, RawMode()))
        return None

    def resolve(self, format_mode):
        if isinstance(format_mode, FixedMode):
            return FixedPrintCommand(format_mode.width)
        return self


class FixedPrintCommand(PrintCommand):
    """Print every paragraph word-wrapped at a fixed width."""

    def __init__(self, width: int):
        self.width = width

    def execute(self, tokens, model, terminal):
        terminal.write_lines(render_paragraphs(model, FixedMode(self.width)))
        return None

    def resolve(self, format_mode):
        return PrintCommand().resolve(format_mode)


class IndexCommand(EditorCommand):
    usage = "index              list words found in more than 3 paragraphs"

    def execute(self, tokens, model, terminal):
        threshold = EditorConstants.INDEX_MIN_PARAGRAPHS
        for word, found in sorted(model.word_index().items()):
            if len(found) > threshold:
                terminal.write(f"{word}: {', '.join(str(i) for i in found)}")
        return None


class FormatCommand(EditorCommand):
    usage = "format raw|fix <w> print verbatim, or wrapped at <w> columns"

    def execute(self, tokens, model, terminal):
        arguments = tokens[1:]
        keyword = arguments[0].lower() if arguments else None

        if keyword == EditorConstants.FORMAT_RAW and len(arguments) == 1:
            mode: FormatMode = RawMode()
        elif keyword == EditorConstants.FORMAT_FIXED and len(arguments) == 2:
            width = arguments[1]
            if not _DIGITS.fullmatch(width) or int(width) == 0:
                raise InvalidWidthSyntax(width)
            mode = FixedMode(int(width))
        else:
            raise InvalidFormatMode(arguments)

        return SetFormatMode(mode)


class HelpCommand(EditorCommand):
    usage = "help               show this help text"

    def __init__(self, registry: 'CommandRegistry'):
        self._registry = registry

    def execute(self, tokens, model, terminal):
        terminal.write("Available commands:")
        for verb in self._registry.verbs():
            terminal.write(f"  {self._registry.get_command(verb, RawMode()).usage}")
        terminal.write(f"  {EditorConstants.EXIT_COMMAND:<19}leave the editor")
        return None


class CommandRegistry:
    """Registry for mapping command verbs to commands."""

    def __init__(self):
        self._commands: Dict[str, EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default verb mappings."""
        # Editing
        self.register('add', AddCommand())
        self.register('dummy', DummyCommand())
        self.register('del', DelCommand())
        self.register('replace', ReplaceCommand())

        # Display
        self.register('print', PrintCommand())
        self.register('index', IndexCommand())
        self.register('format', FormatCommand())

        self.register('help', HelpCommand(self))

    def register(self, verb: str, command: EditorCommand):
        """Register a command for a verb (case-insensitive)."""
        self._commands[verb.lower()] = command

    def verbs(self) -> list[str]:
        return sorted(self._commands)

    def get_command(self, verb: str, format_mode: FormatMode) -> EditorCommand:
        """Get the command for a verb under the current format mode.

        Raises:
            UnknownCommand: if no command is registered for the verb.
        """
        command = self._commands.get(verb.lower())
        if command is None:
            raise UnknownCommand(verb)
        return command.resolve(format_mode)

    def execute(self, tokens: list[str], model: ParagraphStore,
                terminal: 'TerminalInterface', format_mode: FormatMode) -> Effect:
        """Execute the command named by the first token.

        Returns:
            The effect produced by the command, if any
        """
        command = self.get_command(tokens[0], format_mode)
        logger.debug("dispatching %r to %s", tokens, type(command).__name__)
        return command.execute(tokens, model, terminal)
