"""Main editor controller for the line-mode paragraph editor."""

import logging
from typing import Optional

from .commands import CommandRegistry, Effect, SetFormatMode
from .constants import EditorConstants
from .errors import EditorError
from .model import FormatMode, ParagraphStore
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class Editor:
    """Editing session: owns the document, the format mode and the command table."""

    def __init__(self, terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.model = ParagraphStore()
        self.format_mode: FormatMode = EditorConstants.DEFAULT_FORMAT_MODE
        self.command_registry = CommandRegistry()
        self.running = False

    @staticmethod
    def is_exit(tokens: list[str]) -> bool:
        """True for an empty command line or the exit keyword."""
        return not tokens or tokens[0].lower() == EditorConstants.EXIT_COMMAND

    def apply_effect(self, effect: Effect):
        if isinstance(effect, SetFormatMode):
            logger.debug("format mode %s -> %s", self.format_mode, effect.mode)
            self.format_mode = effect.mode

    def dispatch(self, tokens: list[str]):
        """Run one command and apply its effect.

        Raises:
            EditorError: if the command fails; the document is left unchanged.
        """
        effect = self.command_registry.execute(tokens, self.model, self.terminal, self.format_mode)
        self.apply_effect(effect)

    def handle_command(self, tokens: list[str]) -> bool:
        """Handle one tokenized command line.

        Returns:
            False when the session should end
        """
        if self.is_exit(tokens):
            return False
        try:
            self.dispatch(tokens)
        except EditorError as e:
            logger.info("command %r failed: %s", tokens[0], e)
            self.terminal.show_error(str(e))
        return True

    def run(self):
        """Run the main read-eval-print loop.

        Raises:
            InputReadFailure: if the input stream cannot be read.
        """
        self.running = True
        try:
            while self.running:
                tokens = self.terminal.read_command(EditorConstants.COMMAND_PROMPT)
                self.running = self.handle_command(tokens)
        finally:
            self.running = False
