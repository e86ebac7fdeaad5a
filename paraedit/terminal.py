"""Line-mode terminal interface using Blessed for output styling."""

import logging
import sys
from typing import Optional, TextIO

import blessed

from .constants import EditorConstants
from .errors import InputReadFailure
from .model import split_ascii_whitespace

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Reads commands and free-form text, writes output.

    ``stdin`` and ``stdout`` default to the process streams; tests pass
    ``io.StringIO`` objects instead. Blessed only emits styling sequences
    when ``stdout`` is a terminal.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.term = terminal or blessed.Terminal(stream=self.stdout)

    def _prompt(self, label: Optional[str]):
        text = (label or "") + EditorConstants.PROMPT_SUFFIX
        print(self.term.bold(text), end='', file=self.stdout, flush=True)

    def _read_line(self) -> str:
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("could not read from input: %s", e)
            raise InputReadFailure(f"Could not read input: {e}") from e
        if not line:
            # End of input: move past the dangling prompt
            print(file=self.stdout)
        return line

    def read_command(self, label: Optional[str] = None) -> list[str]:
        """Prompt for a command line and return its tokens.

        Returns an empty list at end of input.
        """
        self._prompt(label)
        return split_ascii_whitespace(self._read_line().strip())

    def read_text(self, label: str) -> str:
        """Prompt for one free-form line and return it trimmed, untokenized."""
        self._prompt(label)
        return self._read_line().strip()

    def write(self, text: str = ""):
        print(text, file=self.stdout)

    def write_lines(self, lines: list[str]):
        for line in lines:
            self.write(line)

    def show_error(self, message: str):
        self.write(self.term.red(message))
