"""Test the line-mode terminal interface."""

import io
import unittest

from paraedit.errors import InputReadFailure
from paraedit.terminal import TerminalInterface


class TestTerminalInterface(unittest.TestCase):

    def make(self, text=""):
        self.stdout = io.StringIO()
        return TerminalInterface(stdin=io.StringIO(text), stdout=self.stdout)

    def test_read_command_tokenizes(self):
        terminal = self.make("  Add \t 3  extra\n")
        self.assertEqual(terminal.read_command(), ["Add", "3", "extra"])
        self.assertEqual(self.stdout.getvalue(), "> ")

    def test_read_command_blank_line(self):
        terminal = self.make("   \n")
        self.assertEqual(terminal.read_command(), [])

    def test_read_command_end_of_input(self):
        terminal = self.make("")
        self.assertEqual(terminal.read_command(), [])
        self.assertEqual(self.stdout.getvalue(), "> \n")

    def test_read_text_uses_label(self):
        terminal = self.make("  keep   inner spacing \n")
        self.assertEqual(terminal.read_text("text to insert"), "keep   inner spacing")
        self.assertEqual(self.stdout.getvalue(), "text to insert> ")

    def test_reads_consecutive_lines(self):
        terminal = self.make("add\nhello\n")
        self.assertEqual(terminal.read_command(), ["add"])
        self.assertEqual(terminal.read_text("text"), "hello")

    def test_write_and_show_error(self):
        terminal = self.make()
        terminal.write("plain")
        terminal.write_lines(["a", "b"])
        terminal.show_error("bad thing")
        # Not a tty, so no styling sequences
        self.assertEqual(self.stdout.getvalue(), "plain\na\nb\nbad thing\n")

    def test_read_failure_raises_input_read_failure(self):
        class Broken(io.StringIO):
            def readline(self, *args):
                raise OSError("gone")

        terminal = TerminalInterface(stdin=Broken(), stdout=io.StringIO())
        with self.assertRaises(InputReadFailure) as ctx:
            terminal.read_text("x")
        self.assertIsInstance(ctx.exception.__cause__, OSError)
