"""Exceptions raised by the paraedit editor.

Everything deriving from ``EditorError`` is recoverable: the main loop prints
the message and waits for the next command. ``InputReadFailure`` is not an
``EditorError`` and ends the session.
"""


class EditorError(Exception):
    """Base class for errors reported to the user without ending the session."""


class UnknownCommand(EditorError):
    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"Unknown command: '{verb}'. Type 'help' for usage.")


class InvalidIndexSyntax(EditorError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid paragraph index: '{token}'. Expected a non-negative integer.")


class InvalidWidthSyntax(EditorError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid width: '{token}'. Expected a positive integer.")


class InvalidFormatMode(EditorError):
    def __init__(self, arguments: list[str]):
        self.arguments = list(arguments)
        shown = " ".join(self.arguments) or "(nothing)"
        super().__init__(f"Invalid format mode: {shown}. Use 'format raw' or 'format fix <width>'.")


class IndexOutOfBounds(EditorError):
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Paragraph index {index} is out of bounds (document has {length} paragraph(s)).")


class NothingToDelete(EditorError):
    def __init__(self):
        super().__init__("Nothing to delete: the document is empty.")


class NothingToReplace(EditorError):
    def __init__(self):
        super().__init__("Nothing to replace: the document is empty.")


class InputReadFailure(Exception):
    """Reading from the input stream failed. Fatal for the session."""
