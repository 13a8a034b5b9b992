"""Defines the errors raised while working with notes, and helpers for displaying note lists.

The most important class is :class:`Error`, the base of every error the CLI reports to the user.
"""

from typing import Iterator, List


class Error(Exception):
    """Base class for the errors that :func:`todo.cli.main` reports as a message and a failure exit status."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfError(Error):
    """Raised when the user's config file exists but does not define usable configuration."""


class InvalidNameError(Error):
    """Raised when a note name could escape the notes directory or be mistaken for a file extension."""
    def __init__(self, name: str):
        super().__init__(f"invalid note name '{name}': don't use dots or slashes")
        self.name = name


class MissingValueError(Error):
    """Raised when inserting or changing an entry without any text."""
    def __init__(self):
        super().__init__("you didn't provide a value")


class InvalidValueError(Error):
    """Raised when an entry's text contains a line break, which would split it into several entries on disk."""
    def __init__(self, value: str):
        super().__init__("values can't contain line breaks")
        self.value = value


class InvalidIndexError(Error):
    """Raised when an index is outside the range allowed by the operation."""
    def __init__(self, index: int):
        super().__init__(f'invalid index: {index}')
        self.index = index


class EmptyListError(Error):
    """Raised when changing or deleting the last entry of a note that has no entries."""
    def __init__(self, action: str):
        super().__init__(f'no lines to {action}')
        self.action = action


class StoreIOError(Error):
    """Raised when a note file cannot be read or written."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class NoteNotFoundError(Error):
    """Raised when deleting a note file that does not exist."""
    def __init__(self, path: str):
        super().__init__('file does not exist')
        self.path = path


class EditorLaunchError(Error):
    """Raised when the external text editor cannot be started."""
    def __init__(self, command: str, cause: BaseException = None):
        super().__init__(f'failed to open editor: {command}')
        self.command = command
        self.cause = cause


def format_lines(lines: List[str]) -> Iterator[str]:
    """Yields each entry prefixed with its 1-based index.

    Indices are right-justified to the width of the largest one, so for a ten-entry list the
    first line looks like `` 1: buy milk``.
    """
    width = len(str(len(lines)))
    for i, line in enumerate(lines, 1):
        yield f'{i:>{width}}: {line}'
