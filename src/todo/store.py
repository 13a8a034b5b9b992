"""Provides the :class:`Store` class, which reads and writes note files."""

import os
import os.path
from typing import List, Optional
from todo.models import InvalidNameError, NoteNotFoundError, StoreIOError


def _check_name(name: str) -> None:
    seps = {'/', os.sep}
    if os.altsep:
        seps.add(os.altsep)
    if not name or '.' in name or any(sep in name for sep in seps):
        raise InvalidNameError(name)


class Store:
    """Maps note names to files inside a single notes directory, and reads/writes their entries.

    Each note is a UTF-8 text file holding one entry per line. Files are created on first save, and a
    missing file reads as a note with no entries.

    .. attribute:: notes_dir
       :type: str

    .. attribute:: default_name
       :type: str
    """
    def __init__(self, notes_dir: str, default_name: str = 'default'):
        self.notes_dir = notes_dir
        self.default_name = default_name

    def resolve(self, name: Optional[str] = None) -> str:
        """Returns the path of the file for the named note, or for the default note if name is None.

        Raises :exc:`todo.models.InvalidNameError` if the name is empty or contains a dot or path separator.
        """
        if name is None:
            return os.path.join(self.notes_dir, self.default_name)
        _check_name(name)
        return os.path.join(self.notes_dir, name)

    def load(self, path: str) -> List[str]:
        """Returns the entries stored at path, or an empty list if the file does not exist.

        Blank lines are kept. Carriage returns left over from CRLF line endings are dropped.
        """
        try:
            with open(path, 'r', encoding='utf-8', newline='') as file:
                text = file.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f'failed to read file: {e}', path, e)
        if not text:
            return []
        lines = text.split('\n')
        if text.endswith('\n'):
            lines.pop()
        return [line[:-1] if line.endswith('\r') else line for line in lines]

    def save(self, path: str, lines: List[str]) -> None:
        """Overwrites the file at path with the given entries, creating the notes directory if needed.

        Every entry is followed by a newline; an empty list produces an empty file.
        """
        text = '\n'.join(lines) + '\n' if lines else ''
        self.ensure_dir()
        try:
            with open(path, 'w', encoding='utf-8', newline='') as file:
                file.write(text)
        except OSError as e:
            raise StoreIOError(f'failed to write file: {e}', path, e)

    def ensure_dir(self) -> None:
        """Creates the notes directory if it does not exist yet."""
        try:
            os.makedirs(self.notes_dir, exist_ok=True)
        except OSError as e:
            raise StoreIOError(f'failed to create directory: {e}', self.notes_dir, e)

    def delete(self, path: str) -> None:
        """Removes the note file at path.

        Raises :exc:`todo.models.NoteNotFoundError` if there is no such file.
        """
        if not os.path.isfile(path):
            raise NoteNotFoundError(path)
        try:
            os.remove(path)
        except OSError as e:
            raise StoreIOError(f'failed to delete file: {e}', path, e)

    def names(self) -> List[str]:
        """Returns the names of all notes in the notes directory, sorted alphabetically."""
        try:
            entries = list(os.scandir(self.notes_dir))
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StoreIOError(f'failed to list notes: {e}', self.notes_dir, e)
        return sorted(entry.name for entry in entries if entry.is_file())
