"""Provides the main entry point for working with a note programmatically, :class:`Editor`"""

import os
import shlex
import subprocess
from typing import Dict, Iterable, List, Optional, Tuple
from todo.models import EditorLaunchError, EmptyListError, InvalidIndexError, InvalidValueError, \
    MissingValueError, StoreIOError
from todo.store import Store


def _check_value(value: str) -> None:
    if not value:
        raise MissingValueError()
    if '\n' in value or '\r' in value:
        raise InvalidValueError(value)


class Editor:
    """Applies insert/change/delete operations to the entries of a single note.

    Every mutating method loads the current entries from the :class:`todo.store.Store`, computes the new list,
    saves it (unless :attr:`preview_mode` is set), and returns it. Indices are 1-based.

    Generally, you should get an instance using :meth:`todo.conf.TodoConf.instantiate`.

    .. attribute:: store
       :type: todo.store.Store

    .. attribute:: path
       :type: str

       The resolved file path of the note being edited.

    .. attribute:: preview_mode
       :type: bool

       If True, mutating methods return the new entries without saving them.

    Example:

    .. code-block:: python

       from todo.conf import TodoConf
       editor = TodoConf.for_user().instantiate('groceries')
       editor.insert('buy milk')
       editor.change('buy oat milk', 1)
    """
    def __init__(self, store: Store, path: str, editor: str = 'nano', preview_mode: bool = False):
        self.store = store
        self.path = path
        self.editor = editor
        self.preview_mode = preview_mode

    def lines(self) -> List[str]:
        """Returns the current entries of the note."""
        return self.store.load(self.path)

    def _save(self, lines: List[str]) -> List[str]:
        if not self.preview_mode:
            self.store.save(self.path, lines)
        return lines

    def insert(self, value: str, index: Optional[int] = None) -> List[str]:
        """Inserts value so that it ends up at position index, shifting later entries down.

        If index is None the value is appended. Raises :exc:`todo.models.InvalidIndexError` unless
        ``1 <= index <= len + 1``.
        """
        _check_value(value)
        lines = self.lines()
        if index is None:
            lines.append(value)
        else:
            if not 1 <= index <= len(lines) + 1:
                raise InvalidIndexError(index)
            lines.insert(index - 1, value)
        return self._save(lines)

    def change(self, value: str, index: Optional[int] = None) -> List[str]:
        """Replaces the entry at index (or the last entry, if index is None) with value."""
        _check_value(value)
        lines = self.lines()
        if not lines:
            raise EmptyListError('change')
        if index is None:
            index = len(lines)
        if not 1 <= index <= len(lines):
            raise InvalidIndexError(index)
        lines[index - 1] = value
        return self._save(lines)

    def delete(self, indices: Optional[Iterable[int]] = None) -> Tuple[List[str], List[int]]:
        """Removes the entries at the given indices, or the last entry if no indices are given.

        Indices refer to positions before anything is removed, so ``delete([1, 2])`` removes the first
        two entries regardless of argument order. Duplicates are ignored.

        Out-of-range indices do not abort the operation: they are skipped, and returned in ascending order
        as the second element of the result so the caller can warn about them. The entries at the
        remaining indices are still removed. If every index is skipped, nothing is saved, so a mistyped note
        name does not leave an empty file behind.

        Raises :exc:`todo.models.EmptyListError` if no indices are given and the note has no entries.
        """
        lines = self.lines()
        wanted = set(indices or ())
        if not wanted:
            if not lines:
                raise EmptyListError('delete')
            lines.pop()
            return self._save(lines), []

        skipped = sorted(i for i in wanted if not 1 <= i <= len(lines))
        if len(skipped) == len(wanted):
            return lines, skipped
        lines = [line for i, line in enumerate(lines, 1) if i not in wanted]
        return self._save(lines), skipped

    def delete_file(self) -> None:
        """Deletes the whole note file.

        Raises :exc:`todo.models.NoteNotFoundError` if it does not exist.
        """
        self.store.delete(self.path)

    def list_notes(self) -> List[str]:
        """Returns the names of every note stored alongside this one."""
        return self.store.names()

    def note_sizes(self) -> Tuple[Dict[str, int], List[StoreIOError]]:
        """Returns a map of note names to the number of entries in each note.

        Notes that cannot be read are left out of the map; the errors for them are returned as the second
        element of the result.
        """
        sizes = {}
        errors = []
        for name in self.store.names():
            try:
                sizes[name] = len(self.store.load(os.path.join(self.store.notes_dir, name)))
            except StoreIOError as e:
                errors.append(e)
        return sizes, errors

    def editor_command(self) -> str:
        """Returns the command for editing notes: ``$VISUAL``, else ``$EDITOR``, else the configured fallback."""
        return os.environ.get('VISUAL') or os.environ.get('EDITOR') or self.editor

    def edit(self) -> int:
        """Opens the note in a text editor and waits for it to exit.

        Returns the editor's exit status. Raises :exc:`todo.models.EditorLaunchError` if it cannot be started,
        or :exc:`todo.models.StoreIOError` if the notes directory cannot be created.
        """
        command = self.editor_command()
        try:
            argv = shlex.split(command)
        except ValueError as e:
            raise EditorLaunchError(command, e)
        if not argv:
            raise EditorLaunchError(command)
        self.store.ensure_dir()
        try:
            proc = subprocess.run(argv + [self.path])
        except OSError as e:
            raise EditorLaunchError(command, e)
        return proc.returncode
