from __future__ import annotations
from dataclasses import dataclass, field, replace
import os
import os.path
import sys
from typing import Optional
from todo.models import ConfError


PROGRAM_NAME = 'todo'


def user_data_dir() -> str:
    """Returns the per-user directory where applications conventionally keep their data.

    * Windows: ``%APPDATA%``
    * macOS: ``~/Library/Application Support``
    * Everything else: ``$XDG_DATA_HOME``, falling back to ``~/.local/share``
    """
    if sys.platform == 'win32':
        appdata = os.environ.get('APPDATA')
        if appdata:
            return appdata
        return os.path.expanduser(os.path.join('~', 'AppData', 'Roaming'))
    if sys.platform == 'darwin':
        return os.path.expanduser(os.path.join('~', 'Library', 'Application Support'))
    xdg = os.environ.get('XDG_DATA_HOME')
    if xdg and os.path.isabs(xdg):
        return xdg
    return os.path.expanduser(os.path.join('~', '.local', 'share'))


def default_notes_dir() -> str:
    return os.path.join(user_data_dir(), PROGRAM_NAME)


@dataclass
class TodoConf:
    notes_dir: str = field(default_factory=default_notes_dir)
    """The folder holding one file per note. It is created the first time a note is saved."""

    default_name: str = 'default'
    """Name of the note used when no ``--notebook`` is given on the command line."""

    editor: str = 'nano'
    """Editor command used by the ``e`` command when neither ``VISUAL`` nor ``EDITOR`` is set.

    The value is split like a shell command line, so ``'code -w'`` works.
    """

    @classmethod
    def user_config_path(cls) -> str:
        return os.path.expanduser(os.path.join('~', f'.{PROGRAM_NAME}.conf.py'))

    @classmethod
    def for_user(cls) -> TodoConf:
        """Loads configuration from ``~/.todo.conf.py``, or returns the defaults if there is no such file.

        The file is a Python script that must assign a :class:`TodoConf` to the variable ``conf``, for example:

        .. code-block:: python

           from todo.conf import *
           conf = TodoConf(notes_dir='/home/me/Dropbox/todo', editor='vim')

        Raises :exc:`todo.models.ConfError` if the file exists but does not define ``conf``.
        """
        path = cls.user_config_path()
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise ConfError('You need to assign an instance of TodoConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self) -> TodoConf:
        return replace(
            self,
            notes_dir=os.path.abspath(os.path.expanduser(self.notes_dir))
        )

    def instantiate(self, name: Optional[str] = None):
        """Creates an :class:`todo.editor.Editor` for the named note, or the default note if name is None.

        Raises :exc:`todo.models.InvalidNameError` if the name is not allowed.
        """
        from todo.editor import Editor
        from todo.store import Store
        conf = self.standardize()
        store = Store(conf.notes_dir, conf.default_name)
        return Editor(store, store.resolve(name), editor=conf.editor)
