"""Keeps short lists of reminders and notes in plain text files.

If you installed via ``pip``, run ``todo h`` to get help.
Or, run ``python3 -m todo h``.

To use the Python API, look at :class:`todo.editor.Editor`
"""
