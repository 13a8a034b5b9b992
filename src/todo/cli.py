"""Command-line interface for todo."""


import argparse
import os.path
import sys
from typing import List
from terminaltables import AsciiTable
from todo.conf import TodoConf
from todo.editor import Editor
from todo.models import Error, format_lines


HELP_MESSAGE = """\
todo is a tool for quick reminders and taking notes.

usage:
    todo [-n NAME] [command...]

if you don't specify a note with -n/--notebook, the application will use a default one.
with no command, the entries of the note are printed.

commands:
    i <value> [index] Insert a value at a given index.
                      If an index is not provided, appends the value at the end of the list.
    c <value> [index] Change a value at a given index.
                      If an index is not provided, changes the last value.
    d [index...]      Delete values at given indices.
                      If no indices are provided, deletes the last value from the list.
    h                 Show this help message.
    l                 List all available notes.
    D                 Delete the specified note.
    e                 Edit a note using a text editor.
                      Will try to use the VISUAL and EDITOR environment variables.

i, c and d accept -p/--preview to print the result without saving it."""


def _print_lines(lines: List[str]) -> None:
    if not lines:
        print("you don't have any notes")
        return
    for line in format_lines(lines):
        print(line)


def _show(args, editor: Editor) -> int:
    _print_lines(editor.lines())
    return 0


def _insert(args, editor: Editor) -> int:
    _print_lines(editor.insert(args.value, args.index))
    return 0


def _change(args, editor: Editor) -> int:
    _print_lines(editor.change(args.value, args.index))
    return 0


def _delete(args, editor: Editor) -> int:
    lines, skipped = editor.delete(args.indices)
    for index in skipped:
        print(f'invalid index: {index}', file=sys.stderr)
    _print_lines(lines)
    return 0


def _help(args, editor: Editor) -> int:
    print(HELP_MESSAGE)
    return 0


def _list(args, editor: Editor) -> int:
    if args.table:
        sizes, errors = editor.note_sizes()
        for error in errors:
            print(f'{os.path.basename(error.path)}: {error.message}', file=sys.stderr)
        data = [('#', 'Note', 'Entries')] + [(str(i), name, str(sizes[name]))
                                             for i, name in enumerate(sorted(sizes), 1)]
        table = AsciiTable(data)
        table.justify_columns[0] = 'right'
        table.justify_columns[2] = 'right'
        print(table.table)
    else:
        for line in format_lines(editor.list_notes()):
            print(line)
    return 0


def _delete_file(args, editor: Editor) -> int:
    editor.delete_file()
    print(f'Deleted {editor.path}')
    return 0


def _edit(args, editor: Editor) -> int:
    editor.edit()
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='todo', description='Quick reminders and notes, one entry per line.')
    parser.set_defaults(func=_show, preview=False)
    parser.add_argument('-n', '--notebook', metavar='NAME',
                        help='Name of the note to work with. Must not contain dots or slashes. '
                             'The default note is used if omitted.')

    subs = parser.add_subparsers(title='Commands')

    p_i = subs.add_parser('i', help='Insert a value at a given index, or append it if no index is given.')
    p_i.add_argument('value')
    p_i.add_argument('index', nargs='?', type=int, help='1-based position the new value should end up at.')
    p_i.add_argument('-p', '--preview', action='store_true', help='Print the result but do not save it.')
    p_i.set_defaults(func=_insert)

    p_c = subs.add_parser('c', help='Change the value at a given index, or the last value if no index is given.')
    p_c.add_argument('value')
    p_c.add_argument('index', nargs='?', type=int, help='1-based position of the value to replace.')
    p_c.add_argument('-p', '--preview', action='store_true', help='Print the result but do not save it.')
    p_c.set_defaults(func=_change)

    p_d = subs.add_parser(
        'd',
        help='Delete the values at the given indices, or the last value if no indices are given. '
             'Indices that are out of range are reported and skipped; the rest are still deleted.')
    p_d.add_argument('indices', nargs='*', type=int)
    p_d.add_argument('-p', '--preview', action='store_true', help='Print the result but do not save it.')
    p_d.set_defaults(func=_delete)

    p_h = subs.add_parser('h', help='Show usage information.')
    p_h.set_defaults(func=_help)

    p_l = subs.add_parser('l', help='List all available notes.')
    p_l.add_argument('-t', '--table', action='store_true',
                     help='Format output as a table that includes the number of entries in each note.')
    p_l.set_defaults(func=_list)

    p_del = subs.add_parser('D', help='Delete the whole note file.')
    p_del.set_defaults(func=_delete_file)

    p_e = subs.add_parser('e', help='Edit the note in $VISUAL, $EDITOR, or the configured fallback editor.')
    p_e.set_defaults(func=_edit)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    try:
        editor = TodoConf.for_user().instantiate(args.notebook)
        editor.preview_mode = args.preview
        return args.func(args, editor)
    except Error as e:
        print(e.message, file=sys.stderr)
        return 1
