import os
from pathlib import Path
import pytest
from todo.models import InvalidNameError, NoteNotFoundError, StoreIOError
from todo.store import Store


def test_resolve_default():
    store = Store('/notes')
    assert store.resolve() == '/notes/default'
    assert Store('/notes', 'inbox').resolve() == '/notes/inbox'


def test_resolve_name():
    store = Store('/notes')
    assert store.resolve('groceries') == '/notes/groceries'
    assert store.resolve('my-list_2') == '/notes/my-list_2'


@pytest.mark.parametrize('name', ['', '.', '..', 'foo.txt', '.hidden', 'a/b', '../etc', '/etc'])
def test_resolve_rejects_unsafe_names(name):
    with pytest.raises(InvalidNameError) as excinfo:
        Store('/notes').resolve(name)
    assert excinfo.value.name == name


def test_load_missing(fs):
    assert Store('/notes').load('/notes/default') == []


def test_load(fs):
    fs.create_file('/notes/default', contents='one\ntwo\nthree\n')
    assert Store('/notes').load('/notes/default') == ['one', 'two', 'three']


def test_load_without_trailing_newline(fs):
    fs.create_file('/notes/default', contents='one\ntwo')
    assert Store('/notes').load('/notes/default') == ['one', 'two']


def test_load_keeps_blank_lines(fs):
    fs.create_file('/notes/default', contents='one\n\ntwo\n\n')
    assert Store('/notes').load('/notes/default') == ['one', '', 'two', '']


def test_load_crlf(fs):
    fs.create_file('/notes/default', contents='one\r\ntwo\r\n')
    assert Store('/notes').load('/notes/default') == ['one', 'two']


def test_load_empty_file(fs):
    fs.create_file('/notes/default', contents='')
    assert Store('/notes').load('/notes/default') == []


def test_load_unreadable(fs):
    fs.create_dir('/notes/default')
    with pytest.raises(StoreIOError) as excinfo:
        Store('/notes').load('/notes/default')
    assert excinfo.value.path == '/notes/default'


def test_save_creates_directory(fs):
    store = Store('/data/todo')
    store.save('/data/todo/default', ['one', 'two'])
    assert Path('/data/todo/default').read_text() == 'one\ntwo\n'


def test_save_empty(fs):
    fs.create_file('/notes/default', contents='one\n')
    Store('/notes').save('/notes/default', [])
    assert Path('/notes/default').read_text() == ''


def test_save_failure_leaves_lines_alone(fs):
    fs.create_dir('/notes/default')
    lines = ['one']
    with pytest.raises(StoreIOError):
        Store('/notes').save('/notes/default', lines)
    assert lines == ['one']


def test_save_load_idempotent(fs):
    fs.create_file('/notes/default', contents='one\n\ntwo')
    store = Store('/notes')
    store.save('/notes/default', store.load('/notes/default'))
    first = Path('/notes/default').read_text()
    store.save('/notes/default', store.load('/notes/default'))
    assert Path('/notes/default').read_text() == first == 'one\n\ntwo\n'


def test_delete(fs):
    fs.create_file('/notes/default', contents='one\n')
    Store('/notes').delete('/notes/default')
    assert not os.path.exists('/notes/default')


def test_delete_missing(fs):
    with pytest.raises(NoteNotFoundError) as excinfo:
        Store('/notes').delete('/notes/default')
    assert excinfo.value.path == '/notes/default'


def test_names(fs):
    fs.create_file('/notes/work')
    fs.create_file('/notes/default')
    fs.create_file('/notes/groceries')
    fs.create_dir('/notes/subdir')
    assert Store('/notes').names() == ['default', 'groceries', 'work']


def test_names_missing_directory(fs):
    assert Store('/notes').names() == []


def test_ensure_dir(fs):
    Store('/data/todo').ensure_dir()
    assert Path('/data/todo').is_dir()
    fs.create_file('/blocked')
    with pytest.raises(StoreIOError) as excinfo:
        Store('/blocked').ensure_dir()
    assert excinfo.value.path == '/blocked'
