import io

import pytest

from gobfile.archive.file import GOBFile
from gobfile.entry import Entry, ArchiveBacked, Fresh
from gobfile.shell import GOBShell, format_entry


@pytest.fixture
def shell(gob_path, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return GOBShell(GOBFile(str(gob_path)), stdout=io.StringIO())


def output(shell):
    return shell.stdout.getvalue().splitlines()


def test_format_entry():
    backed = Entry('LEVEL1.LEV', ArchiveBacked(b'', 8, 4))
    fresh = Entry('NEW.BIN', Fresh(b'abc'), start=12)

    assert format_entry(backed) == 'LEVEL1.LEV' + ' ' * 6 + ' ' * 15 + '4' + ' ' * 15 + '8'
    assert format_entry(fresh) == '*NEW.BIN' + ' ' * 8 + ' ' * 15 + '3' + ' ' * 14 + '12'


def test_format_entry_without_start():
    entry = Entry('NEW.BIN', Fresh(b'abc'))

    assert format_entry(entry) == '*NEW.BIN' + ' ' * 8 + ' ' * 15 + '3' + ' ' * 16


def test_list(shell):
    shell.onecmd('ls')

    assert [_.split() for _ in output(shell)] == [
        ['LEVEL1.LEV', '4', '8'],
        ['README.TXT', '5', '12'],
        ['NOTES.txt', '11', '17'],
    ]


def test_list_extension(shell):
    shell.onecmd('dir *.txt')
    shell.onecmd('list README.TXT')

    lines = output(shell)

    assert [_.split()[0] for _ in lines[:2]] == ['README.TXT', 'NOTES.txt']
    assert lines[2:] == ['Invalid file name or pattern']


def test_unknown_and_arguments(shell):
    assert shell.onecmd('frobnicate')
    assert shell.onecmd('load')
    assert shell.onecmd('ls a b')
    assert shell.onecmd('   ')

    assert output(shell) == [
        'Unknown command frobnicate',
        'Invalid number of arguments',
        'Invalid number of arguments',
    ]


def test_help(shell):
    shell.onecmd('h')

    assert output(shell)[0] == 'Help'


def test_export(shell, tmp_path):
    shell.onecmd('x LEVEL1.LEV')
    shell.onecmd('export readme.txt copy.txt')
    shell.onecmd('x MISSING.TXT')

    assert (tmp_path / 'LEVEL1.LEV').read_bytes() == b'\x01\x02\x03\x04'
    assert (tmp_path / 'copy.txt').read_bytes() == b'hello'
    assert output(shell) == [
        'Writing LEVEL1.LEV      4',
        'Writing README.TXT      5',
        'File MISSING.TXT not found',
    ]


def test_export_extension(shell, tmp_path):
    shell.onecmd('ex *.TXT')
    shell.onecmd('ex *.PCX')

    assert (tmp_path / 'README.TXT').read_bytes() == b'hello'
    assert (tmp_path / 'NOTES.txt').read_bytes() == b'some notes\n'
    assert output(shell)[-1] == 'No files matching *.PCX'


def test_import_save_load(shell, tmp_path):
    (tmp_path / 'EXTRA.DAT').write_bytes(b'extra')

    shell.run(io.StringIO('\n'.join([
        'i EXTRA.DAT',
        'im EXTRA.DAT COPY.DAT',
        'rm README.TXT',
        'ls',
        's NEW.GOB',
        'l NEW.GOB',
        'ls',
    ]) + '\n'))

    lines = output(shell)

    assert lines[:4] == [
        'LEVEL1.LEV' + ' ' * 6 + '4'.rjust(16) + '8'.rjust(16),
        'NOTES.txt' + ' ' * 7 + '11'.rjust(16) + '17'.rjust(16),
        '*EXTRA.DAT' + ' ' * 6 + '5'.rjust(16) + '28'.rjust(16),
        '*COPY.DAT' + ' ' * 7 + '5'.rjust(16) + '33'.rjust(16),
    ]
    assert lines[4:6] == ['Writing to NEW.GOB', 'NEW.GOB wrote']
    assert [_.split() for _ in lines[6:]] == [
        ['LEVEL1.LEV', '4', '8'],
        ['NOTES.txt', '11', '12'],
        ['EXTRA.DAT', '5', '23'],
        ['COPY.DAT', '5', '28'],
    ]
    assert shell.gob.path == 'NEW.GOB'


def test_errors_keep_going(shell):
    shell.onecmd('l MISSING.GOB')
    shell.onecmd('i MISSING.DAT')

    assert all(_.startswith('Error: ') for _ in output(shell))
    assert len(shell.gob) == 3


def test_quit(shell):
    shell.run(io.StringIO('quit\nls\n'))

    assert output(shell) == []
    assert not shell.onecmd('exit')


def test_save_without_path(tmp_path):
    shell = GOBShell(GOBFile(), stdout=io.StringIO())

    shell.onecmd('s')

    assert output(shell) == ['Error: no path to save the archive to']


def test_list_entry_without_start(shell):
    shell.gob.entries.append(Entry('NEW.BIN', Fresh(b'abc')))

    shell.onecmd('ls')

    assert output(shell)[-1].split() == ['*NEW.BIN', '3']


def test_export_extension_with_output(shell, tmp_path):
    shell.onecmd('x *.TXT OUT.TXT')

    assert output(shell) == ['Invalid number of arguments']
    assert not (tmp_path / 'OUT.TXT').exists()
    assert not (tmp_path / 'README.TXT').exists()
