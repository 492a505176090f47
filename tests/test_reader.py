import struct

import pytest

from gobfile.archive import GOBHeader
from gobfile.archive.reader import read
from gobfile.entry import ArchiveBacked
from gobfile.exceptions import FormatError, MagicException


def test_read_empty():
    buffer = b'GOB\n' + struct.pack('<I', 8) + struct.pack('<I', 0)

    assert read(buffer) == []


def test_read(sample_gob, sample_items):
    entries = read(sample_gob)

    assert [(_.name, _.content) for _ in entries] == sample_items
    assert [_.start for _ in entries] == [8, 12, 17]
    assert [_.size for _ in entries] == [4, 5, 11]

    for entry in entries:
        assert isinstance(entry.provenance, ArchiveBacked)
        # a view on the original buffer
        assert entry.provenance.buffer is sample_gob
        assert not entry.is_fresh


def test_read_bytearray(sample_gob, sample_items):
    entries = read(bytearray(sample_gob))

    assert [(_.name, _.content) for _ in entries] == sample_items


def test_read_name_without_terminator(make_gob):
    entries = read(make_gob([('ABCDEFGHIJKLM', b'x')]))

    assert entries[0].name == 'ABCDEFGHIJKLM'


def test_read_bad_signature(sample_gob):
    with pytest.raises(MagicException) as e:
        read(b'GOB\x00' + sample_gob[4:])

    assert isinstance(e.value, FormatError)


def test_read_truncated_header():
    with pytest.raises(FormatError):
        read(b'GOB')

    with pytest.raises(FormatError):
        read(b'GOB\n\x08\x00')


def test_read_directory_offset_out_of_bounds(sample_gob):
    buffer = sample_gob[:4] + struct.pack('<I', len(sample_gob)) + sample_gob[8:]

    with pytest.raises(FormatError) as e:
        read(buffer)

    assert 'truncated or corrupt directory' in str(e.value)

    buffer = sample_gob[:4] + struct.pack('<I', 0xfffffff0) + sample_gob[8:]

    with pytest.raises(FormatError):
        read(buffer)


def test_read_too_many_entries():
    buffer = b'GOB\n' + struct.pack('<I', 8) + struct.pack('<I', 0xffffffff) + struct.pack('<II', 8, 0) + b'A' * 13

    with pytest.raises(FormatError) as e:
        read(buffer)

    assert 'truncated or corrupt directory' in str(e.value)


def test_read_entry_out_of_bounds(make_gob):
    buffer = bytearray(make_gob([('A.BIN', b'abcd'), ('B.BIN', b'efgh')]))
    # the directory is at 16: count, then the records; make the second one too long
    struct.pack_into('<I', buffer, 16 + 4 + 21 + 4, 100)

    with pytest.raises(FormatError) as e:
        read(bytes(buffer))

    assert 'exceeds buffer bounds' in str(e.value)
    assert e.value.chain == [1, 'records', 'directory']

    buffer = bytearray(make_gob([('A.BIN', b'abcd')]))
    struct.pack_into('<I', buffer, 12 + 4, 0xffffff00)

    with pytest.raises(FormatError):
        read(bytes(buffer))


def test_header_layout(sample_gob):
    header = GOBHeader(sample_gob)

    assert header.directory_offset.value == 28
    assert header.layout == {
        'signature': (0, 4),
        'directory_offset': (4, 4),
    }
