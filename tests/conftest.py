"""
Pytest configuration and shared fixtures.
"""
import struct

import pytest


def build_gob(items):
    '''Encode by hand an archive with the given (name, content) pairs, the
    contents in order starting at offset 8 and the directory at the end.'''
    contents = b''
    records = b''
    offset = 8
    for name, content in items:
        records += struct.pack('<II', offset, len(content)) + name.encode('latin1')[:13].ljust(13, b'\x00')
        contents += content
        offset += len(content)

    return b'GOB\n' + struct.pack('<I', offset) + contents + struct.pack('<I', len(items)) + records


@pytest.fixture
def make_gob():
    return build_gob


@pytest.fixture
def sample_items():
    return [
        ('LEVEL1.LEV', b'\x01\x02\x03\x04'),
        ('README.TXT', b'hello'),
        ('NOTES.txt', b'some notes\n'),
    ]


@pytest.fixture
def sample_gob(sample_items):
    return build_gob(sample_items)


@pytest.fixture
def gob_path(tmp_path, sample_gob):
    path = tmp_path / 'SAMPLE.GOB'
    path.write_bytes(sample_gob)
    return path
