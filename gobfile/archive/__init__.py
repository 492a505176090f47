'''
# GOB container archive

A GOB file packs several named blobs one after the other, followed by a
directory describing where each of them is and how big it is

  .---------------------------------.
  | signature "GOB\\n"               |
  | directory offset                |
  | content 1                       |
  | content 2                       |
    ...
  | content N                       |
  | directory: entry count          |
  | directory record 1              |
    ...
  | directory record N              |
  '---------------------------------'

All the integers are unsigned 32 bits little endian, the contents are
back-to-back without padding or alignment. There is no compression,
no checksum and no version field.
'''
from ..core import Chunk
from .. import fields
from ..properties import Dependency


GOB_SIGNATURE = 'GOB\n'

NAME_LENGTH = 13


class GOBHeader(Chunk):
    signature        = fields.FixedLengthString(4, default=GOB_SIGNATURE, is_magic=True)
    directory_offset = fields.StructField('I')


class GOBDirectoryRecord(Chunk):
    '''21 bytes describing one entry: where its content starts, how long it is
    and its name (NUL terminated if shorter than 13 bytes).'''
    start    = fields.StructField('I')
    length   = fields.StructField('I')
    filename = fields.NullTerminatedString(NAME_LENGTH)


class GOBDirectory(Chunk):
    count   = fields.StructField('I')
    records = fields.ArrayField(GOBDirectoryRecord, n=Dependency('.count'))


HEADER_SIZE = GOBHeader().size
RECORD_SIZE = GOBDirectoryRecord().size
DIRECTORY_OVERHEAD = GOBDirectory().size
