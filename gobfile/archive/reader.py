import logging
from typing import List

from . import GOBHeader, GOBDirectory, DIRECTORY_OVERHEAD
from ..entry import Entry, ArchiveBacked
from ..exceptions import FormatError, UnpackException
from ..streams import Stream


logger = logging.getLogger(__name__)


def read(buffer) -> List[Entry]:
    '''Parse the archive contained into buffer and return its entries
    in directory order.

    The entries are archive-backed: they refer to buffer itself, that must
    be retained for as long as the entries are in use. Any inconsistency
    between the directory and the size of the buffer raises FormatError.'''
    stream = Stream(buffer)
    buffer = stream.obj

    try:
        header = GOBHeader(stream)
    except UnpackException as e:
        raise FormatError('truncated header', chain=e.chain + ['header']) from e

    directory_offset = header.directory_offset.value
    logger.debug('directory at offset %d', directory_offset)

    if directory_offset + DIRECTORY_OVERHEAD > len(stream):
        raise FormatError(
            f'truncated or corrupt directory: offset {directory_offset} is outside a buffer of {len(stream)} bytes',
            chain=['directory_offset', 'header'])

    stream.seek(directory_offset)
    try:
        directory = GOBDirectory(stream)
    except UnpackException as e:
        raise FormatError('truncated or corrupt directory', chain=e.chain + ['directory']) from e

    logger.debug('directory with %d entries', directory.count.value)

    entries = []
    for idx, record in enumerate(directory.records):
        start, size = record.start.value, record.length.value
        name = record.filename.value

        if start + size > len(stream):
            raise FormatError(
                f'entry {name!r} exceeds buffer bounds: [{start}, {start + size}) with a buffer of {len(stream)} bytes',
                chain=[idx, 'records', 'directory'])

        logger.debug('%s at %d:%d', name, start, size)
        entries.append(Entry(name, ArchiveBacked(buffer, start, size)))

    return entries
