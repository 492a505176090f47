import logging
from typing import List

from . import (
    GOBHeader,
    GOBDirectory,
    GOBDirectoryRecord,
    DIRECTORY_OVERHEAD,
    HEADER_SIZE,
    NAME_LENGTH,
    RECORD_SIZE,
)
from ..codec import U32_MAX
from ..entry import Entry, ArchiveBacked, resolve_content
from ..exceptions import InvalidEntryError
from ..streams import Stream


logger = logging.getLogger(__name__)


def write(entries: List[Entry]) -> bytes:
    '''Serialize the entries, in order, into a new archive.

    The buffer is completely built before touching the entries: only at the
    end each of them is re-pointed to the new buffer at its new start, so
    that fresh entries become archive-backed. If something goes wrong the
    entries are left as they were.'''
    contents = []
    for idx, entry in enumerate(entries):
        try:
            content = resolve_content(entry)
        except InvalidEntryError as e:
            e.chain.append(idx)
            raise

        if len(content) > U32_MAX:
            raise InvalidEntryError(f'entry {entry.name!r} is too big ({len(content)} bytes)', chain=[idx])

        contents.append(content)

    total_size = HEADER_SIZE + DIRECTORY_OVERHEAD + RECORD_SIZE * len(entries) + sum(len(_) for _ in contents)
    if total_size > U32_MAX:
        raise InvalidEntryError(f'the archive would be too big ({total_size} bytes)')

    stream = Stream(bytearray(total_size))

    header = GOBHeader()
    directory = GOBDirectory()

    cursor = header.size
    for entry, content in zip(entries, contents):
        logger.debug('writing %s at %d:%d', entry.name, cursor, len(content))
        stream.seek(cursor).write(content)

        record = GOBDirectoryRecord()
        record.start.value = cursor
        record.length.value = len(content)
        record.filename.value = entry.name
        if record.filename.is_truncated:
            logger.warning('name %r is longer than %d bytes, it will be truncated', entry.name, NAME_LENGTH)

        directory.records.append(record)
        cursor += len(content)

    logger.debug('writing directory at %d', cursor)
    header.directory_offset.value = cursor
    header.pack(stream)

    directory.relayout(offset=cursor)
    logger.debug('writing directory count %d', directory.count.value)
    directory.pack(stream, relayout=False)

    data = stream.getvalue()

    for entry, record in zip(entries, directory.records):
        entry.provenance = ArchiveBacked(data, record.start.value, record.length.value)

    return data
