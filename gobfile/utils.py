import logging
from typing import List, Optional

from .archive import HEADER_SIZE
from .entry import Entry, Fresh
from .exceptions import NotFoundError


logger = logging.getLogger(__name__)


def import_content(entries: List[Entry], name: str, data: bytes) -> List[Entry]:
    '''Append a fresh entry with the given content.

    Its start is only provisional: it's where the content would be if the
    archive were written now, the real one is decided by the writer.'''
    start = HEADER_SIZE
    for entry in entries:
        if entry.start is not None:
            start = entry.start
        start += entry.size

    entry = Entry(name, Fresh(data), start=start)
    logger.debug('importing %s (%d bytes) at %d', name, entry.size, start)
    entries.append(entry)

    return entries


def export_content(entry: Entry) -> bytes:
    return entry.content


def find_by_name(entries: List[Entry], name: str) -> Optional[Entry]:
    '''Case insensitive lookup: with duplicated names the first one
    in archive order wins.'''
    for entry in entries:
        if entry.matches(name):
            return entry

    return None


def filter_by_extension(entries: List[Entry], extension: str) -> List[Entry]:
    extension = extension.lower()
    return [_ for _ in entries if _.extension and _.extension.lower() == extension]


def remove_by_name(entries: List[Entry], name: str) -> Entry:
    entry = find_by_name(entries, name)
    if entry is None:
        raise NotFoundError(f'File {name} not found')

    entries.remove(entry)

    return entry
