'''
The entries of an archive.

The content of an entry has one of two provenances:

 1. ArchiveBacked: a view on the buffer of a loaded (or just written) archive,
    valid as long as the buffer is retained.
 2. Fresh: bytes owned by the entry, imported and not yet written.

The writer resolves the content with a match over these two cases, anything
else is an invalid entry.
'''
from typing import Optional, Union

from .exceptions import InvalidEntryError



class ArchiveBacked(object):

    def __init__(self, buffer, start: int, size: int):
        self.buffer = buffer
        self.start = start
        self.size = size

    def __repr__(self):
        return f'<{self.__class__.__name__}(start={self.start}, size={self.size})>'


class Fresh(object):

    def __init__(self, data: bytes):
        self.data = bytes(data)

    def __repr__(self):
        return f'<{self.__class__.__name__}(size={self.size})>'

    @property
    def size(self) -> int:
        return len(self.data)


Provenance = Union[ArchiveBacked, Fresh]


class Entry(object):
    '''One named item of the archive.

    For a fresh entry the start is provisional (the position it would have
    if the archive were written now) and it's used only for display.'''

    def __init__(self, name: str, provenance: Provenance, start: Optional[int] = None):
        self.name = name
        self.provenance = provenance
        self._provisional_start = start

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name!r}, {self.provenance!r})>'

    @property
    def is_fresh(self) -> bool:
        return isinstance(self.provenance, Fresh)

    @property
    def start(self) -> Optional[int]:
        if isinstance(self.provenance, ArchiveBacked):
            return self.provenance.start

        return self._provisional_start

    @property
    def size(self) -> int:
        return self.provenance.size

    @property
    def extension(self) -> str:
        '''The 1-3 characters after the last period, if any.'''
        _, sep, extension = self.name.rpartition('.')
        if not sep or not 1 <= len(extension) <= 3:
            return ''

        return extension

    def matches(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    @property
    def content(self) -> bytes:
        return bytes(resolve_content(self))


def resolve_content(entry: Entry):
    provenance = entry.provenance

    if isinstance(provenance, ArchiveBacked):
        end = provenance.start + provenance.size
        if provenance.buffer is None or end > len(provenance.buffer):
            raise InvalidEntryError(f'entry {entry.name!r} refers to content outside of its buffer')

        return memoryview(provenance.buffer)[provenance.start:end]
    elif isinstance(provenance, Fresh):
        return provenance.data

    raise InvalidEntryError(f'entry {entry.name!r} has no content')
