import logging
import os
from pathlib import Path

from .reader import read
from .writer import write
from .. import utils
from ..exceptions import NotFoundError


logger = logging.getLogger(__name__)


class GOBFile(object):
    '''Handle on an archive: it owns the buffer the entries refer to and the
    ordered collection of entries.

    Reloading parses the new buffer first and then replaces both at once, so
    that a failure leaves the previous archive untouched; callers keep the
    handle and never the list of entries.'''

    def __init__(self, path=None):
        self.path = path
        self.buffer = None
        self.entries = []

        if path is not None:
            self.load(path)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.path!r}, entries={len(self.entries)})>'

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, name):
        entry = self.find(name)
        if entry is None:
            raise NotFoundError(f'File {name} not found')

        return entry

    def load(self, path):
        logger.info('loading %s', path)
        self.reload(Path(path).read_bytes())
        self.path = path

    def reload(self, buffer):
        entries = read(buffer)

        self.buffer = buffer
        self.entries = entries

    def save(self, path=None) -> bytes:
        '''Write the archive to path (by default where it was loaded from).

        The whole archive is built in memory before touching the file.'''
        path = path or self.path
        if path is None:
            raise ValueError('no path to save the archive to')

        data = write(self.entries)
        logger.info('writing to %s', path)
        Path(path).write_bytes(data)
        self.buffer = data

        return data

    def find(self, name):
        return utils.find_by_name(self.entries, name)

    def filter(self, extension):
        return utils.filter_by_extension(self.entries, extension)

    def import_content(self, name, data):
        utils.import_content(self.entries, name, data)
        return self.entries[-1]

    def import_file(self, path, name=None):
        return self.import_content(name or os.path.basename(path), Path(path).read_bytes())

    def export_content(self, name) -> bytes:
        return utils.export_content(self[name])

    def export_file(self, entry, path=None):
        path = path or entry.name
        Path(path).write_bytes(utils.export_content(entry))
        logger.debug('exported %s to %s', entry.name, path)

        return path

    def remove(self, name):
        return utils.remove_by_name(self.entries, name)
