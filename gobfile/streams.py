import logging
import os
from pathlib import Path

from .exceptions import UnpackException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around a buffer to uniform its properties:
    mainly we need seek()/read()/write() that never go outside the
    underlying data.

    A stream built from bytes is read-only, from a bytearray is writable
    but it never grows: the writer allocates the exact size in advance.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a buffer'''
        self.obj = obj
        self.writable = False
        self._offset = 0

        if isinstance(obj, os.PathLike):
            self.obj = str(obj)

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % obj.__class__.__name__)

        init_method()

    def __len__(self):
        return len(self.obj)

    def __repr__(self):
        return f'<{self.__class__.__name__}(size={len(self)}, offset={self._offset})>'

    def init_str(self):
        '''We think this is a path'''
        logger.debug('reading path \'%s\'' % self.obj)
        self.obj = Path(self.obj).read_bytes()

    def init_bytes(self):
        pass

    def init_memoryview(self):
        self.obj = self.obj.cast('B')

    def init_bytearray(self):
        self.writable = True

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)
        if offset < 0:
            raise ValueError(f'negative offset {offset}')

        self._offset = offset

        return self

    def tell(self):
        return self._offset

    def read(self, size):
        '''Read exactly size bytes, a short read is an error.'''
        end = self._offset + size
        if end > len(self.obj):
            raise UnpackException(
                f'cannot read {size} bytes at offset {self._offset}, the stream has {len(self.obj)} bytes')

        data = bytes(self.obj[self._offset:end])
        self._offset = end

        return data

    def write(self, data):
        if not self.writable:
            raise ValueError('the stream is read-only')

        end = self._offset + len(data)
        if end > len(self.obj):
            raise ValueError(
                f'cannot write {len(data)} bytes at offset {self._offset}, the stream has {len(self.obj)} bytes')

        self.obj[self._offset:end] = data
        self._offset = end

        return len(data)

    def getvalue(self):
        return bytes(self.obj)
