"""
Core module for the abstraction of a binary layout

"""
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import (
    ChunkUnpackException,
    MagicException,
    UnpackException,
)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: its main attributes
    are offset and size that identify a Chunk.

    A Chunk can contain sub-chunks: the fields are declared as class attributes
    and are packed/unpacked in the order of declaration.

    Passing data (a path, bytes or a Stream) to the constructor unpacks it.
    """

    def __init__(self, data=None, **kwargs):
        super().__init__(**kwargs)

        if data is not None:
            stream = data if isinstance(data, Stream) else Stream(data)
            self.logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, stream))
            self.unpack(stream)
        else:
            self.relayout()

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_value(self):
        return self

    def _set_value(self, value):
        raise AttributeError(f'cannot set the value of chunk \'{self.__class__.__name__}\'')

    def _get_size(self):
        '''the size MUST be derived from the subchunks'''
        return sum(field.size for _, field in self.get_fields())

    def _get_raw(self):
        return b''.join(field.raw for _, field in self.get_fields())

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def relayout(self, offset=None):
        '''This method triggers the chunk's children to reset the offsets
        in order to pack correctly.'''
        if offset is not None:
            self.offset = offset

        if self.offset is None:
            self.offset = 0

        size = 0
        for field_name, field_instance in self.get_fields():
            self.logger.debug('relayouting %s.%s' % (self.__class__.__name__, field_name))
            size += field_instance.relayout(offset=self.offset + size)

        return size

    def pack(self, stream=None, relayout=True):
        '''Write the chunk into the stream, at the offset of each field.

        Without a stream a new one of the exact size of the chunk is created
        and the resulting bytes are returned.'''
        if relayout:
            self.relayout()

        stream = Stream(bytearray(self.offset + self.size)) if stream is None else stream

        for field_name, field_instance in self.get_fields():
            self.logger.debug('packing %s.%s at offset %08x' % (
                self.__class__.__name__, field_name, field_instance.offset))
            field_instance.pack(stream, relayout=False)

        return stream.getvalue()

    def unpack(self, stream):
        '''Take the binary data from the stream, starting from its current
        position, and fill the fields in order of declaration.'''
        self.offset = stream.tell()

        for field_name, field in self.get_fields():
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                field.unpack(stream)
            except UnpackException as e:
                chain = e.chain + [field_name]
                raise ChunkUnpackException(e.msg, chain=chain) from e
            except MagicException as e:
                e.chain.append(field_name)
                raise
