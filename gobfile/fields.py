"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without need for relayouting.
"""
import logging
import struct

from .codec import (
    read_fixed_string,
    read_terminated_string,
    write_fixed_string,
    write_terminated_string,
)
from .meta import FieldBase
from .properties import Dependency
from .exceptions import UnpackException, MagicException


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, *args, name=None, father=None, default=None, offset=None, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.value)

    def _get_value(self):
        return self._value

    def _set_value(self, value):
        self._value = value

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value(value))

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _get_raw(self) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_raw() not implemented")

    def _set_raw(self, raw) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}._set_raw() not implemented")

    raw = property(
        fget=lambda self: self._get_raw(),
        fset=lambda self, raw: self._set_raw(raw),
    )

    def relayout(self, offset=None):
        if offset is not None:
            self.offset = offset

        return self.size

    def pack(self, stream, relayout=True):
        if relayout:
            self.relayout()

        if self.offset is not None:
            stream.seek(self.offset)

        stream.write(self.raw)

    def unpack(self, stream):
        self.offset = stream.tell()
        self.raw = stream.read(self.size)


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes, always little endian.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def get_format(self):
        return '<%s' % self.format

    def _set_value(self, value):
        try:
            struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f'value {value!r} doesn\'t fit into field {self.name!r}: {e}')

        self._value = value

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _get_raw(self) -> bytes:
        return struct.pack(self.get_format(), self.value)

    def _set_raw(self, raw: bytes) -> None:
        try:
            self._value = struct.unpack(self.get_format(), raw)[0]
        except struct.error as e:
            self.logger.error(e)
            raise UnpackException(str(e))


class StringField(Field):
    """Represent a contiguous chunk of bytes."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __len__(self):
        return self.length

    def value_from_default(self):
        return b'\x00' * self.length if self.default is None else self.default

    def _get_size(self):
        return self.length

    def _set_value(self, value) -> None:
        if len(value) != self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        self._value = bytes(value)

    def _get_raw(self):
        return self.value

    def _set_raw(self, raw):
        self.value = raw


class FixedLengthString(StringField):
    """A string of single-byte characters occupying exactly the length of the field.

    With is_magic=True the unpacked value must be equal to the default."""

    def value_from_default(self):
        return '\x00' * self.length if self.default is None else self.default

    def _set_value(self, value) -> None:
        if len(value) != self.length:
            raise ValueError(f'class \'{self.__class__.__name__}\' can only accept strings of length {self.length}')

        self._value = value

    def _get_raw(self):
        raw = bytearray(self.length)
        write_fixed_string(raw, 0, self.value)
        return bytes(raw)

    def _set_raw(self, raw):
        value = read_fixed_string(raw, 0, self.length)
        if self.is_magic and value != self.default:
            self.logger.warning(f'the magic doesn\'t correspond: {value!r} instead of {self.default!r}')
            raise MagicException(f'bad magic {value!r}')

        self.value = value


class NullTerminatedString(StringField):
    """A string stored into a field of fixed size, terminated by a NUL byte
    when shorter than the field.

    The value can be longer than the field: it's silently truncated when packed."""

    def value_from_default(self):
        return '' if self.default is None else self.default

    def _set_value(self, value) -> None:
        self._value = value

    def _get_raw(self):
        raw = bytearray(self.length)
        write_terminated_string(raw, 0, self.length, self.value)
        return bytes(raw)

    def _set_raw(self, raw):
        self._value = read_terminated_string(raw, 0, self.length)

    @property
    def is_truncated(self):
        return len(self.value) > self.length


class ArrayField(Field):
    '''Un/Pack an array of Chunks.

    You can indicate an explicit number of elements via the parameter named "n"
    or a Dependency on the field containing it.
    '''

    def __init__(self, field_cls, n=0, **kw):
        if not isinstance(n, (Dependency, int)):
            raise ValueError('n is \'%s\' must be of the right type' % n.__class__.__name__)

        self.field_cls = field_cls
        self._n = n

        super().__init__(**kw)

    def value_from_default(self):
        return [] if self.default is None else list(self.default)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __getitem__(self, item):
        return self.value[item]

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    @property
    def n(self):
        if isinstance(self._n, Dependency):
            return self._n.resolve(self)

        return self._n

    def _get_raw(self):
        return b''.join(element.raw for element in self.value)

    def _get_size(self):
        return sum(element.size for element in self.value)

    def relayout(self, offset=None):
        super().relayout(offset=offset)

        # packing reverses the dependency
        if isinstance(self._n, Dependency):
            self._n.update(self, len(self.value))

        size = 0
        for element in self.value:
            size += element.relayout(offset=(self.offset or 0) + size)

        return size

    def pack(self, stream, relayout=True):
        if relayout:
            self.relayout()

        for element in self.value:
            element.pack(stream, relayout=False)

    def instance_element(self):
        return self.field_cls(father=self)

    def unpack(self, stream):
        self.offset = stream.tell()
        n = self.n
        self.logger.debug('unpacking %d elements of %s', n, self.field_cls.__name__)

        elements = []
        for idx in range(n):
            element = self.instance_element()
            try:
                element.unpack(stream)
            except UnpackException as e:
                e.chain.append(idx)
                raise

            elements.append(element)

        self.value = elements

    def append(self, element):
        element.father = self
        self.value.append(element)
