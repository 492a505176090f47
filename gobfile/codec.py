'''
Primitives to encode/decode the fields of the archive.

Strings are single-byte: each character is stored as the low byte of its
code point, so that names round-trip byte for byte. The integers are
handled by fields.StructField.
'''
from .exceptions import UnpackException


U32_MAX = 0xffffffff


def _check_bounds(buffer, offset, length):
    if offset < 0 or length < 0 or offset + length > len(buffer):
        raise UnpackException(
            f'cannot read {length} bytes at offset {offset} from a buffer of {len(buffer)} bytes')


def _encode(value: str) -> bytes:
    return bytes(ord(_) & 0xff for _ in value)


def read_fixed_string(buffer, offset, length) -> str:
    _check_bounds(buffer, offset, length)
    return bytes(buffer[offset:offset + length]).decode('latin1')


def read_terminated_string(buffer, start, end) -> str:
    '''Decode the bytes in [start, end) stopping at the first NUL byte.

    If there is no terminator all the range is returned.'''
    _check_bounds(buffer, start, end - start)
    raw = bytes(buffer[start:end])
    terminator = raw.find(b'\x00')
    if terminator != -1:
        raw = raw[:terminator]

    return raw.decode('latin1')


def write_fixed_string(buffer, offset, value):
    '''Write the string verbatim, without padding: the caller must
    ensure that it fits into the field.'''
    raw = _encode(value)
    if offset < 0 or offset + len(raw) > len(buffer):
        raise ValueError(f'string of {len(raw)} bytes doesn\'t fit at offset {offset}')

    buffer[offset:offset + len(raw)] = raw


def write_terminated_string(buffer, start, end, value):
    '''Write the string into [start, end) zero-filling the remaining; a longer
    string is silently truncated.'''
    if start < 0 or end > len(buffer) or start > end:
        raise ValueError(f'field [{start}, {end}) is outside the buffer')

    length = end - start
    raw = _encode(value)[:length]
    buffer[start:end] = raw + b'\x00' * (length - len(raw))
