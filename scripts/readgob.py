#!/usr/bin/env python3
import sys
import os
import logging

from gobfile.archive import GOBHeader, GOBDirectory
from gobfile.exceptions import FormatError
from gobfile.streams import Stream

logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <gob file>' % progname)
    sys.exit(1)


def dump_layout(chunk):
    for name, (offset, size) in chunk.layout.items():
        print(f'  {name:<34} offset {offset}, {size} bytes')


def dump_header(hdr):
    magic = hdr.signature.raw.hex()
    print(f'''GOB Header:
  Magic:                             {magic}
  Start of directory:                {hdr.directory_offset.value} (bytes into file)''')
    dump_layout(hdr)


def dump_directory(directory):
    print(f'''Directory at offset 0x{directory.offset:x} contains {directory.count.value} entries:
  [Nr] Name               Start            Size''')
    for idx, record in enumerate(directory.records):
        print(f'''  [{idx: >2d}] {record.filename.value:<18} 0x{record.start.value:08x}       {record.length.value}''')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]

    try:
        stream = Stream(path)

        header = GOBHeader(stream)
        dump_header(header)

        directory = GOBDirectory(stream.seek(header.directory_offset.value))
        dump_directory(directory)
    except (FormatError, OSError) as e:
        logger.error(f'failed to read \'{path}\': {e}')
        sys.exit(1)
