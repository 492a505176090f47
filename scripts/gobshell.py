#!/usr/bin/env python3
import sys
import os
import logging

from gobfile.archive.file import GOBFile
from gobfile.exceptions import FormatError
from gobfile.shell import GOBShell


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <gob file>' % progname)
    sys.exit(1)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]

    try:
        gob = GOBFile(path)
    except (FormatError, OSError) as e:
        logger.error(f'failed to load \'{path}\': {e}')
        sys.exit(1)

    GOBShell(gob).run()
