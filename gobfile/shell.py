'''
Line oriented shell to inspect and modify an archive.

Each line is a command followed by its parameters separated by spaces; the
errors are reported and the shell keeps going with the archive unchanged.
'''
import inspect
import logging
import re
import sys

from .archive.file import GOBFile
from .exceptions import GobException, NotFoundError


logger = logging.getLogger(__name__)


ALIASES = {
    'h': 'help',
    'l': 'load',
    'ld': 'load',
    's': 'save',
    'sv': 'save',
    'i': 'import',
    'im': 'import',
    'x': 'export',
    'ex': 'export',
    'ls': 'list',
    'dir': 'list',
    'rm': 'remove',
    'del': 'remove',
    'exit': 'quit',
}

HELP = '''Help
h|help        Shows this help
ls|dir|list   List files contained in this .GOB file
l|ld|load     Loads another .GOB file
s|sv|save     Saves this .GOB file
x|ex|export   Exports files from this .GOB file
i|im|import   Imports files into this .GOB file
rm|del|remove Removes a file from this .GOB file
quit|exit     Leaves'''

PATTERN_EXTENSION = re.compile(r'^\*\.([A-Z0-9]{1,3})$', re.IGNORECASE)


def format_entry(entry):
    '''Fresh entries, not yet saved, are marked with a star.'''
    name = f'*{entry.name:<15}' if entry.is_fresh else f'{entry.name:<16}'
    start = '' if entry.start is None else entry.start
    return f'{name}{entry.size:>16}{start:>16}'


class GOBShell(object):

    def __init__(self, gob: GOBFile, stdout=None):
        self.gob = gob
        self.stdout = stdout or sys.stdout

    def print(self, msg):
        print(msg, file=self.stdout)

    def onecmd(self, line):
        '''Execute a single line, returns False when the shell must stop.'''
        if not line.split():
            return True

        command, *params = line.split()
        command = ALIASES.get(command, command)

        method = getattr(self, 'do_%s' % command, None)
        if method is None:
            self.print(f'Unknown command {command}')
            return True

        try:
            inspect.signature(method).bind(*params)
        except TypeError:
            self.print('Invalid number of arguments')
            return True

        try:
            return method(*params) is not False
        except NotFoundError as e:
            self.print(e.msg)
        except (GobException, OSError, ValueError) as e:
            logger.debug('command %r failed', line, exc_info=True)
            self.print(f'Error: {e}')

        return True

    def run(self, stdin=None):
        for line in stdin or sys.stdin:
            if not self.onecmd(line):
                break

    def do_help(self):
        self.print(HELP)

    def do_quit(self):
        return False

    def do_load(self, path):
        self.gob.load(path)

    def do_save(self, path=None):
        target = path or self.gob.path
        if target is None:
            raise ValueError('no path to save the archive to')

        self.print(f'Writing to {target}')
        self.gob.save(target)
        self.print(f'{target} wrote')

    def do_import(self, path, name=None):
        self.gob.import_file(path, name)

    def do_remove(self, name):
        self.gob.remove(name)

    def do_list(self, pattern=None):
        entries = self.gob.entries
        if pattern is not None:
            match = PATTERN_EXTENSION.match(pattern)
            if not match:
                self.print('Invalid file name or pattern')
                return
            entries = self.gob.filter(match.group(1))

        for entry in entries:
            self.print(format_entry(entry))

    def _export(self, entry, path=None):
        self.gob.export_file(entry, path)
        self.print(f'Writing {entry.name:<16}{entry.size}')

    def do_export(self, pattern=None, path=None):
        if pattern is None:
            for entry in self.gob:
                self._export(entry)
            return

        match = PATTERN_EXTENSION.match(pattern)
        if match:
            if path is not None:
                self.print('Invalid number of arguments')
                return

            entries = self.gob.filter(match.group(1))
            if not entries:
                raise NotFoundError(f'No files matching {pattern}')

            for entry in entries:
                self._export(entry)
        else:
            self._export(self.gob[pattern], path)
