class GobException(Exception):
    '''Base class to extend in order to throw exception in gobfile.

    It takes a message and the chain of the layers that caused the
    exception (innermost first).
    '''

    def __init__(self, msg='', chain=None):
        self.msg = msg
        self.chain = chain if chain is not None else []
        super().__init__(msg)

    def __str__(self):
        if not self.chain:
            return self.msg

        where = '.'.join(str(_) for _ in reversed(self.chain))
        return f'{self.msg} (at {where})' if self.msg else where


class FormatError(GobException):
    '''The buffer is not a valid archive.'''
    pass


class UnpackException(FormatError):
    pass


class ChunkUnpackException(UnpackException):
    pass


class MagicException(FormatError):
    pass


class InvalidEntryError(GobException):
    '''An entry reached the writer but it's not possible to pack it.'''
    pass


class NotFoundError(GobException):
    pass
