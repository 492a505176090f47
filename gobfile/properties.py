import logging


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Directory(Chunk):
            count = fields.StructField('I')
            records = fields.ArrayField(Record, n=Dependency('.count'))

    and have the number of elements of the field named 'records' strictly
    connected to the field named 'count': when unpacking the value is read
    from it, when packing the relation is reversed and the actual number of
    elements is written back.

    The expression is a dotted path: every leading '.' after the first one
    climbs a level up from the father of the field.
    '''
    def __init__(self, expression):
        if not expression.startswith('.'):
            raise ValueError(f'expression \'{expression}\' must start with \'.\'')

        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve_field(self, field):
        '''Return the field the expression refers to, starting from the father of field.'''
        path = self.expression[1:]
        instance = field.father

        while path.startswith('.'):
            instance = instance.father
            path = path[1:]

        for component in path.split('.'):
            instance = getattr(instance, component)

        self.logger.debug('resolved %s to %r', self, instance)

        return instance

    def resolve(self, field):
        return self.resolve_field(field).value

    def update(self, field, value):
        self.resolve_field(field).value = value
