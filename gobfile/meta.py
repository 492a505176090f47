import copy
import logging


class FieldDescriptor(object):
    """Wrapper around field access of a Chunk related class.

    The field declared in the class body is a prototype: each Chunk instance
    obtains its own copy, with the instance itself as father."""

    def __init__(self, field_instance: "Field", field_name: str):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        data = instance.__dict__

        if self.field.name not in data:
            self.logger.debug("create new field for field named '%s'", self.field.name)
            data[self.field.name] = self.field.create(father=instance)

        return data[self.field.name]

    def __set__(self, instance, value):
        self.logger.debug("__set__ from %s for field named '%s'", instance.__class__.__name__, self.field.name)
        data = instance.__dict__

        # if the value is the same type then set as it is
        if isinstance(value, self.field.__class__):
            value.father = instance
            value.name = self.field.name
            data[self.field.name] = value
        # otherwise delegate to the field
        else:
            self.__get__(instance).value = value


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if name in cls._meta.fields:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        setattr(cls, name, FieldDescriptor(self, name))

    def create(self, father):
        instance = copy.deepcopy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the chunk"""

    def __init__(self):
        self.fields = []


class MetaChunk(type):

    def __new__(cls, names, bases, attrs):
        '''The fields are removed from the class body and installed back as
        descriptors, remembering the order of declaration.'''
        declared = [(name, value) for name, value in attrs.items() if isinstance(value, FieldBase)]
        for name, _ in declared:
            attrs.pop(name)

        new_cls = super(MetaChunk, cls).__new__(cls, names, bases, attrs)

        new_cls._meta = Meta()

        # handle inheritance: the descriptors are found via the MRO
        for parent in bases:
            if isinstance(parent, MetaChunk):
                new_cls._meta.fields.extend(parent._meta.fields)

        new_cls.logger = logging.getLogger(__name__)

        for obj_name, obj in declared:
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        cls.logger.debug('contribute_to_chunk() for field \'%s\'' % name)
        value.contribute_to_chunk(cls, name)
        cls._meta.fields.append(name)
