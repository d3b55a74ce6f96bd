#!/usr/bin/env python
# -*- coding: utf-8

from collections import namedtuple

from .fields import Field
from .resolve import resolve
from .sanitize import sanitize_value


class MetaModel(type):
    """Metaclass for Model

    Creates the _meta attribute, with the list of fields and for convenience,
    a list of field names. Fields inherited from a parent model come first.
    """
    @staticmethod
    def __new__(mcs, cls, bases, attrs):
        meta = {
            "fields": [],
            "field_names": []
        }
        field_names = meta["field_names"]
        fields = meta["fields"]
        for base in bases:
            base_meta = getattr(base, "_meta", None)
            if base_meta is None:
                continue
            for field in base_meta.fields:
                if field.name not in attrs and field.name not in field_names:
                    field_names.append(field.name)
                    fields.append(field)
        for k, v in list(attrs.items()):
            if isinstance(v, Field):
                v.name = k
                field_names.append(k)
                fields.append(v)
        Meta = namedtuple("Meta", meta.keys())
        attrs["_meta"] = Meta(**meta)
        return super(MetaModel, mcs).__new__(mcs, cls, bases, attrs)


class Model(metaclass=MetaModel):
    """A kubernetes Model object

    Contains fields for each attribute in the API specification, and methods for export/import.
    """
    def __init__(self, **kwargs):
        self._values = {}
        kwarg_names = set(kwargs.keys())
        for field in self._meta.fields:
            kwarg_names.discard(field.name)
            field.set(self, kwargs)
        if kwarg_names:
            raise TypeError("{}() got unexpected keyword-arguments: {}".format(
                self.__class__.__name__, ", ".join(sorted(kwarg_names))))
        self._validate_fields()

    def _validate_fields(self):
        for field in self._meta.fields:
            if not field.is_valid(self):
                raise TypeError("Value of field {} is not valid on {}".format(field.name, self))

    def as_dict(self):
        """Render this model as a plain document, with deferred values resolved"""
        d = {}
        for field in self._meta.fields:
            value = field.dump(self)
            if value is not None:
                d[_api_name(field.name)] = value
        return sanitize_value(resolve(d)) or {}

    def update(self, other):
        for field in self._meta.fields:
            setattr(self, field.name, getattr(other, field.name))

    @classmethod
    def from_dict(cls, d):
        if d is None:
            return None
        instance = cls.__new__(cls)
        instance._values = {}
        for field in cls._meta.fields:
            field.load(instance, d.get(_api_name(field.name)))
        instance._validate_fields()
        return instance

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__,
                               ", ".join("{}={}".format(key, getattr(self, key)) for key in self._meta.field_names))

    def __eq__(self, other):
        try:
            return self.as_dict() == other.as_dict()
        except AttributeError:
            return False


def _api_name(name):
    return name[1:] if name.startswith("_") else name
