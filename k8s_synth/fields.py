#!/usr/bin/env python
# -*- coding: utf-8

from collections.abc import Mapping


class Field(object):
    """Generic field on a model"""

    def __init__(self, type, default_value=None):
        self.type = type
        self.name = "__unset__"
        self._default_value = default_value

    def dump(self, instance):
        value = getattr(instance, self.name)
        return self._as_dict(value)

    def load(self, instance, value):
        instance._values[self.name] = self._from_dict(value)

    def set(self, instance, kwargs):
        value = kwargs.get(self.name, self.default_value)
        self.__set__(instance, value)

    def is_valid(self, instance):
        return True

    def __get__(self, instance, obj_type=None):
        if instance is None:
            return self
        return instance._values.get(self.name, self.default_value)

    def __set__(self, instance, new_value):
        if isinstance(new_value, Mapping) and _loadable(self.type):
            new_value = self.type.from_dict(new_value)
        instance._values[self.name] = new_value

    @property
    def default_value(self):
        if self._default_value is None and _loadable(self.type):
            return self.type.from_dict(None)
        return self._default_value

    @staticmethod
    def _as_dict(value):
        as_dict = getattr(value, "as_dict", None)
        if callable(as_dict):
            return as_dict()
        return value

    def _from_dict(self, value):
        if value is None:
            return self.default_value
        if _loadable(self.type):
            return self.type.from_dict(value)
        if isinstance(value, self.type):
            return value
        return self.type(value)

    def __repr__(self):
        return "{}(name={}, type={}, default_value={})".format(
                self.__class__.__name__,
                self.name,
                self.type,
                self._default_value
        )


class ListField(Field):
    """ListField is a list (array) of a single type on a model"""

    @property
    def default_value(self):
        if self._default_value is None:
            return []
        return list(self._default_value)

    def __set__(self, instance, new_value):
        if new_value is not None and _loadable(self.type):
            new_value = [self.type.from_dict(v) if isinstance(v, Mapping) else v for v in new_value]
        instance._values[self.name] = new_value

    def dump(self, instance):
        value = getattr(instance, self.name)
        if value is None:
            return None
        return [self._as_dict(v) for v in value]

    def load(self, instance, value):
        if value is None:
            value = self.default_value
        instance._values[self.name] = [self._from_dict(v) for v in value]


class RequiredField(Field):
    """Required field must have a value from the start"""

    def is_valid(self, instance):
        value = self.__get__(instance)
        return value is not None and super(RequiredField, self).is_valid(instance)


def _loadable(type):
    return callable(getattr(type, "from_dict", None))
