#!/usr/bin/env python
# -*- coding: utf-8

"""Deferred values

A deferred value (a token) stands in for something that is not known when a
model is built, e.g. a name generated later. ``resolve`` walks a document and
replaces every token with its concrete value.
"""

import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Mapping

LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())


class ResolutionContext(object):
    """Where in the document a value is being resolved"""

    def __init__(self, path=()):
        self.path = tuple(path)

    def child(self, key):
        return ResolutionContext(self.path + (key,))

    @property
    def key(self):
        return self.path[-1] if self.path else None

    def __repr__(self):
        return "{}(path={})".format(self.__class__.__name__, format_path(self.path))


class Resolvable(metaclass=ABCMeta):
    """A value which is only known at serialization time"""

    @abstractmethod
    def resolve(self, context):
        """Return the concrete value for this token"""


class Lazy(Resolvable):
    """Token whose value is computed by calling ``producer`` with no arguments"""

    def __init__(self, producer):
        if not callable(producer):
            raise TypeError("Lazy producer must be callable, got {!r}".format(producer))
        self._producer = producer

    @classmethod
    def any(cls, producer):
        """Create a token from a callable, or from an object with a produce() method"""
        produce = getattr(producer, "produce", None)
        if callable(produce):
            return cls(produce)
        return cls(producer)

    def resolve(self, context):
        return self._producer()

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._producer)


def resolve(value, context=None):
    """Return a copy of value with every Resolvable replaced by its concrete value

    Mappings, lists and tuples are walked recursively. The result of a token is
    itself resolved, so a token may produce other tokens. Exceptions raised while
    producing a value are not caught.
    """
    if context is None:
        context = ResolutionContext()
    if isinstance(value, Resolvable):
        LOG.debug("Resolving token %r at %s", value, format_path(context.path))
        return resolve(value.resolve(context), context)
    if isinstance(value, Mapping):
        return {k: resolve(v, context.child(k)) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [resolve(v, context.child(i)) for i, v in enumerate(value)]
    return value


def format_path(path):
    if not path:
        return "<root>"
    return "".join("[{}]".format(p) if isinstance(p, int) else ".{}".format(p) for p in path).lstrip(".")
