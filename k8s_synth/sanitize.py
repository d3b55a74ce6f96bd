#!/usr/bin/env python
# -*- coding: utf-8

import logging
from collections.abc import Mapping

from . import config
from .resolve import format_path

LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())

SCALAR_TYPES = (str, bool, int, float)


class UnsupportedValueError(TypeError):
    """The value can not be rendered into a plain document"""


def sanitize_value(value, filter_empty_arrays=False, filter_empty_objects=False, sort_keys=None):
    """Return a plain copy of value with absent entries removed

    None-values are dropped from mappings at every depth. With
    filter_empty_arrays/filter_empty_objects, None-elements of lists and
    collections that end up empty are dropped as well. Children are
    cleaned before their parent is inspected, so a mapping that only held
    absent or empty values is itself considered empty.
    Returns None if nothing is left.
    """
    if sort_keys is None:
        sort_keys = config.sort_keys
    return _sanitize(value, filter_empty_arrays, filter_empty_objects, sort_keys, ())


def _sanitize(value, filter_empty_arrays, filter_empty_objects, sort_keys, path):
    if value is None:
        return None
    if isinstance(value, SCALAR_TYPES):
        return value
    if isinstance(value, (list, tuple)):
        drop_absent = filter_empty_arrays or filter_empty_objects
        items = []
        for i, item in enumerate(value):
            new_item = _sanitize(item, filter_empty_arrays, filter_empty_objects, sort_keys, path + (i,))
            if new_item is not None or not drop_absent:
                items.append(new_item)
        if filter_empty_arrays and not items:
            LOG.debug("Dropping empty list at %s", format_path(path))
            return None
        return items
    if isinstance(value, Mapping):
        keys = sorted(value.keys(), key=str) if sort_keys else list(value.keys())
        d = {}
        for key in keys:
            new_value = _sanitize(value[key], filter_empty_arrays, filter_empty_objects, sort_keys, path + (key,))
            if new_value is not None:
                d[key] = new_value
        if filter_empty_objects and not d:
            LOG.debug("Dropping empty mapping at %s", format_path(path))
            return None
        return d
    raise UnsupportedValueError("Can't render non-simple object of type {} at {}".format(
        type(value).__name__, format_path(path)))
