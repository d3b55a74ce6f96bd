#!/usr/bin/env python
# -*- coding: utf-8

from .resolve import resolve
from .sanitize import sanitize_value


class ApiObjectMetadataDefinition(object):
    """Metadata of a kubernetes API object

    Recognized options are name, namespace, labels and annotations. Any other
    option is kept as an additional attribute and rendered next to them. The
    options themselves are the starting point for the additional attributes, so
    name, namespace, labels and annotations are found there too; the typed
    values always take precedence when rendering.

    name and namespace can not be changed after creation. If no name is given,
    the object is rendered without one, and it is up to the owner to supply it.
    """

    def __init__(self, **options):
        self._load(options)

    def _load(self, options):
        self._name = options.get("name")
        self._namespace = options.get("namespace")
        self._labels = dict(options.get("labels") or {})
        self._annotations = dict(options.get("annotations") or {})
        self._additional_attributes = dict(options)

    @classmethod
    def from_dict(cls, d):
        instance = cls.__new__(cls)
        instance._load(d or {})
        return instance

    @property
    def name(self):
        return self._name

    @property
    def namespace(self):
        return self._namespace

    def add_label(self, key, value):
        """Set a label, replacing any earlier value for the key"""
        self._labels[key] = value

    def get_label(self, key):
        """Return the value of the label, or None if it isn't set"""
        return self._labels.get(key)

    def add_annotation(self, key, value):
        """Set an annotation, replacing any earlier value for the key"""
        self._annotations[key] = value

    def get_annotation(self, key):
        """Return the value of the annotation, or None if it isn't set"""
        return self._annotations.get(key)

    def add(self, key, value):
        """Set an arbitrary attribute, which is rendered as-is"""
        self._additional_attributes[key] = value

    def as_dict(self):
        """Render the ObjectMeta for this metadata

        Deferred values are resolved, and absent values and empty collections
        are removed at every depth.
        """
        d = _merge(
            self._additional_attributes,
            {
                "name": self._name,
                "namespace": self._namespace,
                "annotations": self._annotations,
                "labels": self._labels,
            },
        )
        return sanitize_value(resolve(d), filter_empty_arrays=True, filter_empty_objects=True) or {}

    def __repr__(self):
        return "{}(name={}, namespace={}, labels={}, annotations={})".format(
            self.__class__.__name__, self._name, self._namespace, self._labels, self._annotations
        )

    def __eq__(self, other):
        try:
            return self.as_dict() == other.as_dict()
        except AttributeError:
            return False


def _merge(*layers):
    """Combine mappings, later layers overwrite keys from earlier ones"""
    merged = {}
    for layer in layers:
        merged.update(layer)
    return merged
