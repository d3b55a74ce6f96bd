#!/usr/bin/env python
# -*- coding: utf-8
from .api_object import ApiObject
from .base import Model
from .fields import Field, ListField, RequiredField
from .metadata import ApiObjectMetadataDefinition
from .resolve import Lazy, Resolvable, ResolutionContext, resolve
from .sanitize import UnsupportedValueError, sanitize_value

__all__ = [
    "ApiObject",
    "ApiObjectMetadataDefinition",
    "Field",
    "Lazy",
    "ListField",
    "Model",
    "RequiredField",
    "Resolvable",
    "ResolutionContext",
    "UnsupportedValueError",
    "resolve",
    "sanitize_value",
]
