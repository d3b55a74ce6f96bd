#!/usr/bin/env python
# -*- coding: utf-8

from .base import Model
from .fields import Field, RequiredField
from .metadata import ApiObjectMetadataDefinition


class ApiObject(Model):
    """Top level kubernetes object

    Subclasses add the fields of the concrete kind, e.g. data or spec.
    """
    apiVersion = RequiredField(str)
    kind = RequiredField(str)
    metadata = Field(ApiObjectMetadataDefinition)

    @property
    def name(self):
        return self.metadata.name

    @property
    def namespace(self):
        return self.metadata.namespace
