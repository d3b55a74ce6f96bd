#!/usr/bin/env python
# -*- coding: utf-8

# Copyright 2017-2019 The FIAAS Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import logging
import sys
from collections.abc import Mapping

import yaml

from .. import config as synth_config
from ..metadata import ApiObjectMetadataDefinition
from ..sanitize import UnsupportedValueError, sanitize_value
from ..serialization import dump_manifests, load_manifests
from .config import STDIN, Configuration
from .logsetup import init_logging

LOG = logging.getLogger(__name__)


class InvalidManifestException(Exception):
    pass


class Stamper(object):
    """Adds a fixed set of labels and annotations to the metadata of manifests"""

    def __init__(self, labels=None, annotations=None, namespace=None):
        self._labels = labels or {}
        self._annotations = annotations or {}
        self._namespace = namespace

    def stamp(self, doc):
        if not isinstance(doc, Mapping):
            raise InvalidManifestException("Manifest document must be a mapping, not {}".format(type(doc).__name__))
        options = doc.get("metadata") or {}
        if not isinstance(options, Mapping):
            raise InvalidManifestException("metadata of {} must be a mapping, not {}".format(
                doc.get("kind", "document"), type(options).__name__))
        options = dict(options)
        if self._namespace and not options.get("namespace"):
            options["namespace"] = self._namespace
        metadata = ApiObjectMetadataDefinition.from_dict(options)
        for key, value in self._labels.items():
            metadata.add_label(key, value)
        for key, value in self._annotations.items():
            metadata.add_annotation(key, value)
        rendered = dict(doc)
        rendered["metadata"] = metadata.as_dict()
        LOG.debug("Stamped %s %s", doc.get("kind", "document"), metadata.name)
        return sanitize_value(rendered)

    def stamp_all(self, docs):
        return [self.stamp(doc) for doc in docs]


def read_manifests(paths):
    docs = []
    for path in paths:
        if path == STDIN:
            docs.extend(load_manifests(sys.stdin))
        else:
            with open(path) as fobj:
                docs.extend(load_manifests(fobj))
    return docs


def write_manifests(text, output=None):
    if output is None:
        sys.stdout.write(text)
    else:
        with open(output, "w") as fobj:
            fobj.write(text)


def main(args=None):
    cfg = Configuration(args)
    init_logging(cfg)
    synth_config.sort_keys = cfg.sort_keys
    LOG.debug("k8s-synth starting with configuration %r", cfg)
    stamper = Stamper(cfg.labels, cfg.annotations, cfg.namespace)
    try:
        docs = read_manifests(cfg.manifests)
        write_manifests(dump_manifests(stamper.stamp_all(docs)), cfg.output)
    except (InvalidManifestException, UnsupportedValueError, yaml.YAMLError, IOError) as e:
        LOG.error("Unable to render manifests: %s", e)
        return 1
    LOG.info("Rendered %d manifests", len(docs))
    return 0
