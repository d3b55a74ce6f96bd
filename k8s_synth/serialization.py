#!/usr/bin/env python
# -*- coding: utf-8

"""Reading and writing multi-document YAML manifests"""

import pyaml
import yaml

DOCUMENT_SEPARATOR = "---\n"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ManifestLoader(yaml.SafeLoader):
    """SafeLoader which keeps timestamps as strings"""


ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_manifests(stream):
    """Return the non-empty documents in stream, in order"""
    return [doc for doc in yaml.load_all(stream, Loader=ManifestLoader) if doc is not None]


def dump_manifests(docs):
    return DOCUMENT_SEPARATOR.join(pyaml.dump(doc) for doc in docs)
