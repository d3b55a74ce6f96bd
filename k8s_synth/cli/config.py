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
import argparse
from argparse import Namespace

import configargparse

STDIN = "-"

LABELS_LONG_HELP = """
Labels are added to the metadata of every document, overwriting a label
with the same key that the document already has.

Regardless of how a label is passed in (option or in
a config file), it must be specified as `<key>=<value>`.
"""

ANNOTATIONS_LONG_HELP = """
Annotations are added to the metadata of every document, overwriting an
annotation with the same key that the document already has.

Regardless of how an annotation is passed in (option or in
a config file), it must be specified as `<key>=<value>`.
"""

NAMESPACE_HELP = """
Namespace for documents that don't have one. The namespace of a document that
already has one is never changed."""

EPILOG = """
Args that start with '--' (eg. --log-format) can also be set in a config file
(specified via -c). The config file uses YAML syntax and must represent
a YAML 'mapping' (for details, see http://learn.getgrav.org/advanced/yaml).

It is possible to specify '--label' and '--annotation' multiple times to add more than one of each.
In the config-file, these should be defined as a YAML list
(see https://github.com/bw2/ConfigArgParse#special-values).

If an arg is specified in more than one place, then commandline values
override config file values which override defaults.
"""


class Configuration(Namespace):
    VALID_LOG_FORMAT = ("plain", "json")

    def __init__(self, args=None, **kwargs):
        super(Configuration, self).__init__(**kwargs)
        self._parse_args(args)

    def _parse_args(self, args):
        parser = configargparse.ArgParser(
            add_config_file_help=False,
            add_env_var_help=False,
            config_file_parser_class=configargparse.YAMLConfigFileParser,
            args_for_setting_config_path=["-c", "--config-file"],
            ignore_unknown_config_file_keys=True,
            description="%(prog)s adds metadata to kubernetes manifests and renders them",
            epilog=EPILOG,
            formatter_class=configargparse.ArgumentDefaultsHelpFormatter,
        )
        parser.add_argument(
            "manifests",
            nargs="*",
            help="Manifest files to read, '{}' reads from stdin (default: stdin)".format(STDIN),
            default=[],
        )
        parser.add_argument(
            "--output", "-o", help="Write the rendered manifests to this file (default: stdout)", default=None
        )
        parser.add_argument(
            "--log-format", help="Set logformat (default: %(default)s)", choices=self.VALID_LOG_FORMAT, default="plain"
        )
        parser.add_argument("--debug", help="Enable debug logging", action="store_true")
        parser.add_argument(
            "--no-sort-keys",
            help="Keep the key order of the input instead of sorting keys",
            action="store_false",
            dest="sort_keys",
        )
        parser.add_argument("--namespace", help=NAMESPACE_HELP, default=None)
        labels_parser = parser.add_argument_group("Labels", LABELS_LONG_HELP)
        labels_parser.add_argument(
            "--label",
            default=[],
            help="Label to add to all documents",
            action="append",
            type=KeyValue,
            dest="labels",
        )
        annotations_parser = parser.add_argument_group("Annotations", ANNOTATIONS_LONG_HELP)
        annotations_parser.add_argument(
            "--annotation",
            default=[],
            help="Annotation to add to all documents",
            action="append",
            type=KeyValue,
            dest="annotations",
        )

        parser.parse_args(args, namespace=self)
        self.labels = {label.key: label.value for label in self.labels}
        self.annotations = {annotation.key: annotation.value for annotation in self.annotations}
        if not self.manifests:
            self.manifests = [STDIN]

    def __repr__(self):
        return "Configuration({})".format(
            ", ".join(
                "{}={}".format(key, self.__dict__[key])
                for key in vars(self)
                if not key.startswith("_") and not key.isupper()
            )
        )


class KeyValue(object):
    def __init__(self, arg):
        key, sep, value = arg.partition("=")
        if not key or not sep:
            raise argparse.ArgumentTypeError("{!r} is not on the form <key>=<value>".format(arg))
        self.key, self.value = key, value

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return other.key == self.key and other.value == self.value

    def __repr__(self):
        return "{}={}".format(self.key, self.value)
