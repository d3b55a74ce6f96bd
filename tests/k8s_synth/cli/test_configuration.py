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

import pyaml
import pytest

from k8s_synth.cli.config import STDIN, Configuration, KeyValue


class TestConfig(object):

    @pytest.mark.parametrize("format", ["plain", "json"])
    def test_log_format_param(self, format):
        config = Configuration(["--log-format", format])

        assert config.log_format == format

    def test_invalid_log_format_param(self):
        with pytest.raises(SystemExit):
            Configuration(["--log-format", "fail"])

    def test_default_parameter_values(self):
        config = Configuration([])

        assert not config.debug
        assert config.log_format == "plain"
        assert config.sort_keys is True
        assert config.namespace is None
        assert config.output is None
        assert config.labels == {}
        assert config.annotations == {}
        assert config.manifests == [STDIN]

    @pytest.mark.parametrize("arg,key", [
        ("--namespace", "namespace"),
        ("--output", "output"),
    ])
    def test_parameters(self, arg, key):
        config = Configuration([arg, "value"])

        assert getattr(config, key) == "value"

    def test_flags(self):
        config = Configuration(["--debug", "--no-sort-keys"])

        assert config.debug is True
        assert config.sort_keys is False

    def test_manifests(self):
        config = Configuration(["first.yaml", STDIN, "second.yaml"])

        assert config.manifests == ["first.yaml", STDIN, "second.yaml"]

    @pytest.mark.parametrize("arg,key", [
        ("--label", "labels"),
        ("--annotation", "annotations"),
    ])
    def test_key_values(self, arg, key):
        config = Configuration([arg, "team=infra", arg, "url=http://example.com/?a=b", arg, "empty="])

        assert getattr(config, key) == {"team": "infra", "url": "http://example.com/?a=b", "empty": ""}

    @pytest.mark.parametrize("value", ["no-separator", "=value"])
    def test_invalid_key_values(self, value):
        with pytest.raises(SystemExit):
            Configuration(["--label", value])

    def test_config_file(self, tmpdir):
        config_file = tmpdir.join("config.yaml")
        config_file.write(pyaml.dump({
            "namespace": "from-file",
            "log-format": "json",
            "label": ["team=infra", "tier=backend"],
            "annotation": ["owner=me"],
        }))

        config = Configuration(["-c", config_file.strpath])

        assert config.namespace == "from-file"
        assert config.log_format == "json"
        assert config.labels == {"team": "infra", "tier": "backend"}
        assert config.annotations == {"owner": "me"}

    def test_command_line_overrides_config_file(self, tmpdir):
        config_file = tmpdir.join("config.yaml")
        config_file.write("namespace: from-file\n")

        config = Configuration(["-c", config_file.strpath, "--namespace", "from-args"])

        assert config.namespace == "from-args"

    def test_repr(self):
        config = Configuration(["--namespace", "ns"])

        assert "namespace=ns" in repr(config)
        assert repr(config).startswith("Configuration(")


class TestKeyValue(object):
    def test_parse(self):
        kv = KeyValue("key=value=with=equals")

        assert kv.key == "key"
        assert kv.value == "value=with=equals"

    def test_eq(self):
        assert KeyValue("a=b") == KeyValue("a=b")
        assert KeyValue("a=b") != KeyValue("a=c")
        assert KeyValue("a=b") != "a=b"

    def test_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            KeyValue("invalid")
