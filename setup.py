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
import os

from setuptools import setup, find_packages


def read(filename):
    with open(os.path.join(os.path.dirname(__file__), filename)) as f:
        return f.read()


GENERIC_REQ = [
    "ConfigArgParse >= 1.5.3",
    "PyYAML >= 6.0",
    "pyaml >= 21.10.1",
]

FLAKE8_REQ = [
    "flake8-print >= 5.0.0",
    "flake8-comprehensions >= 3.14.0",
    "pep8-naming >= 0.13.3",
    "flake8 >= 6.1.0",
]

TESTS_REQ = [
    "pytest-xdist >= 3.3.1",
    "pytest-sugar >= 0.9.7",
    "pytest-cov >= 4.1.0",
    "pytest-helpers-namespace >= 2021.12.29",
    "pytest >= 7.4.2",
]

DEV_TOOLS = [
    "tox >= 3.14.5",
    "black ~= 22.0",
]


if __name__ == "__main__":
    setup(
        name="k8s-synth",
        author="FINN Team Infrastructure",
        author_email="FINN-TechteamInfrastruktur@finn.no",
        version="1.0",
        packages=find_packages(exclude=("tests", "tests.*")),
        zip_safe=True,
        include_package_data=True,
        python_requires=">=3.8",
        # Requirements
        install_requires=GENERIC_REQ,
        extras_require={
            "dev": TESTS_REQ + FLAKE8_REQ + DEV_TOOLS,
            "test": TESTS_REQ,
        },
        # Metadata
        description="Build and render metadata for Kubernetes objects",
        long_description=read("README.md"),
        long_description_content_type="text/markdown",
        # Entrypoints
        entry_points={
            "console_scripts": [
                "k8s-synth = k8s_synth.cli:main",
            ]
        },
    )
