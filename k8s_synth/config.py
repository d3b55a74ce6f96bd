#!/usr/bin/env python
# -*- coding: utf-8

"""Singleton configuration for k8s_synth"""

sort_keys = True
