#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK command-line applications."""
