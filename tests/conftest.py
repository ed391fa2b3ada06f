#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK pytest configuration and shared test fixtures."""

import os

import pytest

from tests.cli_runner import CliRunner

os.environ["ONTSDK_DEBUG_LOGGING_DISABLED"] = "True"
# keep scrypt cheap for key files written by the CLI
os.environ.setdefault("ONTSDK_SCRYPT_N", "1024")
os.environ.setdefault("ONTSDK_SCRYPT_P", "1")

from ontsdk.crypto.scrypt import ScryptParams  # noqa: E402


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def scrypt_params() -> ScryptParams:
    """Get low cost scrypt parameters.

    :return: Scrypt parameters suitable for unit tests.
    """
    return ScryptParams(n=1024, r=8, p=1)
