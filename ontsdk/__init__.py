#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK - key management and signing toolkit for the Ontology ledger.

Provides private/public key handling over ECDSA, EdDSA and SM2, signature
schemes, password protection of private keys and a small command line tool.

The module also holds process-wide settings resolved once from the environment.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_ontsdk_version() -> Version:
    """Get ONTSDK version information.

    :return: Parsed version object containing ONTSDK version information.
    """
    from .__version__ import __version__ as ontsdk_version

    return parse(ontsdk_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


def value_to_int(value: Optional[str], default: int) -> int:
    """Convert environment value to integer.

    :param value: Raw value, usually from environment; None or empty means default.
    :param default: Value used when nothing is set.
    :return: Integer value.
    """
    if not value:
        return default
    return int(value, 0)


version = get_ontsdk_version()

__author__ = "The ontology Authors"
__license__ = "LGPL-3.0-or-later"
__version__ = str(version)

ONTSDK_VERSION_BASE = version.base_version
ONTSDK_PLATFORM_DIRS = PlatformDirs(
    appauthor="ontology",
    appname="ontsdk",
    version=ONTSDK_VERSION_BASE,
)

# Default key algorithm used when a key is created without explicit key type
ONTSDK_DEFAULT_ALGORITHM = os.environ.get("ONTSDK_DEFAULT_ALGORITHM", "ECDSA")
# Unset means the default curve of the default key type
ONTSDK_DEFAULT_CURVE = os.environ.get("ONTSDK_DEFAULT_CURVE")

# SM2 user identity, the only one supported for signing
ONTSDK_SM2_ID = "1234567812345678"

# Scrypt cost parameters used for private key protection
ONTSDK_SCRYPT_N = value_to_int(os.environ.get("ONTSDK_SCRYPT_N"), 16384)
ONTSDK_SCRYPT_R = value_to_int(os.environ.get("ONTSDK_SCRYPT_R"), 8)
ONTSDK_SCRYPT_P = value_to_int(os.environ.get("ONTSDK_SCRYPT_P"), 8)
ONTSDK_SCRYPT_DKLEN = value_to_int(os.environ.get("ONTSDK_SCRYPT_DKLEN"), 64)

ONTSDK_DEBUG = value_to_bool(os.environ.get("ONTSDK_DEBUG"))

ONTSDK_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("ONTSDK_DEBUG_LOGGING_DISABLED"))
ONTSDK_DEBUG_LOG_FILE = os.environ.get(
    "ONTSDK_DEBUG_LOG_FILE", os.path.join(ONTSDK_PLATFORM_DIRS.user_log_dir, "debug.log")
)
ONTSDK_CONFIG_DIR = os.environ.get("ONTSDK_CONFIG_DIR", os.path.expanduser("~/.ontsdk"))
