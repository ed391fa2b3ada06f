#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK cryptographic operations module.

Key types and curves, signature schemes, private and public keys, signatures
and password protection of private keys.
"""

from ontsdk.crypto.key_type import CurveLabel, KeyParameters, KeyType
from ontsdk.crypto.private_key import PrivateKey
from ontsdk.crypto.public_key import PublicKey
from ontsdk.crypto.scrypt import ScryptParams
from ontsdk.crypto.signature import Signature
from ontsdk.crypto.signature_scheme import SignatureScheme

__all__ = [
    "CurveLabel",
    "KeyParameters",
    "KeyType",
    "PrivateKey",
    "PublicKey",
    "ScryptParams",
    "Signature",
    "SignatureScheme",
]
