#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK cryptographic exceptions module.

Typed errors raised by key, scheme and password protection operations.
None of them is handled inside the library; callers decide whether to retry
with another passphrase or scheme.
"""

from ontsdk.exceptions import (
    ONTSDKError,
    ONTSDKKeyError,
    ONTSDKUnsupportedOperation,
    ONTSDKValueError,
    ONTSDKVerificationError,
)


class ONTSDKCryptoError(ONTSDKError):
    """General ONTSDK Crypto Error.

    Base exception class for all cryptographic operations within ONTSDK.
    """


class SchemeNotFoundError(ONTSDKCryptoError, ONTSDKKeyError):
    """Signature scheme with requested code or label is not registered."""


class UnknownAlgorithmError(ONTSDKCryptoError, ONTSDKKeyError):
    """Key type with requested label or tag is not known."""


class UnknownCurveError(UnknownAlgorithmError):
    """Curve with requested label or tag is not known."""


class SchemeMismatchError(ONTSDKCryptoError, ONTSDKValueError):
    """Signature scheme can't be used with the key type of the key."""


class UnsupportedAlgorithmError(ONTSDKCryptoError, ONTSDKUnsupportedOperation):
    """Key type (or its curve) has no derivation or signing rule."""


class UnsupportedSchemeError(ONTSDKCryptoError, ONTSDKUnsupportedOperation):
    """Signature scheme has no signing rule."""


class DecryptionError(ONTSDKCryptoError, ONTSDKVerificationError):
    """Encrypted private key can't be recovered.

    Raised for a wrong passphrase, a corrupted ciphertext or when the decrypted
    key does not derive the public key it was encrypted against.
    """
