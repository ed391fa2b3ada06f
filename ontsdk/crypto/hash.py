#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK cryptographic hash algorithms.

Unified interface over the hash functions used by the signature schemes:
SHA-2 and SHA-3 families from ``cryptography``, RIPEMD-160 from
``pycryptodome`` and SM3 from ``gmssl``.
"""

# Used security modules

from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import utils
from gmssl import func, sm3

from ontsdk.exceptions import ONTSDKError
from ontsdk.utils.ontsdk_enum import OntsdkEnum


class EnumHashAlgorithm(OntsdkEnum):
    """Hash algorithm enumeration for signing operations."""

    SHA224 = (0, "sha224", "SHA224")
    SHA256 = (1, "sha256", "SHA256")
    SHA384 = (2, "sha384", "SHA384")
    SHA512 = (3, "sha512", "SHA512")
    SHA3_224 = (4, "sha3_224", "SHA3_224")
    SHA3_256 = (5, "sha3_256", "SHA3_256")
    SHA3_384 = (6, "sha3_384", "SHA3_384")
    SHA3_512 = (7, "sha3_512", "SHA3_512")
    RIPEMD160 = (8, "ripemd160", "RIPEMD160")
    SM3 = (9, "sm3", "SM3")


def get_hash_algorithm(algorithm: EnumHashAlgorithm) -> hashes.HashAlgorithm:
    """Get ``cryptography`` hash algorithm instance for specified algorithm type.

    :param algorithm: Hash algorithm type enumeration value.
    :raises ONTSDKError: If the algorithm has no ``cryptography`` counterpart.
    :return: Instance of the corresponding hash algorithm class.
    """
    cls_name = algorithm.label.upper()
    algo_cls = getattr(hashes, cls_name, None)
    if algo_cls is None:
        raise ONTSDKError(f"Unsupported algorithm: hashes.{cls_name}")
    return algo_cls()


def get_prehashed(algorithm: EnumHashAlgorithm) -> utils.Prehashed:
    """Get prehashed marker for signing an already computed digest.

    ECDSA consumes only the digest bytes, so a RIPEMD-160 digest is described by
    the 20 byte SHA-1 algorithm which ``cryptography`` knows.

    :param algorithm: Algorithm the digest was computed with.
    :return: Prehashed algorithm wrapper.
    """
    if algorithm == EnumHashAlgorithm.RIPEMD160:
        return utils.Prehashed(hashes.SHA1())  # nosec
    return utils.Prehashed(get_hash_algorithm(algorithm))


def get_hash(data: bytes, algorithm: EnumHashAlgorithm = EnumHashAlgorithm.SHA256) -> bytes:
    """Compute hash digest from input data using specified algorithm.

    :param data: Input data to be hashed.
    :param algorithm: Hash algorithm to use for computation.
    :raises ONTSDKError: If the specified algorithm is not supported.
    :return: Hash digest as bytes.
    """
    if algorithm == EnumHashAlgorithm.RIPEMD160:
        return RIPEMD160.new(data).digest()
    if algorithm == EnumHashAlgorithm.SM3:
        return bytes.fromhex(sm3.sm3_hash(func.bytes_to_list(data)))
    hash_obj = hashes.Hash(get_hash_algorithm(algorithm))
    hash_obj.update(data)
    return hash_obj.finalize()
