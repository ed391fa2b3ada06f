#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK symmetric cryptography utilities."""


# Used security modules
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ontsdk.exceptions import ONTSDKValueError


def aes_ecb_encrypt(key: bytes, plain_data: bytes) -> bytes:
    """Encrypt plain data with AES in ECB mode.

    :param key: The encryption key in bytes format.
    :param plain_data: Input data to be encrypted, multiple of the block size.
    :raises ONTSDKValueError: Data are not aligned to the AES block size.
    :return: Encrypted data in bytes format.
    """
    if len(plain_data) % 16:
        raise ONTSDKValueError("Plain data must be aligned to 16 bytes")
    cipher = Cipher(algorithms.AES(key), modes.ECB())  # nosec
    enc = cipher.encryptor()
    return enc.update(plain_data) + enc.finalize()


def aes_ecb_decrypt(key: bytes, encrypted_data: bytes) -> bytes:
    """Decrypt encrypted data with AES in ECB mode.

    :param key: The AES encryption key used for data decryption.
    :param encrypted_data: The encrypted input data to be decrypted.
    :return: Decrypted data as bytes.
    """
    cipher = Cipher(algorithms.AES(key), modes.ECB())  # nosec
    enc = cipher.decryptor()
    return enc.update(encrypted_data) + enc.finalize()
