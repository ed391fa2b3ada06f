#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""AES-ECB tests."""

import pytest

from ontsdk.crypto.symmetric import aes_ecb_decrypt, aes_ecb_encrypt
from ontsdk.exceptions import ONTSDKError


def test_aes_ecb_fips197() -> None:
    """Test AES-256 against FIPS-197 appendix C.3 vector."""
    key = bytes.fromhex("000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f")
    plain = bytes.fromhex("00112233445566778899aabbccddeeff")
    cipher = bytes.fromhex("8ea2b7ca516745bfeafc49904b496089")
    assert aes_ecb_encrypt(key, plain) == cipher
    assert aes_ecb_decrypt(key, cipher) == plain


def test_aes_ecb_unaligned() -> None:
    """Test data not aligned to the AES block are rejected."""
    with pytest.raises(ONTSDKError):
        aes_ecb_encrypt(bytes(32), bytes(15))
