#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Password protection of private keys.

The passphrase is stretched with scrypt, salted by a short hash of the public
key the private key belongs to. The first half of the derived key masks the
private key, the second half encrypts the masked key with AES-256.

Encrypted key layout (hex encoded)::

    01 42 e0 | key hash (4) | encrypted key (32) | checksum (4)

The key hash is the anchor: after decryption the recovered key must derive a
public key with the same hash, otherwise the passphrase was wrong.
"""

import logging
import unicodedata
from dataclasses import dataclass
from typing import Optional

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from ontsdk import ONTSDK_SCRYPT_DKLEN, ONTSDK_SCRYPT_N, ONTSDK_SCRYPT_P, ONTSDK_SCRYPT_R
from ontsdk.crypto.exceptions import DecryptionError
from ontsdk.crypto.hash import EnumHashAlgorithm, get_hash
from ontsdk.crypto.symmetric import aes_ecb_decrypt, aes_ecb_encrypt
from ontsdk.exceptions import ONTSDKValueError

logger = logging.getLogger(__name__)

ENCRYPTED_KEY_HEADER = bytes([0x01, 0x42, 0xE0])
KEY_HASH_SIZE = 4
CHECKSUM_SIZE = 4
PRIVATE_KEY_SIZE = 32
ENCRYPTED_KEY_SIZE = len(ENCRYPTED_KEY_HEADER) + KEY_HASH_SIZE + PRIVATE_KEY_SIZE + CHECKSUM_SIZE


@dataclass(frozen=True)
class ScryptParams:
    """Scrypt cost parameters.

    :param n: CPU/memory cost, power of two.
    :param r: Block size.
    :param p: Parallelization.
    :param dk_len: Length of derived key, at least 64 bytes.
    """

    n: int = ONTSDK_SCRYPT_N
    r: int = ONTSDK_SCRYPT_R
    p: int = ONTSDK_SCRYPT_P
    dk_len: int = ONTSDK_SCRYPT_DKLEN

    def __post_init__(self) -> None:
        if self.n < 2 or self.n & (self.n - 1):
            raise ONTSDKValueError(f"Scrypt cost must be a power of two: {self.n}")
        if self.r < 1 or self.p < 1:
            raise ONTSDKValueError("Scrypt block size and parallelization must be positive")
        if self.dk_len < 2 * PRIVATE_KEY_SIZE:
            raise ONTSDKValueError(f"Scrypt derived key must have at least 64 bytes: {self.dk_len}")


def _double_sha256(data: bytes) -> bytes:
    return get_hash(get_hash(data, EnumHashAlgorithm.SHA256), EnumHashAlgorithm.SHA256)


def create_key_hash(public_key: str) -> bytes:
    """Compute anchor hash of a public key.

    :param public_key: Public key in hex.
    :return: First four bytes of double SHA-256 of the public key.
    """
    return _double_sha256(bytes.fromhex(public_key))[:KEY_HASH_SIZE]


def _derive_key(passphrase: str, salt: bytes, params: ScryptParams) -> bytes:
    normalized = unicodedata.normalize("NFC", passphrase)
    if not normalized:
        raise ONTSDKValueError("Passphrase must not be empty")
    kdf = Scrypt(salt=salt, length=params.dk_len, n=params.n, r=params.r, p=params.p)
    return kdf.derive(normalized.encode("utf-8"))


def _xor(data: bytes, mask: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(data, mask))


def _parse(encrypted_key: str) -> tuple[bytes, bytes]:
    """Check framing of encrypted key and split it.

    :param encrypted_key: Encrypted key in hex.
    :raises DecryptionError: Invalid encoding, length, header or checksum.
    :return: Tuple of key hash and encrypted private key.
    """
    try:
        raw = bytes.fromhex(encrypted_key)
    except ValueError as exc:
        raise DecryptionError("Encrypted key is not a hex string") from exc
    if len(raw) != ENCRYPTED_KEY_SIZE:
        raise DecryptionError(f"Invalid length of encrypted key: {len(raw)}")
    payload, checksum = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    if _double_sha256(payload)[:CHECKSUM_SIZE] != checksum:
        raise DecryptionError("Encrypted key checksum mismatch")
    if not payload.startswith(ENCRYPTED_KEY_HEADER):
        raise DecryptionError("Invalid encrypted key header")
    key_hash = payload[len(ENCRYPTED_KEY_HEADER) : len(ENCRYPTED_KEY_HEADER) + KEY_HASH_SIZE]
    return key_hash, payload[len(ENCRYPTED_KEY_HEADER) + KEY_HASH_SIZE :]


def encrypt(
    private_key: str, public_key: str, passphrase: str, params: Optional[ScryptParams] = None
) -> str:
    """Encrypt private key with passphrase.

    :param private_key: Private key in hex, 32 bytes.
    :param public_key: Public key of the private key in hex, used as anchor.
    :param passphrase: Passphrase to encrypt with.
    :param params: Scrypt parameters, defaults are used if omitted.
    :raises ONTSDKValueError: Invalid private key length or empty passphrase.
    :return: Encrypted key in hex.
    """
    params = params or ScryptParams()
    key = bytes.fromhex(private_key)
    if len(key) != PRIVATE_KEY_SIZE:
        raise ONTSDKValueError(f"Private key must have {PRIVATE_KEY_SIZE} bytes, got {len(key)}")
    key_hash = create_key_hash(public_key)
    derived = _derive_key(passphrase, key_hash, params)
    logger.debug(f"Encrypting private key with scrypt n={params.n}, r={params.r}, p={params.p}")
    encrypted = aes_ecb_encrypt(
        derived[PRIVATE_KEY_SIZE : 2 * PRIVATE_KEY_SIZE], _xor(key, derived[:PRIVATE_KEY_SIZE])
    )
    payload = ENCRYPTED_KEY_HEADER + key_hash + encrypted
    return (payload + _double_sha256(payload)[:CHECKSUM_SIZE]).hex()


def decrypt(encrypted_key: str, passphrase: str, params: Optional[ScryptParams] = None) -> str:
    """Decrypt encrypted private key with passphrase.

    The result is only a candidate: a wrong passphrase produces well formed but
    wrong key bytes. Use :func:`check_decrypted` to verify it.

    :param encrypted_key: Encrypted key in hex.
    :param passphrase: Passphrase to decrypt with.
    :param params: Scrypt parameters, defaults are used if omitted.
    :raises DecryptionError: Encrypted key is corrupted.
    :return: Candidate private key in hex.
    """
    params = params or ScryptParams()
    key_hash, encrypted = _parse(encrypted_key)
    derived = _derive_key(passphrase, key_hash, params)
    masked = aes_ecb_decrypt(derived[PRIVATE_KEY_SIZE : 2 * PRIVATE_KEY_SIZE], encrypted)
    return _xor(masked, derived[:PRIVATE_KEY_SIZE]).hex()


def check_decrypted(encrypted_key: str, public_key: str) -> None:
    """Verify public key of decrypted private key against the encryption anchor.

    :param encrypted_key: Encrypted key in hex.
    :param public_key: Public key derived from the decrypted private key, in hex.
    :raises DecryptionError: The public key does not match the anchor.
    """
    key_hash, _ = _parse(encrypted_key)
    if create_key_hash(public_key) != key_hash:
        raise DecryptionError("Decryption failed, wrong passphrase or corrupted key")
