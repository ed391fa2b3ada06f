#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK OSCCA (SM2/SM3) support utilities.

Glue over the ``gmssl`` implementation of the SM2 curve: public point
derivation, point (de)compression, signing and verification and the framing
of SM2 signatures with the signer's user identity.
"""

import logging

from gmssl import sm2

from ontsdk import ONTSDK_SM2_ID
from ontsdk.crypto.rng import rand_below
from ontsdk.exceptions import ONTSDKError, ONTSDKValueError

logger = logging.getLogger(__name__)

SM2_ECC_TABLE = sm2.default_ecc_table
SM2_P = int(SM2_ECC_TABLE["p"], base=16)
SM2_A = int(SM2_ECC_TABLE["a"], base=16)
SM2_B = int(SM2_ECC_TABLE["b"], base=16)
SM2_N = int(SM2_ECC_TABLE["n"], base=16)
SM2_COORDINATE_SIZE = 32


def _crypt_sm2(private_key: str = "", public_key: str = "") -> sm2.CryptSM2:
    """Create gmssl SM2 context.

    The public key is assigned after construction; the gmssl constructor strips
    any run of leading '0'/'4' characters from keys starting with '04'.

    :param private_key: Private scalar as 64 hex characters.
    :param public_key: Uncompressed public point x || y as 128 hex characters.
    :return: SM2 context.
    """
    key = sm2.CryptSM2(private_key=private_key or None, public_key="")
    key.public_key = public_key
    return key


def sm2_private_scalar(private_key: bytes) -> str:
    """Get SM2 private scalar from raw private key bytes.

    The raw value is interpreted modulo the curve order.

    :param private_key: Raw private key bytes.
    :raises ONTSDKValueError: The scalar is zero.
    :return: Scalar as 64 hex characters.
    """
    d = int.from_bytes(private_key, "big") % SM2_N
    if d == 0:
        raise ONTSDKValueError("SM2 private key scalar is out of range")
    return f"{d:064x}"


def sm2_public_point(private_key: bytes) -> str:
    """Derive uncompressed SM2 public point.

    :param private_key: Raw private key bytes.
    :return: Public point x || y as 128 hex characters.
    """
    d = int(sm2_private_scalar(private_key), 16)
    return _crypt_sm2()._kg(d, SM2_ECC_TABLE["g"])  # pylint: disable=protected-access


def compress_point(point: str) -> str:
    """Compress SM2 public point.

    :param point: Public point x || y as 128 hex characters.
    :return: Compressed point '02'/'03' || x as 66 hex characters.
    """
    x = point[: SM2_COORDINATE_SIZE * 2]
    y = int(point[SM2_COORDINATE_SIZE * 2 :], 16)
    return ("03" if y & 1 else "02") + x


def decompress_point(compressed: str) -> str:
    """Decompress SM2 public point.

    :param compressed: Compressed point '02'/'03' || x as 66 hex characters.
    :raises ONTSDKValueError: Invalid encoding or the point is not on the curve.
    :return: Public point x || y as 128 hex characters.
    """
    if len(compressed) != 2 + SM2_COORDINATE_SIZE * 2 or compressed[:2] not in ("02", "03"):
        raise ONTSDKValueError(f"Invalid compressed SM2 point: {compressed}")
    x = int(compressed[2:], 16)
    y_square = (pow(x, 3, SM2_P) + SM2_A * x + SM2_B) % SM2_P
    # p = 3 (mod 4)
    y = pow(y_square, (SM2_P + 1) // 4, SM2_P)
    if y * y % SM2_P != y_square:
        raise ONTSDKValueError("Compressed SM2 point is not on the curve")
    if (y & 1) != int(compressed[:2], 16) - 2:
        y = SM2_P - y
    return f"{x:064x}{y:064x}"


def sm2_sign(private_key: bytes, data: bytes) -> str:
    """Sign raw data using SM2 with SM3 pre-hash (Z_A || M).

    :param private_key: Raw private key bytes.
    :param data: Message to sign.
    :raises ONTSDKError: Signature can't be created.
    :return: Signature r || s as 128 hex characters.
    """
    key = _crypt_sm2(sm2_private_scalar(private_key), sm2_public_point(private_key))
    data_hash = bytes.fromhex(key._sm3_z(data))  # pylint: disable=protected-access
    # nonce k in [1, n - 1]
    nonce = rand_below(SM2_N - 1) + 1
    signature = key.sign(data=data_hash, K=f"{nonce:0{key.para_len}x}")
    if not signature:
        raise ONTSDKError("Can't sign data")
    return signature


def sm2_verify(public_key: str, data: bytes, signature: str) -> bool:
    """Verify SM2 signature of raw data.

    :param public_key: Compressed public point.
    :param data: Signed message.
    :param signature: Signature r || s as 128 hex characters.
    :return: True if the signature is valid.
    """
    key = _crypt_sm2(public_key=decompress_point(public_key))
    data_hash = bytes.fromhex(key._sm3_z(data))  # pylint: disable=protected-access
    return bool(key.verify(Sign=signature, data=data_hash))


def encode_sm2_signature(signature: str, user_id: str = ONTSDK_SM2_ID) -> str:
    """Prefix SM2 signature with signer's user identity.

    :param signature: Signature r || s in hex.
    :param user_id: SM2 user identity.
    :return: hex(user_id || NUL) || signature.
    """
    return (user_id + "\0").encode("utf-8").hex() + signature


def decode_sm2_signature(data: str) -> tuple[str, str]:
    """Split SM2 signature into user identity and r || s.

    :param data: hex(user_id || NUL) || r || s.
    :raises ONTSDKValueError: The identity is not terminated or not UTF-8 text.
    :return: Tuple of user identity and signature hex.
    """
    raw = bytes.fromhex(data)
    separator = raw.find(b"\0")
    if separator < 0:
        raise ONTSDKValueError("SM2 signature has no user identity")
    try:
        user_id = raw[:separator].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ONTSDKValueError("SM2 user identity is not UTF-8 text") from exc
    return user_id, raw[separator + 1 :].hex()
