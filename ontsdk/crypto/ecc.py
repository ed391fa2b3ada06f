#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ECDSA and EdDSA glue over ``cryptography``.

Curve lookup, private scalar import and fixed width (r, s) signature
encoding shared by private and public keys.
"""

import math

from cryptography.hazmat.primitives.asymmetric import ec, ed25519, utils

from ontsdk.crypto.exceptions import UnsupportedAlgorithmError
from ontsdk.crypto.key_type import CurveLabel
from ontsdk.exceptions import ONTSDKValueError
from ontsdk.utils.misc import Endianness

EC_CURVES: dict[CurveLabel, tuple[type[ec.EllipticCurve], int]] = {
    CurveLabel.P224: (
        ec.SECP224R1,
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFF16A2E0B8F03E13DD29455C5C2A3D,
    ),
    CurveLabel.P256: (
        ec.SECP256R1,
        0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    ),
    CurveLabel.P384: (
        ec.SECP384R1,
        int(
            "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF"
            "C7634D81F4372DDF581A0DB248B0A77AECEC196ACCC52973",
            16,
        ),
    ),
    CurveLabel.P521: (
        ec.SECP521R1,
        int(
            "01FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF"
            "FA51868783BF2F966B7FCC0148F709A5D03BB5C9B8899C47AEBB6FB71E91386409",
            16,
        ),
    ),
}

# r and s are never shorter than 32 bytes in the signature encoding
MIN_COORDINATE_SIZE = 32
ED25519_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64


def get_ec_curve(curve: CurveLabel) -> ec.EllipticCurve:
    """Get ``cryptography`` curve object.

    :param curve: Curve label.
    :raises UnsupportedAlgorithmError: Not an ECDSA curve.
    :return: Curve object.
    """
    if curve not in EC_CURVES:
        raise UnsupportedAlgorithmError(f"Curve {curve.label} is not an ECDSA curve")
    return EC_CURVES[curve][0]()


def get_signature_coordinate_size(curve: CurveLabel) -> int:
    """Get size of r and s in the signature encoding.

    :param curve: ECDSA curve label.
    :return: Size in bytes.
    """
    return max(MIN_COORDINATE_SIZE, math.ceil(get_ec_curve(curve).key_size / 8))


def load_ec_private_key(private_key: bytes, curve: CurveLabel) -> ec.EllipticCurvePrivateKey:
    """Import raw private key as ECDSA key.

    The raw value is interpreted modulo the curve order.

    :param private_key: Raw private key bytes.
    :param curve: ECDSA curve label.
    :raises ONTSDKValueError: The scalar is zero.
    :return: ECDSA private key.
    """
    curve_obj = get_ec_curve(curve)
    d = int.from_bytes(private_key, Endianness.BIG.value) % EC_CURVES[curve][1]
    if d == 0:
        raise ONTSDKValueError("ECDSA private key scalar is out of range")
    return ec.derive_private_key(d, curve_obj)


def load_ec_public_key(public_key: bytes, curve: CurveLabel) -> ec.EllipticCurvePublicKey:
    """Import compressed (or uncompressed) SEC1 point.

    :param public_key: Encoded point.
    :param curve: ECDSA curve label.
    :raises ONTSDKValueError: Invalid point.
    :return: ECDSA public key.
    """
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(get_ec_curve(curve), public_key)
    except ValueError as exc:
        raise ONTSDKValueError(f"Invalid {curve.label} public key: {exc}") from exc


def load_ed25519_private_key(private_key: bytes) -> ed25519.Ed25519PrivateKey:
    """Import raw private key as ed25519 secret.

    :param private_key: 32 byte secret.
    :raises ONTSDKValueError: Invalid secret length.
    :return: ed25519 private key.
    """
    if len(private_key) != ED25519_KEY_SIZE:
        raise ONTSDKValueError(
            f"ed25519 secret must have {ED25519_KEY_SIZE} bytes, got {len(private_key)}"
        )
    return ed25519.Ed25519PrivateKey.from_private_bytes(private_key)


def load_ed25519_public_key(public_key: bytes) -> ed25519.Ed25519PublicKey:
    """Import raw ed25519 public key.

    :param public_key: 32 byte public key.
    :raises ONTSDKValueError: Invalid public key.
    :return: ed25519 public key.
    """
    try:
        return ed25519.Ed25519PublicKey.from_public_bytes(public_key)
    except ValueError as exc:
        raise ONTSDKValueError(f"Invalid ed25519 public key: {exc}") from exc


def serialize_signature(signature: bytes, coordinate_length: int) -> bytes:
    """Re-format ASN.1 DER ECDSA signature into fixed width r || s.

    :param signature: ASN.1 DER encoded ECDSA signature bytes.
    :param coordinate_length: Length in bytes for each coordinate (r and s).
    :return: Concatenated r and s as big endian fixed-length byte arrays.
    """
    r, s = utils.decode_dss_signature(signature)

    r_bytes = r.to_bytes(coordinate_length, Endianness.BIG.value)
    s_bytes = s.to_bytes(coordinate_length, Endianness.BIG.value)
    return r_bytes + s_bytes


def deserialize_signature(signature: bytes, coordinate_length: int) -> bytes:
    """Re-format fixed width r || s into ASN.1 DER.

    :param signature: Concatenated r and s.
    :param coordinate_length: Length in bytes of each coordinate (r and s).
    :raises ONTSDKValueError: Signature is not exactly two coordinates long.
    :return: ASN.1 DER encoded signature.
    """
    if len(signature) != 2 * coordinate_length:
        raise ONTSDKValueError(
            f"Invalid ECDSA signature length: {len(signature)}, expected {2 * coordinate_length}"
        )
    r = int.from_bytes(signature[:coordinate_length], Endianness.BIG.value)
    s = int.from_bytes(signature[coordinate_length:], Endianness.BIG.value)
    return utils.encode_dss_signature(r, s)
