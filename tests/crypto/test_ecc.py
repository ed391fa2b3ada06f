#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Elliptic curve helpers tests."""

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from ontsdk.crypto.ecc import (
    EC_CURVES,
    deserialize_signature,
    get_ec_curve,
    get_signature_coordinate_size,
    load_ec_private_key,
    load_ed25519_private_key,
    load_ed25519_public_key,
    serialize_signature,
)
from ontsdk.crypto.exceptions import UnsupportedAlgorithmError
from ontsdk.crypto.key_type import CurveLabel
from ontsdk.exceptions import ONTSDKValueError


@pytest.mark.parametrize(
    "curve, size",
    [
        (CurveLabel.P224, 32),
        (CurveLabel.P256, 32),
        (CurveLabel.P384, 48),
        (CurveLabel.P521, 66),
    ],
)
def test_signature_coordinate_size(curve: CurveLabel, size: int) -> None:
    """Test r and s width per curve.

    :param curve: ECDSA curve.
    :param size: Expected width in bytes.
    """
    assert get_signature_coordinate_size(curve) == size


@pytest.mark.parametrize("curve", list(EC_CURVES))
def test_curve_order(curve: CurveLabel) -> None:
    """Test curve order matches the curve size and wraps the private scalar.

    :param curve: ECDSA curve.
    """
    order = EC_CURVES[curve][1]
    assert order.bit_length() == get_ec_curve(curve).key_size
    size = (order.bit_length() + 7) // 8
    one = load_ec_private_key((1).to_bytes(size, "big"), curve)
    wrapped = load_ec_private_key((order + 1).to_bytes(size, "big"), curve)
    assert one.private_numbers().private_value == 1
    assert wrapped.private_numbers().private_value == 1
    with pytest.raises(ONTSDKValueError):
        load_ec_private_key(order.to_bytes(size, "big"), curve)


@pytest.mark.parametrize("curve", [CurveLabel.SM2P256V1, CurveLabel.ED25519])
def test_not_ecdsa_curve(curve: CurveLabel) -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        get_ec_curve(curve)


def test_signature_encoding() -> None:
    """Test DER signature conversion to fixed width r || s and back."""
    der = encode_dss_signature(1, 0x0102)
    raw = serialize_signature(der, 32)
    assert raw == (1).to_bytes(32, "big") + (0x0102).to_bytes(32, "big")
    assert decode_dss_signature(deserialize_signature(raw, 32)) == (1, 0x0102)


def test_signature_encoding_real() -> None:
    key = ec.generate_private_key(ec.SECP384R1())
    der = key.sign(b"data", ec.ECDSA(hashes.SHA384()))
    raw = serialize_signature(der, 48)
    assert len(raw) == 96
    assert decode_dss_signature(deserialize_signature(raw, 48)) == decode_dss_signature(der)


@pytest.mark.parametrize("data", [b"", b"\x01\x02\x03", bytes(62), bytes(96)])
def test_deserialize_signature_invalid(data: bytes) -> None:
    with pytest.raises(ONTSDKValueError):
        deserialize_signature(data, 32)


def test_ed25519_invalid() -> None:
    with pytest.raises(ONTSDKValueError):
        load_ed25519_private_key(bytes(31))
    with pytest.raises(ONTSDKValueError):
        load_ed25519_public_key(bytes(33))
