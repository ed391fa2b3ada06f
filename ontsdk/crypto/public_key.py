#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Public key and signature verification."""

import logging
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec
from typing_extensions import Self

from ontsdk import ONTSDK_SM2_ID
from ontsdk.crypto.ecc import (
    ED25519_SIGNATURE_SIZE,
    deserialize_signature,
    get_signature_coordinate_size,
    load_ec_public_key,
    load_ed25519_public_key,
)
from ontsdk.crypto.exceptions import UnsupportedAlgorithmError
from ontsdk.crypto.hash import get_prehashed
from ontsdk.crypto.key import JsonKey, Key, hex_to_bytes
from ontsdk.crypto.key_type import CurveLabel, KeyParameters, KeyType
from ontsdk.crypto.oscca import SM2_COORDINATE_SIZE, decode_sm2_signature, sm2_verify
from ontsdk.crypto.signature import Signature
from ontsdk.exceptions import ONTSDKValueError

logger = logging.getLogger(__name__)


class PublicKey(Key):
    """Public key: compressed SEC1 point for ECDSA and SM2, raw 32 bytes for EdDSA."""

    def __repr__(self) -> str:
        return f"PublicKey({self.algorithm.label}, {self.parameters.curve.label}, {self.key})"

    def verify(self, msg: str, signature: Signature) -> bool:
        """Verify signature of a message.

        A cryptographically invalid signature is reported as False, never raised.

        :param msg: Hex encoded message.
        :param signature: Signature to verify.
        :raises SchemeMismatchError: The signature scheme does not match the key type.
        :raises UnsupportedAlgorithmError: The key type has no verification rule.
        :return: True if the signature is valid.
        """
        self.check_scheme(signature.algorithm)
        data = self.compute_hash(msg, signature.algorithm)
        try:
            value = bytes.fromhex(signature.value)
        except ValueError:
            logger.debug("Signature value is not a hex string")
            return False
        try:
            if self.algorithm == KeyType.ECDSA:
                return self._verify_ecdsa(data, value, signature)
            if self.algorithm == KeyType.EDDSA:
                return self._verify_eddsa(data, value)
            if self.algorithm == KeyType.SM2:
                return self._verify_sm2(data, signature)
        except ONTSDKValueError as exc:
            logger.debug(f"Malformed signature: {exc}")
            return False
        raise UnsupportedAlgorithmError(f"Unsupported key type: {self.algorithm.label}")

    def _verify_ecdsa(self, data: bytes, value: bytes, signature: Signature) -> bool:
        public_key = load_ec_public_key(self.key_bytes, self.parameters.curve)
        der = deserialize_signature(value, get_signature_coordinate_size(self.parameters.curve))
        try:
            public_key.verify(
                der,
                data,
                ec.ECDSA(get_prehashed(signature.algorithm.hash_algorithm)),
            )
        except InvalidSignature:
            return False
        return True

    def _verify_eddsa(self, data: bytes, value: bytes) -> bool:
        if len(value) != ED25519_SIGNATURE_SIZE:
            return False
        public_key = load_ed25519_public_key(self.key_bytes)
        try:
            public_key.verify(value, data)
        except InvalidSignature:
            return False
        return True

    def _verify_sm2(self, data: bytes, signature: Signature) -> bool:
        user_id, value = decode_sm2_signature(signature.value)
        if user_id != ONTSDK_SM2_ID:
            logger.debug(f"Unsupported SM2 user identity {user_id!r}")
            return False
        if len(value) != SM2_COORDINATE_SIZE * 4:
            return False
        return sm2_verify(self.key, data, value)

    def serialize_hex(self) -> str:
        """Serialize public key into hex.

        ECDSA P-256 keys are written as the bare point, every other key is
        prefixed with its key type tag and curve tag.

        :return: Hex encoded public key.
        """
        if self.algorithm == KeyType.ECDSA and self.parameters.curve == CurveLabel.P256:
            return self.key
        return f"{self.algorithm.tag:02x}{self.parameters.curve.tag:02x}{self.key}"

    @classmethod
    def deserialize_hex(cls, data: str) -> Self:
        """Create public key from its hex serialization.

        :param data: Hex encoded public key.
        :raises ONTSDKValueError: Invalid data.
        :raises UnknownAlgorithmError: Unknown key type or curve tag.
        :return: Public key.
        """
        raw = hex_to_bytes(data, "public key")
        # bare compressed P-256 point
        if len(raw) == 33 and raw[0] in (0x02, 0x03):
            return cls(raw.hex(), KeyType.ECDSA, KeyParameters(CurveLabel.P256))
        if len(raw) < 3:
            raise ONTSDKValueError(f"Public key is too short: {data!r}")
        return cls(
            raw[2:].hex(), KeyType.from_tag(raw[0]), KeyParameters(CurveLabel.from_tag(raw[1]))
        )

    @classmethod
    def deserialize_json(cls, json: Union[str, JsonKey]) -> Self:
        """Create public key from JSON structure.

        :param json: JSON key record, parsed or as text.
        :return: Public key.
        """
        return cls(*cls._load_json(json))
