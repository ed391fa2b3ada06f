#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Common representation of private and public keys.

A key is an immutable value: raw key bytes (hex), the key type and the curve
parameters. Signature scheme compatibility is checked against the key type
before every cryptographic operation.
"""

import json as jsonlib
from dataclasses import dataclass
from typing import Any, Optional, Union

from ontsdk.crypto.exceptions import SchemeMismatchError, UnsupportedAlgorithmError
from ontsdk.crypto.hash import get_hash
from ontsdk.crypto.key_type import KeyParameters, KeyType
from ontsdk.crypto.signature_scheme import SignatureScheme
from ontsdk.exceptions import ONTSDKValueError

JsonKey = dict[str, Any]


def hex_to_bytes(data: str, what: str = "data") -> bytes:
    """Decode hex string.

    :param data: Hex encoded data.
    :param what: Name of the data used in error message.
    :raises ONTSDKValueError: The data are not a hex string.
    :return: Decoded bytes.
    """
    try:
        return bytes.fromhex(data)
    except (TypeError, ValueError) as exc:
        raise ONTSDKValueError(f"Invalid hex encoded {what}: {data!r}") from exc


@dataclass(frozen=True, init=False)
class Key:
    """Key material with its algorithm and parameters."""

    key: str
    algorithm: KeyType
    parameters: KeyParameters

    def __init__(
        self,
        key: str,
        algorithm: Optional[KeyType] = None,
        parameters: Optional[KeyParameters] = None,
    ) -> None:
        """Create key.

        Missing algorithm falls back to the configured default key type, missing
        parameters to the default curve of the key type.

        :param key: Hex encoded key data.
        :param algorithm: Key type.
        :param parameters: Curve parameters.
        :raises ONTSDKValueError: Key data are not hex encoded.
        :raises UnsupportedAlgorithmError: The curve can't be used with the key type.
        """
        raw = hex_to_bytes(key, "key")
        if algorithm is None:
            algorithm = KeyType.default()
            if parameters is None:
                parameters = KeyParameters.default()
        if parameters is None:
            parameters = KeyParameters.default(algorithm)
        if parameters.curve.key_type != algorithm:
            raise UnsupportedAlgorithmError(
                f"Curve {parameters.curve.label} can't be used with {algorithm.label} keys"
            )
        object.__setattr__(self, "key", raw.hex())
        object.__setattr__(self, "algorithm", algorithm)
        object.__setattr__(self, "parameters", parameters)

    @property
    def key_bytes(self) -> bytes:
        """Raw key bytes."""
        return bytes.fromhex(self.key)

    def is_scheme_supported(self, scheme: SignatureScheme) -> bool:
        """Check whether the signature scheme can be used with this key.

        :param scheme: Signature scheme.
        :return: True if the scheme belongs to the key type.
        """
        return scheme.key_type == self.algorithm

    def check_scheme(self, scheme: SignatureScheme) -> None:
        """Verify the signature scheme can be used with this key.

        :param scheme: Signature scheme.
        :raises SchemeMismatchError: The scheme belongs to another key type.
        """
        if not self.is_scheme_supported(scheme):
            raise SchemeMismatchError(
                f"Signature scheme {scheme.label} does not match key type {self.algorithm.label}"
            )

    def compute_hash(self, msg: str, scheme: SignatureScheme) -> bytes:
        """Compute hash of the message for signing or verification.

        SM2 hashes the message itself (Z_A || M with SM3), so the message is
        passed through unchanged for SM2withSM3.

        :param msg: Hex encoded message.
        :param scheme: Signature scheme.
        :return: Message hash, or the raw message for SM2.
        """
        data = hex_to_bytes(msg, "message")
        if scheme == SignatureScheme.SM2withSM3:
            return data
        return get_hash(data, scheme.hash_algorithm)

    def serialize_json(self) -> JsonKey:
        """Serialize key into JSON structure.

        :return: Dictionary {key, algorithm, parameters: {curve}}.
        """
        return {
            "key": self.key,
            "algorithm": self.algorithm.label,
            "parameters": self.parameters.serialize_json(),
        }

    @staticmethod
    def _load_json(json: Union[str, JsonKey]) -> tuple[str, KeyType, KeyParameters]:
        """Resolve fields of JSON key record.

        :param json: JSON key record, parsed or as text.
        :raises ONTSDKValueError: The record is malformed.
        :raises UnknownAlgorithmError: Unknown key type or curve label.
        :return: Key data, key type and parameters.
        """
        if isinstance(json, str):
            try:
                json = jsonlib.loads(json)
            except jsonlib.JSONDecodeError as exc:
                raise ONTSDKValueError(f"Invalid JSON key record: {exc}") from exc
        if not isinstance(json, dict):
            raise ONTSDKValueError("JSON key record must be an object")
        missing = {"key", "algorithm", "parameters"} - set(json)
        if missing:
            raise ONTSDKValueError(f"JSON key record misses: {', '.join(sorted(missing))}")
        return (
            json["key"],
            KeyType.from_label(json["algorithm"]),
            KeyParameters.deserialize_json(json["parameters"]),
        )
