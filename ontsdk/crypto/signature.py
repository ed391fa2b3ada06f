#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Signature value returned from signing."""

from dataclasses import dataclass
from typing import Any, Optional

from typing_extensions import Self

from ontsdk.crypto.signature_scheme import SignatureScheme
from ontsdk.exceptions import ONTSDKValueError


@dataclass(frozen=True)
class Signature:
    """Signature with the scheme used and optional reference to the signer's public key.

    :param algorithm: Signature scheme the value was computed with.
    :param value: Hex encoded signature bytes in the scheme's family encoding.
    :param public_key_id: Identifier of the signer's public key.
    """

    algorithm: SignatureScheme
    value: str
    public_key_id: Optional[str] = None

    def serialize_hex(self) -> str:
        """Serialize signature into hex.

        :return: Scheme code byte followed by the signature value.
        """
        return f"{self.algorithm.hex:02x}{self.value}"

    @classmethod
    def deserialize_hex(cls, data: str, public_key_id: Optional[str] = None) -> Self:
        """Create signature from its hex serialization.

        :param data: Scheme code byte followed by the signature value.
        :param public_key_id: Identifier of the signer's public key.
        :raises ONTSDKValueError: The data are too short or not hex.
        :raises SchemeNotFoundError: Unknown scheme code.
        :return: Signature.
        """
        try:
            raw = bytes.fromhex(data)
        except ValueError as exc:
            raise ONTSDKValueError(f"Invalid signature hex: {data!r}") from exc
        if len(raw) < 2:
            raise ONTSDKValueError(f"Signature is too short: {data!r}")
        return cls(SignatureScheme.from_hex(raw[0]), raw[1:].hex(), public_key_id)

    def serialize_json(self) -> dict[str, Any]:
        """Serialize signature into JSON structure.

        :return: Dictionary {algorithm, value[, publicKeyId]}.
        """
        result = {"algorithm": self.algorithm.label, "value": self.value}
        if self.public_key_id is not None:
            result["publicKeyId"] = self.public_key_id
        return result

    @classmethod
    def deserialize_json(cls, json: dict[str, Any]) -> Self:
        """Create signature from JSON structure.

        :param json: Dictionary {algorithm, value[, publicKeyId]}.
        :raises ONTSDKValueError: The structure is malformed.
        :raises SchemeNotFoundError: Unknown scheme label.
        :return: Signature.
        """
        if not isinstance(json, dict) or "algorithm" not in json or "value" not in json:
            raise ONTSDKValueError(f"Invalid signature record: {json}")
        return cls(
            SignatureScheme.from_label(json["algorithm"]), json["value"], json.get("publicKeyId")
        )
