#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Key algorithm families and their curve parameters.

Both enumerations are closed: the set of key types and curves is fixed at
import time and lookups never fall back to a default.
"""

from dataclasses import dataclass
from typing import Any, Optional

from typing_extensions import Self

from ontsdk import ONTSDK_DEFAULT_ALGORITHM, ONTSDK_DEFAULT_CURVE
from ontsdk.crypto.exceptions import UnknownAlgorithmError, UnknownCurveError
from ontsdk.exceptions import ONTSDKKeyError, ONTSDKValueError
from ontsdk.utils.ontsdk_enum import OntsdkEnum


class KeyType(OntsdkEnum):
    """Family of asymmetric algorithm a key belongs to."""

    ECDSA = (0x12, "ECDSA")
    SM2 = (0x13, "SM2")
    EDDSA = (0x14, "EDDSA")

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get key type with given tag.

        :param tag: Numeric tag of the key type.
        :raises UnknownAlgorithmError: Tag is not known.
        :return: Found key type.
        """
        try:
            return super().from_tag(tag)
        except ONTSDKKeyError as exc:
            raise UnknownAlgorithmError(f"Unknown key algorithm tag: {tag}") from exc

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get key type with given label.

        :param label: Label of the key type, e.g. 'ECDSA'.
        :raises UnknownAlgorithmError: Label is not known.
        :return: Found key type.
        """
        try:
            return super().from_label(label)
        except ONTSDKKeyError as exc:
            raise UnknownAlgorithmError(f"Unknown key algorithm: {label}") from exc

    @property
    def default_curve(self) -> "CurveLabel":
        """Curve used when a key of this type is created without parameters."""
        return _DEFAULT_CURVES[self]

    @property
    def curves(self) -> list["CurveLabel"]:
        """Curves usable with this key type."""
        return [curve for curve in CurveLabel if curve.key_type == self]

    @classmethod
    def default(cls) -> "KeyType":
        """Get the configured default key type.

        :return: Key type named by ONTSDK_DEFAULT_ALGORITHM.
        """
        return cls.from_label(ONTSDK_DEFAULT_ALGORITHM)


class CurveLabel(OntsdkEnum):
    """Named curve with the preset name of the underlying curve implementation."""

    P224 = (1, "P-224", "p224")
    P256 = (2, "P-256", "p256")
    P384 = (3, "P-384", "p384")
    P521 = (4, "P-521", "p521")
    SM2P256V1 = (20, "sm2p256v1", "sm2p256v1")
    ED25519 = (25, "ed25519", "ed25519")

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get curve with given tag.

        :param tag: Numeric tag of the curve.
        :raises UnknownCurveError: Tag is not known.
        :return: Found curve.
        """
        try:
            return super().from_tag(tag)
        except ONTSDKKeyError as exc:
            raise UnknownCurveError(f"Unknown curve tag: {tag}") from exc

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get curve with given label.

        :param label: Label of the curve, e.g. 'P-256'.
        :raises UnknownCurveError: Label is not known.
        :return: Found curve.
        """
        try:
            return super().from_label(label)
        except ONTSDKKeyError as exc:
            raise UnknownCurveError(f"Unknown curve: {label}") from exc

    @property
    def preset(self) -> str:
        """Name of the curve preset."""
        assert self.description
        return self.description

    @property
    def key_type(self) -> KeyType:
        """Key type the curve belongs to."""
        return _CURVE_KEY_TYPES[self]


_CURVE_KEY_TYPES = {
    CurveLabel.P224: KeyType.ECDSA,
    CurveLabel.P256: KeyType.ECDSA,
    CurveLabel.P384: KeyType.ECDSA,
    CurveLabel.P521: KeyType.ECDSA,
    CurveLabel.SM2P256V1: KeyType.SM2,
    CurveLabel.ED25519: KeyType.EDDSA,
}

_DEFAULT_CURVES = {
    KeyType.ECDSA: CurveLabel.P256,
    KeyType.SM2: CurveLabel.SM2P256V1,
    KeyType.EDDSA: CurveLabel.ED25519,
}


@dataclass(frozen=True)
class KeyParameters:
    """Curve parameters paired with a key type."""

    curve: CurveLabel

    def serialize_json(self) -> dict[str, str]:
        """Serialize parameters into plain JSON structure.

        :return: Dictionary with the curve label.
        """
        return {"curve": self.curve.label}

    @classmethod
    def deserialize_json(cls, json: Any) -> Self:
        """Create parameters from plain JSON structure.

        :param json: Dictionary in form {"curve": label}.
        :raises ONTSDKValueError: The structure has no curve entry.
        :raises UnknownCurveError: The curve label is not known.
        :return: Key parameters.
        """
        if not isinstance(json, dict) or "curve" not in json:
            raise ONTSDKValueError(f"Invalid key parameters: {json}")
        return cls(CurveLabel.from_label(json["curve"]))

    @classmethod
    def default(cls, key_type: Optional[KeyType] = None) -> Self:
        """Get default parameters.

        Without key type the configured default curve is used, or the default
        curve of the configured default key type when no curve is configured.
        With key type the default curve of that key type is used.

        :param key_type: Key type the parameters are for.
        :return: Key parameters.
        """
        if key_type is None:
            if ONTSDK_DEFAULT_CURVE:
                return cls(CurveLabel.from_label(ONTSDK_DEFAULT_CURVE))
            key_type = KeyType.default()
        return cls(key_type.default_curve)
