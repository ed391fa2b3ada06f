#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Signature schemes used during signing and verification.

A scheme is a hash function paired with a curve family. Every scheme has a
one byte code (used in serialized signatures), a label and a JWS label, and
belongs to exactly one key type.
"""

from typing_extensions import Self

from ontsdk.crypto.exceptions import SchemeNotFoundError
from ontsdk.crypto.hash import EnumHashAlgorithm
from ontsdk.crypto.key_type import KeyType
from ontsdk.utils.ontsdk_enum import OntsdkEnum


class SignatureScheme(OntsdkEnum):
    """Closed registry of signature schemes.

    Member values are (code, label, JWS label).
    """

    ECDSAwithSHA224 = (0, "ECDSAwithSHA224", "ES224")
    ECDSAwithSHA256 = (1, "ECDSAwithSHA256", "ES256")
    ECDSAwithSHA384 = (2, "ECDSAwithSHA384", "ES384")
    ECDSAwithSHA512 = (3, "ECDSAwithSHA512", "ES512")
    ECDSAwithSHA3_224 = (4, "ECDSAwithSHA3-224", "ES3-224")
    ECDSAwithSHA3_256 = (5, "ECDSAwithSHA3-256", "ES3-256")
    ECDSAwithSHA3_384 = (6, "ECDSAwithSHA3-384", "ES3-384")
    ECDSAwithSHA3_512 = (7, "ECDSAwithSHA3-512", "ES3-512")
    ECDSAwithRIPEMD160 = (8, "ECDSAwithRIPEMD160", "ER160")
    SM2withSM3 = (9, "SM2withSM3", "SM")
    EDDSAwithSHA512 = (10, "EDDSAwithSHA512", "EDS512")

    @property
    def hex(self) -> int:
        """Numeric code of the scheme."""
        return self.tag

    @property
    def label_jws(self) -> str:
        """Label of the scheme in JWS."""
        assert self.description
        return self.description

    @property
    def key_type(self) -> KeyType:
        """Key type the scheme can be used with."""
        return _SCHEME_KEY_TYPES[self]

    @property
    def hash_algorithm(self) -> EnumHashAlgorithm:
        """Hash function of the scheme."""
        return _SCHEME_HASHES[self]

    @classmethod
    def from_hex(cls, hex: int) -> Self:  # pylint: disable=redefined-builtin
        """Find signature scheme corresponding to specified code.

        :param hex: Byte value of the scheme.
        :raises SchemeNotFoundError: No scheme has the code.
        :return: Signature scheme.
        """
        for item in cls.__members__.values():
            if item.tag == hex:
                return item
        raise SchemeNotFoundError(f"Signature scheme with code {hex} not found")

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Find signature scheme corresponding to specified code.

        :param tag: Byte value of the scheme.
        :raises SchemeNotFoundError: No scheme has the code.
        :return: Signature scheme.
        """
        return cls.from_hex(tag)

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Find signature scheme corresponding to specified label.

        :param label: Label, e.g. 'SM2withSM3'.
        :raises SchemeNotFoundError: No scheme has the label.
        :return: Signature scheme.
        """
        for item in cls.__members__.values():
            if item.label == label:
                return item
        raise SchemeNotFoundError(f"Signature scheme with label {label} not found")

    @classmethod
    def from_label_jws(cls, label: str) -> Self:
        """Find signature scheme corresponding to specified JWS label.

        :param label: JWS label, e.g. 'ES256'.
        :raises SchemeNotFoundError: No scheme has the JWS label.
        :return: Signature scheme.
        """
        for item in cls.__members__.values():
            if item.description == label:
                return item
        raise SchemeNotFoundError(f"Signature scheme with JWS label {label} not found")

    @staticmethod
    def default_for(key_type: KeyType) -> "SignatureScheme":
        """Get default signature scheme of a key type.

        :param key_type: Key type.
        :return: Scheme used when signing without explicit scheme.
        """
        return _DEFAULT_SCHEMES[key_type]


_SCHEME_KEY_TYPES = {
    SignatureScheme.ECDSAwithSHA224: KeyType.ECDSA,
    SignatureScheme.ECDSAwithSHA256: KeyType.ECDSA,
    SignatureScheme.ECDSAwithSHA384: KeyType.ECDSA,
    SignatureScheme.ECDSAwithSHA512: KeyType.ECDSA,
    SignatureScheme.ECDSAwithSHA3_224: KeyType.ECDSA,
    SignatureScheme.ECDSAwithSHA3_256: KeyType.ECDSA,
    SignatureScheme.ECDSAwithSHA3_384: KeyType.ECDSA,
    SignatureScheme.ECDSAwithSHA3_512: KeyType.ECDSA,
    SignatureScheme.ECDSAwithRIPEMD160: KeyType.ECDSA,
    SignatureScheme.SM2withSM3: KeyType.SM2,
    SignatureScheme.EDDSAwithSHA512: KeyType.EDDSA,
}

_SCHEME_HASHES = {
    SignatureScheme.ECDSAwithSHA224: EnumHashAlgorithm.SHA224,
    SignatureScheme.ECDSAwithSHA256: EnumHashAlgorithm.SHA256,
    SignatureScheme.ECDSAwithSHA384: EnumHashAlgorithm.SHA384,
    SignatureScheme.ECDSAwithSHA512: EnumHashAlgorithm.SHA512,
    SignatureScheme.ECDSAwithSHA3_224: EnumHashAlgorithm.SHA3_224,
    SignatureScheme.ECDSAwithSHA3_256: EnumHashAlgorithm.SHA3_256,
    SignatureScheme.ECDSAwithSHA3_384: EnumHashAlgorithm.SHA3_384,
    SignatureScheme.ECDSAwithSHA3_512: EnumHashAlgorithm.SHA3_512,
    SignatureScheme.ECDSAwithRIPEMD160: EnumHashAlgorithm.RIPEMD160,
    SignatureScheme.SM2withSM3: EnumHashAlgorithm.SM3,
    SignatureScheme.EDDSAwithSHA512: EnumHashAlgorithm.SHA512,
}

_DEFAULT_SCHEMES = {
    KeyType.ECDSA: SignatureScheme.ECDSAwithSHA256,
    KeyType.SM2: SignatureScheme.SM2withSM3,
    KeyType.EDDSA: SignatureScheme.EDDSAwithSHA512,
}
