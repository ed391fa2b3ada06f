#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Private key: generation, public key derivation, signing and password protection.

Signature encodings per key type:

* ECDSA: ``r || s``, both big endian with fixed width
  (32 bytes, or the coordinate size for curves larger than 256 bits),
* EdDSA: ``R || S`` as produced by ed25519 (64 bytes),
* SM2: ``hex(user_id || NUL) || r || s``.
"""

import logging
from typing import Optional, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from typing_extensions import Self

from ontsdk.crypto import scrypt
from ontsdk.crypto.ecc import (
    get_signature_coordinate_size,
    load_ec_private_key,
    load_ed25519_private_key,
    serialize_signature,
)
from ontsdk.crypto.exceptions import (
    DecryptionError,
    UnsupportedAlgorithmError,
    UnsupportedSchemeError,
)
from ontsdk.crypto.hash import get_prehashed
from ontsdk.crypto.key import JsonKey, Key
from ontsdk.crypto.key_type import KeyParameters, KeyType
from ontsdk.crypto.oscca import compress_point, encode_sm2_signature, sm2_public_point, sm2_sign
from ontsdk.crypto.public_key import PublicKey
from ontsdk.crypto.rng import random_bytes
from ontsdk.crypto.scrypt import ScryptParams
from ontsdk.crypto.signature import Signature
from ontsdk.crypto.signature_scheme import SignatureScheme
from ontsdk.exceptions import ONTSDKValueError

logger = logging.getLogger(__name__)

PRIVATE_KEY_SIZE = 32


class PrivateKey(Key):
    """Private key of any supported key type."""

    def __repr__(self) -> str:
        return f"PrivateKey({self.algorithm.label}, {self.parameters.curve.label})"

    @classmethod
    def random(
        cls, key_type: Optional[KeyType] = None, parameters: Optional[KeyParameters] = None
    ) -> Self:
        """Generate random private key.

        :param key_type: Key type, configured default if omitted.
        :param parameters: Curve parameters, default curve of the key type if omitted.
        :return: New private key.
        """
        if key_type is not None and parameters is None:
            parameters = KeyParameters.default(key_type)
        key = cls(random_bytes(PRIVATE_KEY_SIZE).hex(), key_type, parameters)
        logger.debug(f"Generated {key.algorithm.label} key on {key.parameters.curve.label}")
        return key

    @classmethod
    def deserialize_json(cls, json: Union[str, JsonKey]) -> Self:
        """Create private key from JSON structure.

        :param json: JSON key record {key, algorithm, parameters}, parsed or as text.
        :raises ONTSDKValueError: The record is malformed.
        :raises UnknownAlgorithmError: Unknown key type or curve label.
        :return: Private key.
        """
        return cls(*cls._load_json(json))

    def get_public_key(self) -> PublicKey:
        """Derive public key.

        :raises UnsupportedAlgorithmError: The key type has no derivation rule.
        :return: Public key with the same key type and parameters.
        """
        if self.algorithm == KeyType.ECDSA:
            public_key = load_ec_private_key(self.key_bytes, self.parameters.curve).public_key()
            key = public_key.public_bytes(
                serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
            ).hex()
        elif self.algorithm == KeyType.EDDSA:
            key = (
                load_ed25519_private_key(self.key_bytes)
                .public_key()
                .public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)
                .hex()
            )
        elif self.algorithm == KeyType.SM2:
            key = compress_point(sm2_public_point(self.key_bytes))
        else:
            raise UnsupportedAlgorithmError(f"Unsupported key type: {self.algorithm.label}")
        return PublicKey(key, self.algorithm, self.parameters)

    def sign(
        self,
        msg: str,
        scheme: Optional[SignatureScheme] = None,
        public_key_id: Optional[str] = None,
    ) -> Signature:
        """Sign message.

        :param msg: Hex encoded message.
        :param scheme: Signature scheme, the default scheme of the key type if omitted.
        :param public_key_id: Identifier of the signer's public key put into the signature.
        :raises SchemeMismatchError: The scheme can't be used with the key type.
        :raises UnsupportedSchemeError: The scheme has no signing rule.
        :return: Signature.
        """
        if scheme is None:
            scheme = SignatureScheme.default_for(self.algorithm)
        self.check_scheme(scheme)
        data = self.compute_hash(msg, scheme)
        logger.debug(f"Signing {len(data)} bytes with {scheme.label}")

        if scheme.key_type == KeyType.ECDSA:
            private_key = load_ec_private_key(self.key_bytes, self.parameters.curve)
            signature = private_key.sign(data, ec.ECDSA(get_prehashed(scheme.hash_algorithm)))
            value = serialize_signature(
                signature, get_signature_coordinate_size(self.parameters.curve)
            ).hex()
        elif scheme == SignatureScheme.EDDSAwithSHA512:
            value = load_ed25519_private_key(self.key_bytes).sign(data).hex()
        elif scheme == SignatureScheme.SM2withSM3:
            value = encode_sm2_signature(sm2_sign(self.key_bytes, data))
        else:
            raise UnsupportedSchemeError(f"Unsupported signature scheme: {scheme.label}")
        return Signature(scheme, value, public_key_id)

    def encrypt(self, passphrase: str, params: Optional[ScryptParams] = None) -> Self:
        """Encrypt the private key with passphrase.

        :param passphrase: Passphrase to encrypt with.
        :param params: Scrypt parameters, defaults are used if omitted.
        :raises ONTSDKValueError: Empty passphrase.
        :return: Private key holding the encrypted key with unchanged key type and parameters.
        """
        encrypted = scrypt.encrypt(self.key, self.get_public_key().key, passphrase, params)
        logger.debug(f"Encrypted {self.algorithm.label} private key")
        return type(self)(encrypted, self.algorithm, self.parameters)

    def decrypt(self, passphrase: str, params: Optional[ScryptParams] = None) -> Self:
        """Decrypt encrypted private key with passphrase.

        The decrypted key is accepted only when its public key matches the
        public key the key was encrypted against.

        :param passphrase: Passphrase to decrypt with.
        :param params: Scrypt parameters, must match those used to encrypt.
        :raises DecryptionError: Wrong passphrase or corrupted encrypted key.
        :return: Decrypted private key.
        """
        candidate = scrypt.decrypt(self.key, passphrase, params)
        try:
            key = type(self)(candidate, self.algorithm, self.parameters)
            public_key = key.get_public_key()
        except ONTSDKValueError as exc:
            raise DecryptionError("Decryption failed, wrong passphrase or corrupted key") from exc
        scrypt.check_decrypted(self.key, public_key.key)
        logger.debug(f"Decrypted {self.algorithm.label} private key")
        return key
