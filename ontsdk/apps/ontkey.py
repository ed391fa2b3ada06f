#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Key management and signing tool.

Private keys are stored as JSON key records ``{key, algorithm, parameters}``.
Password protected records carry the encrypted key and a ``scrypt`` section
with the cost parameters used.
"""

import json
import logging
import sys
from typing import Any, Optional

import click

from ontsdk.apps.utils import ontsdk_logger
from ontsdk.apps.utils.common_cli_options import ontsdk_apps_common_options, ontsdk_password_option
from ontsdk.apps.utils.utils import ONTSDKAppError, catch_ontsdk_error, check_file_exists
from ontsdk.crypto import (
    CurveLabel,
    KeyParameters,
    KeyType,
    PrivateKey,
    PublicKey,
    ScryptParams,
    Signature,
    SignatureScheme,
)
from ontsdk.utils.misc import load_configuration, load_secret, write_file

logger = logging.getLogger(__name__)


def load_key_record(path: str) -> dict[str, Any]:
    """Load JSON (or YAML) key record.

    :param path: Path to the key file.
    :return: Key record.
    """
    return load_configuration(path)


def load_private_key(path: str, password: Optional[str] = None) -> PrivateKey:
    """Load private key from key file, decrypting it when it's password protected.

    :param path: Path to the key file.
    :param password: Passphrase source (text, file or $ENV_VAR).
    :raises ONTSDKAppError: The key is encrypted and no password was given, or its
        scrypt parameters are incomplete.
    :return: Plain private key.
    """
    record = load_key_record(path)
    key = PrivateKey.deserialize_json(record)
    if "scrypt" not in record:
        return key
    if not password:
        raise ONTSDKAppError(f"Private key in '{path}' is encrypted, use --password")
    scrypt = record["scrypt"]
    try:
        params = ScryptParams(n=scrypt["n"], r=scrypt["r"], p=scrypt["p"], dk_len=scrypt["dkLen"])
    except (KeyError, TypeError) as exc:
        raise ONTSDKAppError(f"Invalid scrypt parameters in '{path}': {exc}") from exc
    logger.info(f"Decrypting private key from {path}")
    return key.decrypt(load_secret(password), params)


def save_private_key(
    key: PrivateKey,
    path: str,
    password: Optional[str] = None,
    params: Optional[ScryptParams] = None,
) -> None:
    """Store private key as key record.

    :param key: Plain private key.
    :param path: Output path.
    :param password: Passphrase source, the key is stored in plain form if omitted.
    :param params: Scrypt parameters for encryption.
    """
    record = key.serialize_json()
    if password:
        params = params or ScryptParams()
        record = key.encrypt(load_secret(password), params).serialize_json()
        record["scrypt"] = {"n": params.n, "r": params.r, "p": params.p, "dkLen": params.dk_len}
    write_file(json.dumps(record, indent=2), path)


@click.group(name="ontkey", no_args_is_help=True)
@ontsdk_apps_common_options
def main(log_level: int) -> None:
    """Utility for Ontology key generation, signing and verification."""
    ontsdk_logger.install(level=log_level)


@main.command(name="schemes")
def schemes() -> None:
    """List supported signature schemes."""
    for scheme in SignatureScheme:
        click.echo(
            f"{scheme.hex:>2}  {scheme.label:<20} {scheme.label_jws:<8} {scheme.key_type.label}"
        )


@main.command(name="generate", no_args_is_help=True)
@click.option(
    "-a",
    "--algorithm",
    type=click.Choice(KeyType.labels(), case_sensitive=False),
    help="Key type, default is ECDSA.",
)
@click.option(
    "-c",
    "--curve",
    type=click.Choice(CurveLabel.labels(), case_sensitive=False),
    help="Curve of the key, default curve of the key type if omitted.",
)
@ontsdk_password_option()
@click.option("--force", is_flag=True, default=False, help="Force overwriting of an existing file.")
@click.argument("path", type=click.Path(dir_okay=False, resolve_path=True))
def generate(
    algorithm: Optional[str], curve: Optional[str], password: Optional[str], force: bool, path: str
) -> None:
    """Generate random private key.

    \b
    PATH    - output file path, where the key record will be stored.
    """
    check_file_exists(path, force)
    key_type = KeyType.from_label(algorithm) if algorithm else None
    parameters = KeyParameters(CurveLabel.from_label(curve)) if curve else None
    if key_type is None and parameters is not None:
        key_type = parameters.curve.key_type
    logger.info("Generating private key...")
    key = PrivateKey.random(key_type, parameters)
    save_private_key(key, path, password)
    click.echo(f"The private key has been created: {path}")
    click.echo(f"Public key: {key.get_public_key().serialize_hex()}")


@main.command(name="pubkey", no_args_is_help=True)
@ontsdk_password_option()
@click.argument("key_file", type=click.Path(exists=True, dir_okay=False))
def pubkey(password: Optional[str], key_file: str) -> None:
    """Print public key of a private key.

    \b
    KEY_FILE    - private key record.
    """
    click.echo(load_private_key(key_file, password).get_public_key().serialize_hex())


@main.command(name="sign", no_args_is_help=True)
@ontsdk_password_option()
@click.option(
    "-s",
    "--scheme",
    type=click.Choice(SignatureScheme.labels(), case_sensitive=False),
    help="Signature scheme, default scheme of the key type if omitted.",
)
@click.option("--public-key-id", help="Identifier of the signer's public key.")
@click.argument("key_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("message")
def sign(
    password: Optional[str],
    scheme: Optional[str],
    public_key_id: Optional[str],
    key_file: str,
    message: str,
) -> None:
    """Sign hex encoded message.

    \b
    KEY_FILE    - private key record.
    MESSAGE     - hex encoded message.
    """
    key = load_private_key(key_file, password)
    signature = key.sign(
        message, SignatureScheme.from_label(scheme) if scheme else None, public_key_id
    )
    click.echo(signature.serialize_hex())


@main.command(name="verify", no_args_is_help=True)
@click.option(
    "-k", "--public-key", required=True, help="Serialized public key in hex (see 'pubkey')."
)
@click.argument("message")
@click.argument("signature")
def verify(public_key: str, message: str, signature: str) -> None:
    """Verify signature of hex encoded message.

    \b
    MESSAGE     - hex encoded message.
    SIGNATURE   - serialized signature in hex (see 'sign').
    """
    key = PublicKey.deserialize_hex(public_key)
    if not key.verify(message, Signature.deserialize_hex(signature)):
        raise ONTSDKAppError("Invalid signature")
    click.echo("Signature is OK")


@main.command(name="encrypt", no_args_is_help=True)
@ontsdk_password_option(required=True)
@click.option("--force", is_flag=True, default=False, help="Force overwriting of an existing file.")
@click.argument("key_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def encrypt(password: str, force: bool, key_file: str, output: str) -> None:
    """Protect plain private key with password.

    \b
    KEY_FILE    - plain private key record.
    OUTPUT      - path to the encrypted key record.
    """
    if "scrypt" in load_key_record(key_file):
        raise ONTSDKAppError(f"Private key in '{key_file}' is already encrypted")
    check_file_exists(output, force)
    save_private_key(load_private_key(key_file), output, password)
    click.echo(f"The encrypted private key has been created: {output}")


@main.command(name="decrypt", no_args_is_help=True)
@ontsdk_password_option(required=True)
@click.option("--force", is_flag=True, default=False, help="Force overwriting of an existing file.")
@click.argument("key_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def decrypt(password: str, force: bool, key_file: str, output: str) -> None:
    """Remove password protection of private key.

    \b
    KEY_FILE    - encrypted private key record.
    OUTPUT      - path to the plain key record.
    """
    check_file_exists(output, force)
    save_private_key(load_private_key(key_file, password), output)
    click.echo(f"The decrypted private key has been created: {output}")


@catch_ontsdk_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
