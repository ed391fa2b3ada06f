#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Tests for ontkey utility."""

import json
import os
from typing import Any

import pytest

from ontsdk import __version__ as ontsdk_version
from ontsdk.apps.ontkey import load_private_key, main
from ontsdk.apps.utils.utils import ONTSDKAppError
from ontsdk.crypto import KeyType, PrivateKey, PublicKey, Signature, SignatureScheme
from tests.cli_runner import CliRunner


def _generate(cli_runner: CliRunner, path: str, *args: str) -> str:
    """Generate key file and return the serialized public key printed by the tool."""
    result = cli_runner.invoke(main, ["generate", *args, path])
    assert "The private key has been created: " in result.stdout
    lines = [line for line in result.stdout.splitlines() if line.startswith("Public key: ")]
    return lines[0][len("Public key: ") :]


def test_command_line_interface(cli_runner: CliRunner) -> None:
    """Test for main menu options."""
    result = cli_runner.invoke(main, ["--help"])
    assert "Utility for Ontology key generation, signing and verification." in result.output
    for command in ("generate", "pubkey", "sign", "verify", "encrypt", "decrypt", "schemes"):
        assert command in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(main, ["--version"])
    assert ontsdk_version in result.output


def test_schemes(cli_runner: CliRunner) -> None:
    """Test listing of signature schemes."""
    result = cli_runner.invoke(main, ["schemes"])
    for scheme in SignatureScheme:
        assert scheme.label in result.stdout
    assert len(result.stdout.splitlines()) == len(SignatureScheme)


@pytest.mark.parametrize(
    "args, key_type, curve",
    [
        ([], "ECDSA", "P-256"),
        (["-a", "SM2"], "SM2", "sm2p256v1"),
        (["-a", "eddsa"], "EDDSA", "ed25519"),
        (["-c", "P-384"], "ECDSA", "P-384"),
        (["-c", "ed25519"], "EDDSA", "ed25519"),
        (["-a", "ECDSA", "-c", "P-521"], "ECDSA", "P-521"),
    ],
)
def test_generate(
    cli_runner: CliRunner, tmpdir: Any, args: list[str], key_type: str, curve: str
) -> None:
    """Test generation of plain key records.

    :param cli_runner: CLI runner.
    :param tmpdir: Temporary directory.
    :param args: Extra arguments of generate command.
    :param key_type: Expected key type label.
    :param curve: Expected curve label.
    """
    path = os.path.join(tmpdir, "key.json")
    public_key = _generate(cli_runner, path, *args)
    with open(path, encoding="utf-8") as f:
        record = json.load(f)
    assert record["algorithm"] == key_type
    assert record["parameters"] == {"curve": curve}
    key = PrivateKey.deserialize_json(record)
    assert key.get_public_key().serialize_hex() == public_key


def test_generate_curve_mismatch(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "key.json")
    cli_runner.invoke(main, ["generate", "-a", "SM2", "-c", "P-256", path], expected_code=1)
    assert not os.path.isfile(path)


def test_generate_invalid_algorithm(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "key.json")
    cli_runner.invoke(main, ["generate", "-a", "RSA", path], expected_code=2)
    assert not os.path.isfile(path)


def test_generate_force(cli_runner: CliRunner, tmpdir: Any) -> None:
    """Test existing key file is overwritten only with --force."""
    path = os.path.join(tmpdir, "key.json")
    first = _generate(cli_runner, path)
    # attempt to rewrite the key should fail
    cli_runner.invoke(main, ["generate", path], expected_code=1)
    assert load_private_key(path).get_public_key().serialize_hex() == first
    assert _generate(cli_runner, path, "--force") != first


def test_generate_encrypted(cli_runner: CliRunner, tmpdir: Any) -> None:
    """Test generated key protected with password."""
    path = os.path.join(tmpdir, "key.json")
    public_key = _generate(cli_runner, path, "-a", "SM2", "-p", "123456")
    with open(path, encoding="utf-8") as f:
        record = json.load(f)
    assert set(record["scrypt"]) == {"n", "r", "p", "dkLen"}
    assert len(bytes.fromhex(record["key"])) == 43
    assert load_private_key(path, "123456").get_public_key().serialize_hex() == public_key


def test_pubkey(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "key.json")
    public_key = _generate(cli_runner, path, "-a", "EDDSA")
    result = cli_runner.invoke(main, ["pubkey", path])
    assert result.stdout.strip() == public_key
    assert public_key.startswith("1419")


def test_pubkey_encrypted_without_password(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "key.json")
    _generate(cli_runner, path, "-p", "123456")
    cli_runner.invoke(main, ["pubkey", path], expected_code=1)
    cli_runner.invoke(main, ["pubkey", "-p", "654321", path], expected_code=1)
    cli_runner.invoke(main, ["pubkey", "-p", "123456", path])


@pytest.mark.parametrize("scrypt", [{"n": 1024}, {"n": 1024, "r": 8, "p": 1}, ["n"], None])
def test_pubkey_invalid_scrypt_parameters(cli_runner: CliRunner, tmpdir: Any, scrypt: Any) -> None:
    """Test incomplete scrypt section of encrypted key is reported as application error.

    :param scrypt: Broken scrypt section of the key record.
    """
    path = os.path.join(tmpdir, "key.json")
    _generate(cli_runner, path, "-p", "123456")
    with open(path, encoding="utf-8") as f:
        record = json.load(f)
    record["scrypt"] = scrypt
    with open(path, "w", encoding="utf-8") as f:
        json.dump(record, f)
    with pytest.raises(ONTSDKAppError, match="Invalid scrypt parameters"):
        load_private_key(path, "123456")
    cli_runner.invoke(main, ["pubkey", "-p", "123456", path], expected_code=1)


@pytest.mark.parametrize(
    "args, scheme",
    [
        (["-a", "ECDSA"], None),
        (["-a", "ECDSA"], "ECDSAwithSHA3-384"),
        (["-c", "P-224"], "ECDSAwithRIPEMD160"),
        (["-a", "SM2"], None),
        (["-a", "EDDSA"], "EDDSAwithSHA512"),
    ],
)
def test_sign_verify(cli_runner: CliRunner, tmpdir: Any, args: list[str], scheme: Any) -> None:
    """Test signature made by the tool is accepted by verify command.

    :param cli_runner: CLI runner.
    :param tmpdir: Temporary directory.
    :param args: Arguments of generate command.
    :param scheme: Signature scheme label or None for default.
    """
    path = os.path.join(tmpdir, "key.json")
    public_key = _generate(cli_runner, path, *args)
    cmd = ["sign", path, "00112233"]
    if scheme:
        cmd[1:1] = ["-s", scheme]
    signature = cli_runner.invoke(main, cmd).stdout.strip()
    parsed = Signature.deserialize_hex(signature)
    if scheme:
        assert parsed.algorithm.label == scheme
    assert PublicKey.deserialize_hex(public_key).verify("00112233", parsed)

    result = cli_runner.invoke(main, ["verify", "-k", public_key, "00112233", signature])
    assert "Signature is OK" in result.stdout
    cli_runner.invoke(main, ["verify", "-k", public_key, "0011", signature], expected_code=1)


def test_sign_scheme_mismatch(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "key.json")
    _generate(cli_runner, path, "-a", "EDDSA")
    cli_runner.invoke(main, ["sign", "-s", "SM2withSM3", path, "0011"], expected_code=1)


def test_sign_encrypted(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "key.json")
    public_key = _generate(cli_runner, path, "-p", "123456")
    signature = cli_runner.invoke(main, ["sign", "-p", "123456", path, "0011"]).stdout.strip()
    cli_runner.invoke(main, ["verify", "-k", public_key, "0011", signature])


def test_verify_other_key(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "key.json")
    other_path = os.path.join(tmpdir, "other.json")
    _generate(cli_runner, path)
    other_public_key = _generate(cli_runner, other_path)
    signature = cli_runner.invoke(main, ["sign", path, "0011"]).stdout.strip()
    result = cli_runner.invoke(
        main, ["verify", "-k", other_public_key, "0011", signature], expected_code=1
    )
    assert "Signature is OK" not in result.stdout


def test_encrypt_decrypt(cli_runner: CliRunner, tmpdir: Any) -> None:
    """Test password protection of an existing key file and its removal."""
    path = os.path.join(tmpdir, "key.json")
    encrypted_path = os.path.join(tmpdir, "key_enc.json")
    decrypted_path = os.path.join(tmpdir, "key_dec.json")
    _generate(cli_runner, path, "-a", "EDDSA")
    key = load_private_key(path)

    cli_runner.invoke(main, ["encrypt", "-p", "123456", path, encrypted_path])
    with open(encrypted_path, encoding="utf-8") as f:
        record = json.load(f)
    assert record["key"] != key.key
    assert record["algorithm"] == KeyType.EDDSA.label
    assert "scrypt" in record
    # already encrypted
    cli_runner.invoke(
        main,
        ["encrypt", "-p", "123456", encrypted_path, os.path.join(tmpdir, "x.json")],
        expected_code=1,
    )
    # wrong password
    cli_runner.invoke(
        main, ["decrypt", "-p", "654321", encrypted_path, decrypted_path], expected_code=1
    )
    assert not os.path.isfile(decrypted_path)

    cli_runner.invoke(main, ["decrypt", "-p", "123456", encrypted_path, decrypted_path])
    assert load_private_key(decrypted_path) == key
    # output exists
    cli_runner.invoke(
        main, ["decrypt", "-p", "123456", encrypted_path, decrypted_path], expected_code=1
    )
    cli_runner.invoke(main, ["decrypt", "-p", "123456", "--force", encrypted_path, decrypted_path])


def test_password_from_environment(cli_runner: CliRunner, tmpdir: Any, monkeypatch: Any) -> None:
    """Test password given as environment variable reference."""
    monkeypatch.setenv("ONTKEY_TEST_PASSWORD", "123456")
    path = os.path.join(tmpdir, "key.json")
    _generate(cli_runner, path, "-p", "$ONTKEY_TEST_PASSWORD")
    assert load_private_key(path, "123456")
