#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Miscellaneous utilities tests."""

import os
from typing import Any
from unittest.mock import patch

import pytest

from ontsdk import value_to_bool, value_to_int
from ontsdk.exceptions import ONTSDKError
from ontsdk.utils.misc import find_file, get_abs_path, load_configuration, load_secret, write_file


def test_write_file(tmpdir: Any) -> None:
    """Test writing of text and binary files including missing parent folders.

    :param tmpdir: Temporary directory.
    """
    text_path = os.path.join(tmpdir, "sub", "file.txt")
    bin_path = os.path.join(tmpdir, "file.bin")
    assert write_file("hello", text_path) == 5
    assert write_file(b"\x00\x01", bin_path, mode="wb") == 2
    with open(text_path, encoding="utf-8") as f:
        assert f.read() == "hello"
    with open(bin_path, "rb") as f:
        assert f.read() == b"\x00\x01"


def test_find_file(tmpdir: Any) -> None:
    """Test file lookup in search paths and by absolute path.

    :param tmpdir: Temporary directory.
    """
    path = os.path.join(tmpdir, "file.txt")
    write_file("data", path)
    assert find_file("file.txt", use_cwd=False, search_paths=[str(tmpdir)]) == get_abs_path(path)
    assert find_file(path) == path
    with pytest.raises(ONTSDKError):
        find_file("file.txt", use_cwd=False)
    with pytest.raises(ONTSDKError):
        find_file(os.path.join(tmpdir, "missing.txt"))


def test_get_abs_path(tmpdir: Any) -> None:
    base = str(tmpdir)
    assert get_abs_path("a/b.txt", base) == os.path.abspath(os.path.join(base, "a/b.txt"))
    assert get_abs_path(os.path.join(base, "c.txt")) == os.path.join(base, "c.txt")


@pytest.mark.parametrize(
    "text",
    [
        '{"key": "11", "algorithm": "ECDSA"}',
        "key: '11'\nalgorithm: ECDSA\n",
    ],
)
def test_load_configuration(tmpdir: Any, text: str) -> None:
    """Test loading of JSON and YAML configuration.

    :param tmpdir: Temporary directory.
    :param text: Configuration text.
    """
    path = os.path.join(tmpdir, "config.cfg")
    write_file(text, path)
    assert load_configuration(path) == {"key": "11", "algorithm": "ECDSA"}


@pytest.mark.parametrize("text", ["", "- 1\n- 2\n", "key: [unclosed\n"])
def test_load_configuration_invalid(tmpdir: Any, text: str) -> None:
    """Test empty, non mapping and broken configuration files.

    :param tmpdir: Temporary directory.
    :param text: Configuration text.
    """
    path = os.path.join(tmpdir, "config.cfg")
    write_file(text, path)
    with pytest.raises(ONTSDKError):
        load_configuration(path)


def test_load_configuration_missing(tmpdir: Any) -> None:
    with pytest.raises(ONTSDKError):
        load_configuration(os.path.join(tmpdir, "missing.json"))


def test_load_secret(tmpdir: Any) -> None:
    """Test loading of secrets from files, environment variables and plain text.

    :param tmpdir: Temporary directory.
    """
    file_with_secret = os.path.join(tmpdir, "secret.txt")
    write_file("secret text\nsecond line\n", file_with_secret)
    assert load_secret(file_with_secret) == "secret text"
    assert load_secret("secret text") == "secret text"
    with patch.dict("os.environ", {"TEST_VAR": "secret text"}):
        assert load_secret("$TEST_VAR") == "secret text"
    with patch.dict("os.environ", {"TEST_VAR": file_with_secret}):
        assert load_secret("$TEST_VAR") == "secret text"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("True", True),
        ("true", True),
        ("T", True),
        ("1", True),
        ("False", False),
        ("yes", False),
        ("", False),
        (None, False),
        (1, True),
        (0, False),
        (True, True),
    ],
)
def test_value_to_bool(value: Any, expected: bool) -> None:
    """Test conversion of environment values to boolean.

    :param value: Input value.
    :param expected: Expected result.
    """
    assert value_to_bool(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [(None, 7), ("", 7), ("1024", 1024), ("0x400", 1024)],
)
def test_value_to_int(value: Any, expected: int) -> None:
    """Test conversion of environment values to integer.

    :param value: Input value.
    :param expected: Expected result.
    """
    assert value_to_int(value, 7) == expected
