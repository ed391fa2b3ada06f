#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK miscellaneous utilities.

File helpers, configuration loading and byte order constants shared by the
library and the command line tools.
"""

import json
import logging
import os
from enum import Enum
from typing import Callable, Optional, Union

import yaml

from ontsdk.exceptions import ONTSDKError

logger = logging.getLogger(__name__)


class Endianness(str, Enum):
    """Endianness enumeration for byte order specification."""

    BIG = "big"
    LITTLE = "little"


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Convert relative or absolute file path to normalized absolute path.

    :param file_path: File path to be converted to absolute path.
    :param base_dir: Base directory to create absolute path, the system CWD if not specified.
    :return: Absolute file path with normalized separators.
    """
    if os.path.isabs(file_path):
        return file_path.replace("\\", "/")

    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path)).replace("\\", "/")


def _find_path(
    path: str,
    check_func: Callable[[str], bool],
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
) -> str:
    """Find and return the full path to a file or directory.

    Search paths take precedence over current working directory.

    :param path: File name, part of file path or full path to search for.
    :param check_func: Function to validate if the found path exists and meets criteria.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Full absolute path to the found file.
    :raises ONTSDKError: File not found in any of the searched locations.
    """
    path = path.replace("\\", "/")

    if os.path.isabs(path):
        if not check_func(path):
            raise ONTSDKError(f"Path '{path}' not found")
        return path
    if search_paths:
        for dir_candidate in search_paths:
            if not dir_candidate:
                continue
            path_candidate = get_abs_path(path, base_dir=dir_candidate.replace("\\", "/"))
            if check_func(path_candidate):
                return path_candidate
    if use_cwd and check_func(path):
        return get_abs_path(path)
    searched_in: list[str] = []
    if use_cwd:
        searched_in.append(os.path.abspath(os.curdir))
    if search_paths:
        searched_in.extend(filter(None, search_paths))
    raise ONTSDKError(f"Path '{path}' not found, Searched in: {', '.join(searched_in)}")


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
) -> str:
    """Find file in filesystem.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Full absolute path to the found file.
    :raises ONTSDKError: File not found in any of the search locations.
    """
    return _find_path(
        path=file_path, check_func=os.path.isfile, use_cwd=use_cwd, search_paths=search_paths
    )


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_file(data: Union[str, bytes], path: str, mode: str = "w", encoding: str = "utf-8") -> int:
    """Write data to a file, creating parent directories if needed.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param mode: File writing mode ('w' for text, 'wb' for binary), defaults to 'w'.
    :param encoding: Text encoding, defaults to 'utf-8'.
    :return: Number of characters or bytes written to the file.
    """
    path = path.replace("\\", "/")
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    logger.debug(f"Storing {'binary' if 'b' in mode else 'text'} file at {path}")
    with open(path, mode, encoding=None if "b" in mode else encoding) as f:
        return f.write(data)


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    JSON is tried first, YAML second.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises ONTSDKError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise ONTSDKError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise ONTSDKError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise ONTSDKError(f"Invalid configuration file: {path}")

    return config_data


def load_secret(value: str, search_paths: Optional[list[str]] = None) -> str:
    """Load secret text such as a passphrase.

    1. If the value is an existing path, first line of the file is returned
    2. If the value has format '$ENV_VAR', the value of the environment variable is used
       (and again, if it is a path to a file, the first line of that file)
    3. Otherwise the value itself is returned

    :param value: Input string to be used for loading the secret.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: The actual secret value.
    """
    value = os.path.expanduser(os.path.expandvars(value))
    try:
        file = find_file(file_path=value, search_paths=search_paths)
    except ONTSDKError:
        return value
    with open(file, encoding="utf-8") as f:
        return f.readline().strip()
