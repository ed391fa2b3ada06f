#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK logging utilities with colored console output support.

Applications call :func:`install` once at start. An optional ``logging.yaml``
(dictConfig schema) in the ONTSDK configuration directory is applied first.
"""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from ontsdk import (
    ONTSDK_CONFIG_DIR,
    ONTSDK_DEBUG,
    ONTSDK_DEBUG_LOG_FILE,
    ONTSDK_DEBUG_LOGGING_DISABLED,
    __version__,
)
from ontsdk.exceptions import ONTSDKError
from ontsdk.utils.misc import find_file, load_configuration

colorama.just_fix_windows_console()


def load_logging_config(search_paths: Optional[list[str]] = None) -> Optional[str]:
    """Apply ``logging.yaml`` configuration if present.

    :param search_paths: Directories to look for the file, the ONTSDK configuration
        directory by default.
    :return: Path of the applied configuration file or None if there is none.
    """
    try:
        config_file = find_file(
            "logging.yaml", use_cwd=False, search_paths=search_paths or [ONTSDK_CONFIG_DIR]
        )
    except ONTSDKError:
        return None
    logging.config.dictConfig(load_configuration(config_file))
    return config_file


class ColoredFormatter(logging.Formatter):
    """ONTSDK Colored Logging Formatter.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT_DEBUG,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()
        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with level specific format.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        formatter = logging.Formatter(self.formats.get(record.levelno))
        if not self.colored and isinstance(record.msg, str):
            record.msg = re.sub(r"\x1b\[\d{1,3}m", "", record.msg)
        return formatter.format(record)


def _install_debug_handler(target_logger: logging.Logger) -> None:
    for handler in target_logger.handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and handler.baseFilename == ONTSDK_DEBUG_LOG_FILE
        ):
            return
    os.makedirs(os.path.dirname(ONTSDK_DEBUG_LOG_FILE), exist_ok=True)
    debug_handler = logging.handlers.RotatingFileHandler(
        ONTSDK_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
    )
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    target_logger.addHandler(debug_handler)

    starter = f"* ONTSDK DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
    padding = len(starter) - 2
    target_logger.debug("*" * len(starter))
    target_logger.debug(starter)
    target_logger.debug(f"* ONTSDK version: {__version__}".ljust(padding) + " *")
    target_logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
    target_logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
    target_logger.debug(f"* Last command: {sys.argv}".ljust(padding) + " *")
    target_logger.debug("*" * len(starter))


def install(
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install ONTSDK log handler for colored output.

    :param level: logging level, defaults to logging.WARNING (DEBUG with ONTSDK_DEBUG set)
    :param stream: stream to output logging, defaults to current sys.stderr
    :param colored: colored output, always colored if true
    :param logger: defaults to the "ontsdk" logger
    :param create_debug_logger: create rotating debug log file
    """
    level = level or (logging.DEBUG if ONTSDK_DEBUG else logging.WARNING)
    stream = stream or sys.stderr
    target_logger = logger or logging.getLogger("ontsdk")
    target_logger.setLevel(logging.DEBUG)
    load_logging_config()

    color = hasattr(stream, "isatty") and stream.isatty() and "NO_COLOR" not in os.environ
    if colored is not None:
        color = colored

    # one console handler per logger, repeated installs replace it
    for handler in list(target_logger.handlers):
        if type(handler) is logging.StreamHandler and isinstance(
            handler.formatter, ColoredFormatter
        ):
            target_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)
    target_logger.propagate = True

    if create_debug_logger and not ONTSDK_DEBUG_LOGGING_DISABLED:
        try:
            _install_debug_handler(target_logger)
        except OSError as exc:
            target_logger.warning(f"Failed to initialize debug logging: {exc}")
