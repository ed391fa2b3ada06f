#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK application utilities: application errors, error to exit code mapping, file checks."""

import logging
import os
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from ontsdk import ONTSDK_DEBUG_LOG_FILE, ONTSDK_DEBUG_LOGGING_DISABLED
from ontsdk.exceptions import ONTSDKError

logger = logging.getLogger(__name__)


class ONTSDKAppError(ONTSDKError):
    """ONTSDK application error carrying the process exit code.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


def catch_ontsdk_error(function: Callable) -> Callable:
    """Catch and handle ONTSDKError and other exceptions.

    * ONTSDKAppError: message is printed, exit with the error's code (1 by default),
    * ONTSDKError or AssertionError: message is printed, exit code 2,
    * any other exception (including KeyboardInterrupt): exit code 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except ONTSDKAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, ONTSDKError) as ontsdk_exc:
            click.echo(f"{ontsdk_exc.__class__.__name__}: {ontsdk_exc}", err=True)
            logger.debug(str(ontsdk_exc), exc_info=True)
            if not ONTSDK_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {ONTSDK_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not ONTSDK_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {ONTSDK_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper


def check_file_exists(path: str, force_overwrite: bool = False) -> None:
    """Check if file exists and whether it may be overwritten.

    :param path: Path to the output file.
    :param force_overwrite: Allow overwriting of an existing file.
    :raises ONTSDKAppError: The file exists and overwriting is not allowed.
    """
    if os.path.isfile(path) and not force_overwrite:
        raise ONTSDKAppError(f"File '{path}' already exists. Use --force to overwrite it.")
