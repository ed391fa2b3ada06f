#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""CLI helper for Click."""

import logging
from typing import Any, Callable, TypeVar, Union

import click

from ontsdk import __version__ as ontsdk_version

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])


def ontsdk_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(ontsdk_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def ontsdk_password_option(required: bool = False) -> Callable[[FC], FC]:
    """Password click option decorator.

    Provides: `password: str` the passphrase protecting the private key. The value
    may be a literal, a path to a file or a '$ENV_VAR' reference.

    :param required: Password is required
    :return: Click decorator
    """
    return click.option(
        "-p",
        "--password",
        required=required,
        metavar="PASSWORD",
        help="Passphrase of the private key: text, path to a file or $ENV_VARIABLE.",
    )
