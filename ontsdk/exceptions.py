#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK exception classes.

This module defines the hierarchy of custom exception classes used throughout
the ONTSDK library for consistent error handling and reporting.
"""

from typing import Optional

#######################################################################
# # Ontology SDK Exceptions
#######################################################################


class ONTSDKError(Exception):
    """Ontology SDK Base Exception.

    Base exception class for all ONTSDK-related errors. All ONTSDK-specific
    exceptions inherit from this class.

    :cvar fmt: Default error message format template.
    """

    fmt = "ONTSDK: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base ONTSDK Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class ONTSDKKeyError(ONTSDKError, KeyError):
    """ONTSDK Key Error exception for missing or unknown lookup keys."""


class ONTSDKValueError(ONTSDKError, ValueError):
    """ONTSDK standard value error exception."""


class ONTSDKTypeError(ONTSDKError, TypeError):
    """ONTSDK standard type error exception."""


class ONTSDKVerificationError(ONTSDKError):
    """ONTSDK verification error exception.

    Raised when a verification step fails, such as checking a decrypted key
    against its expected public key.
    """


class ONTSDKUnsupportedOperation(ONTSDKError):
    """ONTSDK unsupported operation exception.

    Raised when an operation is requested that the current key type or
    signature scheme does not support.
    """
