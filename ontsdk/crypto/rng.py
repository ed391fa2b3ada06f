#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK cryptographic random number generation utilities.

Thin wrappers around the ``secrets`` module, which draws from the operating
system CSPRNG and is safe to use from multiple threads.
"""

# Used security modules


from secrets import randbelow, token_bytes


def random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes.

    :param length: The number of random bytes to generate.
    :raises ValueError: If length is negative.
    :return: Cryptographically secure random bytes of specified length.
    """
    return token_bytes(length)


def rand_below(upper_bound: int) -> int:
    """Generate a random integer in the range [0, upper_bound).

    :param upper_bound: The exclusive upper bound for the random number.
    :return: Random integer.
    """
    return randbelow(upper_bound)
