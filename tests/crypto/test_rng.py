#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Random number generator tests."""

from ontsdk.crypto.rng import rand_below, random_bytes


def test_random_bytes() -> None:
    """Test random bytes generation functionality.

    Verifies the return type, length, and that two draws differ.
    """
    random = random_bytes(16)
    assert isinstance(random, bytes)
    assert len(random) == 16
    assert random != random_bytes(16)


def test_rand_below() -> None:
    """Test random integer stays below the bound."""
    assert all(0 <= rand_below(10) < 10 for _ in range(100))
