#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `toyecc.ecc.number_theory` module."

from math import gcd

import pytest

from toyecc.ecc.number_theory import ceil_sqrt, mod_inv, xgcd
from toyecc.exceptions import NotInvertibleError, ToyECCValueError

primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 61, 97, 1021]


def test_xgcd() -> None:
    for a in range(60):
        for b in range(60):
            g, x, y = xgcd(a, b)
            assert g == gcd(a, b)
            assert a * x + b * y == g


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(NotInvertibleError, match="0 is not invertible"):
            mod_inv(0, p)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert 0 <= inv < p
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1


def test_mod_inv() -> None:
    max_m = 100
    for m in range(2, max_m):
        nums = list(range(m))
        for a in nums:
            mult = [a * i % m for i in nums]
            if 1 in mult:
                inv = mod_inv(a, m)
                assert a * inv % m == 1
                inv = mod_inv(a + m, m)
                assert a * inv % m == 1
            else:
                err_msg = f"{a} is not invertible"
                with pytest.raises(NotInvertibleError, match=err_msg):
                    mod_inv(a, m)


def test_ceil_sqrt() -> None:
    assert ceil_sqrt(0) == 0
    assert ceil_sqrt(1) == 1
    assert ceil_sqrt(966) == 32
    assert ceil_sqrt(1024) == 32
    assert ceil_sqrt(1025) == 33
    for n in range(1, 2000):
        r = ceil_sqrt(n)
        assert r * r >= n
        assert (r - 1) * (r - 1) < n

    with pytest.raises(ToyECCValueError, match="negative n: "):
        ceil_sqrt(-1)
