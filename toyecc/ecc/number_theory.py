#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory helpers for prime-field arithmetic.

The modular inverse is computed with the iterative extended
Euclidean algorithm; ceil_sqrt sizes the baby-step giant-step table.
"""

from math import isqrt
from typing import Tuple

from toyecc.exceptions import NotInvertibleError, ToyECCValueError


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    "Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."

    # invariant: a*s + b*t == r for both (r, s, t) and (r1, s1, t1)
    r, s, t = a, 1, 0
    r1, s1, t1 = b, 0, 1
    while r1:
        q = r // r1
        r, r1 = r1, r - q * r1
        s, s1 = s1, s - q * s1
        t, t1 = t1, t - q * t1
    return r, s, t


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    The Bezout coefficient is normalized into [0, m).
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise NotInvertibleError(a, m)


def ceil_sqrt(n: int) -> int:
    "Return the smallest integer r such that r*r >= n."

    if n < 0:
        raise ToyECCValueError(f"negative n: {n}")
    r = isqrt(n)
    return r if r * r == n else r + 1
