#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve group explorer functions.

These functions are meant to explore low-cardinality curve groups,
for didactical (and fun) reason only.
"""

from typing import Dict, List, Set

from toyecc.ecc.ec_point import ECPoint, infinity
from toyecc.ecc.felt import Felt
from toyecc.exceptions import ModulusMismatchError, ToyECCValueError

MAX_ENUMERATION_MODULUS = 10000


def enumerate_points(a: Felt, b: Felt) -> Set[ECPoint]:
    """Return all the points of the (a, b) curve group, INF included.

    Very unsophisticated walk-through approach,
    for didactical sake only:
    every (x, y) pair whose y is a square root of x^3 + a*x + b
    is built through the validating constructor.
    """
    if a.modulus != b.modulus:
        err_msg = f"a and b have different moduli: {a.modulus} != {b.modulus}"
        raise ModulusMismatchError(err_msg)
    p = a.modulus
    if p > MAX_ENUMERATION_MODULUS:
        err_msg = f"p is too big to count all group points: {p}"
        raise ToyECCValueError(err_msg)

    # y candidates indexed by their square
    roots: Dict[int, List[int]] = {}
    for y in range(p):
        roots.setdefault(y * y % p, []).append(y)

    points: Set[ECPoint] = {infinity(a, b)}
    for x in range(p):
        x_ = Felt(x, p)
        y2 = x_.pow(3) + a * x_ + b
        for y in roots.get(y2.value, []):
            points.add(ECPoint(x_, Felt(y, p), a, b))

    return points


def find_subgroup_points(G: ECPoint) -> List[ECPoint]:
    """Return all G-generated subgroup points, ending with INF.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if G.p > MAX_ENUMERATION_MODULUS:
        err_msg = f"p is too big to count all subgroup points: {G.p}"
        raise ToyECCValueError(err_msg)

    points: List[ECPoint] = [G]
    while not points[-1].infinity:
        points.append(points[-1] + G)

    return points
