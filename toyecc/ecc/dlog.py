#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve discrete logarithm solvers.

Given a generator P and a target T on the same curve,
find the minimal positive k such that k*P == T.

A missing solution (T not in the subgroup generated by P)
is an ordinary outcome: the solvers return None.
Both solvers are meant for low-cardinality curves only.
"""

from typing import Dict, Optional

from toyecc.ecc.ec_point import ECPoint, require_point
from toyecc.ecc.number_theory import ceil_sqrt
from toyecc.exceptions import ToyECCValueError


def brute_force_dlog(P: ECPoint, T: ECPoint) -> Optional[int]:
    """Exhaustive search of k, walking k*P for k = 1, 2, ...

    The walk stops at INF, i.e. having exhausted
    the whole cyclic subgroup generated by P.
    Cost is O(order).
    """
    require_point(P).require_same_curve(require_point(T))

    k = 1
    Q = P
    while True:
        if Q == T:
            return k
        if Q.infinity:
            return None
        Q += P
        k += 1


def bsgs_dlog(P: ECPoint, T: ECPoint, order: Optional[int] = None) -> Optional[int]:
    """Baby-step giant-step search of k.

    With n the order of P and m = ceil(sqrt(n)),
    the baby steps i*P (i = 1..m) are tabulated,
    then the giant steps T - j*(m*P) (j = 0..m-1) are probed
    until one of them hits the table: k = j*m + i.

    The first hit in ascending j order is the minimal k:
    the returned k satisfies k*P == T and 1 <= k <= n.
    Cost is O(sqrt(n)) time and space,
    on top of the O(n) order computation if order is not provided.
    """
    require_point(P).require_same_curve(require_point(T))

    n = P.order() if order is None else order
    if n < 1:
        raise ToyECCValueError(f"invalid order: {n}")
    m = ceil_sqrt(n)

    baby_steps: Dict[ECPoint, int] = {}
    Q = P
    for i in range(1, m + 1):
        baby_steps.setdefault(Q, i)
        Q += P

    minus_M = -(P * m)
    Q = T
    for j in range(m):
        i = baby_steps.get(Q)
        if i is not None:
            return j * m + i
        Q += minus_M

    return None
