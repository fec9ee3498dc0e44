#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Toy elliptic curves and their generators.

Low-cardinality short Weierstrass curves y^2 = x^3 + a*x + b (mod p),
small enough for exhaustive exploration and brute force discrete logs.
"""

from typing import Dict

from toyecc.ecc.ec_point import ECPoint
from toyecc.exceptions import ToyECCValueError

# name: (p, a, b, Gx, Gy)
_params = {
    # y^2 = x^3 + 6 (mod 43), with two generators of different order
    "ec43": (43, 0, 6, 13, 15),
    "ec43_g2": (43, 0, 6, 9, 2),
    "ec37": (37, 7, 13, 5, 5),
    "ec1021": (1021, 905, 100, 1006, 416),
    "ec1021_3": (1021, -3, -3, 379, 1011),
}

CURVES: Dict[str, ECPoint] = {}
for ec_name, (p, a, b, x, y) in _params.items():
    CURVES[ec_name] = ECPoint.from_int_coord(x, y, a, b, p)


def generator(ec_name: str) -> ECPoint:
    "Return the generator of the named curve."
    try:
        return CURVES[ec_name]
    except KeyError as e:
        err_msg = f"unknown curve: {ec_name}"
        err_msg += f" (available: {', '.join(CURVES)})"
        raise ToyECCValueError(err_msg) from e
