#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic classes are only meant to discriminate between Exceptions
raised by toyecc from those raised by other codebase.
The specific classes carry the offending values, for diagnostics.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the toyecc versions are derived.
"""


class ToyECCValueError(ValueError):
    pass


class ToyECCTypeError(TypeError):
    pass


class ToyECCRuntimeError(RuntimeError):
    pass


class NotInvertibleError(ToyECCValueError):
    "gcd(value, modulus) != 1, so value has no multiplicative inverse."

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(f"{value} is not invertible (mod {modulus})")
        self.value = value
        self.modulus = modulus


class DivisionByZeroError(ToyECCValueError, ZeroDivisionError):
    pass


class ModulusMismatchError(ToyECCValueError):
    pass


class CurveMismatchError(ToyECCValueError):
    pass


class PointNotOnCurveError(ToyECCValueError):
    "(x, y) does not satisfy y^2 = x^3 + a*x + b."

    def __init__(self, x: int, y: int, a: int, b: int) -> None:
        err_msg = f"point ({x}, {y}) is not on the curve"
        err_msg += f" y^2 = x^3 + {a}x + {b}"
        super().__init__(err_msg)
        self.x = x
        self.y = y
        self.a = a
        self.b = b
