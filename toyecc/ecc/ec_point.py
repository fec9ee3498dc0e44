#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Points of a short Weierstrass elliptic curve over a prime field.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b Felt sharing the same modulus p,
together with a point at infinity.

The group is defined by the point addition group law.
Points from different (a, b) curves cannot be combined:
the group law raises CurveMismatchError.
"""

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin

from toyecc.alias import Integer
from toyecc.ecc.felt import Felt
from toyecc.exceptions import (
    CurveMismatchError,
    ModulusMismatchError,
    PointNotOnCurveError,
    ToyECCRuntimeError,
    ToyECCTypeError,
    ToyECCValueError,
)


@dataclass(frozen=True)
class ECPoint(DataClassJsonMixin):
    x: Felt
    y: Felt
    a: Felt
    b: Felt
    # if True, x and y are the zero sentinel and carry no meaning
    infinity: bool = False

    def __init__(
        self,
        x: Felt,
        y: Felt,
        a: Felt,
        b: Felt,
        infinity: bool = False,
        check_validity: bool = True,
    ) -> None:

        if infinity:
            x = Felt(0, a.modulus)
            y = Felt(0, a.modulus)

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "infinity", infinity)

        if check_validity:
            self.assert_valid()

    @classmethod
    def infinity_point(cls, a: Felt, b: Felt) -> "ECPoint":
        "Return the identity element of the (a, b) curve group."
        zero = Felt(0, a.modulus)
        return cls(zero, zero, a, b, infinity=True)

    @classmethod
    def from_int_coord(
        cls, x: Integer, y: Integer, a: Integer, b: Integer, p: Integer
    ) -> "ECPoint":
        "Return the (x, y) point of the y^2 = x^3 + a*x + b (mod p) curve."
        return cls(Felt(x, p), Felt(y, p), Felt(a, p), Felt(b, p))

    @property
    def p(self) -> int:
        return self.a.modulus

    def assert_valid(self) -> None:
        moduli = {self.x.modulus, self.y.modulus, self.a.modulus, self.b.modulus}
        if len(moduli) != 1:
            err_msg = "x, y, a, and b must share the same modulus: "
            err_msg += ", ".join(str(m) for m in sorted(moduli))
            raise ModulusMismatchError(err_msg)

        if self.infinity:
            return

        lhs = self.y.pow(2)
        rhs = self.x.pow(3) + self.a * self.x + self.b
        if lhs != rhs:
            raise PointNotOnCurveError(
                self.x.value, self.y.value, self.a.value, self.b.value
            )

    def is_on_same_curve(self, other: "ECPoint") -> bool:
        return self.a == other.a and self.b == other.b

    def require_same_curve(self, other: "ECPoint") -> None:
        """Require the other point to be on the same (a, b) curve.

        An Error is raised if not.
        """
        if not self.is_on_same_curve(other):
            err_msg = "points are not on the same curve: "
            err_msg += f"(a, b) = ({self.a}, {self.b})"
            err_msg += f" != ({other.a}, {other.b})"
            raise CurveMismatchError(err_msg)

    def __neg__(self) -> "ECPoint":
        if self.infinity:
            return self
        # the negated point is on curve as long as self is
        return ECPoint(self.x, -self.y, self.a, self.b, check_validity=False)

    def __add__(self, other: "ECPoint") -> "ECPoint":
        if not isinstance(other, ECPoint):
            return NotImplemented

        # earlier cases take precedence
        self.require_same_curve(other)
        if self.infinity:
            return other
        if other.infinity:
            return self
        if self == -other:
            # includes doubling points with y == 0
            return ECPoint.infinity_point(self.a, self.b)
        if self == other:
            three = Felt(3, self.p)
            two = Felt(2, self.p)
            lam = (three * self.x * self.x + self.a) / (two * self.y)
        else:
            lam = (other.y - self.y) / (other.x - self.x)

        x = lam * lam - self.x - other.x
        y = lam * (self.x - x) - self.y
        try:
            return ECPoint(x, y, self.a, self.b)
        except PointNotOnCurveError as e:  # pragma: no cover
            err_msg = f"group law failure: {self} + {other}"
            raise ToyECCRuntimeError(err_msg) from e

    def __sub__(self, other: "ECPoint") -> "ECPoint":
        if not isinstance(other, ECPoint):
            return NotImplemented
        return self + (-other)

    def __mul__(self, k: int) -> "ECPoint":
        """Scalar multiplication.

        This implementation uses
        'double & add', least significant bit first,
        accumulating into the point at infinity.
        """

        if isinstance(k, bool) or not isinstance(k, int):
            return NotImplemented
        if k < 0:
            raise ToyECCValueError(f"negative scalar: {k}")

        result = ECPoint.infinity_point(self.a, self.b)
        addend = self
        while k > 0:
            if k & 1:
                result += addend
            addend += addend
            k >>= 1
        return result

    __rmul__ = __mul__

    def order(self) -> int:
        """Return the smallest positive k such that k*P is infinity.

        Very unsophisticated walk-through approach:
        the cost is O(order), for low-cardinality curves only.
        """
        n = 1
        Q = self
        while not Q.infinity:
            Q += self
            n += 1
        return n

    def __str__(self) -> str:
        if self.infinity:
            return "Infinity"
        return f"({self.x.value}, {self.y.value})"


def infinity(a: Felt, b: Felt) -> ECPoint:
    "Return the identity element of the (a, b) curve group."
    return ECPoint.infinity_point(a, b)


def require_point(P: object) -> ECPoint:
    if not isinstance(P, ECPoint):
        raise ToyECCTypeError(f"not a curve point: {P!r}")
    return P
