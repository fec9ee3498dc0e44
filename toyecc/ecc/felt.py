#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field elements.

A Felt is the least non-negative residue of an integer
modulo a fixed modulus, together with that modulus.
Elements with different moduli are never interchangeable:
mixing them in arithmetic raises ModulusMismatchError.

Values are plain python ints, but the package keeps to a
fixed-width contract: the modulus must not exceed MAX_MODULUS,
so that the product of two reduced values fits in 64 bits.
This targets pedagogic-scale curves, not production key sizes.
"""

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin

from toyecc.alias import Integer
from toyecc.ecc.number_theory import mod_inv
from toyecc.exceptions import (
    DivisionByZeroError,
    ModulusMismatchError,
    ToyECCValueError,
)
from toyecc.utils import int_from_integer, int_repr

# (MAX_MODULUS - 1)^2 < 2^64
MAX_MODULUS = 0xFFFFFFFF


@dataclass(frozen=True)
class Felt(DataClassJsonMixin):
    value: int
    modulus: int

    def __init__(self, value: Integer, modulus: Integer) -> None:

        modulus = int_from_integer(modulus)
        if modulus < 2:
            raise ToyECCValueError(f"modulus must be greater than 1: {modulus}")
        if modulus > MAX_MODULUS:
            err_msg = f"modulus too large: {int_repr(modulus)}"
            err_msg += f" > {int_repr(MAX_MODULUS)}"
            raise ToyECCValueError(err_msg)

        object.__setattr__(self, "value", int_from_integer(value) % modulus)
        object.__setattr__(self, "modulus", modulus)

    def _require_same_modulus(self, other: "Felt", operation: str) -> None:
        if self.modulus != other.modulus:
            err_msg = f"cannot {operation} elements with different moduli: "
            err_msg += f"{self.modulus} != {other.modulus}"
            raise ModulusMismatchError(err_msg)

    def __add__(self, other: "Felt") -> "Felt":
        if not isinstance(other, Felt):
            return NotImplemented
        self._require_same_modulus(other, "add")
        return Felt(self.value + other.value, self.modulus)

    def __sub__(self, other: "Felt") -> "Felt":
        if not isinstance(other, Felt):
            return NotImplemented
        self._require_same_modulus(other, "subtract")
        return Felt(self.value - other.value, self.modulus)

    def __mul__(self, other: "Felt") -> "Felt":
        if not isinstance(other, Felt):
            return NotImplemented
        self._require_same_modulus(other, "multiply")
        return Felt(self.value * other.value, self.modulus)

    def __truediv__(self, other: "Felt") -> "Felt":
        if not isinstance(other, Felt):
            return NotImplemented
        self._require_same_modulus(other, "divide")
        # zero is rejected before attempting the inverse
        if other.value == 0:
            raise DivisionByZeroError(f"division by zero: {self} / {other}")
        return self * other.inverse()

    def __neg__(self) -> "Felt":
        return Felt(self.modulus - self.value, self.modulus)

    def __pow__(self, exponent: int) -> "Felt":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value} (mod {self.modulus})"

    def inverse(self) -> "Felt":
        """Return the multiplicative inverse.

        Extended Euclidean Algorithm: it does not require the modulus
        to be a prime, but it fails with NotInvertibleError
        when gcd(value, modulus) != 1 (zero included).
        """
        return Felt(mod_inv(self.value, self.modulus), self.modulus)

    def pow(self, exponent: int) -> "Felt":
        "Square-and-multiply exponentiation; pow(_, 0) is one."

        if exponent < 0:
            raise ToyECCValueError(f"negative exponent: {exponent}")

        result = Felt(1, self.modulus)
        base = self
        while exponent > 0:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            base = base * base
        return result
