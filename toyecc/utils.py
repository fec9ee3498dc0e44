#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from toyecc.alias import Integer
from toyecc.exceptions import ToyECCValueError

# integers above this threshold are printed as hex-strings
HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from an int, a hex-string, or big-endian bytes.

    Hex-strings with a (possibly negative) "0x" prefix are parsed as
    signed numbers, e.g. "-0xdeadbeef"; without the prefix they must
    have an even number of digits and are read as unsigned bytes,
    possibly spaced as returned by hex_string.
    Booleans are rejected even if they are int instances.
    """

    if isinstance(i, bool):
        raise ToyECCValueError(f"not an integer: {i}")
    if isinstance(i, int):
        return i

    if isinstance(i, str):
        s = i.strip().lower()
        if s.lstrip("-").startswith("0x"):
            return int(s, 16)
        i = bytes.fromhex(s)
    return int.from_bytes(i, byteorder="big", signed=False)


def hex_string(i: Integer) -> str:
    """Return the uppercase hex-string of a non-negative integer.

    Digits are zero padded to an even count and grouped by four bytes
    from the right, e.g. "01 DEADBEEF 00000000".
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ToyECCValueError(f"negative integer: {int_}")
    digits = f"{int_:X}"
    if len(digits) % 2:
        digits = "0" + digits
    groups = [digits[max(0, end - 8) : end] for end in range(len(digits), 0, -8)]
    return " ".join(reversed(groups))


def int_repr(i: int) -> str:
    "Return the decimal repr of i, or its hex-string if i is large."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
