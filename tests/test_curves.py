#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `toyecc.curves` module."

import pytest

from toyecc.curves import CURVES, generator
from toyecc.exceptions import ToyECCValueError


def test_curves() -> None:
    for ec_name, G in CURVES.items():
        G.assert_valid()
        assert generator(ec_name) is G

    assert generator("ec43").order() == 13
    assert generator("ec43_g2").order() == 39
    assert generator("ec37").order() == 34
    assert generator("ec1021").order() == 966
    assert generator("ec1021_3").order() == 1039

    assert generator("ec43").is_on_same_curve(generator("ec43_g2"))


def test_unknown_curve() -> None:
    with pytest.raises(ToyECCValueError, match="unknown curve: secp256k1"):
        generator("secp256k1")
