#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `toyecc.ecc.dh` module."

from hashlib import sha1, sha256

import pytest

from toyecc.ecc.dh import (
    KeyExchange,
    ansi_x9_63_kdf,
    diffie_hellman,
    key_exchange,
    public_key,
    shared_secret,
)
from toyecc.ecc.ec_point import ECPoint
from toyecc.exceptions import ToyECCValueError

G1 = ECPoint.from_int_coord(13, 15, 0, 6, 43)
G2 = ECPoint.from_int_coord(9, 2, 0, 6, 43)


def test_key_exchange() -> None:
    for G, alice, bob in ((G1, 7, 11), (G2, 8, 25)):
        ke = key_exchange(G, alice, bob)
        assert ke.generator == G
        assert ke.alice_public == G * alice
        assert ke.bob_public == G * bob
        assert ke.shared_secret == ke.bob_public * alice
        assert ke.shared_secret == ke.alice_public * bob
        assert ke.shared_secret == G * (alice * bob)
        assert not ke.shared_secret.infinity


def test_diffie_hellman() -> None:
    dU, dV = 7, 11
    QU = public_key(dU, G1)
    QV = public_key(dV, G1)

    for size in (20, 32, 33, 100):
        keying_data = diffie_hellman(dU, QV, size)
        assert len(keying_data) == size
        assert keying_data == diffie_hellman(dV, QU, size)

    keying_data = diffie_hellman(dU, QV, 32, b"shared info", sha1)
    assert keying_data == diffie_hellman(dV, QU, 32, b"shared info", sha1)

    # the shared x-coordinate fits in one byte for p = 43
    z = shared_secret(dU, QV).x.value.to_bytes(1, byteorder="big", signed=False)
    assert diffie_hellman(dU, QV, 32) == ansi_x9_63_kdf(z, 32, sha256, None)


def test_ansi_x9_63_kdf() -> None:
    z = bytes([20])
    block1 = sha256(z + b"\x00\x00\x00\x01" + b"info").digest()
    block2 = sha256(z + b"\x00\x00\x00\x02" + b"info").digest()
    assert ansi_x9_63_kdf(z, 40, sha256, b"info") == block1 + block2[:8]
    assert ansi_x9_63_kdf(z, 32, sha256, None) == sha256(z + b"\x00\x00\x00\x01").digest()
    assert ansi_x9_63_kdf(z, 0, sha256, None) == b""


def test_exceptions() -> None:
    err_msg = "invalid private scalar: "
    with pytest.raises(ToyECCValueError, match=err_msg):
        public_key(0, G1)
    with pytest.raises(ToyECCValueError, match=err_msg):
        shared_secret(-1, G1)

    # G1 has order 13
    with pytest.raises(ToyECCValueError, match=r"invalid \(INF\) public key"):
        public_key(13, G1)
    with pytest.raises(ToyECCValueError, match=r"invalid \(INF\) shared secret"):
        shared_secret(26, G1)
    with pytest.raises(ToyECCValueError, match=r"invalid \(INF\) public key"):
        key_exchange(G1, 7, 13)


def test_composite_order_infinite_shared_secret() -> None:
    # (5, 5) on y^2 = x^3 + 7x + 13 (mod 37) has order 34 = 2 * 17
    G = ECPoint.from_int_coord(5, 5, 7, 13, 37)
    assert not public_key(2, G).infinity
    assert not public_key(17, G).infinity

    err_msg = r"invalid \(INF\) shared secret for private scalar: 2"
    with pytest.raises(ToyECCValueError, match=err_msg):
        key_exchange(G, 2, 17)
    with pytest.raises(ToyECCValueError, match=r"invalid \(INF\) shared secret"):
        diffie_hellman(17, public_key(2, G), 32)

    size = 32 * (2 ** 32 - 1) + 1
    err_msg = "cannot derive a key larger than "
    with pytest.raises(ToyECCValueError, match=err_msg):
        ansi_x9_63_kdf(b"", size, sha256, None)


def test_json() -> None:
    ke = key_exchange(G1, 7, 11)
    assert KeyExchange.from_json(ke.to_json()) == ke
    d = ke.to_dict()
    assert d["alice_private"] == 7
    assert d["generator"]["x"] == {"value": 13, "modulus": 43}
