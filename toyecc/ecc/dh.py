#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

Implementation of the Diffie-Hellman key agreement scheme using
elliptic curve cryptography. A key agreement scheme is used
by two entities to establish shared keying data, which will be
later utilized e.g. in symmetric cryptographic scheme.

The two entities must agree on the elliptic curve, the generator,
and the key derivation function to use.

The curves supported by this package are toy curves:
the exchange is a demonstration, it is not secure.
"""

from dataclasses import dataclass
from hashlib import sha256
from math import ceil
from typing import Optional

from dataclasses_json import DataClassJsonMixin

from toyecc.alias import HashF
from toyecc.ecc.ec_point import ECPoint, require_point
from toyecc.exceptions import ToyECCRuntimeError, ToyECCValueError


def ansi_x9_63_kdf(
    z: bytes, size: int, hf: HashF, shared_info: Optional[bytes]
) -> bytes:
    """Return size bytes of keying data derived from the octets z.

    The x-coordinate of a shared point on a toy curve is only a few
    bits long, so it is not used as a key directly: it is stretched
    to the requested size by hashing it with a 32-bit big-endian
    block counter (starting from 1) and the optional shared info.

    ANSI-X9.63-KDF, see http://www.secg.org/sec1-v2.pdf, section 3.6.1
    """
    digest_size = hf().digest_size
    n_blocks = -(-size // digest_size)
    if n_blocks > 0xFFFFFFFF:
        max_size = digest_size * 0xFFFFFFFF
        raise ToyECCValueError(f"cannot derive a key larger than {max_size} bytes")

    suffix = b"" if shared_info is None else shared_info
    blocks = []
    for counter in range(1, n_blocks + 1):
        h = hf()
        h.update(z + counter.to_bytes(4, byteorder="big") + suffix)
        blocks.append(h.digest())
    return b"".join(blocks)[:size]


def public_key(d: int, G: ECPoint) -> ECPoint:
    "Return the public point d*G."

    if d < 1:
        raise ToyECCValueError(f"invalid private scalar: {d}")
    Q = require_point(G) * d
    if Q.infinity:
        raise ToyECCValueError(f"invalid (INF) public key for private scalar: {d}")
    return Q


def shared_secret(d: int, Q: ECPoint) -> ECPoint:
    """Return the shared secret point d*Q.

    Toy generators may have composite order: d*Q is INF whenever
    d times the private scalar behind Q is a multiple of that order,
    even if both public keys are valid.
    """

    if d < 1:
        raise ToyECCValueError(f"invalid private scalar: {d}")
    shared_secret_point = require_point(Q) * d
    if shared_secret_point.infinity:
        err_msg = f"invalid (INF) shared secret for private scalar: {d}"
        raise ToyECCValueError(err_msg)
    return shared_secret_point


def diffie_hellman(
    d: int,
    Q: ECPoint,
    size: int,
    shared_info: Optional[bytes] = None,
    hf: HashF = sha256,
) -> bytes:
    """Diffie-Hellman elliptic curve key agreement scheme.

    http://www.secg.org/sec1-v2.pdf, section 6.1
    """

    x = shared_secret(d, Q).x
    p_size = ceil(x.modulus.bit_length() / 8)
    z = x.value.to_bytes(p_size, byteorder="big", signed=False)
    return ansi_x9_63_kdf(z, size, hf, shared_info)


@dataclass(frozen=True)
class KeyExchange(DataClassJsonMixin):
    generator: ECPoint
    alice_private: int
    bob_private: int
    alice_public: ECPoint
    bob_public: ECPoint
    shared_secret: ECPoint


def key_exchange(G: ECPoint, alice_private: int, bob_private: int) -> KeyExchange:
    """Run both sides of the exchange and return its transcript.

    Each party publishes its private scalar times G,
    then multiplies the other party's public point
    by its own private scalar.
    """

    alice_public = public_key(alice_private, G)
    bob_public = public_key(bob_private, G)

    alice_shared_secret = shared_secret(alice_private, bob_public)
    bob_shared_secret = shared_secret(bob_private, alice_public)
    if alice_shared_secret != bob_shared_secret:  # pragma: no cover
        err_msg = f"shared secret mismatch: {alice_shared_secret}"
        err_msg += f" != {bob_shared_secret}"
        raise ToyECCRuntimeError(err_msg)

    return KeyExchange(
        G,
        alice_private,
        bob_private,
        alice_public,
        bob_public,
        alice_shared_secret,
    )
