#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Main entry point: python -m toyecc

Without a command, run the Diffie-Hellman demonstration
on y^2 = x^3 + 6 (mod 43) with two different generators.
"""

import argparse
import sys
from typing import List, Optional

from toyecc import __version__
from toyecc.curves import CURVES, generator
from toyecc.ecc.curve_group_f import enumerate_points
from toyecc.ecc.dh import key_exchange
from toyecc.ecc.dlog import brute_force_dlog, bsgs_dlog
from toyecc.ecc.ec_point import ECPoint
from toyecc.exceptions import ToyECCValueError

SEPARATOR = "=" * 37


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toyecc",
        description="Toy elliptic curve arithmetic and Diffie-Hellman key exchange",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command")
    curve_help = f"curve name, one of: {', '.join(CURVES)}"

    # dh
    dh = sub.add_parser("dh", help="Diffie-Hellman key exchange")
    dh.add_argument("--curve", default="ec43", help=curve_help)
    dh.add_argument("--alice", type=int, default=7, help="Alice's private scalar")
    dh.add_argument("--bob", type=int, default=11, help="Bob's private scalar")
    dh.add_argument("--json", action="store_true", help="Print the transcript as json")

    # order
    order = sub.add_parser("order", help="Order of the curve generator")
    order.add_argument("--curve", default="ec43", help=curve_help)

    # dlog
    dlog = sub.add_parser("dlog", help="Discrete logarithm of a point")
    dlog.add_argument("--curve", default="ec1021", help=curve_help)
    target = dlog.add_mutually_exclusive_group(required=True)
    target.add_argument("--k", type=int, help="Solve for the point k*G")
    target.add_argument("--target", type=int, nargs=2, metavar=("X", "Y"), help="Target point")
    dlog.add_argument("--method", choices=("brute", "bsgs"), default="bsgs")

    # points
    points = sub.add_parser("points", help="Count all the points of the curve group")
    points.add_argument("--curve", default="ec43", help=curve_help)
    points.add_argument("--list", action="store_true", help="Print every point")

    return parser


def diffie_hellman(G: ECPoint, alice_private: int, bob_private: int) -> None:
    # both sides are checked to agree before anything is printed
    ke = key_exchange(G, alice_private, bob_private)

    print(f"Generator Point: {ke.generator}")
    print(f"Alice's Public Key: {ke.alice_public}")
    print(f"Bob's Public Key: {ke.bob_public}")
    print(f"Alice's Shared Secret: {ke.shared_secret}")
    print(f"Bob's Shared Secret: {ke.shared_secret}")


def run_demo() -> None:
    print("Diffie-Hellman Key Exchange")
    print("Elliptic Curve: y^2 = x^3 + 6 (mod 43)")

    g1 = generator("ec43")
    diffie_hellman(g1, 7, 11)

    print(SEPARATOR)
    print("Let's try again with a different generator point")

    g2 = generator("ec43_g2")
    diffie_hellman(g2, 8, 25)

    print(SEPARATOR)
    print("Let's compare the order of the two generator points")
    print(f"Generator Point 1: {g1}")
    print(f"Order of Generator Point 1: {g1.order()}")
    print(f"Generator Point 2: {g2}")
    print(f"Order of Generator Point 2: {g2.order()}")


def run_dh(args: argparse.Namespace) -> None:
    G = generator(args.curve)
    if args.json:
        print(key_exchange(G, args.alice, args.bob).to_json())
        return
    diffie_hellman(G, args.alice, args.bob)


def run_order(args: argparse.Namespace) -> None:
    G = generator(args.curve)
    print(f"Order of {G}: {G.order()}")


def run_dlog(args: argparse.Namespace) -> None:
    G = generator(args.curve)
    if args.k is not None:
        T = G * args.k
    else:
        T = ECPoint.from_int_coord(*args.target, G.a.value, G.b.value, G.p)

    solver = brute_force_dlog if args.method == "brute" else bsgs_dlog
    k = solver(G, T)
    if k is None:
        print(f"{T} is not a multiple of {G}")
    else:
        print(f"{T} = {k} * {G}")


def run_points(args: argparse.Namespace) -> None:
    G = generator(args.curve)
    points = enumerate_points(G.a, G.b)
    print(f"Number of curve points (INF included): {len(points)}")
    if args.list:
        for P in sorted(points, key=lambda P: (P.infinity, P.x.value, P.y.value)):
            print(P)


COMMANDS = {
    "dh": run_dh,
    "order": run_order,
    "dlog": run_dlog,
    "points": run_points,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command is None:
            run_demo()
        else:
            COMMANDS[args.command](args)
    except ToyECCValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
