#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve group operations.

Thin layer over btclib: the curve (btclib.ec.Curve) is the injected
capability, so any prime order curve can be used, from secp256k1
(the default) to very-low-cardinality test curves.

If the btclib_libsecp256k1 bindings are installed,
btclib uses them for secp256k1 base-point multiplication.
"""

from __future__ import annotations

import secrets

from btclib.ec import Curve, mult, secp256k1
from btclib.utils import int_from_integer

from ecstealth.alias import Point, Scalar
from ecstealth.exceptions import InvalidScalarError


def int_from_scalar(q: Scalar, ec: Curve = secp256k1) -> int:
    """Return a validated scalar as int.

    The scalar must be in [1, n-1]: it is never reduced modulo n,
    as silently clamping a secret would change the derived keys.
    """

    if isinstance(q, bool):
        raise InvalidScalarError(f"not a scalar: {q}")
    try:
        q = int_from_integer(q)
    except (TypeError, ValueError) as e:
        raise InvalidScalarError(f"not a scalar: {q!r}") from e
    if not 0 < q < ec.n:
        raise InvalidScalarError(f"scalar not in 1..n-1: {hex(q)}")
    return q


def random_scalar(ec: Curve = secp256k1) -> int:
    "Return a fresh random scalar in [1, n-1]."
    return 1 + secrets.randbelow(ec.n - 1)


def bytes_from_scalar(q: int, ec: Curve = secp256k1) -> bytes:
    """Return the big-endian serialization of a scalar.

    The output is ec.n_size bytes, unless q is an
    unreduced sum not fitting that size.
    """

    if q < 0:
        raise InvalidScalarError(f"negative scalar: {q}")
    size = max(ec.n_size, (q.bit_length() + 7) // 8)
    return q.to_bytes(size, byteorder="big", signed=False)


def scalar_base_mult(k: int, ec: Curve = secp256k1) -> Point:
    "Return k*G."
    return mult(k, None, ec)


def scalar_mult(Q: Point, k: int, ec: Curve = secp256k1) -> Point:
    "Return k*Q, Q being required to be on curve."
    return mult(k, Q, ec)


def point_add(Q1: Point, Q2: Point, ec: Curve = secp256k1) -> Point:
    "Return Q1+Q2."
    return ec.add(Q1, Q2)
