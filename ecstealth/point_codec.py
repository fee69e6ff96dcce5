#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Point codec: a curve point packed into a single integer.

A point (x, y) is encoded as x << 256 | y,
i.e. as the 512-bit big-endian concatenation of its coordinates.
This is the representation of the published meta-address
and the input of the hash-to-scalar function.
"""

from __future__ import annotations

from typing import Tuple

from btclib.ec import Curve, secp256k1
from btclib.utils import bytes_from_octets

from ecstealth.alias import EncodedPoint, Octets, Point
from ecstealth.exceptions import EncodingOverflowError, StealthValueError

CODEC_BITS = 256


def encode(x: int, y: int, bits: int = CODEC_BITS) -> EncodedPoint:
    "Return (x << bits) + y."

    for coord in (x, y):
        if not 0 <= coord < 1 << bits:
            raise EncodingOverflowError(f"coordinate does not fit {bits} bits: {coord}")
    return (x << bits) + y


def decode(e: EncodedPoint, bits: int = CODEC_BITS) -> Tuple[int, int]:
    "Return (x, y) from the encoded integer."
    return e >> bits, e % (1 << bits)


def encode_point(Q: Point, ec: Curve = secp256k1) -> EncodedPoint:
    """Return the encoding of a finite curve point.

    The curve coordinate size must not exceed the codec width:
    a wider curve would make the encoding ambiguous.
    """

    if ec.p_size * 8 > CODEC_BITS:
        err_msg = f"curve coordinates ({ec.p_size * 8} bits) "
        err_msg += f"exceed the codec width ({CODEC_BITS} bits)"
        raise EncodingOverflowError(err_msg)
    if Q[1] == 0:
        raise StealthValueError("no encoding for infinity point")
    return encode(Q[0], Q[1])


def point_from_encoded(e: EncodedPoint, ec: Curve = secp256k1) -> Point:
    "Return the finite curve point from its encoding."

    if e < 0:
        raise StealthValueError(f"negative encoded point: {e}")
    Q = decode(e)
    # is_on_curve does not bound the x-coordinate
    if not (0 <= Q[0] < ec.p and 0 < Q[1] < ec.p) or not ec.is_on_curve(Q):
        raise StealthValueError(f"encoded value is not a curve point: {hex(e)}")
    return Q


def bytes_from_encoded(e: EncodedPoint) -> bytes:
    "Return the 64 bytes big-endian serialization of an encoded point."

    size = 2 * CODEC_BITS // 8
    if not 0 <= e < 1 << (2 * CODEC_BITS):
        raise EncodingOverflowError(f"encoded point does not fit {size} bytes")
    return e.to_bytes(size, byteorder="big", signed=False)


def encoded_from_octets(data: Octets) -> EncodedPoint:
    "Return the encoded point from its 64 bytes (or hex-string) serialization."

    data = bytes_from_octets(data, 2 * CODEC_BITS // 8)
    return int.from_bytes(data, byteorder="big", signed=False)
