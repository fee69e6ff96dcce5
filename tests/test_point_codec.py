#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecstealth.point_codec` module."

import pytest
from btclib.alias import INF
from btclib.ec import secp256k1
from btclib.ec.curve import CURVES
from btclib.exceptions import BTClibValueError

from ecstealth.exceptions import EncodingOverflowError, StealthValueError
from ecstealth.point_codec import (
    bytes_from_encoded,
    decode,
    encode,
    encode_point,
    encoded_from_octets,
    point_from_encoded,
)
from tests.test_curve_ops import ec23_31


def test_encode() -> None:
    assert encode(0, 0) == 0
    assert encode(1, 2) == (1 << 256) + 2
    assert encode(0, (1 << 256) - 1) == (1 << 256) - 1
    assert encode(1, 0) == 1 << 256
    assert encode(3, 5, 8) == 3 * 256 + 5


def test_codec_round_trip() -> None:
    max_coord = (1 << 256) - 1
    coords = (
        (0, 0),
        (1, 2),
        (max_coord, max_coord),
        (0, max_coord),
        (max_coord, 0),
        secp256k1.G,
    )
    for x, y in coords:
        assert decode(encode(x, y)) == (x, y)
    for x, y in ((1, 2), (255, 255), (0, 17)):
        assert decode(encode(x, y, 8), 8) == (x, y)


def test_encoding_overflow() -> None:
    err_msg = "coordinate does not fit 256 bits: "
    for x, y in ((0, 1 << 256), (1 << 256, 0), (-1, 0), (0, -1)):
        with pytest.raises(EncodingOverflowError, match=err_msg):
            encode(x, y)
    with pytest.raises(EncodingOverflowError, match="does not fit 8 bits"):
        encode(1, 256, 8)

    # curve/codec parameter mismatch
    err_msg = "curve coordinates \\(384 bits\\) exceed the codec width"
    ec = CURVES["secp384r1"]
    with pytest.raises(EncodingOverflowError, match=err_msg):
        encode_point(ec.G, ec)


def test_encode_point() -> None:
    G = secp256k1.G
    assert encode_point(G) == (G[0] << 256) + G[1]
    assert encode_point(ec23_31.G, ec23_31) == encode(*ec23_31.G)
    assert encode_point(CURVES["secp256r1"].G, CURVES["secp256r1"]) == encode(
        *CURVES["secp256r1"].G
    )
    with pytest.raises(StealthValueError, match="no encoding for infinity point"):
        encode_point(INF)


def test_point_from_encoded() -> None:
    for ec in (secp256k1, ec23_31):
        assert point_from_encoded(encode_point(ec.G, ec), ec) == ec.G

    G = secp256k1.G
    err_msg = "encoded value is not a curve point: "
    invalid_points = (
        (G[0], G[1] + 1),
        INF,
        (0, 0),
    )
    for Q in invalid_points:
        e = (Q[0] << 256) + Q[1]
        with pytest.raises(StealthValueError, match=err_msg):
            point_from_encoded(e)
    # x beyond the field size
    with pytest.raises(StealthValueError, match=err_msg):
        point_from_encoded(encode_point(G) + (secp256k1.p << 256))
    with pytest.raises(StealthValueError, match="negative encoded point: "):
        point_from_encoded(-encode_point(G))


def test_bytes_from_encoded() -> None:
    e = encode_point(secp256k1.G)
    b = bytes_from_encoded(e)
    assert len(b) == 64
    assert b == secp256k1.G[0].to_bytes(32, "big") + secp256k1.G[1].to_bytes(32, "big")
    assert encoded_from_octets(b) == e
    assert encoded_from_octets(b.hex()) == e
    assert bytes_from_encoded(0) == b"\x00" * 64

    with pytest.raises(EncodingOverflowError, match="does not fit 64 bytes"):
        bytes_from_encoded(1 << 512)
    with pytest.raises(EncodingOverflowError, match="does not fit 64 bytes"):
        bytes_from_encoded(-1)
    with pytest.raises(BTClibValueError):
        encoded_from_octets(b[1:])
