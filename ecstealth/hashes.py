#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash-to-scalar of a shared secret point.

The shared secret point S is folded into a scalar h, used as offset
both for the stealth public key (P = M + h*G)
and for the stealth private key (p = m + h).

Two strategies are available, selected by the hf argument:

* hf=None: the encoded point is just reduced modulo n,
  without any cryptographic mixing
* hf=sha256 (or any other hashlib constructor):
  BIP340-style tagged hash of the 64 bytes encoded point,
  then reduced modulo n

Sender and recipient must use the same strategy,
otherwise they end up with different stealth keys.
"""

from __future__ import annotations

from typing import Optional

from btclib.ec import Curve, secp256k1
from btclib.hashes import tagged_hash
from btclib.utils import int_from_bits

from ecstealth.alias import HashF, Point
from ecstealth.point_codec import bytes_from_encoded, encode, encode_point

SHARED_SECRET_TAG = b"ecstealth/shared"


def hash_to_scalar(x: int, y: int, ec: Curve = secp256k1) -> int:
    "Return encode(x, y) mod n."
    return encode(x, y) % ec.n


def hash_point_to_scalar(
    Q: Point, ec: Curve = secp256k1, hf: Optional[HashF] = None
) -> int:
    "Return the scalar derived from the curve point Q."

    e = encode_point(Q, ec)
    if hf is None:
        return e % ec.n
    t = tagged_hash(SHARED_SECRET_TAG, bytes_from_encoded(e), hf)
    return int_from_bits(t, ec.nlen) % ec.n
