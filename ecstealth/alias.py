#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.

Point, HashF, Integer, and Octets are btclib's own aliases:
a Point is an affine (x, y) tuple of ints,
with the infinity point being INF = (5, 0) (y == 0).
"""

from typing import Callable, Tuple, Union

from btclib.alias import INF, HashF, Integer, Octets, Point
from btclib.ec import Curve

# Secrets (meta private key m, ephemeral key r, stealth private key p)
# can be given as int, big-endian bytes, or hex-string:
# 0x3b3b08bba24858f7ab8b302428379198e521359b19784a40aeb4daddf4ad911c
# "3b3b08bba24858f7ab8b302428379198e521359b19784a40aeb4daddf4ad911c"
# bytes.fromhex("3b3b08bba24858f7ab8b302428379198e521359b19784a40aeb4daddf4ad911c")
#
# use ecstealth.curve_ops.int_from_scalar to validate and convert to int
Scalar = Integer

# A curve point packed into a single non-negative int: x << 256 | y
#
# The meta-address published by the recipient is the EncodedPoint of M = m*G
EncodedPoint = int

# The meta-address can be handled either as EncodedPoint or as Point
MetaAddress = Union[EncodedPoint, Point]

# Chain-specific derivation of an address string from a public key point,
# e.g. ecstealth.address.eth_address
AddressF = Callable[[Point, Curve], str]

# Recipient output: (stealth private key p, stealth public key P)
StealthKeyPair = Tuple[int, Point]

__all__ = [
    "INF",
    "AddressF",
    "EncodedPoint",
    "HashF",
    "Integer",
    "MetaAddress",
    "Octets",
    "Point",
    "Scalar",
    "StealthKeyPair",
]
