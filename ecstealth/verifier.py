#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Consistency checks of the stealth scheme.

The stealth private key p is correct for the stealth address
only if p*G is the stealth public key P;
the ECDH shared secrets computed by sender (r*M)
and recipient (m*R) must be the very same point.
"""

from btclib.ec import Curve, secp256k1
from btclib.utils import int_from_integer

from ecstealth.alias import Point, Scalar
from ecstealth.curve_ops import scalar_base_mult
from ecstealth.exceptions import PointMismatchError


def verify_key_pair(p: Scalar, P: Point, ec: Curve = secp256k1) -> bool:
    """Return True if p*G == P.

    p can also be the unreduced sum m + h,
    as it is reduced modulo n by the scalar multiplication.
    """

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        q = int_from_integer(p)
        if q < 0 or q % ec.n == 0:
            return False
        return scalar_base_mult(q, ec) == tuple(P)
    except Exception:  # pylint: disable=broad-except
        return False


def assert_consistent(p: Scalar, P: Point, ec: Curve = secp256k1) -> None:
    "Raise PointMismatchError if p is not the private key of P."

    if not verify_key_pair(p, P, ec):
        raise PointMismatchError("stealth private key does not match public key")


def check_shared_secrets(S_sender: Point, S_recipient: Point) -> None:
    "Raise PointMismatchError if the two shared secrets differ."

    if tuple(S_sender) != tuple(S_recipient):
        raise PointMismatchError("sender and recipient shared secrets differ")
