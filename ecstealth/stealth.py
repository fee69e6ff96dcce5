#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Dual-key stealth address scheme.

The recipient publishes once a meta-address, then each sender derives
a one-time destination address that observers cannot link
to the meta-address; only the recipient can compute
the private key controlling that destination.

* the recipient chooses a secret m
  and publishes the meta-address, i.e. the encoding of M = m*G
* the sender chooses a fresh ephemeral secret r
  and publishes R = r*G along with the transaction
* the sender computes the shared secret S = r*M,
  the recipient computes the very same S = m*R (ECDH)
* anyone knowing S computes the stealth public key P = M + hash(S)*G
  and the stealth address as a digest of P
* the recipient (and the recipient only) computes
  the stealth private key p = m + hash(S), with p*G == P

All functions are pure: secrets are never stored nor logged.
The curve and the hash-to-scalar strategy (see ecstealth.hashes)
must be agreed upon by sender and recipient.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from btclib.ec import Curve, secp256k1

from ecstealth.address import eth_address
from ecstealth.alias import (
    AddressF,
    EncodedPoint,
    HashF,
    MetaAddress,
    Point,
    Scalar,
    StealthKeyPair,
)
from ecstealth.curve_ops import (
    int_from_scalar,
    point_add,
    random_scalar,
    scalar_base_mult,
    scalar_mult,
)
from ecstealth.exceptions import StealthRuntimeError, StealthValueError
from ecstealth.hashes import hash_point_to_scalar
from ecstealth.point_codec import encode_point, point_from_encoded
from ecstealth.verifier import assert_consistent

logger = logging.getLogger(__name__)


def _require_finite_point(Q: Point, ec: Curve, what: str) -> Point:
    Q = tuple(Q)
    ec.require_on_curve(Q)
    if Q[1] == 0:
        raise StealthValueError(f"infinity point is not a valid {what}")
    return Q


def meta_address(m: Scalar, ec: Curve = secp256k1) -> EncodedPoint:
    "Return the meta-address, i.e. the encoding of M = m*G."

    M = scalar_base_mult(int_from_scalar(m, ec), ec)
    meta = encode_point(M, ec)
    logger.debug("meta-address: %x", meta)
    return meta


def meta_pub_key(meta: MetaAddress, ec: Curve = secp256k1) -> Point:
    "Return the meta public key M, from the meta-address or M itself."

    if isinstance(meta, int):
        return point_from_encoded(meta, ec)
    return _require_finite_point(meta, ec, "meta public key")


def ephemeral_pub_key(r: Scalar, ec: Curve = secp256k1) -> Point:
    """Return the ephemeral public key R = r*G.

    r must be a fresh secret for each transaction:
    reusing it would make the stealth addresses linkable.
    """

    R = scalar_base_mult(int_from_scalar(r, ec), ec)
    logger.debug("ephemeral public key: (%x, %x)", R[0], R[1])
    return R


def sender_shared_secret(M: MetaAddress, r: Scalar, ec: Curve = secp256k1) -> Point:
    "Return the sender shared secret S = r*M."

    r = int_from_scalar(r, ec)
    S = scalar_mult(meta_pub_key(M, ec), r, ec)
    # edge case that cannot be reproduced in a prime order group
    if S[1] == 0:
        raise StealthRuntimeError("invalid (INF) shared secret")  # pragma: no cover
    return S


def recipient_shared_secret(R: Point, m: Scalar, ec: Curve = secp256k1) -> Point:
    "Return the recipient shared secret S = m*R."

    m = int_from_scalar(m, ec)
    R = _require_finite_point(R, ec, "ephemeral public key")
    S = scalar_mult(R, m, ec)
    # edge case that cannot be reproduced in a prime order group
    if S[1] == 0:
        raise StealthRuntimeError("invalid (INF) shared secret")  # pragma: no cover
    return S


def stealth_pub_key(
    M: MetaAddress, S: Point, ec: Curve = secp256k1, hf: Optional[HashF] = None
) -> Point:
    "Return the stealth public key P = M + hash(S)*G."

    M = meta_pub_key(M, ec)
    S = _require_finite_point(S, ec, "shared secret")
    h = hash_point_to_scalar(S, ec, hf)
    P = point_add(M, scalar_base_mult(h, ec), ec)
    # only when hash(S) == -m (mod n)
    if P[1] == 0:
        raise StealthRuntimeError("invalid (INF) key")
    logger.debug("stealth public key: (%x, %x)", P[0], P[1])
    return P


def stealth_address(
    P: Point, address_of: AddressF = eth_address, ec: Curve = secp256k1
) -> str:
    "Return the stealth address of the stealth public key P."

    address = address_of(P, ec)
    logger.debug("stealth address: %s", address)
    return address


def stealth_prv_key(
    m: Scalar,
    S: Point,
    ec: Curve = secp256k1,
    hf: Optional[HashF] = None,
    reduce: bool = True,
) -> int:
    """Return the stealth private key p = m + hash(S).

    With reduce=False the plain sum m + hash(S) is returned,
    which may be not less than n: it is still a valid private key
    for scalar multiplications that reduce modulo n (btclib's do),
    but it is not a canonical scalar.
    """

    m = int_from_scalar(m, ec)
    S = _require_finite_point(S, ec, "shared secret")
    p = m + hash_point_to_scalar(S, ec, hf)
    if p % ec.n == 0:
        raise StealthRuntimeError("invalid (zero) private key")
    return p % ec.n if reduce else p


@dataclass(frozen=True)
class StealthPayment:
    "Sender output: the public data identifying a stealth payment."

    ephemeral_pub_key: Point
    stealth_pub_key: Point
    address: str


def new_stealth_payment(
    meta: MetaAddress,
    r: Optional[Scalar] = None,
    ec: Curve = secp256k1,
    hf: Optional[HashF] = None,
    address_of: AddressF = eth_address,
) -> StealthPayment:
    """Return a new stealth payment to the owner of the meta-address.

    If r is not provided a fresh random ephemeral secret is used;
    it is then discarded, as it is not needed anymore.
    """

    M = meta_pub_key(meta, ec)
    r = random_scalar(ec) if r is None else int_from_scalar(r, ec)
    R = ephemeral_pub_key(r, ec)
    S = sender_shared_secret(M, r, ec)
    P = stealth_pub_key(M, S, ec, hf)
    return StealthPayment(R, P, stealth_address(P, address_of, ec))


def recover_stealth_key(
    m: Scalar,
    R: Point,
    ec: Curve = secp256k1,
    hf: Optional[HashF] = None,
    reduce: bool = True,
) -> StealthKeyPair:
    """Return the stealth key pair (p, P) from the ephemeral public key.

    The pair is checked to be consistent (p*G == P)
    before being returned.
    """

    m = int_from_scalar(m, ec)
    M = scalar_base_mult(m, ec)
    S = recipient_shared_secret(R, m, ec)
    P = stealth_pub_key(M, S, ec, hf)
    p = stealth_prv_key(m, S, ec, hf, reduce)
    assert_consistent(p, P, ec)
    return p, P
