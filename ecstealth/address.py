#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Stealth address derivation from the stealth public key.

An address is a one-way digest of the public key,
according to the rules of the target chain.
Any AddressF callable (Point, Curve) -> str can be used;
Ethereum and Bitcoin (p2pkh, p2wpkh) flavors are provided here.

https://eips.ethereum.org/EIPS/eip-55
"""

from __future__ import annotations

from btclib import b32, b58
from btclib.alias import String
from btclib.ec import Curve, bytes_from_point, secp256k1
from Crypto.Hash import keccak

from ecstealth.alias import Point
from ecstealth.exceptions import StealthValueError


def keccak256(data: bytes) -> bytes:
    "Return the Keccak-256 digest (not the NIST SHA3-256 one)."
    return keccak.new(digest_bits=256, data=data).digest()


def eth_checksum_address(addr: String) -> str:
    """Return the EIP-55 mixed-case checksum address.

    The input is a 20 bytes address as 40 hex-digits,
    with or without the '0x' prefix, in any case.
    """

    if isinstance(addr, bytes):
        addr = addr.decode("ascii")
    addr = addr.strip()
    if addr[:2] in ("0x", "0X"):
        addr = addr[2:]
    if len(addr) != 40:
        raise StealthValueError(f"invalid address length: {len(addr)}")
    try:
        bytes.fromhex(addr)
    except ValueError as e:
        raise StealthValueError(f"invalid address: {addr}") from e

    addr = addr.lower()
    h = keccak256(addr.encode("ascii")).hex()
    chars = [c.upper() if int(h[i], 16) > 7 else c for i, c in enumerate(addr)]
    return "0x" + "".join(chars)


def eth_address(P: Point, ec: Curve = secp256k1) -> str:
    "Return the Ethereum checksum address of a public key."

    # uncompressed SEC encoding without the 0x04 prefix
    pub_key = bytes_from_point(P, ec, compressed=False)[1:]
    return eth_checksum_address(keccak256(pub_key)[-20:].hex())


def _require_secp256k1(ec: Curve) -> None:
    if ec != secp256k1:
        raise StealthValueError("bitcoin addresses are defined on secp256k1 only")


def p2pkh(
    P: Point, ec: Curve = secp256k1, network: str = "mainnet", compressed: bool = True
) -> str:
    "Return the Bitcoin p2pkh base58 address of a public key."

    _require_secp256k1(ec)
    pub_key = bytes_from_point(P, ec, compressed)
    return b58.p2pkh(pub_key, network, compressed)


def p2wpkh(P: Point, ec: Curve = secp256k1, network: str = "mainnet") -> str:
    "Return the Bitcoin p2wpkh bech32 address of a public key."

    _require_secp256k1(ec)
    return b32.p2wpkh(bytes_from_point(P, ec), network)
