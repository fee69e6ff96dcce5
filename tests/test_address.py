#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecstealth.address` module."

import pytest
from btclib.ec import mult, secp256k1

from ecstealth.address import (
    eth_address,
    eth_checksum_address,
    keccak256,
    p2pkh,
    p2wpkh,
)
from ecstealth.exceptions import StealthValueError
from tests.test_curve_ops import ec23_31


def test_keccak256() -> None:
    # Keccak-256, not NIST SHA3-256
    exp = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    assert keccak256(b"").hex() == exp


def test_eth_checksum_address() -> None:
    # https://eips.ethereum.org/EIPS/eip-55
    test_vectors = [
        "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
        "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
        "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
        "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
    ]
    for addr in test_vectors:
        assert eth_checksum_address(addr) == addr
        assert eth_checksum_address(addr.lower()) == addr
        assert eth_checksum_address(addr.upper()[2:]) == addr
        assert eth_checksum_address(" " + addr[2:].lower() + " ") == addr
        assert eth_checksum_address(addr.encode("ascii")) == addr

    with pytest.raises(StealthValueError, match="invalid address length: "):
        eth_checksum_address(test_vectors[0][:-1])
    with pytest.raises(StealthValueError, match="invalid address: "):
        eth_checksum_address("0x" + "g" * 40)


def test_eth_address() -> None:
    # address of the private key 1
    assert eth_address(secp256k1.G) == "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"

    addr = eth_address(mult(0xDEADBEEF))
    assert addr.startswith("0x")
    assert len(addr) == 42
    assert eth_checksum_address(addr.lower()) == addr


def test_bitcoin_addresses() -> None:
    G = secp256k1.G
    assert p2pkh(G) == "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"
    assert p2pkh(G, compressed=False) == "1EHNa6Q4Jz2uvNExL497mE43ikXhwF6kZm"
    assert p2wpkh(G) == "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
    assert p2pkh(G, network="testnet").startswith(("m", "n"))
    assert p2wpkh(G, network="testnet").startswith("tb1")

    err_msg = "bitcoin addresses are defined on secp256k1 only"
    with pytest.raises(StealthValueError, match=err_msg):
        p2pkh(ec23_31.G, ec23_31)
    with pytest.raises(StealthValueError, match=err_msg):
        p2wpkh(ec23_31.G, ec23_31)
