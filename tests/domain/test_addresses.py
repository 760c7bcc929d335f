"""Tests for faucet address classification."""

from __future__ import annotations

import pytest

from merryctl.domain.addresses import classify_address

STARKNET = "0x04a1f5c0d6e4b3a29f8e7d6c5b4a39281706f5e4d3c2b1a09f8e7d6c5b4a3928"
EVM = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


class TestClassifyAddress:
    @pytest.mark.parametrize(
        "address",
        [
            "bcrt1qw508d6qejxtdg4y5r3zarvary0c5xw7kygt080",
            "BCRT1QW508D6QEJXTDG4Y5R3ZARVARY0C5XW7KYGT080",
            "mipcBbFg9gMiCh81Kj8tqqdgoZub1ZJRfn",
            "2MzQwSSnBHWHqSAqtTVQ6v47XtaisrJa1Vc",
        ],
    )
    def test_bitcoin_regtest(self, address: str) -> None:
        assert classify_address(address) == "bitcoin"

    def test_starknet(self) -> None:
        assert classify_address(STARKNET) == "starknet"

    def test_evm_with_prefix(self) -> None:
        assert classify_address(EVM) == "evm"

    def test_evm_without_prefix(self) -> None:
        assert classify_address(EVM[2:]) == "evm"

    def test_surrounding_whitespace_ignored(self) -> None:
        assert classify_address(f"  {STARKNET}\n") == "starknet"

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "hello",
            "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4",  # mainnet bech32
            "1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2",  # mainnet base58
            "0x" + "g" * 64,
            "0x" + "a" * 63,
        ],
    )
    def test_unrecognised(self, address: str) -> None:
        assert classify_address(address) is None
