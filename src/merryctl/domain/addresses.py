"""Address classification for the local faucets."""

from __future__ import annotations

import re
from typing import Literal

Chain = Literal["bitcoin", "starknet", "evm"]

_STARKNET_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
_EVM_RE = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")
_BTC_BECH32_RE = re.compile(r"^bcrt1[02-9ac-hj-np-z]{8,87}$")
_BTC_BASE58_RE = re.compile(r"^[mn2][1-9A-HJ-NP-Za-km-z]{25,34}$")


def classify_address(address: str) -> Chain | None:
    """Return the chain *address* belongs to, or None if unrecognised.

    Bitcoin addresses are only accepted in their regtest forms.

    Examples:
        >>> classify_address("0x" + "ab" * 32)
        'starknet'
        >>> classify_address("0x" + "ab" * 20)
        'evm'
        >>> classify_address("bcrt1qw508d6qejxtdg4y5r3zarvary0c5xw7kygt080")
        'bitcoin'
        >>> classify_address("not-an-address") is None
        True
    """
    address = address.strip()
    if _BTC_BECH32_RE.match(address.lower()) or _BTC_BASE58_RE.match(address):
        return "bitcoin"
    if _STARKNET_RE.match(address):
        return "starknet"
    if _EVM_RE.match(address):
        return "evm"
    return None
