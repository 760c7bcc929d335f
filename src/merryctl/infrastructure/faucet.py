"""HTTP client for the local test-network faucets."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from merryctl.config.models import FaucetConfig
from merryctl.infrastructure.errors import FaucetError

logger = logging.getLogger(__name__)


class FaucetClient:
    """Request funds from the bitcoin faucet and the starknet devnet mint."""

    def __init__(
        self,
        config: FaucetConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or FaucetConfig()
        self._transport = transport

    def _post(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST *payload* as JSON and return the decoded JSON object."""
        logger.debug("POST %s", url)
        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as client:
                response = client.post(url, json=payload)
        except httpx.HTTPError as exc:
            raise FaucetError(f"Failed to reach faucet at {url}: {exc}", url=url) from exc

        if response.status_code != httpx.codes.OK:
            raise FaucetError(response.text or f"HTTP {response.status_code}", url=url)

        try:
            data = response.json()
        except ValueError as exc:
            raise FaucetError("internal error, please try again", url=url) from exc
        if not isinstance(data, dict):
            raise FaucetError("internal error, please try again", url=url)
        return data

    def fund_bitcoin(self, address: str) -> str:
        """Send regtest BTC to *address*. Returns the transaction id."""
        url = self._config.bitcoin_url
        data = self._post(url, {"address": address})
        tx_id = data.get("txId") or ""
        if not tx_id:
            raise FaucetError("not successful", url=url)
        return str(tx_id)

    def fund_starknet(self, address: str) -> dict[str, str]:
        """Mint devnet STRK to *address*.

        Returns ``tx_hash``, ``new_balance`` and ``unit`` from the mint response.
        """
        url = self._config.starknet_url
        data = self._post(
            url,
            {"address": address, "amount": self._config.starknet_amount, "unit": "FRI"},
        )
        tx_hash = data.get("tx_hash") or ""
        if not tx_hash:
            raise FaucetError("error funding address", url=url)
        return {
            "tx_hash": str(tx_hash),
            "new_balance": str(data.get("new_balance", "")),
            "unit": str(data.get("unit", "")),
        }

    def bitcoin_explorer_url(self, tx_id: str) -> str:
        """Link to *tx_id* on the local block explorer."""
        return f"{self._config.bitcoin_explorer_url.rstrip('/')}/tx/{tx_id}"
