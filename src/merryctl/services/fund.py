"""FundService — top up a local wallet from the environment's faucets.

Bitcoin (regtest) goes through the faucet service; Starknet through the
devnet mint endpoint. EVM funding needs an on-chain signing wallet and is
reported as unsupported.
"""

from __future__ import annotations

import logging

from merryctl.domain.addresses import classify_address
from merryctl.infrastructure.errors import FaucetError, OrchestratorError
from merryctl.services.base import BaseService
from merryctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class FundService(BaseService):
    """Fund addresses on the local chains."""

    def fund(self, address: str) -> ServiceResult:
        """Send test funds to *address* on the chain its format implies."""
        op = "fund"
        address = address.strip()

        try:
            running = self._env.orchestrator.list_running_services()
        except OrchestratorError as exc:
            return self._orchestrator_failure(op, exc)
        if not running:
            return ServiceResult.failure(
                op, "NOT_RUNNING", "The local environment is not running"
            )

        chain = classify_address(address)
        if chain is None:
            return ServiceResult.failure(
                op,
                "INVALID_ADDRESS",
                f"Invalid address {address}. Expected a starknet or bitcoin regtest address",
                detail={"address": address},
            )
        if chain == "evm":
            return ServiceResult.failure(
                op,
                "UNSUPPORTED_CHAIN",
                "EVM funding requires a signing wallet and is not supported",
                detail={"address": address, "chain": chain},
            )

        logger.debug("Funding %s address %s", chain, address)
        faucet = self._env.faucet
        try:
            if chain == "bitcoin":
                tx_id = faucet.fund_bitcoin(address)
                data = {
                    "chain": chain,
                    "address": address,
                    "tx_id": tx_id,
                    "explorer_url": faucet.bitcoin_explorer_url(tx_id),
                }
            else:
                minted = faucet.fund_starknet(address)
                data = {"chain": chain, "address": address, **minted}
        except FaucetError as exc:
            return ServiceResult.failure(
                op,
                "FAUCET_FAILED",
                exc.message,
                detail={"url": exc.url, "chain": chain},
            )

        return ServiceResult(ok=True, op=op, data=data)
