"""Solana JSON-RPC ledger client.

Talks to a Solana RPC node over plain httpx; transactions are built and
signed locally (see ``vendorpay.gateways.transaction``).
"""

import base64
import logging
from typing import Any

import httpx

from vendorpay.config import Settings, settings as default_settings
from vendorpay.gateways.base import (
    LedgerClient,
    LedgerRPCError,
    LedgerTransactionError,
)
from vendorpay.gateways.keys import Keypair, PublicKey
from vendorpay.gateways.transaction import sign_transfer

logger = logging.getLogger(__name__)


class SolanaGateway(LedgerClient):
    """Async Solana JSON-RPC client."""

    def __init__(
        self,
        rpc_url: str | None = None,
        commitment: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or default_settings
        self.rpc_url = rpc_url or settings.solana_rpc_url
        self.commitment = commitment or settings.solana_commitment
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.rpc_timeout,
            transport=transport,
        )
        self._request_id = 0

    async def _rpc(self, method: str, params: list[Any] | None = None) -> Any:
        """Make a JSON-RPC call."""
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params or [],
        }
        try:
            resp = await self._client.post(self.rpc_url, json=payload)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise LedgerRPCError(f"{method} request failed: {e}") from e
        except ValueError as e:
            raise LedgerRPCError(f"{method} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise LedgerRPCError(f"{method} returned a malformed response")
        if "error" in data:
            error = data["error"]
            if isinstance(error, dict):
                raise LedgerRPCError(error.get("message", "Unknown RPC error"), error)
            raise LedgerRPCError(str(error or "Unknown RPC error"), {"message": error})
        return data.get("result")

    async def get_latest_blockhash(self) -> str:
        result = await self._rpc(
            "getLatestBlockhash", [{"commitment": self.commitment}]
        )
        value = result.get("value") if isinstance(result, dict) else None
        blockhash = value.get("blockhash") if isinstance(value, dict) else None
        if not isinstance(blockhash, str):
            raise LedgerRPCError("getLatestBlockhash returned no blockhash")
        return blockhash

    async def submit_transfer(
        self,
        payer: Keypair,
        recipient: PublicKey,
        lamports: int,
        recent_blockhash: str,
    ) -> str:
        try:
            tx = sign_transfer(payer, recipient, lamports, recent_blockhash)
        except ValueError as e:
            raise LedgerRPCError(f"cannot build transfer: {e}") from e

        encoded = base64.b64encode(tx.serialize()).decode()
        signature = await self._rpc(
            "sendTransaction",
            [
                encoded,
                {"encoding": "base64", "preflightCommitment": self.commitment},
            ],
        )
        if not isinstance(signature, str):
            raise LedgerRPCError("sendTransaction returned no signature")
        if signature != tx.signature_b58:
            logger.warning(
                f"RPC returned signature {signature}, expected {tx.signature_b58}"
            )
        logger.info(f"Solana tx sent: {signature}")
        return signature

    async def confirm_transaction(self, signature: str) -> bool:
        result = await self._rpc("getSignatureStatuses", [[signature]])
        if not isinstance(result, dict) or not isinstance(result.get("value"), list):
            raise LedgerRPCError("getSignatureStatuses returned a malformed result")
        statuses = result["value"]
        if not statuses or statuses[0] is None:
            return False
        status = statuses[0]
        if not isinstance(status, dict):
            raise LedgerRPCError("getSignatureStatuses returned a malformed status")
        if status.get("err"):
            raise LedgerTransactionError(
                f"Transaction failed: {status['err']}", signature
            )
        # confirmed and finalized both satisfy "confirmed"
        confirmation = status.get("confirmationStatus") or ""
        if self.commitment == "finalized":
            return confirmation == "finalized"
        if self.commitment == "processed":
            return confirmation in ("processed", "confirmed", "finalized")
        return confirmation in ("confirmed", "finalized")

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
