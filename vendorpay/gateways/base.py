"""Base ledger client interface.

All ledger adapters must implement this interface.
Business logic should NOT live in adapters - only ledger communication.
"""

from abc import ABC, abstractmethod
from typing import Any

from vendorpay.gateways.keys import Keypair, PublicKey


class LedgerError(Exception):
    """Base class for ledger communication failures."""


class LedgerRPCError(LedgerError):
    """Transport failure or JSON-RPC error response."""

    def __init__(self, message: str, error_data: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.error_data = error_data or {}


class LedgerTransactionError(LedgerError):
    """Transaction was processed but failed on-chain."""

    def __init__(self, message: str, signature: str | None = None) -> None:
        super().__init__(message)
        self.signature = signature


class LedgerClient(ABC):
    """Abstract base class for ledger clients.

    One instance is shared by all in-flight requests, so implementations
    must be safe for concurrent use.
    """

    @abstractmethod
    async def get_latest_blockhash(self) -> str:
        """Return a recent blockhash to anchor a new transaction.

        Returns:
            Base58-encoded blockhash
        """
        pass

    @abstractmethod
    async def submit_transfer(
        self,
        payer: Keypair,
        recipient: PublicKey,
        lamports: int,
        recent_blockhash: str,
    ) -> str:
        """Build, sign and submit a native transfer.

        Args:
            payer: Signing keypair of the funding account
            recipient: Destination account
            lamports: Amount in lamports
            recent_blockhash: Blockhash from get_latest_blockhash

        Returns:
            Base58 transaction signature
        """
        pass

    @abstractmethod
    async def confirm_transaction(self, signature: str) -> bool:
        """Check whether a submitted transaction is confirmed.

        Args:
            signature: Base58 transaction signature

        Returns:
            True once the configured commitment is reached, False while pending

        Raises:
            LedgerTransactionError: If the transaction failed on-chain
        """
        pass

    async def close(self) -> None:
        """Release network resources."""
        return None
