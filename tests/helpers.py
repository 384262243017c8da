"""Test doubles shared across test modules."""

from collections.abc import Iterable

import base58

from vendorpay.gateways.base import LedgerClient
from vendorpay.gateways.keys import PublicKey
from vendorpay.gateways.transaction import sign_transfer

BLOCKHASH = base58.b58encode(bytes(range(32))).decode()


class FakeLedger(LedgerClient):
    """Scripted in-memory ledger recording every call it receives.

    ``confirmations`` is consumed one item per poll; a bool is returned, an
    exception is raised. Once exhausted the last item repeats.
    """

    def __init__(
        self,
        confirmations: Iterable[bool | Exception] = (True,),
        submit_error: Exception | None = None,
        blockhash_error: Exception | None = None,
    ) -> None:
        self.confirmations = list(confirmations)
        self.submit_error = submit_error
        self.blockhash_error = blockhash_error
        self.calls: list[str] = []
        self.submitted: list[tuple[PublicKey, PublicKey, int, str]] = []
        self.confirm_calls = 0
        self.closed = False

    async def get_latest_blockhash(self) -> str:
        self.calls.append("get_latest_blockhash")
        if self.blockhash_error is not None:
            raise self.blockhash_error
        return BLOCKHASH

    async def submit_transfer(self, payer, recipient, lamports, recent_blockhash) -> str:
        self.calls.append("submit_transfer")
        if self.submit_error is not None:
            raise self.submit_error
        tx = sign_transfer(payer, recipient, lamports, recent_blockhash)
        self.submitted.append((payer.pubkey, recipient, lamports, recent_blockhash))
        return tx.signature_b58

    async def confirm_transaction(self, signature: str) -> bool:
        self.calls.append("confirm_transaction")
        index = min(self.confirm_calls, len(self.confirmations) - 1)
        self.confirm_calls += 1
        outcome = self.confirmations[index]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True
