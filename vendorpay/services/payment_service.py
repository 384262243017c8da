"""Payment processing service.

Authorizes a purchase against the vendor registry, then drives the ledger
client through submit and confirm. Ledger failures are translated into the
application error kinds here; adapters only raise ``LedgerError``.
"""

import asyncio
import logging
from dataclasses import dataclass

from vendorpay.config import Settings
from vendorpay.core.exceptions import (
    ConfirmationCheckFailed,
    ConfirmationTimeout,
    MalformedAddress,
    MalformedCredential,
    PaymentError,
    SubmissionFailed,
    VendorNotWhitelisted,
)
from vendorpay.domain.purchase_state import advance
from vendorpay.gateways.base import LedgerClient, LedgerError
from vendorpay.gateways.keys import InvalidKeypair, InvalidPublicKey, Keypair, PublicKey
from vendorpay.models.purchase import Purchase
from vendorpay.schemas.payment import BuyRequest
from vendorpay.services.vendor_registry import VendorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmationPolicy:
    """Bounds for the confirmation poll loop."""

    timeout: float = 60.0
    poll_interval: float = 0.5
    max_attempts: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfirmationPolicy":
        return cls(
            timeout=settings.confirmation_timeout,
            poll_interval=settings.confirmation_poll_interval,
            max_attempts=settings.confirmation_max_attempts,
        )


class PaymentService:
    """Service executing purchases for whitelisted vendors."""

    def __init__(
        self,
        registry: VendorRegistry,
        ledger: LedgerClient,
        policy: ConfirmationPolicy | None = None,
    ) -> None:
        self.registry = registry
        self.ledger = ledger
        self.policy = policy or ConfirmationPolicy()

    async def buy(self, request: BuyRequest) -> Purchase:
        """Transfer ``request.lamports`` to the vendor and wait for confirmation.

        Returns:
            The confirmed purchase, including its transaction signature

        Raises:
            PaymentError: One of the purchase error kinds; never retried
        """
        purchase = Purchase(vendor=request.vendor, lamports=request.lamports)
        try:
            self._authorize(purchase)

            advance(purchase, "resolving")
            payer = self._resolve_payer(request)
            recipient = self._resolve_recipient(purchase.vendor)

            advance(purchase, "submitting")
            purchase.signature = await self._submit(payer, recipient, purchase.lamports)
            del payer

            advance(purchase, "confirming")
            await self._await_confirmation(purchase)

            advance(purchase, "confirmed")
        except PaymentError as e:
            logger.warning(
                f"Purchase for {purchase.vendor} failed while {purchase.status}: {e.detail}"
            )
            advance(purchase, "failed")
            raise
        except Exception:
            logger.error(f"Purchase for {purchase.vendor} aborted while {purchase.status}")
            advance(purchase, "failed")
            raise

        logger.info(
            f"Transferred {purchase.lamports} lamports to {purchase.vendor} "
            f"({purchase.signature}, {purchase.confirmation_checks} checks)"
        )
        return purchase

    def _authorize(self, purchase: Purchase) -> None:
        if not self.registry.contains(purchase.vendor):
            raise VendorNotWhitelisted(purchase.vendor)

    @staticmethod
    def _resolve_payer(request: BuyRequest) -> Keypair:
        try:
            return Keypair.from_base58(request.buyer_pair.get_secret_value())
        except InvalidKeypair as e:
            # reason text never includes key material
            raise MalformedCredential(str(e)) from None

    @staticmethod
    def _resolve_recipient(vendor: str) -> PublicKey:
        try:
            return PublicKey.from_base58(vendor)
        except InvalidPublicKey as e:
            raise MalformedAddress(vendor, str(e)) from e

    async def _submit(self, payer: Keypair, recipient: PublicKey, lamports: int) -> str:
        try:
            blockhash = await self.ledger.get_latest_blockhash()
            return await self.ledger.submit_transfer(payer, recipient, lamports, blockhash)
        except LedgerError as e:
            raise SubmissionFailed(str(e)) from e

    async def _await_confirmation(self, purchase: Purchase) -> None:
        """Poll until confirmed, a poll error, or the policy bounds are hit."""
        signature = purchase.signature
        try:
            async with asyncio.timeout(self.policy.timeout):
                while True:
                    purchase.confirmation_checks += 1
                    try:
                        confirmed = await self.ledger.confirm_transaction(signature)
                    except LedgerError as e:
                        raise ConfirmationCheckFailed(signature, str(e)) from e

                    if confirmed:
                        return
                    if (
                        self.policy.max_attempts is not None
                        and purchase.confirmation_checks >= self.policy.max_attempts
                    ):
                        raise ConfirmationTimeout(signature, purchase.confirmation_checks)
                    logger.debug(
                        f"{signature} not confirmed after {purchase.confirmation_checks} checks"
                    )
                    await asyncio.sleep(self.policy.poll_interval)
        except TimeoutError:
            raise ConfirmationTimeout(signature, purchase.confirmation_checks) from None
