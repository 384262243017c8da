"""Shared pytest fixtures for the test suite."""

import pytest

from vendorpay.config import Settings
from vendorpay.gateways.base import LedgerRPCError
from vendorpay.gateways.keys import Keypair
from vendorpay.services.payment_service import ConfirmationPolicy, PaymentService
from vendorpay.services.vendor_registry import VendorRegistry

from tests.helpers import FakeLedger


@pytest.fixture
def buyer() -> Keypair:
    """A freshly generated buyer keypair."""
    return Keypair.generate()


@pytest.fixture
def buyer_pair(buyer: Keypair) -> str:
    """The buyer keypair in its wire form."""
    return buyer.to_base58()


@pytest.fixture
def vendor_wallet() -> str:
    """A valid vendor account address."""
    return str(Keypair.generate().pubkey)


@pytest.fixture
def registry() -> VendorRegistry:
    """An empty, isolated vendor registry."""
    return VendorRegistry()


@pytest.fixture
def ledger() -> FakeLedger:
    """A ledger that accepts submissions and confirms on the first poll."""
    return FakeLedger()


@pytest.fixture
def policy() -> ConfirmationPolicy:
    """A confirmation policy that does not sleep between polls."""
    return ConfirmationPolicy(timeout=5.0, poll_interval=0)


@pytest.fixture
def payment_service(
    registry: VendorRegistry,
    ledger: FakeLedger,
    policy: ConfirmationPolicy,
) -> PaymentService:
    return PaymentService(registry=registry, ledger=ledger, policy=policy)


@pytest.fixture
def test_settings() -> Settings:
    """Settings for in-process application tests."""
    return Settings(
        _env_file=None,
        confirmation_timeout=5.0,
        confirmation_poll_interval=0,
    )


@pytest.fixture
def rpc_error() -> LedgerRPCError:
    return LedgerRPCError("Transaction simulation failed: insufficient lamports")
