"""Vendor record."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vendor:
    """A registered payee identified by its ledger account address.

    Records are immutable so a reader holding one can never observe it
    half-written.
    """

    wallet_id: str
    name: str
    address: str = ""
    services: tuple[str, ...] = field(default_factory=tuple)
