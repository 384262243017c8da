"""Per-request purchase tracking record."""

from dataclasses import dataclass


@dataclass
class Purchase:
    """Progress of a single /buy request through the purchase state machine."""

    vendor: str
    lamports: int
    status: str = "authorizing"
    signature: str | None = None
    confirmation_checks: int = 0
