"""Purchase state machine."""

from vendorpay.core.exceptions import InvalidPurchaseTransition
from vendorpay.models.purchase import Purchase

PURCHASE_TRANSITIONS = {
    "authorizing": {"resolving", "failed"},
    "resolving": {"submitting", "failed"},
    "submitting": {"confirming", "failed"},
    "confirming": {"confirmed", "failed"},
    "confirmed": set(),
    "failed": set(),
}


def assert_purchase_transition(current: str, target: str) -> None:
    allowed = PURCHASE_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise InvalidPurchaseTransition(
            f"Invalid purchase transition: {current} -> {target}"
        )


def advance(purchase: Purchase, target: str) -> None:
    assert_purchase_transition(purchase.status, target)
    purchase.status = target
