"""Core application modules."""

from vendorpay.core.exceptions import (
    AppException,
    ConfirmationCheckFailed,
    ConfirmationTimeout,
    InvalidPurchaseTransition,
    MalformedAddress,
    MalformedCredential,
    PaymentError,
    SubmissionFailed,
    VendorNotWhitelisted,
)

__all__ = [
    "AppException",
    "ConfirmationCheckFailed",
    "ConfirmationTimeout",
    "InvalidPurchaseTransition",
    "MalformedAddress",
    "MalformedCredential",
    "PaymentError",
    "SubmissionFailed",
    "VendorNotWhitelisted",
]
