"""Custom application exceptions."""

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class PaymentError(AppException):
    """Base class for failures of a single purchase."""


class VendorNotWhitelisted(PaymentError):
    """Target vendor is not present in the registry."""

    def __init__(self, vendor: str) -> None:
        self.vendor = vendor
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"{vendor} is not whitelisted",
        )


class MalformedCredential(PaymentError):
    """Buyer keypair could not be decoded.

    The message never includes the credential itself.
    """

    def __init__(self, reason: str | None = None) -> None:
        detail = "buyer_pair is not a valid keypair"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class MalformedAddress(PaymentError):
    """Vendor identifier is not a valid ledger address."""

    def __init__(self, address: str, reason: str | None = None) -> None:
        detail = f"{address} is not a valid ledger address"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class SubmissionFailed(PaymentError):
    """Ledger rejected or could not accept the transfer."""

    def __init__(self, detail: str | None = None) -> None:
        message = "transfer submission failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=message)


class ConfirmationCheckFailed(PaymentError):
    """A confirmation poll errored or the transfer failed on-chain."""

    def __init__(self, signature: str, detail: str | None = None) -> None:
        self.signature = signature
        message = f"confirmation check failed for {signature}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=message)


class ConfirmationTimeout(PaymentError):
    """Transfer was not confirmed within the polling bounds."""

    def __init__(self, signature: str, attempts: int) -> None:
        self.signature = signature
        self.attempts = attempts
        super().__init__(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=f"transfer {signature} was not confirmed after {attempts} checks",
        )


class InvalidPurchaseTransition(AppException):
    """Internal purchase state machine was driven out of order."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
