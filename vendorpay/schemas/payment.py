"""Payment-related Pydantic schemas."""

from pydantic import BaseModel, Field, SecretStr, StrictInt

from vendorpay.gateways.transaction import MAX_LAMPORTS


class BuyRequest(BaseModel):
    """Schema for a transfer from a buyer to a whitelisted vendor."""

    # strict: "100", 100.0 and true are not amounts
    lamports: StrictInt = Field(..., ge=0, le=MAX_LAMPORTS)
    vendor: str
    # base58 secret||public keypair; SecretStr keeps it out of repr and logs
    buyer_pair: SecretStr


class ErrorResponse(BaseModel):
    """Schema for failed requests."""

    error: str
