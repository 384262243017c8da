"""Pydantic schemas for API validation."""

from vendorpay.schemas.payment import BuyRequest, ErrorResponse
from vendorpay.schemas.vendor import VendorCreate, VendorResponse

__all__ = [
    "BuyRequest",
    "ErrorResponse",
    "VendorCreate",
    "VendorResponse",
]
