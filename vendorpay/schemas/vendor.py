"""Vendor-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict

from vendorpay.models.vendor import Vendor


class VendorCreate(BaseModel):
    """Schema for registering a vendor.

    Fields are accepted as-is; the wallet id is not checked for format or
    uniqueness.
    """

    wallet_id: str
    name: str
    address: str = ""
    services: list[str] = []

    def to_vendor(self) -> Vendor:
        return Vendor(
            wallet_id=self.wallet_id,
            name=self.name,
            address=self.address,
            services=tuple(self.services),
        )


class VendorResponse(BaseModel):
    """Schema for vendor response."""

    model_config = ConfigDict(from_attributes=True)

    wallet_id: str
    name: str
    address: str
    services: list[str]
