"""Vendor whitelist endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from vendorpay.api.deps import get_registry
from vendorpay.schemas.vendor import VendorCreate, VendorResponse
from vendorpay.services.vendor_registry import VendorRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[VendorResponse])
async def list_vendors(
    registry: Annotated[VendorRegistry, Depends(get_registry)],
) -> list[VendorResponse]:
    """List all whitelisted vendors in registration order."""
    logger.info("retrieving all vendors")
    return [VendorResponse.model_validate(v) for v in registry.list()]


@router.post("", status_code=status.HTTP_200_OK, response_class=Response)
async def register_vendor(
    vendor_data: VendorCreate,
    registry: Annotated[VendorRegistry, Depends(get_registry)],
) -> Response:
    """Add a vendor to the whitelist."""
    registry.insert(vendor_data.to_vendor())
    return Response(status_code=status.HTTP_200_OK)
