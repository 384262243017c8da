"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from vendorpay.api import buy, vendors

api_router = APIRouter()

# Vendor whitelist
api_router.include_router(vendors.router, prefix="/vendors", tags=["Vendors"])

# Purchases
api_router.include_router(buy.router, prefix="/buy", tags=["Payments"])
