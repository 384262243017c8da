"""API dependencies for shared application state."""

from fastapi import Request

from vendorpay.services.payment_service import PaymentService
from vendorpay.services.vendor_registry import VendorRegistry


def get_registry(request: Request) -> VendorRegistry:
    """Get the vendor registry owned by the running application."""
    return request.app.state.registry


def get_payment_service(request: Request) -> PaymentService:
    """Get the payment service owned by the running application."""
    return request.app.state.payment_service
