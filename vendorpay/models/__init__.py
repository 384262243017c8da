"""Domain records held in memory."""

from vendorpay.models.purchase import Purchase
from vendorpay.models.vendor import Vendor

__all__ = ["Purchase", "Vendor"]
