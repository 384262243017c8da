"""In-memory vendor whitelist.

The registry is owned by the application and injected into the payment
service and the vendor endpoints; it is not persisted across restarts.
"""

import logging
from collections.abc import Iterable
from threading import Lock

from vendorpay.models.vendor import Vendor

logger = logging.getLogger(__name__)


class VendorRegistry:
    """Append-only, insertion-ordered collection of vendors.

    Writers take the lock to append; readers take it to copy. Vendors are
    frozen, so a copied snapshot is consistent for every insertion.
    """

    def __init__(self, vendors: Iterable[Vendor] = ()) -> None:
        self._vendors: list[Vendor] = list(vendors)
        self._lock = Lock()

    def list(self) -> list[Vendor]:
        """Return a snapshot of all vendors in insertion order."""
        with self._lock:
            return list(self._vendors)

    def insert(self, vendor: Vendor) -> None:
        """Append a vendor. Duplicate wallet ids are accepted as-is."""
        with self._lock:
            self._vendors.append(vendor)
        logger.info(f"Added vendor {vendor.wallet_id} ({vendor.name})")

    def contains(self, wallet_id: str) -> bool:
        """Check whether any vendor has exactly this wallet id."""
        with self._lock:
            return any(v.wallet_id == wallet_id for v in self._vendors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._vendors)
