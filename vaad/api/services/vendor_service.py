"""
Vendor Service - Business logic for the committee's vendor directory.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from vaad.api.services.sql_utils import LIKE_ESCAPE, escape_like
from vaad.models.models import Vendor

logger = logging.getLogger(__name__)

VENDOR_CATEGORIES = [
    "catering",
    "equipment",
    "entertainment",
    "transportation",
    "venue",
    "photography",
    "printing",
    "other",
]
VENDOR_STATUSES = ["active", "inactive"]

MAX_PAGE_SIZE = 100

VENDOR_FIELDS = [
    "name",
    "description",
    "category",
    "contact_person",
    "phone",
    "email",
    "website",
    "address",
    "notes",
    "status",
]

# Optional text fields where the admin forms send "" for "no value"
NULLABLE_FIELDS = [
    "description",
    "contact_person",
    "phone",
    "email",
    "website",
    "address",
    "notes",
]


class VendorError(Exception):
    """Raised when a vendor operation fails."""

    pass


class VendorNotFoundError(VendorError):
    """Raised when a vendor does not exist."""

    pass


def clean_empty_strings(data: dict) -> dict:
    """Turn empty strings in optional fields into None."""
    return {
        k: (None if k in NULLABLE_FIELDS and v == "" else v)
        for k, v in data.items()
    }


class VendorService:
    """Service for vendor directory operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_vendor(self, vendor_id: int) -> Vendor:
        vendor = self.db.query(Vendor).filter(Vendor.id == vendor_id).first()
        if not vendor:
            raise VendorNotFoundError(f"Vendor {vendor_id} not found")
        return vendor

    def list_vendors(
        self,
        status: Optional[str] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 100,
    ) -> list[Vendor]:
        """
        List vendors ordered by name.

        Args:
            status: Only vendors with this status ("all" disables the filter)
            category: Only vendors in this category ("all" disables the filter)
            search: Substring match on name, description or contact person
            limit: Maximum results (capped at 100)
        """
        query = self.db.query(Vendor)

        if status and status != "all":
            query = query.filter(Vendor.status == status)

        if category and category != "all":
            query = query.filter(Vendor.category == category)

        if search:
            pattern = f"%{escape_like(search)}%"
            query = query.filter(
                or_(
                    Vendor.name.ilike(pattern, escape=LIKE_ESCAPE),
                    Vendor.description.ilike(pattern, escape=LIKE_ESCAPE),
                    Vendor.contact_person.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        return query.order_by(Vendor.name).limit(min(limit, MAX_PAGE_SIZE)).all()

    def create_vendor(self, data: dict) -> Vendor:
        data = clean_empty_strings(data)
        self._validate_codes(data)

        vendor = Vendor(**{k: v for k, v in data.items() if k in VENDOR_FIELDS})
        self.db.add(vendor)
        self.db.commit()
        self.db.refresh(vendor)

        logger.info(f"Created vendor {vendor.id}: {vendor.name}")
        return vendor

    def update_vendor(self, vendor_id: int, data: dict) -> Vendor:
        vendor = self.get_vendor(vendor_id)
        data = clean_empty_strings(data)
        self._validate_codes(data)

        for field, value in data.items():
            if field in VENDOR_FIELDS:
                setattr(vendor, field, value)
        vendor.updated_at = datetime.now()

        self.db.commit()
        self.db.refresh(vendor)

        logger.info(f"Updated vendor {vendor_id}")
        return vendor

    def delete_vendor(self, vendor_id: int) -> None:
        vendor = self.get_vendor(vendor_id)
        self.db.delete(vendor)
        self.db.commit()
        logger.info(f"Deleted vendor {vendor_id}")

    @staticmethod
    def _validate_codes(data: dict) -> None:
        if "category" in data and data["category"] not in VENDOR_CATEGORIES:
            raise VendorError(f"Invalid category: {data['category']}")
        if "status" in data and data["status"] not in VENDOR_STATUSES:
            raise VendorError(f"Invalid status: {data['status']}")
