"""
Vendor Router - Endpoints for the vendor directory.

Reads are public; create, update and delete require an admin session.
"""

import logging
from datetime import datetime
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from vaad.auth.deps import AdminSession
from vaad.db.deps import get_db
from vaad.api.services.vendor_service import (
    VendorError,
    VendorNotFoundError,
    VendorService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/vendors", tags=["vendors"])

VendorCategory = Literal[
    "catering",
    "equipment",
    "entertainment",
    "transportation",
    "venue",
    "photography",
    "printing",
    "other",
]


# ---------------------------
# Request/Response Schemas
# ---------------------------


class VendorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    category: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class VendorRequest(BaseModel):
    """Request to create or replace a vendor."""

    name: str = Field(..., min_length=2, description="Vendor name")
    description: Optional[str] = None
    category: VendorCategory
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    status: Literal["active", "inactive"] = "active"


class VendorListResponse(BaseModel):
    success: bool = True
    data: list[VendorOut]
    count: int


class VendorResponse(BaseModel):
    success: bool = True
    data: VendorOut
    message: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool
    message: str


# ---------------------------
# Endpoints
# ---------------------------


@router.get("", response_model=VendorListResponse)
def list_vendors(
    status_filter: Optional[str] = Query(None, alias="status"),
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Search name, description, contact"),
    limit: int = Query(100, ge=1, le=100),
    db: Session = Depends(get_db),
):
    service = VendorService(db)
    vendors = service.list_vendors(status_filter, category, search, limit)

    return VendorListResponse(
        data=[VendorOut.model_validate(v) for v in vendors],
        count=len(vendors),
    )


@router.get("/{vendor_id}", response_model=VendorResponse)
def get_vendor(vendor_id: int, db: Session = Depends(get_db)):
    service = VendorService(db)

    try:
        vendor = service.get_vendor(vendor_id)
    except VendorNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="הספק לא נמצא",
        )

    return VendorResponse(data=VendorOut.model_validate(vendor))


@router.post("", response_model=VendorResponse)
def create_vendor(
    session: AdminSession,
    request: VendorRequest,
    db: Session = Depends(get_db),
):
    service = VendorService(db)

    try:
        vendor = service.create_vendor(request.model_dump())
    except VendorError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return VendorResponse(
        data=VendorOut.model_validate(vendor),
        message="הספק נוצר בהצלחה",
    )


@router.put("/{vendor_id}", response_model=VendorResponse)
def update_vendor(
    session: AdminSession,
    vendor_id: int,
    request: VendorRequest,
    db: Session = Depends(get_db),
):
    service = VendorService(db)

    try:
        vendor = service.update_vendor(vendor_id, request.model_dump())
    except VendorNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="הספק לא נמצא",
        )
    except VendorError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return VendorResponse(
        data=VendorOut.model_validate(vendor),
        message="הספק עודכן בהצלחה",
    )


@router.delete("/{vendor_id}", response_model=SuccessResponse)
def delete_vendor(
    session: AdminSession,
    vendor_id: int,
    db: Session = Depends(get_db),
):
    service = VendorService(db)

    try:
        service.delete_vendor(vendor_id)
    except VendorNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="הספק לא נמצא",
        )

    return SuccessResponse(success=True, message="הספק נמחק בהצלחה")
