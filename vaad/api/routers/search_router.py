"""
Search Router - Search across tasks and vendors.
"""

from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from vaad.db.deps import get_db
from vaad.api.services.search_service import SearchService

router = APIRouter(prefix="/api/search", tags=["search"])


class SearchResultOut(BaseModel):
    id: int
    type: str
    title: str
    url: str
    description: Optional[str] = None
    highlight: Optional[str] = None
    date: Optional[datetime] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class SearchResponse(BaseModel):
    results: list[SearchResultOut]
    total: int
    has_more: bool


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


@router.get("", response_model=SearchResponse)
def search(
    q: str = Query("", description="Search text"),
    types: Optional[list[str]] = Query(None, description="tasks, vendors or all"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """Search tasks and active vendors, title matches first."""
    service = SearchService(db)
    found = service.search(q, types, limit, offset)

    return SearchResponse(
        results=[SearchResultOut(**vars(r)) for r in found["results"]],
        total=found["total"],
        has_more=found["has_more"],
    )


@router.get("/suggestions", response_model=SuggestionsResponse)
def suggestions(
    q: str = Query("", description="Prefix to complete"),
    limit: int = Query(5, ge=1, le=20),
    db: Session = Depends(get_db),
):
    service = SearchService(db)
    return SuggestionsResponse(suggestions=service.suggestions(q, limit))
