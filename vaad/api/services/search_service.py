"""
Search Service - Case-insensitive search across committee records.

Results from every entity type are merged and ranked: records whose title
contains the query come first, then newer records before older ones.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from vaad.api.services.sql_utils import LIKE_ESCAPE, escape_like
from vaad.models.models import Task, Vendor

logger = logging.getLogger(__name__)

SEARCH_TYPES = ["tasks", "vendors"]
MIN_QUERY_LENGTH = 2
SNIPPET_CONTEXT = 30


@dataclass
class SearchResult:
    """A single search hit, independent of the entity it came from."""

    id: int
    type: str
    title: str
    url: str
    description: Optional[str] = None
    highlight: Optional[str] = None
    date: Optional[datetime] = None
    metadata: dict[str, Any] = field(default_factory=dict)


def highlight_match(text: Optional[str], query: str) -> Optional[str]:
    """
    Cut a snippet around the first case-insensitive match of query.

    Returns None if there is no text or no match. Elided text at either
    end is marked with "...".
    """
    if not text:
        return None

    index = text.lower().find(query.lower())
    if index == -1:
        return None

    start = max(0, index - SNIPPET_CONTEXT)
    end = min(len(text), index + len(query) + SNIPPET_CONTEXT)

    snippet = text[start:end]
    if start > 0:
        snippet = "..." + snippet
    if end < len(text):
        snippet = snippet + "..."
    return snippet


def rank_results(results: list[SearchResult], query: str) -> list[SearchResult]:
    """
    Order results by relevance.

    Title matches first; within each group dated results come newest
    first, followed by undated results in their original order.
    """
    needle = query.lower()

    def sort_key(result: SearchResult) -> tuple:
        in_title = needle in result.title.lower()
        if result.date is None:
            return (not in_title, 1, 0.0)
        return (not in_title, 0, -result.date.timestamp())

    return sorted(results, key=sort_key)


class SearchService:
    """Service for cross-entity search."""

    def __init__(self, db: Session):
        self.db = db

    def search(
        self,
        query: str,
        types: Optional[list[str]] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> dict:
        """
        Search tasks and vendors.

        Args:
            query: Search text (at least 2 characters after trimming)
            types: Entity types to search, or None / ["all"] for every type
            limit: Page size, also the per-type fetch limit
            offset: Page offset into the ranked results

        Returns:
            Dict with results (list of SearchResult), total and has_more
        """
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return {"results": [], "total": 0, "has_more": False}

        if not types or "all" in types:
            types = SEARCH_TYPES

        pattern = f"%{escape_like(query)}%"
        results: list[SearchResult] = []

        if "tasks" in types:
            tasks = (
                self.db.query(Task)
                .filter(
                    or_(
                        Task.title.ilike(pattern, escape=LIKE_ESCAPE),
                        Task.description.ilike(pattern, escape=LIKE_ESCAPE),
                    )
                )
                .limit(limit)
                .all()
            )
            for task in tasks:
                results.append(
                    SearchResult(
                        id=task.id,
                        type="tasks",
                        title=task.title,
                        description=task.description,
                        url=f"/tasks/{task.id}",
                        highlight=highlight_match(task.title, query)
                        or highlight_match(task.description, query),
                        date=task.due_date,
                        metadata={"owner_name": task.owner_name},
                    )
                )

        if "vendors" in types:
            vendors = (
                self.db.query(Vendor)
                .filter(
                    or_(
                        Vendor.name.ilike(pattern, escape=LIKE_ESCAPE),
                        Vendor.description.ilike(pattern, escape=LIKE_ESCAPE),
                    )
                )
                .filter(Vendor.status == "active")
                .limit(limit)
                .all()
            )
            for vendor in vendors:
                results.append(
                    SearchResult(
                        id=vendor.id,
                        type="vendors",
                        title=vendor.name,
                        description=vendor.description,
                        url=f"/admin/vendors/{vendor.id}",
                        highlight=highlight_match(vendor.name, query)
                        or highlight_match(vendor.description, query),
                        metadata={"category": vendor.category},
                    )
                )

        ranked = rank_results(results, query)
        logger.debug(f"Search '{query}' matched {len(ranked)} records")

        return {
            "results": ranked[offset:offset + limit],
            "total": len(ranked),
            "has_more": len(ranked) > offset + limit,
        }

    def suggestions(self, query: str, limit: int = 5) -> list[str]:
        """Distinct task titles and vendor names starting with query."""
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        pattern = f"{escape_like(query)}%"
        titles = [
            row.title
            for row in (
                self.db.query(Task)
                .filter(Task.title.ilike(pattern, escape=LIKE_ESCAPE))
                .limit(limit)
                .all()
            )
        ]
        names = [
            row.name
            for row in (
                self.db.query(Vendor)
                .filter(Vendor.name.ilike(pattern, escape=LIKE_ESCAPE))
                .filter(Vendor.status == "active")
                .limit(limit)
                .all()
            )
        ]

        seen: list[str] = []
        for value in titles + names:
            if value not in seen:
                seen.append(value)
        return seen[:limit]
