"""
Task Router - Endpoints for committee tasks.

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
from vaad.api.services.task_service import (
    TaskError,
    TaskNotFoundError,
    TaskService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


# ---------------------------
# Request/Response Schemas
# ---------------------------


class TaskOut(BaseModel):
    """Task as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    priority: str
    status: str
    owner_name: str
    owner_phone: Optional[str] = None
    due_date: datetime
    reminder_date: Optional[datetime] = None
    assigned_by: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskRequest(BaseModel):
    """Request to create or replace a task."""

    title: str = Field(..., min_length=2, description="Task title")
    description: Optional[str] = None
    priority: Literal["low", "normal", "high", "urgent"] = "normal"
    status: Literal["pending", "in_progress", "completed", "cancelled"] = "pending"
    owner_name: str = Field(..., min_length=2, description="Person responsible")
    owner_phone: Optional[str] = None
    due_date: datetime
    reminder_date: Optional[datetime] = None


class TaskListResponse(BaseModel):
    success: bool = True
    data: list[TaskOut]
    count: int


class TaskResponse(BaseModel):
    success: bool = True
    data: TaskOut
    message: Optional[str] = None


class SuccessResponse(BaseModel):
    """Generic success response."""

    success: bool
    message: str


# ---------------------------
# Endpoints
# ---------------------------


@router.get("", response_model=TaskListResponse)
def list_tasks(
    status_filter: Optional[str] = Query(None, alias="status"),
    priority: Optional[str] = Query(None),
    owner: Optional[str] = Query(None, description="Substring of the owner's name"),
    overdue: bool = Query(False),
    limit: int = Query(50, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List tasks, most urgent first."""
    service = TaskService(db)
    tasks = service.list_tasks(status_filter, priority, owner, overdue, limit)

    return TaskListResponse(
        data=[TaskOut.model_validate(t) for t in tasks],
        count=len(tasks),
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    service = TaskService(db)

    try:
        task = service.get_task(task_id)
    except TaskNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="המשימה לא נמצאה",
        )

    return TaskResponse(data=TaskOut.model_validate(task))


@router.post("", response_model=TaskResponse)
def create_task(
    session: AdminSession,
    request: TaskRequest,
    db: Session = Depends(get_db),
):
    """Create a new task."""
    service = TaskService(db)

    try:
        task = service.create_task(request.model_dump(), session.role.value)
    except TaskError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return TaskResponse(
        data=TaskOut.model_validate(task),
        message="המשימה נוצרה בהצלחה",
    )


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    session: AdminSession,
    task_id: int,
    request: TaskRequest,
    db: Session = Depends(get_db),
):
    """Replace a task's fields."""
    service = TaskService(db)

    try:
        task = service.update_task(task_id, request.model_dump())
    except TaskNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="המשימה לא נמצאה",
        )
    except TaskError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return TaskResponse(
        data=TaskOut.model_validate(task),
        message="המשימה עודכנה בהצלחה",
    )


@router.delete("/{task_id}", response_model=SuccessResponse)
def delete_task(
    session: AdminSession,
    task_id: int,
    db: Session = Depends(get_db),
):
    service = TaskService(db)

    try:
        service.delete_task(task_id)
    except TaskNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="המשימה לא נמצאה",
        )

    return SuccessResponse(success=True, message="המשימה נמחקה בהצלחה")
