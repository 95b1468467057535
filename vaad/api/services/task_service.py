"""
Task Service - Business logic for committee tasks.

- List tasks with status/priority/owner/overdue filters
- Create, update and delete tasks (admin only, enforced by the router)
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import case
from sqlalchemy.orm import Session

from vaad.api.services.sql_utils import LIKE_ESCAPE, escape_like
from vaad.models.models import Task

logger = logging.getLogger(__name__)

TASK_PRIORITIES = ["low", "normal", "high", "urgent"]
TASK_STATUSES = ["pending", "in_progress", "completed", "cancelled"]

# Statuses that no longer count towards overdue work
CLOSED_STATUSES = ["completed", "cancelled"]

MAX_PAGE_SIZE = 100

TASK_FIELDS = [
    "title",
    "description",
    "priority",
    "status",
    "owner_name",
    "owner_phone",
    "due_date",
    "reminder_date",
]


class TaskError(Exception):
    """Raised when a task operation fails."""

    pass


class TaskNotFoundError(TaskError):
    """Raised when a task does not exist."""

    pass


class TaskService:
    """Service for committee task operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_task(self, task_id: int) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise TaskNotFoundError(f"Task {task_id} not found")
        return task

    def list_tasks(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        owner: Optional[str] = None,
        overdue: bool = False,
        limit: int = 50,
    ) -> list[Task]:
        """
        List tasks, most urgent first.

        Args:
            status: Only tasks with this status ("all" disables the filter)
            priority: Only tasks with this priority ("all" disables the filter)
            owner: Substring match on the owner's name
            overdue: Only open tasks whose due date has passed
            limit: Maximum results (capped at 100)

        Returns:
            List of Task objects
        """
        query = self.db.query(Task)

        if status and status != "all":
            query = query.filter(Task.status == status)

        if priority and priority != "all":
            query = query.filter(Task.priority == priority)

        if owner:
            pattern = f"%{escape_like(owner)}%"
            query = query.filter(Task.owner_name.ilike(pattern, escape=LIKE_ESCAPE))

        if overdue:
            query = query.filter(
                Task.status.notin_(CLOSED_STATUSES),
                Task.due_date < datetime.now(),
            )

        priority_rank = case(
            {p: i for i, p in enumerate(reversed(TASK_PRIORITIES))},
            value=Task.priority,
            else_=len(TASK_PRIORITIES),
        )

        return (
            query.order_by(priority_rank, Task.due_date)
            .limit(min(limit, MAX_PAGE_SIZE))
            .all()
        )

    def create_task(self, data: dict, assigned_by: str) -> Task:
        """
        Create a new task.

        Args:
            data: Validated task fields
            assigned_by: Role of the session creating the task

        Returns:
            The created Task
        """
        self._validate_codes(data)

        task = Task(
            **{k: v for k, v in data.items() if k in TASK_FIELDS},
            assigned_by=assigned_by,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)

        logger.info(f"Created task {task.id}: {task.title}")
        return task

    def update_task(self, task_id: int, data: dict) -> Task:
        """Update the given fields of a task."""
        task = self.get_task(task_id)
        self._validate_codes(data)

        for field, value in data.items():
            if field in TASK_FIELDS:
                setattr(task, field, value)
        task.updated_at = datetime.now()

        self.db.commit()
        self.db.refresh(task)

        logger.info(f"Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> None:
        task = self.get_task(task_id)
        self.db.delete(task)
        self.db.commit()
        logger.info(f"Deleted task {task_id}")

    @staticmethod
    def _validate_codes(data: dict) -> None:
        if "priority" in data and data["priority"] not in TASK_PRIORITIES:
            raise TaskError(f"Invalid priority: {data['priority']}")
        if "status" in data and data["status"] not in TASK_STATUSES:
            raise TaskError(f"Invalid status: {data['status']}")
