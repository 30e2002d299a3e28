from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class TaskStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(Document):
    """Task assigned by an admin to one or more teachers."""
    title: str
    description: str = ""
    due_date: date
    assigned_by: str
    assigned_to: list[str] = Field(default_factory=list)
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "tasks"
        prefix = "task"


class TaskCreate(BaseModel):
    title: str
    description: str = ""
    due_date: date
    assigned_by: str
    assigned_to: list[str] = Field(default_factory=list)
    priority: TaskPriority = TaskPriority.MEDIUM
