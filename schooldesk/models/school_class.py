from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class SchoolClass(Document):
    """School class model (e.g., Grade 1, Grade 10)"""
    name: str
    level: int
    teacher_id: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "classes"
        prefix = "class"


class SchoolClassCreate(BaseModel):
    name: str
    level: int
    teacher_id: Optional[str] = None


class SchoolClassUpdate(BaseModel):
    name: Optional[str] = None
    level: Optional[int] = None
    teacher_id: Optional[str] = None
