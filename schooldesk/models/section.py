from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class Section(Document):
    """Subdivision of a class within one academic year (e.g. Grade 10 - A)."""
    name: str  # e.g., "A", "Blue"
    academic_year_id: str
    class_id: str
    homeroom_teacher_id: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "sections"
        prefix = "section"


class SectionCreate(BaseModel):
    name: str
    academic_year_id: str
    class_id: str
    homeroom_teacher_id: Optional[str] = None


class SectionUpdate(BaseModel):
    name: Optional[str] = None
    academic_year_id: Optional[str] = None
    class_id: Optional[str] = None
    homeroom_teacher_id: Optional[str] = None
