from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class AcademicYearStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class AcademicYear(Document):
    """Academic year master records."""
    name: str  # e.g., "2024-2025"
    start_date: date
    end_date: date
    status: AcademicYearStatus = AcademicYearStatus.ARCHIVED
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "academic_years"
        prefix = "ay"


class AcademicYearCreate(BaseModel):
    name: str
    start_date: date
    end_date: date
    status: AcademicYearStatus = AcademicYearStatus.ARCHIVED


class AcademicYearUpdate(BaseModel):
    name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[AcademicYearStatus] = None
