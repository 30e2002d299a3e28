"""Student records; class and section come from the current enrollment."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class Student(Document):
    name: str
    enrollment_no: str
    attendance_percentage: float = 0.0  # cached, refreshed when attendance is marked
    guardian_name: Optional[str] = None
    guardian_number: Optional[str] = None
    address: Optional[str] = None
    current_enrollment_id: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "students"
        prefix = "student"


class StudentCreate(BaseModel):
    name: str
    enrollment_no: Optional[str] = None  # auto-assigned when omitted
    guardian_name: Optional[str] = None
    guardian_number: Optional[str] = None
    address: Optional[str] = None


class StudentView(BaseModel):
    """Read model with the display fields computed from the current enrollment."""
    id: str
    name: str
    enrollment_no: str
    attendance_percentage: float
    guardian_name: Optional[str] = None
    guardian_number: Optional[str] = None
    address: Optional[str] = None
    current_enrollment_id: Optional[str] = None
    academic_year_id: Optional[str] = None
    class_id: Optional[str] = None
    class_name: Optional[str] = None
    section_id: Optional[str] = None
    section_name: Optional[str] = None
