"""Binding of a student to an academic year, class and section."""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from schooldesk.models.academic_year import AcademicYear
from schooldesk.models.base import Document
from schooldesk.models.school_class import SchoolClass
from schooldesk.models.section import Section
from schooldesk.models.student import Student


class EnrollmentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"
    TRANSFERRED = "transferred"


class Enrollment(Document):
    """A student has at most one enrollment with status=active."""

    student_id: str
    academic_year_id: str
    class_id: str
    section_id: str
    enrollment_date: datetime
    withdrawal_date: Optional[datetime] = None
    status: EnrollmentStatus = EnrollmentStatus.ACTIVE

    class Settings:
        name = "enrollments"
        prefix = "enrollment"

    @field_validator("enrollment_date", "withdrawal_date", mode="before")
    @classmethod
    def _date_to_midnight(cls, value):
        # "2023-09-01" and date objects are accepted as midnight of that day
        if isinstance(value, str) and len(value) == 10:
            value = date.fromisoformat(value)
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        return value


class EnrollmentCreate(BaseModel):
    """Placement for a promotion; the student and dates come from the operation."""
    academic_year_id: str
    class_id: str
    section_id: str


class EnrollmentDetail(Enrollment):
    """Enrollment joined with its academic year, class and section."""
    academic_year: Optional[AcademicYear] = None
    school_class: Optional[SchoolClass] = None
    section: Optional[Section] = None


class PromotionResult(BaseModel):
    old_enrollment: Enrollment
    new_enrollment: Enrollment
    student: Student
