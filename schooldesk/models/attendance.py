from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class StudentAttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class TeacherAttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"


class StudentAttendance(Document):
    """One status per student per date; re-marking overwrites the record."""
    student_id: str
    enrollment_id: Optional[str] = None  # enrollment current when the mark was made
    date: date
    status: StudentAttendanceStatus
    marked_by: str  # user id
    marked_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "student_attendance"
        prefix = "attendance"


class AttendanceMark(BaseModel):
    """Input row for bulk marking."""
    student_id: str
    date: date
    status: StudentAttendanceStatus
    marked_by: str


class TeacherAttendance(Document):
    teacher_id: str
    date: date
    status: TeacherAttendanceStatus
    check_in_time: Optional[str] = None  # HH:MM
    check_out_time: Optional[str] = None  # HH:MM

    class Settings:
        name = "teacher_attendance"
        prefix = "teacher-attendance"


class AttendanceSummary(BaseModel):
    date: date
    present_count: int = 0
    absent_count: int = 0
    late_count: int = 0
    excused_count: int = 0
    total: int = 0


class TeacherAttendanceSummary(BaseModel):
    date: date
    present_count: int = 0
    absent_count: int = 0
    late_count: int = 0
    leave_count: int = 0
    total: int = 0
