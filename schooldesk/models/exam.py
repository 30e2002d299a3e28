"""Exams, tests and the marks recorded against them."""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class ExamType(str, Enum):
    TEST = "test"
    EXAM = "exam"


class Exam(Document):
    title: str
    subject: str
    date: date
    total_marks: float = Field(gt=0)
    class_id: Optional[str] = None
    type: ExamType = ExamType.EXAM

    class Settings:
        name = "exams"
        prefix = "exam"


class ExamCreate(BaseModel):
    title: str
    subject: str
    date: date
    total_marks: float = Field(gt=0)
    class_id: Optional[str] = None
    type: ExamType = ExamType.EXAM


class Mark(Document):
    """Marks of one enrollment in one exam."""
    exam_id: str
    enrollment_id: str
    student_id: str
    marks_obtained: float
    feedback: Optional[str] = None

    class Settings:
        name = "marks"
        prefix = "mark"


class ExamStatistics(BaseModel):
    exam_id: str
    count: int = 0
    average: Optional[float] = None
    highest: Optional[float] = None
    lowest: Optional[float] = None
