from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from schooldesk.models.base import Document


class Teacher(Document):
    name: str
    email: EmailStr
    subject: str
    qualifications: list[str] = Field(default_factory=list)
    classes: list[str] = Field(default_factory=list)  # class ids taught
    phone_number: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "teachers"
        prefix = "teacher"


class TeacherCreate(BaseModel):
    name: str
    email: EmailStr
    subject: str
    qualifications: list[str] = Field(default_factory=list)
    classes: list[str] = Field(default_factory=list)
    phone_number: Optional[str] = None
    address: Optional[str] = None
