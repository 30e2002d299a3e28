"""Calendar events as a union tagged by ``type``.

Only exams and tests carry subject, max marks and class; only meetings,
classes and tasks carry assigned teachers.
"""
from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import ConfigDict, Field, TypeAdapter

from schooldesk.models.base import Document


class EventBase(Document):
    model_config = ConfigDict(extra="forbid")

    title: str
    start: datetime
    end: datetime
    all_day: bool = False
    description: Optional[str] = None

    class Settings:
        name = "calendar_events"
        prefix = "event"


class AssessmentEvent(EventBase):
    type: Literal["exam", "test"]
    subject: str
    max_marks: float = Field(gt=0)
    class_id: str


class StaffEvent(EventBase):
    type: Literal["class", "meeting", "task"]
    assigned_teachers: list[str] = Field(default_factory=list)


class SchoolDayEvent(EventBase):
    type: Literal["holiday", "occasion"]


CalendarEvent = Annotated[
    Union[AssessmentEvent, StaffEvent, SchoolDayEvent],
    Field(discriminator="type"),
]

calendar_event_adapter = TypeAdapter(CalendarEvent)
