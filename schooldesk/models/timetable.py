from enum import Enum

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class TimeTableEntry(BaseModel):
    id: str
    day: Weekday
    period_number: int
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    subject: str
    teacher_id: str
    class_id: str
    section: str


class TimeTableDay(BaseModel):
    is_holiday: bool = False
    periods: list[TimeTableEntry] = Field(default_factory=list)


def _week() -> dict[Weekday, TimeTableDay]:
    return {
        day: TimeTableDay(is_holiday=day == Weekday.SUNDAY)
        for day in Weekday
    }


class TimeTable(Document):
    """Weekly timetable of one class section."""
    class_id: str
    section: str
    days: dict[Weekday, TimeTableDay] = Field(default_factory=_week)

    class Settings:
        name = "timetables"
        prefix = "timetable"


class PeriodCreate(BaseModel):
    day: Weekday
    start_time: str
    end_time: str
    subject: str
    teacher_id: str
