"""Weekly timetables per class section."""

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models.timetable import PeriodCreate, TimeTable, TimeTableEntry, Weekday
from schooldesk.store import Store, new_id


def _weekday(day: Weekday | str) -> Weekday:
    try:
        return Weekday(day)
    except ValueError:
        raise ValidationError(f"Unknown day {day!r}; expected one of {', '.join(d.value for d in Weekday)}")


async def get_timetable(store: Store, class_id: str, section: str) -> TimeTable:
    """Timetable of a class section, created empty on first access."""
    timetable = await store.find_one(TimeTable, class_id=class_id, section=section)
    if not timetable:
        timetable = await store.insert(TimeTable(class_id=class_id, section=section))
    return timetable


async def add_period(store: Store, class_id: str, section: str, data: PeriodCreate) -> TimeTableEntry:
    timetable = await get_timetable(store, class_id, section)
    day = timetable.days[data.day]
    entry = TimeTableEntry(
        id=new_id("period"),
        period_number=len(day.periods) + 1,
        class_id=class_id,
        section=section,
        **data.model_dump(),
    )
    day.periods.append(entry)
    await store.save(timetable)
    return entry


async def remove_period(store: Store, class_id: str, section: str, day: Weekday | str, period_id: str) -> TimeTable:
    """Drop a period and renumber the rest of the day from 1."""
    day = _weekday(day)
    timetable = await get_timetable(store, class_id, section)
    timetable_day = timetable.days[day]
    remaining = [p for p in timetable_day.periods if p.id != period_id]
    if len(remaining) == len(timetable_day.periods):
        raise NotFound(f"Period with id {period_id} not found")
    for number, period in enumerate(remaining, start=1):
        period.period_number = number
    timetable_day.periods = remaining
    return await store.save(timetable)


async def set_holiday(store: Store, class_id: str, section: str, day: Weekday | str, is_holiday: bool) -> TimeTable:
    day = _weekday(day)
    timetable = await get_timetable(store, class_id, section)
    timetable.days[day].is_holiday = is_holiday
    return await store.save(timetable)
