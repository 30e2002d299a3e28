"""School calendar: classes, exams, meetings, holidays and occasions."""
from datetime import datetime
from typing import Optional

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models.calendar_event import CalendarEvent, EventBase, calendar_event_adapter
from schooldesk.store import Store


async def create_event(store: Store, data: dict) -> CalendarEvent:
    """Validate ``data`` against the event variant named by its ``type`` and store it."""
    event = calendar_event_adapter.validate_python(data)
    if event.end < event.start:
        raise ValidationError("Event end must not precede its start")
    return await store.insert(event)


async def list_events(
    store: Store,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    event_type: Optional[str] = None,
) -> list[CalendarEvent]:
    """Events overlapping [start, end], optionally of one type, in start order."""
    predicates = []
    if start:
        predicates.append(lambda e: e.end >= start)
    if end:
        predicates.append(lambda e: e.start <= end)
    if event_type:
        predicates.append(lambda e: e.type == event_type)
    events = await store.find(EventBase, *predicates)
    return sorted(events, key=lambda e: e.start)


async def delete_event(store: Store, event_id: str) -> None:
    if not await store.delete(EventBase, event_id):
        raise NotFound(f"Event with id {event_id} not found")
