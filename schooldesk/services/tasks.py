import logging
from datetime import date, datetime
from typing import Optional

from schooldesk.errors import NotFound
from schooldesk.models.task import Task, TaskCreate, TaskStatus
from schooldesk.store import Store

logger = logging.getLogger(__name__)


async def create_task(store: Store, data: TaskCreate) -> Task:
    return await store.insert(Task(**data.model_dump()))


async def update_task_status(store: Store, task_id: str, status: TaskStatus | str) -> Task:
    task = await store.get(Task, task_id)
    if not task:
        raise NotFound(f"Task with id {task_id} not found")
    task.status = TaskStatus(status)
    task.updated_at = datetime.utcnow()
    return await store.save(task)


async def list_tasks(store: Store, status: Optional[TaskStatus | str] = None) -> list[Task]:
    tasks = await store.find(Task, status=TaskStatus(status)) if status else await store.find(Task)
    return sorted(tasks, key=lambda t: t.due_date)


async def refresh_overdue(store: Store, today: Optional[date] = None) -> list[Task]:
    """Move pending tasks whose due date has passed to overdue."""
    today = today or date.today()
    late = await store.find(Task, lambda t: t.due_date < today, status=TaskStatus.PENDING)
    now = datetime.utcnow()
    for task in late:
        task.status = TaskStatus.OVERDUE
        task.updated_at = now
        await store.save(task)
    if late:
        logger.info("%d tasks are now overdue", len(late))
    return late
