from schooldesk.errors import NotFound
from schooldesk.models.teacher import Teacher, TeacherCreate
from schooldesk.store import Store


async def fetch_teachers(store: Store) -> list[Teacher]:
    return await store.find(Teacher)


async def get_teacher(store: Store, teacher_id: str) -> Teacher:
    teacher = await store.get(Teacher, teacher_id)
    if not teacher:
        raise NotFound(f"Teacher with id {teacher_id} not found")
    return teacher


async def add_teacher(store: Store, data: TeacherCreate) -> Teacher:
    return await store.insert(Teacher(**data.model_dump()))
