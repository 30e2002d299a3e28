"""Student records and the roster view built from enrollments."""
import re
from typing import Optional

from schooldesk.config import settings
from schooldesk.errors import NotFound, ValidationError
from schooldesk.models.enrollment import Enrollment
from schooldesk.models.school_class import SchoolClass
from schooldesk.models.section import Section
from schooldesk.models.student import Student, StudentCreate, StudentView
from schooldesk.store import Store


async def _next_enrollment_number(store: Store) -> str:
    """Next enrollment number (EN10001, EN10002, ...)."""
    prefix = settings.enrollment_number_prefix
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    existing = []
    for s in await store.find(Student):
        match = pattern.match(s.enrollment_no)
        if match:
            existing.append(int(match.group(1)))
    next_num = max(existing, default=settings.enrollment_number_start - 1) + 1
    return f"{prefix}{next_num}"


async def get_student(store: Store, student_id: str) -> Student:
    s = await store.get(Student, student_id)
    if not s:
        raise NotFound(f"Student with id {student_id} not found")
    return s


async def add_student(store: Store, data: StudentCreate) -> Student:
    enrollment_no = data.enrollment_no or await _next_enrollment_number(store)
    if await store.find_one(Student, enrollment_no=enrollment_no):
        raise ValidationError(f"Enrollment number {enrollment_no} is already in use")
    s = Student(
        name=data.name,
        enrollment_no=enrollment_no,
        guardian_name=data.guardian_name,
        guardian_number=data.guardian_number,
        address=data.address,
    )
    return await store.insert(s)


async def student_view(store: Store, s: Student) -> StudentView:
    view = StudentView(**s.model_dump(include=set(StudentView.model_fields)))
    if not s.current_enrollment_id:
        return view
    enrollment = await store.get(Enrollment, s.current_enrollment_id)
    if not enrollment:
        return view
    view.academic_year_id = enrollment.academic_year_id
    view.class_id = enrollment.class_id
    view.section_id = enrollment.section_id
    cls = await store.get(SchoolClass, enrollment.class_id)
    if cls:
        view.class_name = cls.name
    section = await store.get(Section, enrollment.section_id)
    if section:
        view.section_name = section.name
    return view


async def list_students(
    store: Store,
    class_id: Optional[str] = None,
    section_id: Optional[str] = None,
    q: Optional[str] = None,
) -> list[StudentView]:
    """Students with display fields; ``q`` searches name and enrollment number."""
    views = []
    search = q.strip().lower() if q and q.strip() else None
    for s in await store.find(Student):
        if search and search not in s.name.lower() and search not in s.enrollment_no.lower():
            continue
        view = await student_view(store, s)
        if class_id and view.class_id != class_id:
            continue
        if section_id and view.section_id != section_id:
            continue
        views.append(view)
    return views
