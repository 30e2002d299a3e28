"""Exams, tests and marks."""
from typing import Optional

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models.enrollment import Enrollment
from schooldesk.models.exam import Exam, ExamCreate, ExamStatistics, Mark
from schooldesk.store import Store


async def get_exam(store: Store, exam_id: str) -> Exam:
    exam = await store.get(Exam, exam_id)
    if not exam:
        raise NotFound(f"Exam with id {exam_id} not found")
    return exam


async def create_exam(store: Store, data: ExamCreate) -> Exam:
    return await store.insert(Exam(**data.model_dump()))


async def list_exams(store: Store, class_id: Optional[str] = None) -> list[Exam]:
    exams = await store.find(Exam, class_id=class_id) if class_id else await store.find(Exam)
    return sorted(exams, key=lambda e: e.date)


async def record_mark(
    store: Store,
    exam_id: str,
    enrollment_id: str,
    marks_obtained: float,
    feedback: Optional[str] = None,
) -> Mark:
    """Store marks for one enrollment, replacing any earlier entry."""
    exam = await get_exam(store, exam_id)
    enrollment = await store.get(Enrollment, enrollment_id)
    if not enrollment:
        raise NotFound(f"Enrollment with id {enrollment_id} not found")
    if not 0 <= marks_obtained <= exam.total_marks:
        raise ValidationError(f"Marks must be between 0 and {exam.total_marks}")

    mark = await store.find_one(Mark, exam_id=exam_id, enrollment_id=enrollment_id)
    if not mark:
        mark = Mark(
            exam_id=exam_id,
            enrollment_id=enrollment_id,
            student_id=enrollment.student_id,
            marks_obtained=marks_obtained,
        )
    mark.marks_obtained = marks_obtained
    mark.feedback = feedback
    return await store.save(mark)


async def list_marks(store: Store, exam_id: str) -> list[Mark]:
    await get_exam(store, exam_id)
    return await store.find(Mark, exam_id=exam_id)


async def exam_statistics(store: Store, exam_id: str) -> ExamStatistics:
    marks = [m.marks_obtained for m in await list_marks(store, exam_id)]
    if not marks:
        return ExamStatistics(exam_id=exam_id)
    return ExamStatistics(
        exam_id=exam_id,
        count=len(marks),
        average=round(sum(marks) / len(marks), 2),
        highest=max(marks),
        lowest=min(marks),
    )
