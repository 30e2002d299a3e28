"""Enrollment lifecycle: enroll, promote, withdraw.

A student has at most one active enrollment. ``Student.current_enrollment_id``
points at it and is kept in step by every operation here.
"""
import logging
from datetime import date, datetime

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models.academic_year import AcademicYear
from schooldesk.models.enrollment import (
    Enrollment,
    EnrollmentCreate,
    EnrollmentDetail,
    EnrollmentStatus,
    PromotionResult,
)
from schooldesk.models.school_class import SchoolClass
from schooldesk.models.section import Section
from schooldesk.models.student import Student
from schooldesk.services.students import get_student
from schooldesk.store import Store

logger = logging.getLogger(__name__)


async def _get_enrollment(store: Store, enrollment_id: str) -> Enrollment:
    enrollment = await store.get(Enrollment, enrollment_id)
    if not enrollment:
        raise NotFound(f"Enrollment with id {enrollment_id} not found")
    return enrollment


async def _active_enrollment_of(store: Store, student_id: str) -> Enrollment | None:
    return await store.find_one(Enrollment, student_id=student_id, status=EnrollmentStatus.ACTIVE)


async def get_student_enrollments(store: Store, student_id: str) -> list[Enrollment]:
    enrollments = await store.find(Enrollment, student_id=student_id)
    return sorted(enrollments, key=lambda e: e.enrollment_date)


async def find_active_enrollments(
    store: Store, academic_year_id: str, class_id: str, section_id: str
) -> list[Enrollment]:
    """Roster of a section: active enrollments matching all three keys."""
    return await store.find(
        Enrollment,
        academic_year_id=academic_year_id,
        class_id=class_id,
        section_id=section_id,
        status=EnrollmentStatus.ACTIVE,
    )


async def get_active_enrollment(store: Store, enrollment_id: str) -> EnrollmentDetail:
    """Enrollment with its academic year, class and section joined in.

    References that no longer resolve are returned as None.
    """
    enrollment = await _get_enrollment(store, enrollment_id)
    return EnrollmentDetail(
        **enrollment.model_dump(),
        academic_year=await store.get(AcademicYear, enrollment.academic_year_id),
        school_class=await store.get(SchoolClass, enrollment.class_id),
        section=await store.get(Section, enrollment.section_id),
    )


async def enroll_student(
    store: Store,
    student_id: str,
    academic_year_id: str,
    class_id: str,
    section_id: str,
    enrollment_date: date | datetime,
) -> tuple[Enrollment, Student]:
    student = await get_student(store, student_id)
    current = await _active_enrollment_of(store, student_id)
    if current:
        raise ValidationError(
            f"Student {student_id} already has active enrollment {current.id}; promote instead"
        )

    enrollment = Enrollment(
        student_id=student_id,
        academic_year_id=academic_year_id,
        class_id=class_id,
        section_id=section_id,
        enrollment_date=enrollment_date,
    )
    async with store.transaction():
        await store.insert(enrollment)
        student.current_enrollment_id = enrollment.id
        student.updated_at = datetime.utcnow()
        await store.save(student)

    logger.info("Enrolled student %s in %s/%s/%s as %s", student_id, academic_year_id, class_id, section_id, enrollment.id)
    return enrollment, student


async def promote_student(
    store: Store,
    student_id: str,
    current_enrollment_id: str,
    new_enrollment: EnrollmentCreate | dict,
) -> PromotionResult:
    """Close the current enrollment and open one for the new placement.

    The three writes (old enrollment, new enrollment, student) are applied
    together or not at all.
    """
    if isinstance(new_enrollment, dict):
        new_enrollment = EnrollmentCreate(**new_enrollment)
    old = await _get_enrollment(store, current_enrollment_id)
    student = await get_student(store, student_id)
    if old.student_id != student_id:
        raise ValidationError(f"Enrollment {current_enrollment_id} does not belong to student {student_id}")
    if old.status != EnrollmentStatus.ACTIVE:
        raise ValidationError(f"Enrollment {current_enrollment_id} is {old.status.value}, not active")

    now = datetime.utcnow()
    old.status = EnrollmentStatus.INACTIVE
    old.withdrawal_date = now
    new = Enrollment(
        student_id=student_id,
        academic_year_id=new_enrollment.academic_year_id,
        class_id=new_enrollment.class_id,
        section_id=new_enrollment.section_id,
        enrollment_date=now,
    )

    async with store.transaction():
        await store.save(old)
        await store.insert(new)
        student.current_enrollment_id = new.id
        student.updated_at = now
        await store.save(student)

    logger.info("Promoted student %s from %s to %s", student_id, old.id, new.id)
    return PromotionResult(old_enrollment=old, new_enrollment=new, student=student)


async def change_enrollment_status(
    store: Store, enrollment_id: str, status: EnrollmentStatus
) -> Enrollment:
    """End an active enrollment as inactive, graduated or transferred."""
    status = EnrollmentStatus(status)
    enrollment = await _get_enrollment(store, enrollment_id)
    if status == EnrollmentStatus.ACTIVE:
        raise ValidationError("Enrollments are activated by enrolling or promoting a student")
    if enrollment.status != EnrollmentStatus.ACTIVE:
        raise ValidationError(
            f"Enrollment {enrollment_id} is {enrollment.status.value}; only active enrollments can change status"
        )

    enrollment.status = status
    enrollment.withdrawal_date = datetime.utcnow()
    async with store.transaction():
        await store.save(enrollment)
        student = await store.get(Student, enrollment.student_id)
        if student and student.current_enrollment_id == enrollment.id:
            student.current_enrollment_id = None
            student.updated_at = datetime.utcnow()
            await store.save(student)

    logger.info("Enrollment %s is now %s", enrollment_id, status.value)
    return enrollment
