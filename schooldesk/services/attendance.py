"""Attendance marking for students and teachers, and daily summaries."""
import logging
from datetime import date, datetime
from typing import Optional

from schooldesk.errors import ValidationError
from schooldesk.models.attendance import (
    AttendanceMark,
    AttendanceSummary,
    StudentAttendance,
    StudentAttendanceStatus,
    TeacherAttendance,
    TeacherAttendanceStatus,
    TeacherAttendanceSummary,
)
from schooldesk.models.enrollment import Enrollment
from schooldesk.models.student import Student
from schooldesk.services.students import get_student
from schooldesk.services.teachers import get_teacher
from schooldesk.store import Store

logger = logging.getLogger(__name__)


def _as_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


async def _refresh_attendance_percentage(store: Store, student: Student) -> Student:
    """Present and late days over all marked days; excused days are left out."""
    records = await store.find(StudentAttendance, student_id=student.id)
    counted = [r for r in records if r.status != StudentAttendanceStatus.EXCUSED]
    attended = [
        r for r in counted
        if r.status in (StudentAttendanceStatus.PRESENT, StudentAttendanceStatus.LATE)
    ]
    student.attendance_percentage = round(len(attended) / len(counted) * 100, 1) if counted else 0.0
    student.updated_at = datetime.utcnow()
    return await store.save(student)


async def _enrollment_on(store: Store, student: Student, day: date) -> Optional[str]:
    """Id of the enrollment the student was in on ``day``.

    Falls back to the current enrollment when no enrollment window covers the day.
    """
    enrollments = await store.find(
        Enrollment,
        lambda e: e.enrollment_date.date() <= day
        and (e.withdrawal_date is None or day <= e.withdrawal_date.date()),
        student_id=student.id,
    )
    if not enrollments:
        return student.current_enrollment_id
    # promotion day is covered by both the closed and the new enrollment
    return max(enrollments, key=lambda e: e.enrollment_date).id


async def _upsert_student_status(
    store: Store,
    student_id: str,
    day: date,
    status: StudentAttendanceStatus,
    marked_by: str,
) -> StudentAttendance:
    student = await get_student(store, student_id)
    record = await store.find_one(StudentAttendance, student_id=student_id, date=day)
    if not record:
        record = StudentAttendance(
            student_id=student_id,
            enrollment_id=await _enrollment_on(store, student, day),
            date=day,
            status=status,
            marked_by=marked_by,
        )
    else:
        # a corrected mark stays with the enrollment it was first recorded under
        record.status = status
        record.marked_by = marked_by
        record.marked_at = datetime.utcnow()
    await store.save(record)
    await _refresh_attendance_percentage(store, student)
    logger.debug("Marked %s %s on %s", student_id, status.value, day)
    return record


async def mark_status(
    store: Store,
    student_id: str,
    day: date | str,
    status: StudentAttendanceStatus | str,
    marked_by: str,
) -> StudentAttendance:
    """Record a student's status for a day, replacing any earlier mark."""
    async with store.transaction():
        return await _upsert_student_status(
            store, student_id, _as_date(day), StudentAttendanceStatus(status), marked_by
        )


async def mark_attendance(
    store: Store, records: list[AttendanceMark | dict]
) -> list[StudentAttendance]:
    """Bulk mark; either every row is stored or none is."""
    marks = [r if isinstance(r, AttendanceMark) else AttendanceMark(**r) for r in records]
    saved = []
    async with store.transaction():
        for mark in marks:
            saved.append(
                await _upsert_student_status(store, mark.student_id, mark.date, mark.status, mark.marked_by)
            )
    logger.info("Attendance marked for %d students", len(saved))
    return saved


async def fetch_attendance(
    store: Store, student_id: str, start: date | str, end: date | str
) -> list[StudentAttendance]:
    d_from = _as_date(start)
    d_to = _as_date(end)
    records = await store.find(
        StudentAttendance,
        lambda r: d_from <= r.date <= d_to,
        student_id=student_id,
    )
    return sorted(records, key=lambda r: r.date)


async def summarize(
    store: Store,
    day: date | str,
    class_id: Optional[str] = None,
    section_id: Optional[str] = None,
) -> AttendanceSummary:
    """Count a day's marks by status, optionally for one class or section.

    The scope is taken from the enrollment each mark was made under.
    """
    d = _as_date(day)
    records = await store.find(StudentAttendance, date=d)
    summary = AttendanceSummary(date=d)
    for r in records:
        if class_id or section_id:
            enrollment = await store.get(Enrollment, r.enrollment_id) if r.enrollment_id else None
            if not enrollment:
                continue
            if class_id and enrollment.class_id != class_id:
                continue
            if section_id and enrollment.section_id != section_id:
                continue
        if r.status == StudentAttendanceStatus.PRESENT:
            summary.present_count += 1
        elif r.status == StudentAttendanceStatus.ABSENT:
            summary.absent_count += 1
        elif r.status == StudentAttendanceStatus.LATE:
            summary.late_count += 1
        else:
            summary.excused_count += 1
    summary.total = (
        summary.present_count + summary.absent_count + summary.late_count + summary.excused_count
    )
    return summary


def attendance_percentages(summary: AttendanceSummary) -> dict[str, float]:
    """Share of each status in percent; all zero when nothing was marked."""
    counts = {
        "present": summary.present_count,
        "absent": summary.absent_count,
        "late": summary.late_count,
        "excused": summary.excused_count,
    }
    if summary.total == 0:
        return {key: 0.0 for key in counts}
    return {key: round(count / summary.total * 100, 1) for key, count in counts.items()}


async def mark_teacher_status(
    store: Store,
    teacher_id: str,
    day: date | str,
    status: TeacherAttendanceStatus | str,
    now: Optional[datetime] = None,
) -> TeacherAttendance:
    """Record a teacher's status; non-absent marks check the teacher in."""
    await get_teacher(store, teacher_id)
    d = _as_date(day)
    status = TeacherAttendanceStatus(status)
    now = now or datetime.now()

    record = await store.find_one(TeacherAttendance, teacher_id=teacher_id, date=d)
    if not record:
        record = TeacherAttendance(teacher_id=teacher_id, date=d, status=status)
    record.status = status
    record.check_in_time = now.strftime("%H:%M") if status != TeacherAttendanceStatus.ABSENT else None
    record.check_out_time = None
    await store.save(record)
    logger.debug("Marked teacher %s %s on %s", teacher_id, status.value, d)
    return record


async def check_out(
    store: Store,
    teacher_id: str,
    today: Optional[date] = None,
    now: Optional[datetime] = None,
) -> Optional[TeacherAttendance]:
    """Stamp the check-out time on today's record.

    Returns None without raising when the teacher has no record for today or
    was marked absent.
    """
    now = now or datetime.now()
    today = today or now.date()
    record = await store.find_one(TeacherAttendance, teacher_id=teacher_id, date=today)
    if not record:
        logger.warning("No attendance for teacher %s on %s; nothing to check out", teacher_id, today)
        return None
    if record.status == TeacherAttendanceStatus.ABSENT:
        return None
    record.check_out_time = now.strftime("%H:%M")
    return await store.save(record)


async def fetch_teacher_attendance(store: Store, day: date | str) -> list[TeacherAttendance]:
    return await store.find(TeacherAttendance, date=_as_date(day))


async def summarize_teachers(store: Store, day: date | str) -> TeacherAttendanceSummary:
    d = _as_date(day)
    summary = TeacherAttendanceSummary(date=d)
    for r in await store.find(TeacherAttendance, date=d):
        field = f"{r.status.value}_count"
        setattr(summary, field, getattr(summary, field) + 1)
        summary.total += 1
    return summary
