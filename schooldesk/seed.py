"""Seed the demo school used by the admin console."""
import logging
from datetime import date, datetime

from schooldesk.models import (
    AcademicYear,
    AcademicYearStatus,
    AssessmentEvent,
    Enrollment,
    Fee,
    FeeStatus,
    SchoolClass,
    SchoolDayEvent,
    Section,
    StaffEvent,
    Student,
    StudentAttendance,
    Task,
    TaskPriority,
    TaskStatus,
    Teacher,
    TeacherAttendance,
)
from schooldesk.store import Store

logger = logging.getLogger(__name__)

ACADEMIC_YEARS = [
    AcademicYear(id="ay-1", name="2023-2024", start_date=date(2023, 9, 1), end_date=date(2024, 6, 30), status=AcademicYearStatus.ACTIVE),
    AcademicYear(id="ay-2", name="2024-2025", start_date=date(2024, 9, 1), end_date=date(2025, 6, 30)),
    AcademicYear(id="ay-3", name="2025-2026", start_date=date(2025, 9, 1), end_date=date(2026, 6, 30)),
]

CLASSES = [
    SchoolClass(id="class1", name="Grade 10", level=10, teacher_id="teacher1"),
    SchoolClass(id="class2", name="Grade 9", level=9, teacher_id="teacher2"),
    SchoolClass(id="class3", name="Grade 8", level=8, teacher_id="teacher3"),
]

SECTIONS = [
    Section(id="section-1", name="A", academic_year_id="ay-1", class_id="class1", homeroom_teacher_id="teacher1"),
    Section(id="section-2", name="B", academic_year_id="ay-1", class_id="class1", homeroom_teacher_id="teacher2"),
    Section(id="section-3", name="A", academic_year_id="ay-1", class_id="class2", homeroom_teacher_id="teacher3"),
    Section(id="section-4", name="A", academic_year_id="ay-2", class_id="class1", homeroom_teacher_id="teacher1"),
]

TEACHERS = [
    Teacher(
        id="teacher1",
        name="Michael Brown",
        email="michael.brown@school.edu",
        subject="Mathematics",
        qualifications=["M.Sc. Mathematics", "B.Ed"],
        classes=["class1", "class2"],
    ),
    Teacher(
        id="teacher2",
        name="Emily Davis",
        email="emily.davis@school.edu",
        subject="Science",
        qualifications=["Ph.D. Physics", "M.Ed"],
        classes=["class1", "class3"],
    ),
    Teacher(
        id="teacher3",
        name="Robert Wilson",
        email="robert.wilson@school.edu",
        subject="English",
        qualifications=["M.A. English Literature", "B.Ed"],
        classes=["class2", "class3"],
    ),
]

STUDENTS = [
    Student(id="student1", name="Alex Wong", enrollment_no="EN10001", attendance_percentage=92, current_enrollment_id="enrollment-1"),
    Student(id="student2", name="Sophia Martinez", enrollment_no="EN10002", attendance_percentage=88, current_enrollment_id="enrollment-2"),
    Student(id="student3", name="Ethan Johnson", enrollment_no="EN10003", attendance_percentage=95, current_enrollment_id="enrollment-3"),
    Student(id="student4", name="Olivia Brown", enrollment_no="EN10004", attendance_percentage=90),
    Student(id="student5", name="Noah Wilson", enrollment_no="EN10005", attendance_percentage=85),
    Student(id="student6", name="Emma Taylor", enrollment_no="EN10006", attendance_percentage=97),
]

ENROLLMENTS = [
    Enrollment(id="enrollment-1", student_id="student1", academic_year_id="ay-1", class_id="class1", section_id="section-1", enrollment_date="2023-09-01"),
    Enrollment(id="enrollment-2", student_id="student2", academic_year_id="ay-1", class_id="class1", section_id="section-1", enrollment_date="2023-09-01"),
    Enrollment(id="enrollment-3", student_id="student3", academic_year_id="ay-1", class_id="class1", section_id="section-2", enrollment_date="2023-09-01"),
]

_MARKED_AT = datetime(2025, 4, 8, 8, 45)

STUDENT_ATTENDANCE = [
    StudentAttendance(id="sa1", student_id="student1", enrollment_id="enrollment-1", date=date(2025, 4, 8), status="present", marked_by="teacher1", marked_at=_MARKED_AT),
    StudentAttendance(id="sa2", student_id="student2", enrollment_id="enrollment-2", date=date(2025, 4, 8), status="absent", marked_by="teacher1", marked_at=_MARKED_AT),
    StudentAttendance(id="sa3", student_id="student3", enrollment_id="enrollment-3", date=date(2025, 4, 8), status="present", marked_by="teacher1", marked_at=_MARKED_AT),
]

TEACHER_ATTENDANCE = [
    TeacherAttendance(id="ta1", teacher_id="teacher1", date=date(2025, 4, 8), status="present", check_in_time="08:30", check_out_time="16:30"),
    TeacherAttendance(id="ta2", teacher_id="teacher2", date=date(2025, 4, 8), status="present", check_in_time="08:15", check_out_time="16:45"),
    TeacherAttendance(id="ta3", teacher_id="teacher3", date=date(2025, 4, 8), status="absent"),
    TeacherAttendance(id="ta4", teacher_id="teacher1", date=date(2025, 4, 7), status="present", check_in_time="08:20", check_out_time="16:30"),
    TeacherAttendance(id="ta5", teacher_id="teacher2", date=date(2025, 4, 7), status="late", check_in_time="09:10", check_out_time="16:30"),
]

FEES = [
    Fee(id="fee-1", student_id="student1", amount=5000, due_date=date(2025, 5, 1), status=FeeStatus.PAID, paid_amount=5000, pending_amount=0, paid_date=datetime(2025, 4, 5), description="Tuition Fee - May 2025"),
    Fee(id="fee-2", student_id="student2", amount=5000, due_date=date(2025, 5, 1), pending_amount=5000, description="Tuition Fee - May 2025"),
    Fee(id="fee-3", student_id="student3", amount=5000, due_date=date(2025, 5, 1), status=FeeStatus.PARTIAL, paid_amount=2500, pending_amount=2500, paid_date=datetime(2025, 4, 7), description="Tuition Fee - May 2025"),
]

TASKS = [
    Task(id="task1", title="Prepare Final Exams", description="Create final exam papers for Grade 10 Mathematics", due_date=date(2025, 4, 20), assigned_by="admin1", assigned_to=["teacher1"], priority=TaskPriority.HIGH),
    Task(id="task2", title="Science Lab Equipment Check", description="Inventory and check all science lab equipment", due_date=date(2025, 4, 15), assigned_by="admin1", assigned_to=["teacher2"]),
    Task(id="task3", title="Submit Grade Reports", description="Submit all student grade reports for mid-term evaluation", due_date=date(2025, 4, 12), assigned_by="admin1", assigned_to=["teacher1", "teacher2", "teacher3"], status=TaskStatus.COMPLETED, priority=TaskPriority.HIGH),
]

EVENTS = [
    AssessmentEvent(id="event1", type="exam", title="Mathematics Final Exam", start=datetime(2025, 4, 22, 9), end=datetime(2025, 4, 22, 12), subject="Mathematics", max_marks=100, class_id="class1"),
    StaffEvent(id="event2", type="meeting", title="Staff Meeting", start=datetime(2025, 4, 10, 15), end=datetime(2025, 4, 10, 16), assigned_teachers=["teacher1", "teacher2", "teacher3"]),
    SchoolDayEvent(id="event3", type="holiday", title="Spring Break", start=datetime(2025, 4, 14), end=datetime(2025, 4, 18, 23, 59), all_day=True),
]


async def seed_store(store: Store) -> None:
    """Load the demo dataset into an empty store."""
    if await store.count(Student):
        return
    for group in (
        ACADEMIC_YEARS,
        CLASSES,
        SECTIONS,
        TEACHERS,
        STUDENTS,
        ENROLLMENTS,
        STUDENT_ATTENDANCE,
        TEACHER_ATTENDANCE,
        FEES,
        TASKS,
        EVENTS,
    ):
        await store.insert_many([doc.model_copy(deep=True) for doc in group])
    logger.info("Seeded demo data: %d students, %d teachers", len(STUDENTS), len(TEACHERS))
