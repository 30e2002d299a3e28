"""Pydantic record models and input schemas."""
from schooldesk.models.base import Document
from schooldesk.models.academic_year import AcademicYear, AcademicYearCreate, AcademicYearStatus, AcademicYearUpdate
from schooldesk.models.school_class import SchoolClass, SchoolClassCreate, SchoolClassUpdate
from schooldesk.models.section import Section, SectionCreate, SectionUpdate
from schooldesk.models.student import Student, StudentCreate, StudentView
from schooldesk.models.enrollment import Enrollment, EnrollmentCreate, EnrollmentDetail, EnrollmentStatus, PromotionResult
from schooldesk.models.teacher import Teacher, TeacherCreate
from schooldesk.models.attendance import (
    AttendanceMark,
    AttendanceSummary,
    StudentAttendance,
    StudentAttendanceStatus,
    TeacherAttendance,
    TeacherAttendanceStatus,
    TeacherAttendanceSummary,
)
from schooldesk.models.fee import Fee, FeeCreate, FeeStatus, FeeTotals
from schooldesk.models.task import Task, TaskCreate, TaskPriority, TaskStatus
from schooldesk.models.exam import Exam, ExamCreate, ExamStatistics, ExamType, Mark
from schooldesk.models.calendar_event import AssessmentEvent, CalendarEvent, EventBase, SchoolDayEvent, StaffEvent
from schooldesk.models.timetable import PeriodCreate, TimeTable, TimeTableDay, TimeTableEntry, Weekday

__all__ = [
    "Document",
    "AcademicYear",
    "AcademicYearCreate",
    "AcademicYearStatus",
    "AcademicYearUpdate",
    "SchoolClass",
    "SchoolClassCreate",
    "SchoolClassUpdate",
    "Section",
    "SectionCreate",
    "SectionUpdate",
    "Student",
    "StudentCreate",
    "StudentView",
    "Enrollment",
    "EnrollmentCreate",
    "EnrollmentDetail",
    "EnrollmentStatus",
    "PromotionResult",
    "Teacher",
    "TeacherCreate",
    "AttendanceMark",
    "AttendanceSummary",
    "StudentAttendance",
    "StudentAttendanceStatus",
    "TeacherAttendance",
    "TeacherAttendanceStatus",
    "TeacherAttendanceSummary",
    "Fee",
    "FeeCreate",
    "FeeStatus",
    "FeeTotals",
    "Task",
    "TaskCreate",
    "TaskPriority",
    "TaskStatus",
    "Exam",
    "ExamCreate",
    "ExamStatistics",
    "ExamType",
    "Mark",
    "AssessmentEvent",
    "CalendarEvent",
    "EventBase",
    "SchoolDayEvent",
    "StaffEvent",
    "PeriodCreate",
    "TimeTable",
    "TimeTableDay",
    "TimeTableEntry",
    "Weekday",
]
