"""
Unit tests for tasks, exams, calendar events and timetables
"""

import unittest
from datetime import date, datetime

import pydantic

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models import AssessmentEvent, ExamCreate, PeriodCreate, SchoolDayEvent, TaskCreate, TaskStatus, TimeTable, Weekday
from schooldesk.seed import seed_store
from schooldesk.services import calendar, exams, tasks, timetable
from schooldesk.store import Store


class TestTasks(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = Store()
        await seed_store(self.store)

    async def test_create_task(self):
        task = await tasks.create_task(self.store, TaskCreate(
            title="Sports day plan", due_date="2025-05-02", assigned_by="admin1", assigned_to=["teacher3"],
        ))
        self.assertEqual(task.status, TaskStatus.PENDING)
        self.assertEqual(len(await tasks.list_tasks(self.store, status="pending")), 3)

    async def test_refresh_overdue(self):
        late = await tasks.refresh_overdue(self.store, today=date(2025, 4, 16))
        self.assertEqual([t.id for t in late], ["task2"])
        overdue = await tasks.list_tasks(self.store, status=TaskStatus.OVERDUE)
        self.assertEqual([t.id for t in overdue], ["task2"])
        completed = await tasks.list_tasks(self.store, status="completed")
        self.assertEqual([t.id for t in completed], ["task3"])

    async def test_update_task_status(self):
        task = await tasks.update_task_status(self.store, "task1", "completed")
        self.assertEqual(task.status, TaskStatus.COMPLETED)
        with self.assertRaises(NotFound):
            await tasks.update_task_status(self.store, "task404", "completed")


class TestExams(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = Store()
        await seed_store(self.store)
        self.exam = await exams.create_exam(self.store, ExamCreate(
            title="Unit Test 1", subject="Mathematics", date="2025-04-22", total_marks=100,
            class_id="class1", type="test",
        ))

    async def test_record_marks_and_statistics(self):
        await exams.record_mark(self.store, self.exam.id, "enrollment-1", 85, "Good work")
        await exams.record_mark(self.store, self.exam.id, "enrollment-2", 70)
        stats = await exams.exam_statistics(self.store, self.exam.id)
        self.assertEqual(stats.count, 2)
        self.assertEqual(stats.average, 77.5)
        self.assertEqual(stats.highest, 85)
        self.assertEqual(stats.lowest, 70)

    async def test_record_mark_replaces(self):
        await exams.record_mark(self.store, self.exam.id, "enrollment-1", 85)
        mark = await exams.record_mark(self.store, self.exam.id, "enrollment-1", 90)
        marks = await exams.list_marks(self.store, self.exam.id)
        self.assertEqual(len(marks), 1)
        self.assertEqual(mark.marks_obtained, 90)
        self.assertEqual(mark.student_id, "student1")

    async def test_record_mark_out_of_range(self):
        with self.assertRaises(ValidationError):
            await exams.record_mark(self.store, self.exam.id, "enrollment-1", 120)
        with self.assertRaises(ValidationError):
            await exams.record_mark(self.store, self.exam.id, "enrollment-1", -1)
        with self.assertRaises(NotFound):
            await exams.record_mark(self.store, self.exam.id, "enrollment-404", 50)

    async def test_statistics_without_marks(self):
        stats = await exams.exam_statistics(self.store, self.exam.id)
        self.assertEqual(stats.count, 0)
        self.assertIsNone(stats.average)
        with self.assertRaises(NotFound):
            await exams.exam_statistics(self.store, "exam-404")

    async def test_list_exams_by_class(self):
        self.assertEqual([e.id for e in await exams.list_exams(self.store, class_id="class1")], [self.exam.id])
        self.assertEqual(await exams.list_exams(self.store, class_id="class2"), [])


class TestCalendar(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = Store()
        await seed_store(self.store)

    async def test_create_assessment_event(self):
        event = await calendar.create_event(self.store, {
            "type": "test", "title": "Physics Quiz", "start": "2025-04-24T10:00:00",
            "end": "2025-04-24T11:00:00", "subject": "Physics", "max_marks": 20, "class_id": "class1",
        })
        self.assertIsInstance(event, AssessmentEvent)
        self.assertTrue(event.id.startswith("event-"))

    async def test_assessment_fields_required(self):
        with self.assertRaises(pydantic.ValidationError):
            await calendar.create_event(self.store, {
                "type": "exam", "title": "Final", "start": "2025-04-24T10:00:00", "end": "2025-04-24T12:00:00",
            })

    async def test_holiday_rejects_assessment_fields(self):
        with self.assertRaises(pydantic.ValidationError):
            await calendar.create_event(self.store, {
                "type": "holiday", "title": "Founders Day", "start": "2025-05-01T00:00:00",
                "end": "2025-05-01T23:59:00", "max_marks": 10,
            })

    async def test_end_before_start(self):
        with self.assertRaises(ValidationError):
            await calendar.create_event(self.store, {
                "type": "meeting", "title": "PTA", "start": "2025-05-01T10:00:00", "end": "2025-05-01T09:00:00",
            })

    async def test_list_events(self):
        holidays = await calendar.list_events(self.store, event_type="holiday")
        self.assertEqual([e.id for e in holidays], ["event3"])
        self.assertIsInstance(holidays[0], SchoolDayEvent)
        later = await calendar.list_events(self.store, start=datetime(2025, 4, 21))
        self.assertEqual([e.id for e in later], ["event1"])
        window = await calendar.list_events(self.store, start=datetime(2025, 4, 10), end=datetime(2025, 4, 15))
        self.assertEqual([e.id for e in window], ["event2", "event3"])

    async def test_delete_event(self):
        await calendar.delete_event(self.store, "event2")
        self.assertEqual(len(await calendar.list_events(self.store)), 2)
        with self.assertRaises(NotFound):
            await calendar.delete_event(self.store, "event2")


class TestTimetable(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = Store()

    def period(self, subject, start, end):
        return PeriodCreate(day="monday", start_time=start, end_time=end, subject=subject, teacher_id="teacher1")

    async def test_new_timetable_has_every_day(self):
        tt = await timetable.get_timetable(self.store, "class1", "A")
        self.assertEqual(len(tt.days), 7)
        self.assertTrue(tt.days[Weekday.SUNDAY].is_holiday)
        self.assertFalse(tt.days[Weekday.MONDAY].is_holiday)
        again = await timetable.get_timetable(self.store, "class1", "A")
        self.assertEqual(again.id, tt.id)

    async def test_add_and_remove_periods(self):
        first = await timetable.add_period(self.store, "class1", "A", self.period("Mathematics", "08:00", "08:45"))
        second = await timetable.add_period(self.store, "class1", "A", self.period("Science", "08:45", "09:30"))
        self.assertEqual((first.period_number, second.period_number), (1, 2))

        tt = await timetable.remove_period(self.store, "class1", "A", "monday", first.id)
        periods = tt.days[Weekday.MONDAY].periods
        self.assertEqual([p.subject for p in periods], ["Science"])
        self.assertEqual(periods[0].period_number, 1)
        with self.assertRaises(NotFound):
            await timetable.remove_period(self.store, "class1", "A", "monday", first.id)

    async def test_set_holiday(self):
        tt = await timetable.set_holiday(self.store, "class1", "A", "saturday", True)
        self.assertTrue(tt.days[Weekday.SATURDAY].is_holiday)
        stored = await timetable.get_timetable(self.store, "class1", "A")
        self.assertTrue(stored.days[Weekday.SATURDAY].is_holiday)

    async def test_unknown_day_rejected(self):
        with self.assertRaises(ValidationError):
            await timetable.set_holiday(self.store, "class1", "A", "funday", True)
        with self.assertRaises(ValidationError):
            await timetable.remove_period(self.store, "class1", "A", "Monday", "period-1")
        self.assertEqual(await self.store.count(TimeTable), 0)


if __name__ == '__main__':
    unittest.main()
