from datetime import datetime
import bleach
from models import db
from models.users import User
from models.teachers import Teacher
from models.students import Student
from models.lessons import Lesson
from classes.errors import LessonNotFoundError, LessonOwnershipError, NotCheckedInError
from utils.helpers import format_hhmm

NOTES_ALLOWED_TAGS = ["b", "i", "u", "strong", "em", "br"]


class CheckInManager:
    @staticmethod
    def check_in_teacher(lesson_id, when=None):
        """
        Set the teacher check-in timestamp on one lesson.

        The timestamp is overwritten even if the lesson was already checked
        in. Raises LessonNotFoundError when no row has `lesson_id`; errors
        from the database are left to propagate.
        """
        when = when or datetime.now()
        updated = Lesson.query.filter_by(id=lesson_id).update({Lesson.teacher_check_in: when})
        if not updated:
            raise LessonNotFoundError(lesson_id)
        db.session.commit()
        return when

    @staticmethod
    def lessons_for_day(day, status="scheduled", teacher_id=None, student_id=None):
        query = Lesson.query.filter(Lesson.date == day)
        if status:
            query = query.filter(Lesson.status == status)
        if teacher_id is not None:
            query = query.filter(Lesson.teacher_id == teacher_id)
        if student_id is not None:
            query = query.filter(Lesson.student_id == student_id)
        return query.order_by(Lesson.start_time.asc()).all()

    @staticmethod
    def next_unchecked_lesson(day):
        """First scheduled lesson of `day` the teacher has not checked in to."""
        return Lesson.query.filter(
            Lesson.date == day,
            Lesson.status == "scheduled",
            Lesson.teacher_check_in.is_(None)
        ).order_by(Lesson.start_time.asc()).first()

    @staticmethod
    def find_teacher_by_name(first_name, last_name):
        return Teacher.query.join(User).filter(
            User.first_name == first_name,
            User.last_name == last_name
        ).first()

    @staticmethod
    def check_in_remaining(teacher, now=None):
        """Check `teacher` in to every scheduled lesson of today that has not started yet."""
        now = now or datetime.now()
        lessons = Lesson.query.filter(
            Lesson.teacher_id == teacher.id,
            Lesson.date == now.date(),
            Lesson.status == "scheduled",
            Lesson.start_time >= format_hhmm(now)
        ).order_by(Lesson.start_time.asc()).all()

        for lesson in lessons:
            lesson.teacher_check_in = now
        db.session.commit()
        return lessons

    @staticmethod
    def find_active_student(student_id):
        student = db.session.get(Student, student_id)
        if not student or not student.is_active:
            return None
        return student

    @staticmethod
    def check_in_student(student, lesson_id, when=None):
        """
        Record the student's arrival. Returns (lesson, already_checked_in);
        an existing check-in is left untouched.
        """
        lesson = db.session.get(Lesson, lesson_id)
        if not lesson:
            raise LessonNotFoundError(lesson_id)
        if lesson.student_id != student.id:
            raise LessonOwnershipError()
        if lesson.student_check_in:
            return lesson, True

        lesson.student_check_in = when or datetime.now()
        db.session.commit()
        return lesson, False

    @staticmethod
    def check_out_teacher(lesson_id, notes=None, when=None):
        lesson = db.session.get(Lesson, lesson_id)
        if not lesson:
            raise LessonNotFoundError(lesson_id)
        if not lesson.is_teacher_checked_in:
            raise NotCheckedInError()

        lesson.teacher_check_out = when or datetime.now()
        if notes is not None:
            lesson.teacher_notes = bleach.clean(notes, tags=NOTES_ALLOWED_TAGS, strip=True)
        db.session.commit()
        return lesson
