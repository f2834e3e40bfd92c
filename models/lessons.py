import secrets
from models import db
from sqlalchemy.orm import relationship, validates
from sqlalchemy import CheckConstraint
from sqlalchemy.dialects import mysql
from utils.helpers import format_datetime
from classes.validators import validate_length, validate_time_of_day

LESSON_STATUSES = ("scheduled", "in-progress", "completed", "cancelled", "no-show")


# MySQL DATETIME drops microseconds unless fsp is set
CheckInTimestamp = db.DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


def generate_lesson_id():
    return secrets.token_hex(12)


class Lesson(db.Model):
    __tablename__ = "lessons"

    # Opaque string key, never parsed
    id = db.Column(db.String(64), primary_key=True, default=generate_lesson_id)
    teacher_id = db.Column(db.Integer, db.ForeignKey("teachers.id"), nullable=False)
    student_id = db.Column(db.Integer, db.ForeignKey("students.id"), nullable=False)
    room_id = db.Column(db.Integer, db.ForeignKey("rooms.id"), nullable=False)
    instrument = db.Column(db.String(100), nullable=False)
    date = db.Column(db.Date, nullable=False)
    start_time = db.Column(db.String(5), nullable=False)  # "HH:MM"
    end_time = db.Column(db.String(5), nullable=False)
    duration = db.Column(db.Integer, nullable=False, default=35)
    status = db.Column(db.String(20), nullable=False, default="scheduled")

    teacher_check_in = db.Column(CheckInTimestamp, nullable=True)
    student_check_in = db.Column(CheckInTimestamp, nullable=True)
    teacher_check_out = db.Column(CheckInTimestamp, nullable=True)
    student_check_out = db.Column(CheckInTimestamp, nullable=True)
    teacher_notes = db.Column(db.String(1000), nullable=True)

    created_at = db.Column(db.DateTime, default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, default=db.func.now(), onupdate=db.func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "status IN ('scheduled', 'in-progress', 'completed', 'cancelled', 'no-show')",
            name="check_lesson_status"
        ),
        db.Index("ix_lessons_date_start_time", "date", "start_time"),
    )

    teacher = relationship("Teacher", back_populates="lessons")
    student = relationship("Student", back_populates="lessons")
    room = relationship("Room", back_populates="lessons")

    @validates("start_time", "end_time")
    def validate_times(self, key, value):
        validate_time_of_day(key, value)
        return value

    @validates("status")
    def validate_status(self, key, value):
        if value not in LESSON_STATUSES:
            raise ValueError(f"Unknown lesson status '{value}'.")
        return value

    @validates("teacher_notes")
    def validate_notes(self, key, value):
        validate_length(key, value, 1000)
        return value

    @property
    def is_teacher_checked_in(self):
        return self.teacher_check_in is not None

    def to_kiosk_dict(self):
        """Shape listed to a student at the front-desk kiosk."""
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "instrument": self.instrument,
            "teacher": self.teacher.user.full_name if self.teacher and self.teacher.user else None,
            "room": self.room.name if self.room else None,
            "checkedIn": self.student_check_in is not None,
            "checkedInAt": format_datetime(self.student_check_in),
        }

    def __repr__(self):
        return f"<Lesson {self.id} {self.date} {self.start_time}>"

    def to_dict(self):
        return {
            "id": self.id,
            "teacher_id": self.teacher_id,
            "student_id": self.student_id,
            "room_id": self.room_id,
            "teacher": self.teacher.user.full_name if self.teacher and self.teacher.user else None,
            "student": self.student.user.full_name if self.student and self.student.user else None,
            "room": self.room.name if self.room else None,
            "instrument": self.instrument,
            "date": self.date.isoformat() if self.date else None,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "duration": self.duration,
            "status": self.status,
            "teacher_check_in": format_datetime(self.teacher_check_in),
            "student_check_in": format_datetime(self.student_check_in),
            "teacher_check_out": format_datetime(self.teacher_check_out),
            "student_check_out": format_datetime(self.student_check_out),
            "teacher_notes": self.teacher_notes if self.teacher_notes is not None else "",
        }
