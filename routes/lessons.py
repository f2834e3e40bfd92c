from flask import Blueprint, jsonify, g, request, current_app
from models import db
from models.lessons import Lesson
from classes.checkin_manager import CheckInManager
from classes.errors import CheckInError
from utils.helpers import format_datetime, parse_date, today
from utils.utils import login_required, roles_required

# Lessons & check-in blueprint
lesson_bp = Blueprint("lessons", __name__)


@lesson_bp.errorhandler(CheckInError)
def handle_checkin_error(error):
    return jsonify({"error": error.message}), error.status_code


def parse_student_id(value):
    """Student ids arrive as ints or numeric strings; anything else matches no one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def owns_lesson(lesson):
    """Teachers may only touch their own lessons; admins may touch any."""
    if g.user.get("role") == "admin":
        return True
    return bool(lesson.teacher and lesson.teacher.user_id == g.user.get("user_id"))

#__________________________________________________________________________________________ * Lessons *__________________________________________________

# Fetch a day's lessons
@lesson_bp.route("/lessons", methods=["GET"])
@login_required
def get_lessons():
    try:
        day = parse_date(request.args.get("date"), default=today())
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    status = request.args.get("status", "scheduled")
    lessons = CheckInManager.lessons_for_day(day, status=status or None)

    return jsonify({"date": day.isoformat(), "lessons": [lesson.to_dict() for lesson in lessons]}), 200


# Fetch lesson details
@lesson_bp.route("/lessons/<lesson_id>", methods=["GET"])
@login_required
def get_lesson(lesson_id):
    lesson = db.session.get(Lesson, lesson_id)
    if not lesson:
        return jsonify({"error": "Lesson not found"}), 404

    return jsonify(lesson.to_dict()), 200

#__________________________________________________________________________________________ * Check-in *__________________________________________________

# Teacher check-in
@lesson_bp.route("/lessons/<lesson_id>/teacher-check-in", methods=["POST"])
@login_required
@roles_required("teacher", "admin")
def teacher_check_in(lesson_id):
    lesson = db.session.get(Lesson, lesson_id)
    if not lesson:
        return jsonify({"error": "Lesson not found"}), 404
    if not owns_lesson(lesson):
        return jsonify({"error": "This lesson does not belong to you"}), 403

    checked_in_at = CheckInManager.check_in_teacher(lesson_id)
    current_app.logger.info("Teacher check-in for lesson %s by user %s", lesson_id, g.user.get("user_id"))

    return jsonify({
        "message": "Teacher checked in",
        "lesson_id": lesson_id,
        "teacher_check_in": format_datetime(checked_in_at)
    }), 200


# Teacher check-out
@lesson_bp.route("/lessons/<lesson_id>/teacher-check-out", methods=["POST"])
@login_required
@roles_required("teacher", "admin")
def teacher_check_out(lesson_id):
    lesson = db.session.get(Lesson, lesson_id)
    if not lesson:
        return jsonify({"error": "Lesson not found"}), 404
    if not owns_lesson(lesson):
        return jsonify({"error": "This lesson does not belong to you"}), 403

    data = request.get_json(silent=True) or {}
    lesson = CheckInManager.check_out_teacher(lesson_id, notes=data.get("notes"))

    return jsonify({"message": "Teacher checked out", "lesson": lesson.to_dict()}), 200


# Student check-in from the front-desk kiosk
@lesson_bp.route("/student-check-in", methods=["POST"])
def student_check_in():
    data = request.get_json(silent=True) or {}
    method = data.get("method")
    value = data.get("value")
    lesson_id = data.get("lessonId")

    if not method or not value:
        return jsonify({"error": "Method and value are required"}), 400
    if method != "studentId":
        return jsonify({"error": "Invalid authentication method"}), 400

    student_id = parse_student_id(value)
    student = CheckInManager.find_active_student(student_id) if student_id is not None else None
    if not student:
        return jsonify({"error": "Student not found or inactive"}), 404

    response = {"success": True, "student": student.to_dict()}

    # Without a lesson the kiosk only lists the day so the student can pick one
    if lesson_id:
        lesson, already_checked_in = CheckInManager.check_in_student(student, lesson_id)
        response["alreadyCheckedIn"] = already_checked_in
        response["lesson"] = lesson.to_dict()

    todays_lessons = CheckInManager.lessons_for_day(today(), student_id=student.id)
    response["todaysLessons"] = [lesson.to_kiosk_dict() for lesson in todays_lessons]

    return jsonify(response), 200
