import sys
from app import app as default_app
from classes.checkin_manager import CheckInManager
from utils.db_session import maintenance_session
from utils.helpers import format_datetime

# The lesson whose teacher arrived without checking in
DEFAULT_LESSON_ID = "cmhesdfk90001fci4clu4z6dv"


def patch_teacher_check_in(lesson_id=DEFAULT_LESSON_ID, app=None):
    with maintenance_session(app or default_app):
        checked_in_at = CheckInManager.check_in_teacher(lesson_id)
        print(f"✅ Teacher checked in to lesson {lesson_id} at {format_datetime(checked_in_at)}")
    return checked_in_at

if __name__ == "__main__":
    patch_teacher_check_in(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_LESSON_ID)
