from datetime import date
import pytest
from app import create_app
from models import db, User, Teacher, Student, Room, Lesson

PATCHED_LESSON_ID = "cmhesdfk90001fci4clu4z6dv"


@pytest.fixture
def app(tmp_path):
    # File-backed so the data survives engine disposal between sessions
    app = create_app("testing", {"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'checkin.db'}"})
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cli_runner(app):
    return app.test_cli_runner()


def make_user(email, first_name, last_name, role, password="secret123", is_active=True):
    user = User(email=email, first_name=first_name, last_name=last_name, role=role, is_active=is_active)
    user.set_password(password)
    return user


@pytest.fixture
def seed(app):
    """Two teachers, one student, and three lessons today for David Cohen."""
    admin = make_user("admin@music.school", "Admin", "User", "admin")
    david = Teacher(user=make_user("david@music.school", "David", "Cohen", "teacher"), instruments=["piano"])
    miriam = Teacher(user=make_user("miriam@music.school", "Miriam", "Levi", "teacher"), instruments=["violin"])
    tamar = Student(user=make_user("tamar@music.school", "Tamar", "Cohen", "student"))
    noa = Student(user=make_user("noa@music.school", "Noa", "Peretz", "student", is_active=False))
    room = Room(name="Room 1")

    def lesson(lesson_id, teacher, student, start, end, **kwargs):
        return Lesson(id=lesson_id, teacher=teacher, student=student, room=room, instrument="piano",
                      date=kwargs.pop("day", date.today()), start_time=start, end_time=end, **kwargs)

    lessons = [
        lesson(PATCHED_LESSON_ID, david, tamar, "10:00", "10:35"),
        lesson("lesson-noon", david, tamar, "12:00", "12:35"),
        lesson("lesson-afternoon", david, tamar, "15:00", "15:35"),
        lesson("lesson-miriam", miriam, tamar, "09:00", "09:35"),
        lesson("lesson-cancelled", david, tamar, "08:00", "08:35", status="cancelled"),
    ]
    db.session.add_all([admin, david, miriam, tamar, noa, room, *lessons])
    db.session.commit()

    return {
        "admin_id": admin.id,
        "david_id": david.id,
        "david_user_id": david.user_id,
        "miriam_id": miriam.id,
        "tamar_id": tamar.id,
        "noa_id": noa.id,
    }


@pytest.fixture
def login(client, seed):
    def do_login(email="admin@music.school", password="secret123"):
        response = client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return response
    return do_login
