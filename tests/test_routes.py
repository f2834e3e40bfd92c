"""
Tests for the authentication and lesson check-in endpoints.
"""
from datetime import date
from models import db
from models.lessons import Lesson
from tests.conftest import PATCHED_LESSON_ID


class TestAuthentication:
    def test_login_sets_cookie(self, client, seed):
        response = client.post("/api/auth/login", json={"email": "admin@music.school", "password": "secret123"})

        assert response.status_code == 200
        assert response.get_json()["user"]["role"] == "admin"
        assert "access_token=" in response.headers["Set-Cookie"]

    def test_wrong_password(self, client, seed):
        response = client.post("/api/auth/login", json={"email": "admin@music.school", "password": "nope"})

        assert response.status_code == 401

    def test_missing_fields(self, client, seed):
        assert client.post("/api/auth/login", json={}).status_code == 400

    def test_inactive_account(self, client, seed):
        response = client.post("/api/auth/login", json={"email": "noa@music.school", "password": "secret123"})

        assert response.status_code == 403

    def test_me(self, client, login):
        login()
        response = client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.get_json()["user"]["email"] == "admin@music.school"

    def test_logout_clears_cookie(self, client, login):
        login()
        client.post("/api/auth/logout")

        assert client.get("/api/auth/me").status_code == 401

    def test_garbage_token_rejected(self, client, seed):
        client.set_cookie("access_token", "not-a-jwt")

        assert client.get("/api/auth/me").status_code == 401


class TestLessonRoutes:
    def test_requires_login(self, client, seed):
        assert client.get("/api/lessons").status_code == 401

    def test_list_today(self, client, login):
        login()
        response = client.get("/api/lessons")
        data = response.get_json()

        assert response.status_code == 200
        assert data["date"] == date.today().isoformat()
        assert [lesson["start_time"] for lesson in data["lessons"]] == ["09:00", "10:00", "12:00", "15:00"]

    def test_bad_date(self, client, login):
        login()

        assert client.get("/api/lessons?date=18-10-2026").status_code == 400

    def test_lesson_detail(self, client, login):
        login()
        response = client.get(f"/api/lessons/{PATCHED_LESSON_ID}")

        assert response.status_code == 200
        assert response.get_json()["id"] == PATCHED_LESSON_ID

    def test_lesson_detail_not_found(self, client, login):
        login()

        assert client.get("/api/lessons/missing").status_code == 404


class TestTeacherCheckInRoute:
    def test_teacher_checks_in_own_lesson(self, client, login):
        login("david@music.school")
        response = client.post(f"/api/lessons/{PATCHED_LESSON_ID}/teacher-check-in")

        assert response.status_code == 200
        assert response.get_json()["teacher_check_in"] is not None
        db.session.expire_all()
        assert db.session.get(Lesson, PATCHED_LESSON_ID).teacher_check_in is not None

    def test_teacher_cannot_check_in_to_others_lesson(self, client, login):
        login("miriam@music.school")
        response = client.post(f"/api/lessons/{PATCHED_LESSON_ID}/teacher-check-in")

        assert response.status_code == 403

    def test_student_forbidden(self, client, login):
        login("tamar@music.school")

        assert client.post(f"/api/lessons/{PATCHED_LESSON_ID}/teacher-check-in").status_code == 403

    def test_admin_unknown_lesson(self, client, login):
        login()

        assert client.post("/api/lessons/missing/teacher-check-in").status_code == 404

    def test_check_out_before_check_in_conflicts(self, client, login):
        login("david@music.school")
        response = client.post(f"/api/lessons/{PATCHED_LESSON_ID}/teacher-check-out", json={"notes": "x"})

        assert response.status_code == 409
        assert "error" in response.get_json()

    def test_check_out_after_check_in(self, client, login):
        login("david@music.school")
        client.post(f"/api/lessons/{PATCHED_LESSON_ID}/teacher-check-in")
        response = client.post(f"/api/lessons/{PATCHED_LESSON_ID}/teacher-check-out", json={"notes": "Good lesson"})

        assert response.status_code == 200
        assert response.get_json()["lesson"]["teacher_notes"] == "Good lesson"


class TestStudentCheckInRoute:
    def payload(self, seed, **overrides):
        data = {"method": "studentId", "value": str(seed["tamar_id"]), "lessonId": PATCHED_LESSON_ID}
        data.update(overrides)
        return data

    def test_check_in(self, client, seed):
        response = client.post("/api/student-check-in", json=self.payload(seed))
        data = response.get_json()

        assert response.status_code == 200
        assert data["alreadyCheckedIn"] is False
        assert data["lesson"]["student_check_in"] is not None

    def test_repeat_check_in(self, client, seed):
        client.post("/api/student-check-in", json=self.payload(seed))
        response = client.post("/api/student-check-in", json=self.payload(seed))

        assert response.get_json()["alreadyCheckedIn"] is True

    def test_missing_values(self, client, seed):
        assert client.post("/api/student-check-in", json={"method": "studentId"}).status_code == 400

    def test_unsupported_method(self, client, seed):
        response = client.post("/api/student-check-in", json=self.payload(seed, method="fingerprint"))

        assert response.status_code == 400

    def test_inactive_student(self, client, seed):
        response = client.post("/api/student-check-in", json=self.payload(seed, value=str(seed["noa_id"])))

        assert response.status_code == 404

    def test_non_numeric_student_id(self, client, seed):
        response = client.post("/api/student-check-in", json=self.payload(seed, value="abc"))

        assert response.status_code == 404

    def test_unknown_lesson(self, client, seed):
        response = client.post("/api/student-check-in", json=self.payload(seed, lessonId="missing"))

        assert response.status_code == 404
        assert response.get_json()["error"].startswith("Lesson not found")


class TestStudentKioskLessons:
    def test_lookup_without_lesson_lists_todays_lessons(self, client, seed):
        response = client.post("/api/student-check-in", json={"method": "studentId", "value": str(seed["tamar_id"])})
        data = response.get_json()

        assert response.status_code == 200
        assert "alreadyCheckedIn" not in data
        assert [lesson["startTime"] for lesson in data["todaysLessons"]] == ["09:00", "10:00", "12:00", "15:00"]
        assert all(lesson["checkedIn"] is False for lesson in data["todaysLessons"])

    def test_kiosk_lesson_fields(self, client, seed):
        response = client.post("/api/student-check-in", json={"method": "studentId", "value": seed["tamar_id"]})
        lesson = response.get_json()["todaysLessons"][1]

        assert lesson == {
            "id": PATCHED_LESSON_ID,
            "date": date.today().isoformat(),
            "startTime": "10:00",
            "endTime": "10:35",
            "instrument": "piano",
            "teacher": "David Cohen",
            "room": "Room 1",
            "checkedIn": False,
            "checkedInAt": None,
        }

    def test_check_in_marks_lesson_in_todays_list(self, client, seed):
        payload = {"method": "studentId", "value": str(seed["tamar_id"]), "lessonId": PATCHED_LESSON_ID}
        response = client.post("/api/student-check-in", json=payload)
        todays = {lesson["id"]: lesson for lesson in response.get_json()["todaysLessons"]}

        assert todays[PATCHED_LESSON_ID]["checkedIn"] is True
        assert todays[PATCHED_LESSON_ID]["checkedInAt"] is not None
        assert todays["lesson-noon"]["checkedIn"] is False

    def test_repeat_check_in_still_lists_lessons(self, client, seed):
        payload = {"method": "studentId", "value": str(seed["tamar_id"]), "lessonId": PATCHED_LESSON_ID}
        client.post("/api/student-check-in", json=payload)
        data = client.post("/api/student-check-in", json=payload).get_json()

        assert data["alreadyCheckedIn"] is True
        assert len(data["todaysLessons"]) == 4

    def test_boolean_student_id_rejected(self, client, seed):
        response = client.post("/api/student-check-in", json={"method": "studentId", "value": True})

        assert response.status_code == 404

    def test_float_student_id_rejected(self, client, seed):
        response = client.post("/api/student-check-in", json={"method": "studentId", "value": seed["tamar_id"] + 0.9})

        assert response.status_code == 404
