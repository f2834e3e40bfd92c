"""
Check-in smoke suite against a running server.
Start the API first (python app.py), then: python smoke_checkin.py
"""
import os
import sys
import requests
from utils.harness import ApiClient, SuiteResults, BASE_URL, log

ADMIN_EMAIL = os.getenv("API_TEST_ADMIN_EMAIL", "admin@music.school")
ADMIN_PASSWORD = os.getenv("API_TEST_ADMIN_PASSWORD", "admin123")
MISSING_LESSON_ID = "00000000000000000000000000"


def run_suite(client, results):
    log("🔵", "\n=== CHECK-IN SMOKE SUITE ===\n")

    r = client.get("/api/lessons")
    results.check("Reject unauthenticated lesson list", r.status_code == 401, f"Got {r.status_code}")

    r = client.get("/api/frontend-config")
    results.check(
        "Serve frontend config",
        r.ok and "NEXT_PUBLIC_API_URL" in r.json().get("env", {}),
        f"Got {r.status_code}"
    )

    r = client.login(ADMIN_EMAIL, "wrong-password")
    results.check("Reject wrong password", r.status_code == 401, f"Got {r.status_code}")

    r = client.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    if not results.check("Admin login", r.ok, f"Got {r.status_code}"):
        return results

    r = client.get("/api/lessons")
    lessons = r.json().get("lessons", []) if r.ok else []
    results.check("List today's lessons", r.ok, f"Got {r.status_code}")

    r = client.get("/api/lessons", params={"date": "not-a-date"})
    results.check("Reject malformed date filter", r.status_code == 400, f"Got {r.status_code}")

    r = client.post(f"/api/lessons/{MISSING_LESSON_ID}/teacher-check-in")
    results.check("Return 404 for unknown lesson check-in", r.status_code == 404, f"Got {r.status_code}")

    if lessons:
        check_in_round_trip(client, results, lessons[0]["id"])
    else:
        log("⚠️ ", "No lessons scheduled today, skipping check-in round trip")

    client.logout()
    r = client.get("/api/lessons")
    results.check("Reject lesson list after logout", r.status_code == 401, f"Got {r.status_code}")
    return results


def check_in_round_trip(client, results, lesson_id):
    r = client.post(f"/api/lessons/{lesson_id}/teacher-check-in")
    results.check("Teacher check-in", r.ok, f"Got {r.status_code}")

    r = client.get(f"/api/lessons/{lesson_id}")
    results.check(
        "Check-in visible on lesson",
        r.ok and r.json().get("teacher_check_in") is not None,
        "teacher_check_in still empty"
    )


def main():
    results = SuiteResults()
    client = ApiClient(BASE_URL)
    try:
        run_suite(client, results)
    except requests.RequestException as e:
        results.failed_test("Reach API server", e)
    rate = results.summary()
    return 0 if rate == 100 else 1

if __name__ == "__main__":
    sys.exit(main())
