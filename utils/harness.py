"""
Helpers for the HTTP integration suites that run against a live server.

Suites print one line per check and finish with a summary block that
run_all_suites.py parses (PASSED / TOTAL / SUCCESS RATE).
"""
import os
import requests

BASE_URL = os.getenv("API_TEST_BASE_URL", "http://localhost:3335")
REQUEST_TIMEOUT = 10


def log(emoji, msg):
    print(f"{emoji} {msg}")


class SuiteResults:
    """Pass/fail accumulators for one sequential suite run."""

    def __init__(self):
        self.passed = []
        self.failed = []

    def passed_test(self, name):
        self.passed.append(name)
        print(f"✅ {name}")

    def failed_test(self, name, error=None):
        message = str(error) if error is not None else None
        self.failed.append({"test": name, "error": message})
        print(f"❌ {name}")
        if message:
            print(f"   Error: {message}")

    def check(self, name, condition, error=None):
        """Record `name` as passed when `condition` is truthy, failed otherwise."""
        if condition:
            self.passed_test(name)
        else:
            self.failed_test(name, error)
        return bool(condition)

    @property
    def total(self):
        return len(self.passed) + len(self.failed)

    @property
    def success_rate(self):
        if not self.total:
            return 0.0
        return len(self.passed) / self.total * 100

    def summary(self):
        print("\n" + "=" * 60)
        print(f"PASSED: {len(self.passed)}")
        print(f"FAILED: {len(self.failed)}")
        print(f"TOTAL: {self.total}")
        print(f"SUCCESS RATE: {self.success_rate:.1f}%")
        print("=" * 60)
        for failure in self.failed:
            print(f"   ❌ {failure['test']}: {failure['error']}")
        return self.success_rate


class ApiClient:
    """requests.Session bound to a base URL; keeps the auth cookie after login()."""

    def __init__(self, base_url=BASE_URL, timeout=REQUEST_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return self.session.get(self.url(path), **kwargs)

    def post(self, path, json=None, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return self.session.post(self.url(path), json=json, **kwargs)

    def login(self, email, password):
        response = self.post("/api/auth/login", json={"email": email, "password": password})
        return response

    def logout(self):
        return self.post("/api/auth/logout")
