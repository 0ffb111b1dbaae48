"""Test configuration and fixtures."""
import time
from typing import Any, Dict, List, Optional

import jwt
import pytest
from fastapi.testclient import TestClient

from jobportal.app.main import app
from jobportal.app.dependencies import get_backend, get_session_registry
from jobportal.core.config import Settings, get_settings
from jobportal.core.exceptions import AuthError, BackendError
from jobportal.features.interview.registry import SessionRegistry
from jobportal.features.interview.session import InterviewSession

TEST_SECRET = "test-secret"
TEST_USER_ID = "user-123"
TEST_EMAIL = "candidate@example.com"


def make_token(user_id: str = TEST_USER_ID, email: str = TEST_EMAIL, **claims) -> str:
    """Sign an access token the way the hosted auth service does."""
    payload = {
        "sub": user_id,
        "email": email,
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
    }
    payload.update(claims)
    return jwt.encode(payload, TEST_SECRET, algorithm="HS256")


class FakeBackend:
    """In-memory stand-in for the hosted backend.

    Rows are stored per table; ``fail`` maps an operation name (``select``,
    ``insert``, ``upload``, ``invoke``, ``sign_in``...) to the error it raises.
    """

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {
            "jobs": [],
            "applications": [],
            "interviews": [],
        }
        self.uploads: Dict[str, bytes] = {}
        self.invocations: List[Dict[str, Any]] = []
        self.signed_out: List[str] = []
        self.fail: Dict[str, Exception] = {}
        self._next_id = 100

    def _check(self, operation: str):
        if operation in self.fail:
            raise self.fail[operation]

    def select(self, table, filters=None, columns="*", order=None, single=False, access_token=None):
        self._check("select")
        rows = [
            row for row in self.tables[table]
            if all(str(row.get(key)) == str(value) for key, value in (filters or {}).items())
        ]
        if order:
            column, _, direction = order.partition(".")
            rows = sorted(rows, key=lambda row: row[column], reverse=direction == "desc")
        if single:
            if len(rows) != 1:
                raise BackendError("JSON object requested, multiple (or no) rows returned", 406)
            return rows[0]
        return rows

    def insert(self, table, row, access_token=None):
        self._check("insert")
        self._next_id += 1
        stored = {"id": str(self._next_id), **row}
        self.tables[table].append(stored)
        return stored

    def upload(self, bucket, name, content, content_type="application/octet-stream", access_token=None):
        self._check("upload")
        self.uploads[f"{bucket}/{name}"] = content
        return name

    def invoke(self, function, payload, access_token=None):
        self._check("invoke")
        self.invocations.append({"function": function, "payload": payload})
        return {"success": True, "message": "Confirmation email sent successfully"}

    def sign_in(self, email, password):
        self._check("sign_in")
        if password != "correct-password":
            raise AuthError("Invalid login credentials", status_code=400)
        return {
            "access_token": make_token(email=email),
            "refresh_token": "refresh",
            "expires_in": 3600,
            "user": {"id": TEST_USER_ID, "email": email},
        }

    def sign_up(self, email, password):
        self._check("sign_up")
        return {"user": {"id": TEST_USER_ID, "email": email}}

    def sign_out(self, access_token):
        self._check("sign_out")
        self.signed_out.append(access_token)


class ManualScheduler:
    """Tick scheduler driven by the test instead of a clock."""

    def __init__(self):
        self.pending: List["ManualHandle"] = []

    def call_later(self, delay, callback):
        handle = ManualHandle(self, delay, callback)
        self.pending.append(handle)
        return handle

    def run_next(self):
        """Run the earliest pending callback."""
        handle = min(self.pending, key=lambda h: h.delay)
        self.pending.remove(handle)
        handle.callback()

    def run_all(self, limit: int = 10000):
        runs = 0
        while self.pending and runs < limit:
            self.run_next()
            runs += 1
        return runs


class ManualHandle:
    def __init__(self, scheduler: ManualScheduler, delay: float, callback):
        self.scheduler = scheduler
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True
        if self in self.scheduler.pending:
            self.scheduler.pending.remove(self)


@pytest.fixture
def test_settings():
    """Settings that avoid the network and real delays."""
    return Settings(
        jwt_secret=TEST_SECRET,
        job_source="auto",
        feedback_delay=0,
        completion_delay=3,
        interview_duration=1800,
    )


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def registry(scheduler, test_settings):
    def factory(interview_id: str) -> InterviewSession:
        return InterviewSession(
            interview_id,
            scheduler,
            duration=test_settings.interview_duration,
            completion_delay=test_settings.completion_delay
        )
    return SessionRegistry(factory)


@pytest.fixture
def client(test_settings, fake_backend, registry):
    """Create test client with settings, backend and registry overrides."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_backend] = lambda: fake_backend
    app.dependency_overrides[get_session_registry] = lambda: registry

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}
