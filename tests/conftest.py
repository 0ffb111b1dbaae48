"""Fixtures shared by the feature-level tests."""
import pytest

from jobportal.core.sample_data import sample_jobs


class RecordingScheduler:
    """Keeps scheduled callbacks so tests can fire them one at a time."""

    def __init__(self):
        self.pending = []

    def call_later(self, delay, callback):
        handle = RecordingHandle(self, delay, callback)
        self.pending.append(handle)
        return handle

    def fire(self):
        handle = self.pending.pop(0)
        handle.callback()
        return handle


class RecordingHandle:
    def __init__(self, scheduler, delay, callback):
        self.scheduler = scheduler
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True
        if self in self.scheduler.pending:
            self.scheduler.pending.remove(self)


@pytest.fixture
def scheduler():
    return RecordingScheduler()


@pytest.fixture
def jobs():
    return sample_jobs()
