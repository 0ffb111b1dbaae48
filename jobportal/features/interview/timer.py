"""Scheduled callbacks for the interview countdown and delays.

The session state machine never sleeps or owns a loop; it asks a
``TickScheduler`` to call it back later and keeps the returned handle so it
can cancel the callback when the session ends.
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class TickScheduler(ABC):
    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds."""


class AsyncioTickScheduler(TickScheduler):
    """Schedules callbacks on an asyncio event loop.

    When no loop is given, the loop running at the time of each call is used,
    so the scheduler must be used from coroutines or loop callbacks.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


def format_time(seconds: int) -> str:
    """Render a countdown as ``M:SS``."""
    minutes, remaining = divmod(max(seconds, 0), 60)
    return f"{minutes}:{remaining:02d}"
