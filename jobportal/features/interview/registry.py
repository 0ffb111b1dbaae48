"""Live interview sessions, one per user and interview."""
from typing import Callable, Dict, Optional, Tuple

from jobportal.core.logging import setup_logging
from jobportal.features.interview.session import InterviewSession
from jobportal.features.interview.timer import TimerHandle

logger = setup_logging('interview')

SessionFactory = Callable[[str], InterviewSession]
SessionKey = Tuple[str, str]

# Seconds a finished session stays readable after its redirect fires
RELEASE_DELAY = 60.0


class SessionRegistry:
    """Owns the live sessions and tears them down.

    A session is keyed by ``(user_id, interview_id)`` so one user's capture
    stream is never reachable from another user's requests. Once a session
    has redirected to its feedback page it is kept for ``release_delay``
    seconds, so the client can still read the redirect, and then dropped.
    """

    def __init__(self, factory: SessionFactory, release_delay: float = RELEASE_DELAY):
        self.factory = factory
        self.release_delay = release_delay
        self._sessions: Dict[SessionKey, InterviewSession] = {}
        self._releases: Dict[SessionKey, TimerHandle] = {}

    def get(self, user_id: str, interview_id: str) -> Optional[InterviewSession]:
        return self._sessions.get((user_id, interview_id))

    def open(self, user_id: str, interview_id: str) -> InterviewSession:
        """Return the user's session for the interview, creating it if needed."""
        key = (user_id, interview_id)
        session = self._sessions.get(key)
        if session is None:
            session = self.factory(interview_id)
            session.on_redirect = self._release_after_redirect(key, session.on_redirect)
            self._sessions[key] = session
            logger.info(f"Opened interview session {interview_id} for user {user_id}")
        return session

    def _release_after_redirect(self, key: SessionKey, previous):
        def release(session: InterviewSession) -> None:
            if previous is not None:
                previous(session)
            self._releases[key] = session.scheduler.call_later(
                self.release_delay,
                lambda: self._discard(key, session)
            )
        return release

    def _discard(self, key: SessionKey, session: InterviewSession) -> None:
        self._releases.pop(key, None)
        if self._sessions.get(key) is not session:
            return
        del self._sessions[key]
        session.close()
        logger.info(f"Released finished interview session {key[1]} for user {key[0]}")

    def close(self, user_id: str, interview_id: str) -> bool:
        key = (user_id, interview_id)
        release = self._releases.pop(key, None)
        if release is not None:
            release.cancel()
        session = self._sessions.pop(key, None)
        if session is None:
            return False
        session.close()
        logger.info(f"Closed interview session {interview_id} for user {user_id}")
        return True

    def close_all(self) -> None:
        for release in self._releases.values():
            release.cancel()
        self._releases.clear()
        for session in self._sessions.values():
            session.close()
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
