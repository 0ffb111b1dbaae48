"""Scripted interview session.

A session moves through four states::

    AWAITING_PERMISSIONS -> IDLE -> IN_PROGRESS -> COMPLETE

* ``AWAITING_PERMISSIONS``: camera and microphone are requested. A refusal
  keeps the session here with a blocking message until a retry succeeds.
* ``IDLE``: the pre-flight checklist is shown; ``start`` begins the interview.
* ``IN_PROGRESS``: a one-second tick counts down from the interview duration
  and the candidate steps through the fixed questions. Running out of time,
  moving past the last question or ending early completes the interview.
* ``COMPLETE``: capture is stopped and, after a short delay, the feedback
  page becomes the redirect target. Terminal.

Answers are neither evaluated nor stored.

Example:
    ```python
    session = InterviewSession('42', AsyncioTickScheduler())
    session.request_permissions(ReportedMediaDevices(camera=True, microphone=True))
    session.start()
    session.next_question()
    ```
"""
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from jobportal.core.exceptions import InvalidTransitionError, PermissionDeniedError
from jobportal.core.logging import setup_logging
from jobportal.features.interview.media import MediaDevices, MediaStream
from jobportal.features.interview.timer import TickScheduler, TimerHandle, format_time

logger = setup_logging('interview')

INTERVIEW_QUESTIONS = [
    "Tell me about yourself and your background.",
    "Why are you interested in this position?",
    "What are your greatest strengths?",
    "Describe a challenging situation you faced at work and how you handled it.",
    "Where do you see yourself in five years?",
    "Why should we hire you?",
    "Do you have any questions for us?",
]

PREFLIGHT_CHECKLIST = [
    "Camera permission granted",
    "Microphone permission granted",
]

TIPS = [
    "Speak clearly and at a moderate pace",
    "Maintain eye contact with the camera",
    "Take your time to think before answering",
]

PERMISSION_MESSAGE = (
    "Camera and microphone access is required for the interview. "
    "Please allow permissions and try again."
)

DEFAULT_DURATION = 30 * 60
TICK_SECONDS = 1
COMPLETION_DELAY = 3.0


class SessionState(str, Enum):
    AWAITING_PERMISSIONS = "awaiting_permissions"
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class InterviewSession:
    """State machine behind one candidate's interview.

    Attributes:
        interview_id: Interview the session belongs to
        state: Current state
        time_remaining: Seconds left on the countdown
        question_index: Index of the current question, within the question list
        stream: Granted capture stream, if any
        blocking_message: Shown while permissions are missing
        redirect_to: Feedback path, set once the completion delay has passed
    """

    def __init__(
        self,
        interview_id: str,
        scheduler: TickScheduler,
        duration: int = DEFAULT_DURATION,
        completion_delay: float = COMPLETION_DELAY,
        questions: Optional[List[str]] = None,
        on_redirect: Optional[Callable[["InterviewSession"], None]] = None
    ):
        self.interview_id = interview_id
        self.scheduler = scheduler
        self.duration = duration
        self.completion_delay = completion_delay
        self.questions = list(questions or INTERVIEW_QUESTIONS)
        self.on_redirect = on_redirect

        self.state = SessionState.AWAITING_PERMISSIONS
        self.time_remaining = duration
        self.question_index = 0
        self.stream: Optional[MediaStream] = None
        self.blocking_message: Optional[str] = None
        self.redirect_to: Optional[str] = None

        self._tick_handle: Optional[TimerHandle] = None
        self._redirect_handle: Optional[TimerHandle] = None

    @property
    def feedback_path(self) -> str:
        return f"/interview/{self.interview_id}/feedback"

    @property
    def current_question(self) -> Optional[str]:
        if self.state != SessionState.IN_PROGRESS:
            return None
        return self.questions[self.question_index]

    @property
    def is_last_question(self) -> bool:
        return self.question_index == len(self.questions) - 1

    def _require(self, action: str, *states: SessionState) -> None:
        if self.state not in states:
            raise InvalidTransitionError(action, self.state.value)

    def request_permissions(self, devices: MediaDevices) -> bool:
        """Ask for camera and microphone access.

        Returns:
            True if access was granted and the session moved to ``IDLE``;
            False if it was refused and the session is still waiting
        """
        self._require("request permissions", SessionState.AWAITING_PERMISSIONS)
        try:
            self.stream = devices.request(video=True, audio=True)
        except PermissionDeniedError as e:
            logger.warning(f"Interview {self.interview_id}: {str(e)}")
            self.blocking_message = PERMISSION_MESSAGE
            return False

        self.blocking_message = None
        self.state = SessionState.IDLE
        logger.info(f"Interview {self.interview_id}: capture granted")
        return True

    def start(self) -> None:
        """Start the countdown on the first question."""
        self._require("start", SessionState.IDLE)
        self.state = SessionState.IN_PROGRESS
        self.time_remaining = self.duration
        self.question_index = 0
        self._schedule_tick()
        logger.info(f"Interview {self.interview_id}: started ({self.duration}s)")

    def _schedule_tick(self) -> None:
        self._tick_handle = self.scheduler.call_later(TICK_SECONDS, self.tick)

    def tick(self) -> None:
        """Count one second down; at zero the interview completes."""
        if self.state != SessionState.IN_PROGRESS:
            return
        self._tick_handle = None
        self.time_remaining -= TICK_SECONDS
        if self.time_remaining <= 0:
            self.time_remaining = 0
            logger.info(f"Interview {self.interview_id}: time is up")
            self.complete()
        else:
            self._schedule_tick()

    def next_question(self) -> None:
        """Move to the next question, or complete after the last one."""
        self._require("advance", SessionState.IN_PROGRESS)
        if self.is_last_question:
            self.complete()
        else:
            self.question_index += 1

    def end_early(self) -> None:
        self._require("end", SessionState.IN_PROGRESS)
        logger.info(
            f"Interview {self.interview_id}: ended early at question {self.question_index + 1}"
        )
        self.complete()

    def _toggle(self, kind: str) -> bool:
        self._require(f"toggle {kind}", SessionState.IDLE, SessionState.IN_PROGRESS)
        tracks = self.stream.video_tracks() if kind == 'video' else self.stream.audio_tracks()
        if not tracks:
            return False
        tracks[0].enabled = not tracks[0].enabled
        return tracks[0].enabled

    def toggle_video(self) -> bool:
        """Flip the video track; returns whether video is now enabled."""
        return self._toggle('video')

    def toggle_audio(self) -> bool:
        """Flip the audio track; returns whether audio is now enabled."""
        return self._toggle('audio')

    def complete(self) -> None:
        """Finish the interview. Calling it again has no effect."""
        if self.state == SessionState.COMPLETE:
            return
        self.state = SessionState.COMPLETE
        self._cancel_tick()
        if self.stream is not None:
            self.stream.stop()
        self._redirect_handle = self.scheduler.call_later(self.completion_delay, self._redirect)
        logger.info(f"Interview {self.interview_id}: complete")

    def _redirect(self) -> None:
        self._redirect_handle = None
        self.redirect_to = self.feedback_path
        if self.on_redirect is not None:
            self.on_redirect(self)

    def _cancel_tick(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def close(self) -> None:
        """Tear the session down: cancel pending callbacks and release capture."""
        self._cancel_tick()
        if self._redirect_handle is not None:
            self._redirect_handle.cancel()
            self._redirect_handle = None
        if self.stream is not None:
            self.stream.stop()

    def _track_enabled(self, kind: str) -> bool:
        if self.stream is None:
            return False
        tracks = self.stream.video_tracks() if kind == 'video' else self.stream.audio_tracks()
        return bool(tracks) and tracks[0].enabled

    def snapshot(self) -> Dict[str, Any]:
        """Everything a client needs to render the session."""
        return {
            'interview_id': self.interview_id,
            'state': self.state.value,
            'time_remaining': self.time_remaining,
            'time_display': format_time(self.time_remaining),
            'question_index': self.question_index,
            'question_count': len(self.questions),
            'current_question': self.current_question,
            'is_last_question': self.is_last_question,
            'recording': self.state == SessionState.IN_PROGRESS,
            'video_enabled': self._track_enabled('video'),
            'audio_enabled': self._track_enabled('audio'),
            'blocking_message': self.blocking_message,
            'checklist': PREFLIGHT_CHECKLIST if self.state == SessionState.IDLE else [],
            'tips': TIPS if self.state == SessionState.IN_PROGRESS else [],
            'redirect_to': self.redirect_to,
        }
