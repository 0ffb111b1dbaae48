"""Interview session endpoints.

The browser owns the camera and microphone; it reports the permission
outcome and forwards button presses here. The countdown runs server-side on
the event loop, which is why these handlers are coroutines.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from ..models.interview import PermissionReport, SessionSnapshot
from ..dependencies import get_current_session, get_session_registry

from jobportal.core.exceptions import InvalidTransitionError
from jobportal.core.session import UserSession
from jobportal.features.interview.media import ReportedMediaDevices
from jobportal.features.interview.registry import SessionRegistry
from jobportal.features.interview.session import InterviewSession

router = APIRouter()


def _existing(registry: SessionRegistry, session: UserSession, interview_id: str) -> InterviewSession:
    interview = registry.get(session.user_id, interview_id)
    if interview is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No open session for interview {interview_id}"
        )
    return interview


def _apply(interview: InterviewSession, action) -> SessionSnapshot:
    try:
        action()
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return SessionSnapshot(**interview.snapshot())


@router.get("/{interview_id}/session", response_model=SessionSnapshot)
async def open_session(
    interview_id: str,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Open (or resume) the interview session and return its state"""
    interview = registry.open(session.user_id, interview_id)
    return SessionSnapshot(**interview.snapshot())


@router.post("/{interview_id}/session/permissions", response_model=SessionSnapshot)
async def report_permissions(
    interview_id: str,
    report: PermissionReport,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Report the camera/microphone prompt outcome; a refusal can be retried"""
    interview = registry.open(session.user_id, interview_id)
    devices = ReportedMediaDevices(report.camera, report.microphone, report.reason)
    return _apply(interview, lambda: interview.request_permissions(devices))


@router.post("/{interview_id}/session/start", response_model=SessionSnapshot)
async def start_interview(
    interview_id: str,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Start the countdown on the first question"""
    interview = _existing(registry, session, interview_id)
    return _apply(interview, interview.start)


@router.post("/{interview_id}/session/next", response_model=SessionSnapshot)
async def next_question(
    interview_id: str,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Go to the next question; after the last one the interview completes"""
    interview = _existing(registry, session, interview_id)
    return _apply(interview, interview.next_question)


@router.post("/{interview_id}/session/end", response_model=SessionSnapshot)
async def end_interview(
    interview_id: str,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """End the interview early"""
    interview = _existing(registry, session, interview_id)
    return _apply(interview, interview.end_early)


@router.post("/{interview_id}/session/video", response_model=SessionSnapshot)
async def toggle_video(
    interview_id: str,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Turn the camera track on or off"""
    interview = _existing(registry, session, interview_id)
    return _apply(interview, interview.toggle_video)


@router.post("/{interview_id}/session/audio", response_model=SessionSnapshot)
async def toggle_audio(
    interview_id: str,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Turn the microphone track on or off"""
    interview = _existing(registry, session, interview_id)
    return _apply(interview, interview.toggle_audio)


@router.delete("/{interview_id}/session", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    interview_id: str,
    session: UserSession = Depends(get_current_session),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Leave the interview page: cancel timers and release capture"""
    if not registry.close(session.user_id, interview_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No open session for interview {interview_id}"
        )
