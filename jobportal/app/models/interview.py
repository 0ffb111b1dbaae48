"""Interview session models."""
from typing import List, Optional
from pydantic import BaseModel


class PermissionReport(BaseModel):
    """The browser's answer to the camera/microphone prompt."""
    camera: bool
    microphone: bool
    reason: Optional[str] = None


class SessionSnapshot(BaseModel):
    interview_id: str
    state: str
    time_remaining: int
    time_display: str
    question_index: int
    question_count: int
    current_question: Optional[str] = None
    is_last_question: bool
    recording: bool
    video_enabled: bool
    audio_enabled: bool
    blocking_message: Optional[str] = None
    checklist: List[str] = []
    tips: List[str] = []
    redirect_to: Optional[str] = None
