"""Scripted AI interview sessions."""

from .media import MediaDevices, MediaStream, MediaTrack, ReportedMediaDevices
from .timer import AsyncioTickScheduler, TickScheduler, format_time
from .session import INTERVIEW_QUESTIONS, InterviewSession, SessionState
from .registry import SessionRegistry

__all__ = [
    'MediaDevices',
    'MediaStream',
    'MediaTrack',
    'ReportedMediaDevices',
    'AsyncioTickScheduler',
    'TickScheduler',
    'format_time',
    'INTERVIEW_QUESTIONS',
    'InterviewSession',
    'SessionState',
    'SessionRegistry',
]
