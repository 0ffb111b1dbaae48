"""Interview scheduling."""

from .slots import DURATIONS, DEFAULT_DURATION, combine_slot, generate_date_options, generate_time_slots
from .scheduler import InterviewScheduler

__all__ = [
    'DURATIONS',
    'DEFAULT_DURATION',
    'combine_slot',
    'generate_date_options',
    'generate_time_slots',
    'InterviewScheduler',
]
