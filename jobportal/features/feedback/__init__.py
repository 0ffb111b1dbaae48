"""Interview feedback."""

from .generator import FeedbackGenerator, simulated_feedback
from .report import REPORT_FILENAME, feedback_report, score_band, score_label

__all__ = [
    'FeedbackGenerator',
    'simulated_feedback',
    'REPORT_FILENAME',
    'feedback_report',
    'score_band',
    'score_label',
]
