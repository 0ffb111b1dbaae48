"""Feedback scoring labels and the plain-text report."""
from datetime import date
from typing import List, Optional

from jobportal.core.schemas import FeedbackData

REPORT_FILENAME = "interview_feedback_report.txt"


def score_label(score: int) -> str:
    """Describe a score out of 100 in words."""
    if score >= 90:
        return "Excellent"
    if score >= 80:
        return "Good"
    if score >= 70:
        return "Average"
    if score >= 60:
        return "Below Average"
    return "Needs Improvement"


def score_band(score: int) -> str:
    """Coarse band used to color a score: high, medium or low."""
    if score >= 80:
        return "high"
    if score >= 60:
        return "medium"
    return "low"


def _bullets(items: List[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


def feedback_report(feedback: FeedbackData, generated_on: Optional[date] = None) -> str:
    """Render feedback as the downloadable text report."""
    generated_on = generated_on or date.today()
    return f"""
INTERVIEW FEEDBACK REPORT

Overall Score: {feedback.overall_score}/100

SKILL BREAKDOWN:
- Communication: {feedback.communication}/100
- Technical Knowledge: {feedback.technical}/100
- Confidence: {feedback.confidence}/100
- Clarity: {feedback.clarity}/100

STRENGTHS:
{_bullets(feedback.strengths)}

AREAS FOR IMPROVEMENT:
{_bullets(feedback.improvements)}

DETAILED FEEDBACK:
{feedback.detailed_feedback}

RECOMMENDATIONS:
{_bullets(feedback.recommendations)}

Generated on: {generated_on.isoformat()}
"""
