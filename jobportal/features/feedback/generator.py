"""Simulated interview feedback.

No scoring happens: after a fixed delay the same feedback is returned for
every interview. The interview record's own feedback fields are left alone.
"""
import asyncio

from jobportal.core.logging import setup_logging
from jobportal.core.schemas import FeedbackData

logger = setup_logging('feedback')

FEEDBACK_DELAY = 3.0


def simulated_feedback() -> FeedbackData:
    return FeedbackData(
        overall_score=78,
        communication=82,
        technical=75,
        confidence=80,
        clarity=76,
        strengths=[
            "Excellent communication skills and clear articulation",
            "Strong technical knowledge in relevant areas",
            "Confident presentation and professional demeanor",
            "Good examples and specific details in responses",
        ],
        improvements=[
            "Could provide more specific examples for behavioral questions",
            "Consider structuring answers using the STAR method",
            "Work on reducing filler words during responses",
            "Prepare more questions to ask the interviewer",
        ],
        detailed_feedback=(
            "Your interview performance showed strong potential with several standout "
            "qualities. Your communication skills were particularly impressive, "
            "demonstrating clarity and professionalism throughout the session. Your "
            "technical responses showed solid understanding of core concepts, though "
            "there's room for more detailed explanations in some areas. Your confidence "
            "level was appropriate and you maintained good eye contact with the camera. "
            "Overall, this was a solid interview performance that positions you well for "
            "consideration."
        ),
        recommendations=[
            "Practice the STAR method for behavioral questions",
            "Research common industry-specific technical questions",
            "Prepare thoughtful questions about the company culture",
            "Work on storytelling techniques to make examples more engaging",
            "Consider taking a public speaking or presentation course",
        ],
    )


class FeedbackGenerator:
    """Produces feedback for a finished interview after ``delay`` seconds."""

    def __init__(self, delay: float = FEEDBACK_DELAY):
        self.delay = delay

    async def generate(self, interview_id: str) -> FeedbackData:
        logger.info(f"Generating feedback for interview {interview_id}")
        if self.delay:
            await asyncio.sleep(self.delay)
        return simulated_feedback()
