from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..models.feedback import FeedbackResponse, SkillScore
from ..dependencies import get_feedback_generator

from jobportal.core.schemas import FeedbackData
from jobportal.features.feedback.generator import FeedbackGenerator
from jobportal.features.feedback.report import REPORT_FILENAME, feedback_report, score_band, score_label

router = APIRouter()


def _skills(feedback: FeedbackData):
    return [
        SkillScore(label=label, score=score, band=score_band(score))
        for label, score in (
            ("Communication", feedback.communication),
            ("Technical Knowledge", feedback.technical),
            ("Confidence", feedback.confidence),
            ("Clarity", feedback.clarity),
        )
    ]


@router.get("/{interview_id}/feedback", response_model=FeedbackResponse)
async def get_feedback(
    interview_id: str,
    generator: FeedbackGenerator = Depends(get_feedback_generator)
):
    """Feedback for a finished interview"""
    feedback = await generator.generate(interview_id)
    return FeedbackResponse(
        interview_id=interview_id,
        overall_label=score_label(feedback.overall_score),
        overall_band=score_band(feedback.overall_score),
        skills=_skills(feedback),
        feedback=feedback
    )


@router.get("/{interview_id}/feedback/report", response_class=PlainTextResponse)
async def download_feedback_report(
    interview_id: str,
    generator: FeedbackGenerator = Depends(get_feedback_generator)
):
    """Download the feedback as a text report"""
    feedback = await generator.generate(interview_id)
    return PlainTextResponse(
        feedback_report(feedback),
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'}
    )
