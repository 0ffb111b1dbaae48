"""Interview feedback models."""
from typing import List
from pydantic import BaseModel

from jobportal.core.schemas import FeedbackData


class SkillScore(BaseModel):
    label: str
    score: int
    band: str


class FeedbackResponse(BaseModel):
    interview_id: str
    overall_label: str
    overall_band: str
    skills: List[SkillScore]
    feedback: FeedbackData
