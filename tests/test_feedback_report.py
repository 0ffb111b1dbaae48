"""Tests for simulated feedback and the text report."""
import asyncio
from datetime import date

import pytest

from jobportal.features.feedback.generator import FeedbackGenerator, simulated_feedback
from jobportal.features.feedback.report import feedback_report, score_band, score_label


@pytest.mark.parametrize("score,label", [
    (95, "Excellent"),
    (90, "Excellent"),
    (82, "Good"),
    (75, "Average"),
    (60, "Below Average"),
    (59, "Needs Improvement"),
])
def test_score_label(score, label):
    assert score_label(score) == label


@pytest.mark.parametrize("score,band", [(80, "high"), (79, "medium"), (60, "medium"), (10, "low")])
def test_score_band(score, band):
    assert score_band(score) == band


def test_simulated_feedback_is_fixed():
    feedback = simulated_feedback()
    assert (
        feedback.overall_score,
        feedback.communication,
        feedback.technical,
        feedback.confidence,
        feedback.clarity,
    ) == (78, 82, 75, 80, 76)
    assert len(feedback.strengths) == 4
    assert len(feedback.recommendations) == 5


def test_generator_returns_same_feedback_for_any_interview():
    generator = FeedbackGenerator(delay=0)
    first = asyncio.run(generator.generate("1"))
    second = asyncio.run(generator.generate("2"))
    assert first == second == simulated_feedback()


def test_report_text():
    report = feedback_report(simulated_feedback(), generated_on=date(2024, 3, 1))

    assert "INTERVIEW FEEDBACK REPORT" in report
    assert "Overall Score: 78/100" in report
    assert "- Communication: 82/100" in report
    assert "- Technical Knowledge: 75/100" in report
    assert "• Practice the STAR method for behavioral questions" in report
    assert report.rstrip().endswith("Generated on: 2024-03-01")
