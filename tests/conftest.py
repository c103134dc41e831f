"""Shared fixtures: Flask test client, response builders and LLM stubs."""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from lib.questions import ASSESSMENT_QUESTIONS
from models.assessment_models import AssessmentResponse
from services.activity_store import activity_store
from services.llm_service import llm_service
from shared.session_manager import session_managers

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def app():
    from main import create_app

    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def clean_state():
    session_managers.clear()
    activity_store.clear()
    yield
    session_managers.clear()
    activity_store.clear()


def build_responses(default=4, **construct_scores):
    """One response per catalog question; construct keyword arguments override the default score"""
    return [
        AssessmentResponse(
            question_id=q.id,
            score=construct_scores.get(q.construct_id.value, default),
            timestamp=BASE_TIME + timedelta(seconds=i),
        )
        for i, q in enumerate(ASSESSMENT_QUESTIONS)
    ]


def response_payload(default=4, **construct_scores):
    return [
        {"questionId": r.question_id, "score": r.score}
        for r in build_responses(default, **construct_scores)
    ]


@pytest.fixture
def responses_factory():
    return build_responses


@pytest.fixture
def mock_llm(monkeypatch):
    """Replace the LLM call; set return_value or side_effect per test"""
    mock = AsyncMock()
    monkeypatch.setattr(llm_service, "generate_json", mock)
    return mock


SAMPLE_JOURNAL_ANALYSIS = {
    "sentiment": {"overall": "negative", "score": -0.6, "confidence": 0.8},
    "emotions": [
        {"emotion": "anxiety", "intensity": 0.8},
        {"emotion": "guilt", "intensity": 0.5},
    ],
    "triggers": [{"trigger": "breaking news alert", "category": "news", "severity": "high"}],
    "patterns": {"time_of_day": "night", "duration": "extended", "platform": "twitter"},
    "insights": ["Late-night news checks extend well past the intended stopping point."],
    "recommendations": [{"suggestion": "Turn off news alerts after 9pm", "priority": "high"}],
    "summary": "A late-night scroll triggered by an alert left you anxious.",
}

SAMPLE_TRENDS = {
    "overall_trend": "improving",
    "sentiment_trend": {"direction": "positive", "change": 0.3},
    "common_triggers": [{"trigger": "news alerts", "frequency": 2, "trend": "decreasing"}],
    "emotional_patterns": [{"emotion": "anxiety", "average_intensity": 0.6, "trend": "decreasing"}],
    "progress_insights": ["You are catching yourself earlier in the evening."],
    "weekly_focus": "Keep the phone out of the bedroom.",
}

SAMPLE_SUGGESTIONS = {
    "personalized_message": "Your results show a few areas worth attention.",
    "top_priorities": [
        {
            "title": "Regain control",
            "description": "Set firm limits on evening use.",
            "action_steps": ["Enable app timers", "Charge the phone outside the bedroom"],
            "timeframe": "2 weeks",
            "difficulty": "moderate",
        }
    ],
    "daily_habits": [{"habit": "Morning walk", "why": "Replaces the first check", "when": "7am"}],
    "mindset_shifts": [
        {"from": "I need to stay informed", "to": "I can check once a day", "explanation": "News rarely needs minute-by-minute attention."}
    ],
    "weekly_goal": {"goal": "Cut evening scrolling by half", "metric": "Screen time after 9pm", "reward": "A movie night"},
    "encouragement": "Small steps add up.",
}
