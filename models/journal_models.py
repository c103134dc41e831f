# models/journal_models.py
"""
Structured outputs expected back from the generative-language service.

These models double as the JSON response schema handed to Gemini and as the
validator applied to whatever text comes back from any provider.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

Priority = Literal["low", "medium", "high"]
Trend = Literal["increasing", "decreasing", "stable"]


# ============== JOURNAL ANALYSIS ==============

class Sentiment(BaseModel):
    overall: Literal["positive", "negative", "neutral", "mixed"]
    score: float = Field(..., ge=-1, le=1, description="-1 (very negative) to 1 (very positive)")
    confidence: float = Field(..., ge=0, le=1)


class EmotionReading(BaseModel):
    emotion: str
    intensity: float = Field(..., ge=0, le=1)


class Trigger(BaseModel):
    trigger: str
    category: Literal[
        "social_media", "news", "boredom", "stress",
        "habit", "fomo", "procrastination", "other"
    ]
    severity: Priority


class ScrollPattern(BaseModel):
    time_of_day: Literal["morning", "afternoon", "evening", "night", "unspecified"]
    duration: Literal["brief", "moderate", "extended", "unspecified"]
    platform: Optional[str] = None


class JournalRecommendation(BaseModel):
    suggestion: str
    priority: Priority


class JournalAnalysisResult(BaseModel):
    sentiment: Sentiment
    emotions: List[EmotionReading]
    triggers: List[Trigger]
    patterns: ScrollPattern
    insights: List[str]
    recommendations: List[JournalRecommendation]
    summary: str


# ============== TREND ANALYSIS ==============

class SentimentTrend(BaseModel):
    direction: Literal["positive", "negative", "neutral"]
    change: float


class TriggerTrend(BaseModel):
    trigger: str
    frequency: float
    trend: Trend


class EmotionalPattern(BaseModel):
    emotion: str
    average_intensity: float
    trend: Trend


class TrendAnalysisResult(BaseModel):
    overall_trend: Literal["improving", "stable", "declining", "fluctuating"]
    sentiment_trend: SentimentTrend
    common_triggers: List[TriggerTrend]
    emotional_patterns: List[EmotionalPattern]
    progress_insights: List[str]
    weekly_focus: str


# ============== COACHING SUGGESTIONS ==============

class PriorityArea(BaseModel):
    title: str
    description: str
    action_steps: List[str]
    timeframe: str
    difficulty: Literal["easy", "moderate", "challenging"]


class DailyHabit(BaseModel):
    habit: str
    why: str
    when: str


class MindsetShift(BaseModel):
    from_: str = Field(..., alias="from")
    to: str
    explanation: str

    model_config = ConfigDict(populate_by_name=True)


class WeeklyGoal(BaseModel):
    goal: str
    metric: str
    reward: str


class AISuggestionsResult(BaseModel):
    personalized_message: str
    top_priorities: List[PriorityArea]
    daily_habits: List[DailyHabit]
    mindset_shifts: List[MindsetShift]
    weekly_goal: WeeklyGoal
    encouragement: str
