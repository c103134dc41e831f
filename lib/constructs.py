# lib/constructs.py
"""
Construct and dimension catalog for the doomscrolling assessment.

The eight constructs are the DS1-DS8 blocks of the research scale used in
"The Dark at the End of the Tunnel: Doomscrolling on Social Media Newsfeeds"
(n=401). The five dimensions are the simplified groupings shown to users.
"""
from typing import Dict

from models.assessment_models import (
    Construct,
    ConstructId,
    Dimension,
    DimensionId,
    SeverityTier,
    RiskLevel,
)
from shared.exceptions import ConfigurationError

# ============== CONSTRUCTS ==============

CONSTRUCTS = (
    Construct(
        id=ConstructId.FREQUENCY,
        name="Scrolling Frequency & Engagement",
        short_name="Frequency",
        description="How often and extensively you engage with news feeds and social media content",
        color="#8B5CF6",
        icon="Smartphone",
    ),
    Construct(
        id=ConstructId.CONTROL,
        name="Loss of Control",
        short_name="Control",
        description="Difficulty stopping or regulating your scrolling behavior when you want to",
        color="#EF4444",
        icon="RefreshCw",
    ),
    Construct(
        id=ConstructId.EMOTIONAL,
        name="Emotional Impact",
        short_name="Emotion",
        description="Negative emotional consequences such as anxiety, sadness, or distress from scrolling",
        color="#F59E0B",
        icon="Frown",
    ),
    Construct(
        id=ConstructId.TIME,
        name="Time Distortion",
        short_name="Time",
        description="Losing track of time or spending more time than intended while scrolling",
        color="#3B82F6",
        icon="Clock",
    ),
    Construct(
        id=ConstructId.COMPULSIVE,
        name="Compulsive Checking",
        short_name="Compulsive",
        description="Strong urges to constantly check for updates and new content",
        color="#10B981",
        icon="Bell",
    ),
    Construct(
        id=ConstructId.AWARENESS,
        name="Harm Awareness",
        short_name="Awareness",
        description="Recognition that your scrolling habits may be harmful to your wellbeing",
        color="#6366F1",
        icon="Eye",
    ),
    Construct(
        id=ConstructId.INTERFERENCE,
        name="Life Interference",
        short_name="Interference",
        description="How scrolling affects daily activities, sleep, work, and relationships",
        color="#EC4899",
        icon="TrendingDown",
    ),
    Construct(
        id=ConstructId.COPING,
        name="Coping Motivation",
        short_name="Coping",
        description="Using scrolling as a way to cope with stress, boredom, or negative emotions",
        color="#14B8A6",
        icon="Shield",
    ),
)

# ============== USER DIMENSIONS ==============

USER_DIMENSIONS = (
    Dimension(
        id=DimensionId.BEHAVIORAL_CONTROL,
        name="Behavioral Control",
        description="Your ability to regulate and stop scrolling when you want to",
        constructs=(ConstructId.CONTROL, ConstructId.COMPULSIVE),
        weight=1.2,
        recommendations=(
            "Set app timers to limit social media usage",
            "Use 'grayscale mode' on your phone to reduce visual appeal",
            "Create physical barriers (e.g., keep phone in another room during specific times)",
            "Practice the '5-minute delay' technique before opening social media apps",
            "Designate 'phone-free' zones in your home",
        ),
    ),
    Dimension(
        id=DimensionId.EMOTIONAL_WELLBEING,
        name="Emotional Wellbeing",
        description="How scrolling affects your mood and emotional state",
        constructs=(ConstructId.EMOTIONAL, ConstructId.COPING),
        weight=1.3,
        recommendations=(
            "Keep a mood journal to track how you feel before and after scrolling",
            "Practice mindfulness meditation for 5-10 minutes daily",
            "Curate your feed to include more positive, uplifting content",
            "Unfollow or mute accounts that consistently trigger negative emotions",
            "Replace doom-scrolling with healthier coping activities (exercise, calling a friend)",
        ),
    ),
    Dimension(
        id=DimensionId.TIME_MANAGEMENT,
        name="Time Management",
        description="Your awareness and control over time spent scrolling",
        constructs=(ConstructId.TIME, ConstructId.FREQUENCY),
        weight=1.0,
        recommendations=(
            "Use screen time tracking apps to monitor your usage",
            "Schedule specific times for checking social media",
            "Set a 'closing time' for social media each evening",
            "Use the Pomodoro technique: work/life intervals with brief social media breaks",
            "Keep a time log for one week to understand your patterns",
        ),
    ),
    Dimension(
        id=DimensionId.DAILY_FUNCTIONING,
        name="Daily Life Impact",
        description="How scrolling interferes with work, sleep, and daily activities",
        constructs=(ConstructId.INTERFERENCE,),
        weight=1.4,
        recommendations=(
            "Establish a phone-free bedtime routine 1 hour before sleep",
            "Use 'Do Not Disturb' mode during work hours",
            "Replace morning phone checking with a healthier routine",
            "Set specific goals for activities that scrolling has displaced",
            "Create accountability by telling someone about your goals",
        ),
    ),
    Dimension(
        id=DimensionId.SELF_AWARENESS,
        name="Self-Awareness",
        description="Your recognition of scrolling patterns and their effects (higher = more aware, which is positive)",
        constructs=(ConstructId.AWARENESS,),
        weight=0.8,
        is_protective=True,
        # Shown when awareness is LOW
        recommendations=(
            "Start tracking your screen time to build awareness",
            "Reflect on what triggers your scrolling episodes",
            "Notice physical sensations when you feel the urge to scroll",
            "Keep a scrolling diary noting triggers, duration, and aftermath",
            "Set intention before opening apps: 'What am I looking for?'",
        ),
    ),
)

CONSTRUCTS_BY_ID: Dict[ConstructId, Construct] = {c.id: c for c in CONSTRUCTS}
DIMENSIONS_BY_ID: Dict[DimensionId, Dimension] = {d.id: d for d in USER_DIMENSIONS}

# ============== SCALE ==============

# Public contract shared with form rendering; do not change independently
SCALE_INFO = {
    "min": 1,
    "max": 7,
    "midpoint": 4,
    "labels": {
        1: "Strongly Disagree",
        2: "Disagree",
        3: "Somewhat Disagree",
        4: "Neutral",
        5: "Somewhat Agree",
        6: "Agree",
        7: "Strongly Agree",
    },
}

# Upper bounds on the 1-7 scale, ordered from least to most severe
SEVERITY_LEVELS = {
    SeverityTier.LOW: {
        "max": 2.5,
        "label": "Low",
        "color": "#10B981",
        "description": "Your scrolling habits are generally healthy.",
    },
    SeverityTier.MODERATE: {
        "max": 4.0,
        "label": "Moderate",
        "color": "#F59E0B",
        "description": "You show some concerning patterns that could benefit from attention.",
    },
    SeverityTier.HIGH: {
        "max": 5.5,
        "label": "High",
        "color": "#EF4444",
        "description": "Your scrolling habits may be significantly impacting your wellbeing.",
    },
    SeverityTier.SEVERE: {
        "max": 7.0,
        "label": "Severe",
        "color": "#7C3AED",
        "description": "Your scrolling patterns suggest serious concerns that warrant immediate attention.",
    },
}

RISK_LEVEL_LABELS = {
    RiskLevel.MINIMAL: {
        "label": "Minimal Risk",
        "color": "#10B981",
        "description": "Your digital habits are healthy and balanced.",
    },
    RiskLevel.LOW: {
        "label": "Low Risk",
        "color": "#22C55E",
        "description": "Minor areas for improvement, but overall healthy patterns.",
    },
    RiskLevel.MODERATE: {
        "label": "Moderate Risk",
        "color": "#F59E0B",
        "description": "Some concerning patterns that would benefit from attention.",
    },
    RiskLevel.ELEVATED: {
        "label": "Elevated Risk",
        "color": "#EF4444",
        "description": "Significant patterns suggesting problematic scrolling behavior.",
    },
    RiskLevel.HIGH: {
        "label": "High Risk",
        "color": "#DC2626",
        "description": "Strong indicators of doomscrolling that may be affecting wellbeing.",
    },
}


def get_construct(construct_id) -> Construct:
    """Look up a construct, failing fast on ids the catalog does not define"""
    try:
        return CONSTRUCTS_BY_ID[ConstructId(construct_id)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"Unknown construct: {construct_id}")


def get_dimension(dimension_id) -> Dimension:
    """Look up a dimension, failing fast on ids the catalog does not define"""
    try:
        return DIMENSIONS_BY_ID[DimensionId(dimension_id)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"Unknown dimension: {dimension_id}")
