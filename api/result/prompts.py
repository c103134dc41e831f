# api/result/prompts.py
from typing import Dict, List

from lib.reference_stats import SAMPLE_SIZE

# ============== PROMPT TEMPLATES ==============

SUGGESTIONS_SYSTEM_PROMPT = """You are a compassionate digital wellness coach. You help people build healthier relationships with social media and news feeds. You never diagnose; you coach."""

SUGGESTIONS_USER_PROMPT = """
Based on the user's doomscrolling assessment results, provide personalized, actionable suggestions to help them develop healthier habits.

Assessment Results:
---
Overall Score: {overall_score}/7 (higher = more problematic)
Severity Level: {severity}
Percentile: {percentile}% (compared to {sample_size} research participants)
Risk Level: {risk_level}

Dimension Scores (1-7 scale, higher = more concerning):
{dimensions}

Top Concerns:
{concerns}

Predictions:
- Weekly scrolling estimate: {weekly_time} hours
- Risk Factors: {risk_factors}
- Protective Factors: {protective_factors}
---

Based on these results, provide:
1. A personalized opening message (acknowledge their specific scores and situation)
2. Top 3 priority areas with concrete action steps
3. Simple daily habits they can start immediately
4. Mindset shifts (from/to reframes)
5. A specific, measurable weekly goal
6. An encouraging closing message

Be specific to their scores. If they score low (1-3), celebrate their healthy habits. If moderate (3-5), provide balanced guidance. If high (5-7), be supportive while emphasizing the importance of change.

Tailor recommendations to their specific problem areas based on dimension scores.

Return JSON with the keys: personalized_message, top_priorities (title, description, action_steps, timeframe, difficulty), daily_habits (habit, why, when), mindset_shifts (from, to, explanation), weekly_goal (goal, metric, reward), encouragement.
"""

NO_CONCERNS_TEXT = "None identified (scores are healthy)"
NONE_IDENTIFIED = "None identified"

# ============== HELPER FUNCTIONS ==============

def build_suggestions_messages(
    overall_score: float,
    severity: str,
    percentile: int,
    risk_level: str,
    dimensions: str,
    concerns: str,
    weekly_time: str,
    risk_factors: List[str],
    protective_factors: List[str],
) -> List[Dict[str, str]]:
    """Build LLM messages for coaching suggestions"""
    return [
        {
            "role": "system",
            "content": SUGGESTIONS_SYSTEM_PROMPT
        },
        {
            "role": "user",
            "content": SUGGESTIONS_USER_PROMPT.format(
                overall_score=f"{overall_score:.1f}",
                severity=severity,
                percentile=percentile,
                sample_size=SAMPLE_SIZE,
                risk_level=risk_level,
                dimensions=dimensions,
                concerns=concerns or NO_CONCERNS_TEXT,
                weekly_time=weekly_time,
                risk_factors=", ".join(risk_factors) or NONE_IDENTIFIED,
                protective_factors=", ".join(protective_factors) or NONE_IDENTIFIED,
            )
        }
    ]
