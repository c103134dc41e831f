# api/journal/prompts.py
from typing import Dict, List

# ============== PROMPT TEMPLATES ==============

JOURNAL_SYSTEM_PROMPT = """You are an expert psychologist specializing in digital wellness and doomscrolling behavior analysis. Be empathetic and non-judgmental. Focus on understanding rather than criticizing."""

JOURNAL_ANALYSIS_PROMPT = """
Analyze the following journal entry about a user's scrolling experience.

Your task is to:
1. Detect the overall sentiment and emotional state
2. Identify specific emotions and their intensity (common ones include: anxiety, guilt, stress, loneliness, boredom, shame, frustration, relief, awareness, hope)
3. Identify triggers that led to doomscrolling behavior
4. Recognize patterns in timing, duration, and platforms
5. Provide thoughtful, evidence-based insights
6. Offer personalized, actionable recommendations

The goal is to help the user gain self-awareness and develop healthier habits.

Journal Entry:
---
{entry}
---

Return JSON with the keys: sentiment (overall, score from -1 to 1, confidence from 0 to 1), emotions (emotion, intensity from 0 to 1), triggers (trigger, category, severity), patterns (time_of_day, duration, platform), insights, recommendations (suggestion, priority), summary.
"""

TREND_SYSTEM_PROMPT = """You are an expert psychologist analyzing a user's doomscrolling journey over time. Be encouraging about progress while being honest about challenges."""

TREND_ANALYSIS_PROMPT = """
Review the following journal entries and their individual analyses to identify patterns, progress, and areas for growth.

Journal Entries (chronological order, newest last):
---
{entries}
---

Analyze the trends across these entries. Focus on:
1. Overall behavioral trend (improving, stable, declining, fluctuating)
2. Sentiment changes over time
3. Recurring triggers and whether they're being managed better
4. Emotional patterns and changes
5. Signs of progress or concern
6. A specific focus area for improvement

Return JSON with the keys: overall_trend, sentiment_trend (direction, change), common_triggers (trigger, frequency, trend), emotional_patterns (emotion, average_intensity, trend), progress_insights, weekly_focus.
"""

# ============== HELPER FUNCTIONS ==============

def build_journal_analysis_messages(entry: str) -> List[Dict[str, str]]:
    """Build LLM messages for a single journal entry"""
    return [
        {"role": "system", "content": JOURNAL_SYSTEM_PROMPT},
        {"role": "user", "content": JOURNAL_ANALYSIS_PROMPT.format(entry=entry)},
    ]


def build_trend_analysis_messages(formatted_entries: str) -> List[Dict[str, str]]:
    """Build LLM messages for trend analysis across entries"""
    return [
        {"role": "system", "content": TREND_SYSTEM_PROMPT},
        {"role": "user", "content": TREND_ANALYSIS_PROMPT.format(entries=formatted_entries)},
    ]
