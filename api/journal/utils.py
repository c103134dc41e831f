# api/journal/utils.py
from typing import Iterable

from config.settings import settings
from .schemas import JournalEntry

MAX_EMOTIONS_IN_SUMMARY = 3


def validate_journal_content(content: str) -> str:
    """
    Check an entry's length against the configured bounds

    Raises:
        ValueError: if the entry is empty, too short or too long
    """
    if not content or not content.strip():
        raise ValueError("Journal content is required")

    if len(content) < settings.JOURNAL_MIN_LENGTH:
        raise ValueError(
            f"Please write at least {settings.JOURNAL_MIN_LENGTH} characters for meaningful analysis"
        )

    if len(content) > settings.JOURNAL_MAX_LENGTH:
        raise ValueError(
            f"Journal entry is too long. Please keep it under {settings.JOURNAL_MAX_LENGTH:,} characters"
        )

    return content


def validate_trend_entries(entries: list) -> list:
    if len(entries) < settings.MIN_TREND_ENTRIES:
        raise ValueError(
            f"At least {settings.MIN_TREND_ENTRIES} analyzed journal entries are required for trend analysis"
        )
    return entries


def format_entries_for_trends(entries: Iterable[JournalEntry]) -> str:
    """Render entries with their analysis highlights, oldest first"""
    blocks = []
    for e in entries:
        emotions = ", ".join(
            f"{em.emotion} ({em.intensity})" for em in e.analysis.emotions[:MAX_EMOTIONS_IN_SUMMARY]
        )
        triggers = ", ".join(t.trigger for t in e.analysis.triggers)
        blocks.append(
            f"Date: {e.date}\n"
            f"Entry: {e.content}\n"
            f"Analysis Summary: {e.analysis.summary}\n"
            f"Sentiment: {e.analysis.sentiment.overall} ({e.analysis.sentiment.score})\n"
            f"Main Emotions: {emotions}\n"
            f"Triggers: {triggers}\n"
            f"---"
        )
    return "\n\n".join(blocks)
