# api/journal/usecases.py
import logging
from typing import List, Optional

from models.journal_models import JournalAnalysisResult, TrendAnalysisResult
from services.llm_service import llm_service
from shared.session_manager import SessionManager
from utils.helpers import utc_now_iso
from .prompts import build_journal_analysis_messages, build_trend_analysis_messages
from .schemas import JournalEntry
from .utils import format_entries_for_trends, validate_journal_content, validate_trend_entries

logger = logging.getLogger(__name__)


async def analyze_journal_entry(manager: SessionManager, content: str, date: Optional[str] = None) -> JournalEntry:
    """Analyze one entry and append it to the session's journal history"""
    content = validate_journal_content(content)

    analysis = await llm_service.generate_json(build_journal_analysis_messages(content), JournalAnalysisResult)

    entry = JournalEntry(date=date or utc_now_iso(), content=content, analysis=analysis)
    manager.add_journal_entry(entry.model_dump())
    logger.info(
        f"Journal entry analyzed for session {manager.session_id}: "
        f"sentiment={analysis.sentiment.overall} triggers={len(analysis.triggers)}"
    )
    return entry


def resolve_trend_entries(manager: SessionManager, entries: Optional[List[JournalEntry]]) -> List[JournalEntry]:
    if entries is None:
        entries = [JournalEntry.model_validate(e) for e in manager.get_journal_entries()]
    return validate_trend_entries(entries)


async def analyze_trends(entries: List[JournalEntry]) -> TrendAnalysisResult:
    messages = build_trend_analysis_messages(format_entries_for_trends(entries))
    return await llm_service.generate_json(messages, TrendAnalysisResult)
