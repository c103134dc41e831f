# shared/session_manager.py
import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from flask import request, session

from config.settings import settings
from lib.questions import get_question, get_total_question_count
from models.assessment_models import AssessmentResponse, AssessmentResult, PredictiveProfile
from shared.exceptions import InvalidResponseError

logger = logging.getLogger(__name__)

session_managers: Dict[str, "SessionManager"] = {}
_sessions_lock = threading.Lock()


# Session Management
class SessionManager:
    """Per-visitor assessment state held in memory"""

    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.created_at = datetime.now(timezone.utc)
        self.last_active = self.created_at
        self.context = {
            "current_phase": "assessment",
            "responses": {},
            "result": None,
            "profile": None,
            "suggestions": None,
            "journal_entries": [],
        }

    def touch(self):
        self.last_active = datetime.now(timezone.utc)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now - self.last_active > timedelta(hours=settings.SESSION_TIMEOUT_HOURS)

    def record_response(self, response: AssessmentResponse):
        """Store one answer; a later answer to the same question replaces the earlier one"""
        if get_question(response.question_id) is None:
            raise InvalidResponseError(f"Unknown question id: {response.question_id}")

        self.context["responses"][response.question_id] = response
        self.touch()

    def get_responses(self) -> List[AssessmentResponse]:
        return list(self.context["responses"].values())

    def get_progress(self) -> dict:
        answered = len(self.context["responses"])
        total = get_total_question_count()
        return {
            "answered": answered,
            "total": total,
            "percentage": int(answered * 100 / total) if total else 0,
            "complete": answered >= total,
        }

    def store_result(self, result: AssessmentResult, profile: PredictiveProfile):
        self.context["result"] = result
        self.context["profile"] = profile
        self.context["suggestions"] = None
        self.context["current_phase"] = "completed"
        self.touch()

    def get_result(self) -> Optional[AssessmentResult]:
        return self.context["result"]

    def get_profile(self) -> Optional[PredictiveProfile]:
        return self.context["profile"]

    def add_journal_entry(self, entry: dict):
        self.context["journal_entries"].append(entry)
        self.touch()

    def get_journal_entries(self) -> List[dict]:
        return list(self.context["journal_entries"])


def purge_expired_sessions() -> int:
    """Drop sessions idle longer than SESSION_TIMEOUT_HOURS"""
    now = datetime.now(timezone.utc)
    with _sessions_lock:
        expired = [sid for sid, manager in list(session_managers.items()) if manager.is_expired(now)]
        for sid in expired:
            del session_managers[sid]

    if expired:
        logger.info(f"Purged {len(expired)} expired sessions")
    return len(expired)


def register_session(session_id: Optional[str] = None) -> SessionManager:
    """Return the manager for session_id, creating it if it is not registered"""
    with _sessions_lock:
        manager = session_managers.get(session_id) if session_id else None
        if manager is None:
            manager = SessionManager(session_id)
            session_managers[manager.session_id] = manager
            logger.debug(f"Created session {manager.session_id}")
        else:
            manager.touch()
        return manager


def get_or_create_session() -> SessionManager:
    """Get or create session manager"""
    purge_expired_sessions()

    session_id = (
        request.args.get('session_id') or
        request.headers.get('X-Session-ID') or
        ((request.get_json(silent=True) or {}).get('session_id') if request.is_json else None) or
        session.get('session_id')
    )

    manager = register_session(session_id)
    if manager.session_id != session.get('session_id'):
        session['session_id'] = manager.session_id
    return manager
