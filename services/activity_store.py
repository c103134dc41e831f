# services/activity_store.py
import logging
import threading
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from config.settings import settings
from models.activity_models import (
    ManualSessionLog,
    ScrollEvent,
    ScrollSession,
    ScrollSessionSummary,
)
from utils.helpers import calculate_duration, generate_session_id, round_half_up

logger = logging.getLogger(__name__)


class ActivityStore:
    """
    In-memory store for scroll-session event logs and manual session logs.

    A scroll session, or a user's manual logs, is dropped once nothing has been
    recorded for it in retention_hours. Expired entries are purged on write.
    """

    def __init__(self, retention_hours: Optional[float] = None):
        self.retention = timedelta(hours=retention_hours or settings.ACTIVITY_RETENTION_HOURS)
        self._lock = threading.Lock()
        self._sessions: Dict[str, ScrollSession] = {}
        self._manual_logs: Dict[str, List[ManualSessionLog]] = defaultdict(list)
        self._session_seen: Dict[str, datetime] = {}
        self._user_seen: Dict[str, datetime] = {}

    def clear(self):
        with self._lock:
            self._sessions.clear()
            self._manual_logs.clear()
            self._session_seen.clear()
            self._user_seen.clear()

    def purge_expired(self, now: Optional[datetime] = None) -> int:
        with self._lock:
            return self._purge_locked(now or datetime.now(timezone.utc))

    def _purge_locked(self, now: datetime) -> int:
        cutoff = now - self.retention
        stale_sessions = [sid for sid, seen in self._session_seen.items() if seen < cutoff]
        for sid in stale_sessions:
            del self._sessions[sid]
            del self._session_seen[sid]

        stale_users = [uid for uid, seen in self._user_seen.items() if seen < cutoff]
        for uid in stale_users:
            self._manual_logs.pop(uid, None)
            del self._user_seen[uid]

        purged = len(stale_sessions) + len(stale_users)
        if purged:
            logger.info(f"Purged {len(stale_sessions)} scroll sessions and manual logs of {len(stale_users)} users")
        return purged

    # ============== SCROLL SESSION EVENTS ==============

    def log_event(self, session_id: str, event: ScrollEvent, user_id: Optional[str] = None) -> ScrollSession:
        """Append an event, creating the session on first sight"""
        now = datetime.now(timezone.utc)
        with self._lock:
            self._purge_locked(now)
            session = self._sessions.get(session_id)
            if session is None:
                session = ScrollSession(session_id=session_id, user_id=user_id)
                self._sessions[session_id] = session
                logger.info(f"Started scroll session {session_id}")

            session.events.append(event)
            self._session_seen[session_id] = now
            return session

    def get_session(self, session_id: str) -> Optional[ScrollSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def get_user_sessions(self, user_id: str) -> List[ScrollSession]:
        with self._lock:
            return [s for s in self._sessions.values() if s.user_id == user_id]

    def all_sessions(self) -> List[ScrollSession]:
        with self._lock:
            return list(self._sessions.values())

    def aggregate(self) -> dict:
        with self._lock:
            sessions = list(self._sessions.values())
            total_events = sum(len(s.events) for s in sessions)
        return {
            "total_sessions": len(sessions),
            "total_events": total_events,
            "average_events_per_session": round_half_up(total_events / len(sessions)) if sessions else 0,
        }

    # ============== MANUAL LOGS ==============

    def add_manual_log(self, user_id: str, **fields) -> ManualSessionLog:
        log = ManualSessionLog(id=generate_session_id("log"), user_id=user_id, **fields)
        now = datetime.now(timezone.utc)
        with self._lock:
            self._purge_locked(now)
            self._manual_logs[user_id].append(log)
            self._user_seen[user_id] = now
        return log

    def get_manual_logs(self, user_id: str) -> List[ManualSessionLog]:
        with self._lock:
            return list(self._manual_logs.get(user_id, []))


def session_duration_seconds(session: ScrollSession) -> int:
    if not session.events:
        return 0
    return calculate_duration(session.start_time, session.events[-1].timestamp)["total_seconds"]


def summarize_session(session: ScrollSession) -> ScrollSessionSummary:
    scroll_events = [e for e in session.events if e.type == "scroll"]
    pause_events = [e for e in session.events if e.type == "pause"]

    average_depth = 0.0
    if scroll_events:
        average_depth = sum(e.scroll_depth or 0 for e in scroll_events) / len(scroll_events)

    return ScrollSessionSummary(
        duration=session_duration_seconds(session),
        scroll_count=len(scroll_events),
        pause_count=len(pause_events),
        average_scroll_depth=round_half_up(average_depth, 2),
    )


# Create global instance
activity_store = ActivityStore()
