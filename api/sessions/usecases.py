# api/sessions/usecases.py
from typing import Optional

from models.activity_models import ManualSessionLog, ScrollEvent
from services.activity_store import activity_store, session_duration_seconds, summarize_session
from .schemas import LogEventRequest, LogEventResponse, ManualLogRequest


def log_scroll_event(body: LogEventRequest) -> LogEventResponse:
    event = ScrollEvent(**body.event.model_dump())
    session = activity_store.log_event(body.session_id, event, user_id=body.user_id)

    return LogEventResponse(
        session_id=session.session_id,
        event_count=len(session.events),
        session_duration=session_duration_seconds(session),
    )


def get_session_detail(session_id: str) -> Optional[dict]:
    session = activity_store.get_session(session_id)
    if session is None:
        return None
    return {
        "session": session.model_dump(mode="json"),
        "summary": summarize_session(session).model_dump(),
    }


def get_user_session_list(user_id: str) -> dict:
    sessions = activity_store.get_user_sessions(user_id)
    return {
        "sessions": [
            {
                "session_id": s.session_id,
                "start_time": s.start_time.isoformat(),
                "event_count": len(s.events),
                "summary": summarize_session(s).model_dump(),
            }
            for s in sessions
        ],
        "total_sessions": len(sessions),
    }


def create_manual_log(body: ManualLogRequest) -> ManualSessionLog:
    return activity_store.add_manual_log(**body.model_dump())


def list_manual_logs(user_id: str) -> list:
    return [log.model_dump(mode="json") for log in activity_store.get_manual_logs(user_id)]
