import threading
from datetime import datetime, timedelta, timezone

from services.activity_store import ActivityStore, activity_store, summarize_session
from models.activity_models import ScrollEvent, ScrollSession


def test_log_events_and_summary(client):
    for event in ({"type": "scroll", "scrollDepth": 40}, {"type": "scroll", "scrollDepth": 60}, {"type": "pause"}):
        res = client.post("/api/v1/sessions/log", json={"sessionId": "s1", "userId": "u1", "event": event})
        assert res.status_code == 200

    assert res.get_json()["data"]["event_count"] == 3

    detail = client.get("/api/v1/sessions/log?sessionId=s1").get_json()["data"]
    assert detail["summary"]["scroll_count"] == 2
    assert detail["summary"]["pause_count"] == 1
    assert detail["summary"]["average_scroll_depth"] == 50.0
    assert detail["session"]["user_id"] == "u1"


def test_log_lookup_by_user_and_aggregate(client):
    client.post("/api/v1/sessions/log", json={"sessionId": "a", "userId": "u1", "event": {"type": "scroll"}})
    client.post("/api/v1/sessions/log", json={"sessionId": "b", "userId": "u2", "event": {"type": "exit"}})
    client.post("/api/v1/sessions/log", json={"sessionId": "b", "event": {"type": "switch_app"}})

    by_user = client.get("/api/v1/sessions/log?userId=u1").get_json()["data"]
    assert by_user["total_sessions"] == 1
    assert by_user["sessions"][0]["session_id"] == "a"

    totals = client.get("/api/v1/sessions/log").get_json()["data"]
    assert totals == {"total_sessions": 2, "total_events": 3, "average_events_per_session": 2}


def test_log_validation(client):
    assert client.post("/api/v1/sessions/log", json={"sessionId": "s", "event": {"type": "zoom"}}).status_code == 400
    assert client.post("/api/v1/sessions/log", json={"event": {"type": "scroll"}}).status_code == 400
    assert client.get("/api/v1/sessions/log?sessionId=missing").status_code == 404


def test_summary_duration_spans_first_to_last_event():
    session = ScrollSession(session_id="t")
    session.events.append(ScrollEvent(type="scroll", scroll_depth=10, timestamp=session.start_time + timedelta(seconds=90)))

    summary = summarize_session(session)
    assert summary.duration == 90
    assert summarize_session(ScrollSession(session_id="empty")).duration == 0


def test_manual_session_logs(client):
    res = client.post("/api/v1/sessions", json={
        "userId": "u1", "duration": 45, "platform": "tiktok", "moodBefore": 6, "moodAfter": 3, "notes": "late night",
    })
    assert res.status_code == 201
    assert res.get_json()["data"]["id"].startswith("log_")

    logs = client.get("/api/v1/sessions?userId=u1").get_json()["data"]
    assert len(logs) == 1
    assert logs[0]["mood_after"] == 3
    assert activity_store.get_manual_logs("u2") == []


def test_manual_session_validation(client):
    assert client.post("/api/v1/sessions", json={"userId": "u1"}).status_code == 400
    assert client.post("/api/v1/sessions", json={"userId": "u1", "duration": 0}).status_code == 400
    assert client.get("/api/v1/sessions").status_code == 400


def test_dashboard_stats(client):
    data = client.get("/api/v1/dashboard/stats?period=7d").get_json()["data"]

    assert data["summary"]["total_assessments"] == 401
    assert data["summary"]["average_score"] == 3.55
    assert data["summary"]["period_days"] == 7
    assert data["severity_breakdown"] == {"low": 5, "moderate": 70, "high": 23, "severe": 1}
    assert len(data["score_distribution"]) == 11
    assert {d["dimension_id"] for d in data["dimension_averages"]} == {
        "behavioral_control", "emotional_wellbeing", "time_management", "daily_functioning", "self_awareness",
    }


def test_dashboard_default_period(client):
    data = client.get("/api/v1/dashboard/stats").get_json()["data"]
    assert data["summary"]["period"] == "30d"
    assert data["summary"]["period_days"] == 30


def test_admin_stats(client):
    data = client.get("/api/v1/dashboard/admin/stats").get_json()["data"]

    assert data["overview"]["total_users"] == 401
    assert data["averages"]["coping"] == 4.16
    assert data["distribution"] == {"low": 22, "moderate": 282, "high": 94, "severe": 3}


def test_activity_store_reads_while_events_are_logged():
    store = ActivityStore()
    errors = []
    done = threading.Event()

    def log_many():
        try:
            for i in range(2000):
                store.log_event(f"s{i}", ScrollEvent(type="scroll", scroll_depth=5), user_id="u1")
        except Exception as e:
            errors.append(e)
        finally:
            done.set()

    worker = threading.Thread(target=log_many)
    worker.start()
    try:
        while not done.is_set():
            store.get_user_sessions("u1")
            store.all_sessions()
            store.aggregate()
    except Exception as e:
        errors.append(e)
    worker.join()

    assert errors == []
    assert store.aggregate()["total_sessions"] == 2000


def test_activity_store_drops_idle_entries():
    store = ActivityStore(retention_hours=1)
    store.log_event("s1", ScrollEvent(type="scroll"), user_id="u1")
    store.add_manual_log("u1", duration=15)
    now = datetime.now(timezone.utc)

    assert store.purge_expired(now + timedelta(minutes=30)) == 0
    assert store.get_session("s1") is not None

    assert store.purge_expired(now + timedelta(hours=2)) == 2
    assert store.get_session("s1") is None
    assert store.get_manual_logs("u1") == []
    assert store.all_sessions() == []
