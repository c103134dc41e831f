from conftest import response_payload


def test_home(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "features" in res.get_json()


def test_unknown_endpoint_returns_json_404(client):
    res = client.get("/api/v1/nowhere")
    assert res.status_code == 404
    assert res.get_json()["status"] == "error"


def test_question_catalog(client):
    res = client.get("/api/v1/assessment/questions")
    data = res.get_json()["data"]

    assert res.status_code == 200
    assert data["total_questions"] == 24
    assert len(data["questions"]) == 24
    assert len(data["dimensions"]) == 5
    assert len(data["constructs"]) == 8
    assert data["scale"]["labels"]["1"] == "Strongly Disagree"
    assert data["scale"]["labels"]["7"] == "Strongly Agree"
    assert [d["id"] for d in data["dimensions"] if d["is_protective"]] == ["self_awareness"]
    assert data["questions"][0] == {
        "id": "q1",
        "text": data["questions"][0]["text"],
        "construct": "frequency",
        "dimension": "time_management",
    }


def test_answer_and_progress(client):
    client.post("/api/v1/assessment/answer", json={"questionId": "q1", "score": 3})
    res = client.post("/api/v1/assessment/answer", json={"questionId": "q1", "score": 5})
    assert res.status_code == 200
    assert res.get_json()["data"]["answered"] == 1

    client.post("/api/v1/assessment/answer", json={"question_id": "q2", "score": 4})
    progress = client.get("/api/v1/assessment/progress").get_json()["data"]
    assert progress["answered"] == 2
    assert progress["total"] == 24
    assert progress["complete"] is False


def test_answer_validation(client):
    assert client.post("/api/v1/assessment/answer", json={"questionId": "q1", "score": 8}).status_code == 400
    assert client.post("/api/v1/assessment/answer", json={"questionId": "q77", "score": 3}).status_code == 400
    assert client.post("/api/v1/assessment/answer", data="q1=3").status_code == 400


def test_submit_responses(client):
    res = client.post("/api/v1/assessment/submit", json={"responses": response_payload(default=4)})
    body = res.get_json()

    assert res.status_code == 200
    data = body["data"]
    assert data["result"]["overall_score"] == 4.0
    assert data["result"]["overall_percentile"] == 70
    assert data["result"]["overall_severity"]["label"] == "Moderate"
    assert data["profile"]["risk_level"] == "elevated"
    assert data["risk_level_label"]["label"] == "Elevated Risk"
    assert data["research_comparison"]["comparison"] == "around"
    assert "70th percentile" in data["interpretation"]


def test_submit_uses_session_answers(client):
    for item in response_payload(default=2, awareness=6):
        client.post("/api/v1/assessment/answer", json=item)

    res = client.post("/api/v1/assessment/submit", json={})
    data = res.get_json()["data"]

    assert res.status_code == 200
    assert data["result"]["overall_score"] == 2.0
    assert data["profile"]["risk_level"] == "minimal"
    assert "healthy" in [p["id"] for p in data["profile"]["predictions"]]


def test_submit_without_answers(client):
    res = client.post("/api/v1/assessment/submit", json={})
    assert res.status_code == 400
    assert res.get_json()["status"] == "error"


def test_submit_unknown_question(client):
    res = client.post("/api/v1/assessment/submit", json={"responses": [{"questionId": "x", "score": 3}]})
    assert res.status_code == 400


def test_results_round_trip(client):
    assert client.get("/api/v1/result/get_results").status_code == 404

    submitted = client.post(
        "/api/v1/assessment/submit", json={"responses": response_payload(default=5, awareness=2)}
    ).get_json()["data"]
    fetched = client.get("/api/v1/result/get_results").get_json()["data"]

    assert fetched["result"] == submitted["result"]
    assert fetched["profile"] == submitted["profile"]


def test_session_header_selects_session(client, app):
    first = client.post("/api/v1/assessment/submit", json={"responses": response_payload(default=4)})
    session_id = first.get_json()["data"]["session_id"]

    other_client = app.test_client()
    res = other_client.get("/api/v1/result/get_results", headers={"X-Session-ID": session_id})
    assert res.status_code == 200
    assert res.get_json()["data"]["session_id"] == session_id
