from app.core import config


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_analyze_clean(client, clean_message):
    r = client.post("/analyze", json={"content": clean_message, "scheduled_time": "10:00"})
    assert r.status_code == 200, r.text
    report = r.json()
    assert report["score"] == 100
    assert report["blocked"] is False
    assert report["band"] == "good"
    assert report["issues"] == []


def test_analyze_blocked(client, blocked_message):
    r = client.post("/analyze", json={"content": blocked_message, "scheduled_time": "09:00"})
    assert r.status_code == 200, r.text
    report = r.json()
    assert report["blocked"] is True
    assert report["is_blocked"] is True
    assert report["score"] == 0
    assert report["band"] == "poor"
    assert report["issues"][0]["flagged"] is True


def test_analyze_threat_blocked_at_boundary_only(client):
    r = client.post("/analyze", json={"content": "Finish the slides or else", "scheduled_time": "10:00"})
    report = r.json()
    assert report["is_blocked"] is False
    assert report["blocked"] is True


def test_analyze_requires_content(client):
    r = client.post("/analyze", json={"scheduled_time": "10:00"})
    assert r.status_code == 422


def test_rewrite_with_explicit_suggestions(client):
    suggestion = {
        "kind": "rewrite", "original": "guys", "suggested": "everyone",
        "reason": "inclusive", "category": "respect",
    }
    r = client.post("/rewrite", json={"content": "Thanks guys", "suggestions": [suggestion]})
    assert r.status_code == 200, r.text
    assert r.json()["content"] == "Thanks everyone"


def test_rewrite_applies_engine_suggestions(client):
    r = client.post("/rewrite", json={"content": "that was damn stupid", "scheduled_time": "10:00"})
    assert r.status_code == 200, r.text
    assert r.json()["content"] == "that was unfortunate ineffective"


def test_rewrite_refuses_blocked_message(client, blocked_message):
    r = client.post("/rewrite", json={"content": blocked_message})
    assert r.status_code == 422


def test_apply_single_suggestion(client):
    suggestion = {
        "kind": "addition", "original": "Hi", "suggested": "Hi, thank you!",
        "reason": "appreciation", "category": "mental-health",
    }
    r = client.post("/rewrite/apply", json={"content": "Hi", "suggestion": suggestion})
    assert r.json()["content"] == "Hi, thank you!"


def test_oversized_body_rejected(client):
    r = client.post("/analyze", json={"content": "a" * (config.MAX_BODY_BYTES + 1)})
    assert r.status_code == 413
