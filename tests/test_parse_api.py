from fastapi.testclient import TestClient

from quickadd.main import app


def test_parse_endpoint_returns_parsed_task():
    with TestClient(app) as client:
        payload = {"text": "Call mom tomorrow !! #family", "now": "2024-03-01T09:30:00-07:00"}
        r = client.post("/parse", json=payload)
        assert r.status_code == 200, r.text
        data = r.json()
        assert data["title"] == "Call mom"
        assert data["priority"] == "medium"
        assert data["tag_names"] == ["family"]
        assert data["repeat_frequency"] is None
        assert data["is_someday"] is False
        assert data["due_date"].startswith("2024-03-02T00:00:00")


def test_parse_endpoint_empty_text():
    with TestClient(app) as client:
        r = client.post("/parse", json={"text": ""})
        assert r.status_code == 200
        data = r.json()
        assert data == {
            "title": "",
            "due_date": None,
            "priority": "none",
            "tag_names": [],
            "repeat_frequency": None,
            "is_someday": False,
        }


def test_parse_endpoint_rejects_bad_body():
    with TestClient(app) as client:
        r = client.post("/parse", json={"text": 42})
        assert r.status_code == 422


def test_health_and_root():
    with TestClient(app) as client:
        assert client.get("/health").json() == {"ok": True}
        assert client.get("/").json()["service"] == "quickadd"
