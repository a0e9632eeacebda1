"""
API tests: health and score endpoints against the scenario graph.
"""


def test_health_reports_graph(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["engine_ready"] is True
    assert body["anchor"] == "Kevin Bacon"
    assert body["graph"] == {"actors": 3, "movies": 2, "memberships": 4}


def test_score_found(client):
    resp = client.get("/score", params={"actor": "Russell Crowe"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "found"
    assert body["score"] == 2
    assert body["path"] is None


def test_score_with_path(client):
    resp = client.get("/score", params={"actor": "Russell Crowe", "path": True})
    body = resp.json()
    assert [(h["from_actor"], h["movie"], h["to_actor"]) for h in body["path"]] == [
        ("Kevin Bacon", "X-Men", "Ed Harris"),
        ("Ed Harris", "A Beautiful Mind", "Russell Crowe"),
    ]


def test_score_anchor_itself(client):
    body = client.get("/score", params={"actor": "Kevin Bacon", "path": True}).json()
    assert body["score"] == 0
    assert body["path"] == []


def test_unknown_actor_is_404_with_suggestions(client):
    resp = client.get("/score", params={"actor": "Russel Crowe"})
    assert resp.status_code == 404
    detail = resp.json()["detail"]
    assert detail["message"] == "Actor not found"
    assert "Russell Crowe" in detail["suggestions"]


def test_missing_anchor_gives_no_bacon(dataset_file):
    from fastapi.testclient import TestClient
    import api

    api.init_driver(dataset_file, anchor_name="Nobody")
    try:
        body = TestClient(api.app).get("/score", params={"actor": "Ed Harris"}).json()
    finally:
        api.DRIVER = None
    assert body["status"] == "no_bacon"
    assert body["score"] is None


def test_score_without_graph_is_503():
    from fastapi.testclient import TestClient
    import api

    api.DRIVER = None
    resp = TestClient(api.app).get("/score", params={"actor": "Ed Harris"})
    assert resp.status_code == 503
