def test_health(client) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_response_headers(client) -> None:
    resp = client.get("/health")
    assert "X-Process-Time-ms" in resp.headers
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"


def test_json_errors_outside_htmx(client) -> None:
    resp = client.get("/api/orgs/123")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Organization not found"}
