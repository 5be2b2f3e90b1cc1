# SMOKE-001: health endpoint
def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


# SMOKE-002: API index lists mounted modules
def test_api_index(client):
    r = client.get("/api")
    assert r.status_code == 200
    assert "endpoints" in r.json
    assert "/contact" in r.json["endpoints"]["forms"]
    assert "webhooks" not in r.json["endpoints"]


# SMOKE-003: every response carries the security headers
def test_security_headers(client):
    for path in ("/", "/health", "/api", "/nonexistent-slug"):
        r = client.get(path)
        assert r.headers["X-Frame-Options"] == "DENY"
        assert r.headers["X-Content-Type-Options"] == "nosniff"
        assert r.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
        assert "*.supabase.co" in r.headers["Content-Security-Policy"]
        assert "Permissions-Policy" in r.headers


# SMOKE-004: request id is echoed and shows up in JSON errors
def test_request_id_echo(client):
    r = client.get("/api/does-not-exist", headers={"X-Request-ID": "abc-123"})
    assert r.status_code == 404
    assert r.headers["X-Request-ID"] == "abc-123"
    assert r.json["error"]["request_id"] == "abc-123"
    assert r.json["error"]["code"] == "not_found"


# SMOKE-005: a fresh request id is generated when none is sent
def test_request_id_generated(client):
    r = client.get("/health")
    assert len(r.headers["X-Request-ID"]) == 36
