import logging

from burganhome.app.factory import create_app
from burganhome.app.models import BlogPost
from conftest import TestConfig

AUTH = {"Authorization": "Bearer hook-secret"}
POST = {
    "title": "Spring Exterior Painting Tips!",
    "content": "Spokane springs are short. " * 20,
    "category": "Seasonal Tips",
}


# BLOG-001: missing or wrong bearer token is rejected
def test_webhook_requires_secret(client):
    assert client.post("/api/blog/webhook", json=POST).status_code == 401
    r = client.post("/api/blog/webhook", json=POST, headers={"Authorization": "Bearer wrong"})
    assert r.status_code == 401
    assert r.json["error"]["code"] == "unauthorized"


# BLOG-002: without a configured secret every call is rejected
def test_webhook_without_configured_secret(app, client):
    app.config["BLOG_WEBHOOK_SECRET"] = ""
    r = client.post("/api/blog/webhook", json=POST, headers={"Authorization": "Bearer "})
    assert r.status_code == 401


# BLOG-003: title, content and category are required
def test_webhook_required_fields(client):
    r = client.post("/api/blog/webhook", json={"title": "Only"}, headers=AUTH)
    assert r.status_code == 400
    assert r.json["error"]["details"]["missing"] == ["content", "category"]


# BLOG-004: defaults are derived from the title and content
def test_webhook_creates_post(app, client):
    r = client.post("/api/blog/webhook", json=POST, headers=AUTH)
    assert r.status_code == 200
    assert r.json["success"] is True
    assert r.json["message"] == "Blog post created successfully"

    data = r.json["data"]
    assert data["slug"] == "spring-exterior-painting-tips"
    assert data["excerpt"] == POST["content"][:200] + "..."
    assert data["meta_description"] == POST["content"][:160]
    assert data["author"] == "Burgan Home Services"
    assert data["status"] == "published"
    assert data["published_at"] is not None
    assert r.json["url"] == "https://example.test/blog/spring-exterior-painting-tips"

    assert client.get("/blog/spring-exterior-painting-tips").status_code == 200


# BLOG-005: explicit fields win over defaults
def test_webhook_explicit_fields(client):
    r = client.post(
        "/api/blog/webhook",
        json={**POST, "slug": "custom", "excerpt": "Short.", "tags": ["paint"], "status": "draft"},
        headers=AUTH,
    )
    data = r.json["data"]
    assert data["slug"] == "custom"
    assert data["meta_description"] == "Short."
    assert data["meta_keywords"] == ["paint"]
    assert data["published_at"] is None
    assert client.get("/blog/custom").status_code == 404


# BLOG-006: a taken slug is retried once with a suffix
def test_webhook_duplicate_slug(app, client):
    first = client.post("/api/blog/webhook", json=POST, headers=AUTH)
    second = client.post("/api/blog/webhook", json=POST, headers=AUTH)
    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json["data"]["slug"].startswith("spring-exterior-painting-tips-")
    with app.app_context():
        assert BlogPost.query.count() == 2


# BLOG-007: unknown status is rejected
def test_webhook_bad_status(client):
    r = client.post("/api/blog/webhook", json={**POST, "status": "scheduled"}, headers=AUTH)
    assert r.status_code == 400


# BLOG-008: GET describes how to call the webhook
def test_webhook_usage(client):
    r = client.get("/api/blog/webhook")
    assert r.status_code == 200
    assert r.json["usage"]["method"] == "POST"
    assert "Seasonal Tips" in r.json["categories"]


class NoSecretConfig(TestConfig):
    BLOG_WEBHOOK_SECRET = ""


# BLOG-009: a missing secret is reported once at startup
def test_missing_secret_warns_at_startup(caplog):
    with caplog.at_level(logging.WARNING):
        create_app(NoSecretConfig)
    assert "Set BLOG_WEBHOOK_SECRET" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING):
        create_app(TestConfig)
    assert "BLOG_WEBHOOK_SECRET" not in caplog.text
