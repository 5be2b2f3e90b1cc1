from burganhome.app.clients.hosted_backend import HostedBackend


def login(client, email="owner@example.test", password="correct-horse"):
    return client.post("/admin", data={"email": email, "password": password})


# ADMIN-001: login form renders and is not indexed
def test_login_form(client):
    r = client.get("/admin")
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'name="password"' in body
    assert "noindex" in body


# ADMIN-002: bad credentials stay on the form
def test_login_invalid(client):
    r = login(client, password="wrong")
    assert r.status_code == 401
    assert "Invalid email or password." in r.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert "admin" not in sess


# ADMIN-003: empty form
def test_login_missing_fields(client):
    r = client.post("/admin", data={"email": "", "password": ""})
    assert r.status_code == 400


# ADMIN-004: good credentials store the provider session and open the dashboard
def test_login_success(client):
    r = login(client)
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/admin/dashboard")
    with client.session_transaction() as sess:
        assert sess["admin"] == {"id": "user-1", "email": "owner@example.test", "access_token": "token-1"}

    r = client.get("/admin/dashboard")
    assert r.status_code == 200
    assert "owner@example.test" in r.get_data(as_text=True)

    # Already signed in: the form forwards to the dashboard
    assert client.get("/admin").status_code == 302


# ADMIN-005: dashboard redirects anonymous visitors to the login form
def test_dashboard_requires_login(client):
    r = client.get("/admin/dashboard")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/admin")


# ADMIN-006: logout clears the session
def test_logout(admin_client):
    r = admin_client.post("/admin/logout")
    assert r.status_code == 302
    with admin_client.session_transaction() as sess:
        assert "admin" not in sess
    assert admin_client.get("/admin/dashboard").status_code == 302


# ADMIN-007: unconfigured identity provider disables login without crashing
def test_login_backend_not_configured(app, client):
    app.extensions["hosted_backend"] = HostedBackend(url="", key="")
    r = login(client)
    assert r.status_code == 500
    assert "Login is currently unavailable." in r.get_data(as_text=True)
