import pytest
import resend

from burganhome.app.clients.hosted_backend import HostedBackend
from burganhome.app.clients.mailer import Mailer
from burganhome.app.common.errors import NotConfiguredError


# CLIENT-001: mailer passes the message to the email API
def test_mailer_sends(monkeypatch):
    captured = {}

    def fake_send(params):
        captured.update(params)
        return {"id": "email_123"}

    monkeypatch.setattr(resend.Emails, "send", fake_send)
    result = Mailer(api_key="re_test", sender="Site <noreply@example.test>").send(
        to="owner@example.test", subject="Hello", html="<p>Hi</p>", reply_to="visitor@example.test"
    )

    assert result.success is True
    assert result.message_id == "email_123"
    assert captured["to"] == ["owner@example.test"]
    assert captured["reply_to"] == "visitor@example.test"
    assert resend.api_key == "re_test"


# CLIENT-002: provider errors become a failed result
def test_mailer_provider_error(monkeypatch):
    def fake_send(params):
        raise RuntimeError("invalid api key")

    monkeypatch.setattr(resend.Emails, "send", fake_send)
    result = Mailer(api_key="re_bad", sender="x@example.test").send("a@example.test", "s", "<p></p>")
    assert result.success is False
    assert "invalid api key" in result.error


# CLIENT-003: missing API key means no-op with a warning
def test_mailer_not_configured(caplog):
    mailer = Mailer.from_config({"RESEND_API_KEY": "", "EMAIL_FROM": "x@example.test"})
    assert "Email service not configured" in caplog.text
    result = mailer.send("a@example.test", "s", "<p></p>")
    assert result.success is False
    assert result.error == "Email service not configured"


# CLIENT-004: hosted backend without settings refuses to build a client
def test_backend_not_configured(caplog):
    backend = HostedBackend.from_config({"SUPABASE_URL": "", "SUPABASE_ANON_KEY": ""})
    assert backend.configured is False
    assert "Hosted backend is not configured" in caplog.text
    with pytest.raises(NotConfiguredError):
        backend.delete_image("project-images", "x.jpg")
