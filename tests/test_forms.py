from burganhome.app.clients.mailer import Mailer

CONTACT = {
    "name": "Jane Homeowner",
    "email": "jane@example.test",
    "phone": "509-555-0100",
    "message": "Our bathroom fan stopped working last week.",
}

QUOTE = {
    "name": "Sam Builder",
    "email": "sam@example.test",
    "phone": "5095550199",
    "service": "Kitchen Remodeling",
    "propertyType": "Single-family home",
    "urgency": "Within a month",
    "budget": "$15k-$25k",
    "message": "Looking to replace cabinets and counters.",
}


def field_names(response):
    return [f["field"] for f in response.json["error"]["details"]["fields"]]


# FORM-001: valid contact form is emailed to the contact inbox
def test_contact_success(client, mailer):
    r = client.post("/api/contact", json=CONTACT)
    assert r.status_code == 200
    assert r.json == {"message": "Email sent successfully"}

    assert len(mailer.sent) == 1
    sent = mailer.sent[0]
    assert sent["to"] == "contact@example.test"
    assert sent["subject"] == "New Contact Form Submission from Jane Homeowner"
    assert sent["reply_to"] == "jane@example.test"
    assert "Our bathroom fan stopped working" in sent["html"]


# FORM-002: short message is rejected before any email is attempted
def test_contact_short_message(client, mailer):
    r = client.post("/api/contact", json={**CONTACT, "message": "Too short"})
    assert r.status_code == 400
    assert r.json["error"]["code"] == "validation_error"
    assert field_names(r) == ["message"]
    assert mailer.sent == []


# FORM-003: every bad field is reported at once
def test_contact_multiple_errors(client, mailer):
    r = client.post("/api/contact", json={"name": "J", "email": "not-an-email", "message": ""})
    assert r.status_code == 400
    assert field_names(r) == ["name", "email", "message"]
    assert mailer.sent == []


# FORM-004: phone is optional on the contact form
def test_contact_without_phone(client, mailer):
    payload = {k: v for k, v in CONTACT.items() if k != "phone"}
    r = client.post("/api/contact", json=payload)
    assert r.status_code == 200
    assert "Not provided" in mailer.sent[0]["html"]


# FORM-005: submitted text is escaped in the email body
def test_contact_html_escaped(client, mailer):
    r = client.post("/api/contact", json={**CONTACT, "message": "<script>alert(1)</script> please call"})
    assert r.status_code == 200
    assert "<script>" not in mailer.sent[0]["html"]
    assert "&lt;script&gt;" in mailer.sent[0]["html"]


# FORM-006: non-JSON bodies are rejected
def test_contact_requires_json(client, mailer):
    r = client.post("/api/contact", data="name=x")
    assert r.status_code == 400
    assert r.json["error"]["code"] == "invalid_json"
    assert mailer.sent == []


# FORM-007: quote request goes to the quotes inbox
def test_quote_success(client, mailer):
    r = client.post("/api/quote", json=QUOTE)
    assert r.status_code == 200
    assert r.json == {"message": "Quote request sent successfully"}
    sent = mailer.sent[0]
    assert sent["to"] == "quotes@example.test"
    assert sent["subject"] == "New Quote Request from Sam Builder - Kitchen Remodeling"
    assert "Single-family home" in sent["html"]


# FORM-008: quote without phone names the phone field
def test_quote_missing_phone(client, mailer):
    payload = {k: v for k, v in QUOTE.items() if k != "phone"}
    r = client.post("/api/quote", json=payload)
    assert r.status_code == 400
    assert "phone" in field_names(r)
    assert mailer.sent == []


# FORM-009: quote needs service, property type and urgency
def test_quote_required_choices(client, mailer):
    r = client.post("/api/quote", json={**QUOTE, "service": "", "propertyType": "", "urgency": ""})
    assert r.status_code == 400
    assert field_names(r) == ["service", "propertyType", "urgency"]


# FORM-010: delivery failure is a 500
def test_delivery_failure(client, mailer):
    mailer.fail = True
    r = client.post("/api/quote", json=QUOTE)
    assert r.status_code == 500
    assert r.json["error"]["code"] == "delivery_failed"
    assert r.json["error"]["message"] == "Failed to send quote request"


# FORM-011: an unconfigured mailer degrades to a delivery failure
def test_unconfigured_mailer(app, client):
    app.extensions["mailer"] = Mailer(api_key="", sender="noreply@example.test")
    r = client.post("/api/contact", json=CONTACT)
    assert r.status_code == 500
    assert r.json["error"]["message"] == "Failed to send email"


# FORM-012: sixth contact post inside the window is throttled and never emailed
def test_contact_rate_limited(client, mailer):
    for _ in range(5):
        assert client.post("/api/contact", json=CONTACT).status_code == 200

    r = client.post("/api/contact", json=CONTACT)
    assert r.status_code == 429
    assert r.headers["Retry-After"] == "60"
    assert r.json["error"]["code"] == "rate_limited"
    assert len(mailer.sent) == 5

    # Another client still gets through
    r = client.post("/api/contact", json=CONTACT, headers={"X-Forwarded-For": "203.0.113.9, 10.0.0.1"})
    assert r.status_code == 200


# FORM-013: form quota and general API quota are counted separately
def test_form_quota_is_scoped(client):
    for _ in range(5):
        client.post("/api/contact", json=CONTACT)
    assert client.post("/api/quote", json=QUOTE).status_code == 429
    assert client.get("/api/projects").status_code == 200
