from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, render_template

from burganhome.app.common.errors import abort_json
from burganhome.app.common.validation import get_json
from burganhome.app.extensions import get_form_relay, get_mailer
from burganhome.modules.forms.payload import contact_payload, quote_payload
from burganhome.modules.forms.schemas import validate_contact, validate_quote

bp = Blueprint("forms", __name__)


def _relayed(payload: Dict[str, Any], label: str) -> bool:
    """Forward to the lead webhook; False means fall back to email."""
    relay = get_form_relay()
    if not relay.configured:
        return False
    result = relay.forward(payload)
    if result.success:
        current_app.logger.info("%s forwarded to webhook (id=%s)", label, result.webhook_id)
        return True
    current_app.logger.warning("%s webhook delivery failed (%s), sending email instead", label, result.error)
    return False


@bp.post("/contact")
def contact():
    """POST /api/contact - Validate, then forward a contact form submission."""
    data = validate_contact(get_json())

    if _relayed(contact_payload(data), "Contact form"):
        return {"message": "Email sent successfully"}, 200

    result = get_mailer().send(
        to=current_app.config["CONTACT_EMAIL"],
        subject=f"New Contact Form Submission from {data['name']}",
        html=render_template("emails/contact.html", submission=data),
        reply_to=data["email"],
    )
    if not result.success:
        current_app.logger.error("Contact form delivery failed: %s", result.error)
        abort_json(500, "delivery_failed", "Failed to send email")

    current_app.logger.info("Contact form sent (id=%s)", result.message_id)
    return {"message": "Email sent successfully"}, 200


@bp.post("/quote")
def quote():
    """POST /api/quote - Validate, then forward a quote request."""
    data = validate_quote(get_json())

    if _relayed(quote_payload(data), "Quote request"):
        return {"message": "Quote request sent successfully"}, 200

    result = get_mailer().send(
        to=current_app.config["QUOTE_EMAIL"],
        subject=f"New Quote Request from {data['name']} - {data['service']}",
        html=render_template("emails/quote.html", submission=data),
        reply_to=data["email"],
    )
    if not result.success:
        current_app.logger.error("Quote request delivery failed: %s", result.error)
        abort_json(500, "delivery_failed", "Failed to send quote request")

    current_app.logger.info("Quote request sent (id=%s)", result.message_id)
    return {"message": "Quote request sent successfully"}, 200
