"""Standard lead payload sent to the form webhook.

Contact details are pulled out into `contact`; every other submitted field
lands in `serviceDetails`.
"""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from burganhome.app.clients.form_relay import FORM_VERSION
from burganhome.catalog import get_all_services
from burganhome.modules.blog.service import slugify

CONTACT_FIELDS = ("firstName", "lastName", "email", "phone", "address", "city", "state", "zipCode")
EMERGENCY_KEYWORDS = ("emergency", "urgent", "leak", "flood", "asap", "immediately")
URGENT_TIMELINES = ("asap", "within_week")

GENERAL_INQUIRY = ("general-inquiry", "General Inquiry")


def split_name(name: str) -> tuple[str, str]:
    first, _, last = name.strip().partition(" ")
    return first, last.strip()


def quote_service(name: str) -> tuple[str, str]:
    """(id, name) for the quote form's free-text service choice."""
    for service in get_all_services():
        if name in (service.short_title, service.title, service.slug):
            return service.id, service.short_title
    return slugify(name), name


def clean_details(details: Dict[str, Any]) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {}
    for key, value in details.items():
        if value is None or value == "":
            continue
        if isinstance(value, (list, tuple)):
            cleaned[key] = ", ".join(str(v) for v in value) if value else None
        else:
            cleaned[key] = value
    return cleaned


def urgency_of(details: Dict[str, Any]) -> str:
    text = json.dumps(details).lower()
    if any(keyword in text for keyword in EMERGENCY_KEYWORDS):
        return "emergency"
    if details.get("timeline") in URGENT_TIMELINES:
        return "urgent"
    return "normal"


def preferred_contact(data: Dict[str, Any]) -> str:
    if data.get("preferredContact"):
        return data["preferredContact"]
    if data.get("email") and data.get("phone"):
        return "either"
    return "email" if data.get("email") else "phone"


def _label(key: str) -> str:
    spaced = re.sub(r"([A-Z])", r" \1", key).replace("_", " ").strip()
    return spaced[:1].upper() + spaced[1:]


def details_line(details: Dict[str, Any]) -> str:
    parts = []
    for key, value in details.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "Yes" if value else "No"
        elif isinstance(value, (dict, list)):
            value = json.dumps(value)
        parts.append(f"{_label(key)}: {value}")
    return "; ".join(parts)


def summary_text(payload: Dict[str, Any], request_label: str) -> str:
    contact, summary = payload["contact"], payload["summary"]
    name = f"{contact.get('firstName', '')} {contact.get('lastName', '')}".strip()
    text = f"New {payload['service']['name']} {request_label} from {name}"
    if summary["urgency"] == "emergency":
        text = f"EMERGENCY: {text}"
    elif summary["urgency"] == "urgent":
        text = f"URGENT: {text}"
    if contact.get("city"):
        text += f" in {contact['city']}"
    how = "phone or email" if summary["preferredContact"] == "either" else summary["preferredContact"]
    return f"{text}. Contact via {how}."


def build_payload(
    form_type: str,
    data: Dict[str, Any],
    service_id: str,
    service_name: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    fields = dict(data)
    if "name" in fields:
        fields["firstName"], fields["lastName"] = split_name(fields.pop("name") or "")

    contact = {k: v for k, v in fields.items() if k in CONTACT_FIELDS}
    details = clean_details({k: v for k, v in fields.items() if k not in CONTACT_FIELDS})

    payload: Dict[str, Any] = {
        "meta": {
            "timestamp": (now or datetime.now(timezone.utc)).isoformat(),
            "formVersion": FORM_VERSION,
            "source": "website",
            "formType": form_type,
        },
        "service": {"id": service_id, "name": service_name, "category": "home_services"},
        "contact": contact,
        "serviceDetails": details,
        "summary": {
            "urgency": urgency_of(details),
            "preferredContact": preferred_contact(fields),
        },
        "serviceDetailsSummary": details_line(details),
    }
    request_label = "quote request" if form_type == "quote_request" else "message"
    payload["summary"]["text"] = summary_text(payload, request_label)
    return payload


def contact_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    service_id, service_name = GENERAL_INQUIRY
    return build_payload("contact", data, service_id, service_name)


def quote_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    service_id, service_name = quote_service(data["service"])
    return build_payload("quote_request", data, service_id, service_name)
