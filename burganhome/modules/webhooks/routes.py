"""Development-only endpoint for checking that outbound webhooks reach us.

Registered only when ENABLE_WEBHOOK_TEST is set.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, request

bp = Blueprint("webhooks", __name__)


@bp.post("/webhook-test")
def receive():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.get_data(as_text=True)
    current_app.logger.info(
        "Webhook test received: content_type=%s keys=%s",
        request.content_type,
        sorted(payload.keys()) if isinstance(payload, dict) else type(payload).__name__,
    )
    return {
        "success": True,
        "message": "Webhook received successfully",
        "webhookId": f"webhook_{int(time.time() * 1000)}",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }, 200


@bp.get("/webhook-test")
def ready():
    return {
        "message": "Webhook test endpoint is ready",
        "method": "POST",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }, 200
