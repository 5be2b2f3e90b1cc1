from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import resend

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None


class Mailer:
    """Sends HTML mail through the hosted email API."""

    def __init__(self, api_key: str = "", sender: str = ""):
        self.api_key = api_key
        self.sender = sender

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Mailer":
        mailer = cls(config.get("RESEND_API_KEY", ""), config.get("EMAIL_FROM", ""))
        if not mailer.configured:
            logger.warning("Email service not configured. Set RESEND_API_KEY in environment variables.")
        return mailer

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def send(self, to: str, subject: str, html: str, reply_to: Optional[str] = None) -> DeliveryResult:
        if not self.configured:
            logger.warning("Email service not configured; dropping message %r", subject)
            return DeliveryResult(success=False, error="Email service not configured")

        params: dict = {
            "from": self.sender,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        if reply_to:
            params["reply_to"] = reply_to

        resend.api_key = self.api_key
        try:
            sent = resend.Emails.send(params)
        except Exception as exc:  # resend raises ResendError subclasses and transport errors
            logger.error("Failed to send email %r: %s", subject, exc)
            return DeliveryResult(success=False, error=str(exc))

        return DeliveryResult(success=True, message_id=sent.get("id") if isinstance(sent, dict) else None)
