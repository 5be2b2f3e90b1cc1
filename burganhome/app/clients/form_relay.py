from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

logger = logging.getLogger(__name__)

SOURCE = "burgan-home-services"
FORM_VERSION = "1.0.0"


@dataclass
class RelayResult:
    success: bool
    webhook_id: Optional[str] = None
    error: Optional[str] = None


class FormRelay:
    """Forwards form submissions to the lead webhook, then its fallback."""

    def __init__(self, url: str = "", fallback_url: str = "", timeout: float = 10.0, http: httpx.Client | None = None):
        self.url = url
        self.fallback_url = fallback_url
        self.timeout = timeout
        self.http = http

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "FormRelay":
        relay = cls(
            config.get("WEBHOOK_URL", ""),
            config.get("FALLBACK_WEBHOOK_URL", ""),
            float(config.get("WEBHOOK_TIMEOUT", 10)),
        )
        if not relay.configured:
            logger.warning("Form webhook not configured. Set WEBHOOK_URL to forward submissions; email only.")
        return relay

    @property
    def configured(self) -> bool:
        return bool(self.url or self.fallback_url)

    def forward(self, payload: Dict[str, Any]) -> RelayResult:
        if not self.configured:
            return RelayResult(success=False, error="No webhook URL configured")

        result = self._post(self.url, payload)
        if not result.success and self.fallback_url:
            logger.warning("Primary webhook failed (%s), trying fallback", result.error)
            result = self._post(self.fallback_url, payload)
        return result

    def _post(self, url: str, payload: Dict[str, Any]) -> RelayResult:
        if not url:
            return RelayResult(success=False, error="No webhook URL configured")

        headers = {"X-Source": SOURCE, "X-Form-Version": FORM_VERSION}
        try:
            if self.http is not None:
                resp = self.http.post(url, json=payload, headers=headers, timeout=self.timeout)
            else:
                resp = httpx.post(url, json=payload, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            return RelayResult(success=False, error=str(exc))

        try:
            data = resp.json()
        except ValueError:
            data = {}
        webhook_id = (data.get("id") or data.get("webhookId")) if isinstance(data, dict) else None
        return RelayResult(success=True, webhook_id=webhook_id)
