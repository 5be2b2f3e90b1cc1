from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

import httpx

from burganhome.app.common.errors import CollaboratorError, NotConfiguredError

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class AddressNotFound(Exception):
    pass


class GeocodingError(CollaboratorError):
    def __init__(self, message: str, status: str | None = None):
        super().__init__(message)
        self.status = status


class Geocoder:
    def __init__(self, api_key: str = "", timeout: float = 10.0, http: httpx.Client | None = None):
        self.api_key = api_key
        self.timeout = timeout
        self.http = http

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Geocoder":
        geocoder = cls(config.get("GOOGLE_MAPS_API_KEY", ""), float(config.get("GEOCODE_TIMEOUT", 10)))
        if not geocoder.configured:
            logger.warning("Geocoding not configured. Set GOOGLE_MAPS_API_KEY to enable /api/geocode.")
        return geocoder

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def geocode(self, address: str) -> Dict[str, Any]:
        """Return the provider payload for a successful lookup.

        Raises AddressNotFound for ZERO_RESULTS and GeocodingError for anything else.
        """
        if not self.configured:
            raise NotConfiguredError("Geocoding service not configured")

        params = {"address": address, "key": self.api_key}
        try:
            if self.http is not None:
                resp = self.http.get(GEOCODE_URL, params=params, timeout=self.timeout)
            else:
                resp = httpx.get(GEOCODE_URL, params=params, timeout=self.timeout)
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise GeocodingError(f"Failed to geocode address: {exc}") from exc

        status = data.get("status")
        if status == "OK" and data.get("results"):
            return data
        if status == "ZERO_RESULTS":
            raise AddressNotFound(address)
        logger.error("Geocoding error: %s %s", status, data.get("error_message"))
        raise GeocodingError("Geocoding service error", status=status)
