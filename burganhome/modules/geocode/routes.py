from __future__ import annotations

from flask import Blueprint, current_app, request

from burganhome.app.clients.geocoder import AddressNotFound, GeocodingError
from burganhome.app.common.errors import NotConfiguredError, abort_json
from burganhome.app.extensions import get_geocoder
from burganhome.modules.geocode.service_area import SERVICE_RADIUS_MILES, distance_from_shop

bp = Blueprint("geocode", __name__)


def _lookup(address: str):
    """Geocode or answer with the matching error; returns the provider payload."""
    try:
        return get_geocoder().geocode(address)
    except AddressNotFound:
        return None
    except NotConfiguredError:
        current_app.logger.warning("Geocoding requested but GOOGLE_MAPS_API_KEY is not set")
        abort_json(500, "geocoding_unavailable", "Geocoding service not configured")
    except GeocodingError as exc:
        current_app.logger.error("Geocoding failed for %r: %s", address, exc)
        abort_json(500, "geocoding_failed", str(exc), {"status": exc.status} if exc.status else None)


def _address_param() -> str:
    address = (request.args.get("address") or "").strip()
    if not address:
        abort_json(400, "validation_error", "Address is required")
    return address


@bp.get("/geocode")
def geocode():
    """GET /api/geocode?address=... - Proxy to the Google Geocoding API."""
    address = _address_param()
    data = _lookup(address)
    if data is None:
        return {"error": "Address not found", "results": []}, 404
    return data, 200


@bp.get("/service-area")
def service_area():
    """GET /api/service-area?address=... - Is the address inside our service radius?"""
    address = _address_param()
    data = _lookup(address)
    if data is None:
        return {"error": "Address not found", "results": []}, 404

    top = data["results"][0]
    point = top["geometry"]["location"]
    distance = distance_from_shop(point["lat"], point["lng"])
    return {
        "address": top.get("formatted_address", address),
        "lat": point["lat"],
        "lng": point["lng"],
        "distance_miles": round(distance, 1),
        "radius_miles": SERVICE_RADIUS_MILES,
        "in_service_area": distance <= SERVICE_RADIUS_MILES,
    }, 200
