import httpx
import pytest

from burganhome.app.clients.geocoder import AddressNotFound, Geocoder, GeocodingError
from burganhome.app.common.errors import NotConfiguredError
from burganhome.modules.geocode.service_area import SHOP_LAT, SHOP_LNG, distance_from_shop, haversine_miles


def geocode_payload(formatted, lat, lng):
    return {
        "status": "OK",
        "results": [
            {
                "formatted_address": formatted,
                "geometry": {"location": {"lat": lat, "lng": lng}},
            }
        ],
    }


@pytest.fixture()
def geocoder(app):
    geocoder = app.extensions["geocoder"]
    geocoder.responses = {
        "Spokane Valley, WA": geocode_payload("Spokane Valley, WA, USA", 47.6732281, -117.2393748),
        "Seattle, WA": geocode_payload("Seattle, WA, USA", 47.6062, -122.3321),
    }
    return geocoder


# GEO-001: address is required
def test_geocode_requires_address(client):
    r = client.get("/api/geocode")
    assert r.status_code == 400
    assert r.json["error"]["message"] == "Address is required"


# GEO-002: provider payload is passed through
def test_geocode_ok(client, geocoder):
    r = client.get("/api/geocode", query_string={"address": "Spokane Valley, WA"})
    assert r.status_code == 200
    assert r.json["status"] == "OK"
    assert geocoder.calls == ["Spokane Valley, WA"]


# GEO-003: no results
def test_geocode_not_found(client, geocoder):
    r = client.get("/api/geocode", query_string={"address": "Atlantis"})
    assert r.status_code == 404
    assert r.json == {"error": "Address not found", "results": []}


# GEO-004: provider errors and missing key are 500s
@pytest.mark.parametrize("error", [GeocodingError("Geocoding service error", "REQUEST_DENIED"), NotConfiguredError("no key")])
def test_geocode_errors(client, geocoder, error):
    geocoder.error = error
    r = client.get("/api/geocode", query_string={"address": "Spokane"})
    assert r.status_code == 500


# GEO-005: service area check
def test_service_area(client, geocoder):
    inside = client.get("/api/service-area", query_string={"address": "Spokane Valley, WA"})
    assert inside.status_code == 200
    assert inside.json["in_service_area"] is True
    assert inside.json["radius_miles"] == 20

    outside = client.get("/api/service-area", query_string={"address": "Seattle, WA"})
    assert outside.json["in_service_area"] is False
    assert outside.json["distance_miles"] > 200


# GEO-006: haversine distance
def test_haversine():
    assert haversine_miles((47.0, -117.0), (47.0, -117.0)) == 0
    assert haversine_miles((47.0, -117.0), (48.0, -117.0)) == pytest.approx(69.1, abs=0.1)
    assert distance_from_shop(SHOP_LAT, SHOP_LNG) == 0


def mock_geocoder(payload):
    def handler(request):
        assert request.url.params["key"] == "test-key"
        return httpx.Response(200, json=payload)

    return Geocoder(api_key="test-key", http=httpx.Client(transport=httpx.MockTransport(handler)))


# GEO-007: client maps provider statuses
def test_geocoder_client_statuses():
    ok = geocode_payload("Spokane, WA, USA", 47.65, -117.42)
    assert mock_geocoder(ok).geocode("Spokane")["status"] == "OK"

    with pytest.raises(AddressNotFound):
        mock_geocoder({"status": "ZERO_RESULTS", "results": []}).geocode("nowhere")

    with pytest.raises(GeocodingError) as excinfo:
        mock_geocoder({"status": "REQUEST_DENIED", "results": []}).geocode("Spokane")
    assert excinfo.value.status == "REQUEST_DENIED"


# GEO-008: transport failures and a missing key
def test_geocoder_client_failures():
    def boom(request):
        raise httpx.ConnectError("connection refused")

    geocoder = Geocoder(api_key="k", http=httpx.Client(transport=httpx.MockTransport(boom)))
    with pytest.raises(GeocodingError):
        geocoder.geocode("Spokane")

    with pytest.raises(NotConfiguredError):
        Geocoder(api_key="").geocode("Spokane")
