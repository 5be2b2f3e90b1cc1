from __future__ import annotations

import math
from typing import Tuple

SHOP_LAT, SHOP_LNG = 47.6426, -117.0689
EARTH_RADIUS_MILES = 3959.0
SERVICE_RADIUS_MILES = 20.0


def haversine_miles(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Great-circle distance in miles between two (lat, lng) points."""
    lat1, lng1 = map(math.radians, a)
    lat2, lng2 = map(math.radians, b)
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS_MILES * math.asin(math.sqrt(h))


def distance_from_shop(lat: float, lng: float) -> float:
    return haversine_miles((SHOP_LAT, SHOP_LNG), (lat, lng))


def in_service_area(lat: float, lng: float, radius: float = SERVICE_RADIUS_MILES) -> bool:
    return distance_from_shop(lat, lng) <= radius
