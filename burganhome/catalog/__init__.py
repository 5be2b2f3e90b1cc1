from burganhome.catalog.models import Faq, Location, ProcessStep, Service
from burganhome.catalog.services import (
    PRIORITY_SERVICES,
    get_all_services,
    get_related_services,
    get_service_by_slug,
)
from burganhome.catalog.locations import (
    PRIORITY_LOCATIONS,
    get_all_locations,
    get_location_by_slug,
    get_locations_by_type,
    get_neighborhoods,
    get_primary_service_areas,
)

__all__ = [
    "Faq",
    "Location",
    "ProcessStep",
    "Service",
    "PRIORITY_SERVICES",
    "PRIORITY_LOCATIONS",
    "get_all_services",
    "get_related_services",
    "get_service_by_slug",
    "get_all_locations",
    "get_location_by_slug",
    "get_locations_by_type",
    "get_neighborhoods",
    "get_primary_service_areas",
]
