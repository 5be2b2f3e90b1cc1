"""Resolve `/{service-slug}-{location-slug}` landing URLs.

The index of every route key is built once; lookups are a single dict hit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from burganhome.catalog import (
    PRIORITY_LOCATIONS,
    PRIORITY_SERVICES,
    Location,
    Service,
    get_all_locations,
    get_all_services,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    service: Service
    location: Location

    @property
    def route_key(self) -> str:
        return route_key(self.service, self.location)


def route_key(service: Service, location: Location) -> str:
    return f"{service.slug}-{location.slug}"


class RouteResolver:
    def __init__(self, services: Iterable[Service], locations: Iterable[Location]):
        self.services: List[Service] = list(services)
        self.locations: List[Location] = list(locations)
        self._index: Dict[str, Resolution] = {}

        for service in self.services:
            for location in self.locations:
                key = route_key(service, location)
                existing = self._index.get(key)
                if existing is not None:
                    # First declared pair keeps the key.
                    logger.warning(
                        "Duplicate landing route %r: %s/%s shadowed by %s/%s",
                        key,
                        service.id,
                        location.id,
                        existing.service.id,
                        existing.location.id,
                    )
                    continue
                self._index[key] = Resolution(service, location)

    def __len__(self) -> int:
        return len(self._index)

    def resolve(self, segment: str) -> Optional[Resolution]:
        """Exact, case-sensitive match of one path segment."""
        return self._index.get(segment)

    def resolve_path(self, path: str) -> Optional[Resolution]:
        """Resolve a raw URL path; only a single segment can name a landing page."""
        segments = path.split("/")
        if len(segments) != 1:
            return None
        return self.resolve(segments[0])

    def all_route_keys(self) -> List[str]:
        return list(self._index)

    def priority_route_keys(
        self,
        service_slugs: Sequence[str] = PRIORITY_SERVICES,
        location_slugs: Sequence[str] = PRIORITY_LOCATIONS,
    ) -> List[str]:
        """Route keys for the pre-generated subset, skipping any that do not resolve."""
        keys = []
        for service_slug in service_slugs:
            for location_slug in location_slugs:
                key = f"{service_slug}-{location_slug}"
                if key in self._index:
                    keys.append(key)
        return keys


_default: Optional[RouteResolver] = None


def default_resolver() -> RouteResolver:
    """Resolver over the static catalogs, built on first use."""
    global _default
    if _default is None:
        _default = RouteResolver(get_all_services(), get_all_locations())
    return _default
