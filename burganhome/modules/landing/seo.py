"""Page metadata and JSON-LD for service and landing pages.

Everything here is a pure function of the catalog records plus the site URL,
so the same pair always produces the same title, description and keywords.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from burganhome.catalog import Location, Service

SITE_NAME = "Burgan Home Services"
PHONE_DISPLAY = "(509) 955-2545"
PHONE_E164 = "+1-509-955-2545"
FOUNDED = 1873
HOME_LAT, HOME_LNG = 47.6587802, -117.4260466


@dataclass
class PageMeta:
    title: str
    description: str = ""
    keywords: List[str] = field(default_factory=list)
    canonical_url: Optional[str] = None
    image: Optional[str] = None
    og_type: str = "website"
    noindex: bool = False

    @property
    def keywords_text(self) -> str:
        return ", ".join(self.keywords)


NOT_FOUND_META = PageMeta(title="Page Not Found", noindex=True)


def landing_title(service: Service, location: Location) -> str:
    return f"{service.short_title} in {location.name}, {location.state_abbr} | {SITE_NAME}"


def landing_description(service: Service, location: Location) -> str:
    return (
        f"Professional {service.short_title.lower()} services in {location.name}, {location.state_abbr}. "
        f"{location.response_time} response time. Licensed, insured, and trusted since {FOUNDED}. "
        f"Call {PHONE_DISPLAY} for free quote!"
    )


def landing_keywords(service: Service, location: Location) -> List[str]:
    short = service.short_title
    return [
        *service.keywords,
        f"{short} {location.name}",
        f"{short} {location.name} {location.state_abbr}",
        f"{location.name} {short}",
        *service.local_keywords,
    ]


def landing_meta(service: Service, location: Location, site_url: str) -> PageMeta:
    return PageMeta(
        title=landing_title(service, location),
        description=landing_description(service, location),
        keywords=landing_keywords(service, location),
        canonical_url=f"{site_url}/{service.slug}-{location.slug}",
        image=service.hero_image,
    )


def service_meta(service: Service, site_url: str) -> PageMeta:
    return PageMeta(
        title=f"{service.title} | {SITE_NAME}",
        description=service.meta_description,
        keywords=list(service.keywords),
        canonical_url=f"{site_url}/services/{service.slug}",
        image=service.hero_image,
    )


# --- JSON-LD ---

def service_schema(service: Service, site_url: str, location: Optional[Location] = None, today: Optional[date] = None) -> Dict[str, Any]:
    url = f"{site_url}/{service.slug}-{location.slug}" if location else f"{site_url}/services/{service.slug}"
    if location:
        area: Dict[str, Any] = {"@type": "City", "name": location.name, "addressRegion": location.state_abbr}
    else:
        area = {
            "@type": "GeoCircle",
            "geoMidpoint": {"@type": "GeoCoordinates", "latitude": HOME_LAT, "longitude": HOME_LNG},
            "geoRadius": "50 miles",
        }
    return {
        "@context": "https://schema.org",
        "@type": "Service",
        "@id": f"{url}#service",
        "name": f"{service.short_title} in {location.name}, {location.state_abbr}" if location else service.title,
        "description": service.description,
        "provider": {
            "@type": "GeneralContractor",
            "@id": f"{site_url}/#organization",
            "name": SITE_NAME,
            "telephone": PHONE_E164,
            "address": {
                "@type": "PostalAddress",
                "addressLocality": "Spokane",
                "addressRegion": "WA",
                "addressCountry": "US",
            },
        },
        "areaServed": area,
        "serviceType": service.short_title,
        "offers": {
            "@type": "Offer",
            "priceRange": service.price_range,
            "availability": "https://schema.org/InStock",
            "validFrom": (today or date.today()).isoformat(),
        },
    }


def local_business_schema(service: Service, location: Location, site_url: str) -> Dict[str, Any]:
    url = f"{site_url}/{service.slug}-{location.slug}"
    return {
        "@context": "https://schema.org",
        "@type": "LocalBusiness",
        "@id": f"{url}#localbusiness",
        "name": f"{SITE_NAME} - {service.short_title} in {location.name}",
        "description": (
            f"Professional {service.short_title.lower()} services in {location.name}, {location.state_abbr}. "
            f"{service.description}"
        ),
        "url": url,
        "telephone": PHONE_E164,
        "address": {
            "@type": "PostalAddress",
            "addressLocality": location.name,
            "addressRegion": location.state_abbr,
            "addressCountry": "US",
        },
        "geo": {"@type": "GeoCoordinates", "latitude": location.lat, "longitude": location.lng},
        "openingHoursSpecification": [
            {
                "@type": "OpeningHoursSpecification",
                "dayOfWeek": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
                "opens": "07:00",
                "closes": "18:00",
            },
            {"@type": "OpeningHoursSpecification", "dayOfWeek": "Saturday", "opens": "08:00", "closes": "16:00"},
        ],
        "priceRange": service.price_range,
        "paymentAccepted": ["Cash", "Check", "Credit Card", "Debit Card"],
        "areaServed": {"@type": "City", "name": location.name, "addressRegion": location.state_abbr},
    }


def breadcrumb_schema(items: Sequence[Tuple[str, str]], site_url: str) -> Dict[str, Any]:
    """`items` are (name, path) pairs from the home page down."""
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": i, "name": name, "item": f"{site_url}{path}"}
            for i, (name, path) in enumerate(items, start=1)
        ],
    }
