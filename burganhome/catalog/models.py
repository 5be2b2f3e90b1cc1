from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ProcessStep:
    step: int
    title: str
    description: str


@dataclass(frozen=True)
class Faq:
    question: str
    answer: str


@dataclass(frozen=True)
class Service:
    id: str
    slug: str
    title: str
    short_title: str
    description: str
    meta_description: str
    hero_image: str
    icon: str
    price_range: str  # $ | $$ | $$$ | $$$$
    duration: str
    benefits: Tuple[str, ...] = ()
    process: Tuple[ProcessStep, ...] = ()
    faqs: Tuple[Faq, ...] = ()
    related_services: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    local_keywords: Tuple[str, ...] = ()
    common_issues: Tuple[str, ...] = ()
    seasonal_considerations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Location:
    id: str
    slug: str
    name: str
    state: str
    state_abbr: str
    county: str
    population: int
    type: str  # city | suburb | neighborhood
    lat: float
    lng: float
    distance: int  # miles from Spokane
    response_time: str
    service_availability: str  # primary | secondary | extended
    description: str
    meta_description: str
    parent_location: Optional[str] = None
    popular_services: Tuple[str, ...] = ()
    zip_codes: Tuple[str, ...] = field(default=())
