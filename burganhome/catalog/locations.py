"""Service-area catalog. Declaration order is the order pages and the route resolver see."""

from __future__ import annotations

from typing import Dict, List, Optional

from burganhome.catalog.models import Location

_LOCATIONS = [
    Location(
        id="spokane",
        slug="spokane-wa",
        name="Spokane",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=230160,
        type="city",
        lat=47.6587802,
        lng=-117.4260466,
        distance=0,
        response_time="30-60 minutes",
        service_availability="primary",
        popular_services=("bathroom-remodeling", "kitchen-remodeling", "interior-painting", "exterior-painting"),
        zip_codes=(
            "99201", "99202", "99203", "99204", "99205", "99207", "99208", "99209", "99210", "99212",
            "99213", "99214", "99216", "99217", "99218", "99219", "99220", "99223", "99224",
        ),
        description=(
            "Spokane is the largest city in Eastern Washington and the heart of the Inland Northwest. "
            "Known for its beautiful parks, historic architecture, and vibrant downtown, Spokane offers diverse "
            "housing from historic homes to modern developments."
        ),
        meta_description=(
            "Professional home services in Spokane, WA. Bathroom & kitchen remodeling, painting, repairs, and "
            "handyman services. Serving all Spokane neighborhoods since 1873."
        ),
    ),
    Location(
        id="spokane-valley",
        slug="spokane-valley-wa",
        name="Spokane Valley",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=102976,
        type="suburb",
        lat=47.6732281,
        lng=-117.2393748,
        distance=10,
        response_time="45-75 minutes",
        service_availability="primary",
        popular_services=("kitchen-remodeling", "bathroom-remodeling", "exterior-painting", "handyman-services"),
        zip_codes=("99016", "99037", "99206", "99211", "99212", "99214", "99216"),
        description=(
            "Spokane Valley is the largest suburb of Spokane, offering suburban living with easy access to urban "
            "amenities. The area features newer homes, excellent schools, and abundant shopping, making it popular "
            "with families."
        ),
        meta_description=(
            "Home services in Spokane Valley, WA. Kitchen & bathroom remodeling, painting, and repairs. Trusted "
            "local contractor serving the Valley since 1873."
        ),
    ),
    Location(
        id="liberty-lake",
        slug="liberty-lake-wa",
        name="Liberty Lake",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=12003,
        type="suburb",
        lat=47.6631742,
        lng=-117.0855254,
        distance=15,
        response_time="45-90 minutes",
        service_availability="primary",
        popular_services=("bathroom-remodeling", "kitchen-remodeling", "interior-painting", "trim-painting"),
        zip_codes=("99016", "99019"),
        description=(
            "Liberty Lake is one of Washington's fastest-growing communities, known for its beautiful lake, outdoor "
            "recreation, and high quality of life. The area features newer, upscale homes and a strong sense of "
            "community."
        ),
        meta_description=(
            "Premium home services in Liberty Lake, WA. Luxury bathroom & kitchen remodeling, custom painting, and "
            "quality repairs. Your local contractor since 1873."
        ),
    ),
    Location(
        id="cheney",
        slug="cheney-wa",
        name="Cheney",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=13255,
        type="city",
        lat=47.4873899,
        lng=-117.5757869,
        distance=17,
        response_time="60-90 minutes",
        service_availability="secondary",
        popular_services=("handyman-services", "home-repairs", "interior-painting", "exterior-painting"),
        zip_codes=("99004",),
        description=(
            "Cheney is home to Eastern Washington University and offers small-town charm with easy access to "
            "Spokane. The community features historic homes, student housing, and growing residential neighborhoods."
        ),
        meta_description=(
            "Reliable home services in Cheney, WA. Student housing repairs, home maintenance, painting, and "
            "remodeling. Serving EWU and Cheney residents since 1873."
        ),
    ),
    Location(
        id="airway-heights",
        slug="airway-heights-wa",
        name="Airway Heights",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=10757,
        type="suburb",
        lat=47.6446442,
        lng=-117.5932756,
        distance=10,
        response_time="45-75 minutes",
        service_availability="primary",
        popular_services=("home-repairs", "handyman-services", "exterior-painting", "bathroom-remodeling"),
        zip_codes=("99001", "99022"),
        description=(
            "Airway Heights serves the Fairchild Air Force Base community and has experienced rapid growth. The area "
            "offers affordable housing and is becoming an entertainment destination with casinos and recreation."
        ),
        meta_description=(
            "Home services in Airway Heights, WA. Military family friendly, flexible scheduling, quality repairs and "
            "remodeling. Serving Fairchild AFB area since 1873."
        ),
    ),
    Location(
        id="deer-park",
        slug="deer-park-wa",
        name="Deer Park",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=4500,
        type="city",
        lat=47.9543351,
        lng=-117.4768903,
        distance=20,
        response_time="60-90 minutes",
        service_availability="secondary",
        popular_services=("exterior-painting", "home-repairs", "handyman-services", "kitchen-remodeling"),
        zip_codes=("99006",),
        description=(
            "Deer Park offers rural living with small-town charm north of Spokane. The community features historic "
            "buildings, agricultural properties, and is gateway to outdoor recreation areas."
        ),
        meta_description=(
            "Home services in Deer Park, WA. Rural property repairs, farmhouse remodeling, weather protection, and "
            "maintenance. Your local contractor since 1873."
        ),
    ),
    Location(
        id="medical-lake",
        slug="medical-lake-wa",
        name="Medical Lake",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=4816,
        type="city",
        lat=47.5682183,
        lng=-117.6821681,
        distance=16,
        response_time="60-90 minutes",
        service_availability="secondary",
        popular_services=("handyman-services", "interior-painting", "bathroom-remodeling", "home-repairs"),
        zip_codes=("99022",),
        description=(
            "Medical Lake is a historic resort town known for its mineral lake and quiet lifestyle. The community "
            "offers affordable housing and small-town atmosphere close to Spokane."
        ),
        meta_description=(
            "Home services in Medical Lake, WA. Lake home repairs, historic property restoration, painting, and "
            "remodeling. Trusted local contractor since 1873."
        ),
    ),
    Location(
        id="coeur-dalene",
        slug="coeur-dalene-id",
        name="Coeur d'Alene",
        state="Idaho",
        state_abbr="ID",
        county="Kootenai County",
        population=54628,
        type="city",
        lat=47.6776832,
        lng=-116.7804664,
        distance=33,
        response_time="75-120 minutes",
        service_availability="extended",
        popular_services=("kitchen-remodeling", "bathroom-remodeling", "interior-painting", "trim-painting"),
        zip_codes=("83814", "83815", "83816"),
        description=(
            "Coeur d'Alene is a premier resort city on the shores of Lake Coeur d'Alene. Known for luxury homes, "
            "outdoor recreation, and natural beauty, it attracts residents seeking an active, upscale lifestyle."
        ),
        meta_description=(
            "Premium home services in Coeur d'Alene, ID. Luxury remodeling, custom painting, and quality repairs. "
            "Serving North Idaho since 1873."
        ),
    ),
    Location(
        id="post-falls",
        slug="post-falls-id",
        name="Post Falls",
        state="Idaho",
        state_abbr="ID",
        county="Kootenai County",
        population=38485,
        type="suburb",
        parent_location="coeur-dalene",
        lat=47.7176808,
        lng=-116.9515703,
        distance=25,
        response_time="60-90 minutes",
        service_availability="secondary",
        popular_services=("handyman-services", "interior-painting", "bathroom-remodeling", "kitchen-remodeling"),
        zip_codes=("83854", "83877"),
        description=(
            "Post Falls is one of Idaho's fastest-growing cities, offering affordable housing between Spokane and "
            "Coeur d'Alene. The community features new developments, river access, and excellent shopping."
        ),
        meta_description=(
            "Home services in Post Falls, ID. New home improvements, repairs, painting, and remodeling. Your trusted "
            "North Idaho contractor since 1873."
        ),
    ),
    Location(
        id="south-hill",
        slug="south-hill-spokane",
        name="South Hill",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=45000,
        type="neighborhood",
        parent_location="spokane",
        lat=47.6287,
        lng=-117.4020,
        distance=3,
        response_time="30-45 minutes",
        service_availability="primary",
        popular_services=("kitchen-remodeling", "bathroom-remodeling", "interior-painting", "trim-painting"),
        zip_codes=("99203", "99223", "99202"),
        description=(
            "Spokane's South Hill is known for its historic homes, tree-lined streets, and stunning city views. This "
            "affluent area features some of Spokane's most desirable neighborhoods and excellent schools."
        ),
        meta_description=(
            "Premium home services in South Hill Spokane. Historic home restoration, luxury remodeling, and expert "
            "painting. Your neighborhood contractor since 1873."
        ),
    ),
    Location(
        id="north-side",
        slug="north-side-spokane",
        name="North Side",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=55000,
        type="neighborhood",
        parent_location="spokane",
        lat=47.7001,
        lng=-117.4260,
        distance=5,
        response_time="30-45 minutes",
        service_availability="primary",
        popular_services=("handyman-services", "exterior-painting", "bathroom-remodeling", "home-repairs"),
        zip_codes=("99205", "99207", "99208", "99218"),
        description=(
            "Spokane's North Side offers diverse neighborhoods from historic Garland District to newer Five Mile "
            "Prairie developments. The area provides affordable family living with excellent amenities."
        ),
        meta_description=(
            "Home services in North Spokane. Reliable repairs, remodeling, painting for Nevada Heights, Garland, Five "
            "Mile areas. Local contractor since 1873."
        ),
    ),
    Location(
        id="kendall-yards",
        slug="kendall-yards-spokane",
        name="Kendall Yards",
        state="Washington",
        state_abbr="WA",
        county="Spokane County",
        population=3000,
        type="neighborhood",
        parent_location="spokane",
        lat=47.6666,
        lng=-117.4383,
        distance=2,
        response_time="20-30 minutes",
        service_availability="primary",
        popular_services=("interior-painting", "bathroom-remodeling", "kitchen-remodeling", "handyman-services"),
        zip_codes=("99201",),
        description=(
            "Kendall Yards is Spokane's premier urban village, offering sustainable living with modern amenities "
            "along the Spokane River. This walkable community features new construction and high-end finishes."
        ),
        meta_description=(
            "Modern home services in Kendall Yards Spokane. Contemporary remodeling, eco-friendly improvements, urban "
            "living solutions. Your local expert since 1873."
        ),
    ),
]

LOCATIONS: Dict[str, Location] = {loc.id: loc for loc in _LOCATIONS}

PRIORITY_LOCATIONS = (
    "spokane-wa",
    "spokane-valley-wa",
    "liberty-lake-wa",
    "south-hill-spokane",
    "north-side-spokane",
)


def get_location_by_slug(slug: str) -> Optional[Location]:
    return next((loc for loc in LOCATIONS.values() if loc.slug == slug), None)


def get_all_locations() -> List[Location]:
    return list(LOCATIONS.values())


def get_primary_service_areas() -> List[Location]:
    return [loc for loc in LOCATIONS.values() if loc.service_availability == "primary"]


def get_locations_by_type(type_: str) -> List[Location]:
    return [loc for loc in LOCATIONS.values() if loc.type == type_]


def get_neighborhoods(city_id: str) -> List[Location]:
    return [loc for loc in LOCATIONS.values() if loc.type == "neighborhood" and loc.parent_location == city_id]
