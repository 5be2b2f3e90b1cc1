from __future__ import annotations

from flask import Blueprint, abort, current_app, redirect, render_template, request

from burganhome.catalog import get_neighborhoods, get_primary_service_areas, get_related_services
from burganhome.modules.landing.resolver import Resolution, default_resolver
from burganhome.modules.landing.seo import (
    NOT_FOUND_META,
    breadcrumb_schema,
    landing_meta,
    local_business_schema,
    service_schema,
)

bp = Blueprint("landing", __name__)


def render_not_found():
    return render_template("errors/404.html", meta=NOT_FOUND_META), 404


def render_landing(resolution: Resolution):
    service, location = resolution.service, resolution.location
    site_url = current_app.config["SITE_URL"]

    nearby = [
        loc for loc in get_primary_service_areas()
        if loc.id != location.id and loc.state_abbr == location.state_abbr
    ]
    schemas = [
        service_schema(service, site_url, location),
        local_business_schema(service, location, site_url),
        breadcrumb_schema(
            [
                ("Home", "/"),
                ("Services", "/services/" + service.slug),
                (f"{service.short_title} in {location.name}", "/" + resolution.route_key),
            ],
            site_url,
        ),
    ]
    return render_template(
        "landing/location_service.html",
        meta=landing_meta(service, location, site_url),
        schemas=schemas,
        service=service,
        location=location,
        related_services=get_related_services(service.id),
        nearby_locations=nearby,
        neighborhoods=get_neighborhoods(location.id),
    )


@bp.get("/<path:slug>")
def location_service_page(slug: str):
    """GET /<service-slug>-<location-slug> - local SEO landing page."""
    if slug.startswith("api/"):
        abort(404)  # unknown API paths get the JSON 404
    resolver = default_resolver()
    if slug.endswith("/"):
        canonical = resolver.resolve_path(slug.rstrip("/"))
        if canonical is not None:
            target = "/" + canonical.route_key
            if request.query_string:
                target += "?" + request.query_string.decode("utf-8", "replace")
            return redirect(target, code=308)
    resolution = resolver.resolve_path(slug)
    if resolution is None:
        return render_not_found()
    return render_landing(resolution)
