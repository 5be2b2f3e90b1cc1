from __future__ import annotations

from xml.sax.saxutils import escape as xml_escape

from flask import Blueprint, current_app, render_template

from burganhome.catalog import (
    get_all_services,
    get_locations_by_type,
    get_primary_service_areas,
    get_related_services,
    get_service_by_slug,
)
from burganhome.modules.blog import service as blog
from burganhome.modules.gallery import service as gallery
from burganhome.modules.landing.resolver import default_resolver
from burganhome.modules.landing.routes import render_not_found
from burganhome.modules.landing.seo import (
    PHONE_DISPLAY,
    SITE_NAME,
    PageMeta,
    breadcrumb_schema,
    service_meta,
    service_schema,
)

bp = Blueprint("pages", __name__)

HOME_GALLERY_LIMIT = 6


def _site_url() -> str:
    return current_app.config["SITE_URL"]


@bp.get("/")
def home():
    notice = None
    try:
        projects = gallery.list_projects()[:HOME_GALLERY_LIMIT]
    except gallery.GalleryUnavailable:
        projects, notice = [], gallery.UNAVAILABLE_NOTICE

    meta = PageMeta(
        title=f"{SITE_NAME} | Spokane Remodeling, Painting & Handyman Services",
        description=(
            f"Spokane's trusted home improvement contractor. Bathroom and kitchen remodeling, "
            f"interior and exterior painting, and handyman services. Call {PHONE_DISPLAY} for a free quote."
        ),
        keywords=["Spokane home improvement", "Spokane remodeling", "Spokane painting", "Spokane handyman"],
        canonical_url=_site_url(),
    )
    return render_template(
        "pages/home.html",
        meta=meta,
        services=get_all_services(),
        service_areas=get_primary_service_areas(),
        projects=projects,
        notice=notice,
    )


@bp.get("/services/<slug>")
def service_page(slug: str):
    service = get_service_by_slug(slug)
    if service is None:
        return render_not_found()

    site_url = _site_url()
    schemas = [
        service_schema(service, site_url),
        breadcrumb_schema([("Home", "/"), ("Services", "/#services"), (service.title, f"/services/{service.slug}")], site_url),
    ]
    return render_template(
        "pages/service.html",
        meta=service_meta(service, site_url),
        schemas=schemas,
        service=service,
        related_services=get_related_services(service.id),
        service_areas=get_primary_service_areas(),
    )


@bp.get("/service-areas")
def service_areas():
    meta = PageMeta(
        title=f"Service Areas | {SITE_NAME}",
        description="Home improvement services across Spokane, Spokane Valley, Liberty Lake and the Inland Northwest.",
        canonical_url=f"{_site_url()}/service-areas",
    )
    return render_template(
        "pages/service_areas.html",
        meta=meta,
        cities=get_locations_by_type("city"),
        suburbs=get_locations_by_type("suburb"),
        neighborhoods=get_locations_by_type("neighborhood"),
        services=get_all_services(),
    )


@bp.get("/privacy")
def privacy():
    meta = PageMeta(title=f"Privacy Policy | {SITE_NAME}", canonical_url=f"{_site_url()}/privacy")
    return render_template("pages/privacy.html", meta=meta)


@bp.get("/terms")
def terms():
    meta = PageMeta(title=f"Terms of Service | {SITE_NAME}", canonical_url=f"{_site_url()}/terms")
    return render_template("pages/terms.html", meta=meta)


# --- crawlers ---
def sitemap_entry(url: str, changefreq: str = "weekly", priority: str = "0.6", lastmod=None) -> str:
    lines = ["  <url>", f"    <loc>{xml_escape(url)}</loc>"]
    if lastmod:
        lines.append(f"    <lastmod>{lastmod.strftime('%Y-%m-%dT%H:%M:%SZ')}</lastmod>")
    lines.append(f"    <changefreq>{changefreq}</changefreq>")
    lines.append(f"    <priority>{priority}</priority>")
    lines.append("  </url>")
    return "\n".join(lines)


@bp.get("/sitemap.xml")
def sitemap_xml():
    site_url = _site_url()
    entries = [
        sitemap_entry(f"{site_url}/", priority="1.0"),
        sitemap_entry(f"{site_url}/service-areas", priority="0.8"),
        sitemap_entry(f"{site_url}/blog", priority="0.7"),
        sitemap_entry(f"{site_url}/privacy", changefreq="yearly", priority="0.3"),
        sitemap_entry(f"{site_url}/terms", changefreq="yearly", priority="0.3"),
    ]
    for service in get_all_services():
        entries.append(sitemap_entry(f"{site_url}/services/{service.slug}", priority="0.9"))

    resolver = default_resolver()
    priority_keys = set(resolver.priority_route_keys())
    for key in resolver.all_route_keys():
        entries.append(
            sitemap_entry(f"{site_url}/{key}", changefreq="monthly", priority="0.8" if key in priority_keys else "0.6")
        )

    try:
        for post in blog.list_published():
            entries.append(
                sitemap_entry(
                    f"{site_url}/blog/{post.slug}",
                    changefreq="monthly",
                    priority="0.6",
                    lastmod=post.updated_at or post.published_at,
                )
            )
    except blog.BlogUnavailable:
        current_app.logger.warning("Sitemap built without blog posts")

    body = "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
        *entries,
        "</urlset>",
    ])
    response = current_app.response_class(body, mimetype="application/xml")
    response.headers["Cache-Control"] = "public, max-age=3600"
    return response


@bp.get("/robots.txt")
def robots_txt():
    body = "\n".join([
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin",
        "Disallow: /api/",
        "",
        f"Sitemap: {_site_url()}/sitemap.xml",
        "",
    ])
    response = current_app.response_class(body, mimetype="text/plain")
    response.headers["Cache-Control"] = "public, max-age=3600"
    return response
