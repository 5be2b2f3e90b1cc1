from __future__ import annotations

import hmac

from flask import Blueprint, current_app, render_template, request
from sqlalchemy.exc import SQLAlchemyError

from burganhome.app.common.errors import abort_json
from burganhome.app.common.validation import get_json, require_fields
from burganhome.modules.blog import service
from burganhome.modules.landing.routes import render_not_found
from burganhome.modules.landing.seo import SITE_NAME, PageMeta

bp = Blueprint("blog", __name__)
api_bp = Blueprint("blog_api", __name__)


# --- pages ---
@bp.get("/blog")
def index():
    notice = None
    try:
        posts = service.list_published()
    except service.BlogUnavailable:
        posts, notice = [], "Blog posts are temporarily unavailable."
    meta = PageMeta(
        title=f"Blog | Home Improvement Tips & Guides | {SITE_NAME}",
        description=f"Expert home improvement tips, maintenance guides, and project showcases from {SITE_NAME} in Spokane, WA.",
        canonical_url=f"{current_app.config['SITE_URL']}/blog",
    )
    return render_template(
        "blog/index.html",
        meta=meta,
        posts=posts,
        categories=service.list_categories(),
        notice=notice,
    )


@bp.get("/blog/<slug>")
def post(slug: str):
    try:
        item = service.get_published(slug)
    except SQLAlchemyError:
        current_app.logger.exception("Failed to load blog post %s", slug)
        item = None
    if item is None:
        return render_not_found()

    meta = PageMeta(
        title=f"{item.title} | {SITE_NAME}",
        description=item.meta_description or item.excerpt or item.content[:160],
        keywords=list(item.meta_keywords or []),
        canonical_url=f"{current_app.config['SITE_URL']}/blog/{item.slug}",
        image=item.featured_image_url,
        og_type="article",
    )
    return render_template("blog/post.html", meta=meta, post=item)


# --- webhook ---
def _authorized() -> bool:
    secret = current_app.config.get("BLOG_WEBHOOK_SECRET")
    if not secret:
        current_app.logger.warning("BLOG_WEBHOOK_SECRET is not set; rejecting blog webhook call")
        return False
    header = request.headers.get("Authorization", "")
    return hmac.compare_digest(header, f"Bearer {secret}")


@api_bp.post("/blog/webhook")
def create_post():
    """POST /api/blog/webhook - Publish a post from an external writer (bearer token)."""
    if not _authorized():
        abort_json(401, "unauthorized", "Unauthorized")

    body = get_json()
    require_fields(body, ["title", "content", "category"])
    status = body.get("status") or "published"
    if status not in service.STATUSES:
        abort_json(400, "validation_error", "status must be one of: " + ", ".join(service.STATUSES))

    try:
        item = service.save_post(service.build_post(body))
    except SQLAlchemyError as exc:
        current_app.logger.error("Failed to create blog post: %s", exc)
        abort_json(500, "blog_create_failed", "Failed to create blog post", {"reason": str(exc.__class__.__name__)})

    return {
        "success": True,
        "message": "Blog post created successfully",
        "data": item.to_dict(),
        "url": f"{current_app.config['SITE_URL']}/blog/{item.slug}",
    }, 200


@api_bp.get("/blog/webhook")
def webhook_usage():
    """GET /api/blog/webhook - Usage info for whoever wires up the webhook."""
    return {
        "message": "Blog webhook endpoint is active",
        "usage": {
            "method": "POST",
            "headers": {
                "Authorization": "Bearer <BLOG_WEBHOOK_SECRET>",
                "Content-Type": "application/json",
            },
            "body": {
                "required": {
                    "title": "Blog post title",
                    "content": "Blog post content (supports markdown)",
                    "category": "Category name (e.g., Home Improvement)",
                },
                "optional": {
                    "slug": "custom-url-slug",
                    "excerpt": "Short description",
                    "tags": ["tag1", "tag2"],
                    "author": "Author name",
                    "featured_image_url": "https://example.com/image.jpg",
                    "meta_description": "SEO description",
                    "meta_keywords": ["keyword1", "keyword2"],
                    "status": "published | draft | archived",
                },
            },
        },
        "categories": service.WEBHOOK_CATEGORIES,
    }, 200
