from __future__ import annotations

import logging
import re
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from burganhome.app.common.errors import CollaboratorError
from burganhome.app.extensions import db
from burganhome.app.models import BlogCategory, BlogPost

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Burgan Home Services"
STATUSES = ("published", "draft", "archived")
WEBHOOK_CATEGORIES = [
    "Home Improvement",
    "Maintenance Tips",
    "DIY Guides",
    "Seasonal Tips",
    "Project Showcases",
    "Industry News",
]


class BlogUnavailable(CollaboratorError):
    pass


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
    return slug.strip("-")


def list_published() -> List[BlogPost]:
    try:
        return (
            BlogPost.query.filter_by(status="published")
            .order_by(BlogPost.published_at.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("Error fetching blog posts: %s", exc)
        raise BlogUnavailable("Failed to fetch blog posts") from exc


def list_categories() -> List[BlogCategory]:
    try:
        return BlogCategory.query.order_by(BlogCategory.name.asc()).all()
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("Error fetching categories: %s", exc)
        return []


def get_published(slug: str) -> Optional[BlogPost]:
    return BlogPost.query.filter_by(slug=slug, status="published").first()


def build_post(body: Dict[str, Any]) -> BlogPost:
    """Fill webhook defaults: slug from title, excerpt and meta description from content."""
    title = body["title"]
    content = body["content"]
    excerpt = body.get("excerpt")
    tags = body.get("tags") or []
    status = body.get("status") or "published"

    return BlogPost(
        title=title,
        slug=body.get("slug") or slugify(title),
        content=content,
        category=body["category"],
        excerpt=excerpt or content[:200] + "...",
        tags=tags,
        author=body.get("author") or DEFAULT_AUTHOR,
        featured_image_url=body.get("featured_image_url"),
        meta_description=body.get("meta_description") or excerpt or content[:160],
        meta_keywords=body.get("meta_keywords") or tags,
        status=status,
        published_at=datetime.utcnow() if status == "published" else None,
    )


def save_post(post: BlogPost) -> BlogPost:
    """Insert; on a slug clash retry once with a millisecond suffix."""
    db.session.add(post)
    try:
        db.session.commit()
        return post
    except IntegrityError as exc:
        db.session.rollback()
        logger.warning("Blog slug %r already taken, retrying with suffix: %s", post.slug, exc.orig)

    post.slug = f"{post.slug}-{int(time.time() * 1000)}"
    db.session.add(post)
    db.session.commit()
    return post
