"""Gallery data access.

The database row is the source of truth: deleting a project always removes the
row, and cleaning its images out of the storage bucket is best-effort.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from burganhome.app.common.errors import CollaboratorError
from burganhome.app.extensions import db, get_backend
from burganhome.app.models import Project

logger = logging.getLogger(__name__)

PROJECT_CATEGORIES = [
    "Kitchen Remodel",
    "Bathroom Remodel",
    "Exterior Painting",
    "Interior Painting",
    "Deck Building",
    "Roof Replacement",
    "Drywall Repair",
    "Siding Installation",
]

UNAVAILABLE_NOTICE = "Our project gallery is temporarily unavailable. Please check back soon."


class GalleryUnavailable(CollaboratorError):
    pass


def list_projects() -> List[Project]:
    """All projects, newest first."""
    try:
        return Project.query.order_by(Project.created_at.desc()).all()
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("Failed to fetch projects: %s", exc)
        raise GalleryUnavailable("Failed to fetch projects") from exc


def get_project(project_id: str) -> Optional[Project]:
    return db.session.get(Project, project_id)


def create_project(
    title: str,
    category: str,
    before_image_url: str,
    after_image_url: str,
    location: Optional[str] = None,
    description: Optional[str] = None,
) -> Project:
    now = datetime.utcnow()
    project = Project(
        title=title,
        category=category,
        location=location,
        description=description,
        before_image_url=before_image_url,
        after_image_url=after_image_url,
        created_at=now,
        updated_at=now,
    )
    db.session.add(project)
    db.session.commit()
    logger.info("Created project %s (%s)", project.id, project.title)
    return project


def image_file_name(url: str) -> str:
    """Bucket object name of a public image URL (its last path segment)."""
    return url.rstrip("/").split("/")[-1] if url else ""


def upload_project_image(prefix: str, original_name: str, data: bytes, content_type: str) -> str:
    """Store one image in the project bucket and return its public URL."""
    extension = original_name.rsplit(".", 1)[-1].lower() if "." in original_name else "jpg"
    file_name = f"{prefix}-{int(time.time() * 1000)}.{extension}"
    bucket = current_app.config["PROJECT_IMAGES_BUCKET"]
    return get_backend().upload_image(bucket, file_name, data, content_type)


def delete_project(project: Project) -> None:
    project_id = project.id
    before_name = image_file_name(project.before_image_url)
    after_name = image_file_name(project.after_image_url)

    db.session.delete(project)
    db.session.commit()
    logger.info("Deleted project %s", project_id)

    bucket = current_app.config["PROJECT_IMAGES_BUCKET"]
    backend = get_backend()
    for label, name in (("before", before_name), ("after", after_name)):
        if not name:
            continue
        try:
            backend.delete_image(bucket, name)
        except CollaboratorError as exc:
            logger.warning("Failed to delete %s image %s: %s", label, name, exc)


def discard_image(url: str) -> None:
    """Best-effort removal of an uploaded image that never made it into a project."""
    name = image_file_name(url)
    if not name:
        return
    try:
        get_backend().delete_image(current_app.config["PROJECT_IMAGES_BUCKET"], name)
    except CollaboratorError as exc:
        logger.warning("Failed to discard orphaned image %s: %s", name, exc)
    else:
        logger.info("Discarded orphaned image %s", name)
