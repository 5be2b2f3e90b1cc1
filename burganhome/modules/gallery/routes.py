from __future__ import annotations

from flask import Blueprint, request

from burganhome.app.common.auth import admin_required
from burganhome.app.common.errors import ApiError, CollaboratorError, abort_json
from burganhome.app.common.validation import FieldChecker, get_json, require_fields
from burganhome.modules.gallery import service

bp = Blueprint("gallery", __name__)


@bp.get("/projects")
def list_projects():
    """GET /api/projects - Before/after gallery, newest first."""
    try:
        projects = service.list_projects()
    except service.GalleryUnavailable:
        return {"items": [], "notice": service.UNAVAILABLE_NOTICE}, 200
    return {"items": [p.to_dict() for p in projects]}, 200


IMAGE_FIELDS = ("before_image", "after_image")


def _image_files():
    """Both uploads, checked before anything is written to the bucket."""
    files = [request.files.get(field) for field in IMAGE_FIELDS]
    missing = [field for field, upload in zip(IMAGE_FIELDS, files) if upload is None or not upload.filename]
    if missing:
        abort_json(400, "validation_error", "Missing required fields: " + ", ".join(missing), {"missing": missing})
    return files


def _upload(upload, prefix: str) -> str:
    try:
        return service.upload_project_image(
            prefix, upload.filename, upload.read(), upload.mimetype or "application/octet-stream"
        )
    except CollaboratorError as exc:
        abort_json(500, "upload_failed", str(exc))


@bp.post("/projects")
@admin_required
def create_project():
    """POST /api/projects - Add a gallery project.

    Accepts JSON with image URLs, or multipart form data with
    `before_image` / `after_image` files that are uploaded to storage first.
    """
    if request.files:
        data = request.form.to_dict()
        require_fields(data, ["title", "category"])
        extra = FieldChecker(data).optional("location").optional("description").validated()
        before_file, after_file = _image_files()
        before_url = _upload(before_file, "before")
        try:
            after_url = _upload(after_file, "after")
        except ApiError:
            service.discard_image(before_url)
            raise
    else:
        data = get_json()
        require_fields(data, ["title", "category", "before_image_url", "after_image_url"])
        extra = FieldChecker(data).optional("location").optional("description").validated()
        before_url = data["before_image_url"]
        after_url = data["after_image_url"]

    project = service.create_project(
        title=str(data["title"]).strip(),
        category=str(data["category"]).strip(),
        location=extra["location"],
        description=extra["description"],
        before_image_url=before_url,
        after_image_url=after_url,
    )
    return project.to_dict(), 201


@bp.delete("/projects/<project_id>")
@admin_required
def delete_project(project_id: str):
    """DELETE /api/projects/<id> - Remove the record, then try to remove its images."""
    project = service.get_project(project_id)
    if not project:
        abort_json(404, "not_found", "Project not found")

    service.delete_project(project)
    return {"message": "deleted", "id": project_id}, 200
