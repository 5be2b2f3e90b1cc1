from __future__ import annotations

from flask import Blueprint

from burganhome.app.extensions import db
from burganhome.app.models import BlogCategory, Project
from burganhome.modules.blog.service import WEBHOOK_CATEGORIES, slugify
from burganhome.modules.landing.resolver import default_resolver

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("init-db")
def init_db() -> None:
    """Create tables."""
    db.create_all()
    print("DB initialized (tables created).")


@cli_bp.cli.command("seed")
def seed_data() -> None:
    """Seed blog categories and a couple of demo gallery projects.

    Safe to run multiple times; it will no-op if data exists.
    """
    db.create_all()

    if BlogCategory.query.count() == 0:
        db.session.add_all(BlogCategory(name=name, slug=slugify(name)) for name in WEBHOOK_CATEGORIES)

    if Project.query.count() == 0:
        db.session.add_all([
            Project(
                title="South Hill Bathroom Refresh",
                category="Bathroom Remodel",
                location="South Hill, Spokane",
                description="Tub-to-shower conversion with new tile and vanity.",
                before_image_url="https://images.unsplash.com/photo-1584622650111-993a426fbf0a",
                after_image_url="https://images.unsplash.com/photo-1552321554-5fefe8c9ef14",
            ),
            Project(
                title="Spokane Valley Exterior Repaint",
                category="Exterior Painting",
                location="Spokane Valley, WA",
                description="Full prep, prime and two coats on cedar siding.",
                before_image_url="https://images.unsplash.com/photo-1570129477492-45c003edd2be",
                after_image_url="https://images.unsplash.com/photo-1568605114967-8130f3a36994",
            ),
        ])

    db.session.commit()
    print("Seed complete.")


@cli_bp.cli.command("static-paths")
def static_paths() -> None:
    """Print the landing pages worth pre-rendering or warming in a CDN."""
    for key in default_resolver().priority_route_keys():
        print(f"/{key}")
