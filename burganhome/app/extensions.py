from __future__ import annotations

import logging

from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

from burganhome.app.clients.form_relay import FormRelay
from burganhome.app.clients.geocoder import Geocoder
from burganhome.app.clients.hosted_backend import HostedBackend
from burganhome.app.clients.mailer import Mailer
from burganhome.app.common.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

# Singletons (initialized in app factory)
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


def init_collaborators(app: Flask) -> None:
    """Build the per-app collaborator clients and park them in `app.extensions`.

    Tests replace these entries with fakes after `create_app()`.
    """
    app.extensions["rate_limiter"] = RateLimiter(max_keys=app.config["RATE_LIMIT_MAX_KEYS"])
    app.extensions["hosted_backend"] = HostedBackend.from_config(app.config)
    app.extensions["mailer"] = Mailer.from_config(app.config)
    app.extensions["geocoder"] = Geocoder.from_config(app.config)
    app.extensions["form_relay"] = FormRelay.from_config(app.config)

    if not app.config.get("BLOG_WEBHOOK_SECRET"):
        logger.warning("Blog webhook disabled. Set BLOG_WEBHOOK_SECRET to accept posts.")


def get_rate_limiter() -> RateLimiter:
    return current_app.extensions["rate_limiter"]


def get_backend() -> HostedBackend:
    return current_app.extensions["hosted_backend"]


def get_mailer() -> Mailer:
    return current_app.extensions["mailer"]


def get_geocoder() -> Geocoder:
    return current_app.extensions["geocoder"]


def get_form_relay() -> FormRelay:
    return current_app.extensions["form_relay"]
