from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, g, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from burganhome.app.config import Config
from burganhome.app.extensions import cors, db, get_rate_limiter, init_collaborators, migrate
from burganhome.app.common.auth import current_admin
from burganhome.app.common.errors import ApiError
from burganhome.app.common.rate_limit import limit_for_path
from burganhome.app.common.request_context import client_address, echo_request_id, init_request_id
from burganhome.app.common.security import apply_security_headers
from burganhome.app.api.register import register_api_blueprints
from burganhome.app.cli import cli_bp
from burganhome.modules.admin.routes import bp as admin_bp
from burganhome.modules.blog.routes import bp as blog_bp
from burganhome.modules.landing.routes import bp as landing_bp
from burganhome.modules.pages.routes import bp as pages_bp
from burganhome.modules.landing.seo import NOT_FOUND_META, PHONE_DISPLAY, PHONE_E164, SITE_NAME, PageMeta


def _wants_json() -> bool:
    return request.path == "/api" or request.path.startswith("/api/")


def _error_body(code: str, message: str, details: dict | None = None) -> dict:
    return ApiError(status_code=0, code=code, message=message, details=details).to_dict(g.get("request_id"))


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    # Hosted collaborators + rate limiter
    init_collaborators(app)

    @app.before_request
    def _before_request():
        init_request_id()

        if not request.path.startswith("/api/") or not app.config.get("RATE_LIMIT_ENABLED"):
            return None
        scope, limit, window = limit_for_path(request.path, app.config)
        key = f"{scope}:{client_address()}"
        if get_rate_limiter().hit(key, limit, window):
            return None

        app.logger.warning("Rate limit exceeded for %s on %s", key, request.path)
        response = jsonify(_error_body("rate_limited", "Too many requests. Please try again later."))
        response.status_code = 429
        response.headers["Retry-After"] = str(app.config["RATE_LIMIT_RETRY_AFTER"])
        return response

    @app.after_request
    def _after_request(response):
        apply_security_headers(response)
        return echo_request_id(response)

    # Health endpoint
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    # Blueprints; the landing catch-all only sees paths no other rule claims
    register_api_blueprints(app)
    app.register_blueprint(pages_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(landing_bp)

    # CLI (flask seed, flask init-db, flask static-paths)
    app.register_blueprint(cli_bp)

    @app.context_processor
    def inject_site():
        return {
            "site_name": SITE_NAME,
            "site_url": app.config["SITE_URL"],
            "phone_display": PHONE_DISPLAY,
            "phone_e164": PHONE_E164,
            "current_year": datetime.utcnow().year,
            "admin": current_admin(),
        }

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(g.get("request_id"))), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = err.code or 500
        if _wants_json():
            code = "not_found" if status == 404 else "http_error"
            return jsonify(_error_body(code, err.description, {"name": err.name})), status
        if status == 404:
            return render_template("errors/404.html", meta=NOT_FOUND_META), 404
        return render_template("errors/500.html", meta=PageMeta(title=err.name, noindex=True), error=err), status

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        if _wants_json():
            return jsonify(_error_body("internal_error", "Internal server error")), 500
        return render_template("errors/500.html", meta=PageMeta(title="Something went wrong", noindex=True)), 500

    return app
