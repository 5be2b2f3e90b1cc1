from flask import Flask

from burganhome.modules.blog.routes import api_bp as blog_api_bp
from burganhome.modules.forms.routes import bp as forms_bp
from burganhome.modules.gallery.routes import bp as gallery_bp
from burganhome.modules.geocode.routes import bp as geocode_bp
from burganhome.modules.webhooks.routes import bp as webhooks_bp


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(forms_bp, url_prefix="/api")
    app.register_blueprint(gallery_bp, url_prefix="/api")
    app.register_blueprint(geocode_bp, url_prefix="/api")
    app.register_blueprint(blog_api_bp, url_prefix="/api")

    endpoints = {
        "forms": ["/contact", "/quote"],
        "gallery": ["/projects", "/projects/<id>"],
        "geocode": ["/geocode", "/service-area"],
        "blog": ["/blog/webhook"],
    }

    # Development only
    if app.config.get("ENABLE_WEBHOOK_TEST"):
        app.register_blueprint(webhooks_bp, url_prefix="/api")
        endpoints["webhooks"] = ["/webhook-test"]

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Burgan Home Services API",
            "version": "0.1.0",
            "endpoints": endpoints,
        }, 200
