from __future__ import annotations

from flask import Blueprint, current_app, flash, redirect, render_template, request, session, url_for

from burganhome.app.clients.hosted_backend import AuthenticationError
from burganhome.app.common.auth import SESSION_KEY, admin_required, current_admin
from burganhome.app.common.errors import NotConfiguredError
from burganhome.app.extensions import get_backend
from burganhome.modules.gallery import service as gallery
from burganhome.modules.landing.seo import SITE_NAME, PageMeta

bp = Blueprint("admin", __name__, url_prefix="/admin")

LOGIN_META = PageMeta(title=f"Admin Login | {SITE_NAME}", noindex=True)
DASHBOARD_META = PageMeta(title=f"Admin Dashboard | {SITE_NAME}", noindex=True)


@bp.get("")
def login():
    if current_admin():
        return redirect(url_for("admin.dashboard"))
    return render_template("admin/login.html", meta=LOGIN_META)


@bp.post("")
def login_post():
    email = (request.form.get("email") or "").strip().lower()
    password = request.form.get("password") or ""

    if not email or not password:
        flash("Email and password are required.", "error")
        return render_template("admin/login.html", meta=LOGIN_META, email=email), 400

    try:
        signed_in = get_backend().sign_in(email, password)
    except NotConfiguredError:
        current_app.logger.warning("Admin login attempted but the hosted backend is not configured")
        flash("Login is currently unavailable.", "error")
        return render_template("admin/login.html", meta=LOGIN_META, email=email), 500
    except AuthenticationError as exc:
        current_app.logger.info("Admin login failed for %s: %s", email, exc)
        flash("Invalid email or password.", "error")
        return render_template("admin/login.html", meta=LOGIN_META, email=email), 401

    session[SESSION_KEY] = {
        "id": signed_in.user_id,
        "email": signed_in.email,
        "access_token": signed_in.access_token,
    }
    flash("Logged in.", "success")
    return redirect(url_for("admin.dashboard"))


@bp.post("/logout")
def logout():
    session.pop(SESSION_KEY, None)
    flash("Logged out.", "success")
    return redirect(url_for("admin.login"))


@bp.get("/dashboard")
@admin_required
def dashboard():
    notice = None
    try:
        projects = gallery.list_projects()
    except gallery.GalleryUnavailable:
        projects, notice = [], gallery.UNAVAILABLE_NOTICE
    return render_template(
        "admin/dashboard.html",
        meta=DASHBOARD_META,
        projects=projects,
        categories=gallery.PROJECT_CATEGORIES,
        notice=notice,
    )
