"""Admin guard.

Sign-in itself is done by the hosted identity provider; we only remember the
provider's user and access token in the Flask session.
"""

from functools import wraps
from typing import Callable, TypeVar, Any

from flask import redirect, request, session, url_for
from burganhome.app.common.errors import abort_json

F = TypeVar("F", bound=Callable[..., Any])

SESSION_KEY = "admin"


def current_admin() -> dict | None:
    return session.get(SESSION_KEY)


def admin_required(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not current_admin():
            if request.path.startswith("/api/"):
                abort_json(401, "unauthorized", "Authentication required")
            return redirect(url_for("admin.login"))
        return fn(*args, **kwargs)

    return wrapper  # type: ignore
