from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List

from flask import request

from burganhome.app.common.errors import abort_json, abort_validation

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$")


def get_json() -> Dict[str, Any]:
    if not request.is_json:
        abort_json(400, "invalid_json", "Request must be application/json")
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        abort_json(400, "invalid_json", "Malformed JSON body")
    return data


def require_fields(data: Dict[str, Any], fields: Iterable[str]) -> None:
    missing = [f for f in fields if not data.get(f)]
    if missing:
        abort_json(
            400,
            "validation_error",
            "Missing required fields: " + ", ".join(missing),
            {"missing": missing},
        )


class FieldChecker:
    """Collects field-level errors for one payload, then raises them together.

    Each check records at most one error per field; the first failing rule wins.
    """

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self.errors: List[Dict[str, str]] = []
        self.cleaned: Dict[str, Any] = {}

    def _failed(self, field: str) -> bool:
        return any(e["field"] == field for e in self.errors)

    def _text(self, field: str) -> str | None:
        value = self.data.get(field)
        if value is None:
            return None
        if not isinstance(value, str):
            self.errors.append({"field": field, "message": f"{field} must be a string"})
            return None
        return value.strip()

    def min_length(self, field: str, length: int, message: str) -> "FieldChecker":
        value = self._text(field)
        if self._failed(field):
            return self
        if value is None or len(value) < length:
            self.errors.append({"field": field, "message": message})
        else:
            self.cleaned[field] = value
        return self

    def email(self, field: str, message: str) -> "FieldChecker":
        value = self._text(field)
        if self._failed(field):
            return self
        if not value or not EMAIL_REGEX.match(value):
            self.errors.append({"field": field, "message": message})
        else:
            self.cleaned[field] = value
        return self

    def optional(self, field: str) -> "FieldChecker":
        value = self._text(field)
        if not self._failed(field):
            self.cleaned[field] = value or None
        return self

    def validated(self) -> Dict[str, Any]:
        if self.errors:
            abort_validation(self.errors)
        return self.cleaned
