from __future__ import annotations

from typing import Any, Dict

from burganhome.app.common.validation import FieldChecker


def validate_contact(data: Dict[str, Any]) -> Dict[str, Any]:
    return (
        FieldChecker(data)
        .min_length("name", 2, "Name must be at least 2 characters")
        .email("email", "Invalid email address")
        .optional("phone")
        .min_length("message", 10, "Message must be at least 10 characters")
        .validated()
    )


def validate_quote(data: Dict[str, Any]) -> Dict[str, Any]:
    return (
        FieldChecker(data)
        .min_length("name", 2, "Name must be at least 2 characters")
        .email("email", "Invalid email address")
        .min_length("phone", 10, "Phone number is required")
        .min_length("service", 1, "Service is required")
        .min_length("propertyType", 1, "Property type is required")
        .min_length("urgency", 1, "Urgency is required")
        .optional("budget")
        .min_length("message", 10, "Message must be at least 10 characters")
        .validated()
    )
