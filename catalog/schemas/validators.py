"""Reusable field validators for request schemas."""

import re
from urllib.parse import urlparse

APP_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-_'.]+$")


def validate_http_url(value: str, label: str = "URL") -> str:
    """Require an absolute http(s) URL with a host."""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"{label} must be a valid URL")
    return value


def validate_app_name(value: str) -> str:
    """Restrict app names to letters, digits, spaces and - _ ' ."""
    if not APP_NAME_PATTERN.match(value):
        raise ValueError("App name contains invalid characters")
    return value


def validate_features(value: list[str]) -> list[str]:
    """At most 10 features, each at most 100 characters."""
    if len(value) > 10:
        raise ValueError("Maximum 10 features allowed")
    cleaned = [feature.strip() for feature in value]
    if any(len(feature) > 100 for feature in cleaned):
        raise ValueError("Each feature must be a string with maximum 100 characters")
    return cleaned
