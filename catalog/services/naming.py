"""Slug and storage filename generation."""

import re
import secrets
import time

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_SLUG_SEPARATOR = re.compile(r"[^a-z0-9]+")


def to_base36(number: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def random_base36(length: int = 6) -> str:
    """Random lowercase base-36 string."""
    return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(length))


def now_ms() -> int:
    """Current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def generate_slug(name: str, timestamp_ms: int | None = None) -> str:
    """Build ``<name-in-kebab-case>-<base36 ms timestamp>``.

    >>> generate_slug("My Cool App!", 0)
    'my-cool-app-0'
    """
    base = _SLUG_SEPARATOR.sub("-", name.strip().lower()).strip("-")
    stamp = to_base36(now_ms() if timestamp_ms is None else timestamp_ms)
    return f"{base}-{stamp}" if base else stamp


def generate_safe_filename(original_name: str, prefix: str = "") -> str:
    """Build ``[prefix_]<ms timestamp>_<6 base36 chars>.<ext>`` for storage.

    The extension is the lower-cased text after the last dot of the
    client-supplied name; nothing else from that name is kept.
    """
    extension = original_name.rsplit(".", 1)[-1].lower() if "." in original_name else ""
    extension = re.sub(r"[^a-z0-9]", "", extension)[:10] or "bin"
    head = f"{prefix}_" if prefix else ""
    return f"{head}{now_ms()}_{random_base36(6)}.{extension}"
