"""Admin role lookups with a short-lived cache."""

from django.conf import settings
from django.core.cache import cache

import structlog

from catalog.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)

ADMIN_CACHE_PREFIX = "auth:is_admin:"


def is_admin(uid: str) -> bool:
    """Return True when the users table gives ``uid`` the admin role.

    Results are cached for AUTH_ADMIN_CACHE_TTL seconds; role changes made
    through the API call :func:`invalidate_role_cache`.
    """
    cache_key = f"{ADMIN_CACHE_PREFIX}{uid}"
    cached = cache.get(cache_key)
    if cached is not None:
        return bool(cached)

    result = UserRepository.is_admin(uid)
    cache.set(cache_key, result, timeout=settings.AUTH_ADMIN_CACHE_TTL)
    logger.debug("Resolved admin role", uid=uid, is_admin=result)
    return result


def invalidate_role_cache(uid: str) -> None:
    """Drop the cached admin flag for ``uid``."""
    cache.delete(f"{ADMIN_CACHE_PREFIX}{uid}")
