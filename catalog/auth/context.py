"""Thread-local access to the authenticated caller."""

import threading

from catalog.auth.principal import FirebaseUser

_security_context = threading.local()


def set_current_user(user: FirebaseUser) -> None:
    """Store the authenticated caller for the current thread."""
    _security_context.user = user


def get_current_user() -> FirebaseUser | None:
    """Return the authenticated caller, or None for anonymous requests."""
    return getattr(_security_context, "user", None)


def clear_current_user() -> None:
    """Forget the caller once the request is done."""
    if hasattr(_security_context, "user"):
        delattr(_security_context, "user")
