"""Authentication and authorization for the UPlayG API."""

from catalog.auth.context import (
    clear_current_user,
    get_current_user,
    set_current_user,
)
from catalog.auth.firebase import (
    FirebaseAuthentication,
    OptionalFirebaseAuthentication,
)
from catalog.auth.permissions import IsAdmin, IsSignedIn
from catalog.auth.principal import FirebaseUser

__all__ = [
    "FirebaseAuthentication",
    "FirebaseUser",
    "IsAdmin",
    "IsSignedIn",
    "OptionalFirebaseAuthentication",
    "clear_current_user",
    "get_current_user",
    "set_current_user",
]
