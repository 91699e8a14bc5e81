"""Authenticated principal built from verified ID token claims."""

from typing import Any


class FirebaseUser:
    """Caller identity for requests carrying a valid ID token.

    Not a Django user model; a container for the token claims plus a lazily
    resolved admin flag backed by the users table.
    """

    def __init__(
        self,
        uid: str,
        email: str | None = None,
        name: str | None = None,
        picture: str | None = None,
        email_verified: bool = False,
    ):
        """Initialize the principal.

        Args:
            uid: Identity-provider user id
            email: Email claim
            name: Display name, defaulting to the local part of the email
            picture: Avatar URL claim
            email_verified: Whether the provider verified the email
        """
        self.id = uid
        self.uid = uid
        self.email = email
        self.name = name or (email.split("@")[0] if email else None)
        self.picture = picture
        self.email_verified = email_verified
        self.is_authenticated = True
        self._is_admin: bool | None = None

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "FirebaseUser":
        """Build a principal from decoded token claims."""
        return cls(
            uid=claims.get("user_id") or claims["sub"],
            email=claims.get("email"),
            name=claims.get("name"),
            picture=claims.get("picture"),
            email_verified=bool(claims.get("email_verified", False)),
        )

    @property
    def is_admin(self) -> bool:
        """Whether the caller holds the admin role (resolved once per request)."""
        if self._is_admin is None:
            from catalog.auth.roles import is_admin  # noqa: PLC0415

            self._is_admin = is_admin(self.uid)
        return self._is_admin

    def __str__(self):
        """String representation."""
        return f"FirebaseUser(uid={self.uid}, email={self.email})"
