"""Firebase ID token authentication for Django REST Framework.

Supports two verification modes:
1. JWKS: RS256 ID tokens signed by Google's securetoken service (production)
2. Shared secret: HS256 tokens signed with AUTH_JWT_SECRET (local development
   and tests)
"""

from typing import Any, cast

from django.conf import settings
from django.core.cache import cache

import jwt
import requests
import structlog
from rest_framework import authentication, exceptions

from catalog.auth.context import set_current_user
from catalog.auth.principal import FirebaseUser

logger = structlog.get_logger(__name__)

JWKS_CACHE_KEY = "auth:jwks"
JWKS_CACHE_TTL = 60 * 60
INVALID_TOKEN_MESSAGE = "Invalid or expired token. Please sign in again."


def extract_bearer_token(request) -> str | None:
    """Return the bearer token from the Authorization header, if any."""
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    token = auth_header[len("Bearer ") :].strip()
    return token or None


class FirebaseAuthentication(authentication.BaseAuthentication):
    """Bearer ID token authentication.

    Returns None when no bearer token is present so that permission classes
    decide whether anonymous access is allowed; an invalid token always
    fails with 401.
    """

    def authenticate(self, request):
        """Authenticate the request using the bearer ID token.

        Args:
            request: Django request object

        Returns:
            Tuple of (FirebaseUser, token) or None if no token was sent

        Raises:
            AuthenticationFailed: If the token cannot be verified
        """
        token = extract_bearer_token(request)
        if token is None:
            return None

        claims = self.verify_token(token)
        user = FirebaseUser.from_claims(claims)
        set_current_user(user)
        return (user, token)

    def verify_token(self, token: str) -> dict[str, Any]:
        """Verify signature, expiry, audience and issuer of an ID token.

        Args:
            token: Encoded JWT

        Returns:
            Decoded claims

        Raises:
            AuthenticationFailed: If the token is invalid
        """
        try:
            if settings.AUTH_JWT_SECRET:
                claims = jwt.decode(
                    token,
                    settings.AUTH_JWT_SECRET,
                    algorithms=["HS256"],
                    audience=settings.AUTH_JWT_AUDIENCE,
                    issuer=settings.AUTH_JWT_ISSUER,
                    options={"require": ["exp", "sub"]},
                )
            else:
                signing_key = self._get_signing_key(token)
                claims = jwt.decode(
                    token,
                    signing_key,
                    algorithms=["RS256"],
                    audience=settings.AUTH_JWT_AUDIENCE,
                    issuer=settings.AUTH_JWT_ISSUER,
                    options={"require": ["exp", "iat", "sub"]},
                )
        except jwt.ExpiredSignatureError as e:
            logger.info("ID token has expired")
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE) from e
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid ID token", error=str(e))
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE) from e

        if not claims.get("sub"):
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE)
        return cast("dict[str, Any]", claims)

    def _get_signing_key(self, token: str) -> Any:
        """Resolve the public key matching the token's ``kid`` header."""
        kid = jwt.get_unverified_header(token).get("kid")
        if not kid:
            raise jwt.InvalidTokenError("Token header has no kid")

        jwk_set = jwt.PyJWKSet.from_dict(self._get_jwks())
        for key in jwk_set.keys:
            if key.key_id == kid:
                return key.key
        raise jwt.InvalidTokenError(f"No signing key found for kid {kid}")

    def _get_jwks(self) -> dict[str, Any]:
        """Fetch the signing key set, cached for JWKS_CACHE_TTL seconds."""
        cached = cache.get(JWKS_CACHE_KEY)
        if cached:
            return cast("dict[str, Any]", cached)

        try:
            logger.debug("Fetching token signing keys", url=settings.AUTH_JWKS_URL)
            response = requests.get(settings.AUTH_JWKS_URL, timeout=5)
            response.raise_for_status()
            jwks = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch token signing keys", error=str(e))
            raise exceptions.AuthenticationFailed(
                "Token validation service unavailable"
            ) from e

        cache.set(JWKS_CACHE_KEY, jwks, timeout=JWKS_CACHE_TTL)
        return cast("dict[str, Any]", jwks)

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses."""
        return "Bearer"


class OptionalFirebaseAuthentication(FirebaseAuthentication):
    """Like FirebaseAuthentication, but an invalid token means anonymous.

    Used on public reads that show more to owners and admins.
    """

    def authenticate(self, request):
        """Authenticate if possible, otherwise fall back to anonymous."""
        try:
            return super().authenticate(request)
        except exceptions.AuthenticationFailed as e:
            logger.info("Ignoring invalid token on public route", error=str(e.detail))
            return None
