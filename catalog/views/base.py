"""Shared APIView base for catalog routes."""

from collections.abc import Mapping
from typing import Any, TypeVar

from django.http import QueryDict

import structlog
from pydantic import BaseModel, ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.auth import (
    FirebaseAuthentication,
    IsAdmin,
    IsSignedIn,
    OptionalFirebaseAuthentication,
)
from catalog.exceptions import InvalidArgumentError
from catalog.schemas import format_validation_errors

logger = structlog.get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

PUBLIC = (AllowAny,)
SIGNED_IN = (IsSignedIn,)
ADMIN = (IsAdmin,)

_NO_DATA = object()


class CatalogAPIView(APIView):
    """APIView with per-method access rules and the JSON envelope.

    Subclasses declare ``method_permissions`` mapping HTTP methods to
    permission classes; methods not listed are public. Public methods treat
    an invalid or expired token as anonymous instead of rejecting the request.
    """

    method_permissions: Mapping[str, tuple] = {}

    def get_authenticators(self):
        """Use lenient authentication for public methods."""
        if self.method_permissions.get(self.request.method, PUBLIC) is PUBLIC:
            return [OptionalFirebaseAuthentication()]
        return [FirebaseAuthentication()]

    def get_permissions(self):
        """Instantiate the permission classes declared for this method."""
        classes = self.method_permissions.get(self.request.method, PUBLIC)
        return [permission() for permission in classes]

    def validate(self, schema: type[SchemaT], data: Any) -> SchemaT:
        """Parse ``data`` into ``schema`` or fail with 400 and field details.

        Args:
            schema: Pydantic model to validate against
            data: Request body, query string or form fields

        Returns:
            The validated model

        Raises:
            InvalidArgumentError: With ``[{field, message}]`` details
        """
        if isinstance(data, QueryDict):
            data = data.dict()
        if not isinstance(data, Mapping):
            raise InvalidArgumentError("Request body must be a JSON object")
        try:
            return schema.model_validate(dict(data))
        except ValidationError as e:
            details = format_validation_errors(e)
            logger.warning(
                "Request validation failed",
                schema=schema.__name__,
                path=self.request.path,
                errors=details,
            )
            raise InvalidArgumentError("Validation failed", details=details) from e

    def success(
        self,
        data: Any = _NO_DATA,
        status_code: int = status.HTTP_200_OK,
        message: str | None = None,
        **extra: Any,
    ) -> Response:
        """Build the ``{"success": true, ...}`` envelope.

        Pydantic models, and lists of them, are serialized with wire names.
        ``data`` is omitted entirely when not passed.
        """
        body: dict[str, Any] = {"success": True}
        if data is not _NO_DATA:
            body["data"] = serialize(data)
        if message is not None:
            body["message"] = message
        body.update(extra)
        return Response(body, status=status_code)

    def user_id(self) -> str:
        """Uid of the authenticated caller."""
        return self.request.user.uid


def serialize(value: Any) -> Any:
    """Convert schema instances into JSON-ready data."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [serialize(item) for item in value]
    return value
