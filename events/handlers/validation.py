"""Request body validation gate.

A view method decorated with ``validate_body(schema)`` only runs when the
request body passes the schema. Rejected bodies get a fixed 400 response.
Faults raised by the schema engine itself are logged and surfaced as
InternalError; they never leave the request without a response.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import wraps
from typing import Any

from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response

from events.domain.errors import InternalError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "error, debe mirar que los campos ingresados son los correctos"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a request body."""

    valid: bool
    errors: dict[str, Any] = field(default_factory=dict)


class BodySchema(ABC):
    """A declared shape that request bodies are checked against."""

    @abstractmethod
    def validate(self, body: Any) -> ValidationResult:
        ...


class SerializerSchema(BodySchema):
    """BodySchema backed by a DRF serializer class.

    Bodies must be JSON objects and may only contain declared fields. With
    ``partial=True`` every field is optional but at least one must be given.
    """

    def __init__(
        self, serializer_class: type[serializers.Serializer], partial: bool = False
    ) -> None:
        self._serializer_class = serializer_class
        self._partial = partial

    def validate(self, body: Any) -> ValidationResult:
        if not isinstance(body, Mapping):
            return ValidationResult(
                valid=False, errors={"non_field_errors": ["Expected a JSON object."]}
            )

        declared = set(self._serializer_class().fields)
        unknown = sorted(set(body) - declared)
        if unknown:
            return ValidationResult(
                valid=False, errors={name: ["Unknown field."] for name in unknown}
            )
        if self._partial and not body:
            return ValidationResult(
                valid=False, errors={"non_field_errors": ["No fields provided."]}
            )

        serializer = self._serializer_class(data=body, partial=self._partial)
        if serializer.is_valid():
            return ValidationResult(valid=True)
        return ValidationResult(valid=False, errors=dict(serializer.errors))


def invalid_body_response() -> Response:
    """The fixed 400 response for request bodies that fail validation."""
    return Response({"msg": INVALID_BODY_MESSAGE}, status=status.HTTP_400_BAD_REQUEST)


def validate_body(schema: BodySchema) -> Callable:
    """Decorate an APIView method so it only runs for bodies matching ``schema``."""

    def decorator(handler: Callable) -> Callable:
        @wraps(handler)
        def wrapper(view: Any, request: Request, *args: Any, **kwargs: Any) -> Response:
            body = request.data
            try:
                result = schema.validate(body)
            except Exception as exc:
                logger.exception(
                    "Schema validation raised for %s %s", request.method, request.path
                )
                raise InternalError() from exc

            if not result.valid:
                logger.info(
                    "Rejected body for %s %s: %s",
                    request.method,
                    request.path,
                    result.errors,
                )
                return invalid_body_response()
            return handler(view, request, *args, **kwargs)

        return wrapper

    return decorator
