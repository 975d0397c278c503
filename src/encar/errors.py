"""Exceptions raised by the Encar client."""

from __future__ import annotations

from typing import Any, Optional


class CarapisClientError(Exception):
    """Error surfaced to callers of generated API methods.

    ``status`` is the HTTP status code when the server answered, ``None`` when
    no response was received or the request could not be sent. ``details``
    holds the decoded error body or a diagnostic code for transport failures.
    """

    def __init__(
        self, message: str, status: Optional[int] = None, details: Any = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status={self.status!r})"


class MissingParameterError(CarapisClientError):
    def __init__(self, parameter: str, operation_id: str) -> None:
        super().__init__(
            f"Missing required parameter '{parameter}' for operation '{operation_id}'",
            status=400,
        )
        self.parameter = parameter
        self.operation_id = operation_id


class SchemaError(Exception):
    """Base class for failures while loading the API schema."""


class SchemaNotFoundError(SchemaError):
    pass


class SchemaParseError(SchemaError):
    pass


class SchemaLoadError(SchemaError):
    pass


class InvalidSchemaError(SchemaError):
    pass


class MethodNameCollisionError(SchemaError):
    def __init__(self, method_name: str, first: str, second: str) -> None:
        super().__init__(
            f"Operations '{first}' and '{second}' both map to method '{method_name}'"
        )
        self.method_name = method_name
        self.operation_ids = (first, second)
