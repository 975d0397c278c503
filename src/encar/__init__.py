"""Python client for the Carapis Encar v2 API."""

from .client import CarapisClient
from .config import Settings
from .errors import CarapisClientError, MissingParameterError, SchemaError

__all__ = [
    "CarapisClient",
    "CarapisClientError",
    "MissingParameterError",
    "SchemaError",
    "Settings",
]
