"""Schema-driven client for the Carapis Encar v2 API."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

import httpx

from .config import Settings, get_settings
from .errors import MethodNameCollisionError
from .executors import RequestExecutor
from .logging import redact_payload
from .models import Endpoint
from .naming import operation_id_to_method_name
from .params import prepare_params
from .schema import extract_endpoints, load_schema

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "carapis-encar"

ApiMethod = Callable[..., Awaitable[Any]]


def _package_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"


class CarapisClient:
    """Client for the Carapis Encar v2 API.

    One coroutine method is generated per schema operation, named after its
    operation id (``encar_v2_vehicles_list`` becomes ``listVehicles``). Each
    takes an argument mapping and/or keyword arguments and returns the decoded
    JSON response::

        client = CarapisClient(api_key)
        vehicles = await client.listVehicles({"limit": 2, "model_group": "sonata"})

    Failures surface as ``CarapisClientError``.
    """

    def __init__(
        self,
        api_key: str,
        settings: Optional[Settings] = None,
        schema_path: Union[str, Path, None] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key cannot be empty.")

        self.settings = settings or get_settings()
        self.api_key = api_key
        self.base_url = self.settings.encar_api_url.rstrip("/")
        self.api_base_path = self.settings.encar_api_base_path

        self._schema = load_schema(schema_path or self.settings.encar_schema_path)
        self._executor = RequestExecutor(
            base_url=self.base_url,
            api_base_path=self.api_base_path,
            headers=self._headers(),
            timeout_seconds=self.settings.encar_api_timeout_seconds,
            verify_ssl=self.settings.encar_api_verify_ssl,
            transport=transport,
        )
        self._endpoints: Dict[str, Endpoint] = extract_endpoints(self._schema, self.api_base_path)
        self._methods: Dict[str, str] = {}
        self._create_methods()

    @property
    def endpoints(self) -> Mapping[str, Endpoint]:
        return dict(self._endpoints)

    def method_names(self) -> List[str]:
        return sorted(self._methods)

    async def call(
        self, method_name: str, args: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> Any:
        if method_name not in self._methods:
            raise AttributeError(f"{type(self).__name__} has no API method {method_name!r}")
        return await getattr(self, method_name)(args, **kwargs)

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"ApiKey {self.api_key}",
            "User-Agent": f"encar/python/{_package_version()}",
        }

    def _create_methods(self) -> None:
        for operation_id, endpoint in self._endpoints.items():
            method_name = operation_id_to_method_name(operation_id)
            if method_name in self._methods:
                raise MethodNameCollisionError(method_name, self._methods[method_name], operation_id)
            if hasattr(self, method_name):
                raise MethodNameCollisionError(
                    method_name, f"{type(self).__name__}.{method_name}", operation_id
                )

            self._methods[method_name] = operation_id
            setattr(self, method_name, self._bind(method_name, endpoint))
            logger.debug("Registered method %s -> %s", method_name, operation_id)

    def _bind(self, method_name: str, endpoint: Endpoint) -> ApiMethod:
        async def method(args: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Any:
            call_args: Dict[str, Any] = {**(args or {}), **kwargs}
            logger.debug("Calling %s args=%s", method_name, redact_payload(call_args))
            bound = prepare_params(endpoint.operation_id, self._endpoints, call_args)
            return await self._executor.execute(
                endpoint.method,
                endpoint.path_template,
                bound.path,
                bound.query,
                json_data=bound.body,
                headers=bound.headers or None,
            )

        method.__name__ = method_name
        method.__qualname__ = f"{type(self).__name__}.{method_name}"
        summary = endpoint.summary or endpoint.operation_id
        method.__doc__ = f"{summary}\n\n{endpoint.method} {endpoint.path_template}"
        method.operation_id = endpoint.operation_id  # type: ignore[attr-defined]
        return method
