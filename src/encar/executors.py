"""Execution layer for schema-derived REST calls."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from .errors import CarapisClientError
from .logging import redact_payload

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\w+\}")

# Characters encodeURIComponent leaves untouched besides the unreserved set.
_PATH_SAFE_CHARS = "!*'()"


class RequestExecutor:
    def __init__(
        self,
        base_url: str,
        api_base_path: str,
        headers: Dict[str, str],
        timeout_seconds: float = 30,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_base_path = api_base_path
        self.headers = headers
        self.timeout_seconds = timeout_seconds
        self.verify_ssl = verify_ssl
        self.transport = transport

    async def execute(
        self,
        method: str,
        path_template: str,
        path_params: Optional[Dict[str, Any]] = None,
        query_params: Optional[Dict[str, Any]] = None,
        json_data: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        path = self._format_path(path_template, path_params or {})
        url = f"{self.api_base_path}{path}"
        query = self._clean_query(query_params or {})
        request_info = f"{method} {url}"

        logger.debug(
            "Sending %s query=%s headers=%s", request_info, query, redact_payload(headers or {})
        )

        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout_seconds,
            verify=self.verify_ssl,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            try:
                request = client.build_request(
                    method, url, params=query, json=json_data, headers=headers
                )
            except (httpx.InvalidURL, TypeError, ValueError) as exc:
                raise CarapisClientError(
                    f"Request setup failed for {request_info}: {exc}", None, type(exc).__name__
                ) from exc

            try:
                response = await client.send(request)
            except httpx.UnsupportedProtocol as exc:
                raise CarapisClientError(
                    f"Request setup failed for {request_info}: {exc}", None, type(exc).__name__
                ) from exc
            except httpx.TransportError as exc:
                raise CarapisClientError(
                    f"Request failed for {request_info}: No response received",
                    None,
                    type(exc).__name__,
                ) from exc
            except httpx.RequestError as exc:
                raise CarapisClientError(
                    f"Request failed for {request_info}: {exc}", None, type(exc).__name__
                ) from exc

        if response.is_error:
            raise self._status_error(response, request_info)
        return self._decode(response, request_info)

    def _format_path(self, path_template: str, path_params: Dict[str, Any]) -> str:
        path = path_template
        for key, value in path_params.items():
            token = f"{{{key}}}"
            if token in path:
                path = path.replace(token, quote(str(value), safe=_PATH_SAFE_CHARS))
        if _PLACEHOLDER.search(path):
            raise CarapisClientError(
                f"Missing required path parameters for endpoint {path_template}. "
                f"Remaining path: {path}",
                400,
            )
        return path

    def _clean_query(self, query_params: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in query_params.items() if value is not None}

    def _decode(self, response: httpx.Response, request_info: str) -> Any:
        if response.status_code == 204 or not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            raise CarapisClientError(
                f"Invalid JSON in response for {request_info}",
                response.status_code,
                response.text,
            ) from exc
        return {} if data is None else data

    def _status_error(self, response: httpx.Response, request_info: str) -> CarapisClientError:
        status = response.status_code
        message = f"HTTP error {status} for {request_info}"
        try:
            details: Any = response.json()
        except ValueError:
            details = response.text or None

        if isinstance(details, dict):
            detail = details.get("detail") or details.get("message") or json.dumps(details)
        else:
            detail = details or response.reason_phrase

        logger.debug("%s: %s", message, detail)
        return CarapisClientError(f"{message}: {detail}", status, details)
