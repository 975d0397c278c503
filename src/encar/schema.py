"""Schema loader and endpoint extraction."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml
from pydantic import ValidationError

from .errors import InvalidSchemaError, SchemaLoadError, SchemaNotFoundError, SchemaParseError
from .models import Endpoint, SchemaParameter


logger = logging.getLogger(__name__)

BUNDLED_SCHEMA_PATH = Path(__file__).parent / "schema.yaml"

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "options", "head")


def load_schema(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """Load the YAML schema at ``path`` (the bundled schema by default)."""
    schema_file = Path(path) if path else BUNDLED_SCHEMA_PATH
    try:
        text = schema_file.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SchemaNotFoundError(f"Schema file not found at {schema_file}") from exc
    except OSError as exc:
        raise SchemaLoadError(
            f"An unexpected error occurred loading schema {schema_file}: {exc}"
        ) from exc

    try:
        schema = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaParseError(f"Error parsing schema file {schema_file}: {exc}") from exc

    if not isinstance(schema, dict) or not isinstance(schema.get("paths"), dict):
        raise InvalidSchemaError(f"Invalid schema format in {schema_file}")
    return schema


def extract_endpoints(schema: Dict[str, Any], base_path: str) -> Dict[str, Endpoint]:
    """Build the operation id -> endpoint registry for paths under ``base_path``."""
    endpoints: Dict[str, Endpoint] = {}
    paths = schema.get("paths") or {}

    for path, path_item in paths.items():
        if not path.startswith(base_path) or not isinstance(path_item, dict):
            continue
        relative_path = path[len(base_path):]
        if not relative_path.startswith("/"):
            relative_path = "/" + relative_path

        shared_parameters = path_item.get("parameters") or []
        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            operation_id = operation.get("operationId")
            if not operation_id:
                logger.warning("Missing operationId for %s %s", method.upper(), path)
                continue

            endpoints[operation_id] = Endpoint(
                operation_id=operation_id,
                method=method.upper(),
                path_template=relative_path,
                parameters=_parse_parameters(
                    operation_id, shared_parameters, operation.get("parameters") or []
                ),
                accepts_body=bool(operation.get("requestBody")),
                summary=operation.get("summary") or operation.get("description") or "",
            )

    return endpoints


def _parse_parameters(
    operation_id: str,
    shared_parameters: List[Dict[str, Any]],
    operation_parameters: List[Dict[str, Any]],
) -> Tuple[SchemaParameter, ...]:
    # Operation-level declarations override path-level ones with the same name and location.
    merged: Dict[Tuple[str, str], SchemaParameter] = {}
    for raw in [*shared_parameters, *operation_parameters]:
        if not isinstance(raw, dict) or not raw.get("name"):
            continue
        try:
            parameter = SchemaParameter.model_validate(raw)
        except ValidationError as exc:
            raise InvalidSchemaError(
                f"Invalid parameter {raw.get('name')!r} for operation '{operation_id}': {exc}"
            ) from exc
        merged[(parameter.name, parameter.location)] = parameter
    return tuple(merged.values())
