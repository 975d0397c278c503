"""Bind caller arguments to an endpoint's declared parameters."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Set

from .errors import CarapisClientError, MissingParameterError
from .models import BoundParams, Endpoint


logger = logging.getLogger(__name__)

VEHICLE_LIST_OPERATION_ID = "encar_v2_vehicles_list"

BODY_ARGUMENT = "body"

# Friendlier argument names accepted in place of dotted schema parameters.
# Pattern: operation id -> {schema parameter name: caller argument name}.
_PARAMETER_ALIASES: Dict[str, Dict[str, str]] = {
    VEHICLE_LIST_OPERATION_ID: {"model__model_group": "model_group"},
}


def prepare_params(
    operation_id: str,
    endpoints: Mapping[str, Endpoint],
    args: Mapping[str, Any],
) -> BoundParams:
    """Split ``args`` into path, query and header values for ``operation_id``.

    Raises MissingParameterError when a required parameter has no value.
    Arguments the endpoint does not declare are reported with a warning and
    otherwise ignored.
    """
    endpoint = endpoints.get(operation_id)
    if endpoint is None:
        raise CarapisClientError(f"Unknown operationId: {operation_id}")

    aliases = _PARAMETER_ALIASES.get(operation_id, {})
    supplied_aliases = {alias for alias in aliases.values() if alias in args}

    bound = BoundParams(path={}, query={}, headers={})
    known: Set[str] = set(aliases.values())

    for parameter in endpoint.parameters:
        name = parameter.name
        known.add(name)

        # A schema parameter sharing the alias name yields to the remapped one.
        if name in supplied_aliases:
            continue

        alias = aliases.get(name)
        if alias is not None and alias in args:
            value = args[alias]
        else:
            value = args.get(name)

        if value is None:
            if parameter.required:
                raise MissingParameterError(name, operation_id)
            continue

        if parameter.location == "path":
            bound.path[name] = value
        elif parameter.location == "query":
            bound.query[name] = value
        elif parameter.location == "header":
            bound.headers[name] = str(value)
        else:
            logger.debug("Ignoring cookie parameter '%s' for '%s'", name, operation_id)

    if endpoint.accepts_body:
        known.add(BODY_ARGUMENT)
        bound.body = args.get(BODY_ARGUMENT)

    extra = [key for key in args if key not in known]
    if extra:
        logger.warning(
            "Unexpected arguments provided for '%s': %s", operation_id, ", ".join(extra)
        )

    return bound
