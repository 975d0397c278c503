"""Convert schema operation ids to client method names.

Pattern: {action}{Resource...}
  - encar_v2_vehicles_list                 -> listVehicles
  - encar_v2_vehicles_retrieve             -> getVehicles
  - encar_v2_catalog_manufacturers_stats   -> getCatalogManufacturersStats
  - encar_v2_enums                         -> getEnums
  - encar_v2_list                          -> encar_v2_list

Namespace tokens (api, encar, v2) are dropped before the action is read.
"""

from __future__ import annotations

from typing import List

_STOP_TOKENS = frozenset({"encar", "v2", "api"})

# Actions that read as nouns; they become a get<Action> call.
_NOUN_ACTIONS = frozenset({"stats", "enums"})


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:]


def operation_id_to_method_name(operation_id: str) -> str:
    """Derive the client method name for ``operation_id``."""
    parts = [p for p in operation_id.split("_") if p not in _STOP_TOKENS]
    if not parts:
        return operation_id

    action = parts[-1]
    resource_parts: List[str] = parts[:-1]

    if action == "retrieve" and resource_parts:
        action = "get"
    elif action == "list" and not resource_parts:
        return operation_id
    elif action in _NOUN_ACTIONS:
        if resource_parts:
            resource_parts.append(_capitalize(action))
            action = "get"
        else:
            action = "get" + _capitalize(action)
            resource_parts = []

    return action + "".join(_capitalize(part) for part in resource_parts)
