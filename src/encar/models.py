"""Internal models for schema-derived endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SchemaParameter(BaseModel):
    """A parameter declaration as it appears in the schema."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    location: Literal["path", "query", "header", "cookie"] = Field(default="query", alias="in")
    required: bool = False
    type_hint: Dict[str, Any] = Field(default_factory=dict, alias="schema")


@dataclass(frozen=True)
class Endpoint:
    operation_id: str
    method: str
    path_template: str
    parameters: Tuple[SchemaParameter, ...] = ()
    accepts_body: bool = False
    summary: str = ""


@dataclass
class BoundParams:
    path: Dict[str, Any]
    query: Dict[str, Any]
    headers: Dict[str, str]
    body: Optional[Any] = None
