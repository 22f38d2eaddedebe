"""Pydantic models for upstream API results and error bodies."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ErrorCategory(StrEnum):
    """Categorised upstream API failure reasons."""

    network = "network"
    timeout = "timeout"
    status = "status"
    parsing = "parsing"


class ApiSuccess(BaseModel):
    """Upstream call answered with a non-error status."""

    status: Literal["success"] = "success"
    status_code: int
    data: Any = None


class ApiFailure(BaseModel):
    """Upstream call failed in transport, status or body parsing."""

    status: Literal["error"] = "error"
    error_category: ErrorCategory
    status_code: int | None = None
    body: Any = None
    detail: str | None = None


ApiResult = ApiSuccess | ApiFailure
"""Discriminated union returned by every API client call."""


# ---------------------------------------------------------------------------
# Error body shapes
# ---------------------------------------------------------------------------


class ValidationDetail(BaseModel):
    """One entry of an upstream validation error list."""

    path: str | list[str | int]
    message: str

    @property
    def field_path(self) -> str | None:
        """The path as a single field name, or ``None`` for nested paths."""
        if isinstance(self.path, str):
            return self.path
        if len(self.path) == 1:
            return str(self.path[0])
        return None


class ApiError(BaseModel):
    """Envelope only; each ``details`` entry is validated on its own."""

    message: Any = None
    details: list[Any] | None = None


class ApiErrorBody(BaseModel):
    """``{"error": {...}}`` envelope the upstream API uses for failures."""

    error: ApiError


class ApiSingleEnvelope(BaseModel):
    """``{"data": {...}}`` envelope for a single resource."""

    data: dict[str, Any]


class ApiListEnvelope(BaseModel):
    """``{"data": [...]}`` envelope for a resource collection."""

    data: list[Any] = Field(default_factory=list)
