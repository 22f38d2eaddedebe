"""Centralized error normalization for plain-text error responses.

Failures of the delete, comment and like actions are not re-rendered as
pages; they pass through this module so that:
- The response carries a short, generic message and a fixed status
- Upstream bodies, tracebacks and URLs never reach the browser
- The details are logged for diagnostics
"""

import logging
from dataclasses import dataclass

from frontend.app.core.logging import log_event
from frontend.app.models.api_response import ApiFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedError:
    """Standardized error representation for plain-text responses."""

    user_message: str
    error_category: str
    http_status: int = 500


def normalize_api_failure(
    failure: ApiFailure,
    *,
    operation: str,
    user_message: str,
    post_id: str | None = None,
) -> NormalizedError:
    """Collapse any upstream failure into a generic 500 with *user_message*."""
    log_event(
        logger, "error", "api_call_failure",
        operation=operation,
        error_category=failure.error_category,
        status_code=failure.status_code if failure.status_code is not None else "N/A",
        post_id=post_id or "N/A",
    )
    return NormalizedError(
        user_message=user_message,
        error_category=str(failure.error_category),
        http_status=500,
    )


def normalize_validation_error(
    missing_fields: list[str],
    *,
    operation: str,
) -> NormalizedError:
    """Missing form fields on a plain-text action → 400 bad request."""
    log_event(
        logger, "info", "form_validation_failed",
        operation=operation,
        missing=",".join(missing_fields),
    )
    return NormalizedError(
        user_message="Missing required fields: " + ", ".join(missing_fields),
        error_category="validation",
        http_status=400,
    )


def normalize_unknown_error(
    exc: Exception,
    *,
    operation: str,
) -> NormalizedError:
    """Normalize an unexpected error into a safe generic message."""
    log_event(
        logger, "exception", "unknown_error",
        operation=operation,
        error_category="unknown",
        detail=f"{type(exc).__name__}: {exc}",
    )
    return NormalizedError(
        user_message="An unexpected error occurred. Please try again.",
        error_category="unknown",
        http_status=500,
    )
