"""Map upstream API error bodies onto per-field form errors."""

import logging

from pydantic import ValidationError

from frontend.app.models.api_response import ApiErrorBody, ValidationDetail
from frontend.app.models.forms import (
    CREATE_FALLBACK_MESSAGE,
    FORM_TO_API_FIELD,
    FieldErrors,
    to_form_field,
)

logger = logging.getLogger(__name__)


def _resolve_field(path: str) -> str | None:
    if path in FORM_TO_API_FIELD:
        return path
    return to_form_field(path)


def map_api_error(body: object) -> FieldErrors:
    """Best-effort mapping of *body* to :class:`FieldErrors`.

    A ``{"error": {"details": [{path, message}, ...]}}`` body maps each
    recognised path (form or API spelling) onto its field; unrecognised
    paths and malformed entries are dropped. Anything else gets the
    fallback message on every field.
    """
    try:
        parsed = ApiErrorBody.model_validate(body)
    except ValidationError:
        return FieldErrors.uniform(CREATE_FALLBACK_MESSAGE)

    if not parsed.error.details:
        return FieldErrors.uniform(CREATE_FALLBACK_MESSAGE)

    messages: dict[str, str] = {}
    for entry in parsed.error.details:
        try:
            detail = ValidationDetail.model_validate(entry)
        except ValidationError:
            logger.debug("validation_detail_dropped: malformed entry")
            continue
        path = detail.field_path
        field = _resolve_field(path) if path is not None else None
        if field is None:
            logger.debug("validation_detail_dropped: path=%s", detail.path)
            continue
        messages[field] = detail.message
    return FieldErrors(**messages)
