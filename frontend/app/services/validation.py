"""Required-field validation for the create-post and comment forms.

Kept free of FastAPI so the rules are testable on plain mappings.
"""

from collections.abc import Mapping

from frontend.app.models.forms import (
    FORM_TO_API_FIELD,
    REQUIRED_FIELD_MESSAGES,
    CommentPayload,
    CreatePostPayload,
    FieldErrors,
)


def _clean(value: str | None) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_create_form(
    raw: Mapping[str, str | None],
) -> tuple[CreatePostPayload | None, FieldErrors]:
    """Validate a submitted create form keyed by API field names.

    Returns ``(payload, errors)``. When any required field is empty the
    payload is ``None`` and *errors* carries a message for each missing
    field only; otherwise *errors* is empty.
    """
    values: dict[str, str] = {}
    messages: dict[str, str] = {}
    for form_field, api_field in FORM_TO_API_FIELD.items():
        value = _clean(raw.get(api_field))
        if not value:
            messages[form_field] = REQUIRED_FIELD_MESSAGES[form_field]
        values[api_field] = value

    if messages:
        return None, FieldErrors(**messages)
    return CreatePostPayload(**values), FieldErrors()


def validate_comment_form(
    author: str | None, content: str | None,
) -> tuple[CommentPayload | None, list[str]]:
    """Return ``(payload, missing_fields)``; payload is ``None`` if any is missing."""
    author = _clean(author)
    content = _clean(content)
    missing = [name for name, value in (("author", author), ("content", content)) if not value]
    if missing:
        return None, missing
    return CommentPayload(author=author, content=content), []
