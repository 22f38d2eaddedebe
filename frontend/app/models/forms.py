"""Form payloads, per-field errors and the form ↔ API field-name table."""

from types import MappingProxyType

from pydantic import BaseModel

# Form/error field name -> upstream API field name. Must stay one-to-one.
FORM_TO_API_FIELD = MappingProxyType({
    "title": "titulo",
    "content": "contenido",
    "author": "autor",
    "cover": "portada",
})
API_TO_FORM_FIELD = MappingProxyType({v: k for k, v in FORM_TO_API_FIELD.items()})

FORM_FIELDS: tuple[str, ...] = tuple(FORM_TO_API_FIELD)
API_FIELDS: tuple[str, ...] = tuple(API_TO_FORM_FIELD)

REQUIRED_FIELD_MESSAGES = MappingProxyType({
    "title": "Title is required",
    "content": "Content is required",
    "author": "Author is required",
    "cover": "Cover image is required",
})

CREATE_FALLBACK_MESSAGE = "An error occurred creating the post"


def to_api_field(form_field: str) -> str | None:
    return FORM_TO_API_FIELD.get(form_field)


def to_form_field(api_field: str) -> str | None:
    return API_TO_FORM_FIELD.get(api_field)


class FieldErrors(BaseModel):
    """Per-field messages shown next to the create form inputs."""

    title: str = ""
    content: str = ""
    author: str = ""
    cover: str = ""

    @classmethod
    def uniform(cls, message: str) -> "FieldErrors":
        """Same *message* on every field."""
        return cls(**{name: message for name in FORM_FIELDS})

    @property
    def has_errors(self) -> bool:
        return any(getattr(self, name) for name in FORM_FIELDS)


class CreatePostPayload(BaseModel):
    """JSON body for ``POST /api/posts`` (API vocabulary)."""

    titulo: str
    contenido: str
    autor: str
    portada: str


class CommentPayload(BaseModel):
    """JSON body for ``POST /api/posts/{id}/comments``."""

    author: str
    content: str
