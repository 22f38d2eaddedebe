"""Read-through models for posts and comments owned by the upstream API.

Upstream field names are Spanish (``titulo``, ``contenido`` …); the models
expose English attribute names and accept either spelling on input.
Timestamps that do not parse become ``None`` rather than rejecting the post.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _lenient_datetime(v: object) -> object:
    if v is None or isinstance(v, datetime):
        return v
    if isinstance(v, str):
        try:
            return datetime.fromisoformat(v.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


class Comment(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    author: str
    content: str
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("createdAt", "created_at"),
    )
    post: str | None = Field(
        default=None, validation_alias=AliasChoices("post", "postId", "post_id"),
    )

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, v: object) -> object:
        return _lenient_datetime(v)


class Post(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    title: str = Field(validation_alias=AliasChoices("titulo", "title"))
    content: str = Field(validation_alias=AliasChoices("contenido", "content"))
    author: str = Field(validation_alias=AliasChoices("autor", "author"))
    cover: str = Field(default="", validation_alias=AliasChoices("portada", "cover"))
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt"),
    )
    likes: int = 0
    comments: list[Comment] = Field(
        default_factory=list,
        validation_alias=AliasChoices("comentarios", "comments"),
    )

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, v: object) -> object:
        return _lenient_datetime(v)

    @field_validator("likes", mode="before")
    @classmethod
    def _null_likes(cls, v: object) -> object:
        return 0 if v is None else v

    @field_validator("comments", mode="before")
    @classmethod
    def _null_comments(cls, v: object) -> object:
        return [] if v is None else v

    @property
    def paragraphs(self) -> list[str]:
        """Content split on newlines, as rendered on the detail page."""
        return self.content.split("\n")
