"""Jinja2 page rendering for the create form, post detail and home pages."""

from datetime import datetime
from enum import StrEnum
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from frontend.app.models.forms import FieldErrors
from frontend.app.models.post import Post

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


def format_date(value: datetime | str | None) -> str:
    """Long-form date, e.g. ``October 19, 2026``. Unparseable input → ``""``."""
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return ""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def iso_datetime(value: datetime | None) -> str:
    return value.isoformat() if value is not None else ""


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["iso_datetime"] = iso_datetime


class CreatePageState(StrEnum):
    pristine = "pristine"
    errored = "errored"


class DetailPageState(StrEnum):
    found = "found"
    not_found = "not_found"


def render_create_page(request: Request, errors: FieldErrors | None = None) -> Response:
    """Pristine form when *errors* is ``None``, errored form otherwise."""
    state = CreatePageState.pristine if errors is None else CreatePageState.errored
    return templates.TemplateResponse(
        request,
        "create.html",
        {"state": state, "errors": errors or FieldErrors()},
    )


def render_post_page(request: Request, post: Post | None) -> Response:
    if post is None:
        return templates.TemplateResponse(
            request, "not_found.html", {"state": DetailPageState.not_found},
        )
    return templates.TemplateResponse(
        request, "post_detail.html", {"state": DetailPageState.found, "post": post},
    )


def render_home_page(request: Request, posts: list[Post], *, unavailable: bool = False) -> Response:
    return templates.TemplateResponse(
        request, "home.html", {"posts": posts, "unavailable": unavailable},
    )
