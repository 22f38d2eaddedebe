"""GET/POST /create: new post form."""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from frontend.app.core.logging import log_event
from frontend.app.models.api_response import ApiFailure
from frontend.app.services.blog_api import BlogApiClient, get_api_client
from frontend.app.services.error_mapper import map_api_error
from frontend.app.services.validation import validate_create_form
from frontend.app.views import render_create_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/create")
def create_form(request: Request) -> Response:
    return render_create_page(request)


@router.post("/create")
def create_post(
    request: Request,
    titulo: str = Form(""),
    contenido: str = Form(""),
    autor: str = Form(""),
    portada: str = Form(""),
    api: BlogApiClient = Depends(get_api_client),
) -> Response:
    """Validate locally, forward to the API, redirect home or re-render with errors."""
    payload, errors = validate_create_form(
        {"titulo": titulo, "contenido": contenido, "autor": autor, "portada": portada},
    )
    if payload is None:
        log_event(
            logger, "info", "form_validation_failed",
            operation="create_post",
            missing=",".join(name for name, msg in errors.model_dump().items() if msg),
        )
        return render_create_page(request, errors)

    log_event(
        logger, "info", "post_create_submitted",
        title_length=len(payload.titulo), content_length=len(payload.contenido),
    )
    result = api.create_post(payload)

    if isinstance(result, ApiFailure):
        log_event(
            logger, "error", "post_create_failed",
            error_category=result.error_category,
            status_code=result.status_code if result.status_code is not None else "N/A",
        )
        return render_create_page(request, map_api_error(result.body))

    log_event(logger, "info", "post_created", status_code=result.status_code)
    return RedirectResponse("/", status_code=302)
