"""/post/{post_id}: detail page, delete, comment and like actions."""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from starlette.responses import Response

from frontend.app.core.errors import normalize_api_failure, normalize_validation_error
from frontend.app.core.logging import log_event
from frontend.app.models.api_response import ApiFailure
from frontend.app.services.blog_api import BlogApiClient, get_api_client
from frontend.app.services.validation import validate_comment_form
from frontend.app.views import render_post_page

logger = logging.getLogger(__name__)

router = APIRouter()


def _post_url(request: Request, post_id: str) -> str:
    return request.app.url_path_for("post_detail", post_id=post_id)


@router.get("/post/{post_id}", name="post_detail")
def post_detail(
    request: Request,
    post_id: str,
    api: BlogApiClient = Depends(get_api_client),
) -> Response:
    """Render the post, or the not-found view on any fetch failure."""
    result = api.get_post(post_id)
    if isinstance(result, ApiFailure):
        # 404, 5xx, network and parse errors all render the same view.
        log_event(
            logger, "info", "post_not_found",
            post_id=post_id, error_category=result.error_category,
            status_code=result.status_code if result.status_code is not None else "N/A",
        )
        return render_post_page(request, None)
    return render_post_page(request, result.data)


@router.post("/post/{post_id}")
def post_action(
    request: Request,
    post_id: str,
    method: str = Form("", alias="_method"),
    author: str = Form(""),
    content: str = Form(""),
    api: BlogApiClient = Depends(get_api_client),
) -> Response:
    """Delete the post (``_method=DELETE``) or add a comment."""
    if method == "DELETE":
        return _delete_post(api, post_id)

    payload, missing = validate_comment_form(author, content)
    if payload is None:
        error = normalize_validation_error(missing, operation="add_comment")
        return PlainTextResponse(error.user_message, status_code=error.http_status)

    result = api.add_comment(post_id, payload)
    if isinstance(result, ApiFailure):
        error = normalize_api_failure(
            result, operation="add_comment",
            user_message="Error publishing the comment", post_id=post_id,
        )
        return PlainTextResponse(error.user_message, status_code=error.http_status)

    log_event(
        logger, "info", "comment_added",
        post_id=post_id, content_length=len(payload.content),
    )
    return RedirectResponse(_post_url(request, post_id), status_code=303)


def _delete_post(api: BlogApiClient, post_id: str) -> Response:
    result = api.delete_post(post_id)
    if isinstance(result, ApiFailure):
        error = normalize_api_failure(
            result, operation="delete_post",
            user_message="Error deleting the post", post_id=post_id,
        )
        return PlainTextResponse(error.user_message, status_code=error.http_status)

    log_event(logger, "info", "post_deleted", post_id=post_id)
    return RedirectResponse("/", status_code=303)


@router.post("/post/{post_id}/like")
def like_post(
    request: Request,
    post_id: str,
    api: BlogApiClient = Depends(get_api_client),
) -> Response:
    result = api.like_post(post_id)
    if isinstance(result, ApiFailure):
        error = normalize_api_failure(
            result, operation="like_post",
            user_message="Error liking the post", post_id=post_id,
        )
        return PlainTextResponse(error.user_message, status_code=error.http_status)

    log_event(logger, "info", "post_liked", post_id=post_id)
    return RedirectResponse(_post_url(request, post_id), status_code=303)
