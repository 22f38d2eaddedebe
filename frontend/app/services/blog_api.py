"""HTTP client for the upstream blog content API.

Every call is a single attempt against the configured base URL. Transport
errors, error statuses and unparseable bodies come back as
:class:`ApiFailure` values; nothing is raised to the caller.

:func:`get_api_client` is the FastAPI dependency that opens one client per
incoming request and closes it when the request ends.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from frontend.app.core.logging import log_event
from frontend.app.core.settings import settings
from frontend.app.models.api_response import (
    ApiFailure,
    ApiListEnvelope,
    ApiResult,
    ApiSingleEnvelope,
    ApiSuccess,
    ErrorCategory,
)
from frontend.app.models.forms import CommentPayload, CreatePostPayload
from frontend.app.models.post import Post

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def _post_path(post_id: str, *suffix: str) -> str:
    return "/".join(["/api/posts", quote(post_id, safe=""), *suffix])


def _read_body(resp: httpx.Response) -> Any:
    """Decoded JSON body, the raw text if it is not JSON, ``None`` if empty."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class BlogApiClient:
    """Thin wrapper over :class:`httpx.Client` bound to the API base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BlogApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _send(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        json: dict[str, Any] | None = None,
    ) -> ApiResult:
        correlation_id = str(uuid.uuid4())
        log_event(
            logger, "info", "api_call_start",
            operation=operation, method=method, path=path,
            correlation_id=correlation_id,
        )

        headers = _JSON_HEADERS if json is not None else None
        try:
            resp = self._client.request(method, path, json=json, headers=headers)
        except httpx.TimeoutException as exc:
            return self._failure(
                operation, correlation_id,
                ErrorCategory.timeout, detail=type(exc).__name__,
            )
        except httpx.HTTPError as exc:
            return self._failure(
                operation, correlation_id,
                ErrorCategory.network, detail=f"{type(exc).__name__}: {exc}",
            )

        body = _read_body(resp)
        if resp.is_error:
            return self._failure(
                operation, correlation_id,
                ErrorCategory.status, status_code=resp.status_code, body=body,
            )

        log_event(
            logger, "info", "api_call_success",
            operation=operation, status_code=resp.status_code,
            correlation_id=correlation_id,
        )
        return ApiSuccess(status_code=resp.status_code, data=body)

    def _failure(
        self,
        operation: str,
        correlation_id: str,
        category: ErrorCategory,
        *,
        status_code: int | None = None,
        body: Any = None,
        detail: str | None = None,
    ) -> ApiFailure:
        log_event(
            logger, "warning", "api_call_failure",
            operation=operation, error_category=category,
            status_code=status_code if status_code is not None else "N/A",
            correlation_id=correlation_id, detail=detail or "N/A",
        )
        return ApiFailure(
            error_category=category,
            status_code=status_code,
            body=body,
            detail=detail,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create_post(self, payload: CreatePostPayload) -> ApiResult:
        return self._send("POST", "/api/posts", operation="create_post", json=payload.model_dump())

    def get_post(self, post_id: str) -> ApiResult:
        """Fetch one post; on success ``data`` is a :class:`Post`."""
        result = self._send("GET", _post_path(post_id), operation="get_post")
        if isinstance(result, ApiFailure):
            return result
        try:
            envelope = ApiSingleEnvelope.model_validate(result.data)
            post = Post.model_validate(envelope.data)
        except ValidationError as exc:
            log_event(
                logger, "warning", "api_call_failure",
                operation="get_post", error_category=ErrorCategory.parsing,
                errors=exc.error_count(),
            )
            return ApiFailure(
                error_category=ErrorCategory.parsing,
                status_code=result.status_code,
                body=result.data,
                detail=f"{exc.error_count()} validation error(s)",
            )
        return ApiSuccess(status_code=result.status_code, data=post)

    def list_posts(self) -> ApiResult:
        """Fetch all posts; on success ``data`` is a list of :class:`Post`.

        Entries that do not parse are skipped.
        """
        result = self._send("GET", "/api/posts", operation="list_posts")
        if isinstance(result, ApiFailure):
            return result
        try:
            envelope = ApiListEnvelope.model_validate(result.data)
        except ValidationError as exc:
            log_event(
                logger, "warning", "api_call_failure",
                operation="list_posts", error_category=ErrorCategory.parsing,
                errors=exc.error_count(),
            )
            return ApiFailure(
                error_category=ErrorCategory.parsing,
                status_code=result.status_code,
                body=result.data,
                detail=f"{exc.error_count()} validation error(s)",
            )

        posts: list[Post] = []
        for item in envelope.data:
            try:
                posts.append(Post.model_validate(item))
            except ValidationError:
                logger.debug("list_posts: skipping unparseable entry")
        return ApiSuccess(status_code=result.status_code, data=posts)

    def delete_post(self, post_id: str) -> ApiResult:
        return self._send("DELETE", _post_path(post_id), operation="delete_post")

    def add_comment(self, post_id: str, payload: CommentPayload) -> ApiResult:
        return self._send(
            "POST", _post_path(post_id, "comments"),
            operation="add_comment", json=payload.model_dump(),
        )

    def like_post(self, post_id: str) -> ApiResult:
        return self._send("POST", _post_path(post_id, "like"), operation="like_post")


def get_api_client() -> Iterator[BlogApiClient]:
    """FastAPI dependency: one client per request, closed afterwards."""
    client = BlogApiClient(settings.api_base_url)
    try:
        yield client
    finally:
        client.close()
