"""Structured logging baseline and event taxonomy.

Event taxonomy::

    app_start              : application process starting
    config_loaded          : settings resolved successfully
    form_validation_failed : a submitted form was missing required fields
    api_call_start         : upstream API call initiated
    api_call_success       : upstream API answered with a 2xx/3xx status
    api_call_failure       : transport error, error status or bad body
    post_create_submitted  : valid create form about to be forwarded
    post_created           : create form accepted by the upstream API
    post_create_failed     : create form rejected or upstream unavailable
    post_deleted           : post removed upstream
    post_not_found         : detail page fell back to the not-found view
    comment_added          : comment accepted upstream
    post_liked             : like accepted upstream
    unknown_error          : unhandled exception reached the app boundary

Rules:
    - Never log credentials embedded in the API base URL.
    - Log post ids, status codes and content *lengths*, not raw content.

Usage::

    from frontend.app.core.logging import log_event
    log_event(logger, "warning", "api_call_failure",
              operation="delete_post", error_category="network")
"""

import logging
import sys


_HANDLER_ATTR = "_blog_frontend"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logger with a simple structured format.

    Safe to call multiple times: only adds the handler once.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in root.handlers:
        if getattr(h, _HANDLER_ATTR, False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def log_event(
    logger: logging.Logger,
    level: str,
    event_name: str,
    **kwargs: object,
) -> None:
    """Emit a structured log line with consistent ``event_name: key=value`` format.

    Parameters
    ----------
    logger:
        The logger instance (provides the component via ``logger.name``).
    level:
        Log level name: ``"info"``, ``"warning"``, ``"error"``, or ``"exception"``.
    event_name:
        Canonical event name (e.g. ``"api_call_failure"``).
    **kwargs:
        Arbitrary key-value pairs appended as ``key=value``.
    """
    parts = " ".join(f"{k}={v}" for k, v in kwargs.items())
    message = f"{event_name}: {parts}" if parts else event_name
    log_fn = getattr(logger, level, logger.info)
    log_fn(message)
