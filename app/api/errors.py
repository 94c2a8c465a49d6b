"""
Fallback responses for routing misses and unhandled faults.

Every response here carries ``Cache-Control: no-cache`` so that edge caches
always go back to the origin for error pages.
"""

from __future__ import annotations

from typing import Optional
import logging

from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NO_CACHE = {"Cache-Control": "no-cache"}

NOT_FOUND_BODY = "404 page not found"
METHOD_NOT_ALLOWED_BODY = "405 method not allowed"
INTERNAL_ERROR_BODY = "500 internal server error"


def not_found() -> PlainTextResponse:
    return PlainTextResponse(
        NOT_FOUND_BODY,
        status_code=status.HTTP_404_NOT_FOUND,
        headers=NO_CACHE,
    )


def method_not_allowed(allow: Optional[str] = None) -> PlainTextResponse:
    headers = dict(NO_CACHE)
    if allow:
        headers["Allow"] = allow
    return PlainTextResponse(
        METHOD_NOT_ALLOWED_BODY,
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers=headers,
    )


def internal_error() -> PlainTextResponse:
    return PlainTextResponse(
        INTERNAL_ERROR_BODY,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers=NO_CACHE,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """
    Map the router's 404/405 exceptions onto the fixed plain-text pages.
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return not_found()
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        allow = (exc.headers or {}).get("Allow")
        return method_not_allowed(allow)

    return PlainTextResponse(
        f"{exc.status_code} {exc.detail}",
        status_code=exc.status_code,
        headers=NO_CACHE,
    )


async def panic_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """
    Last-resort handler for exceptions raised while serving a request.

    The fault is logged with its traceback; the client only sees the generic
    500 page.
    """
    logger.error(
        "Unhandled error serving %s %s: %r",
        request.method,
        request.url.path,
        exc,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return internal_error()
