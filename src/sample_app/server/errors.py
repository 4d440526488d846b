"""Turns exceptions into responses.

An ``@app.error(status)`` handler is tried first; without one, or when it
fails itself, the client gets a short plain-text body.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from kida import Environment

from sample_app.errors import HTTPError
from sample_app.http.request import Request
from sample_app.http.response import PLAIN_TEXT, Response
from sample_app.server.respond import call_with_request, to_response

logger = logging.getLogger("sample_app.server")


async def _from_handler(
    status: int,
    request: Request,
    handlers: Mapping[int, Callable[..., Any]],
    env: Environment,
) -> Response | None:
    handler = handlers.get(status)
    if handler is None:
        return None
    try:
        response = to_response(await call_with_request(handler, request), env)
    except Exception:
        logger.exception("error handler for %d failed", status)
        return None
    return response.with_status(status) if response.status == 200 else response


async def error_response(
    exc: HTTPError,
    request: Request,
    handlers: Mapping[int, Callable[..., Any]],
    env: Environment,
) -> Response:
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    response = await _from_handler(exc.status, request, handlers, env)
    if response is None:
        response = Response(exc.detail or str(exc.status), exc.status, PLAIN_TEXT)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


async def server_error_response(
    exc: Exception,
    request: Request,
    handlers: Mapping[int, Callable[..., Any]],
    env: Environment,
    *,
    debug: bool,
) -> Response:
    logger.exception("500 %s %s", request.method, request.path)
    response = await _from_handler(500, request, handlers, env)
    if response is None:
        detail = f"Internal Server Error: {exc!r}" if debug else "Internal Server Error"
        response = Response(detail, 500, PLAIN_TEXT)
    return response
