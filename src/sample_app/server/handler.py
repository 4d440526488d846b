"""One HTTP request, from ASGI scope to ASGI messages.

The route is resolved before any middleware runs: an unknown path is a
404 and a wrong method a 405 no matter what the middleware would check.
"""

from collections.abc import Awaitable, Callable, Mapping, MutableMapping, Sequence
from typing import Any

from kida import Environment

from sample_app.errors import HTTPError
from sample_app.http.request import Receive, Request
from sample_app.http.response import Response
from sample_app.middleware.chain import Middleware, build_chain
from sample_app.routing.router import Router
from sample_app.server.errors import error_response, server_error_response
from sample_app.server.respond import call_with_request, to_response

type Scope = MutableMapping[str, Any]
type Send = Callable[[MutableMapping[str, Any]], Awaitable[None]]


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: Sequence[Middleware],
    error_handlers: Mapping[int, Callable[..., Any]],
    env: Environment,
    debug: bool,
) -> None:
    request = Request.from_scope(scope, receive)
    try:
        route = router.match(request.method, request.path)

        async def endpoint(req: Request) -> Response:
            return to_response(await call_with_request(route.handler, req), env)

        response = await build_chain(middleware, endpoint)(request)
    except HTTPError as exc:
        response = await error_response(exc, request, error_handlers, env)
    except Exception as exc:
        response = await server_error_response(exc, request, error_handlers, env, debug=debug)

    await send_response(response, send, include_body=request.method != "HEAD")


async def send_response(response: Response, send: Send, *, include_body: bool = True) -> None:
    """Emit *response*; ``content-length`` always describes the full body."""
    body = response.body_bytes
    headers = [
        (b"content-type", response.content_type.encode("latin-1")),
        (b"content-length", str(len(body)).encode("latin-1")),
        *((k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in response.headers),
    ]
    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": body if include_body else b""})
