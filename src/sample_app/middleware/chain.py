"""How middleware is shaped and how it is stacked around a route handler."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol

from sample_app.http.request import Request
from sample_app.http.response import Response

type Next = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Anything callable as ``await mw(request, next)`` returning a Response."""

    async def __call__(self, request: Request, next: Next) -> Response: ...


def _link(middleware: Middleware, downstream: Next) -> Next:
    async def step(request: Request) -> Response:
        return await middleware(request, downstream)

    return step


def build_chain(stack: Sequence[Middleware], endpoint: Next) -> Next:
    """Wrap *endpoint* so ``stack[0]`` sees the request first."""
    for middleware in reversed(stack):
        endpoint = _link(middleware, endpoint)
    return endpoint
