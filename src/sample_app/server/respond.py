"""Calling handlers and converting what they return."""

import inspect
from collections.abc import Callable
from typing import Any

from kida import Environment

from sample_app.http.request import Request
from sample_app.http.response import Response
from sample_app.templating import Template
from sample_app.templating.integration import render_template


async def call_with_request(func: Callable[..., Any], request: Request) -> Any:
    """Call *func* with the request if it takes an argument, awaiting if needed."""
    result = func(request) if inspect.signature(func).parameters else func()
    if inspect.isawaitable(result):
        result = await result
    return result


def to_response(value: Any, env: Environment) -> Response:
    match value:
        case Response():
            return value
        case Template():
            return Response(render_template(env, value))
        case str():
            return Response(value)
        case _:
            msg = f"Handlers must return str, Template or Response, not {type(value).__name__}"
            raise TypeError(msg)
