"""Forgery protection for state-changing requests.

Each session carries a random token. ``POST``, ``PUT``, ``PATCH`` and
``DELETE`` must echo it back in the ``X-CSRF-Token`` header or the
``_csrf_token`` form field, or they are refused with 403. The layout
publishes the token through ``csrf_meta_tag()``.
"""

import secrets
from contextvars import ContextVar
from dataclasses import dataclass

from kida.utils.html import Markup

from sample_app.errors import ConfigurationError, HTTPError
from sample_app.http.request import FORM_CONTENT_TYPE, Request
from sample_app.http.response import Response
from sample_app.middleware.chain import Next
from sample_app.middleware.sessions import get_session

_token: ContextVar[str | None] = ContextVar("sample_app_csrf_token", default=None)

SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "TRACE"})


def get_csrf_token() -> str:
    """The token for the current session. ``LookupError`` outside ``CSRFMiddleware``."""
    token = _token.get()
    if token is None:
        msg = "No CSRF token available; add CSRFMiddleware after SessionMiddleware."
        raise LookupError(msg)
    return token


def csrf_meta_tag() -> Markup:
    token = _token.get()
    if token is None:
        return Markup("")
    return Markup(f'<meta name="csrf-token" content="{token}">')


@dataclass(frozen=True, slots=True)
class CSRFConfig:
    field_name: str = "_csrf_token"
    header_name: str = "X-CSRF-Token"
    token_bytes: int = 32


class CSRFMiddleware:
    __slots__ = ("_config",)

    def __init__(self, config: CSRFConfig | None = None) -> None:
        self._config = config or CSRFConfig()

    async def __call__(self, request: Request, next: Next) -> Response:
        try:
            session = get_session()
        except LookupError:
            msg = "CSRFMiddleware needs SessionMiddleware registered before it."
            raise ConfigurationError(msg) from None

        field = self._config.field_name
        token = session.get(field) or secrets.token_hex(self._config.token_bytes)
        session[field] = token

        reset = _token.set(token)
        try:
            if request.method not in SAFE_METHODS:
                await self._check(request, token)
            return await next(request)
        finally:
            _token.reset(reset)

    async def _check(self, request: Request, expected: str) -> None:
        submitted = request.headers.get(self._config.header_name.lower())
        if submitted is None and request.content_type.startswith(FORM_CONTENT_TYPE):
            submitted = (await request.form()).get(self._config.field_name)
        if submitted is None:
            raise HTTPError(status=403, detail="CSRF token missing")
        if not secrets.compare_digest(submitted.encode(), expected.encode()):
            raise HTTPError(status=403, detail="CSRF token invalid")
