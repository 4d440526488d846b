"""Cookie sessions signed with itsdangerous.

The session is a JSON-able dict held in a ContextVar for the duration of
one request and written back to the cookie on the way out.
"""

import logging
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from itsdangerous import BadSignature, URLSafeTimedSerializer

from sample_app.errors import ConfigurationError
from sample_app.http.request import Request
from sample_app.http.response import Response
from sample_app.middleware.chain import Next

logger = logging.getLogger("sample_app.middleware")

_current: ContextVar[dict[str, Any] | None] = ContextVar("sample_app_session", default=None)


def get_session() -> dict[str, Any]:
    """The live session dict. ``LookupError`` outside ``SessionMiddleware``."""
    session = _current.get()
    if session is None:
        msg = "No session is active; add SessionMiddleware to the app."
        raise LookupError(msg)
    return session


@dataclass(frozen=True, slots=True)
class SessionConfig:
    secret_key: str
    cookie_name: str = "sample_app_session"
    max_age: int = 24 * 60 * 60
    secure: bool = False


class SessionMiddleware:
    __slots__ = ("_config", "_signer")

    def __init__(self, config: SessionConfig) -> None:
        if not config.secret_key:
            msg = "SessionConfig.secret_key must not be empty."
            raise ConfigurationError(msg)
        self._config = config
        self._signer = URLSafeTimedSerializer(config.secret_key, salt="sample-app-session")

    def _restore(self, request: Request) -> dict[str, Any]:
        cookie = request.cookies.get(self._config.cookie_name)
        if not cookie:
            return {}
        try:
            data = self._signer.loads(cookie, max_age=self._config.max_age)
        except BadSignature:
            logger.debug("ignoring session cookie with a bad or expired signature")
            return {}
        return data if isinstance(data, dict) else {}

    async def __call__(self, request: Request, next: Next) -> Response:
        session = self._restore(request)
        reset = _current.set(session)
        try:
            response = await next(request)
        finally:
            _current.reset(reset)
        return response.with_cookie(
            self._config.cookie_name,
            self._signer.dumps(session),
            max_age=self._config.max_age,
            secure=self._config.secure,
        )
