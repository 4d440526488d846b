"""The incoming request, built once from an ASGI scope."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl

type Receive = Callable[[], Awaitable[MutableMapping[str, Any]]]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _cookie_pairs(header: str) -> dict[str, str]:
    jar: dict[str, str] = {}
    for chunk in header.split(";"):
        name, eq, value = chunk.partition("=")
        if eq and name.strip():
            jar[name.strip()] = value.strip()
    return jar


@dataclass(frozen=True, slots=True)
class Request:
    """Method, path, headers and cookies of one HTTP request.

    Header names are lower-cased. The body is pulled from ASGI on first
    use and kept in ``_cache`` so middleware and handler can both read it.
    """

    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    _receive: Receive | None = field(default=None, repr=False, compare=False)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_scope(cls, scope: MutableMapping[str, Any], receive: Receive) -> Request:
        headers = {
            name.decode("latin-1").lower(): value.decode("latin-1")
            for name, value in scope.get("headers", ())
        }
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=headers,
            cookies=_cookie_pairs(headers.get("cookie", "")),
            _receive=receive,
        )

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    async def body(self) -> bytes:
        if "body" not in self._cache:
            chunks: list[bytes] = []
            more = self._receive is not None
            while more:
                message = await self._receive()
                chunks.append(message.get("body", b""))
                more = message.get("more_body", False)
            self._cache["body"] = b"".join(chunks)
        return self._cache["body"]

    async def form(self) -> dict[str, str]:
        """Decode a urlencoded body.

        Raises ``ValueError`` when the request declares another content type.
        """
        if self.content_type and not self.content_type.startswith(FORM_CONTENT_TYPE):
            msg = f"Expected a {FORM_CONTENT_TYPE} body, got {self.content_type!r}"
            raise ValueError(msg)
        if "form" not in self._cache:
            raw = await self.body()
            self._cache["form"] = dict(parse_qsl(raw.decode("utf-8"), keep_blank_values=True))
        return self._cache["form"]
