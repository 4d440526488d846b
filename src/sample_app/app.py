"""The application object.

An ``App`` collects pages, routes, error pages and middleware while it is
being set up, then freezes into a route table and a kida environment the
first time it is served, listed or tested. After that it is read-only.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from kida import Environment

from sample_app.config import AppConfig
from sample_app.http.request import Receive
from sample_app.middleware.chain import Middleware
from sample_app.routing.router import Route, Router
from sample_app.routing.static import StaticPage
from sample_app.server.handler import Scope, Send, handle_request
from sample_app.templating.integration import create_environment

logger = logging.getLogger("sample_app.app")


class App:
    """Static pages plus whatever extra routes the app registers.

    Setup happens at import time on one thread. Freezing takes a lock and
    re-checks the flag, so concurrent first requests compile only once.
    """

    __slots__ = (
        "_env",
        "_error_handlers",
        "_lock",
        "_middleware",
        "_pending",
        "_router",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._pending: list[Route] = []
        self._middleware: list[Middleware] = []
        self._error_handlers: dict[int, Callable[..., Any]] = {}
        self._lock = threading.Lock()
        self._router: Router | None = None
        self._env: Environment | None = None

    @property
    def frozen(self) -> bool:
        return self._router is not None

    # -- setup --

    def add_page(self, page: StaticPage) -> StaticPage:
        """Serve *page* on ``GET`` (and ``HEAD``) at ``page.path``."""
        self._register(Route(page.path, page.respond, frozenset({"GET"}), page.name))
        return page

    def static_page(
        self,
        path: str,
        *,
        body: str | None = None,
        template: str | None = None,
        title: str = "",
        name: str | None = None,
    ) -> StaticPage:
        """Shorthand for ``add_page(StaticPage(...))``::

            app.static_page("/", body="Hello World!")
            app.static_page("/static_pages/help", template="static_pages/help.html", title="Help")
        """
        page = StaticPage(path, body=body, template=template, title=title, name=name)
        return self.add_page(page)

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator for a handler that computes its response.

        The handler may take the ``Request`` as its one argument and may be
        ``async``. It returns a ``str``, a ``Template`` or a ``Response``.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            verbs = frozenset(m.upper() for m in methods or ["GET"])
            self._register(Route(path, func, verbs, name))
            return func

        return decorator

    def error(self, status: int) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator for the page shown for *status* (404, 500, ...)."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            self._error_handlers[status] = func
            return func

        return decorator

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first one added sees requests first."""
        self._check_not_frozen()
        self._middleware.append(middleware)

    # -- runtime --

    @property
    def routes(self) -> list[Route]:
        """The compiled route table. Freezes the app."""
        return self.freeze().routes

    def freeze(self) -> Router:
        """Compile routes and templates once; later calls return the same router.

        Raises ``DuplicateRouteError`` if two registrations share a method
        and path.
        """
        if self._router is None:
            with self._lock:
                if self._router is None:
                    router = Router()
                    for route in self._pending:
                        router.add(route)
                    router.compile()
                    self._env = create_environment(self.config)
                    self._router = router
                    logger.debug("app frozen with %d routes", len(router.routes))
        return self._router

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with pounce until interrupted."""
        from sample_app.server.dev import run_server

        self.freeze()
        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            workers=self.config.workers,
            reload=self.config.debug,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        router = self.freeze()
        assert self._env is not None
        await handle_request(
            scope,
            receive,
            send,
            router=router,
            middleware=tuple(self._middleware),
            error_handlers=self._error_handlers,
            env=self._env,
            debug=self.config.debug,
        )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze on ``lifespan.startup`` so a bad route table stops the server early."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self.freeze()
                except Exception as exc:
                    logger.exception("startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def _register(self, route: Route) -> None:
        self._check_not_frozen()
        self._pending.append(route)

    def _check_not_frozen(self) -> None:
        if self.frozen:
            msg = (
                "Cannot modify the app after it has started serving requests; "
                "register pages, routes and middleware first."
            )
            raise RuntimeError(msg)
