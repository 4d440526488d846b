"""Exact-match routing over static paths.

There are no path parameters, so lookup is two dict hits: normalised
path, then method. The table is sealed once the app freezes.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sample_app.errors import (
    ConfigurationError,
    DuplicateRouteError,
    MethodNotAllowed,
    NotFound,
)

logger = logging.getLogger("sample_app.routing")


def normalize_path(path: str) -> str:
    """``"about/"``, ``"/about"`` and ``"//about"`` are all ``"/about"``."""
    return "/" + "/".join(segment for segment in path.split("/") if segment)


@dataclass(frozen=True, slots=True)
class Route:
    path: str
    handler: Callable[..., Any]
    methods: frozenset[str] = frozenset({"GET"})
    name: str | None = None

    @property
    def label(self) -> str:
        """Name shown in route listings."""
        return self.name or getattr(self.handler, "__name__", repr(self.handler))


class Router:
    __slots__ = ("_sealed", "_table")

    def __init__(self) -> None:
        self._table: dict[str, dict[str, Route]] = {}
        self._sealed = False

    def add(self, route: Route) -> None:
        """Register *route* under its normalised path.

        Raises ``DuplicateRouteError`` if one of its methods is already taken
        for that path; the earlier registration is kept.
        """
        if self._sealed:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if any(marker in route.path for marker in "{<"):
            msg = f"Only static paths are supported; got {route.path!r}."
            raise ConfigurationError(msg)

        path = normalize_path(route.path)
        slot = self._table.setdefault(path, {})
        taken = sorted(route.methods & slot.keys())
        if taken:
            raise DuplicateRouteError(taken[0], path)
        slot.update(dict.fromkeys(route.methods, route))
        logger.debug("route %s %s -> %s", "|".join(sorted(route.methods)), path, route.label)

    def compile(self) -> None:
        self._sealed = True

    @property
    def routes(self) -> list[Route]:
        """Every distinct route, in the order it was added."""
        return list({id(r): r for slot in self._table.values() for r in slot.values()}.values())

    def match(self, method: str, path: str) -> Route:
        """Find the route for *method* on *path*.

        ``HEAD`` is served by the ``GET`` route. Raises ``NotFound`` for an
        unknown path and ``MethodNotAllowed`` for a known path without
        *method*.
        """
        slot = self._table.get(normalize_path(path))
        if not slot:
            raise NotFound(f"No route matches {method} {path!r}")
        route = slot.get(method) or (slot.get("GET") if method == "HEAD" else None)
        if route is None:
            raise MethodNotAllowed(frozenset(slot))
        return route
