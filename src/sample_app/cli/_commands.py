"""What ``sample-app run`` and ``sample-app routes`` do."""

import argparse
import importlib
import logging
import sys
from typing import NoReturn

from sample_app.app import App
from sample_app.errors import ConfigurationError


def load_app(target: str) -> App:
    """Import ``module:attribute`` (attribute defaults to ``app``).

    A callable that is not an ``App`` is treated as a factory and called.
    Raises ``TypeError`` if the result is not an ``App``.
    """
    module_name, _, attribute = target.partition(":")
    obj = getattr(importlib.import_module(module_name), attribute or "app")
    if callable(obj) and not isinstance(obj, App):
        obj = obj()
    if not isinstance(obj, App):
        msg = f"{target!r} is a {type(obj).__name__}, not a sample_app.App"
        raise TypeError(msg)
    return obj


def _fail(exc: Exception) -> NoReturn:
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def serve(args: argparse.Namespace) -> None:
    try:
        app = load_app(args.app)
    except (ImportError, AttributeError, TypeError, ConfigurationError) as exc:
        _fail(exc)

    logging.basicConfig(
        level=app.config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        app.run(host=args.host, port=args.port)
    except ConfigurationError as exc:
        _fail(exc)


def list_routes(args: argparse.Namespace) -> None:
    try:
        routes = load_app(args.app).routes
    except (ImportError, AttributeError, TypeError, ConfigurationError) as exc:
        _fail(exc)

    rows = [("METHOD", "PATH", "HANDLER")]
    rows += [(",".join(sorted(r.methods)), r.path, r.label) for r in routes]
    widths = [max(len(row[i]) for row in rows) for i in range(2)]
    for method, path, label in rows:
        print(f"{method:<{widths[0]}}  {path:<{widths[1]}}  {label}")
