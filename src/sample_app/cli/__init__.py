"""``sample-app`` command line.

::

    sample-app run [APP] [--host H] [--port P]
    sample-app routes [APP]

``APP`` is ``module:attribute`` and defaults to the tutorial app.
"""

import argparse
import sys

from sample_app.cli._commands import list_routes, serve

DEFAULT_APP = "sample_app.pages:app"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="sample-app",
        description="Serve or inspect the static pages app.",
    )
    commands = parser.add_subparsers(dest="command")

    run = commands.add_parser("run", help="serve the app with pounce")
    run.add_argument("app", nargs="?", default=DEFAULT_APP, help=f"default: {DEFAULT_APP}")
    run.add_argument("--host", help="bind address (default from AppConfig)")
    run.add_argument("--port", type=int, help="bind port (default from AppConfig)")
    run.set_defaults(func=serve)

    routes = commands.add_parser("routes", help="print the route table")
    routes.add_argument("app", nargs="?", default=DEFAULT_APP, help=f"default: {DEFAULT_APP}")
    routes.set_defaults(func=list_routes)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)
    args.func(args)
