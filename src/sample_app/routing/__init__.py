"""Static route table: exact path lookup, built once at startup."""

from sample_app.routing.router import Route, Router, normalize_path
from sample_app.routing.static import StaticPage

__all__ = ["Route", "Router", "StaticPage", "normalize_path"]
