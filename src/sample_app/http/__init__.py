"""Request and Response, the two values every handler and middleware sees."""

from sample_app.http.request import Request
from sample_app.http.response import Response

__all__ = ["Request", "Response"]
