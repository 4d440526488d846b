"""Request middleware.

``SessionMiddleware`` keeps a signed cookie session; ``CSRFMiddleware``
stores a token in it and checks that token on state-changing requests.
Middleware only runs for requests that matched a route.
"""

from sample_app.middleware.chain import Middleware, Next, build_chain
from sample_app.middleware.csrf import CSRFConfig, CSRFMiddleware, get_csrf_token
from sample_app.middleware.sessions import SessionConfig, SessionMiddleware, get_session

__all__ = [
    "CSRFConfig",
    "CSRFMiddleware",
    "Middleware",
    "Next",
    "SessionConfig",
    "SessionMiddleware",
    "build_chain",
    "get_csrf_token",
    "get_session",
]
