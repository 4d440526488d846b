"""In-process client and page assertions for tests::

    from sample_app.testing import TestClient, assert_title
"""

from sample_app.testing.assertions import assert_contains, assert_status, assert_title
from sample_app.testing.client import TestClient

__all__ = ["TestClient", "assert_contains", "assert_status", "assert_title"]
