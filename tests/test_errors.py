"""Tests for sample_app.errors — exception hierarchy and messages."""

import pytest

from sample_app.errors import (
    ConfigurationError,
    DuplicateRouteError,
    HTTPError,
    MethodNotAllowed,
    NotFound,
    RouteNotFound,
    SampleAppError,
    TemplateRenderError,
)


class TestHierarchy:
    def test_http_error_is_base_error(self) -> None:
        assert issubclass(HTTPError, SampleAppError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_route_not_found_alias(self) -> None:
        assert RouteNotFound is NotFound

    def test_duplicate_route_is_configuration_error(self) -> None:
        assert issubclass(DuplicateRouteError, ConfigurationError)

    def test_template_render_error_is_not_http_error(self) -> None:
        assert issubclass(TemplateRenderError, SampleAppError)
        assert not issubclass(TemplateRenderError, HTTPError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request body")
        assert str(err) == "400: Bad request body"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]

    def test_default_empty_headers(self) -> None:
        assert HTTPError(status=400).headers == ()


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_custom_detail(self) -> None:
        assert NotFound("Page /foo not found").detail == "Page /foo not found"


class TestMethodNotAllowed:
    def test_allow_header_sorted(self) -> None:
        err = MethodNotAllowed(frozenset({"POST", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, POST"),)
        assert "GET, POST" in err.detail


class TestMessages:
    def test_duplicate_route_message(self) -> None:
        err = DuplicateRouteError("GET", "/about")
        assert str(err) == "Route GET '/about' is already registered."

    def test_template_render_error_message(self) -> None:
        err = TemplateRenderError("static_pages/nope.html", "template not found")
        assert err.template_name == "static_pages/nope.html"
        assert "static_pages/nope.html" in str(err)
        assert "template not found" in str(err)
