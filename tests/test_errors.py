"""Tests for stuffsite.errors — exception hierarchy and error messages."""

import pytest

from stuffsite.errors import (
    ConfigurationError,
    HTTPError,
    MethodNotAllowed,
    NotFound,
    StuffsiteError,
)


class TestHierarchy:
    def test_http_error_is_stuffsite_error(self) -> None:
        assert issubclass(HTTPError, StuffsiteError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_method_not_allowed_is_http_error(self) -> None:
        assert issubclass(MethodNotAllowed, HTTPError)

    def test_configuration_error_is_stuffsite_error(self) -> None:
        assert issubclass(ConfigurationError, StuffsiteError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request")
        assert str(err) == "400: Bad request"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=418)) == "418"

    def test_raisable(self) -> None:
        with pytest.raises(HTTPError) as exc_info:
            raise HTTPError(status=403, detail="nope")
        assert exc_info.value.status == 403


class TestSubclasses:
    def test_not_found_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_method_not_allowed_allow_header(self) -> None:
        err = MethodNotAllowed(frozenset({"HEAD", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, HEAD"),)
        assert err.detail == "Method not allowed. Allowed methods: GET, HEAD"

    def test_method_not_allowed_custom_detail(self) -> None:
        err = MethodNotAllowed(frozenset({"GET"}), detail="read only")
        assert err.detail == "read only"
