"""Tests for fileroute.errors — exception hierarchy and error messages."""

from pathlib import Path

from fileroute.errors import ConfigurationError, FileRouteError, RouteLoadError


class TestHierarchy:
    def test_configuration_error_is_fileroute_error(self) -> None:
        assert issubclass(ConfigurationError, FileRouteError)

    def test_route_load_error_is_configuration_error(self) -> None:
        assert issubclass(RouteLoadError, ConfigurationError)


class TestRouteLoadError:
    def test_default_message(self) -> None:
        err = RouteLoadError(Path("routes/users.py"))
        assert err.source == Path("routes/users.py")
        assert str(err) == "Failed to load route module routes/users.py"

    def test_custom_detail(self) -> None:
        err = RouteLoadError(Path("x.py"), "bad things")
        assert str(err) == "bad things"
