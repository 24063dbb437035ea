"""Tests for fileroute.routing.route — Route and RouteMatch."""

import pytest

from fileroute.http.query import QueryParams
from fileroute.routing.methods import ANY
from fileroute.routing.pattern import compile_pattern
from fileroute.routing.route import Route, RouteMatch


def _handler() -> str:
    return "ok"


def _route(
    path: str,
    methods: frozenset[str] | None = None,
    priority: float | None = None,
) -> Route:
    return Route(
        path=path,
        handler=_handler,
        methods=methods or frozenset({ANY}),
        pattern=compile_pattern(path),
        priority=priority,
    )


class TestRoute:
    def test_creation(self) -> None:
        route = _route("/users")
        assert route.path == "/users"
        assert route.handler is _handler
        assert route.methods == frozenset({ANY})
        assert route.comment is None
        assert route.source is None

    def test_frozen(self) -> None:
        route = _route("/")
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]


class TestEffectivePriority:
    def test_default_is_zero(self) -> None:
        assert _route("/users").effective_priority == 0

    def test_index_defaults_to_minus_one(self) -> None:
        route = _route("/orders/index")
        assert route.is_index is True
        assert route.effective_priority == -1

    def test_explicit_priority(self) -> None:
        assert _route("/users", priority=5).effective_priority == 5

    def test_explicit_zero_on_index_is_kept(self) -> None:
        assert _route("/orders/index", priority=0).effective_priority == 0


class TestAccepts:
    def test_any_accepts_everything(self) -> None:
        route = _route("/users")
        for method in ("GET", "POST", "DELETE", "OPTIONS"):
            assert route.accepts(method)

    def test_single_method(self) -> None:
        route = _route("/users", frozenset({"POST"}))
        assert route.accepts("POST")
        assert not route.accepts("GET")

    def test_method_case_normalised(self) -> None:
        assert _route("/users", frozenset({"POST"})).accepts("post")


class TestRouteMatch:
    def test_handler_shortcut(self) -> None:
        route = _route("/users/:id")
        match = RouteMatch(route=route, params={"id": "42"}, query=QueryParams())
        assert match.handler is _handler
        assert match.params == {"id": "42"}

    def test_frozen(self) -> None:
        route = _route("/")
        match = RouteMatch(route=route, params={}, query=QueryParams())
        with pytest.raises(AttributeError):
            match.route = route  # type: ignore[misc]
