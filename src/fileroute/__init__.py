"""fileroute — convention routing where the file path is the URL.

Resolves a request to a handler using a route table derived from a
directory of handler modules.

Basic usage::

    from fileroute import Request, build

    router = build("routes")

    match = router.match(Request("/users/42?active=true", "GET"))
    if match is not None:
        match.params   # {"id": "42"}
        match.query    # QueryParams({"active": "true"})
        match.handler  # handler from routes/users/:id.py
"""

__version__ = "0.1.0"
__all__ = [
    "ANY",
    "ConfigurationError",
    "FileRouteError",
    "HandlerDefinition",
    "QueryParams",
    "Request",
    "Route",
    "RouteLoadError",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "build",
    "format_route_table",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fileroute`` fast while providing a clean top-level API.
    """
    if name in ("Router", "build"):
        from fileroute.routing import router

        return getattr(router, name)

    if name in ("Route", "RouteMatch"):
        from fileroute.routing import route

        return getattr(route, name)

    if name == "ANY":
        from fileroute.routing.methods import ANY

        return ANY

    if name == "RouterConfig":
        from fileroute.config import RouterConfig

        return RouterConfig

    if name == "HandlerDefinition":
        from fileroute.discovery import HandlerDefinition

        return HandlerDefinition

    if name == "Request":
        from fileroute.http.request import Request

        return Request

    if name == "QueryParams":
        from fileroute.http.query import QueryParams

        return QueryParams

    if name == "format_route_table":
        from fileroute.routing.introspect import format_route_table

        return format_route_table

    if name in ("ConfigurationError", "FileRouteError", "RouteLoadError"):
        from fileroute import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
