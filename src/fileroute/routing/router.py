"""Route table construction and dispatch.

The table is built once, eagerly, from a routes directory and is
read-only afterwards; a single ``Router`` can serve any number of
concurrent requests.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from fileroute._internal.types import RequestLike
from fileroute.config import RouterConfig
from fileroute.discovery import Discovery, FileSystemDiscovery, HandlerDefinition
from fileroute.routing.methods import split_method
from fileroute.routing.order import order_routes
from fileroute.routing.pattern import compile_pattern
from fileroute.routing.route import Route, RouteMatch

logger = logging.getLogger("fileroute.routing")


def make_route(definition: HandlerDefinition) -> Route:
    """Derive methods and compile the matcher for one handler unit."""
    path, methods = split_method(definition.template)
    route = Route(
        path=path,
        handler=definition.handler,
        methods=methods,
        pattern=compile_pattern(path),
        priority=definition.priority,
        comment=definition.comment,
        source=definition.source,
    )
    logger.debug(
        "Compiled %s %s (priority %s)",
        ",".join(sorted(methods)),
        path,
        route.effective_priority,
    )
    return route


class Router:
    """Ordered route table with first-match dispatch.

    Usage::

        router = build("routes")
        match = router.match(request)
        if match is None:
            ...  # 404
        else:
            match.handler(request, **match.params)

    Routes passed in are put into dispatch order on construction; see
    :mod:`fileroute.routing.order`.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[Route] = ()) -> None:
        self._routes: tuple[Route, ...] = tuple(order_routes(routes))

    @classmethod
    def from_definitions(cls, definitions: Iterable[HandlerDefinition]) -> "Router":
        return cls(make_route(definition) for definition in definitions)

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes, in the order dispatch tries them."""
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __repr__(self) -> str:
        return f"Router({len(self._routes)} routes)"

    def match(self, request: RequestLike) -> RouteMatch | None:
        """Find the first route matching ``request.url`` and ``request.method``.

        The request is not modified.  Returns ``None`` when nothing
        matches.
        """
        return self.lookup(request.method, request.url)

    def lookup(self, method: str, url: str) -> RouteMatch | None:
        """Match a method and URL against the route table.

        Routes whose pattern matches but whose methods do not are
        skipped, and the scan continues.

        *method* is compared case-insensitively (``"post"`` selects a
        ``POST`` route); route methods are always upper-case.
        """
        for route in self._routes:
            if not route.accepts(method):
                continue
            matched = route.pattern.match(url)
            if matched is not None:
                return RouteMatch(route=route, params=matched.params, query=matched.query)
        return None


def build(
    root: str | Path,
    config: RouterConfig | None = None,
    *,
    discovery: Discovery | None = None,
) -> Router:
    """Build a router from the handler units under *root*.

    Any failure (missing directory, a module that raises on import, a
    malformed handler unit) propagates from here; nothing is deferred to
    request time.

    Args:
        root: Routes directory.
        config: Build configuration.  Defaults to ``RouterConfig()``.
        discovery: Source of handler units.  Defaults to
            :class:`~fileroute.discovery.FileSystemDiscovery`.
    """
    config = config or RouterConfig()
    discovery = discovery or FileSystemDiscovery(config)
    definitions = discovery.discover(Path(root))
    router = Router.from_definitions(definitions)
    logger.info("Built %d routes from %s", len(router), root)
    return router
