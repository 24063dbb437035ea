"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from pathlib import Path

from fileroute._internal.types import Handler
from fileroute.http.query import QueryParams
from fileroute.routing.methods import ANY
from fileroute.routing.pattern import CompiledPattern

# Default priority for routes folded onto their directory
INDEX_PRIORITY = -1


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route: template, method set, matcher, and handler.

    Built once per handler unit when the router is constructed and never
    modified afterwards.

    Attributes:
        path: Template with any method token removed (e.g. ``/users/:id``).
        handler: The callable returned by a successful dispatch.
        methods: Accepted methods, or ``frozenset({ANY})``.
        pattern: Matcher compiled from ``path``.
        priority: Explicit priority, or ``None`` when the unit set none.
        comment: Documentation attached to the unit; opaque to routing.
        source: File the unit was loaded from, when it came from disk.
    """

    path: str
    handler: Handler
    methods: frozenset[str]
    pattern: CompiledPattern
    priority: float | None = None
    comment: str | None = None
    source: Path | None = None

    @property
    def is_index(self) -> bool:
        return self.pattern.is_index

    @property
    def effective_priority(self) -> float:
        """Priority used for ordering: explicit, else -1 for index routes, else 0."""
        if self.priority is not None:
            return self.priority
        return INDEX_PRIORITY if self.is_index else 0

    def accepts(self, method: str) -> bool:
        return ANY in self.methods or method.upper() in self.methods


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful dispatch.

    Returned to the caller instead of being written onto the request.
    """

    route: Route
    params: dict[str, str]
    query: QueryParams

    @property
    def handler(self) -> Handler:
        return self.route.handler
