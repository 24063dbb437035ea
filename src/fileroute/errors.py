"""fileroute exception hierarchy.

Shared across discovery, route compilation, and the router so every
module raises and catches the same types.
"""

from pathlib import Path


class FileRouteError(Exception):
    """Base for all fileroute-specific errors."""


class ConfigurationError(FileRouteError):
    """Raised when a handler unit or router configuration is invalid.

    Raised while the route table is built; a broken route definition
    stops startup instead of surfacing at request time.
    """


class RouteLoadError(ConfigurationError):
    """A handler module raised while it was being executed.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, source: Path, detail: str = "") -> None:
        self.source = source
        super().__init__(detail or f"Failed to load route module {source}")
