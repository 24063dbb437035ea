"""Shared type aliases used across fileroute modules."""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable

# Route handler: user-defined callable with variable signature
Handler: TypeAlias = Callable[..., Any]


@runtime_checkable
class RequestLike(Protocol):
    """Anything the router can dispatch: a URL and an HTTP method.

    Hosting servers pass their own request objects; only these two
    attributes are read, and neither is modified.
    """

    @property
    def url(self) -> str: ...

    @property
    def method(self) -> str: ...
