"""Minimal request value for dispatch.

Hosting servers usually pass their own request objects; anything with
``url`` and ``method`` attributes works.  ``Request`` is the plain
frozen value used when there is nothing else at hand (tests, tooling,
documentation generators).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Request:
    """A URL (path plus optional ``?query``) and an HTTP method."""

    url: str
    method: str = "GET"
