"""Route template parsing and compilation.

A template is a ``/``-separated path where ``:name`` (or ``%name``, for
filesystems that reject ``:``) captures a parameter running to the end
of its segment::

    /users/:id          -> /users/42             {"id": "42"}
    /files/v%version    -> /files/v2             {"version": "2"}
    /orders/index       -> /orders, /orders/, /orders/index

Templates are parsed once into segments; the capture groups and the
parameter names are produced from the same segment list, so group
positions and names cannot drift apart.
"""

import re
from dataclasses import dataclass

from fileroute.http.query import QueryParams

# Characters introducing a parameter inside a segment
PARAM_MARKERS = ":%"

# Final segment name that makes a route answer for its directory
INDEX_SEGMENT = "index"

# One or more characters that end neither the segment nor the path
_PARAM_CAPTURE = r"([^/?]+)"

# Trailing index: nothing, "/", "/index", "/:index" or "/%index"
_INDEX_SUFFIX = r"(?:/(?:[:%]?index)?)?"

# Optional query string; always the last capture group
_QUERY_SUFFIX = r"(?:\?(.*))?"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route template.

    Static:  ``users``      (param_name=None)
    Param:   ``:id``        (prefix="", param_name="id")
    Mixed:   ``v%version``  (prefix="v", param_name="version")
    """

    value: str
    prefix: str = ""
    param_name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.param_name is not None


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Data extracted from a URL by a successful pattern match."""

    params: dict[str, str]
    query: QueryParams


def parse_segment(part: str) -> PathSegment:
    """Parse one ``/``-free piece of a template.

    The first marker followed by at least one character starts the
    parameter; everything after it, markers included, is its name.
    A marker at the very end of a segment is literal text.
    """
    for i, char in enumerate(part):
        if char in PARAM_MARKERS and i + 1 < len(part):
            return PathSegment(value=part, prefix=part[:i], param_name=part[i + 1 :])
    return PathSegment(value=part)


def parse_template(template: str) -> list[PathSegment]:
    """Parse a route template into segments.

    Empty segments are kept so the template can be rebuilt exactly::

        "/users/:id" -> [PathSegment(""), PathSegment("users"),
                         PathSegment(":id", param_name="id")]
    """
    return [parse_segment(part) for part in template.split("/")]


def is_index_template(segments: list[PathSegment]) -> bool:
    last = segments[-1]
    return not last.is_param and last.value == INDEX_SEGMENT


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled URL matcher for one route template.

    Matching is anchored at both ends, case-insensitive, and accepts an
    optional ``?query`` tail.  A failed match returns ``None``; matching
    never raises.
    """

    template: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]
    is_index: bool

    def match(self, url: str) -> PatternMatch | None:
        m = self.regex.fullmatch(url)
        if m is None:
            return None
        groups = m.groups()
        params = dict(zip(self.param_names, groups, strict=False))
        return PatternMatch(params=params, query=QueryParams(groups[-1] or ""))


def compile_pattern(template: str) -> CompiledPattern:
    """Compile a template (method token already removed) into a matcher."""
    segments = parse_template(template)
    is_index = is_index_template(segments)
    if is_index:
        segments = segments[:-1]

    pieces: list[str] = []
    param_names: list[str] = []
    for segment in segments:
        if segment.param_name is None:
            pieces.append(re.escape(segment.value))
        else:
            pieces.append(re.escape(segment.prefix) + _PARAM_CAPTURE)
            param_names.append(segment.param_name)

    body = "/".join(pieces)
    if is_index:
        body += _INDEX_SUFFIX if segments else r"(?:[:%]?index)?"

    regex = re.compile(body + _QUERY_SUFFIX, re.IGNORECASE | re.DOTALL)
    return CompiledPattern(
        template=template,
        regex=regex,
        param_names=tuple(param_names),
        is_index=is_index,
    )
