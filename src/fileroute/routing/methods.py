"""HTTP method extraction from route templates.

A filename like ``users/login.post.py`` binds its handler to ``POST``;
without a method token the handler accepts every method (``ANY``).
"""

import re
from pathlib import PurePath

# Sentinel method: the route accepts every HTTP method
ANY = "ANY"

# Method tokens recognised in a template, in match-precedence order
HTTP_METHODS: tuple[str, ...] = ("get", "post", "put", "delete", "patch")

# First ``.<verb>`` occurrence anywhere in the template, case-sensitive.
# ``/x.getter`` also yields GET.
_METHOD_TOKEN_RE = re.compile(r"\.(" + "|".join(HTTP_METHODS) + ")")


def split_method(template: str) -> tuple[str, frozenset[str]]:
    """Strip a method token from *template*.

    Returns the residual template and the route's method set::

        "/users/login.post" -> ("/users/login", frozenset({"POST"}))
        "/users/:id"        -> ("/users/:id", frozenset({"ANY"}))
    """
    match = _METHOD_TOKEN_RE.search(template)
    if match is None:
        return template, frozenset({ANY})
    residual = template[: match.start()] + template[match.end() :]
    return residual, frozenset({match.group(1).upper()})


def path_from_file(file: PurePath, root: PurePath, suffix: str = ".py") -> str:
    """Derive the default template for a handler file under *root*.

    The extension is stripped and separators are normalised to ``/``::

        routes/users/:id.py        -> /users/:id
        routes\\orders\\index.py     -> /orders/index
    """
    relative = file.relative_to(root)
    name = relative.name
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    parts = [*relative.parent.parts, name]
    return "/" + "/".join(part.replace("\\", "/") for part in parts)
