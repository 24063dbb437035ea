"""Route table rendering for diagnostics and documentation.

Rows follow dispatch order, so the table shows exactly which route wins
when several could match.
"""

from collections.abc import Iterable

from fileroute.routing.route import Route


def route_rows(routes: Iterable[Route]) -> list[tuple[str, str, str, str]]:
    """Build ``(methods, path, priority, handler)`` rows for *routes*."""
    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        methods_str = ", ".join(sorted(route.methods))
        priority = f"{route.effective_priority:g}"
        if route.priority is None:
            priority += "*"
        handler_name = getattr(route.handler, "__qualname__", None) or repr(route.handler)
        if route.source is not None:
            handler_name = f"{handler_name} ({route.source.name})"
        rows.append((methods_str, route.path, priority, handler_name))
    return rows


def format_route_table(routes: Iterable[Route]) -> str:
    """Render *routes* as a plain-text table.

    Priorities marked ``*`` are defaults rather than declared values::

        METHOD  PATH           PRIORITY  HANDLER
        ----------------------------------------
        ANY     /users/login   0*        handler (login.py)
        ANY     /users/:id     0*        handler (:id.py)
    """
    rows = route_rows(routes)
    if not rows:
        return "No routes registered."

    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
    max_priority = max(max(len(r[2]) for r in rows), 8)  # "PRIORITY" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{:<{max_priority}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "PRIORITY", "HANDLER")]
    sep_len = max_methods + max_path + max_priority + 6 + max(len(r[3]) for r in rows)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return "\n".join(lines)
