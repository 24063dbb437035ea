"""Deterministic evaluation order for overlapping routes.

Two rules, applied as one stable sort:

1. Higher ``effective_priority`` first.  An explicit ``priority`` always
   wins; index routes default to -1 so named files beat them.
2. On equal priority, literal text beats a parameter at the same
   position: ``/users/login`` is tried before ``/users/:id``.

Routes tied on both keep their discovery order.
"""

from collections.abc import Iterable

from fileroute.routing.pattern import PARAM_MARKERS
from fileroute.routing.route import Route

# Sorts after every character a template can contain
_PARAM_SENTINEL = chr(0x10FFFF)

_SENTINEL_TABLE = str.maketrans(dict.fromkeys(PARAM_MARKERS, _PARAM_SENTINEL))


def specificity_key(path: str) -> str:
    """Sort key placing parameter markers after any literal character."""
    return path.translate(_SENTINEL_TABLE)


def order_routes(routes: Iterable[Route]) -> list[Route]:
    """Return *routes* in dispatch order.

    ``sorted`` is guaranteed stable, so routes equal on both keys stay in
    the order they were given.
    """
    return sorted(
        routes,
        key=lambda route: (-route.effective_priority, specificity_key(route.path)),
    )
