from __future__ import annotations

from src.domain.models import Route


def _contains(haystack: str | None, needle: str) -> bool:
    return needle in (haystack or "").lower()


def route_matches(route: Route, from_fragment: str, to_fragment: str) -> bool:
    """Case-insensitive substring match of both fragments against a route.

    Each end is checked against its from/to label, its start/end place name
    and the route name.

    The route name counts for either end, so a name holding both fragments
    matches regardless of travel direction ("A to B" matches a B→A search).
    """

    f = from_fragment.strip().lower()
    t = to_fragment.strip().lower()
    if not f or not t:
        return False

    from_ok = (
        _contains(route.from_location, f)
        or _contains(route.start_location, f)
        or _contains(route.name, f)
    )
    to_ok = (
        _contains(route.to_location, t)
        or _contains(route.end_location, t)
        or _contains(route.name, t)
    )
    return from_ok and to_ok
