"""Registry of spherical bodies that distances can be measured on."""

from __future__ import annotations

from typing import Optional

from rover_sites.models import Body

BODIES: dict[str, Body] = {
    "earth": Body(name="earth", radius_km=6371.0),
    "mars": Body(name="mars", radius_km=3389.5),
    "moon": Body(name="moon", radius_km=1737.4),
}

DEFAULT_BODY = "mars"


def get_body(name: str, radius_km: Optional[float] = None) -> Body:
    """Look up a body by name, optionally overriding its radius.

    Raises:
        KeyError: if ``name`` is unknown and no radius is given.
        ValueError: if ``radius_km`` is not positive.
    """
    key = name.lower()
    if radius_km is not None:
        return Body(name=key, radius_km=radius_km)

    try:
        return BODIES[key]
    except KeyError:
        known = ", ".join(sorted(BODIES))
        raise KeyError(f"unknown body {name!r} (known: {known})") from None
