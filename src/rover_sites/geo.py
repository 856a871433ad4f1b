"""Great-circle distance on a spherical body — pure Python, no external deps."""

from __future__ import annotations

import math

from rover_sites.models import Body, GeoPoint
from rover_sites.parsers.coordinates import parse_location


def great_circle_km(body: Body, a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points on ``body`` in kilometers.

    Uses the spherical law of cosines. Inputs are decimal degrees.
    """
    if a == b:
        return 0.0

    sin_a, cos_a = math.sin(math.radians(a.latitude)), math.cos(math.radians(a.latitude))
    sin_b, cos_b = math.sin(math.radians(b.latitude)), math.cos(math.radians(b.latitude))

    # abs() keeps the result identical when a and b are swapped
    cos_dlon = math.cos(math.radians(abs(a.longitude - b.longitude)))

    cos_angle = sin_a * sin_b + cos_a * cos_b * cos_dlon
    # Rounding can push nearly-identical points just past 1
    cos_angle = max(-1.0, min(1.0, cos_angle))

    return body.radius_km * math.acos(cos_angle)


def distance_between_locations(body: Body, from_location: str, to_location: str) -> float:
    """Distance between two ``"(<lat>, <lon>)"`` location strings.

    Raises:
        ParseError: if either location fails to parse.
    """
    return great_circle_km(body, parse_location(from_location), parse_location(to_location))
