"""Parsers for coordinate strings in decimal and degrees/minutes/seconds notation.

Supported notations for a single coordinate:

    135.9               bare signed or unsigned decimal degrees
    135°54'0" E         degrees, minutes, optional seconds, optional direction
    -51 30 15           the same with whitespace instead of symbols
    14.5684°S           decimal degrees with a degree sign or hemisphere letter

A location is a pair of coordinates, latitude first: ``(51°30'N, 0°08'W)``.
"""

from __future__ import annotations

import re
from typing import Optional

from rover_sites.models import DMSAngle, GeoPoint
from rover_sites.parsers.base import (
    MalformedCoordinate,
    MalformedLocationPair,
    validate_point,
)

_DMS_PATTERN = re.compile(
    r"""
    ^[+-]?
    \d{1,3}                     # degrees
    (?:\s*°\s*|\s+)             # degree sign or whitespace
    \d{1,2}(?:\.\d+)?           # minutes
    (?:
        (?:\s*'\s*|\s+)         # minute sign or whitespace
        \d{1,2}(?:\.\d+)?       # seconds
        (?:\s*(?:"|''))?        # second sign, or two apostrophes
    )?
    (?:\s*')?
    \s*[NSEW]?$
    """,
    re.VERBOSE | re.IGNORECASE,
)

_HEMISPHERE_PATTERN = re.compile(
    r"^[+-]?(?:\d{1,3}(?:\.\d*)?|\.\d+)\s*(?:°\s*[NSEW]?|[NSEW])$",
    re.IGNORECASE,
)

_DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

_NUMBER_PATTERN = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")

_SYMBOLS = str.maketrans({"°": " ", "'": " ", '"': " "})

_DIRECTIONS = ("N", "S", "E", "W")

# Direction letters allowed on each axis
_AXIS_DIRECTIONS = {
    "latitude": ("N", "S"),
    "longitude": ("E", "W"),
}

_MICRO_ARCSEC_PER_DEGREE = 3_600_000_000
_MICRO_ARCSEC_PER_MINUTE = 60_000_000


def is_dms_coordinate(text: str) -> bool:
    """Check whether a coordinate string is in degrees/minutes/seconds form."""
    return _DMS_PATTERN.match(text.strip()) is not None


def is_decimal_coordinate(text: str) -> bool:
    """Check whether a coordinate string is a bare decimal number."""
    return _DECIMAL_PATTERN.match(text.strip()) is not None


def _split_sign_and_direction(raw: str) -> tuple[str, str, Optional[str]]:
    """Peel a leading sign and a trailing compass letter off a coordinate."""
    body = raw
    sign = ""
    if body and body[0] in "+-":
        sign, body = body[0], body[1:]

    direction = None
    if body and body[-1].upper() in _DIRECTIONS:
        direction, body = body[-1].upper(), body[:-1]

    if sign == "-" and direction is not None:
        raise MalformedCoordinate(raw, f"negative sign conflicts with direction {direction}")

    return sign, body, direction


def parse_dms(text: str) -> DMSAngle:
    """Parse a degrees/minutes/seconds string into a DMSAngle.

    The string must hold exactly a degrees field, a minutes field and an
    optional seconds field; stray tokens are an error rather than ignored.
    """
    raw = text.strip()
    sign, body, direction = _split_sign_and_direction(raw)

    fields = body.translate(_SYMBOLS).split()
    if len(fields) not in (2, 3):
        raise MalformedCoordinate(
            raw, f"expected degrees, minutes and optional seconds, got {len(fields)} field(s)",
        )

    values: list[float] = []
    for position, item in enumerate(fields):
        if not _NUMBER_PATTERN.match(item):
            raise MalformedCoordinate(raw, "non-numeric field", field=item, position=position)
        values.append(float(item))

    for position, value in enumerate(values[1:], start=1):
        if value >= 60:
            raise MalformedCoordinate(
                raw, "minutes and seconds must be below 60",
                field=fields[position], position=position,
            )

    return DMSAngle(
        degrees=values[0],
        minutes=values[1],
        seconds=values[2] if len(values) == 3 else 0.0,
        direction=direction,
        negative=sign == "-",
    )


def _parse_hemisphere_decimal(raw: str) -> tuple[float, Optional[str]]:
    sign, body, direction = _split_sign_and_direction(raw)
    value = float(body.replace("°", "").strip())
    if sign == "-" or direction in ("S", "W"):
        value = -value
    return value, direction


def _parse_with_direction(text: str) -> tuple[float, Optional[str]]:
    coord = text.strip()

    if _DMS_PATTERN.match(coord):
        angle = parse_dms(coord)
        return angle.to_decimal(), angle.direction

    if _HEMISPHERE_PATTERN.match(coord):
        return _parse_hemisphere_decimal(coord)

    if _DECIMAL_PATTERN.match(coord):
        return float(coord), None

    raise MalformedCoordinate(coord)


def parse_coordinate(text: str, axis: Optional[str] = None) -> float:
    """Convert a coordinate string to signed decimal degrees.

    For example:

        parse_coordinate("135°54'0\\" E")   -> 135.9
        parse_coordinate("135.9")          -> 135.9

    Args:
        text: The coordinate in any supported notation.
        axis: "latitude" or "longitude" to reject a compass letter that
            belongs to the other axis (e.g. a latitude ending in "E").

    Raises:
        MalformedCoordinate: if the text matches no notation.
    """
    value, direction = _parse_with_direction(text)

    if axis is not None and direction is not None:
        allowed = _AXIS_DIRECTIONS[axis]
        if direction not in allowed:
            raise MalformedCoordinate(
                text.strip(), f"direction {direction} is not valid for {axis}",
            )

    return value


def decimal_to_dms(value: float, longitude: bool = False) -> DMSAngle:
    """Convert signed decimal degrees to degrees, minutes and seconds.

    The sign becomes an N/S direction, or E/W when ``longitude`` is set.
    """
    positive, negative = ("E", "W") if longitude else ("N", "S")

    # Work in whole micro-arcseconds so seconds never round up to 60
    total = round(abs(value) * _MICRO_ARCSEC_PER_DEGREE)
    degrees, remainder = divmod(total, _MICRO_ARCSEC_PER_DEGREE)
    minutes, remainder = divmod(remainder, _MICRO_ARCSEC_PER_MINUTE)

    return DMSAngle(
        degrees=float(degrees),
        minutes=float(minutes),
        seconds=remainder / 1_000_000,
        direction=negative if value < 0 else positive,
    )


def _format_number(value: float) -> str:
    return f"{value:.6f}".rstrip("0").rstrip(".")


def format_dms(angle: DMSAngle) -> str:
    """Render a DMSAngle as e.g. ``51°30'0"N``."""
    text = (
        f"{_format_number(angle.degrees)}°"
        f"{_format_number(angle.minutes)}'"
        f"{_format_number(angle.seconds)}\""
    )
    if angle.direction:
        return text + angle.direction
    return f"-{text}" if angle.negative else text


def parse_location(text: str) -> GeoPoint:
    """Convert a ``"(<lat>, <lon>)"`` string into a GeoPoint.

    For example, London has the location ``(51°30'N, 0°08'W)``:
    ``51°30'N`` is the latitude and ``0°08'W`` the longitude.
    Parentheses are optional.
    """
    location = text.strip()

    opens, closes = location.startswith("("), location.endswith(")")
    if opens != closes:
        raise MalformedLocationPair(text, "unbalanced parentheses")
    if opens:
        location = location[1:-1]

    parts = location.split(",")
    if len(parts) != 2:
        raise MalformedLocationPair(
            text, f"expected latitude and longitude separated by a comma, got {len(parts)} part(s)",
        )

    point = GeoPoint(
        latitude=parse_coordinate(parts[0], axis="latitude"),
        longitude=parse_coordinate(parts[1], axis="longitude"),
    )

    errors = validate_point(point)
    if errors:
        raise MalformedCoordinate(text, "; ".join(errors))

    return point
