"""Parsers for converting raw coordinate text and catalog rows to models."""

from rover_sites.parsers.base import (
    DuplicateIdentifier,
    MalformedCoordinate,
    MalformedLocationPair,
    MalformedRow,
    ParseError,
)
from rover_sites.parsers.coordinates import (
    decimal_to_dms,
    format_dms,
    parse_coordinate,
    parse_location,
)
from rover_sites.parsers.landing_csv import LandingSiteRowParser, ROVER_LAYOUT, SITE_LAYOUT

PARSER_MAP = {
    "rover": LandingSiteRowParser(ROVER_LAYOUT),
    "site": LandingSiteRowParser(SITE_LAYOUT),
}

__all__ = [
    "PARSER_MAP",
    "LandingSiteRowParser",
    "ParseError",
    "MalformedCoordinate",
    "MalformedLocationPair",
    "MalformedRow",
    "DuplicateIdentifier",
    "parse_coordinate",
    "parse_location",
    "decimal_to_dms",
    "format_dms",
]
