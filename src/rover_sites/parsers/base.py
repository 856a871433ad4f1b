"""Parse errors and the abstract row parser with validation logic."""

from __future__ import annotations

import abc
from typing import Optional, Sequence

from rover_sites.models import GeoPoint, Site


class ParseError(ValueError):
    """Base class for every coordinate, location and row parse failure."""


class MalformedCoordinate(ParseError):
    """Raised when a coordinate string matches no supported notation."""

    def __init__(
        self,
        text: str,
        reason: str = "invalid coordinate format",
        field: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.text = text
        self.reason = reason
        self.field = field
        self.position = position
        detail = reason
        if field is not None:
            detail = f"{reason}: field {position} ({field!r})"
        super().__init__(f"{detail} in {text!r}")


class MalformedLocationPair(ParseError):
    """Raised when a location string does not hold exactly two coordinates."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason} in {text!r}")


class MalformedRow(ParseError):
    """Raised when a catalog row has the wrong shape or fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid row: {'; '.join(errors)}")


class DuplicateIdentifier(ParseError):
    """Raised when a site identifier is already present in the catalog."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"duplicate site identifier {identifier!r}")


def validate_point(point: GeoPoint) -> list[str]:
    """Range-check a point. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    if not -90 <= point.latitude <= 90:
        errors.append(f"latitude {point.latitude} out of range [-90, 90]")

    # Both the [-180, 180] and the east-positive [0, 360] conventions are valid
    if not -360 <= point.longitude <= 360:
        errors.append(f"longitude {point.longitude} out of range [-360, 360]")

    return errors


class RowParser(abc.ABC):
    """Abstract parser that converts a raw catalog row → Site."""

    @abc.abstractmethod
    def parse_row(self, row: Sequence[str]) -> Site:
        """Parse one raw row of string fields.

        Args:
            row: The fields of a single delimited record.

        Returns:
            A validated Site.

        Raises:
            ParseError: if the row is malformed or a coordinate fails to parse.
        """

    @staticmethod
    def validate(site: Site) -> list[str]:
        """Validate a Site. Returns list of error messages (empty = valid)."""
        errors = validate_point(site.location)

        if not site.identifier:
            errors.append("identifier is empty")

        return errors
