"""Parser for comma-delimited landing site catalog rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rover_sites.models import GeoPoint, Site
from rover_sites.parsers.base import MalformedCoordinate, MalformedRow, RowParser
from rover_sites.parsers.coordinates import parse_coordinate


@dataclass(frozen=True)
class CatalogLayout:
    """Column positions for one catalog variant. Field count is fixed."""

    name: str
    header: tuple[str, ...]
    identifier_col: int
    latitude_col: int
    longitude_col: int
    label_col: Optional[int] = None

    @property
    def field_count(self) -> int:
        return len(self.header)

    def is_header(self, row: Sequence[str]) -> bool:
        return tuple(f.strip().lower() for f in row) == tuple(h.lower() for h in self.header)


# Rover,Site,Latitude,Longitude
# Distances are keyed by site name; the rover is kept as the label.
ROVER_LAYOUT = CatalogLayout(
    name="rover",
    header=("Rover", "Site", "Latitude", "Longitude"),
    identifier_col=1,
    latitude_col=2,
    longitude_col=3,
    label_col=0,
)

# Site,Latitude,Longitude
SITE_LAYOUT = CatalogLayout(
    name="site",
    header=("Site", "Latitude", "Longitude"),
    identifier_col=0,
    latitude_col=1,
    longitude_col=2,
)


class LandingSiteRowParser(RowParser):
    """Parse a delimited catalog row → Site.

    Reusable for any layout with an identifier and a latitude/longitude pair.
    """

    def __init__(self, layout: CatalogLayout = ROVER_LAYOUT):
        self.layout = layout

    def parse_row(self, row: Sequence[str]) -> Site:
        layout = self.layout
        if len(row) != layout.field_count:
            raise MalformedRow([
                f"expected {layout.field_count} fields, got {len(row)}",
            ])

        cols = [c.strip() for c in row]

        try:
            latitude = parse_coordinate(cols[layout.latitude_col], axis="latitude")
            longitude = parse_coordinate(cols[layout.longitude_col], axis="longitude")
        except MalformedCoordinate as exc:
            raise MalformedCoordinate(
                exc.text, f"{exc.reason} ({cols[layout.identifier_col] or 'unnamed site'})",
                field=exc.field, position=exc.position,
            ) from exc

        label = cols[layout.label_col] if layout.label_col is not None else None

        site = Site(
            identifier=cols[layout.identifier_col],
            location=GeoPoint(latitude=latitude, longitude=longitude),
            label=label or None,
        )

        errors = self.validate(site)
        if errors:
            raise MalformedRow(errors)

        return site
