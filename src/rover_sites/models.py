"""Data models for landing sites, coordinates and bodies."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class GeoPoint:
    """A point on a spherical body, in decimal degrees."""

    latitude: float             # [-90, 90]
    longitude: float            # [-180, 180] or [0, 360] east-positive


@dataclass
class DMSAngle:
    """Degrees/minutes/seconds angle with an optional compass direction."""

    degrees: float
    minutes: float = 0.0
    seconds: float = 0.0
    direction: Optional[str] = None     # "N", "S", "E", "W" or None
    negative: bool = False              # leading "-", never set together with direction

    def to_decimal(self) -> float:
        decimal = self.degrees + self.minutes / 60 + self.seconds / 3600
        if self.negative or self.direction in ("S", "W"):
            decimal = -decimal
        return decimal


@dataclass(frozen=True)
class Body:
    """A spherical world that distances are measured on."""

    name: str
    radius_km: float

    def __post_init__(self):
        if not self.radius_km > 0:
            raise ValueError(f"radius_km must be positive, got {self.radius_km}")


@dataclass(frozen=True)
class Site:
    """A validated landing site from a catalog row."""

    identifier: str             # unique within a catalog
    location: GeoPoint
    label: Optional[str] = None

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> Site:
        d = json.loads(raw)
        d["location"] = GeoPoint(**d["location"])
        return cls(**d)


@dataclass(frozen=True, order=True)
class SitePair:
    """Canonical key for an unordered pair of distinct site identifiers."""

    first: str
    second: str

    def __post_init__(self):
        if not self.first < self.second:
            raise ValueError(
                f"SitePair requires first < second, got {self.first!r}, {self.second!r}"
            )

    @classmethod
    def of(cls, a: str, b: str) -> SitePair:
        if a == b:
            raise ValueError(f"cannot pair site {a!r} with itself")
        return cls(a, b) if a < b else cls(b, a)

    def __str__(self) -> str:
        return f"{self.first} - {self.second}"


@dataclass
class SiteDistance:
    """Plain distance record handed to presentation."""

    from_id: str
    to_id: str
    distance_km: float

    def to_json(self) -> str:
        return json.dumps(asdict(self))
