"""Landing site catalog: row validation, pairwise distances, extremes.

Builds Site records from raw rows, computes one great-circle distance per
unordered pair of sites, and picks out the closest and farthest pairs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, Iterator, Optional, Sequence

from rover_sites.geo import great_circle_km
from rover_sites.models import Body, Site, SiteDistance, SitePair
from rover_sites.parsers import PARSER_MAP
from rover_sites.parsers.base import DuplicateIdentifier, ParseError, RowParser

logger = logging.getLogger(__name__)


@dataclass
class RowOutcome:
    """Result of parsing one raw row: either a site or the error it raised."""
    row_number: int               # 1-based position among the rows passed in, not a file line
    row: Sequence[str]
    site: Optional[Site] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CatalogResult:
    """Validated sites plus the rows that were rejected."""
    sites: list[Site] = field(default_factory=list)
    rejected: list[RowOutcome] = field(default_factory=list)


def iter_row_outcomes(
    rows: Iterable[Sequence[str]], parser: RowParser,
) -> Iterator[RowOutcome]:
    """Parse rows one by one, yielding an explicit outcome for each.

    Rows that repeat the layout header are skipped silently but still count
    towards the row number. Rows dropped earlier (blank lines, comments in
    read_rows) are not counted, so row numbers are data-row positions.
    """
    layout = getattr(parser, "layout", None)

    for row_number, row in enumerate(rows, start=1):
        if layout is not None and layout.is_header(row):
            continue
        try:
            yield RowOutcome(row_number, row, site=parser.parse_row(row))
        except ParseError as exc:
            yield RowOutcome(row_number, row, error=exc)


def build_catalog(
    rows: Iterable[Sequence[str]], layout: str = "rover",
) -> CatalogResult:
    """Build a catalog of unique sites. Bad rows are skipped, never fatal.

    The first site with a given identifier wins; later rows reusing it are
    rejected with DuplicateIdentifier.
    """
    parser = PARSER_MAP[layout]
    result = CatalogResult()
    seen: set[str] = set()

    for outcome in iter_row_outcomes(rows, parser):
        if outcome.ok and outcome.site.identifier in seen:
            outcome = RowOutcome(
                outcome.row_number, outcome.row,
                error=DuplicateIdentifier(outcome.site.identifier),
            )

        if not outcome.ok:
            logger.warning("Skipping row %d: %s", outcome.row_number, outcome.error)
            result.rejected.append(outcome)
            continue

        seen.add(outcome.site.identifier)
        result.sites.append(outcome.site)

    logger.debug(
        "Catalog built: %d site(s), %d rejected row(s)",
        len(result.sites), len(result.rejected),
    )
    return result


def pairwise_distances(body: Body, sites: Sequence[Site]) -> dict[SitePair, float]:
    """Distance for every unordered pair of distinct sites.

    Produces exactly n*(n-1)/2 entries. O(n²) in the number of sites.

    Raises:
        DuplicateIdentifier: if two sites share an identifier.
    """
    identifiers: set[str] = set()
    for site in sites:
        if site.identifier in identifiers:
            raise DuplicateIdentifier(site.identifier)
        identifiers.add(site.identifier)

    distances: dict[SitePair, float] = {}
    for a, b in combinations(sites, 2):
        distances[SitePair.of(a.identifier, b.identifier)] = great_circle_km(
            body, a.location, b.location,
        )

    return distances


def closest_pair(distances: dict[SitePair, float]) -> tuple[SitePair, float] | None:
    """Pair with the smallest distance. Ties go to the smallest pair key."""
    if not distances:
        return None
    return min(distances.items(), key=lambda item: (item[1], item[0]))


def farthest_pair(distances: dict[SitePair, float]) -> tuple[SitePair, float] | None:
    """Pair with the largest distance. Ties go to the smallest pair key."""
    if not distances:
        return None
    return min(distances.items(), key=lambda item: (-item[1], item[0]))


def distance_entries(distances: dict[SitePair, float]) -> list[SiteDistance]:
    """Flatten a distance map into plain records, in pair-key order."""
    return [
        SiteDistance(from_id=pair.first, to_id=pair.second, distance_km=distance)
        for pair, distance in sorted(distances.items())
    ]
