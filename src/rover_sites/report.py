"""Terminal rendering of landing sites and distances."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rover_sites.catalog import RowOutcome
from rover_sites.models import Body, Site, SiteDistance, SitePair

console = Console()


def sites_table(sites: Sequence[Site]) -> Table:
    table = Table(title=f"Landing Sites ({len(sites)})")
    table.add_column("Site", style="bold")
    table.add_column("Rover")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")

    for site in sites:
        table.add_row(
            site.identifier,
            site.label or "",
            f"{site.latitude:.6f}",
            f"{site.longitude:.6f}",
        )

    return table


def rejected_table(rejected: Sequence[RowOutcome]) -> Table:
    table = Table(title=f"Skipped Rows ({len(rejected)})", title_style="yellow")
    table.add_column("Row", justify="right", width=5)
    table.add_column("Fields")
    table.add_column("Reason", style="yellow")

    for outcome in rejected:
        table.add_row(str(outcome.row_number), ", ".join(outcome.row), str(outcome.error))

    return table


def distances_table(entries: Sequence[SiteDistance], body: Body) -> Table:
    table = Table(title=f"Site Distances on {body.name.title()} (r = {body.radius_km:g} km)")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Distance (km)", justify="right")

    for entry in entries:
        table.add_row(entry.from_id, entry.to_id, f"{entry.distance_km:,.1f}")

    return table


def extremes_panel(
    closest: Optional[tuple[SitePair, float]],
    farthest: Optional[tuple[SitePair, float]],
) -> Panel:
    if closest is None or farthest is None:
        return Panel("Need at least two sites to compare.", title="Summary", border_style="blue")

    lines = [
        f"Closest: [green]{closest[0].first}[/] and [green]{closest[0].second}[/] "
        f"— [bold]{closest[1]:,.1f} km[/]",
        f"Farthest: [red]{farthest[0].first}[/] and [red]{farthest[0].second}[/] "
        f"— [bold]{farthest[1]:,.1f} km[/]",
    ]
    return Panel("\n".join(lines), title="Summary", border_style="blue")


def render(*renderables) -> None:
    """Print renderables to the shared console."""
    for renderable in renderables:
        console.print(renderable)
