"""CLI entrypoint for rover-sites."""

from __future__ import annotations

import logging
from typing import Optional

import click

from rover_sites import report
from rover_sites.bodies import BODIES, DEFAULT_BODY, get_body
from rover_sites.catalog import (
    build_catalog,
    closest_pair,
    distance_entries,
    farthest_pair,
    pairwise_distances,
)
from rover_sites.geo import distance_between_locations
from rover_sites.models import Body
from rover_sites.parsers import PARSER_MAP, ParseError
from rover_sites.parsers.coordinates import (
    decimal_to_dms,
    format_dms,
    is_decimal_coordinate,
    parse_coordinate,
)
from rover_sites.reader import read_rows

_body_option = click.option(
    "--body", default=DEFAULT_BODY, type=click.Choice(sorted(BODIES), case_sensitive=False),
    help="Body to measure distances on.",
)
_radius_option = click.option(
    "--radius", type=click.FloatRange(min=0, min_open=True), default=None,
    help="Override the body radius (km).",
)
_layout_option = click.option(
    "--layout", default="rover", type=click.Choice(sorted(PARSER_MAP)),
    help="Catalog row layout.",
)


def _resolve_body(body: str, radius: Optional[float]) -> Body:
    try:
        return get_body(body, radius_km=radius)
    except KeyError as exc:
        raise click.ClickException(exc.args[0]) from exc


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Rover Sites — landing site coordinates and great-circle distances."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@_layout_option
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per site.")
def sites(path: str, layout: str, as_json: bool):
    """List the landing sites in a catalog file."""
    catalog = build_catalog(read_rows(path), layout=layout)

    if as_json:
        for site in catalog.sites:
            click.echo(site.to_json())
        return

    report.render(report.sites_table(catalog.sites))
    if catalog.rejected:
        report.render(report.rejected_table(catalog.rejected))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@_body_option
@_radius_option
@_layout_option
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per pair.")
def distances(path: str, body: str, radius: Optional[float], layout: str, as_json: bool):
    """Distances between every pair of sites, plus the closest and farthest."""
    world = _resolve_body(body, radius)
    catalog = build_catalog(read_rows(path), layout=layout)
    site_distances = pairwise_distances(world, catalog.sites)
    entries = distance_entries(site_distances)

    if as_json:
        for entry in entries:
            click.echo(entry.to_json())
        return

    report.render(
        report.distances_table(entries, world),
        report.extremes_panel(closest_pair(site_distances), farthest_pair(site_distances)),
    )


@cli.command()
@click.argument("from_location")
@click.argument("to_location")
@_body_option
@_radius_option
def distance(from_location: str, to_location: str, body: str, radius: Optional[float]):
    """Distance between two locations, e.g. "(51°30'N, 0°08'W)".

    Put -- before locations that start with a minus sign:

    \b
        rover-sites distance -- "-33.87, 151.21" "(51°30'N, 0°08'W)"
    """
    world = _resolve_body(body, radius)
    try:
        km = distance_between_locations(world, from_location, to_location)
    except ParseError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"{km:.3f} km")


@cli.command()
@click.argument("coordinate")
@click.option("--longitude", is_flag=True, help="Use E/W instead of N/S for DMS output.")
def convert(coordinate: str, longitude: bool):
    """Convert a coordinate between decimal degrees and DMS.

    Put -- before negative values so they are not read as options:

    \b
        rover-sites convert --longitude -- -0.5
    """
    try:
        value = parse_coordinate(coordinate)
    except ParseError as exc:
        raise click.ClickException(str(exc)) from exc

    if is_decimal_coordinate(coordinate):
        click.echo(format_dms(decimal_to_dms(value, longitude=longitude)))
    else:
        click.echo(f"{value:.6f}")
