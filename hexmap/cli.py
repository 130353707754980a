"""
Hexagonal grid command-line tool.

Exposes the grid geometry helpers and the mock occupant generator, and
chains them the way a map view does: viewport -> covering cells -> mock
occupants per cell.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click
import numpy as np
import yaml

from .abstractions.types import GeoPoint
from .config import config
from .grid_systems import (
    build_boundary_polygon,
    cell_boundary,
    cell_polygon,
    compute_edge_length,
    resolve_cells_for_polygon
)
from .infrastructure.logging import setup_simple_logging
from .mock_data import build_mock_point_set

logger = logging.getLogger(__name__)


class CoordinateParam(click.ParamType):
    """click parameter for ``lat,lng`` strings."""
    name = 'lat,lng'

    def convert(self, value, param, ctx):
        if isinstance(value, GeoPoint):
            return value
        try:
            return GeoPoint.parse(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


COORDINATE = CoordinateParam()


def _resolution(resolution: Optional[int]) -> int:
    if resolution is not None:
        return resolution
    return config.get('grids.hexagonal.default_resolution', 7)


def _wrap_longitude(lng: float) -> float:
    """Bring a longitude back into [-180, 180)."""
    return (lng + 180) % 360 - 180


def _echo_json(data):
    click.echo(json.dumps(data))


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='YAML file overriding the default settings')
def cli(verbose, config_path):
    """Hexagonal grid map helpers."""
    if config_path:
        try:
            config.load(config_path)
        except (OSError, yaml.YAMLError) as e:
            raise click.ClickException(f"Failed to load config {config_path}: {e}")

    level = 'DEBUG' if verbose else config.get('logging.level', 'INFO')
    setup_simple_logging(
        log_level=level,
        use_colors=config.get('logging.use_colors'),
        show_context=config.get('logging.show_context', False)
    )


@cli.command('edge-length')
@click.argument('resolution', type=int)
def edge_length(resolution):
    """Print the average hexagon edge length (km) at RESOLUTION."""
    try:
        click.echo(compute_edge_length(resolution))
    except Exception as e:
        raise click.ClickException(f"Failed to compute edge length: {e}")


@cli.command()
@click.option('--ne', 'northeast', type=COORDINATE, required=True, help='North-east corner as lat,lng')
@click.option('--sw', 'southwest', type=COORDINATE, required=True, help='South-west corner as lat,lng')
@click.option('--resolution', '-r', type=int, help='H3 resolution (0-15)')
def cells(northeast, southwest, resolution):
    """List the cells covering a viewport."""
    resolution = _resolution(resolution)
    try:
        polygon = build_boundary_polygon(northeast, southwest)
        cell_ids = resolve_cells_for_polygon(polygon, resolution)
    except Exception as e:
        raise click.ClickException(f"Failed to resolve cells: {e}")

    logger.info(f"Resolved {len(cell_ids)} cells at resolution {resolution}")
    _echo_json(cell_ids)


@cli.command()
@click.argument('cell_id')
def boundary(cell_id):
    """Print the outline of CELL_ID as [[lng, lat], ...]."""
    try:
        vertices = cell_boundary(cell_id)
    except Exception as e:
        raise click.ClickException(f"Failed to get boundary for {cell_id}: {e}")
    _echo_json([list(v) for v in vertices])


@cli.command('mock-people')
@click.option('--ne', 'northeast', type=COORDINATE, required=True, help='North-east corner as lat,lng')
@click.option('--sw', 'southwest', type=COORDINATE, required=True, help='South-west corner as lat,lng')
@click.option('--resolution', '-r', type=int, help='H3 resolution (0-15)')
@click.option('--seed', type=int, help='Random seed for reproducible output')
def mock_people(northeast, southwest, resolution, seed):
    """Generate mock occupants for every cell in a viewport."""
    resolution = _resolution(resolution)
    if seed is None:
        seed = config.get('mock_data.random_seed')
    rng = np.random.default_rng(seed) if seed is not None else None

    try:
        polygon = build_boundary_polygon(northeast, southwest)
        cell_ids = resolve_cells_for_polygon(polygon, resolution)
    except Exception as e:
        raise click.ClickException(f"Failed to resolve cells: {e}")

    results = []
    for cell_id in sorted(cell_ids):
        centroid = cell_polygon(cell_id).centroid
        center = (_wrap_longitude(centroid.x), centroid.y)
        point_set = build_mock_point_set(cell_id, center, rng=rng)
        results.append(point_set.to_dict())

    total = sum(r['count'] for r in results)
    logger.info(f"Generated {total} mock occupants across {len(results)} cells")
    _echo_json(results)


if __name__ == '__main__':
    cli()
