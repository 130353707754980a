"""
hexmap - hexagonal grid helpers for map views.

- Grid geometry: H3 edge lengths, viewport polygons, polygon-to-cell
  lookups and cell outlines (``hexmap.grid_systems``)
- Mock data: simulated occupants scattered around cell centres
  (``hexmap.mock_data``)

Usage Example:
    from hexmap import GeoPoint, build_boundary_polygon, resolve_cells_for_polygon

    polygon = build_boundary_polygon(GeoPoint(40.0, 117.0), GeoPoint(39.0, 116.0))
    cells = resolve_cells_for_polygon(polygon, 7)
"""

from .abstractions.types import LatLng, LngLat, Positioned, GeoPoint, MockPointSet
from .grid_systems import (
    compute_edge_length,
    build_boundary_polygon,
    resolve_cells_for_polygon,
    cell_boundary,
    cell_polygon
)
from .mock_data import generate_random_points, build_mock_point_set, seed_default_rng

__version__ = '0.1.0'

__all__ = [
    'LatLng',
    'LngLat',
    'Positioned',
    'GeoPoint',
    'MockPointSet',
    'compute_edge_length',
    'build_boundary_polygon',
    'resolve_cells_for_polygon',
    'cell_boundary',
    'cell_polygon',
    'generate_random_points',
    'build_mock_point_set',
    'seed_default_rng'
]
