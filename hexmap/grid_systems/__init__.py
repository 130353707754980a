# hexmap/grid_systems/__init__.py
"""Hexagonal grid geometry helpers."""

from .hexagonal_grid import (
    compute_edge_length,
    build_boundary_polygon,
    resolve_cells_for_polygon,
    cell_boundary,
    cell_polygon
)

__all__ = [
    'compute_edge_length',
    'build_boundary_polygon',
    'resolve_cells_for_polygon',
    'cell_boundary',
    'cell_polygon'
]
