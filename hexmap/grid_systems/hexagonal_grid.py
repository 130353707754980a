# hexmap/grid_systems/hexagonal_grid.py
"""Hexagonal grid helpers using H3.

Thin adapter between hexmap's coordinate conventions and the h3 library.
Axis order matters and differs per function:

================================  ==============  ==============
function                          input           output
================================  ==============  ==============
``build_boundary_polygon``        Positioned x2   ``LatLng`` x 4
``resolve_cells_for_polygon``     ``LatLng`` ...  cell ids
``cell_boundary``                 cell id         ``LngLat`` ...
================================  ==============  ==============

Errors raised by h3 (invalid resolution, invalid cell, bad polygon) are
passed through unchanged.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence, Tuple, Union

import h3  # type: ignore
from h3 import LatLngPoly  # type: ignore
from shapely.geometry import Polygon

from ..abstractions.types import LatLng, LngLat, Positioned

logger = logging.getLogger(__name__)

METERS_PER_KM = 1000
TWO_PLACES = Decimal('0.01')

PairLike = Union[LatLng, Tuple[float, float], Sequence[float]]


def compute_edge_length(resolution: int) -> str:
    """Average hexagon edge length at ``resolution``, in km, as display text.

    The metre value from h3 is divided by 1000 and rounded half-up to two
    decimal places on its exact binary value, so ties always round away
    from zero.

    Args:
        resolution: H3 resolution (0-15); not validated here

    Returns:
        Fixed-point string such as ``"1.41"``. Meant for display only.
    """
    edge_length_m = h3.average_hexagon_edge_length(resolution, unit='m')
    edge_length_km = Decimal(edge_length_m / METERS_PER_KM)
    return str(edge_length_km.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def build_boundary_polygon(northeast: Positioned, southwest: Positioned) -> List[LatLng]:
    """
    Build a rectangle from two opposite corners.

    Corners are not checked: if ``northeast`` is not really north-east of
    ``southwest`` the rectangle is degenerate or flipped, and it is up to
    whoever consumes it (usually h3) to complain.

    Args:
        northeast: Object with ``get_lat()``/``get_lng()``
        southwest: Object with ``get_lat()``/``get_lng()``

    Returns:
        Four (lat, lng) corners: NE, NW, SW, SE
    """
    ne_lat, ne_lng = northeast.get_lat(), northeast.get_lng()
    sw_lat, sw_lng = southwest.get_lat(), southwest.get_lng()

    return [
        LatLng(ne_lat, ne_lng),
        LatLng(ne_lat, sw_lng),
        LatLng(sw_lat, sw_lng),
        LatLng(sw_lat, ne_lng),
    ]


def resolve_cells_for_polygon(boundary_polygon: Sequence[PairLike], resolution: int) -> List[str]:
    """
    Get the H3 cells covering a polygon.

    Cell inclusion follows h3's own rule (cell centre inside the polygon).

    Args:
        boundary_polygon: Outer ring as (lat, lng) pairs, e.g. the output
            of ``build_boundary_polygon``; need not be closed
        resolution: H3 resolution (0-15)

    Returns:
        Cell ids in whatever order h3 returns them
    """
    polygon = LatLngPoly([(lat, lng) for lat, lng in boundary_polygon])
    cells = h3.polygon_to_cells(polygon, resolution)
    logger.debug(f"Found {len(cells)} hexagons for H3 resolution {resolution}")
    return list(cells)


def cell_boundary(cell_id: str) -> List[LngLat]:
    """Boundary vertices of a cell, in (lng, lat) order.

    h3 returns (lat, lng); every vertex is swapped. Vertex order is h3's.
    """
    boundary = h3.cell_to_boundary(cell_id)
    return [LngLat(lng, lat) for lat, lng in boundary]


def cell_polygon(cell_id: str) -> Polygon:
    """Cell outline as a closed shapely polygon with x = lng, y = lat.

    Cells crossing the antimeridian are unwrapped so their x values run
    past 180 instead of jumping to -180; the polygon stays cell-sized.
    """
    coords = [tuple(vertex) for vertex in cell_boundary(cell_id)]
    lngs = [lng for lng, _ in coords]
    if max(lngs) - min(lngs) > 180:
        coords = [(lng + 360 if lng < 0 else lng, lat) for lng, lat in coords]
    coords.append(coords[0])  # Close polygon
    return Polygon(coords)
