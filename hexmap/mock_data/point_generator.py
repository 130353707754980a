# hexmap/mock_data/point_generator.py
"""Random point scattering around a centre coordinate.

Points are sampled with angle and distance drawn independently and
uniformly, so they cluster towards the centre (density falls off as
1/distance). Offsets use a flat-earth approximation; near the poles the
longitude scale tends to zero and offsets blow up.
"""

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from ..abstractions.types import LngLat, MockPointSet
from ..config import config

logger = logging.getLogger(__name__)

_default_rng = np.random.default_rng(config.get('mock_data.random_seed'))


def seed_default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Replace the module-wide generator with a freshly seeded one."""
    global _default_rng
    _default_rng = np.random.default_rng(seed)
    return _default_rng


def _resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else _default_rng


def generate_random_points(center: Sequence[float],
                           radius_km: float,
                           count: int,
                           rng: Optional[np.random.Generator] = None) -> List[LngLat]:
    """
    Scatter ``count`` points within ``radius_km`` of ``center``.

    Args:
        center: Centre as (lng, lat)
        radius_km: Maximum distance from the centre in km
        count: Number of points to generate
        rng: Random generator (module-wide default if None)

    Returns:
        ``count`` points as (lng, lat), in generation order
    """
    if count < 0:
        raise ValueError(f"Point count must be non-negative, got: {count}")
    if radius_km < 0:
        raise ValueError(f"Radius must be non-negative, got: {radius_km}")

    rng = _resolve_rng(rng)
    center_lng, center_lat = center
    km_per_lat = config.get('mock_data.km_per_degree', 111.32)
    km_per_lng = km_per_lat * math.cos(math.radians(center_lat))

    points = []
    for _ in range(count):
        angle = rng.random() * 2 * math.pi
        distance = rng.random() * radius_km

        lat_offset = (distance * math.sin(angle)) / km_per_lat
        lng_offset = (distance * math.cos(angle)) / km_per_lng

        points.append(LngLat(center_lng + lng_offset, center_lat + lat_offset))

    return points


def build_mock_point_set(cell_id: str,
                         center: Sequence[float],
                         rng: Optional[np.random.Generator] = None) -> MockPointSet:
    """
    Simulate the occupants of one cell.

    Draws an occupant count from [min_count, min_count + count_span)
    (5-24 by default) and scatters that many points within
    ``mock_data.radius_km`` of ``center``.

    Args:
        cell_id: H3 cell id the occupants belong to
        center: Cell centre as (lng, lat)
        rng: Random generator (module-wide default if None)
    """
    rng = _resolve_rng(rng)
    settings = config.mock_data

    count = settings.get('min_count', 5) + math.floor(rng.random() * settings.get('count_span', 20))
    points = generate_random_points(center, settings.get('radius_km', 0.5), count, rng=rng)

    logger.debug(f"Generated {count} mock occupants for cell {cell_id}")
    return MockPointSet(cell_id=cell_id, count=count, points=points, selected=False)
