"""Core value types with no dependencies on the rest of hexmap."""

from .coordinate_types import LatLng, LngLat, Positioned, GeoPoint
from .mock_types import MockPointSet

__all__ = [
    'LatLng',
    'LngLat',
    'Positioned',
    'GeoPoint',
    'MockPointSet'
]
