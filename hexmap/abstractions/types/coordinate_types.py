# hexmap/abstractions/types/coordinate_types.py
"""Coordinate type definitions.

Two axis orders are in use across hexmap and they are NOT interchangeable:

- ``LatLng``: (latitude, longitude) - what h3 consumes and what boundary
  polygons are built from.
- ``LngLat``: (longitude, latitude) - x/y order, used for cell outlines and
  generated points.

Both are tuples, so they compare equal to plain pairs in the same order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple


class LatLng(NamedTuple):
    """A (latitude, longitude) pair."""
    lat: float
    lng: float

    def swap(self) -> 'LngLat':
        """Return the same position in (longitude, latitude) order."""
        return LngLat(self.lng, self.lat)


class LngLat(NamedTuple):
    """A (longitude, latitude) pair."""
    lng: float
    lat: float

    def swap(self) -> LatLng:
        """Return the same position in (latitude, longitude) order."""
        return LatLng(self.lat, self.lng)


class Positioned(ABC):
    """Anything that can report a latitude and a longitude.

    Classes do not need to inherit from this interface: any class that
    defines both ``get_lat`` and ``get_lng`` passes ``isinstance`` checks.
    """

    @abstractmethod
    def get_lat(self) -> float:
        """Latitude in degrees."""
        pass

    @abstractmethod
    def get_lng(self) -> float:
        """Longitude in degrees."""
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Positioned:
            required = ('get_lat', 'get_lng')
            if all(callable(getattr(subclass, name, None)) for name in required):
                return True
        return NotImplemented


@dataclass(frozen=True)
class GeoPoint(Positioned):
    """Concrete positioned point, e.g. a viewport corner."""
    lat: float
    lng: float

    def get_lat(self) -> float:
        return self.lat

    def get_lng(self) -> float:
        return self.lng

    @classmethod
    def parse(cls, text: str) -> 'GeoPoint':
        """Parse a ``"lat,lng"`` string."""
        parts = [p.strip() for p in text.split(',')]
        if len(parts) != 2:
            raise ValueError(f"Expected 'lat,lng', got: {text!r}")
        return cls(float(parts[0]), float(parts[1]))

    def to_latlng(self) -> LatLng:
        return LatLng(self.lat, self.lng)
