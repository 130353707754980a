# hexmap/abstractions/types/mock_types.py
"""Mock occupant data type definitions."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .coordinate_types import LngLat


@dataclass
class MockPointSet:
    """Simulated occupants of one hexagonal cell.

    ``points`` are in (longitude, latitude) order. ``selected`` starts out
    False and is only ever changed by callers (e.g. a UI toggling a cell).
    """
    cell_id: str
    count: int
    points: List[LngLat] = field(default_factory=list)
    selected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dict for JSON output."""
        return {
            'cell_id': self.cell_id,
            'count': self.count,
            'points': [[p[0], p[1]] for p in self.points],
            'selected': self.selected
        }
