"""Synthetic occupant data for demos and tests."""

from .point_generator import (
    generate_random_points,
    build_mock_point_set,
    seed_default_rng
)

__all__ = [
    'generate_random_points',
    'build_mock_point_set',
    'seed_default_rng'
]
