"""Shared fixtures for hexmap tests."""

import copy
import logging

import numpy as np
import pytest

from hexmap.abstractions.types import GeoPoint
from hexmap.config import config


class DuckCorner:
    """Positioned-compatible object that does not inherit from Positioned."""

    def __init__(self, lat, lng):
        self._lat = lat
        self._lng = lng

    def get_lat(self):
        return self._lat

    def get_lng(self):
        return self._lng


@pytest.fixture
def duck_corner():
    return DuckCorner


@pytest.fixture
def beijing_viewport():
    """Small viewport (north-east, south-west) around central Beijing."""
    return GeoPoint(40.0, 116.5), GeoPoint(39.8, 116.3)


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def restore_config():
    """Undo changes to the global config made during a test."""
    saved = copy.deepcopy(config.settings)
    saved_file = config.config_file
    yield config
    config.settings = saved
    config.config_file = saved_file


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by setup_simple_logging."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
