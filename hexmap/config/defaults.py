# hexmap/config/defaults.py
"""Default configuration values"""

from pathlib import Path

# Project path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Grid configuration
GRIDS = {
    'hexagonal': {
        'default_resolution': 7  # H3 level, ~1.4 km edges
    }
}

# Synthetic occupant generation
MOCK_DATA = {
    'min_count': 5,          # fewest occupants per cell
    'count_span': 20,        # count drawn from [min_count, min_count + count_span)
    'radius_km': 0.5,        # scatter radius around the cell centre
    'km_per_degree': 111.32, # flat-earth length of one degree of latitude
    'random_seed': None      # None = seed from OS entropy
}

# Logging configuration
LOGGING = {
    'level': 'INFO',
    'use_colors': None,  # None = auto-detect from the stream
    'show_context': False
}
