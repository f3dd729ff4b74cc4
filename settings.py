"""
Constants and defaults for collinear point detection.
"""

import logging

# Inclusive coordinate range accepted by Point
COORDINATE_MIN = 0
COORDINATE_MAX = 32767

# Smallest number of collinear points reported as a segment
MIN_RUN_LENGTH = 4

# Drawing defaults
DRAW_SCALE = (0, COORDINATE_MAX + 1)
POINT_SIZE = 4
SEGMENT_COLOR = 'r'
POINT_COLOR = 'k'

DEFAULT_ALGORITHM = 'fast'
DEFAULT_WORKERS = 1

LOGGING_CONFIG = {
    "level": logging.WARNING,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}
