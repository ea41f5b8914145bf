"""
endless_terrain - Scrolling terrain generation for endless-runner games
"""

import numpy as np
from packaging import version
import sys

from .terrain import (
    DEFAULT_WEIGHTS,
    SLOPES,
    SegmentType,
    TerrainConfig,
    TerrainConfigError,
    TerrainGenerator,
)

# numpy.random.default_rng and Generator.integers
MIN_NUMPY_VERSION = "1.17.0"

def check_dependencies():
    """Check if all required dependencies are available and compatible."""
    try:
        current_version = np.__version__
        if version.parse(current_version) < version.parse(MIN_NUMPY_VERSION):
            raise ImportError(
                f"numpy version {MIN_NUMPY_VERSION} or higher is required. "
                f"Found version {current_version}"
            )

        if not hasattr(np.random, "default_rng"):
            raise ImportError("numpy.random.default_rng is not available.")

        return True

    except ImportError as e:
        print(f"Error checking dependencies: {e}", file=sys.stderr)
        return False

# Run once at import; __main__ refuses to start when this is False
is_compatible = check_dependencies()

__all__ = [
    "DEFAULT_WEIGHTS",
    "SLOPES",
    "SegmentType",
    "TerrainConfig",
    "TerrainConfigError",
    "TerrainGenerator",
    "check_dependencies",
    "is_compatible",
]
