import threading
from dataclasses import dataclass
from enum import IntEnum

import numpy as np


class SegmentType(IntEnum):
    GROUND = 0
    CAVITY = 1
    SLOPE_UP = 2
    SLOPE_DOWN = 3
    SPIKE = 4


SLOPES = (SegmentType.SLOPE_UP, SegmentType.SLOPE_DOWN)

# Ground, Cavity, SlopeUp, SlopeDown, Spike
DEFAULT_WEIGHTS = (0.35, 0.10, 0.20, 0.20, 0.15)


class TerrainConfigError(ValueError):
    """Raised when a terrain configuration cannot produce valid terrain."""


@dataclass(frozen=True)
class TerrainConfig:
    screen_width: int = 40
    screen_top: int = 1
    screen_bottom: int = 5
    ground_start: int = 5
    max_slope_run_length: int = 3
    weights: tuple = DEFAULT_WEIGHTS

    def __post_init__(self):
        """Reject configurations that would produce undefined terrain."""
        if self.screen_width <= 0:
            raise TerrainConfigError(
                f"screen_width must be positive, got {self.screen_width}")
        if self.screen_top > self.screen_bottom:
            raise TerrainConfigError(
                f"screen_top ({self.screen_top}) is below "
                f"screen_bottom ({self.screen_bottom})")
        if not self.screen_top <= self.ground_start <= self.screen_bottom:
            raise TerrainConfigError(
                f"ground_start ({self.ground_start}) must lie within "
                f"[{self.screen_top}, {self.screen_bottom}]")
        if self.max_slope_run_length < 2:
            raise TerrainConfigError(
                f"max_slope_run_length must be at least 2, "
                f"got {self.max_slope_run_length}")

        weights = tuple(float(w) for w in self.weights)
        if len(weights) != len(SegmentType):
            raise TerrainConfigError(
                f"Expected {len(SegmentType)} weights, got {len(weights)}")
        if any(w < 0 for w in weights):
            raise TerrainConfigError(f"Weights must be non-negative: {weights}")
        if not np.isclose(sum(weights), 1.0):
            raise TerrainConfigError(
                f"Weights must sum to 1.0, got {sum(weights):.6f}")
        object.__setattr__(self, "weights", weights)


class TerrainGenerator:
    def __init__(self, config=None, rng=None, seed=None):
        """
        Initialize the terrain generator.

        Args:
            config (TerrainConfig): Layout, slope and weight settings
            rng: Random source with numpy Generator style ``random()`` and
                ``integers(low, high)``; defaults to ``default_rng(seed)``
            seed (int): Seed for the default random source
        """
        self.config = config if config is not None else TerrainConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.cumulative_weights = np.cumsum(self.config.weights)

        self._lock = threading.RLock()
        self._segments = np.zeros(self.config.screen_width, dtype=np.int8)
        self._heights = np.zeros(self.config.screen_width, dtype=np.int32)

        self.initialize()

    @property
    def screen_width(self):
        return self.config.screen_width

    @property
    def screen_top(self):
        return self.config.screen_top

    @property
    def screen_bottom(self):
        return self.config.screen_bottom

    def initialize(self):
        """Fill the buffer with flat ground and reset the slope state."""
        with self._lock:
            self._segments[:] = SegmentType.GROUND
            self._heights[:] = self.config.ground_start
            self.last_segment = SegmentType.GROUND
            self.last_height = self.config.ground_start
            self.slope_run_remaining = 0

    def advance(self):
        """Scroll the buffer left by one column and generate the new rightmost one."""
        with self._lock:
            segment, height = self._next_segment()

            self._segments[:-1] = self._segments[1:]
            self._heights[:-1] = self._heights[1:]
            self._segments[-1] = segment
            self._heights[-1] = height

            self.last_segment = segment
            self.last_height = height

    def _next_segment(self):
        height = self.last_height

        if self.slope_run_remaining > 0:
            segment = self.last_segment
            self.slope_run_remaining -= 1
            return segment, self._slope_step(segment, height)

        if self.last_segment != SegmentType.GROUND:
            # Features are always followed by at least one ground column
            return SegmentType.GROUND, height

        segment = self.weighted_random_segment()

        if segment in (SegmentType.CAVITY, SegmentType.SPIKE):
            return segment, height

        if segment in SLOPES and self._has_room(segment, height):
            height = self._slope_step(segment, height)
            self.slope_run_remaining = (
                self._sample_run_length() if self._has_room(segment, height) else 0)
            return segment, height

        return SegmentType.GROUND, height

    def _has_room(self, slope, height):
        if slope == SegmentType.SLOPE_UP:
            return height > self.config.screen_top
        return height < self.config.screen_bottom

    def _slope_step(self, slope, height):
        """Move one row along a slope, clamped to the screen bounds."""
        if slope == SegmentType.SLOPE_UP:
            return max(self.config.screen_top, height - 1)
        return min(height + 1, self.config.screen_bottom)

    def _sample_run_length(self):
        return int(self.rng.integers(1, self.config.max_slope_run_length))

    def weighted_random_segment(self):
        """Pick a segment type by looking up a uniform draw in the cumulative weights."""
        draw = float(self.rng.random())
        index = int(np.searchsorted(self.cumulative_weights, draw, side="right"))
        if index >= len(self.cumulative_weights):
            return SegmentType.GROUND
        return SegmentType(index)

    def segment_at(self, index):
        """Get the (segment type, height) pair stored at a buffer index."""
        if not 0 <= index < self.config.screen_width:
            raise IndexError(
                f"Segment index {index} out of range [0, {self.config.screen_width})")
        with self._lock:
            return SegmentType(int(self._segments[index])), int(self._heights[index])

    def snapshot(self):
        """Get every (segment type, height) pair from a single consistent state."""
        with self._lock:
            segments = self._segments.copy()
            heights = self._heights.copy()
        return [(SegmentType(int(s)), int(h)) for s, h in zip(segments, heights)]

    @property
    def segments(self):
        with self._lock:
            return tuple(SegmentType(int(s)) for s in self._segments)

    @property
    def heights(self):
        with self._lock:
            heights = self._heights.copy()
        heights.flags.writeable = False
        return heights

    def __len__(self):
        return self.config.screen_width

    def __iter__(self):
        return iter(self.snapshot())
