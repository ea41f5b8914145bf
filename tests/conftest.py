"""Root conftest for all tests - shared fixtures and configuration."""
import sys
import pytest
from pathlib import Path

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from endless_terrain.terrain import TerrainConfig, TerrainGenerator  # noqa: E402

# Uniform draws that land in each segment's bucket of the default weights
GROUND_DRAW = 0.1
CAVITY_DRAW = 0.4
SLOPE_UP_DRAW = 0.5
SLOPE_DOWN_DRAW = 0.7
SPIKE_DRAW = 0.9


class ScriptedRng:
    """Random source replaying fixed draws; the last draw repeats once the script runs out."""

    def __init__(self, draws=(), runs=()):
        self.draws = list(draws)
        self.runs = list(runs)
        self.draw_calls = 0
        self.run_calls = 0

    def random(self):
        self.draw_calls += 1
        if not self.draws:
            raise AssertionError("Unexpected uniform draw")
        return self.draws.pop(0) if len(self.draws) > 1 else self.draws[0]

    def integers(self, low, high):
        self.run_calls += 1
        if not self.runs:
            raise AssertionError("Unexpected run length draw")
        value = self.runs.pop(0) if len(self.runs) > 1 else self.runs[0]
        assert low <= value < high
        return value


@pytest.fixture
def make_generator():
    """Build a generator from config overrides and a scripted random source."""
    def _make(draws=(), runs=(), **config):
        rng = ScriptedRng(draws, runs)
        return TerrainGenerator(TerrainConfig(**config), rng=rng)
    return _make


@pytest.fixture
def small_generator(make_generator):
    """Scenario strip: five columns of ground at height 3."""
    return make_generator(screen_width=5, ground_start=3)
