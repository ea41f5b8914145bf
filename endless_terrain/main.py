import argparse
import threading

from .terrain import TerrainConfig, TerrainGenerator
from .visualizer import ConsoleRenderer

# ==============================================================================
# Tick Loop
# ==============================================================================

class TerrainRunner:
    def __init__(self, generator, renderer, delay=0.1):
        """
        Drive a terrain generator: draw the buffer, advance it, sleep.

        Parameters:
          generator (TerrainGenerator): Terrain to scroll.
          renderer (ConsoleRenderer): Draws each frame and owns the console.
          delay (float): Seconds between ticks.
        """
        self.generator = generator
        self.renderer = renderer
        self.delay = delay
        self._paused = threading.Event()
        self._stopped = threading.Event()

    @property
    def paused(self):
        return self._paused.is_set()

    @property
    def running(self):
        return not self._stopped.is_set()

    def pause(self):
        if not self._paused.is_set():
            self._paused.set()
            self.renderer.message("Game Paused. Press 'SPACE' to resume...")

    def resume(self):
        self._paused.clear()

    def toggle_pause(self):
        if self.paused:
            self.resume()
        else:
            self.pause()

    def stop(self):
        self._stopped.set()

    def step(self):
        """
        Run one tick.

        Returns:
          advanced (bool): False when paused and the terrain was left alone.
        """
        if self.paused:
            return False
        self.renderer.draw(self.generator)
        self.generator.advance()
        return True

    def run(self, max_ticks=None):
        """
        Loop until stopped or max_ticks terrain advances have happened.

        Returns:
          ticks (int): Number of advances performed.
        """
        ticks = 0
        self.renderer.hide_cursor()
        try:
            while self.running and (max_ticks is None or ticks < max_ticks):
                if self.step():
                    ticks += 1
                # Pausing keeps the loop alive so resume() or stop() can arrive
                self._stopped.wait(self.delay)
        finally:
            self.renderer.show_cursor()
        return ticks

# ==============================================================================
# Command Line
# ==============================================================================

def parse_args(argv=None):
    defaults = TerrainConfig()
    parser = argparse.ArgumentParser(
        prog="endless_terrain",
        description="Scroll an endless-runner terrain strip in the console.")
    parser.add_argument("--width", type=int, default=defaults.screen_width,
                        help="Number of visible columns")
    parser.add_argument("--top", type=int, default=defaults.screen_top,
                        help="Highest terrain row")
    parser.add_argument("--bottom", type=int, default=defaults.screen_bottom,
                        help="Lowest terrain row")
    parser.add_argument("--ground", type=int, default=defaults.ground_start,
                        help="Row of the initial flat ground")
    parser.add_argument("--max-slope-run", type=int, default=defaults.max_slope_run_length,
                        help="Exclusive upper bound of extra slope columns")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible terrain")
    parser.add_argument("--delay", type=float, default=0.1,
                        help="Seconds between ticks")
    parser.add_argument("--ticks", type=int, default=None,
                        help="Stop after this many ticks (runs forever by default)")
    parser.add_argument("--no-color", action="store_true",
                        help="Draw without ANSI colors")
    return parser.parse_args(argv)


def build_config(args):
    return TerrainConfig(
        screen_width=args.width,
        screen_top=args.top,
        screen_bottom=args.bottom,
        ground_start=args.ground,
        max_slope_run_length=args.max_slope_run,
    )


def main(argv=None):
    args = parse_args(argv)
    generator = TerrainGenerator(build_config(args), seed=args.seed)
    renderer = ConsoleRenderer(color=not args.no_color)
    runner = TerrainRunner(generator, renderer, delay=args.delay)
    runner.run(max_ticks=args.ticks)
    return runner
