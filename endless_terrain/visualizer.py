import sys

from .terrain import SegmentType

RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

# glyph, row offset below the segment height, ANSI color
GLYPHS = {
    SegmentType.GROUND: ("_", 1, "\033[32m"),
    SegmentType.CAVITY: ("_", 2, "\033[31;100m"),
    SegmentType.SLOPE_UP: ("/", 2, "\033[32m"),
    SegmentType.SLOPE_DOWN: ("\\", 1, "\033[32m"),
    SegmentType.SPIKE: (".", 1, "\033[33m"),
}


class ConsoleRenderer:
    def __init__(self, color=True, stream=None):
        """
        Initialize the console renderer.

        Args:
            color (bool): Paint segments with ANSI colors
            stream: Text stream to draw on, stdout by default
        """
        self.color = color
        self.stream = stream if stream is not None else sys.stdout

    def render(self, generator):
        """Build a text frame of the terrain buffer, one string row per screen line."""
        rows = generator.screen_bottom + 3
        grid = [[" "] * generator.screen_width for _ in range(rows)]

        for column, (segment, height) in enumerate(generator.snapshot()):
            glyph, offset, color = GLYPHS[segment]
            row = height + offset
            if 0 <= row < rows:
                grid[row][column] = f"{color}{glyph}{RESET}" if self.color else glyph

        return "\n".join("".join(line).rstrip() for line in grid)

    def draw(self, generator):
        """Clear the console and draw the current frame."""
        self.stream.write(CLEAR_SCREEN + CURSOR_HOME)
        self.stream.write(self.render(generator) + "\n")
        self.stream.flush()

    def message(self, text):
        self.stream.write(text + "\n")
        self.stream.flush()

    def hide_cursor(self):
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()

    def show_cursor(self):
        self.stream.write(SHOW_CURSOR)
        self.stream.flush()
