import os
import sys
from termcolor import colored


def render_frame(frame, alive="@", dead=" ", color=None):
    """Return the bordered text picture of a frame.

    The top and bottom borders are `cols - 1` dashes wide, one short of
    the rows they frame.
    """
    cols = len(frame[0])
    glyph = colored(alive, color) if color else alive
    border = " " + "-" * (cols - 1) + " "
    lines = [border]
    for row in frame:
        lines.append("|" + "".join(glyph if c else dead for c in row) + "|")
    lines.append(border)
    return "\n".join(lines) + "\n"


class ConsoleRenderer:
    """Render sink writing one picture of the board per generation."""

    def __init__(self, stream=None, alive="@", dead=" ", color=None, clear=False):
        self.stream = stream if stream is not None else sys.stdout
        self.alive = alive
        self.dead = dead
        self.color = color
        self.clear = clear

    def __call__(self, board):
        if self.clear:
            os.system('cls' if os.name == 'nt' else 'clear')
        self.stream.write(render_frame(board.grid, self.alive, self.dead, self.color))
        self.stream.flush()
