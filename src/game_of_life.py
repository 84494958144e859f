import logging
import itertools
import numpy as np

logger = logging.getLogger(__name__)

BOUNDARIES = ("reference", "dead")


class ConfigError(ValueError):
    """Raised for an unusable configuration or board precondition."""


def _check_dimensions(rows, cols):
    if rows < 1 or cols < 1:
        raise ConfigError(f"board must be at least 1x1, got {rows}x{cols}")


def _as_cells(values):
    """Return `values` as a new 2-D int array, rejecting anything but 0 and 1."""
    values = np.array(values)
    if values.ndim != 2:
        raise ConfigError(f"frame must be two-dimensional, got {values.ndim} dimension(s)")
    if not np.isin(values, (0, 1)).all():
        raise ConfigError("frame cells must be 0 or 1")
    return values.astype(int)


def _neighbor_sources(grid, boundary):
    """Return the grid as seen by neighbors under the given boundary policy."""
    if boundary == "dead":
        return grid
    if boundary == "reference":
        # Row 0 and column 0 never count as neighbors, only as centres.
        sources = grid.copy()
        sources[0, :] = 0
        sources[:, 0] = 0
        return sources
    raise ConfigError(f"unknown boundary policy {boundary!r}, expected one of {BOUNDARIES}")


def advance(board, boundary="reference"):
    """Compute the next generation of `board` as a new frame.

    The 3x3 block around each cell is summed including the cell itself,
    then one is taken off for a live centre. Under the "reference" policy
    this correction is applied even when the centre sits in row 0 or
    column 0 and so was never part of its own sum.
    """
    grid = board.grid
    rows, cols = grid.shape
    sources = _neighbor_sources(grid, boundary)

    padded = np.pad(sources, 1)
    block_sum = sum(
        padded[1 + dx:1 + dx + rows, 1 + dy:1 + dy + cols]
        for dx, dy in itertools.product((-1, 0, 1), repeat=2)
    )
    alive = grid != 0
    neighbors = block_sum - alive.astype(block_sum.dtype)

    survive = alive & (neighbors >= 2) & (neighbors <= 3)
    birth = ~alive & (neighbors == 3)
    return (survive | birth).astype(int)


class Board:
    def __init__(self, grid):
        grid = _as_cells(grid)
        _check_dimensions(*grid.shape)
        self.grid = grid
        self.generation = 0

    @classmethod
    def from_frame(cls, frame):
        """Build a board from a 2-D array or a list of equal-length rows."""
        rows = [list(row) for row in frame]
        if len({len(row) for row in rows}) > 1:
            raise ConfigError("frame rows must all have the same length")
        return cls(rows)

    @property
    def rows(self):
        return self.grid.shape[0]

    @property
    def cols(self):
        return self.grid.shape[1]

    def step(self, boundary="reference"):
        """Advance the simulation by one generation."""
        self.grid = advance(self, boundary)
        self.generation += 1
        return self.grid

    def set_pattern(self, pattern, row, col):
        """Place a smaller 0/1 pattern with its top-left corner at (row, col)."""
        pattern = _as_cells(pattern)
        h, w = pattern.shape
        if row < 0 or col < 0 or row + h > self.rows or col + w > self.cols:
            raise ConfigError(f"{h}x{w} pattern at ({row}, {col}) does not fit a {self.rows}x{self.cols} board")
        grid = self.grid.copy()
        grid[row:row + h, col:col + w] = pattern
        self.grid = grid

    def count_alive(self):
        """Return number of live cells."""
        return int(np.sum(self.grid))

    def __repr__(self):
        return f"Board(rows={self.rows}, cols={self.cols}, generation={self.generation}, alive={self.count_alive()})"


def generate_board(rows, cols, rng=None):
    """Create a board whose cells are independently alive with probability 0.5.

    `rng` is a numpy Generator (or anything with its `random(size)`), an
    integer seed, or None for fresh entropy.
    """
    _check_dimensions(rows, cols)
    if not hasattr(rng, "random"):
        rng = np.random.default_rng(rng)
    grid = (rng.random((rows, cols)) > 0.5).astype(int)
    board = Board(grid)
    logger.debug("Generated %dx%d board with %d live cells", rows, cols, board.count_alive())
    return board
