import logging
import numpy as np

from .update import OFFSETS, count_neighbors, step_life

logger = logging.getLogger(__name__)

P_ALIVE = 1.0 / 3.0

class ConfigError(ValueError):
    """Invalid board or run parameters."""

def check_dims(h, w):
    if h <= 0 or w <= 0:
        raise ConfigError(f"grid dimensions must be positive, got {h}x{w}")

def check_cells(cells):
    cells = np.asarray(cells, dtype=bool)
    if cells.ndim != 2 or cells.size == 0:
        raise ConfigError(f"cells must be a non-empty 2-D array, got shape {cells.shape}")
    return cells

def random_cells(h, w, p_alive=P_ALIVE, rng=None):
    """Boolean h x w array, each cell alive with probability p_alive."""
    check_dims(h, w)
    if not 0.0 <= p_alive <= 1.0:
        raise ConfigError(f"p_alive must be in [0, 1], got {p_alive}")
    if rng is None:
        rng = np.random.default_rng()
    return rng.random((h, w)) < p_alive

class LifeGrid:
    def __init__(self, h=10, w=20, seed=None, p_alive=P_ALIVE, cells=None, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        if cells is None:
            cells = random_cells(h, w, p_alive, self.rng)
        self.cells = check_cells(cells)
        self.h, self.w = self.cells.shape
        logger.debug("grid %dx%d created, population %d", self.h, self.w, self.population())

    @classmethod
    def from_cells(cls, cells):
        return cls(cells=np.array(check_cells(cells), copy=True))

    def population(self): return int(self.cells.sum())

    def at(self, i, j):
        if 0 <= i < self.h and 0 <= j < self.w:
            return bool(self.cells[i, j])
        return False

    def neighbors(self, i, j):
        for di,dj in OFFSETS:
            ni, nj = i+di, j+dj
            if 0 <= ni < self.h and 0 <= nj < self.w:
                yield ni, nj

    def live_neighbors(self, i, j): return count_neighbors(self.cells, i, j)

    def advance(self):
        """Next generation as a new grid sharing this grid's random generator."""
        return LifeGrid(cells=step_life(self.cells), rng=self.rng)
