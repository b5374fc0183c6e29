import numpy as np
from scipy.signal import convolve2d

# 8-neighbor (Moore) kernel without center
NEIGH = np.array([[1, 1, 1],
                  [1, 0, 1],
                  [1, 1, 1]], dtype=int)

OFFSETS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if not (di == 0 and dj == 0)]

def count_neighbors(cells: np.ndarray, i: int, j: int) -> int:
    """Live cells among the 8 neighbors of (i, j); off-grid positions count as dead."""
    h, w = cells.shape
    n = 0
    for di, dj in OFFSETS:
        ni, nj = i + di, j + dj
        if 0 <= ni < h and 0 <= nj < w and cells[ni, nj]:
            n += 1
    return n

def neighbor_counts(cells: np.ndarray) -> np.ndarray:
    """Moore-neighborhood live counts for every cell via 2D convolution (dead border)."""
    return convolve2d(cells.astype(int), NEIGH, mode='same', boundary='fill', fillvalue=0)

def will_live(alive, n) -> bool:
    # survival on 2 or 3, birth on exactly 3
    return bool((alive and n in (2, 3)) or (not alive and n == 3))

def apply_rule(cells: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Vectorized will_live over whole arrays."""
    survivors = cells & ((counts == 2) | (counts == 3))
    births = ~cells & (counts == 3)
    return survivors | births

def step_life(cells: np.ndarray) -> np.ndarray:
    """
    One generation. Counts are taken from `cells` before any write, and the
    result is a fresh array: the input is left untouched.
    """
    cells = np.asarray(cells, dtype=bool)
    return apply_rule(cells, neighbor_counts(cells))

def step_life_naive(cells: np.ndarray) -> np.ndarray:
    """Cell-by-cell reference for step_life."""
    cells = np.asarray(cells, dtype=bool)
    h, w = cells.shape
    nxt = np.zeros((h, w), dtype=bool)
    for i in range(h):
        for j in range(w):
            nxt[i, j] = will_live(cells[i, j], count_neighbors(cells, i, j))
    return nxt

def extinct(cells) -> bool:
    return not bool(np.any(cells))
