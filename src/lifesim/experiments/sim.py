import logging
import sys
import time

from ..ca.grid import LifeGrid, P_ALIVE
from ..ca.render import render_grid, clear_screen
from ..ca.update import extinct
from .config import SimConfig

logger = logging.getLogger(__name__)

LOG_KEYS = ['t','population','births','deaths','changed','extinct']

def run(T=300, grid_h=10, grid_w=20, p_alive=P_ALIVE, delay=1.0, seed=None,
        out=None, clear=False, sleep=time.sleep, quiet=False):
    SimConfig(grid_h, grid_w, T, delay, p_alive, seed, clear).validate()
    out = out if out is not None else sys.stdout
    grid = LifeGrid(h=grid_h, w=grid_w, seed=seed, p_alive=p_alive)
    log = {k:[] for k in LOG_KEYS}
    logger.info("run start: %dx%d, %d generations, seed=%s", grid_h, grid_w, T, seed)
    for t in range(T):
        prev = grid.cells
        grid = grid.advance()
        born = int((grid.cells & ~prev).sum()); died = int((prev & ~grid.cells).sum())
        log['t'].append(t); log['population'].append(grid.population())
        log['births'].append(born); log['deaths'].append(died)
        log['changed'].append(born + died); log['extinct'].append(extinct(grid.cells))
        logger.debug("generation %d: population %d (+%d -%d)", t, grid.population(), born, died)
        if not quiet:
            if clear: clear_screen(out)
            out.write(render_grid(grid.cells))
            out.write(f"generation {t} of {T}\n")
            out.flush()
        if delay > 0: sleep(delay)
    logger.info("run finished: final population %d", grid.population())
    return log

def run_config(cfg: SimConfig, **kw):
    return run(**cfg.validate().run_kwargs(), **kw)
