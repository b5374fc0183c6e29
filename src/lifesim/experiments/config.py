from dataclasses import dataclass, asdict
from typing import Optional

from ..ca.grid import ConfigError, P_ALIVE, check_dims

# ------------------------- fixed run parameters -------------------------

GRID_H = 10
GRID_W = 20
GENERATIONS = 300
DELAY = 1.0          # seconds between frames


@dataclass
class SimConfig:
    grid_h: int = GRID_H
    grid_w: int = GRID_W
    generations: int = GENERATIONS
    delay: float = DELAY
    p_alive: float = P_ALIVE
    seed: Optional[int] = None
    clear: bool = False

    def validate(self) -> "SimConfig":
        check_dims(self.grid_h, self.grid_w)
        if self.generations < 0:
            raise ConfigError(f"generations must be >= 0, got {self.generations}")
        if self.delay < 0:
            raise ConfigError(f"delay must be >= 0, got {self.delay}")
        if not 0.0 <= self.p_alive <= 1.0:
            raise ConfigError(f"p_alive must be in [0, 1], got {self.p_alive}")
        return self

    def run_kwargs(self) -> dict:
        d = asdict(self)
        d['T'] = d.pop('generations')
        return d
