#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Console Game of Life: random 10x20 board, 300 generations, one frame per second.

CLI:
  python scripts/run_life.py
  python scripts/run_life.py --seed 7 --delay 0 --outdir outputs/life

Exit codes:
  0    finished all generations
  2    invalid arguments
  130  interrupted
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import matplotlib
matplotlib.use("Agg")

from lifesim.ca.grid import ConfigError
from lifesim.experiments.config import SimConfig, GENERATIONS, DELAY
from lifesim.experiments.sim import run_config
from lifesim.analysis.metrics import metrics_from_log
from lifesim.analysis.plots import plot_timeseries


def log(msg: str) -> None:
    print(f"[life] {msg}", file=sys.stderr, flush=True)


def write_outputs(outdir: Path, run_log: dict) -> None:
    outdir.mkdir(parents=True, exist_ok=True)
    metrics, df = metrics_from_log(run_log)
    df.to_csv(outdir / "timeseries.csv", index=False)
    (outdir / "metrics.json").write_text(json.dumps(metrics, indent=2))
    plot_timeseries(df, str(outdir / "life"))
    log(f"wrote outputs -> {outdir}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Conway's Game of Life in the console")
    ap.add_argument("--seed", type=int, default=None, help="random seed for the initial board")
    ap.add_argument("--T", type=int, default=GENERATIONS, help="number of generations")
    ap.add_argument("--delay", type=float, default=DELAY, help="seconds between frames")
    ap.add_argument("--clear", action="store_true", help="redraw frames in place")
    ap.add_argument("--outdir", type=str, default=None, help="write run log, metrics and plots here")
    ap.add_argument("--log-level", type=str.upper, default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    help="logging level (default WARNING)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = SimConfig(generations=args.T, delay=args.delay, seed=args.seed, clear=args.clear)
    try:
        run_log = run_config(cfg)
    except ConfigError as e:
        log(f"configuration error: {e}")
        return 2

    if args.outdir:
        write_outputs(Path(args.outdir), run_log)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
