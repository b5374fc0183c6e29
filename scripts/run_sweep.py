#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the simulation headless over a range of seeds and emit:
  - metrics_summary_raw.csv   (one row per seed)
  - metrics_summary.csv       (means/stds over all seeds + extinction/stability rates)

CLI:
  python scripts/run_sweep.py --T 300 --seeds 50 --outdir outputs/sweep
"""

from __future__ import annotations
import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from lifesim.ca.grid import ConfigError
from lifesim.experiments.config import SimConfig, GENERATIONS
from lifesim.experiments.sim import run_config
from lifesim.analysis.metrics import metrics_from_log


def summarize(raw: pd.DataFrame) -> pd.DataFrame:
    n = int(raw["seed"].count())
    row = {
        "n": n,
        "final_population_mean": raw["final_population"].mean(),
        "final_population_std": raw["final_population"].std(),
        "peak_population_mean": raw["peak_population"].mean(),
        "extinct_count": int(raw["extinct_at"].notna().sum()),
        "stable_count": int(raw["stable_at"].notna().sum()),
    }
    row["extinct_rate"] = row["extinct_count"] / n
    row["stable_rate"] = row["stable_count"] / n
    return pd.DataFrame([row])


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--T", type=int, default=GENERATIONS, help="generations per run")
    ap.add_argument("--seeds", type=int, default=20, help="number of runs")
    ap.add_argument("--seed-offset", type=int, default=0, help="first seed")
    ap.add_argument("--outdir", type=str, default="outputs/sweep", help="output directory")
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    rows = []
    for k in range(args.seeds):
        seed = args.seed_offset + k
        cfg = SimConfig(generations=args.T, delay=0.0, seed=seed)
        try:
            run_log = run_config(cfg, quiet=True)
        except ConfigError as e:
            print(f"[sweep] configuration error: {e}", file=sys.stderr)
            return 2
        metrics, _ = metrics_from_log(run_log)
        metrics["seed"] = seed
        rows.append(metrics)
        if len(rows) % 10 == 0 or len(rows) == args.seeds:
            print(f"[sweep] {len(rows)}/{args.seeds} runs...", flush=True)

    raw = pd.DataFrame(rows)
    raw.to_csv(outdir / "metrics_summary_raw.csv", index=False)
    if len(raw):
        summarize(raw).to_csv(outdir / "metrics_summary.csv", index=False)

    print(f"[sweep] Done. Wrote {outdir / 'metrics_summary_raw.csv'}", flush=True)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
