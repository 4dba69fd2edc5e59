#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sweep the integral limit and integral gain of a PID loop driving a saturating
actuator, and emit:
  - metrics_summary_raw.csv           (one row per episode)
  - metrics_summary_grouped.csv       (means/stds by (i_limit, k_i))

CLI:
  python scripts/run_windup_sweep.py --T 300 --outdir outputs/windup --seeds 10
"""

from __future__ import annotations
import argparse
import math
from pathlib import Path
import os
import sys

import pandas as pd

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from pidloop.experiments.sim import EpisodeConfig, run_episode  # noqa: E402


# ------------------------- factors / knobs -------------------------

I_LIMITS = [1.1, 1.5, 2.0, math.inf]
K_I = [0.1, 0.3, 0.6]

BASE = {
    "k_p": 0.8,
    "k_d": 0.0,
    "plant_gain": 1.0,
    "plant_tau": 8.0,
    "umax": 1.2,              # tight enough that the loop saturates on the step
    "noise_sigma": 0.01,
    "setpoint": 1.0,
    "t_step": 10,
}


def log(msg: str) -> None:
    print(f"[sweep] {msg}", flush=True)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--T", type=int, default=300, help="episode horizon (ticks)")
    ap.add_argument("--outdir", type=str, default="outputs/windup", help="output directory")
    ap.add_argument("--seeds", type=int, default=5, help="noise seeds per (i_limit, k_i)")
    ap.add_argument("--seed-offset", type=int, default=0, help="additive seed offset (for batching)")
    args = ap.parse_args()

    if args.seeds < 1:
        print("[sweep] --seeds must be >= 1", file=sys.stderr)
        sys.exit(2)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    raw_path = outdir / "metrics_summary_raw.csv"
    grp_path = outdir / "metrics_summary_grouped.csv"

    total = len(I_LIMITS) * len(K_I) * args.seeds
    rows = []
    for lim in I_LIMITS:
        for ki in K_I:
            for k in range(args.seeds):
                seed = args.seed_offset + k
                cfg = EpisodeConfig(k_i=ki, i_max=lim, i_min=-lim, T=args.T, seed=seed, **BASE)
                metrics, _ = run_episode(cfg)
                row = {"i_limit": lim, "k_i": ki, "seed": seed}
                row.update(metrics)
                rows.append(row)
                if len(rows) % 10 == 0 or len(rows) == total:
                    log(f"{len(rows)}/{total} runs...")

    raw_df = pd.DataFrame(rows)
    raw_df.to_csv(raw_path, index=False)

    grp_cols = ["i_limit", "k_i"]
    g = (raw_df
         .groupby(grp_cols, dropna=False)
         .agg(
            n=("seed", "count"),
            overshoot_mean=("overshoot", "mean"),
            overshoot_std=("overshoot", "std"),
            settling_time_mean=("settling_time", "mean"),
            settling_time_std=("settling_time", "std"),
            integral_saturation_mean=("integral_saturation", "mean"),
            actuator_saturation_mean=("actuator_saturation", "mean"),
            iae_mean=("iae", "mean"),
            control_effort_mean=("control_effort", "mean"),
         )
         .reset_index())
    g.to_csv(grp_path, index=False)

    log("Done. Wrote:\n"
        f"- {raw_path}\n"
        f"- {grp_path}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
