import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import argparse
from pathlib import Path
import pandas as pd
from pidloop.experiments.sim import EpisodeConfig, run_episode
from pidloop.analysis.plots import plot_timeseries

def log(msg: str) -> None:
    print(f"[demo] {msg}", flush=True)

ap = argparse.ArgumentParser(description="Step response of a PID loop with and without an integral limit.")
ap.add_argument("--outdir", default="outputs", help="output directory")
ap.add_argument("--T", type=int, default=200, help="horizon (ticks)")
ap.add_argument("--kp", type=float, default=0.8)
ap.add_argument("--ki", type=float, default=0.3)
ap.add_argument("--kd", type=float, default=0.0)
ap.add_argument("--i-limit", type=float, default=1.5, help="symmetric integral limit for the clamped run")
ap.add_argument("--umax", type=float, default=1.2, help="actuator saturation")
ap.add_argument("--noise", type=float, default=0.0, help="sensor noise sigma")
ap.add_argument("--seed", type=int, default=7)
args = ap.parse_args()

OUT = Path(args.outdir); OUT.mkdir(parents=True, exist_ok=True)

common = dict(k_p=args.kp, k_i=args.ki, k_d=args.kd, umax=args.umax, noise_sigma=args.noise,
              setpoint=1.0, t_step=10, T=args.T, seed=args.seed)
configs = [('unclamped', EpisodeConfig(**common)),
           ('clamped', EpisodeConfig(i_max=args.i_limit, i_min=-args.i_limit, **common))]

rows = []
for name, cfg in configs:
    metrics, df = run_episode(cfg)
    df.to_csv(OUT/f'timeseries_{name}.csv', index=False)
    plot_timeseries(df, str(OUT/f'{name}'))
    metrics['config'] = name
    rows.append(metrics)
    log(f"{name}: overshoot={metrics['overshoot']:.3f} settling_time={metrics['settling_time']:.0f}")
pd.DataFrame(rows).to_csv(OUT/'metrics_summary.csv', index=False)
log(f"Demo complete. Wrote {OUT/'metrics_summary.csv'}")
