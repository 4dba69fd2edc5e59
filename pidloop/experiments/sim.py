from dataclasses import dataclass
import math
from typing import Optional

from ..control.pid import Controller
from ..dynamics.actuator import SaturatingActuator
from ..dynamics.noise import MeasurementNoise
from ..dynamics.plant import FirstOrderPlant
from ..analysis.metrics import metrics_from_log
from .scenarios import step_schedule_factory, disturbance_schedule_factory

LOG_KEYS = ['t', 'target', 'measurement', 'y', 'u_cmd', 'u_eff', 'p', 'i', 'd', 'sum_error', 'saturated']


def run(controller, plant, T=200, setpoint=lambda t: 1.0, actuator=None, noise=None,
        disturbance=lambda t: 0.0):
    """
    Drive `controller` against `plant` for T ticks of controller.dt each.
    The controller sees y + sensor noise; its output goes through the actuator
    (if any) before reaching the plant. Controller errors propagate unchanged.
    d is logged as used by update(), i.e. read before last_error advances.
    """
    log = {k: [] for k in LOG_KEYS}
    for t in range(T):
        controller.set_target(setpoint(t))
        d = controller.d
        meas = plant.y + (noise.step() if noise is not None else 0.0)
        u_cmd = controller.update(meas)
        u_eff = actuator.step(u_cmd, dt=controller.dt) if actuator is not None else u_cmd
        log['t'].append(t); log['target'].append(controller.target)
        log['measurement'].append(meas); log['y'].append(plant.y)
        log['u_cmd'].append(u_cmd); log['u_eff'].append(u_eff)
        log['p'].append(controller.p); log['i'].append(controller.i); log['d'].append(d)
        log['sum_error'].append(controller.sum_error)
        log['saturated'].append(actuator.saturated(u_cmd) if actuator is not None else False)
        plant.step(u_eff, disturbance=disturbance(t))
    return log


@dataclass
class EpisodeConfig:
    k_p: float = 1.0
    k_i: float = 0.0
    k_d: float = 0.0
    i_max: float = math.inf
    i_min: float = -math.inf
    dt: float = 1.0
    plant_gain: float = 1.0
    plant_tau: float = 5.0
    umax: float = math.inf
    rate: float = math.inf
    noise_sigma: float = 0.0
    setpoint: float = 1.0
    t_step: int = 10
    disturbance: float = 0.0
    disturbance_start: Optional[int] = None
    disturbance_stop: Optional[int] = None
    T: int = 200
    seed: int = 0


def run_episode(cfg: EpisodeConfig):
    """Build controller, plant, actuator and noise from cfg, run, and score."""
    pid = Controller(cfg.k_p, cfg.k_i, cfg.k_d, i_max=cfg.i_max, i_min=cfg.i_min, dt=cfg.dt)
    plant = FirstOrderPlant(gain=cfg.plant_gain, tau=cfg.plant_tau, dt=cfg.dt)
    act = SaturatingActuator(umax=cfg.umax, rate=cfg.rate)
    noise = MeasurementNoise(sigma=cfg.noise_sigma, dt=cfg.dt, seed=cfg.seed)
    log = run(pid, plant, T=cfg.T,
              setpoint=step_schedule_factory(0.0, cfg.setpoint, cfg.t_step),
              actuator=act, noise=noise,
              disturbance=disturbance_schedule_factory(cfg.disturbance, cfg.disturbance_start,
                                                       cfg.disturbance_stop))
    metrics, df = metrics_from_log(log, dt=cfg.dt, i_min=cfg.i_min, i_max=cfg.i_max)
    return metrics, df
