
import numpy as np
class SaturatingActuator:
    """Clamps the command to +/-umax and limits its slew to rate*dt per tick."""
    def __init__(self, umax=np.inf, rate=np.inf):
        if umax <= 0 or rate <= 0:
            raise ValueError(f"umax and rate must be positive, got umax={umax!r}, rate={rate!r}")
        self.umax=umax; self.rate=rate; self.u=0.0
    def saturated(self, u_cmd):
        return bool(abs(u_cmd) > self.umax)
    def step(self, u_cmd, dt=1.0):
        u_cmd = float(np.clip(u_cmd, -self.umax, self.umax))
        du = float(np.clip(u_cmd - self.u, -self.rate*dt, self.rate*dt))
        self.u += du
        return self.u
