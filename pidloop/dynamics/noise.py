
import numpy as np
class MeasurementNoise:
    """Ornstein-Uhlenbeck sensor noise; sigma=0 gives a clean measurement."""
    def __init__(self, sigma=0.0, theta=0.3, dt=1.0, seed=0):
        self.theta = theta; self.sigma = sigma; self.dt = dt
        self.rng = np.random.default_rng(seed); self.x = 0.0
    def step(self):
        if self.sigma == 0.0:
            return 0.0
        dw = self.rng.normal(0.0, self.dt**0.5)
        self.x += self.theta*(0.0 - self.x)*self.dt + self.sigma*dw
        return float(self.x)
