from scipy.signal import cont2discrete


class FirstOrderPlant:
    """
    First-order lag G(s) = gain / (tau*s + 1), discretized with zero-order hold.

    y[k+1] = a*y[k] + b*(u[k] + disturbance[k])
    """
    def __init__(self, gain=1.0, tau=5.0, dt=1.0, y0=0.0):
        if not (tau > 0 and dt > 0):
            raise ValueError(f"tau and dt must be positive, got tau={tau!r}, dt={dt!r}")
        self.gain = gain; self.tau = tau; self.dt = dt
        numd, dend, _ = cont2discrete(([gain], [tau, 1.0]), dt, method='zoh')
        self.a = float(-dend[1]); self.b = float(numd[0][-1])
        self._y = float(y0)

    @property
    def y(self) -> float:
        return self._y

    def step(self, u, disturbance=0.0) -> float:
        self._y = self.a * self._y + self.b * (u + disturbance)
        return self._y
