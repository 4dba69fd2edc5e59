import math
from numbers import Real

from .errors import ConfigurationError, ValidationError

INF = float('inf')


def _is_real(x) -> bool:
    if not isinstance(x, Real) or isinstance(x, bool):
        return False
    try:
        return not math.isnan(x)
    except OverflowError:
        # ints beyond float range
        return False


def _is_finite(x) -> bool:
    return _is_real(x) and math.isfinite(x)


class Controller:
    """
    PID controller with integral anti-windup.

    Call set_target() whenever the setpoint changes and update() once per tick
    with the latest measurement; the returned value is the control output.
    - integral uses rectangular accumulation: sum_error += error * dt
    - the accumulator is clamped to [i_min/k_i, i_max/k_i], and the integral
      term itself is clamped again to [i_min, i_max]
    - d = k_d * (target - last_error) / dt, using the previous error as-is
    Not thread safe; one control loop owns one controller.
    """

    def __init__(self, k_p=1.0, k_i=0.0, k_d=0.0, i_max=INF, i_min=-INF, dt=1.0):
        for name, v in (('k_p', k_p), ('k_i', k_i), ('k_d', k_d), ('dt', dt)):
            if not _is_finite(v):
                raise ConfigurationError(f"{name} must be a finite number, got {v!r}")
        for name, v in (('i_max', i_max), ('i_min', i_min)):
            if not _is_real(v):
                raise ConfigurationError(f"{name} must be a number, got {v!r}")
        if i_max <= 0 and i_max != INF:
            raise ConfigurationError(f"i_max must be a positive number or inf, got {i_max!r}")
        if i_min >= 0 and i_min != -INF:
            raise ConfigurationError(f"i_min must be a negative number or -inf, got {i_min!r}")
        if dt == 0:
            raise ConfigurationError("dt must be non-zero")

        self._k_p = k_p; self._k_i = k_i; self._k_d = k_d; self._dt = dt
        self._i_max = i_max; self._i_min = i_min

        self._target = 0
        self._current_value = 0
        self._sum_error = 0
        self._last_error = 0

    def __repr__(self):
        return (f"Controller(k_p={self._k_p!r}, k_i={self._k_i!r}, k_d={self._k_d!r}, "
                f"i_max={self._i_max!r}, i_min={self._i_min!r}, dt={self._dt!r})")

    # tuning (fixed at construction)
    @property
    def k_p(self): return self._k_p
    @property
    def k_i(self): return self._k_i
    @property
    def k_d(self): return self._k_d
    @property
    def dt(self): return self._dt
    @property
    def i_max(self): return self._i_max
    @property
    def i_min(self): return self._i_min

    # loop-carried state
    @property
    def target(self): return self._target
    @property
    def current_value(self): return self._current_value
    @property
    def sum_error(self): return self._sum_error
    @property
    def last_error(self): return self._last_error

    # live terms
    @property
    def p(self) -> float:
        return self._k_p * (self._target - self._current_value)

    @property
    def i(self) -> float:
        if self._k_i == 0:
            return 0.0
        i_term = self._k_i * self._sum_error
        if i_term > self._i_max:
            return self._i_max
        if i_term < self._i_min:
            return self._i_min
        return i_term

    @property
    def d(self) -> float:
        return self._k_d * (self._target - self._last_error) / self._dt

    def set_target(self, target) -> None:
        if not _is_finite(target):
            raise ValidationError(f"target must be a finite number, got {target!r}")
        self._target = target

    def update(self, current_value) -> float:
        """Advance one tick with a new measurement and return p + i + d."""
        if not _is_finite(current_value):
            raise ValidationError(f"current value must be a finite number, got {current_value!r}")

        self._current_value = current_value
        error = self._target - current_value

        self._sum_error += error * self._dt

        if self._k_i != 0:
            max_sum = self._i_max / self._k_i
            min_sum = self._i_min / self._k_i
        else:
            max_sum, min_sum = INF, -INF
        if self._sum_error > max_sum:
            self._sum_error = max_sum
        elif self._sum_error < min_sum:
            self._sum_error = min_sum

        output = self.p + self.i + self.d

        self._last_error = error
        return output
