# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Right-hand sides with closed-form solutions, for validation and benchmarks."""

import numpy as np

from rungekutta.models.base import ODEModel


class ConstantRate(ODEModel):
    """dx/dt = rate, independent of t and x. RK4 is exact for it."""

    def __init__(self, rate):
        rate = np.atleast_1d(np.asarray(rate, dtype=float))
        if rate.ndim != 1:
            raise ValueError(f"rate must be a scalar or 1-D vector, got shape {rate.shape}")
        super().__init__({"rate": rate})
        self.rate = rate
        self.d = rate.shape[0]

    def rhs(self, t, x, d):
        return self.rate.copy()

    def exact(self, t, x0, t0=0.0):
        return np.asarray(x0, dtype=float) + (t - t0) * self.rate


class ExponentialDecay(ODEModel):
    """dx/dt = -lam * x, applied independently to each of the d components."""

    def __init__(self, lam=1.0, d=1):
        if d <= 0:
            raise ValueError(f"d must be positive, got {d}")
        super().__init__({"lam": lam, "d": d})
        self.lam = lam
        self.d = d

    def rhs(self, t, x, d):
        return -self.lam * x

    def exact(self, t, x0, t0=0.0):
        return np.asarray(x0, dtype=float) * np.exp(-self.lam * (t - t0))


class HarmonicOscillator(ODEModel):
    """Undamped oscillator with state [position, velocity].

        dx/dt = v,  dv/dt = -omega^2 x
    """

    def __init__(self, omega=1.0):
        if omega <= 0:
            raise ValueError(f"omega must be positive, got {omega}")
        super().__init__({"omega": omega})
        self.omega = omega
        self.d = 2

    def rhs(self, t, x, d):
        return np.array([x[1], -self.omega**2 * x[0]])

    def exact(self, t, x0, t0=0.0):
        w = self.omega
        s = w * (t - t0)
        x, v = x0[0], x0[1]
        return np.array([
            x * np.cos(s) + v / w * np.sin(s),
            -x * w * np.sin(s) + v * np.cos(s),
        ])
