# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging
import numbers

import numpy as np

from rungekutta.solvers.kernels import stage_state, rk4_combine

logger = logging.getLogger(__name__)


def _check_dimension(d):
    if isinstance(d, bool) or not isinstance(d, numbers.Integral):
        raise TypeError(f"d must be an integer, got {d!r}")
    if d <= 0:
        raise ValueError(f"d must be positive, got {d}")


def _as_vector(v, d, name):
    v = np.asarray(v, dtype=float)
    if v.ndim != 1:
        raise ValueError(f"{name} must be a 1-D vector, got shape {v.shape}")
    if v.shape[0] != d:
        raise ValueError(f"{name} must have length d={d}, got {v.shape[0]}")
    return v


def rk4_step(t, x, h, d, f):
    """Advance the system dx/dt = f(t, x) by one classical RK4 step.

    k1 = h*f(t, x), k2 = h*f(t + h/2, x + k1/2), k3 = h*f(t + h/2, x + k2/2),
    k4 = h*f(t + h, x + k3), and x_next = x + (k1 + 2*k2 + 2*k3 + k4) / 6.

    Args:
        t: current time.
        x: state vector, length d. Not modified.
        h: step size. May be negative or zero; it is not validated.
        d: dimension of the system, positive integer.
        f: derivative function f(t, x, d) returning a vector of length d.
            Called exactly four times, in stage order.

    Returns:
        x_next: new float64 array of length d, the state at t + h.

    Raises:
        TypeError: if d is not an integer.
        ValueError: if d <= 0, or x or any value returned by f is not a
            1-D vector of length d.

    NaN/Inf in the inputs or in f's output propagate per IEEE-754.
    Exceptions raised by f are not caught.
    """
    _check_dimension(d)
    x = _as_vector(x, d, "x")

    k1 = h * _as_vector(f(t, x, d), d, "f(t, x, d)")
    k2 = h * _as_vector(f(t + h / 2.0, stage_state(x, k1, 0.5), d), d, "f(t, x, d)")
    k3 = h * _as_vector(f(t + h / 2.0, stage_state(x, k2, 0.5), d), d, "f(t, x, d)")
    k4 = h * _as_vector(f(t + h, stage_state(x, k3, 1.0), d), d, "f(t, x, d)")

    return rk4_combine(x, k1, k2, k3, k4)


class RK4:
    """Classical RK4 stepper bound to a derivative model and a fixed dt.

    Parameters
    ----------
    model : callable(t, x, d) -> array
        Derivative function, typically an ``ODEModel`` instance.
    dt : float
        Step size applied on every call to ``step``.
    d : int, optional
        System dimension. Defaults to ``model.d`` when the model has one.
    """

    def __init__(self, model, dt, d=None):
        if d is None:
            d = getattr(model, "d", None)
        if d is None:
            raise ValueError("d must be given when the model does not define one")
        _check_dimension(d)

        self.model = model
        self.dt = dt
        self.d = d
        logger.debug("RK4 stepper: model=%s, dt=%g, d=%d",
                     type(model).__name__, dt, d)

    def step(self, x, t):
        """Return the state at t + dt. Same contract as ``rk4_step``."""
        return rk4_step(t, x, self.dt, self.d, self.model)
