# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from numba import njit


@njit(cache=True)
def stage_state(x, k, c):
    """Return the intermediate state x + c*k as a new array.

    Args:
        x: state vector, length d.
        k: slope increment (already scaled by h), length d.
        c: stage coefficient (0.5 for stages 2 and 3, 1.0 for stage 4).

    Returns:
        y: new array, length d.
    """
    d = len(x)
    y = np.empty(d)
    for i in range(d):
        y[i] = x[i] + k[i] * c
    return y


@njit(cache=True)
def rk4_combine(x, k1, k2, k3, k4):
    """Weighted RK4 update x + (k1 + 2*k2 + 2*k3 + k4) / 6.

    All inputs have length d and are left untouched.
    """
    d = len(x)
    x_next = np.empty(d)
    for i in range(d):
        x_next[i] = x[i] + (k1[i] + 2.0 * k2[i] + 2.0 * k3[i] + k4[i]) / 6.0
    return x_next
