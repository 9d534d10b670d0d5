# MIT License (see LICENSE)
"""
Force and acceleration models for the projectile.

Two contributions act on the ball:
- Uniform gravity, pointing in -y with magnitude g.
- Quadratic air drag, F = -c · v ⊙ |v| applied per axis.

Unlike an accumulator-style engine, nothing here mutates state: each
function returns a fresh array, and acceleration is rebuilt from scratch
on every step rather than carried over.
"""
from __future__ import annotations

import numpy as np


def quadratic_drag(velocity: np.ndarray, c: float) -> np.ndarray:
    """
    Per-axis quadratic drag force.

    Implements F_i = -c * v_i * |v_i|. The sign comes from the velocity
    itself, so drag always opposes motion and vanishes at rest.

    Args:
        velocity: Velocity [vx, vy] in m/s.
        c: Drag coefficient. 0 disables drag.

    Returns:
        Drag force [Fx, Fy] in newtons.
    """
    if c == 0.0:
        return np.zeros(2, dtype=np.float64)
    return -c * velocity * np.abs(velocity)


def acceleration(
    velocity: np.ndarray,
    mass: float,
    gravity: float,
    air_resistance: float,
) -> np.ndarray:
    """
    Total acceleration a = (0, -g) + F_drag / m.

    Gravity enters as an acceleration, so mass only scales the drag term.

    Args:
        velocity: Current velocity [vx, vy] in m/s.
        mass: Mass in kg (> 0).
        gravity: Downward gravity magnitude in m/s².
        air_resistance: Quadratic drag coefficient.
    """
    a = quadratic_drag(velocity, air_resistance) / mass
    a[1] -= gravity
    return a
