# MIT License (see LICENSE)
"""
Time-stepping schemes for the projectile.

The lab uses semi-implicit (symplectic) Euler:
    v(t+dt) = v(t) + a(t)·dt
    x(t+dt) = x(t) + v(t+dt)·dt

Updating velocity first and moving with the new velocity keeps the energy
error bounded in ballistic flight, where plain explicit Euler drifts
steadily upward. It is first order, so the error still scales with dt.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

import numpy as np


def semi_implicit_euler(
    position: np.ndarray,
    velocity: np.ndarray,
    acceleration: np.ndarray,
    dt: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Advance position and velocity by dt with symplectic Euler.

    Args:
        position: Current position [x, y].
        velocity: Current velocity [vx, vy].
        acceleration: Acceleration held constant over the step.
        dt: Timestep in seconds.

    Returns:
        Tuple (new_position, new_velocity). The inputs are not modified.
    """
    new_velocity = velocity + acceleration * dt
    new_position = position + new_velocity * dt
    return new_position, new_velocity


def explicit_euler(
    position: np.ndarray,
    velocity: np.ndarray,
    acceleration: np.ndarray,
    dt: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Plain forward Euler: moves with the old velocity.

    Not used by step(); kept for comparing energy drift against
    semi_implicit_euler in tests and examples.
    """
    new_position = position + velocity * dt
    new_velocity = velocity + acceleration * dt
    return new_position, new_velocity
