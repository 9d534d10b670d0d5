# MIT License (see LICENSE)
"""
Contact response against the arena boundaries.

The arena is a floor at y = ground_y and two vertical walls. Collisions are
detected after the position update (no sweep), so a fast ball may sit below
the floor for the instant before it is clamped back; the clamp is exact.

Ground and wall responses deliberately differ:
- Ground: restitution, rolling friction on vx, and a rest snap on small vy.
- Walls: restitution only.
"""
from __future__ import annotations

import numpy as np

from ..constants import GROUND_FRICTION, REST_VELOCITY_THRESHOLD


def resolve_ground(
    position: np.ndarray,
    velocity: np.ndarray,
    ground_y: float,
    bounciness: float,
) -> bool:
    """
    Clamp to the floor and bounce.

    On contact (y <= ground_y):
        y  = ground_y
        vy = -vy * e
        vx = vx * GROUND_FRICTION
        vy = 0 if |vy| < REST_VELOCITY_THRESHOLD

    Args:
        position: Position [x, y] (modified in-place).
        velocity: Velocity [vx, vy] (modified in-place).
        ground_y: Floor height.
        bounciness: Coefficient of restitution e.

    Returns:
        True if the ball touched the floor this step.
    """
    if position[1] > ground_y:
        return False

    position[1] = ground_y
    velocity[1] = -velocity[1] * bounciness
    velocity[0] *= GROUND_FRICTION

    if abs(velocity[1]) < REST_VELOCITY_THRESHOLD:
        velocity[1] = 0.0
    return True


def resolve_walls(
    position: np.ndarray,
    velocity: np.ndarray,
    x_min: float,
    x_max: float,
    bounciness: float,
) -> bool:
    """
    Clamp between the walls and reflect vx.

    Args:
        position: Position [x, y] (modified in-place).
        velocity: Velocity [vx, vy] (modified in-place).
        x_min: Left wall.
        x_max: Right wall.
        bounciness: Coefficient of restitution e.

    Returns:
        True if either wall was hit this step.
    """
    hit = False
    if position[0] < x_min:
        position[0] = x_min
        velocity[0] = -velocity[0] * bounciness
        hit = True
    if position[0] > x_max:
        position[0] = x_max
        velocity[0] = -velocity[0] * bounciness
        hit = True
    return hit
