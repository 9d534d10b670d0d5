# MIT License (see LICENSE)
"""
Boundary collision handling.

This subpackage provides contact response against the arena:
    - resolve_ground: Floor clamp with restitution, friction and rest snap.
    - resolve_walls: Side-wall clamp with restitution.

Typical usage:
    from projectile_lab.collision import resolve_ground, resolve_walls

    resolve_ground(pos, vel, ground_y=0.0, bounciness=0.8)
    resolve_walls(pos, vel, x_min=-10.0, x_max=10.0, bounciness=0.8)
"""
from .boundaries import resolve_ground, resolve_walls

__all__ = [
    "resolve_ground",
    "resolve_walls",
]
