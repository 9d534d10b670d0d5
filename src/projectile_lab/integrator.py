# MIT License (see LICENSE)
"""
The projectile integrator: one pure function, step().

A step runs the following phases in order:
    1. Forces: quadratic drag from the current velocity.
    2. Acceleration: gravity + drag / m, rebuilt from scratch.
    3-4. Integration: semi-implicit Euler (velocity, then position).
    5. Ground contact: clamp, restitution, friction, rest snap.
    6. Wall contact: clamp, restitution.
    7. Trail: append the new position, drop the oldest beyond the cap.
    8. Clock: time += dt.

The input state is never modified. On any rejected argument the call
raises before building anything, so the caller's previous state remains
the current one.
"""
from __future__ import annotations
import math

import numpy as np

from .collision.boundaries import resolve_ground, resolve_walls
from .core.forces import acceleration
from .core.integrators import semi_implicit_euler
from .errors import InvalidArgument, InvalidConfiguration
from .types import SimulationConfig, SimulationState


def _append_trail(trail: np.ndarray, position: np.ndarray, max_length: int) -> np.ndarray:
    """Append one sample, keeping at most max_length of the newest."""
    out = np.vstack((trail, position.reshape(1, 2)))
    if len(out) > max_length:
        out = out[-max_length:]
    return out


def step(state: SimulationState, config: SimulationConfig, dt: float) -> SimulationState:
    """
    Advance the projectile by dt seconds.

    Args:
        state: The state returned by the previous step (or a fresh initial
               state). Not modified.
        config: Environment parameters for this run.
        dt: Timestep in seconds. Must be finite and >= 0. Callers driving
            this from a wall clock should clamp dt (see MAX_FRAME_DT).

    Returns:
        A new SimulationState. For dt == 0 this is a copy of the input
        with the same time and no new trail sample, only clamped into the
        current bounds and trimmed to the current trail cap.

    Raises:
        InvalidArgument: If dt is negative or not finite.
        InvalidConfiguration: If state.mass is not positive, or the config
            has an unusable trail cap.
    """
    dt = float(dt)
    if not math.isfinite(dt) or dt < 0:
        raise InvalidArgument(f"dt must be a finite, non-negative number of seconds, got {dt!r}")
    if not state.mass > 0:
        raise InvalidConfiguration(f"mass must be positive, got {state.mass!r}")
    if config.max_trail_length < 1:
        raise InvalidConfiguration(
            f"max_trail_length must be at least 1, got {config.max_trail_length}"
        )

    if dt == 0.0:
        # No time passes: no forces, no bounce. The config may have changed
        # since the last step, so the bounds and trail cap still apply.
        out = state.copy()
        out.position[0] = min(max(out.position[0], config.wall_min_x), config.wall_max_x)
        out.position[1] = max(out.position[1], config.ground_y)
        if len(out.trail) > config.max_trail_length:
            out.trail = out.trail[-int(config.max_trail_length):]
        return out

    # 1-2. Acceleration is recomputed, never integrated
    acc = acceleration(state.velocity, state.mass, config.gravity, config.air_resistance)

    # 3-4. Symplectic Euler
    position, velocity = semi_implicit_euler(state.position, state.velocity, acc, dt)

    # 5-6. Orthogonal axes, so order does not matter
    resolve_ground(position, velocity, config.ground_y, config.bounciness)
    resolve_walls(position, velocity, config.wall_min_x, config.wall_max_x, config.bounciness)

    # 7. Trail
    trail = _append_trail(state.trail, position, int(config.max_trail_length))

    return SimulationState(
        position=position,
        velocity=velocity,
        acceleration=acc,
        mass=state.mass,
        time=state.time + dt,
        trail=trail,
    )
