# MIT License (see LICENSE)
"""
Core type definitions for the projectile integrator.

Defines the three values that flow through a simulation:
- SimulationConfig: environment parameters, fixed for one run.
- InitialConditions: what a run is seeded (and re-seeded) from.
- SimulationState: the point mass at one instant, plus its display trail.

The equations of motion are those of a point mass under uniform gravity
and quadratic drag:
  dx/dt = v
  dv/dt = (0, -g) + F_drag / m,   F_drag = -c · v ⊙ |v|
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace as dc_replace

import numpy as np

from .constants import (
    DEFAULT_MAX_TRAIL_LENGTH,
    EARTH_GRAVITY,
    WALL_MAX_X,
    WALL_MIN_X,
)
from .errors import InvalidConfiguration
from .util import empty_trail, f64, is_finite, norm, vec2


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class SimulationConfig:
    """
    Environment parameters for one simulation run.

    Attributes:
        gravity: Downward acceleration magnitude in m/s².
        air_resistance: Quadratic drag coefficient c in F = -c·v|v|.
        bounciness: Coefficient of restitution applied at the ground and walls.
                    1.0 is elastic, 0.0 absorbs the whole normal velocity.
                    Values > 1 gain energy per bounce; that is allowed.
        ground_y: Height of the floor plane in meters.
        max_trail_length: Cap on retained trail samples (oldest dropped first).
        wall_min_x: Left wall position in meters.
        wall_max_x: Right wall position in meters.

    Note:
        Only the structural fields are validated (see validate()). Gravity,
        drag and bounciness come from bounded UI sliders and pass through
        unchecked.
    """
    gravity: float = EARTH_GRAVITY
    air_resistance: float = 0.0
    bounciness: float = 0.8
    ground_y: float = 0.0
    max_trail_length: int = DEFAULT_MAX_TRAIL_LENGTH
    wall_min_x: float = WALL_MIN_X
    wall_max_x: float = WALL_MAX_X

    def validate(self) -> "SimulationConfig":
        """Raise InvalidConfiguration for unusable values; return self otherwise."""
        if int(self.max_trail_length) < 1:
            raise InvalidConfiguration(
                f"max_trail_length must be at least 1, got {self.max_trail_length}"
            )
        if not self.wall_min_x < self.wall_max_x:
            raise InvalidConfiguration(
                f"wall_min_x ({self.wall_min_x}) must be less than wall_max_x ({self.wall_max_x})"
            )
        return self

    def replace(self, **changes) -> "SimulationConfig":
        """Return a copy with the given fields changed."""
        return dc_replace(self, **changes)


# =============================================================================
# State
# =============================================================================

def _check_mass(mass: float) -> float:
    m = float(mass)
    if not is_finite(m) or m <= 0:
        raise InvalidConfiguration(f"mass must be a positive finite number, got {mass!r}")
    return m


@dataclass
class SimulationState:
    """
    Kinematic state of the projectile at one instant.

    Attributes:
        position: [x, y] in meters.
        velocity: [vx, vy] in m/s.
        acceleration: [ax, ay] in m/s², as computed during the step that
                      produced this state. Informational only; the next step
                      recomputes it from scratch.
        mass: Mass in kg. Never changed by the integrator.
        time: Elapsed simulation time in seconds.
        trail: Past positions, shape (n, 2), oldest first.

    Note:
        Vectors are converted to float64 arrays on init. A state handed to
        step() is never modified; treat the returned value as the only one
        valid for continuing the simulation.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    acceleration: np.ndarray | tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    time: float = 0.0
    trail: np.ndarray = field(default_factory=empty_trail)

    def __post_init__(self) -> None:
        self.position = vec2(self.position)
        self.velocity = vec2(self.velocity)
        self.acceleration = vec2(self.acceleration)
        self.trail = f64(self.trail).reshape(-1, 2)
        self.time = float(self.time)

    @property
    def speed(self) -> float:
        """Magnitude of the velocity vector in m/s."""
        return norm(self.velocity)

    def copy(self) -> "SimulationState":
        """Deep copy (the arrays are not shared)."""
        return SimulationState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            acceleration=self.acceleration.copy(),
            mass=self.mass,
            time=self.time,
            trail=self.trail.copy(),
        )


def create_initial_state(
    position: tuple[float, float] | np.ndarray = (0.0, 5.0),
    velocity: tuple[float, float] | np.ndarray = (0.0, 0.0),
    mass: float = 1.0,
) -> SimulationState:
    """
    Build a fresh state at t = 0 with the trail seeded by the start position.

    Raises:
        InvalidConfiguration: If mass is not a positive finite number.
    """
    m = _check_mass(mass)
    pos = vec2(position)
    return SimulationState(
        position=pos,
        velocity=vec2(velocity),
        acceleration=(0.0, 0.0),
        mass=m,
        time=0.0,
        trail=pos.reshape(1, 2).copy(),
    )


@dataclass(frozen=True)
class InitialConditions:
    """
    Reconstructable inputs of a run: where the ball starts and how it moves.

    This is what reset() and loading a saved experiment re-seed from. It is
    validated on creation so a bad mass is caught before any state exists.
    """
    position: tuple[float, float] = (0.0, 5.0)
    velocity: tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", tuple(float(v) for v in vec2(self.position)))
        object.__setattr__(self, "velocity", tuple(float(v) for v in vec2(self.velocity)))
        object.__setattr__(self, "mass", _check_mass(self.mass))

    def to_state(self) -> SimulationState:
        """Create the t = 0 state for these conditions."""
        return create_initial_state(self.position, self.velocity, self.mass)
