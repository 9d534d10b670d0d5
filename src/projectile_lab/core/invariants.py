# MIT License (see LICENSE)
"""
Energy bookkeeping for the projectile.

Used by the live readouts and for verifying the integrator: with no drag
and no contact, total mechanical energy should stay constant up to the
O(dt) discretization error of the scheme.
"""
from __future__ import annotations

from ..types import SimulationState
from ..util import norm2


def kinetic_energy(state: SimulationState) -> float:
    """
    Translational kinetic energy.

    T = 0.5 * m * |v|²

    Returns:
        Kinetic energy in joules.
    """
    return 0.5 * state.mass * norm2(state.velocity)


def potential_energy(state: SimulationState, gravity: float, ground_y: float = 0.0) -> float:
    """
    Gravitational potential energy measured from the floor.

    U = m * g * (y - ground_y)
    """
    return state.mass * gravity * (float(state.position[1]) - ground_y)


def mechanical_energy(state: SimulationState, gravity: float, ground_y: float = 0.0) -> float:
    """Total mechanical energy T + U in joules."""
    return kinetic_energy(state) + potential_energy(state, gravity, ground_y)
