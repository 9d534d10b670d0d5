# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force models: quadratic drag and the total acceleration.
    - Integrators: semi-implicit (symplectic) Euler, plus explicit Euler for
      comparison.
    - Invariants: kinetic, potential and mechanical energy.

Typical usage:
    from projectile_lab.core import acceleration, semi_implicit_euler

    a = acceleration(state.velocity, state.mass, gravity=9.81, air_resistance=0.0)
    x, v = semi_implicit_euler(state.position, state.velocity, a, dt=1/60)
"""
from .forces import quadratic_drag, acceleration
from .integrators import semi_implicit_euler, explicit_euler
from .invariants import kinetic_energy, potential_energy, mechanical_energy

__all__ = [
    # Forces
    "quadratic_drag",
    "acceleration",
    # Integrators
    "semi_implicit_euler",
    "explicit_euler",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "mechanical_energy",
]
