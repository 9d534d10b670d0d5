# MIT License (see LICENSE)
"""
projectile_lab - A projectile-motion integrator for interactive physics labs.

A point mass falls under gravity and quadratic drag, bounces off a floor
and two walls, and leaves a bounded trail for plotting.

Main entry points:
    - step: Advance a SimulationState by dt (pure function).
    - create_initial_state: Fresh t = 0 state with a one-sample trail.
    - SimulationConfig, SimulationState, InitialConditions: The data model.
    - Simulation: Host loop with play/pause, stepping, reset and history.

Submodules:
    - core: Forces, integrators, energy invariants.
    - collision: Ground and wall contact response.
    - io: Saved experiments and their JSON store.
    - renderer: Optional visualization adapters.

Example:
    from projectile_lab import SimulationConfig, create_initial_state, step

    config = SimulationConfig(gravity=9.81, bounciness=0.8)
    state = create_initial_state(position=(0, 5))
    for _ in range(60):
        state = step(state, config, 1/60)
"""
from .errors import ProjectileLabError, InvalidConfiguration, InvalidArgument
from .types import SimulationConfig, SimulationState, InitialConditions, create_initial_state
from .integrator import step
from .history import History, Sample
from .presets import ENVIRONMENT_PRESETS, EnvironmentPreset, get_preset, apply_preset
from .simulation import Simulation

__all__ = [
    # Data model
    "SimulationConfig",
    "SimulationState",
    "InitialConditions",
    "create_initial_state",
    # Integrator
    "step",
    # Host
    "Simulation",
    "History",
    "Sample",
    # Presets
    "ENVIRONMENT_PRESETS",
    "EnvironmentPreset",
    "get_preset",
    "apply_preset",
    # Errors
    "ProjectileLabError",
    "InvalidConfiguration",
    "InvalidArgument",
]
