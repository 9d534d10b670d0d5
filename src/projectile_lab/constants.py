# MIT License (see LICENSE)
"""
Numeric constants shared by the integrator and its host loop.

All values use SI units (meters, seconds, kilograms).
"""
from __future__ import annotations

# Default wall boundaries. SimulationConfig carries them as fields so a
# caller may widen the arena, but these are the classic lab values.
WALL_MIN_X: float = -10.0
WALL_MAX_X: float = 10.0

# Horizontal velocity is scaled by this factor on every ground contact.
GROUND_FRICTION: float = 0.95

# Residual bounce speeds below this are zeroed so the ball comes to rest
# instead of micro-bouncing forever.
REST_VELOCITY_THRESHOLD: float = 0.1

# Manual "step" button advances by exactly one 60 Hz frame.
FIXED_DT: float = 1.0 / 60.0

# Wall-clock deltas are clamped to this in continuous play, so a stalled
# frame (tab switch, debugger) doesn't launch the ball through the floor.
MAX_FRAME_DT: float = 0.05

DEFAULT_MAX_TRAIL_LENGTH: int = 500
DEFAULT_HISTORY_LENGTH: int = 200

# Saved experiments keep only the most recent samples of the run.
MAX_SAVED_SAMPLES: int = 100

# Standard gravity, m/s²
EARTH_GRAVITY: float = 9.81
