# MIT License (see LICENSE)
"""
The simulation host: owns the current state and decides when to step.

The Simulation class is the caller side of the pure step() function. It
manages:
- The environment (SimulationConfig) and the initial conditions.
- The current SimulationState, threaded through step() call by call.
- A bounded History of samples for graphing.
- Play/pause and the two ways of advancing:
    1. Continuous: advance(frame_dt) once per rendered frame while playing,
       with the wall-clock delta clamped to MAX_FRAME_DT.
    2. Discrete: step_once() advances exactly FIXED_DT on demand.

Structure:
    - User creates a Simulation (optionally with a renderer).
    - The host's frame callback calls advance(frame_dt).
    - Controls call set_config(), set_initial(), reset(), step_once().
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging
import math
from typing import TYPE_CHECKING

from .constants import DEFAULT_HISTORY_LENGTH, FIXED_DT, MAX_FRAME_DT
from .errors import InvalidArgument
from .history import History
from .integrator import step
from .renderer.adapter import RendererAdapter
from .types import InitialConditions, SimulationConfig, SimulationState

if TYPE_CHECKING:
    from .io.experiments import SavedExperiment

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Projectile lab session.

    Attributes:
        config: Environment parameters (gravity, drag, bounciness, bounds).
        initial: Start position, velocity and mass; reset() re-seeds from it.
        history_length: Cap on graph samples, independent of the trail cap.
        renderer: Optional adapter drawn after every advance.
        playing: Whether advance() moves the simulation.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    initial: InitialConditions = field(default_factory=InitialConditions)
    history_length: int = DEFAULT_HISTORY_LENGTH
    renderer: RendererAdapter | None = None
    playing: bool = False

    # Runtime state
    state: SimulationState = field(init=False)
    history: History = field(init=False)

    def __post_init__(self) -> None:
        self.config.validate()
        self.history = History(self.history_length)
        self.state = self.initial.to_state()

    # -------------------------------------------------------------------------
    # Play control
    # -------------------------------------------------------------------------

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def toggle(self) -> bool:
        """Flip play/pause; returns the new playing flag."""
        self.playing = not self.playing
        return self.playing

    # -------------------------------------------------------------------------
    # Advancing
    # -------------------------------------------------------------------------

    def _advance(self, dt: float) -> SimulationState:
        self.state = step(self.state, self.config, dt)
        if dt > 0:
            self.history.record(self.state)
        if self.renderer is not None:
            self.renderer.render(self.state)
        return self.state

    def step_once(self, dt: float = FIXED_DT) -> SimulationState:
        """
        Advance exactly one step, whether or not the simulation is playing.

        Raises:
            InvalidArgument: If dt is negative or not finite (state unchanged).
        """
        return self._advance(dt)

    def advance(self, frame_dt: float) -> bool:
        """
        Frame callback for continuous play.

        The wall-clock delta is clamped to MAX_FRAME_DT so a long stall does
        not produce one huge, inaccurate step. Negative or non-finite deltas
        (host clocks can jump after a suspend) skip the frame.

        Returns:
            True if a step was taken.
        """
        if not self.playing:
            return False
        frame_dt = float(frame_dt)
        if not math.isfinite(frame_dt) or frame_dt <= 0.0:
            return False
        dt = min(frame_dt, MAX_FRAME_DT)
        self._advance(dt)
        return True

    def run(self, duration: float, dt: float = FIXED_DT) -> SimulationState:
        """
        Step headlessly until `duration` more seconds have elapsed.

        The last step is shortened so the run ends exactly on time.
        """
        if duration < 0:
            raise InvalidArgument(f"duration must be non-negative, got {duration}")
        if not dt > 0:
            raise InvalidArgument(f"dt must be positive, got {dt}")
        t_end = self.state.time + duration
        while self.state.time < t_end - 1e-12:
            self._advance(min(dt, t_end - self.state.time))
        return self.state

    # -------------------------------------------------------------------------
    # Controls
    # -------------------------------------------------------------------------

    def reset(self) -> SimulationState:
        """Stop, discard the run, and re-seed from the initial conditions."""
        self.playing = False
        self.history.clear()
        self.state = self.initial.to_state()
        logger.debug("Reset simulation to %s", self.initial)
        return self.state

    def set_config(self, config: SimulationConfig) -> None:
        """Swap the environment; takes effect on the next step."""
        self.config = config.validate()
        logger.debug("Config changed: %s", config)

    def set_initial(
        self,
        position: tuple[float, float] | None = None,
        velocity: tuple[float, float] | None = None,
        mass: float | None = None,
    ) -> InitialConditions:
        """
        Change the initial conditions. They apply at the next reset().

        Raises:
            InvalidConfiguration: If mass is not positive. The previous
                initial conditions are kept.
        """
        self.initial = InitialConditions(
            position=self.initial.position if position is None else position,
            velocity=self.initial.velocity if velocity is None else velocity,
            mass=self.initial.mass if mass is None else mass,
        )
        return self.initial

    def load_experiment(self, experiment: "SavedExperiment") -> SimulationState:
        """
        Restore the config and initial conditions of a saved run and reset.

        Only the inputs are restored; the recorded samples are not replayed.
        """
        self.config = experiment.config.validate()
        self.initial = experiment.initial
        logger.info("Loaded experiment '%s'", experiment.name)
        return self.reset()
