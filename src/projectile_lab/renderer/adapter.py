# MIT License (see LICENSE)
"""
Renderer adapters for projectile visualization.

The integrator knows nothing about drawing. A renderer reads the position,
velocity and trail of each state it is handed; what it does with them
(canvas, 3D scene, text, a recording) is up to the implementation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

from ..types import SimulationState


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(state.time)
        renderer.draw_state(state)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(state)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_state(self, state: SimulationState) -> None:
        """Draw the ball, its velocity vector and its trail."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, state: SimulationState) -> None:
        """Draw one complete frame for state."""
        self.begin_frame(state.time)
        self.draw_state(state)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and headless runs.

    Output:
        t=0.0167 pos=(0.00, 4.99) v=(0.00, -0.16) trail=2
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity and trail length.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._line = ""

    def begin_frame(self, time: float) -> None:
        self._line = f"t={time:.4f}"

    def draw_state(self, state: SimulationState) -> None:
        pos = state.position
        self._line += f" pos=({pos[0]:.2f}, {pos[1]:.2f})"
        if self.verbose:
            vel = state.velocity
            self._line += f" v=({vel[0]:.2f}, {vel[1]:.2f}) trail={len(state.trail)}"

    def end_frame(self) -> None:
        self.output.write(self._line + "\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for timing the physics alone."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_state(self, state: SimulationState) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records every frame for later playback or export.

    Example:
        renderer = BufferedRenderer()
        sim = Simulation(renderer=renderer)
        sim.run(2.0)
        for frame in renderer.frames:
            print(frame["time"], frame["position"])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_state(self, state: SimulationState) -> None:
        if self._current_frame is None:
            return
        self._current_frame.update({
            "position": state.position.tolist(),
            "velocity": state.velocity.tolist(),
            "trail_length": len(state.trail),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
