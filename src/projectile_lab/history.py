# MIT License (see LICENSE)
"""
Bounded time-series of (time, position, velocity) samples for graphing.

This is separate from the trail kept inside SimulationState: the trail is
a path for drawing, the history is what the position/velocity graphs plot.
Each has its own cap; both drop their oldest samples first.

Example:
    history = History(max_samples=200)
    for _ in range(600):
        state = step(state, config, 1/60)
        history.record(state)
    cols = history.as_arrays()
    plt.plot(cols["time"], cols["position"][:, 1])
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .constants import DEFAULT_HISTORY_LENGTH
from .errors import InvalidConfiguration
from .types import SimulationState


@dataclass(frozen=True)
class Sample:
    """
    One recorded point of a run.

    Attributes:
        time: Simulation time in seconds.
        position: (x, y) in meters.
        velocity: (vx, vy) in m/s.
    """
    time: float
    position: tuple[float, float]
    velocity: tuple[float, float]

    @classmethod
    def from_state(cls, state: SimulationState) -> "Sample":
        return cls(
            time=float(state.time),
            position=(float(state.position[0]), float(state.position[1])),
            velocity=(float(state.velocity[0]), float(state.velocity[1])),
        )


class History:
    """
    FIFO-bounded sample buffer.

    Args:
        max_samples: Maximum number of samples retained (>= 1).
    """

    def __init__(self, max_samples: int = DEFAULT_HISTORY_LENGTH) -> None:
        if int(max_samples) < 1:
            raise InvalidConfiguration(f"max_samples must be at least 1, got {max_samples}")
        self.max_samples = int(max_samples)
        self._samples: deque[Sample] = deque(maxlen=self.max_samples)

    def record(self, state: SimulationState) -> Sample:
        """Append a sample taken from state and return it."""
        sample = Sample.from_state(state)
        self._samples.append(sample)
        return sample

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    @property
    def samples(self) -> list[Sample]:
        """Snapshot of the buffer, oldest first."""
        return list(self._samples)

    @property
    def latest(self) -> Sample | None:
        return self._samples[-1] if self._samples else None

    def downsample(self, n: int) -> list[Sample]:
        """The newest n samples (all of them if fewer are held)."""
        if n <= 0:
            return []
        return list(self._samples)[-n:]

    def as_arrays(self) -> dict[str, np.ndarray]:
        """
        Column view for plotting.

        Returns:
            Dict with keys:
            - 'time': shape (n,)
            - 'position': shape (n, 2)
            - 'velocity': shape (n, 2)
        """
        n = len(self._samples)
        time = np.empty(n, dtype=np.float64)
        pos = np.empty((n, 2), dtype=np.float64)
        vel = np.empty((n, 2), dtype=np.float64)
        for i, s in enumerate(self._samples):
            time[i] = s.time
            pos[i] = s.position
            vel[i] = s.velocity
        return {"time": time, "position": pos, "velocity": vel}
