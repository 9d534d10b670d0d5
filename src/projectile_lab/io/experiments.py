# MIT License (see LICENSE)
"""
Saved experiments: the reconstructable record of a run.

An experiment stores the environment, the initial conditions and a
truncated sample of what happened. It never stores a mid-run state;
loading one re-seeds a fresh run from its inputs.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
import time
import uuid
from typing import TYPE_CHECKING

from ..constants import MAX_SAVED_SAMPLES
from ..history import Sample
from ..types import InitialConditions, SimulationConfig

if TYPE_CHECKING:
    from ..simulation import Simulation


def _new_id() -> str:
    return f"exp-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class SavedExperiment:
    """
    A named, persisted run.

    Attributes:
        name: User-supplied label; the store key.
        config: Environment at save time.
        initial: Initial conditions at save time.
        data_points: Up to MAX_SAVED_SAMPLES recorded samples, oldest first.
        id: Unique identifier.
        created_at: ISO 8601 timestamp (UTC).
    """
    name: str
    config: SimulationConfig
    initial: InitialConditions
    data_points: list[Sample] = field(default_factory=list)
    id: str = field(default_factory=_new_id)
    created_at: str = field(default_factory=_now_iso)

    def __post_init__(self) -> None:
        if len(self.data_points) > MAX_SAVED_SAMPLES:
            self.data_points = list(self.data_points[-MAX_SAVED_SAMPLES:])


def capture_experiment(name: str, simulation: "Simulation") -> SavedExperiment:
    """
    Snapshot a simulation's inputs and its most recent graph samples.

    Args:
        name: Label for the experiment.
        simulation: The session to capture. Not modified.
    """
    if not name or not name.strip():
        raise ValueError("Experiment name must not be empty.")
    return SavedExperiment(
        name=name.strip(),
        config=simulation.config,
        initial=simulation.initial,
        data_points=simulation.history.downsample(MAX_SAVED_SAMPLES),
    )
