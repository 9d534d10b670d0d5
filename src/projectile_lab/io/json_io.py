# MIT License (see LICENSE)
"""
JSON serialization and a file-backed store for saved experiments.

The format is human-readable and keeps the camelCase keys of the web lab
that produced the first saved experiments. Files written by that lab load
too: {"x", "y"} objects are read as vectors and its scalar data points as
vertical components. Files are always written in the list form below.

JSON Schema Overview:
---------------------
{
  "id": string,
  "name": string,                  # Required
  "createdAt": string,             # ISO 8601
  "config": {                      # Required
    "gravity": float,              # Default: 9.81
    "airResistance": float,        # Default: 0.0
    "bounciness": float,           # Default: 0.8
    "groundY": float,              # Default: 0.0
    "maxTrailLength": int,         # Default: 500
    "wallMinX": float,             # Default: -10.0
    "wallMaxX": float              # Default: 10.0
  },
  "initialState": {
    "position": [x, y],            # Default: [0, 5]
    "velocity": [vx, vy],          # Default: [0, 0]
    "mass": float                  # Default: 1.0, must be > 0
  },
  "dataPoints": [                  # At most 100, oldest first
    {"time": float, "position": [x, y], "velocity": [vx, vy]}
  ]
}

A store file is a JSON list of such objects, in save order.
"""
from __future__ import annotations
import json
import logging
import os
from typing import Any

from ..constants import DEFAULT_MAX_TRAIL_LENGTH, EARTH_GRAVITY, WALL_MAX_X, WALL_MIN_X
from ..history import Sample
from ..types import InitialConditions, SimulationConfig
from ..util import to_list
from .experiments import SavedExperiment

logger = logging.getLogger(__name__)


# =============================================================================
# Config
# =============================================================================

def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """Serialize a SimulationConfig to a dict."""
    return {
        "gravity": config.gravity,
        "airResistance": config.air_resistance,
        "bounciness": config.bounciness,
        "groundY": config.ground_y,
        "maxTrailLength": config.max_trail_length,
        "wallMinX": config.wall_min_x,
        "wallMaxX": config.wall_max_x,
    }


def config_from_json(d: dict[str, Any]) -> SimulationConfig:
    """
    Parse a SimulationConfig, filling missing keys with the defaults.

    Raises:
        InvalidConfiguration: If the trail cap or walls are unusable.
    """
    return SimulationConfig(
        gravity=float(d.get("gravity", EARTH_GRAVITY)),
        air_resistance=float(d.get("airResistance", 0.0)),
        bounciness=float(d.get("bounciness", 0.8)),
        ground_y=float(d.get("groundY", 0.0)),
        max_trail_length=int(d.get("maxTrailLength", DEFAULT_MAX_TRAIL_LENGTH)),
        wall_min_x=float(d.get("wallMinX", WALL_MIN_X)),
        wall_max_x=float(d.get("wallMaxX", WALL_MAX_X)),
    ).validate()


# =============================================================================
# Experiments
# =============================================================================

def _vec_from_json(value: Any, what: str) -> tuple[float, float]:
    """
    Accept [x, y] lists and the web lab's {"x": .., "y": ..} objects.

    A bare number is a vertical component (the web lab graphed height
    and vertical velocity only).
    """
    try:
        if isinstance(value, dict):
            return (float(value.get("x", 0.0)), float(value.get("y", 0.0)))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return (0.0, float(value))
        x, y = value
        return (float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed {what}: {value!r}") from exc


def sample_to_json(s: Sample) -> dict[str, Any]:
    return {"time": s.time, "position": to_list(s.position), "velocity": to_list(s.velocity)}


def sample_from_json(d: dict[str, Any]) -> Sample:
    """
    Parse one data point.

    Raises:
        ValueError: If 'time' is missing or a field has the wrong shape.
    """
    if not isinstance(d, dict) or "time" not in d:
        raise ValueError(f"Malformed data point: {d!r}")
    try:
        t = float(d["time"])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed data point time: {d['time']!r}") from exc
    return Sample(
        time=t,
        position=_vec_from_json(d.get("position", [0.0, 0.0]), "data point position"),
        velocity=_vec_from_json(d.get("velocity", [0.0, 0.0]), "data point velocity"),
    )


def experiment_to_json(exp: SavedExperiment) -> dict[str, Any]:
    """Serialize a SavedExperiment to a dict (round-trip compatible)."""
    return {
        "id": exp.id,
        "name": exp.name,
        "createdAt": exp.created_at,
        "config": config_to_json(exp.config),
        "initialState": {
            "position": to_list(exp.initial.position),
            "velocity": to_list(exp.initial.velocity),
            "mass": exp.initial.mass,
        },
        "dataPoints": [sample_to_json(s) for s in exp.data_points],
    }


def experiment_from_json(d: dict[str, Any]) -> SavedExperiment:
    """
    Parse a single saved experiment.

    Raises:
        ValueError: If 'name' or 'config' is missing, or a vector or data
            point is malformed.
        InvalidConfiguration: If the stored mass, trail cap or walls are invalid.
    """
    if not d.get("name"):
        raise ValueError("Experiment definition missing required 'name' field.")
    if "config" not in d:
        raise ValueError(f"Experiment '{d['name']}' missing required 'config' field.")

    init = d.get("initialState", {})
    initial = InitialConditions(
        position=_vec_from_json(init.get("position", [0.0, 5.0]), "initial position"),
        velocity=_vec_from_json(init.get("velocity", [0.0, 0.0]), "initial velocity"),
        mass=float(init.get("mass", 1.0)),
    )

    kwargs: dict[str, Any] = {}
    if "id" in d:
        kwargs["id"] = str(d["id"])
    if "createdAt" in d:
        kwargs["created_at"] = str(d["createdAt"])

    return SavedExperiment(
        name=str(d["name"]),
        config=config_from_json(d["config"]),
        initial=initial,
        data_points=[sample_from_json(p) for p in d.get("dataPoints", [])],
        **kwargs,
    )


# =============================================================================
# Store
# =============================================================================

class ExperimentStore:
    """
    Experiments kept in one JSON file, keyed by name.

    A missing file is an empty store. Saving under an existing name
    replaces that entry and moves it to the end, so latest() is always the
    most recently saved experiment.

    Example:
        store = ExperimentStore("experiments.json")
        store.save(capture_experiment("moon drop", sim))
        sim.load_experiment(store.load("moon drop"))
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    def _read(self) -> list[dict[str, Any]]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Experiment store {self.path} must contain a JSON list.")
        return data

    def _write(self, entries: list[dict[str, Any]], indent: int = 2) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(entries, f, indent=indent)

    def names(self) -> list[str]:
        """Experiment names in save order."""
        return [e.get("name", "") for e in self._read()]

    def save(self, experiment: SavedExperiment) -> None:
        entries = [e for e in self._read() if e.get("name") != experiment.name]
        entries.append(experiment_to_json(experiment))
        self._write(entries)
        logger.debug("Saved experiment '%s' to %s", experiment.name, self.path)

    def load(self, name: str) -> SavedExperiment:
        """Raises KeyError if no experiment has that name."""
        for e in self._read():
            if e.get("name") == name:
                return experiment_from_json(e)
        raise KeyError(f"No saved experiment named '{name}'")

    def latest(self) -> SavedExperiment | None:
        entries = self._read()
        if not entries:
            return None
        return experiment_from_json(entries[-1])

    def delete(self, name: str) -> bool:
        """Remove an experiment; returns False if it did not exist."""
        entries = self._read()
        kept = [e for e in entries if e.get("name") != name]
        if len(kept) == len(entries):
            return False
        self._write(kept)
        return True
