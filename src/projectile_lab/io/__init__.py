# MIT License (see LICENSE)
"""
Persistence for saved experiments.

This subpackage provides:
    - SavedExperiment: Config + initial conditions + a truncated sample.
    - JSON serialization of configs and experiments.
    - ExperimentStore: A JSON-file key-value store keyed by experiment name.

Typical usage:
    from projectile_lab.io import ExperimentStore, capture_experiment

    store = ExperimentStore("experiments.json")
    store.save(capture_experiment("bouncy", sim))
    sim.load_experiment(store.latest())
"""
from .experiments import SavedExperiment, capture_experiment
from .json_io import (
    ExperimentStore,
    config_to_json,
    config_from_json,
    experiment_to_json,
    experiment_from_json,
)

__all__ = [
    "SavedExperiment",
    "capture_experiment",
    "ExperimentStore",
    "config_to_json",
    "config_from_json",
    "experiment_to_json",
    "experiment_from_json",
]
