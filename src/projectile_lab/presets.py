# MIT License (see LICENSE)
"""
Gravity presets for common environments.

Values are surface gravity in m/s².
Reference: https://nssdc.gsfc.nasa.gov/planetary/factsheet/
"""
from __future__ import annotations
from dataclasses import dataclass

from .types import SimulationConfig


@dataclass(frozen=True)
class EnvironmentPreset:
    name: str
    gravity: float
    description: str


ENVIRONMENT_PRESETS: tuple[EnvironmentPreset, ...] = (
    EnvironmentPreset("Earth", 9.81, "Standard Earth gravity"),
    EnvironmentPreset("Moon", 1.62, "Lunar surface gravity"),
    EnvironmentPreset("Mars", 3.71, "Martian surface gravity"),
    EnvironmentPreset("Jupiter", 24.79, "Jupiter surface gravity"),
    EnvironmentPreset("Zero-G", 0.0, "No gravity (space)"),
    EnvironmentPreset("Custom", 9.81, "Set your own value"),
)


def get_preset(name: str) -> EnvironmentPreset:
    """Look up a preset by name (case-insensitive)."""
    key = name.strip().lower()
    for p in ENVIRONMENT_PRESETS:
        if p.name.lower() == key:
            return p
    valid = ", ".join(p.name for p in ENVIRONMENT_PRESETS)
    raise KeyError(f"Unknown environment preset '{name}'. Valid presets: {valid}")


def apply_preset(config: SimulationConfig, name: str) -> SimulationConfig:
    """Return config with the named preset's gravity."""
    return config.replace(gravity=get_preset(name).gravity)
