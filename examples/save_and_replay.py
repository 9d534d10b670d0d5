# examples/save_and_replay.py
import logging
import sys

from projectile_lab import Simulation, SimulationConfig, InitialConditions, apply_preset
from projectile_lab.io import ExperimentStore, capture_experiment
from projectile_lab.renderer import DebugRenderer

logging.basicConfig(level=logging.DEBUG)

sim = Simulation(
    config=apply_preset(SimulationConfig(bounciness=0.9), "Moon"),
    initial=InitialConditions(position=(-8.0, 2.0), velocity=(6.0, 4.0), mass=1.0),
)
sim.run(10.0)

path = sys.argv[1] if len(sys.argv) > 1 else "experiments.json"
store = ExperimentStore(path)
store.save(capture_experiment("moon lob", sim))

# Replay the first half second with a text renderer
replay = Simulation(renderer=DebugRenderer())
replay.load_experiment(store.load("moon lob"))
replay.run(0.5)
