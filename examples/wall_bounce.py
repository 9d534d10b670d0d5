# examples/wall_bounce.py
from projectile_lab import SimulationConfig, create_initial_state, step

config = SimulationConfig(gravity=9.81, bounciness=1.0)
state = create_initial_state(position=(9.95, 1.0), velocity=(5.0, 0.0))

state = step(state, config, 0.1)
print("x:", state.position[0], "(clamped to the wall)")
print("vx:", state.velocity[0], "(reflected)")
