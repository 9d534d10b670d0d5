# examples/minimal_freefall.py
from projectile_lab import SimulationConfig, create_initial_state, step

config = SimulationConfig(gravity=9.81, air_resistance=0.0, bounciness=0.8)
state = create_initial_state(position=(0.0, 5.0), velocity=(0.0, 0.0), mass=1.0)

dt = 1 / 60
while state.time < 3.0:
    state = step(state, config, dt)

print("t:", state.time)
print("pos:", state.position)
print("vel:", state.velocity)
print("trail samples:", len(state.trail))
