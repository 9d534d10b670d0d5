"""
Microbenchmark: time per step vs trail cap.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from projectile_lab import SimulationConfig, create_initial_state, step


def run(trail_cap: int, steps: int = 5000):
    config = SimulationConfig(air_resistance=0.01, bounciness=0.9, max_trail_length=trail_cap)

    rng = np.random.default_rng(12345)  # determinism
    state = create_initial_state(
        position=(0.0, 5.0),
        velocity=(float(rng.uniform(-20, 20)), float(rng.uniform(0, 20))),
    )

    # warmup
    for _ in range(100):
        state = step(state, config, 1 / 60)

    t0 = time.perf_counter()
    for _ in range(steps):
        state = step(state, config, 1 / 60)
    t1 = time.perf_counter()
    return (t1 - t0) / steps


if __name__ == "__main__":
    for cap in [10, 100, 500, 2000]:
        per_step = run(cap)
        print(f"trail={cap:5d}  step={1e6*per_step:8.2f} us  steps/s={1/per_step:10.1f}")
