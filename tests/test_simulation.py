import io

import numpy as np
import pytest

from projectile_lab.constants import FIXED_DT, MAX_FRAME_DT
from projectile_lab.errors import InvalidArgument, InvalidConfiguration
from projectile_lab.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from projectile_lab.simulation import Simulation
from projectile_lab.types import InitialConditions, SimulationConfig


def test_new_simulation_is_seeded_and_paused():
    sim = Simulation(initial=InitialConditions(position=(1.0, 4.0), velocity=(2.0, 0.0), mass=3.0))
    assert not sim.playing
    assert sim.state.time == 0.0
    assert len(sim.state.trail) == 1
    assert np.array_equal(sim.state.position, [1.0, 4.0])
    assert sim.state.mass == 3.0
    assert len(sim.history) == 0


def test_advance_only_moves_while_playing():
    sim = Simulation()
    assert sim.advance(0.016) is False
    assert sim.state.time == 0.0

    sim.play()
    assert sim.advance(0.016) is True
    assert sim.state.time == pytest.approx(0.016)
    assert len(sim.history) == 1


def test_advance_clamps_frame_delta():
    sim = Simulation()
    sim.play()
    sim.advance(1.5)  # stalled frame
    assert sim.state.time == MAX_FRAME_DT

    t = sim.state.time
    assert sim.advance(-0.2) is False
    assert sim.advance(0.0) is False
    assert sim.state.time == t


@pytest.mark.parametrize("frame_dt", [float("nan"), float("inf"), -float("inf")])
def test_advance_skips_non_finite_frame_delta(frame_dt):
    sim = Simulation()
    sim.play()
    sim.advance(FIXED_DT)
    before = sim.state

    assert sim.advance(frame_dt) is False
    assert sim.state is before
    assert len(sim.history) == 1


def test_zero_step_applies_new_config_without_recording():
    sim = Simulation()
    sim.run(0.5)
    n = len(sim.history)
    sim.set_config(sim.config.replace(max_trail_length=3))

    state = sim.step_once(0.0)
    assert len(state.trail) == 3
    assert len(sim.history) == n
    assert state.time == pytest.approx(0.5)


def test_toggle():
    sim = Simulation()
    assert sim.toggle() is True
    assert sim.playing
    assert sim.toggle() is False
    sim.play()
    sim.pause()
    assert not sim.playing


def test_step_once_works_while_paused():
    sim = Simulation()
    sim.step_once()
    sim.step_once()
    assert sim.state.time == FIXED_DT + FIXED_DT
    assert not sim.playing


def test_step_once_rejects_negative_dt_and_keeps_state():
    sim = Simulation()
    sim.step_once()
    current = sim.state
    with pytest.raises(InvalidArgument):
        sim.step_once(-FIXED_DT)
    assert sim.state is current
    assert len(sim.history) == 1


def test_run_ends_exactly_on_duration():
    sim = Simulation()
    sim.run(1.0, dt=0.03)
    assert sim.state.time == pytest.approx(1.0, abs=1e-12)


def test_run_rejects_bad_arguments():
    sim = Simulation()
    with pytest.raises(InvalidArgument):
        sim.run(-1.0)
    with pytest.raises(InvalidArgument):
        sim.run(1.0, dt=0.0)


def test_history_has_its_own_cap():
    sim = Simulation(config=SimulationConfig(max_trail_length=500), history_length=10)
    sim.run(1.0)
    assert len(sim.history) == 10
    assert len(sim.state.trail) == 61
    assert sim.history.latest.time == sim.state.time


def test_reset_reseeds_and_clears():
    sim = Simulation()
    sim.play()
    for _ in range(30):
        sim.advance(1 / 60)
    sim.reset()

    assert not sim.playing
    assert sim.state.time == 0.0
    assert len(sim.state.trail) == 1
    assert np.array_equal(sim.state.position, sim.initial.position)
    assert len(sim.history) == 0


def test_set_initial_applies_on_reset():
    sim = Simulation()
    sim.step_once()
    sim.set_initial(position=(2.0, 8.0), mass=4.0)

    # Running state untouched until reset
    assert sim.state.mass == 1.0
    sim.reset()
    assert np.array_equal(sim.state.position, [2.0, 8.0])
    assert np.array_equal(sim.state.velocity, [0.0, 0.0])
    assert sim.state.mass == 4.0


def test_set_initial_rejects_bad_mass():
    sim = Simulation()
    before = sim.initial
    with pytest.raises(InvalidConfiguration):
        sim.set_initial(mass=0.0)
    assert sim.initial is before


def test_set_config_takes_effect_next_step():
    sim = Simulation()
    sim.set_config(sim.config.replace(gravity=1.62))
    sim.step_once()
    assert sim.state.acceleration[1] == pytest.approx(-1.62)


@pytest.mark.parametrize(
    "config",
    [
        SimulationConfig(max_trail_length=0),
        SimulationConfig(wall_min_x=5.0, wall_max_x=-5.0),
    ],
)
def test_invalid_config_rejected(config):
    with pytest.raises(InvalidConfiguration):
        Simulation(config=config)
    sim = Simulation()
    with pytest.raises(InvalidConfiguration):
        sim.set_config(config)


def test_renderer_receives_every_frame():
    renderer = BufferedRenderer()
    sim = Simulation(renderer=renderer)
    for _ in range(5):
        sim.step_once()
    assert len(renderer.frames) == 5
    assert renderer.frames[-1]["time"] == sim.state.time
    assert renderer.frames[-1]["position"] == sim.state.position.tolist()
    assert renderer.frames[-1]["trail_length"] == 6
    renderer.clear()
    assert renderer.frames == []


def test_debug_renderer_writes_one_line_per_frame():
    out = io.StringIO()
    sim = Simulation(renderer=DebugRenderer(output=out))
    sim.step_once()
    sim.step_once()
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("t=0.0167 pos=(0.00, 5.00)")
    assert "trail=3" in lines[1]


def test_null_renderer():
    sim = Simulation(renderer=NullRenderer())
    sim.run(0.5)
    assert sim.state.time == pytest.approx(0.5)
