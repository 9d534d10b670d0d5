import numpy as np
import pytest

from projectile_lab.collision import resolve_ground, resolve_walls
from projectile_lab.core import (
    acceleration,
    explicit_euler,
    kinetic_energy,
    mechanical_energy,
    potential_energy,
    quadratic_drag,
    semi_implicit_euler,
)
from projectile_lab.presets import ENVIRONMENT_PRESETS, apply_preset, get_preset
from projectile_lab.types import SimulationConfig, create_initial_state


def test_quadratic_drag_sign_and_magnitude():
    v = np.array([2.0, -3.0])
    f = quadratic_drag(v, 0.5)
    assert f == pytest.approx([-2.0, 4.5])
    assert np.array_equal(quadratic_drag(np.zeros(2), 0.5), [0.0, 0.0])
    assert np.array_equal(quadratic_drag(v, 0.0), [0.0, 0.0])


def test_acceleration_mass_scales_drag_only():
    v = np.array([0.0, -4.0])
    light = acceleration(v, 1.0, 9.81, 0.1)
    heavy = acceleration(v, 10.0, 9.81, 0.1)
    assert light[1] == pytest.approx(-9.81 + 1.6)
    assert heavy[1] == pytest.approx(-9.81 + 0.16)
    # Without drag mass cancels out
    assert np.array_equal(acceleration(v, 1.0, 9.81, 0.0), acceleration(v, 10.0, 9.81, 0.0))


def test_integrators_do_not_modify_inputs():
    x, v, a = np.array([0.0, 1.0]), np.array([1.0, 0.0]), np.array([0.0, -10.0])
    x2, v2 = semi_implicit_euler(x, v, a, 0.1)
    assert np.array_equal(x, [0.0, 1.0]) and np.array_equal(v, [1.0, 0.0])
    assert v2 == pytest.approx([1.0, -1.0])
    assert x2 == pytest.approx([0.1, 0.9])


def test_energy_drift_direction():
    """
    Uniform gravity, per step:
      explicit Euler gains ½ g² dt², symplectic Euler loses ½ g² dt².
    """
    g, dt = 10.0, 0.01
    a = np.array([0.0, -g])

    def energy(x, v):
        return 0.5 * float(v @ v) + g * x[1]

    xs, vs = np.array([0.0, 10.0]), np.zeros(2)
    xe, ve = xs.copy(), vs.copy()
    e0 = energy(xs, vs)
    n = 50
    for _ in range(n):
        xs, vs = semi_implicit_euler(xs, vs, a, dt)
        xe, ve = explicit_euler(xe, ve, a, dt)

    assert energy(xs, vs) - e0 == pytest.approx(-0.5 * g * g * dt * dt * n)
    assert energy(xe, ve) - e0 == pytest.approx(0.5 * g * g * dt * dt * n)


def test_energy_functions():
    s = create_initial_state(position=(0.0, 3.0), velocity=(3.0, 4.0), mass=2.0)
    assert kinetic_energy(s) == pytest.approx(25.0)
    assert potential_energy(s, 9.81) == pytest.approx(2.0 * 9.81 * 3.0)
    assert potential_energy(s, 9.81, ground_y=1.0) == pytest.approx(2.0 * 9.81 * 2.0)
    assert mechanical_energy(s, 9.81) == pytest.approx(25.0 + 58.86)


def test_resolve_ground_reports_contact():
    pos, vel = np.array([0.0, 0.5]), np.array([1.0, -2.0])
    assert resolve_ground(pos, vel, 0.0, 0.5) is False
    assert np.array_equal(vel, [1.0, -2.0])

    pos[1] = 0.0  # touching counts as contact
    assert resolve_ground(pos, vel, 0.0, 0.5) is True
    assert vel == pytest.approx([0.95, 1.0])


def test_resolve_walls_reports_contact():
    pos, vel = np.array([10.0, 1.0]), np.array([1.0, 0.0])
    # Exactly on the wall is not a hit
    assert resolve_walls(pos, vel, -10.0, 10.0, 0.5) is False
    pos[0] = -10.5
    vel[0] = -2.0
    assert resolve_walls(pos, vel, -10.0, 10.0, 0.5) is True
    assert pos[0] == -10.0
    assert vel[0] == 1.0


def test_presets():
    names = [p.name for p in ENVIRONMENT_PRESETS]
    assert names == ["Earth", "Moon", "Mars", "Jupiter", "Zero-G", "Custom"]
    assert get_preset("moon").gravity == 1.62
    assert get_preset(" Zero-G ").gravity == 0.0

    cfg = apply_preset(SimulationConfig(bounciness=0.3), "Jupiter")
    assert cfg.gravity == 24.79
    assert cfg.bounciness == 0.3

    with pytest.raises(KeyError, match="Valid presets"):
        get_preset("Pluto")
