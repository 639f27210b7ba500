import io

import numpy as np
import pytest
from coulomb_sim import Simulation
from coulomb_sim.constants import K_COULOMB
from coulomb_sim.core.invariants import kinetic_energy, linear_momentum, potential_energy
from coulomb_sim.profiler import Profiler
from coulomb_sim.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from coulomb_sim.types import Bounds


def test_random_particles_in_range():
    """
    Random charge: sign * u^-3, u in [6, 20]  ->  |q| in [20^-3, 6^-3]
    Random mass: [5, 15] kg. Positions inside the 40 m spawn cube.
    """
    sim = Simulation(seed=3)
    ids = sim.setup_random_particles(200)

    assert ids == list(range(200))
    charges = np.array([p.charge for p in sim.particles])
    masses = np.array([p.mass for p in sim.particles])
    assert np.all(np.abs(charges) >= 20.0 ** -3)
    assert np.all(np.abs(charges) <= 6.0 ** -3)
    assert (charges > 0).any() and (charges < 0).any()
    assert np.all((masses >= 5.0) & (masses <= 15.0))
    assert all(Bounds.cube(40.0).contains(p.position) for p in sim.particles)


def test_setup_random_particles_defaults_and_replaces():
    sim = Simulation(seed=4, starting_particles=10)
    sim.setup_random_particles(3)
    first = sim.particles

    sim.setup_random_particles()

    assert sim.store.count() == 10
    assert [p.id for p in sim.particles] == list(range(10))
    assert not any(p.body.alive for p in first)


def test_destroy_particles():
    renderer = NullRenderer()
    sim = Simulation(seed=5, renderer=renderer)
    sim.setup_random_particles(10)

    assert sim.destroy_particles() == 0
    assert sim.store.count() == 0
    assert renderer.live_handles == []


def test_ui_particle_parses_text():
    sim = Simulation(seed=6)
    pid = sim.add_ui_particle(" -0.002 ", "12.5")
    p = sim.store.get(pid)

    assert p.charge == -0.002
    assert p.mass == 12.5


@pytest.mark.parametrize("charge_text, mass_text", [
    ("abc", "x"),
    ("", "-3"),
    (None, "0"),
    ("nan", "inf"),
])
def test_ui_particle_falls_back_to_random(charge_text, mass_text):
    """Unparsable input never fails; a random value is substituted."""
    sim = Simulation(seed=7)
    p = sim.store.get(sim.add_ui_particle(charge_text, mass_text))

    assert 20.0 ** -3 <= abs(p.charge) <= 6.0 ** -3
    assert 5.0 <= p.mass <= 15.0


def test_add_particle_rejects_nonpositive_mass():
    sim = Simulation(seed=8)
    with pytest.raises(ValueError):
        sim.add_particle(1e-3, 0.0)


def test_like_charges_fly_apart():
    """Two +1 mC, 10 kg particles 2 m apart accelerate away from each other."""
    sim = Simulation(seed=9)
    a = sim.add_particle(1e-3, 10.0, (-1.0, 0.0, 0.0))
    b = sim.add_particle(1e-3, 10.0, (1.0, 0.0, 0.0))

    forces = sim.loop.tick()
    assert np.isclose(forces[1][0], K_COULOMB * 1e-6 / 4.0)
    sim.store.get(a).body.clear_forces()
    sim.store.get(b).body.clear_forces()

    sim.run(50)

    pa, pb = sim.store.get(a), sim.store.get(b)
    assert pa.position[0] < -1.0 and pb.position[0] > 1.0
    assert pa.velocity[0] < 0 < pb.velocity[0]
    assert sim.ticks == 50
    assert sim.time == pytest.approx(50 * 0.02)


def test_step_clears_forces():
    sim = Simulation(seed=10)
    sim.setup_random_particles(4)
    sim.step()
    assert all(np.array_equal(p.body.force, np.zeros(3)) for p in sim.particles)


def test_paused_steps_do_not_move():
    """Ticks keep happening while paused, but simulated time does not advance."""
    sim = Simulation(seed=11)
    sim.setup_random_particles(6)
    sim.run(5)
    before = [(p.position.copy(), p.velocity.copy()) for p in sim.particles]
    t0 = sim.time

    sim.toggle_time()
    sim.run(20)

    assert sim.ticks == 25
    assert sim.time == t0
    for p, (x, v) in zip(sim.particles, before):
        assert np.array_equal(p.position, x)
        assert np.array_equal(p.velocity, v)

    sim.toggle_time()
    assert sim.step() == pytest.approx(0.02)


def test_timescale_commands_change_tick():
    sim = Simulation(base_tick_duration=0.02, seed=12)
    sim.halve_timescale()
    assert sim.step() == 0.01
    sim.double_timescale()
    sim.double_timescale()
    assert sim.step() == 0.04


def test_momentum_conserved_without_walls():
    """Pairwise forces are equal and opposite, so total momentum stays ~0."""
    sim = Simulation(seed=13)
    sim.setup_random_particles(8)
    p0 = linear_momentum(sim.particles)

    sim.run(200)

    p1 = linear_momentum(sim.particles)
    ke = kinetic_energy(sim.particles)
    scale = sum(p.mass * np.linalg.norm(p.velocity) for p in sim.particles)
    print("p0", p0, "p1", p1, "ke", ke, "scale", scale)
    assert np.allclose(p0, 0.0)
    assert np.linalg.norm(p1) <= 1e-9 * max(scale, 1.0)


def test_energy_roughly_conserved():
    """Two distant opposite charges: E = T + U drifts little over a short run."""
    sim = Simulation(seed=14)
    sim.add_particle(1e-4, 10.0, (-5.0, 0.0, 0.0))
    sim.add_particle(-1e-4, 10.0, (5.0, 0.0, 0.0))
    e0 = kinetic_energy(sim.particles) + potential_energy(sim.particles)

    sim.run(100)

    e1 = kinetic_energy(sim.particles) + potential_energy(sim.particles)
    print("E0", e0, "E1", e1)
    assert abs(e1 - e0) / abs(e0) < 1e-2


def test_toggle_boundaries_contains_particles():
    sim = Simulation(seed=15, boundary_half_extent=50.0)
    for i in range(5):
        sim.add_particle(1e-4, 10.0, (100.0 * (i + 1), 0.0, 0.0))

    assert sim.toggle_boundaries() is True
    assert all(sim.boundaries.interior.contains(p.position) for p in sim.particles)

    sim.run(100)
    assert all(sim.boundaries.interior.contains(p.position) for p in sim.particles)

    assert sim.toggle_boundaries() is False
    assert not sim.boundaries.active


def test_regenerate_particles():
    sim = Simulation(seed=16)
    sim.setup_random_particles(10)
    sim.run(10)

    sim.regenerate_particles()

    for p in sim.particles:
        assert np.array_equal(p.velocity, np.zeros(3))
        assert sim.spawn_bounds.contains(p.position)


def test_unknown_integrator():
    with pytest.raises(ValueError):
        Simulation(integrator="euler_forward")


@pytest.mark.parametrize("integrator", ["semi_implicit_euler", "verlet", "rk4"])
def test_integrators_agree_on_short_run(integrator):
    sim = Simulation(seed=17, integrator=integrator)
    sim.add_particle(1e-4, 10.0, (-1.0, 0.0, 0.0))
    sim.add_particle(1e-4, 10.0, (1.0, 0.0, 0.0))
    sim.run(10)
    assert sim.particles[1].position[0] == pytest.approx(1.0, abs=0.5)
    assert sim.particles[1].position[0] > 1.0


def test_renderers_follow_particles():
    buffered = BufferedRenderer()
    sim = Simulation(seed=18, renderer=buffered)
    sim.setup_random_particles(3)

    for _ in range(4):
        sim.step()
        buffered.render_simulation(sim)

    assert len(buffered.frames) == 4
    assert [f["time"] for f in buffered.frames] == pytest.approx([0.02, 0.04, 0.06, 0.08])
    last = buffered.frames[-1]["particles"]
    for rec, p in zip(last, sim.particles):
        assert rec["id"] == p.id
        assert rec["position"] == p.position.tolist()
        assert np.array_equal(p.handle.position, p.position)

    out = io.StringIO()
    DebugRenderer(output=out).render_simulation(sim)
    text = out.getvalue()
    assert text.startswith("=== Frame t=0.0800 ===")
    assert text.count("\n[") == 3


def test_debug_renderer_colours_by_charge_sign():
    out = io.StringIO()
    sim = Simulation(seed=20)
    sim.add_particle(2e-4, 10.0, (0.0, 0.0, 0.0))
    sim.add_particle(-2e-4, 5.0, (1.0, 0.0, 0.0))

    DebugRenderer(output=out, verbose=False).render_simulation(sim)
    lines = out.getvalue().splitlines()

    assert lines[1].startswith("[0] red x2.00 q=+2.000e-04")
    assert lines[2].startswith("[1] blue x1.00 q=-2.000e-04")


def test_profiler_sections():
    prof = Profiler()
    sim = Simulation(seed=19, profiler=prof)
    sim.setup_random_particles(5)
    sim.run(3)

    summary = prof.stats.summary()
    for name in ("forces", "integrate", "contain"):
        assert summary[name]["n"] == 3
