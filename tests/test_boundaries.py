import numpy as np
from coulomb_sim.boundaries import BoundaryController, BoundarySet
from coulomb_sim.store import ParticleStore
from coulomb_sim.types import Bounds, RigidBody3D


def _store_outside(n=8):
    rng = np.random.default_rng(11)
    store = ParticleStore(rng=rng)
    for i in range(n):
        store.add(1e-4, 10.0, (200.0 + i, -300.0, 75.0))
        store.get(i).body.velocity[:] = (1.0, 2.0, 3.0)
    return store


def test_cube_walls_surround_interior():
    walls = BoundarySet.cube(half_extent=50.0, thickness=1.0)

    assert len(walls.walls) == 6
    assert sorted(w.name for w in walls.walls) == sorted(["-x", "+x", "-y", "+y", "-z", "+z"])
    assert walls.interior.lo == (-50.0, -50.0, -50.0)
    assert walls.interior.hi == (50.0, 50.0, 50.0)
    assert not walls.active
    # Walls never overlap the interior
    for w in walls.walls:
        assert not w.bounds.contains(np.zeros(3))


def test_toggle_on_activates_all_and_regenerates():
    """Enabling walls turns every volume on and places every particle inside."""
    store = _store_outside()
    walls = BoundarySet.cube(50.0)
    controller = BoundaryController(walls, store)

    assert controller.toggle() is True

    assert all(w.active for w in walls.walls)
    for p in store:
        assert walls.interior.contains(p.position)
        assert np.array_equal(p.velocity, np.zeros(3))


def test_toggle_off_does_not_move_particles():
    store = ParticleStore(rng=np.random.default_rng(12))
    walls = BoundarySet.cube(50.0)
    controller = BoundaryController(walls, store)
    controller.toggle()

    store.add(1e-4, 10.0, (300.0, 0.0, 0.0))
    assert controller.toggle() is False

    assert not any(w.active for w in walls.walls)
    assert store.get(0).position[0] == 300.0


def test_contain_reflects_escaping_bodies():
    walls = BoundarySet.cube(10.0)
    walls.set_active(True)
    inside = RigidBody3D(mass=1.0, position=(0.0, 0.0, 0.0), velocity=(5.0, 0.0, 0.0))
    escaped = RigidBody3D(mass=1.0, position=(12.0, -11.0, 0.0), velocity=(4.0, -2.0, 1.0))

    hits = walls.contain([inside, escaped], restitution=0.5)

    assert hits == 1
    assert np.array_equal(inside.position, [0.0, 0.0, 0.0])
    assert np.array_equal(escaped.position, [10.0, -10.0, 0.0])
    assert np.array_equal(escaped.velocity, [-2.0, 1.0, 1.0])


def test_contain_inactive_is_noop():
    walls = BoundarySet.cube(10.0)
    body = RigidBody3D(mass=1.0, position=(100.0, 0.0, 0.0))

    assert walls.contain([body]) == 0
    assert body.position[0] == 100.0


def test_toggle_on_respawns_clear_of_the_walls():
    """With a 40 m spawn cube inside 50 m walls, respawned particles never touch a wall face."""
    store = _store_outside(30)
    walls = BoundarySet.cube(50.0)
    controller = BoundaryController(walls, store)

    assert controller.spawn_bounds == Bounds.cube(40.0)
    controller.toggle()

    for p in store:
        assert Bounds.cube(40.0).contains(p.position)
        assert np.all(np.abs(p.position) < 50.0)


def test_toggle_on_falls_back_to_interior():
    """Walls tighter than the spawn cube respawn particles across the interior."""
    store = _store_outside()
    walls = BoundarySet.cube(10.0)
    controller = BoundaryController(walls, store)

    assert controller.spawn_bounds == walls.interior
    controller.toggle()

    assert all(walls.interior.contains(p.position) for p in store)


def test_bounds_within():
    assert Bounds.cube(40.0).within(Bounds.cube(50.0))
    assert Bounds.cube(50.0).within(Bounds.cube(50.0))
    assert not Bounds.cube(50.0).within(Bounds.cube(40.0))
    assert not Bounds((0.0, 0.0, 0.0), (1.0, 1.0, 60.0)).within(Bounds.cube(50.0))
