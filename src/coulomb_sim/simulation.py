# MIT License (see LICENSE)
"""
The simulation facade and fixed-tick step.

The Simulation class wires the components together and exposes the
commands a UI or script issues:
- Particle lifecycle: add_particle, add_ui_particle, add_random_particle,
  setup_random_particles, regenerate_particles, destroy_particles.
- Boundaries: toggle_boundaries.
- Time: halve_timescale, double_timescale, toggle_time.

Each call to step() is one fixed tick:
    1. SimulationLoop applies Coulomb forces to every rigid body.
    2. The integrator advances each body by the effective tick duration.
    3. Active boundaries reflect particles back inside.
    4. New positions are written to the renderable handles.
    5. Force accumulators are cleared.

Structure:
    - User creates a Simulation.
    - User adds particles (or calls setup_random_particles()).
    - An external fixed-rate scheduler calls step() once per tick.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

import numpy as np

from .boundaries import BoundaryController, BoundarySet
from .clock import SimulationClock
from .constants import (
    BOUNDARY_HALF_EXTENT,
    DEFAULT_MIN_DISTANCE,
    DEFAULT_TICK,
    MAX_POS,
    STARTING_PARTICLES,
)
from .core.forces import ForceSolver
from .core.integrators import get_integrator
from .loop import SimulationLoop
from .profiler import Profiler
from .renderer.adapter import NullRenderer, RendererAdapter
from .sampling import charge_from_text, mass_from_text, random_charge, random_mass
from .store import ParticleStore
from .types import Bounds, Particle

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Point-charge simulation world.

    Attributes:
        base_tick_duration: Unscaled fixed tick in seconds (default 1/50).
        starting_particles: Particle count for setup_random_particles().
        min_distance: Separation clamp for the force law in meters.
        integrator: "semi_implicit_euler" (default), "verlet" or "rk4".
        spawn_half_extent: Half-size of the cube new particles spawn in.
        boundary_half_extent: Half-size of the containment cube.
        boundary_restitution: Velocity retained when bouncing off a wall.
        seed: Seed for the random generator (None for OS entropy).
        renderer: Renderer adapter for particle handles (default NullRenderer).
        profiler: Optional Profiler for per-phase timing.
    """
    base_tick_duration: float = DEFAULT_TICK
    starting_particles: int = STARTING_PARTICLES
    min_distance: float = DEFAULT_MIN_DISTANCE
    integrator: str = "semi_implicit_euler"
    spawn_half_extent: float = MAX_POS
    boundary_half_extent: float = BOUNDARY_HALF_EXTENT
    boundary_restitution: float = 1.0
    seed: int | None = None
    renderer: RendererAdapter | None = None
    profiler: Profiler | None = None

    # Internal state
    time: float = 0.0
    ticks: int = 0
    clock: SimulationClock = field(init=False)
    store: ParticleStore = field(init=False)
    boundaries: BoundarySet = field(init=False)

    def __post_init__(self) -> None:
        """Build the components after dataclass creation."""
        # Fail early on a bad integrator name
        self._integrate_body = get_integrator(self.integrator)

        self.rng = np.random.default_rng(self.seed)
        if self.renderer is None:
            self.renderer = NullRenderer()

        self.spawn_bounds = Bounds.cube(self.spawn_half_extent)
        self.clock = SimulationClock(self.base_tick_duration)
        self.store = ParticleStore(renderer=self.renderer, rng=self.rng, default_bounds=self.spawn_bounds)
        self.solver = ForceSolver(self.min_distance)
        self.loop = SimulationLoop(self.store, self.solver)
        self.boundaries = BoundarySet.cube(self.boundary_half_extent)
        self.boundary_controller = BoundaryController(self.boundaries, self.store)

    # ------------------------------------------------------------------
    # Particles
    # ------------------------------------------------------------------

    @property
    def particles(self) -> list[Particle]:
        """Particles in insertion order."""
        return self.store.iterate()

    def add_particle(self, charge: float, mass: float, position=None) -> int:
        """
        Add a particle. A random position in the spawn cube is used if
        `position` is None.

        Raises:
            ValueError: If mass is not positive.
        """
        if position is None:
            position = self.spawn_bounds.sample(self.rng)
        return self.store.add(charge, mass, position)

    def add_ui_particle(self, charge_text: str | None, mass_text: str | None) -> int:
        """
        Add a particle from text-field input.

        Unparsable charge or mass (or a non-positive mass) is replaced by a
        random value instead of failing.
        """
        charge = charge_from_text(charge_text, self.rng)
        mass = mass_from_text(mass_text, self.rng)
        return self.add_particle(charge, mass)

    def add_random_particle(self) -> int:
        """Add a particle with random charge, mass and position."""
        return self.add_particle(random_charge(self.rng), random_mass(self.rng))

    def setup_random_particles(self, count: int | None = None) -> list[int]:
        """
        Replace all particles with `count` random ones.

        Args:
            count: Number of particles (defaults to starting_particles).

        Returns:
            Ids of the new particles.
        """
        count = self.starting_particles if count is None else count
        self.destroy_particles()
        ids = [self.add_random_particle() for _ in range(count)]
        logger.info(f"Set up {count} random particles")
        return ids

    def regenerate_particles(self) -> None:
        """Zero velocities and re-randomize positions in the spawn cube."""
        self.store.regenerate_positions(self.spawn_bounds)

    def destroy_particles(self) -> int:
        """
        Destroy every particle.

        Returns:
            Number of particles whose resources failed to destroy.
        """
        return self.store.clear()

    # ------------------------------------------------------------------
    # Boundaries and time
    # ------------------------------------------------------------------

    def toggle_boundaries(self) -> bool:
        """Toggle the containment walls. Returns the new active state."""
        return self.boundary_controller.toggle()

    def halve_timescale(self) -> None:
        self.clock.halve()

    def double_timescale(self) -> None:
        self.clock.double()

    def toggle_time(self) -> None:
        """Pause or resume."""
        self.clock.toggle_pause()

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def step(self) -> float:
        """
        Advance the simulation by one fixed tick.

        Returns:
            Simulated time advanced (0 while paused).
        """
        dt = self.clock.effective_tick_duration
        particles = self.store.iterate()

        with self._section("forces"):
            self.loop.tick()

        with self._section("integrate"):
            if dt > 0:
                for p in particles:
                    self._integrate_body(p.body, dt)

        with self._section("contain"):
            self.boundaries.contain((p.body for p in particles), self.boundary_restitution)

        for p in particles:
            self.renderer.move_handle(p.handle, p.body.position)
            p.body.clear_forces()

        self.time += dt
        self.ticks += 1
        return dt

    def run(self, ticks: int) -> None:
        """Call step() `ticks` times."""
        for _ in range(ticks):
            self.step()
