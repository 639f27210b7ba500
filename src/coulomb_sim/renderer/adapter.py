# MIT License (see LICENSE)
"""
Renderer adapters for particle visualization.

The simulation core never draws anything. It asks a renderer adapter to
create a renderable handle when a particle is added, forwards position
writes to it, and destroys it on clear. Frames can also be drawn from the
particle collection. The handle's contents are the adapter's business.

Appearance follows the charge and mass of a particle: red for positive
charge, blue for negative, scale proportional to mass.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, TextIO
import sys

import numpy as np

from ..types import Particle
from ..util import f64

if TYPE_CHECKING:
    from ..simulation import Simulation


POSITIVE_COLOR = "red"
NEGATIVE_COLOR = "blue"


@dataclass
class RenderHandle:
    """
    Visual representation of one particle.

    Attributes:
        name: Display name, e.g. "0.0001C, 10.0kg particle".
        color: "red" for positive charge, "blue" for negative.
        scale: Uniform sphere scale (mass / 5).
        position: Last position written by the simulation.
        alive: False once destroyed.
    """
    name: str
    color: str
    scale: float
    position: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    alive: bool = True


def particle_appearance(charge: float, mass: float) -> tuple[str, str, float]:
    """Return (name, color, scale) for a particle of given charge and mass."""
    name = f"{charge}C, {mass}kg particle"
    color = NEGATIVE_COLOR if charge < 0 else POSITIVE_COLOR
    return name, color, mass / 5.0


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a graphics backend (matplotlib, pyglet, a web
    frontend, ...). The handle returned from create_handle() is stored on
    the particle and passed back unchanged to move_handle() and
    destroy_handle().

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.time)
        for particle in sim.particles:
            renderer.draw_particle(particle)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def create_handle(self, charge: float, mass: float, position: np.ndarray) -> Any:
        """
        Create the renderable for a new particle.

        Args:
            charge: Particle charge in Coulombs.
            mass: Particle mass in kg.
            position: Initial position [x, y, z].
        """
        ...

    @abstractmethod
    def move_handle(self, handle: Any, position: np.ndarray) -> None:
        """Write a new position to a renderable."""
        ...

    @abstractmethod
    def destroy_handle(self, handle: Any) -> None:
        """Destroy a renderable. May raise; callers treat it as best-effort."""
        ...

    def begin_frame(self, time: float) -> None:
        """Begin a new frame at simulation time `time`."""

    def draw_particle(self, particle: Particle) -> None:
        """Draw a single particle."""

    def end_frame(self) -> None:
        """Finalize the current frame."""

    def render_particles(self, particles: Iterable[Particle], time: float) -> None:
        """Draw every particle in one frame."""
        self.begin_frame(time)
        for p in particles:
            self.draw_particle(p)
        self.end_frame()

    def render_simulation(self, sim: "Simulation") -> None:
        """
        Convenience method to render all particles in a simulation.

        Args:
            sim: The simulation to render.
        """
        self.render_particles(sim.particles, sim.time)


class HandleRenderer(RendererAdapter):
    """
    Renderer that keeps RenderHandle objects and tracks the live ones.

    Base for the concrete renderers below. `live_handles` lets callers
    check that a bulk clear left nothing behind.
    """

    def __init__(self) -> None:
        self.live_handles: list[RenderHandle] = []

    def create_handle(self, charge: float, mass: float, position: np.ndarray) -> RenderHandle:
        name, color, scale = particle_appearance(charge, mass)
        handle = RenderHandle(name=name, color=color, scale=scale, position=f64(position))
        self.live_handles.append(handle)
        return handle

    def move_handle(self, handle: RenderHandle, position: np.ndarray) -> None:
        handle.position[:] = position

    def destroy_handle(self, handle: RenderHandle) -> None:
        if not handle.alive:
            raise RuntimeError(f"Handle '{handle.name}' already destroyed")
        handle.alive = False
        self.live_handles.remove(handle)


class NullRenderer(HandleRenderer):
    """
    Renderer that draws nothing.

    Used by default and for performance testing without rendering overhead.
    """


class DebugRenderer(HandleRenderer):
    """
    Console/text debug renderer for development and testing.

    Outputs human-readable text representation of particles to a stream
    (stdout by default).

    Output:
        === Frame t=0.0400 ===
        [0] red x2.00 q=+1.000e-03 @ (1.00, 0.00, 0.00) v=(0.45, 0.00, 0.00)
        [1] blue x1.60 q=-2.500e-04 @ (-3.12, 4.00, 0.50) v=(0.00, 0.01, 0.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity.
        """
        super().__init__()
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_particle(self, particle: Particle) -> None:
        pos = particle.position
        color = POSITIVE_COLOR if particle.is_positive else NEGATIVE_COLOR
        scale = particle.mass / 5.0
        line = (
            f"[{particle.id}] {color} x{scale:.2f} q={particle.charge:+.3e}"
            f" @ ({pos[0]:.2f}, {pos[1]:.2f}, {pos[2]:.2f})"
        )
        if self.verbose:
            vel = particle.velocity
            line += f" v=({vel[0]:.2f}, {vel[1]:.2f}, {vel[2]:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class BufferedRenderer(HandleRenderer):
    """
    Renderer that buffers frame data for later retrieval.

    Stores particle states for each frame, useful for recording simulations
    or batch processing.

    Example:
        renderer = BufferedRenderer()
        sim = Simulation(renderer=renderer)
        for _ in range(100):
            sim.step()
            renderer.render_simulation(sim)

        for frame in renderer.frames:
            print(f"t={frame['time']}, particles={len(frame['particles'])}")
    """

    def __init__(self) -> None:
        super().__init__()
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "particles": [],
        }

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "id": particle.id,
            "charge": particle.charge,
            "mass": particle.mass,
            "position": particle.position.tolist(),
            "velocity": particle.velocity.tolist(),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
