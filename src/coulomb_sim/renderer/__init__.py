# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the handle lifecycle
      and the frame drawing interface.
    - NullRenderer: No-op renderer, the simulation default.
    - DebugRenderer: Text/console output for debugging.
    - BufferedRenderer: Records frames for playback or export.

Typical usage:
    from coulomb_sim.renderer import DebugRenderer
    
    renderer = DebugRenderer()
    sim = Simulation(renderer=renderer)
    renderer.render_simulation(sim)
"""
from .adapter import (
    RendererAdapter,
    RenderHandle,
    HandleRenderer,
    NullRenderer,
    DebugRenderer,
    BufferedRenderer,
    particle_appearance,
)

__all__ = [
    "RendererAdapter",
    "RenderHandle",
    "HandleRenderer",
    "NullRenderer",
    "DebugRenderer",
    "BufferedRenderer",
    "particle_appearance",
]
