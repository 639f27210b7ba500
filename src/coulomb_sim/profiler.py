# MIT License (see LICENSE)
"""
Simple profiling utilities for performance measurement.

Measures execution time of the phases of a simulation tick (forces,
integration, containment) without external dependencies.

Example:
    profiler = Profiler()
    sim = Simulation(profiler=profiler)
    sim.run(100)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """
    Accumulates timing samples for named sections.

    Stores raw timing data and provides summary statistics (count, mean, max).
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Compute summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to stats dict with keys:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """
    Context-manager based profiler for timing the phases of a tick.

    Usage:
        profiler = Profiler()
        with profiler.section("forces"):
            solver.apply(particles)

        stats = profiler.stats.summary()
        print(f"forces avg: {stats['forces']['mean_ms']:.2f}ms")
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        """Drop all recorded samples."""
        self.stats = ProfileStats()
