# MIT License (see LICENSE)
"""
Physical constants and generator ranges used throughout the simulation.

Physical values use SI units. The generator ranges describe the random
particles produced by the "add random particle" command and the default
spawn/boundary extents.
"""
from __future__ import annotations

# Coulomb's constant (electrostatic constant), k = 1/(4πε₀)
# Value: 8.987551792314 × 10⁹ N·m²/C²
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?k
K_COULOMB: float = 8.987551792314e9

# Lower bound on pair separation in the force law. Distances below this are
# clamped, so coincident or nearly coincident particles never produce
# non-finite forces.
DEFAULT_MIN_DISTANCE: float = 1e-3

# Unscaled fixed tick duration (50 ticks per wall-clock second).
DEFAULT_TICK: float = 0.02

# Random generator ranges
MAX_POS: float = 40.0       # spawn cube half-size in m
MIN_CHARGE: float = 6.0     # in mC, raised to the -3 power on draw
MAX_CHARGE: float = 20.0
MIN_MASS: float = 5.0       # in kg
MAX_MASS: float = 15.0

# Half-size of the default containment cube. Encloses the spawn cube.
BOUNDARY_HALF_EXTENT: float = 50.0

STARTING_PARTICLES: int = 10
