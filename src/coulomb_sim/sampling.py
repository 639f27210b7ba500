# MIT License (see LICENSE)
"""
Random particle parameters and text-field parsing.

Random charges are drawn as u^-3 with u uniform in [6, 20] and a random
sign, giving magnitudes between roughly 1.25e-4 and 4.6e-3 C. Small enough
that k·q1·q2 stays moderate for kilogram-scale masses.
"""
from __future__ import annotations
import logging
import math

import numpy as np

from .constants import MIN_CHARGE, MAX_CHARGE, MIN_MASS, MAX_MASS

logger = logging.getLogger(__name__)


def random_charge(rng: np.random.Generator) -> float:
    """Random signed charge in Coulombs."""
    sign = -1.0 if rng.integers(0, 2) == 0 else 1.0
    return sign * float(rng.uniform(MIN_CHARGE, MAX_CHARGE)) ** -3


def random_mass(rng: np.random.Generator) -> float:
    """Random mass in kg, uniform in [MIN_MASS, MAX_MASS]."""
    return float(rng.uniform(MIN_MASS, MAX_MASS))


def parse_float(text: str | None) -> float | None:
    """Parse a finite float from user text. Returns None if not possible."""
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def charge_from_text(text: str | None, rng: np.random.Generator) -> float:
    """Charge parsed from `text`, or a random charge if unparsable."""
    value = parse_float(text)
    if value is None:
        value = random_charge(rng)
        logger.debug(f"Unparsable charge {text!r}, using random {value:g}")
    return value


def mass_from_text(text: str | None, rng: np.random.Generator) -> float:
    """Mass parsed from `text`, or a random mass if unparsable or not positive."""
    value = parse_float(text)
    if value is None or value <= 0:
        fallback = random_mass(rng)
        logger.debug(f"Invalid mass {text!r}, using random {fallback:g}")
        return fallback
    return value
