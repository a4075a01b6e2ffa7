"""
Pairwise and field forces.

All functions are pure: they read two (or one) particles plus the config and
return the force acting on the *first* particle as an `(fx, fy, fz)` tuple.
`fz` is 0 unless 3D mode is on. Photons are filtered out by the caller.
"""
from __future__ import annotations

import math
from typing import Tuple

from chargebox.State import Particle
from chargebox.config import (
    FIELD_EPSILON, GRAVITY_SCALE, SOFTENING, STRONG_SCALE, UniverseConfig,
)

Force = Tuple[float, float, float]
ZERO: Force = (0.0, 0.0, 0.0)


def _separation(p1: Particle, p2: Particle, mode_3d: bool):
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    dz = (p2.z - p1.z) if mode_3d else 0.0
    return dx, dy, dz, dx * dx + dy * dy + dz * dz


def electrostatic_force(p1: Particle, p2: Particle, config: UniverseConfig) -> Force:
    """Softened Coulomb force on `p1` due to `p2`.

    F = -(K_e q1 q2) / (r^2 + 0.01) along the unit vector p1 -> p2, so opposite
    charges pull `p1` towards `p2` and like charges push it away.
    """
    dx, dy, dz, distance_squared = _separation(p1, p2, config.mode_3d)
    if distance_squared == 0.0:
        # coincident: direction undefined
        return ZERO
    distance = math.sqrt(distance_squared)

    magnitude = -(config.electrostatic_coefficient * p1.charge * p2.charge) / (distance_squared + SOFTENING)

    fx = magnitude * (dx / distance)
    fy = magnitude * (dy / distance)
    fz = magnitude * (dz / distance) if config.mode_3d else 0.0
    return fx, fy, fz


def strong_force(p1: Particle, p2: Particle, config: UniverseConfig) -> Force:
    """Short-range repulsion F = K_s * 1e-10 / r^4, pushing `p1` away from `p2`.

    Not softened: when r^4 underflows the magnitude is infinite.
    """
    dx, dy, dz, distance_squared = _separation(p1, p2, config.mode_3d)
    if distance_squared == 0.0:
        return ZERO
    distance = math.sqrt(distance_squared)

    distance_quartic = distance_squared * distance_squared
    if distance_quartic == 0.0:
        magnitude = math.inf
    else:
        magnitude = (config.strong_force_coefficient * STRONG_SCALE) / distance_quartic

    fx = -magnitude * (dx / distance)
    fy = -magnitude * (dy / distance)
    fz = -magnitude * (dz / distance) if config.mode_3d else 0.0
    return fx, fy, fz


def total_force(p1: Particle, p2: Particle, config: UniverseConfig) -> Force:
    """Electrostatic plus (if enabled) strong force on `p1`."""
    fx, fy, fz = electrostatic_force(p1, p2, config)
    if config.strong_force_enabled:
        sx, sy, sz = strong_force(p1, p2, config)
        fx, fy, fz = fx + sx, fy + sy, fz + sz
    return fx, fy, fz


def gravity_force(particle: Particle, config: UniverseConfig) -> Force:
    """Constant-magnitude pull m * K_g * 1e-6 towards the domain center."""
    center = config.center
    dx = center - particle.x
    dy = center - particle.y
    dz = (center - particle.z) if config.mode_3d else 0.0
    distance = math.sqrt(dx * dx + dy * dy + dz * dz)

    if distance <= FIELD_EPSILON:
        return ZERO

    magnitude = particle.mass * config.gravity_coefficient * GRAVITY_SCALE
    fx = magnitude * (dx / distance)
    fy = magnitude * (dy / distance)
    fz = magnitude * (dz / distance) if config.mode_3d else 0.0
    return fx, fy, fz


def ground_gravity_force(particle: Particle, config: UniverseConfig) -> Force:
    """Pull towards the ground plane y = size, along +y only."""
    if abs(config.size - particle.y) <= FIELD_EPSILON:
        return ZERO
    return 0.0, particle.mass * config.ground_gravity_coefficient * GRAVITY_SCALE, 0.0
