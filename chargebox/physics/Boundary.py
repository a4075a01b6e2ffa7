"""
Domain boundaries, one policy per particle kind.

Photons reflect elastically per axis. Massive particles are clamped onto the
wall and lose their whole velocity (and acceleration), even if only one axis
was out of range.
"""
from __future__ import annotations

from typing import Tuple

from chargebox.State import Particle, ParticleKind
from chargebox.config import UniverseConfig


def _active_axes(mode_3d: bool) -> Tuple[str, ...]:
    return ("x", "y", "z") if mode_3d else ("x", "y")


def reflect(particle: Particle, config: UniverseConfig) -> bool:
    """Mirror a photon back inside [0, size] on every active axis."""
    size = config.size
    reflected = False
    for axis in _active_axes(config.mode_3d):
        coord = getattr(particle, axis)
        velocity = "v" + axis
        if coord < 0:
            setattr(particle, axis, -coord)
        elif coord > size:
            setattr(particle, axis, 2 * size - coord)
        else:
            continue
        setattr(particle, velocity, -getattr(particle, velocity))
        reflected = True
    return reflected


def clamp_and_stop(particle: Particle, config: UniverseConfig) -> bool:
    """Clamp a massive particle onto the walls; stop it if any axis was clamped."""
    size = config.size
    axes = _active_axes(config.mode_3d)
    hit_boundary = False
    for axis in axes:
        coord = getattr(particle, axis)
        if coord < 0:
            setattr(particle, axis, 0.0)
            hit_boundary = True
        elif coord > size:
            setattr(particle, axis, size)
            hit_boundary = True

    if hit_boundary:
        for axis in axes:
            setattr(particle, "v" + axis, 0.0)
            setattr(particle, "acceleration_" + axis, 0.0)
    return hit_boundary


def apply_boundary(particle: Particle, config: UniverseConfig) -> bool:
    """Dispatch on the particle kind. Returns True when the wall was touched."""
    if particle.kind is ParticleKind.PHOTON:
        return reflect(particle, config)
    return clamp_and_stop(particle, config)
