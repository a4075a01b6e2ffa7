"""
Energy accounting (diagnostic only, never fed back into a tick).

Note the softening here is linear, U = K q1 q2 / (r + 0.01), unlike the
quadratic softening of the force law. The force is therefore not the exact
gradient of this potential.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from chargebox.State import Particle
from chargebox.config import SOFTENING, UniverseConfig


@dataclass(frozen=True)
class EnergyBreakdown:
    kinetic: float
    photon: float
    electrostatic: float

    @property
    def total(self) -> float:
        return self.kinetic + self.photon + self.electrostatic

    def as_dict(self) -> dict:
        return {"kinetic": self.kinetic, "photon": self.photon,
                "electrostatic": self.electrostatic, "total": self.total}


def kinetic_energy(particles: Sequence[Particle], config: UniverseConfig) -> float:
    total = 0.0
    for p in particles:
        if p.is_photon:
            continue
        vz = p.vz if config.mode_3d else 0.0
        total += 0.5 * p.mass * (p.vx * p.vx + p.vy * p.vy + vz * vz)
    return total


def photon_energy(particles: Sequence[Particle]) -> float:
    return sum((p.energy for p in particles if p.is_photon), 0.0)


def electrostatic_energy(particles: Sequence[Particle], config: UniverseConfig) -> float:
    massive = [p for p in particles if not p.is_photon]
    total = 0.0
    for i, p1 in enumerate(massive):
        for p2 in massive[i + 1:]:
            dx = p2.x - p1.x
            dy = p2.y - p1.y
            dz = (p2.z - p1.z) if config.mode_3d else 0.0
            distance = math.sqrt(dx * dx + dy * dy + dz * dz)
            total += (config.electrostatic_coefficient * p1.charge * p2.charge) / (distance + SOFTENING)
    return total


def total_energy(particles: Sequence[Particle], config: UniverseConfig) -> EnergyBreakdown:
    return EnergyBreakdown(
        kinetic=kinetic_energy(particles, config),
        photon=photon_energy(particles),
        electrostatic=electrostatic_energy(particles, config),
    )
