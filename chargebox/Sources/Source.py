from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional
import math

import numpy as np

from chargebox.State import Particle, ParticleKind
from chargebox.config import DEFAULT_MID_PLANE, UniverseConfig

class Source(ABC):
    """Initializes (or injects) particles into a Universe.

    Sources draw from the generator they are given, so seeding a universe is
    as reproducible as stepping it. Placement windows are fractions of
    `config.size`.
    """

    @abstractmethod
    def emit(self, rng: np.random.Generator, config: UniverseConfig) -> List[Particle]:
        """Return the particles to insert."""

# -----------------------------
# List of Sources:
# -----------------------------

class RandomProtonSource(Source):
    """`count` protons at rest, uniform in [0.2, 0.8] * size on every active axis."""

    def __init__(self, count: int, mass: float = 100.0, charge: float = 1.0,
                 low: float = 0.2, high: float = 0.8) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if not 0.0 <= low <= high <= 1.0:
            raise ValueError(f"window must satisfy 0 <= low <= high <= 1, got [{low}, {high}]")
        self.count = count
        self.mass = mass
        self.charge = charge
        self.low, self.high = low, high

    def emit(self, rng: np.random.Generator, config: UniverseConfig) -> List[Particle]:
        low = self.low * config.size
        span = (self.high - self.low) * config.size
        protons = []
        for _ in range(self.count):
            x = low + rng.random() * span
            y = low + rng.random() * span
            z = (low + rng.random() * span) if config.mode_3d else DEFAULT_MID_PLANE
            protons.append(Particle.proton(x, y, z, charge=self.charge, mass=self.mass))
        return protons


class ElectronRingSource(Source):
    """
    `count` electrons at rest spread around the domain center.

    2D: electron i sits at angle 2*pi*i/count on a circle of random radius
    in [0.2, 0.4] * size. 3D: the same azimuth with a polar angle
    acos(2u - 1), on a sphere of random radius.
    """

    def __init__(self, count: int, center: Optional[float] = None,
                 min_radius: float = 0.2, max_radius: float = 0.4) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self.count = count
        self.center = center    # absolute; None means the domain center
        self.min_radius, self.max_radius = min_radius, max_radius

    def emit(self, rng: np.random.Generator, config: UniverseConfig) -> List[Particle]:
        c = config.center if self.center is None else self.center
        r_min = self.min_radius * config.size
        r_span = (self.max_radius - self.min_radius) * config.size
        electrons = []
        for i in range(self.count):
            azimuth = (math.pi * 2 * i) / self.count
            if config.mode_3d:
                polar = math.acos(2 * rng.random() - 1)
                radius = r_min + rng.random() * r_span
                x = c + radius * math.sin(polar) * math.cos(azimuth)
                y = c + radius * math.sin(polar) * math.sin(azimuth)
                z = c + radius * math.cos(polar)
            else:
                radius = r_min + rng.random() * r_span
                x = c + radius * math.cos(azimuth)
                y = c + radius * math.sin(azimuth)
                z = DEFAULT_MID_PLANE
            electrons.append(Particle.electron(x, y, z))
        return electrons


class PointSource(Source):
    """A single particle placed by hand ("draw mode").

    Protons get `charge_multiplier` as charge and mass 100, electrons mass 1.
    z is jittered within size/2 +/- 1e-2 * size so that hand-placed particles
    are not exactly coplanar in 3D.
    """

    JITTER = 1e-2

    def __init__(self, kind: ParticleKind, x: float, y: float, charge_multiplier: float = 1.0) -> None:
        if kind is ParticleKind.PHOTON:
            raise ValueError("photons are only created by emission")
        self.kind = kind
        self.x, self.y = x, y
        self.charge_multiplier = charge_multiplier

    def emit(self, rng: np.random.Generator, config: UniverseConfig) -> List[Particle]:
        size = config.size
        if not (0.0 <= self.x <= size and 0.0 <= self.y <= size):
            raise ValueError(f"point ({self.x}, {self.y}) lies outside the [0, {size}] box")
        z = config.center + (rng.random() - 0.5) * 2 * self.JITTER * size
        if self.kind is ParticleKind.PROTON:
            return [Particle.proton(self.x, self.y, z, charge=self.charge_multiplier, mass=100.0)]
        return [Particle.electron(self.x, self.y, z)]
