from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

import numpy as np

from chargebox.config import DEFAULT_MID_PLANE, UniverseConfig

# -----------------------------
# Core Data Structures
# -----------------------------

class ParticleKind(Enum):
    PROTON = "proton"
    ELECTRON = "electron"
    PHOTON = "photon"


@dataclass
class Particle:
    """State of a single body (proton, electron or photon).

    Attributes
    ----------
    x, y, z : float
        Position. `z` only moves in 3D mode and sits on the mid-plane otherwise.
    vx, vy, vz : float
        Velocity.
    charge : float
        +1 proton (or a multiple), -1 electron, 0 photon.
    mass : float
        Positive for protons/electrons, 0 for photons.
    fixed : bool
        Never integrated.
    is_photon : bool
        Photon flag; photons carry `energy` and `age`.
    energy : float
        Photon energy. Meaningless for massive particles.
    age : int
        Ticks lived (photons only).
    has_emitted_photon : bool
        Set once an electron has emitted; never reset.
    force_*, acceleration_* : float
        Last applied force / acceleration. Display only.
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    charge: float = 0.0
    mass: float = 0.0
    fixed: bool = False
    z: float = DEFAULT_MID_PLANE
    vz: float = 0.0
    is_photon: bool = False
    energy: float = 0.0
    age: int = 0
    has_emitted_photon: bool = False
    force_x: float = field(default=0.0, repr=False)
    force_y: float = field(default=0.0, repr=False)
    force_z: float = field(default=0.0, repr=False)
    acceleration_x: float = field(default=0.0, repr=False)
    acceleration_y: float = field(default=0.0, repr=False)
    acceleration_z: float = field(default=0.0, repr=False)

    # ---- factories enforcing the per-kind invariants -------------------------
    @classmethod
    def proton(cls, x: float, y: float, z: float = DEFAULT_MID_PLANE,
               charge: float = 1.0, mass: float = 100.0, fixed: bool = False) -> "Particle":
        if charge <= 0:
            raise ValueError(f"proton charge must be positive, got {charge}")
        if mass <= 0:
            raise ValueError(f"proton mass must be positive, got {mass}")
        return cls(x=x, y=y, z=z, charge=charge, mass=mass, fixed=fixed)

    @classmethod
    def electron(cls, x: float, y: float, z: float = DEFAULT_MID_PLANE,
                 vx: float = 0.0, vy: float = 0.0, vz: float = 0.0,
                 mass: float = 1.0) -> "Particle":
        if mass <= 0:
            raise ValueError(f"electron mass must be positive, got {mass}")
        return cls(x=x, y=y, z=z, vx=vx, vy=vy, vz=vz, charge=-1.0, mass=mass)

    @classmethod
    def photon(cls, x: float, y: float, z: float,
               vx: float, vy: float, vz: float, energy: float) -> "Particle":
        if energy < 0:
            raise ValueError(f"photon energy must be non-negative, got {energy}")
        return cls(x=x, y=y, z=z, vx=vx, vy=vy, vz=vz, charge=0.0, mass=0.0,
                   is_photon=True, energy=energy)

    @property
    def kind(self) -> ParticleKind:
        if self.is_photon:
            return ParticleKind.PHOTON
        if self.charge < 0:
            return ParticleKind.ELECTRON
        return ParticleKind.PROTON

    def speed(self, mode_3d: bool = True) -> float:
        vz = self.vz if mode_3d else 0.0
        return math.sqrt(self.vx * self.vx + self.vy * self.vy + vz * vz)


@dataclass
class UniverseState:
    """Container for the system state passed through Steps.

    Steps mutate `particles` in place and hand the same state on.

    Attributes
    ----------
    particles : List[Particle]
        The live collection, owned by the Universe.
    config : UniverseConfig
        Shared, mutable parameters.
    rng : np.random.Generator
        The only source of randomness of a tick.
    forces : np.ndarray
        [N, 3] net force per particle, filled by `ForceAccumulation` and
        consumed by `EulerIntegrator` within the same tick.
    meta : Dict[str, Any]
        Per-tick bookkeeping (`tick`, `absorbed`, `emitted`).
    """

    particles: List[Particle]
    config: UniverseConfig
    rng: np.random.Generator
    forces: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def dt(self) -> float:
        return self.config.dt

    @property
    def mode_3d(self) -> bool:
        return self.config.mode_3d
