"""
Universe parameters and the fixed constants of the force/photon laws.

`UniverseConfig` is shared *by reference* between a `Universe` and the Steps
it builds, so a setter called between ticks is seen by the next tick.
"""
from __future__ import annotations

from dataclasses import dataclass, fields

# -----------------------------
# Fixed constants
# -----------------------------

SOFTENING = 0.01                    # added to r^2 in Coulomb force, to r in potential energy
STRONG_SCALE = 1e-10                # F_strong = K_s * STRONG_SCALE / r^4
GRAVITY_SCALE = 1e-6                # F_grav = m * K_g * GRAVITY_SCALE
FIELD_EPSILON = 1e-6                # field forces vanish closer than this to their reference
EMISSION_PROBABILITY_SCALE = 1e-5   # p_emit = scale * speed / threshold
PHOTON_ENERGY_RATIO = 0.9           # share of electron KE carried away by an emitted photon
DEFAULT_MID_PLANE = 0.5             # z of every particle in 2D mode
COEFFICIENT_UI_SCALE = 1e-6         # front-end sliders are expressed in micro-units


@dataclass
class UniverseConfig:
    """Tunable parameters of a universe.

    Attributes
    ----------
    size : float
        Edge length of the square (2D) or cube (3D) domain.
    electrostatic_coefficient : float
        K_e of Coulomb's law.
    emission_speed_threshold : float
        Electrons slower than this never emit.
    absorption_distance : float
        Photon-electron distance below which absorption can happen.
    photon_min_age : int
        Photons younger than this (in ticks) cannot be absorbed.
    dt : float
        Fixed time step.
    mode_3d : bool
        Must be chosen before the first particle is added.
    """

    size: float = 1.0
    electrostatic_coefficient: float = 1e-3
    emission_speed_threshold: float = 1e-3
    absorption_distance: float = 3e-3
    photon_min_age: int = 100
    static_protons: bool = True
    strong_force_enabled: bool = False
    strong_force_coefficient: float = 10.0
    gravity_enabled: bool = False
    gravity_coefficient: float = 10.0
    ground_gravity_enabled: bool = False
    ground_gravity_coefficient: float = 10.0
    mode_3d: bool = False
    dt: float = 0.01
    emission_enabled: bool = True
    one_photon_per_electron: bool = True

    @classmethod
    def from_ui(cls, electrostatic_coefficient: float, **kwargs) -> "UniverseConfig":
        """Build a config from slider values (electrostatic slider is in micro-units)."""
        return cls(electrostatic_coefficient=electrostatic_coefficient * COEFFICIENT_UI_SCALE, **kwargs)

    def validate(self) -> "UniverseConfig":
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        for name in ("emission_speed_threshold", "absorption_distance", "photon_min_age",
                     "strong_force_coefficient", "gravity_coefficient", "ground_gravity_coefficient"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.emission_speed_threshold == 0:
            raise ValueError("emission_speed_threshold must be non-zero")
        return self

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def center(self) -> float:
        return self.size / 2.0
