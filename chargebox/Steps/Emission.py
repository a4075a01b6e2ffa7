from __future__ import annotations

import math
from typing import List

from .Step import Step
from chargebox.State import Particle, ParticleKind, UniverseState
from chargebox.config import EMISSION_PROBABILITY_SCALE, PHOTON_ENERGY_RATIO

class PhotonEmission(Step):
    """
    Stochastic radiation from fast electrons.

    An electron at or above `emission_speed_threshold` emits with probability
    1e-5 * speed / threshold (one uniform draw per electron per tick). On
    emission the electron keeps its direction, its speed drops by sqrt(1 - r)
    and a photon carrying r * KE (r = 0.9) starts at its position, moving
    along with it at the reduced speed.

    When `emission_enabled` is off the electron is still slowed and flagged but
    the photon is discarded. New photons are appended after every electron has
    been visited. The count appended is written to `state.meta["emitted"]`.
    """
    name = "PhotonEmission"

    def __init__(self, energy_ratio: float = PHOTON_ENERGY_RATIO, verbose: int = 0):
        if not 0.0 <= energy_ratio < 1.0:
            raise ValueError(f"energy_ratio must be in [0, 1), got {energy_ratio}")
        self.energy_ratio = energy_ratio
        self.verbose = verbose

    def should_emit(self, electron: Particle, state: UniverseState) -> bool:
        threshold = state.config.emission_speed_threshold
        speed = electron.speed(state.mode_3d)
        if speed < threshold:
            return False
        return state.rng.random() < EMISSION_PROBABILITY_SCALE * speed / threshold

    def emit(self, electron: Particle, state: UniverseState) -> Particle | None:
        """Slow `electron` down and return the photon it radiates (None if disabled)."""
        config = state.config
        mode_3d = state.mode_3d
        vx, vy = electron.vx, electron.vy
        vz = electron.vz if mode_3d else 0.0
        speed = math.sqrt(vx * vx + vy * vy + vz * vz)

        initial_ke = 0.5 * electron.mass * speed * speed
        photon_energy = self.energy_ratio * initial_ke
        reduction = 1 / math.sqrt(1 - self.energy_ratio)

        electron.vx /= reduction
        electron.vy /= reduction
        if mode_3d:
            electron.vz /= reduction
        electron.has_emitted_photon = True

        if not config.emission_enabled:
            return None

        new_speed = speed / reduction
        return Particle.photon(
            x=electron.x, y=electron.y, z=electron.z,
            vx=(vx / speed) * new_speed,
            vy=(vy / speed) * new_speed,
            vz=((vz / speed) * new_speed) if mode_3d else 0.0,
            energy=photon_energy,
        )

    def forward(self, state: UniverseState) -> UniverseState:
        config = state.config
        new_photons: List[Particle] = []

        for particle in state.particles:
            if particle.kind is not ParticleKind.ELECTRON:
                continue
            if config.one_photon_per_electron and particle.has_emitted_photon:
                continue
            if not self.should_emit(particle, state):
                continue

            photon = self.emit(particle, state)
            if photon is not None:
                new_photons.append(photon)
                if self.verbose > 1:
                    print(f"[DEBUG]: photon emitted (E={photon.energy:.3e}) at ({photon.x:.3f}, {photon.y:.3f})")

        state.particles.extend(new_photons)
        state.meta["emitted"] = len(new_photons)
        return state
