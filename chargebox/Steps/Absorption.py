from __future__ import annotations

import math
from typing import List, Set

from .Step import Step
from chargebox.State import Particle, ParticleKind, UniverseState

class PhotonAbsorption(Step):
    """
    Photon -> electron energy transfer.

    A photon old enough (`age >= photon_min_age`) and closer than
    `absorption_distance` to an electron is absorbed by the *first* such
    electron in collection order. The electron keeps its direction and gains
    the photon energy as kinetic energy; an electron at rest is sent off in a
    random direction instead. Absorbed photons are removed after the sweep,
    highest index first. The count removed is written to `state.meta["absorbed"]`.
    """
    name = "PhotonAbsorption"

    def __init__(self, verbose: int = 0):
        self.verbose = verbose

    def _energize(self, electron: Particle, photon: Particle, state: UniverseState) -> None:
        current_speed = electron.speed(state.mode_3d)
        current_ke = 0.5 * electron.mass * current_speed * current_speed
        new_ke = current_ke + photon.energy
        new_speed = math.sqrt(2 * new_ke / electron.mass)

        if current_speed > 0:
            ratio = new_speed / current_speed
            electron.vx *= ratio
            electron.vy *= ratio
            if state.mode_3d:
                electron.vz *= ratio
        else:
            # at rest: no direction to keep, draw one
            theta = state.rng.random() * 2 * math.pi
            phi = math.acos(2 * state.rng.random() - 1) if state.mode_3d else math.pi / 2
            electron.vx = new_speed * math.sin(phi) * math.cos(theta)
            electron.vy = new_speed * math.sin(phi) * math.sin(theta)
            if state.mode_3d:
                electron.vz = new_speed * math.cos(phi)

    def forward(self, state: UniverseState) -> UniverseState:
        config = state.config
        particles = state.particles
        to_remove: Set[int] = set()

        for i, photon in enumerate(particles):
            if photon.kind is not ParticleKind.PHOTON:
                continue
            if photon.age < config.photon_min_age:
                continue

            for electron in particles:
                if electron.kind is not ParticleKind.ELECTRON:
                    continue

                dx = electron.x - photon.x
                dy = electron.y - photon.y
                dz = (electron.z - photon.z) if state.mode_3d else 0.0
                distance = math.sqrt(dx * dx + dy * dy + dz * dz)
                if distance >= config.absorption_distance:
                    continue

                self._energize(electron, photon, state)
                to_remove.add(i)
                if self.verbose > 1:
                    print(f"[DEBUG]: photon #{i} (E={photon.energy:.3e}) absorbed at distance {distance:.3e}")
                break  # one electron per photon

        removed: List[int] = sorted(to_remove, reverse=True)
        for i in removed:
            del particles[i]

        state.meta["absorbed"] = len(removed)
        return state
