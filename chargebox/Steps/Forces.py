from __future__ import annotations

import numpy as np

from .Step import Step
from chargebox.State import ParticleKind, UniverseState
from chargebox.physics.Forces import ground_gravity_force, gravity_force, total_force

class ForceAccumulation(Step):
    """
    Net force on every massive particle, written to `state.forces` ([N, 3]).

    Pairwise forces (electrostatic + optional strong) are computed once per
    unordered pair and applied with opposite signs (Newton's third law).
    Gravity and ground gravity are then added per particle when enabled.
    Photons take no part and keep a zero row.
    """
    name = "ForceAccumulation"

    def forward(self, state: UniverseState) -> UniverseState:
        config = state.config
        particles = state.particles
        forces = np.zeros((len(particles), 3), dtype=np.float64)

        for p in particles:
            p.force_x = 0.0
            p.force_y = 0.0
            p.force_z = 0.0

        massive = [i for i, p in enumerate(particles) if p.kind is not ParticleKind.PHOTON]

        for a, i in enumerate(massive):
            for j in massive[a + 1:]:
                f = total_force(particles[i], particles[j], config)
                forces[i] += f
                forces[j] -= f

        if config.gravity_enabled:
            for i in massive:
                forces[i] += gravity_force(particles[i], config)

        if config.ground_gravity_enabled:
            for i in massive:
                forces[i] += ground_gravity_force(particles[i], config)

        state.forces = forces
        return state
