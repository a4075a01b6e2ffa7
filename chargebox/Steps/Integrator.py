from __future__ import annotations

from .Step import Step
from chargebox.State import Particle, ParticleKind, UniverseState
from chargebox.physics.Boundary import apply_boundary

class EulerIntegrator(Step):
    """
    Semi-implicit Euler: v += (F / m) dt, then x += v dt, then the boundary.

    Photons drift at constant velocity and age by one tick. Fixed particles,
    and protons while `static_protons` is on, are left untouched.
    z only moves in 3D mode.
    """
    name = "EulerIntegrator"

    def _drift_photon(self, photon: Particle, state: UniverseState) -> None:
        dt = state.dt
        photon.x += photon.vx * dt
        photon.y += photon.vy * dt
        if state.mode_3d:
            photon.z += photon.vz * dt
        photon.age += 1
        apply_boundary(photon, state.config)

    def _is_frozen(self, particle: Particle, state: UniverseState) -> bool:
        if particle.fixed:
            return True
        return state.config.static_protons and particle.charge > 0

    def forward(self, state: UniverseState) -> UniverseState:
        dt = state.dt
        mode_3d = state.mode_3d
        forces = state.forces
        if forces.shape[0] != len(state.particles):
            raise RuntimeError(
                f"force buffer has {forces.shape[0]} rows for {len(state.particles)} particles; "
                "run ForceAccumulation in the same tick")

        for i, particle in enumerate(state.particles):
            if particle.kind is ParticleKind.PHOTON:
                self._drift_photon(particle, state)
                continue
            if self._is_frozen(particle, state):
                continue

            fx, fy, fz = forces[i].tolist()
            ax = fx / particle.mass
            ay = fy / particle.mass
            az = fz / particle.mass if mode_3d else 0.0

            particle.force_x, particle.force_y, particle.force_z = fx, fy, fz
            particle.acceleration_x, particle.acceleration_y, particle.acceleration_z = ax, ay, az

            particle.vx += ax * dt
            particle.vy += ay * dt
            if mode_3d:
                particle.vz += az * dt

            particle.x += particle.vx * dt
            particle.y += particle.vy * dt
            if mode_3d:
                particle.z += particle.vz * dt

            apply_boundary(particle, state.config)

        return state
