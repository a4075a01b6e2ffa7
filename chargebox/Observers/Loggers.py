from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from chargebox.Observers.Observer import Observer
from chargebox.State import Particle, ParticleKind, UniverseState
from chargebox.physics.Energy import total_energy

# -----------------------------
# List of Logger classes:
# -----------------------------

def count_population(particles: Sequence[Particle]) -> Dict[str, float]:
    """Particle counts per kind and the sums of positive / negative charge."""
    counts = {kind.value: 0 for kind in ParticleKind}
    positive = negative = 0.0
    for p in particles:
        counts[p.kind.value] += 1
        if p.charge > 0:
            positive += p.charge
        elif p.charge < 0:
            negative += p.charge
    counts["total"] = len(particles)
    counts["positive_charge"] = positive
    counts["negative_charge"] = negative
    return counts


class EnergyLogger(Observer):
    def __init__(self, every: int = 50):
        self.every = every
    def on_step_end(self, step_idx: int, state: UniverseState) -> None:
        if step_idx % self.every == 0:
            e = total_energy(state.particles, state.config)
            print(f"[{step_idx}] total_energy={e.total:.6e} | kinetic={e.kinetic:.6e} "
                  f"| photon={e.photon:.6e} | electrostatic={e.electrostatic:.6e}")


class PopulationLogger(Observer):
    def __init__(self, every: int = 200):
        self.every = every
    def on_step_end(self, step_idx: int, state: UniverseState) -> None:
        if step_idx % self.every == 0:
            c = count_population(state.particles)
            print(f"[{step_idx}] particles={c['total']} electrons={c['electron']} "
                  f"protons={c['proton']} photons={c['photon']} "
                  f"charge(+)={c['positive_charge']:g} charge(-)={c['negative_charge']:g}")


class EnergyRecorder(Observer):
    """Keeps the energy breakdown every `every` ticks, including the initial state."""

    def __init__(self, every: int = 1):
        self.every = every
        self.steps: List[int] = []
        self._rows: List[List[float]] = []

    def _record(self, step_idx: int, state: UniverseState) -> None:
        e = total_energy(state.particles, state.config)
        self.steps.append(step_idx)
        self._rows.append([e.kinetic, e.photon, e.electrostatic, e.total])

    def on_setup(self, state: UniverseState) -> None:
        self.steps = []
        self._rows = []
        self._record(-1, state)

    def on_step_end(self, step_idx: int, state: UniverseState) -> None:
        if step_idx % self.every == 0:
            self._record(step_idx, state)

    @property
    def values(self) -> np.ndarray:
        """[T, 4] columns: kinetic, photon, electrostatic, total."""
        return np.asarray(self._rows, dtype=np.float64).reshape(-1, 4)

    @property
    def total(self) -> np.ndarray:
        return self.values[:, 3]
