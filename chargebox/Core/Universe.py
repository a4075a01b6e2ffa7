"""
The Universe: owner of the particle collection and entry point of the core.

Each tick runs, in this order:
    1) photon absorption
    2) photon emission
    3-5) force accumulation (diagnostic reset, pairwise forces, field forces)
    6) semi-implicit Euler integration + boundaries

A presentation layer only ever talks to `Universe`: it adds particles, calls
`step()` / `run_steps(n)` and reads `particles` and `energy()` between ticks.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from chargebox.config import UniverseConfig
from chargebox.State import Particle, UniverseState
from chargebox.Steps import EulerIntegrator, ForceAccumulation, PhotonAbsorption, PhotonEmission, Step
from chargebox.Observers.Observer import Observer
from chargebox.Observers.Loggers import count_population
from chargebox.Sources.Source import Source
from chargebox.physics.Energy import EnergyBreakdown, total_energy
from chargebox.Core.Engine import TickEngine


def default_steps(verbose: int = 0) -> List[Step]:
    """The fixed phase order of one tick."""
    return [
        PhotonAbsorption(verbose=verbose),
        PhotonEmission(verbose=verbose),
        ForceAccumulation(),
        EulerIntegrator(),
    ]


class Universe:
    """Bounded box of protons, electrons and photons.

    Parameters
    ----------
    size : Optional[float]
        Edge length of the domain (1.0 when omitted).
    electrostatic_coefficient : Optional[float]
        K_e (1e-3 when omitted).
    config : Optional[UniverseConfig]
        A ready-made config, used as is. Exclusive with `size`,
        `electrostatic_coefficient` and `**options`.
    rng : Optional[np.random.Generator]
        Random generator for emission and absorption draws. Defaults to
        `np.random.default_rng(seed)`.
    seed : Optional[int]
        Used only when `rng` is not given.
    verbose : int
        Forwarded to the engine and the photon steps.
    **options
        Any other `UniverseConfig` field (`mode_3d`, `dt`, `static_protons`...).

    Example of usage:
    --------
    >>> universe = Universe(1.0, 1e-5, seed=7)
    >>> universe.seed(RandomProtonSource(1), ElectronRingSource(5))
    >>> universe.run_steps(1000)
    >>> universe.energy().total
    """

    def __init__(self,
                 size: Optional[float] = None,
                 electrostatic_coefficient: Optional[float] = None,
                 *,
                 config: Optional[UniverseConfig] = None,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 verbose: int = 0,
                 **options) -> None:
        if config is None:
            if size is not None:
                options["size"] = size
            if electrostatic_coefficient is not None:
                options["electrostatic_coefficient"] = electrostatic_coefficient
            config = UniverseConfig(**options)
        elif size is not None or electrostatic_coefficient is not None or options:
            raise TypeError("pass either a config or individual parameters, not both")

        self.config = config.validate()
        self.verbose = verbose
        self._particles: List[Particle] = []
        self.state = UniverseState(particles=self._particles, config=self.config,
                                   rng=rng if rng is not None else np.random.default_rng(seed),
                                   meta={"tick": 0, "absorbed": 0, "emitted": 0})
        self.steps: List[Step] = default_steps(verbose)
        self._engine = TickEngine(self.steps, verbose=verbose)

    # ---- population ----------------------------------------------------------
    def add_particle(self, particle: Particle) -> None:
        """Append one particle. Its invariants are the caller's business."""
        self._particles.append(particle)

    def seed(self, *sources: Source) -> int:
        """Emit every source with the universe generator; returns how many were added."""
        added = 0
        for source in sources:
            for particle in source.emit(self.state.rng, self.config):
                self.add_particle(particle)
                added += 1
        if self.verbose: print(f"[DEBUG]: seeded {added} particles")
        return added

    def remove_all_electrons(self) -> None:
        """Keep only particles with charge > 0 (photons, being neutral, go too)."""
        self._particles[:] = [p for p in self._particles if p.charge > 0]

    def clear(self) -> None:
        self._particles.clear()

    # ---- stepping ------------------------------------------------------------
    def step(self) -> None:
        """Advance exactly one tick."""
        self.state = self._engine.tick(self.state)

    def run_steps(self, n: int, observers: Optional[List[Observer]] = None, progress: bool = False) -> None:
        """Advance `n` ticks, notifying `observers` after each one."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        engine = TickEngine(self.steps, observers=observers, progress=progress, verbose=self.verbose)
        self.state = engine.run(self.state, n)

    # ---- read-only views -----------------------------------------------------
    @property
    def particles(self) -> Tuple[Particle, ...]:
        return tuple(self._particles)

    @property
    def rng(self) -> np.random.Generator:
        return self.state.rng

    @property
    def tick(self) -> int:
        return self.state.meta["tick"]

    @property
    def last_absorbed(self) -> int:
        return self.state.meta["absorbed"]

    @property
    def last_emitted(self) -> int:
        return self.state.meta["emitted"]

    @property
    def mode_3d(self) -> bool:
        return self.config.mode_3d

    def energy(self) -> EnergyBreakdown:
        return total_energy(self._particles, self.config)

    def counts(self) -> Dict[str, float]:
        return count_population(self._particles)

    # ---- setters -------------------------------------------------------------
    def set_electrostatic_coefficient(self, k: float) -> None:
        self.config.electrostatic_coefficient = k

    def set_static_protons(self, enabled: bool) -> None:
        self.config.static_protons = bool(enabled)

    def set_strong_force_enabled(self, enabled: bool) -> None:
        self.config.strong_force_enabled = bool(enabled)

    def set_strong_force_coefficient(self, k: float) -> None:
        self.config.strong_force_coefficient = k

    def set_gravity_enabled(self, enabled: bool) -> None:
        self.config.gravity_enabled = bool(enabled)

    def set_gravity_coefficient(self, k: float) -> None:
        self.config.gravity_coefficient = k

    def set_ground_gravity_enabled(self, enabled: bool) -> None:
        self.config.ground_gravity_enabled = bool(enabled)

    def set_ground_gravity_coefficient(self, k: float) -> None:
        self.config.ground_gravity_coefficient = k

    def set_emission_enabled(self, enabled: bool) -> None:
        self.config.emission_enabled = bool(enabled)

    def set_one_photon_per_electron(self, enabled: bool) -> None:
        self.config.one_photon_per_electron = bool(enabled)

    def set_mode_3d(self, enabled: bool) -> None:
        """Choose 2D or 3D. Only allowed while the universe is empty."""
        enabled = bool(enabled)
        if enabled == self.config.mode_3d:
            return
        if self._particles:
            raise RuntimeError("mode_3d must be set before any particle is added; call clear() first")
        self.config.mode_3d = enabled

    def set_rng(self, rng: np.random.Generator) -> None:
        self.state.rng = rng

    def __repr__(self) -> str:
        c = self.counts()
        return (f"Universe(size={self.config.size}, mode_3d={self.config.mode_3d}, "
                f"protons={c['proton']}, electrons={c['electron']}, photons={c['photon']})")
