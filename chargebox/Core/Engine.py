from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from tqdm import trange

from chargebox.Steps.Step import Step
from chargebox.Observers.Observer import Observer
from chargebox.State import UniverseState

class Engine(ABC):
    """Base running pipeline class for advancing a particle universe.

    Must implement `run(state, num_time_steps) -> UniverseState`.
    """
    @abstractmethod
    def run(self, state: UniverseState, num_time_steps: int) -> UniverseState:
        ...

class TickEngine(Engine):
    """
    Applies an ordered list of Steps once per tick.

    A tick runs every Step to completion before observers see the state, so an
    observer never reads a half-updated collection. There is no yielding
    between ticks: `run` blocks until all of them are done.

    Parameters
    ----------
    steps : List[Step]
        Ordered phases applied each tick.
    observers : Optional[List[Observer]]
        Callbacks to record sparse diagnostics.
    progress : bool
        Show a tqdm progress bar over the ticks.
    verbose : int
        0 silent, 1 run summary, 2 per-event lines from the steps.

    Example of usage:
    --------
    >>> engine = TickEngine(default_steps(), observers=[EnergyLogger(100)])
    >>> state = engine.run(state, num_time_steps=1000)
    """
    def __init__(self,
                 steps: List[Step],
                 observers: Optional[List[Observer]] = None,
                 progress: bool = False,
                 verbose: int = 0,
                 ) -> None:
        self.steps = list(steps)
        self.observers = list(observers or [])
        self.progress = bool(progress)
        self.verbose = verbose

    # ---- one tick ---------------------------------------------------------------
    def tick(self, state: UniverseState) -> UniverseState:
        for s in self.steps:
            state = s(state)
        state.meta["tick"] = state.meta.get("tick", 0) + 1
        return state

    # ---- main run --------------------------------------------------------------
    def run(self, state: UniverseState, num_time_steps: int) -> UniverseState:
        num_time_steps = int(num_time_steps)
        if num_time_steps < 0:
            raise ValueError(f"num_time_steps must be non-negative, got {num_time_steps}")
        if self.verbose: print(f"[DEBUG]: Run {num_time_steps} ticks over {len(state.particles)} particles")

        # Setup hooks & steps
        for s in self.steps: s.setup(state)
        for ob in self.observers: ob.on_setup(state)

        # -- Time-stepping loop --
        ticks = trange(num_time_steps, disable=not self.progress, desc="ticks")
        absorbed = emitted = 0
        for i in ticks:
            state = self.tick(state)
            absorbed += state.meta.get("absorbed", 0)
            emitted += state.meta.get("emitted", 0)
            for ob in self.observers: ob.on_step_end(i, state)

        # -- Teardown --
        for ob in self.observers: ob.on_teardown()
        for s in self.steps: s.teardown()

        if self.verbose:
            print(f"[DEBUG]: Done. {len(state.particles)} particles, "
                  f"{emitted} photons emitted, {absorbed} absorbed")
        return state

    def __repr__(self) -> str:
        inner = ",\n  ".join(repr(s) for s in self.steps)
        return f"{self.__class__.__name__}(\n  {inner}\n)"
