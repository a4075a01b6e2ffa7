from __future__ import annotations

from abc import ABC, abstractmethod

from chargebox.State import UniverseState

class Step(ABC):
    """A single phase of a tick (absorption, emission, forces, integration...).

    Subclasses implement `forward(state)`, mutating `state.particles` in place
    and returning the same `UniverseState`. `setup/teardown` are lifecycle
    hooks called once around a multi-tick run.

    IMPORTANT: a Step must never add or remove particles while it is iterating
    the live collection; buffer the change and apply it after the sweep.
    """

    name: str = "Step"

    def setup(self, state: UniverseState) -> None:
        """Precompute constants or check the state before a run."""
        pass

    @abstractmethod
    def forward(self, state: UniverseState) -> UniverseState:
        """Advance this phase by one tick."""
        ...

    def __call__(self, state: UniverseState) -> UniverseState:
        return self.forward(state)

    def teardown(self) -> None:
        """Release anything kept between ticks."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
