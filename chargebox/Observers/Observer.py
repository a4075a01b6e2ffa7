from abc import ABC

from ..State import UniverseState

class Observer(ABC):
    """
    Collects and stores data during a run (energy series, counts, snapshots).
    Receives callbacks between ticks, never during one.
    """
    def on_setup(self, state: UniverseState) -> None: pass
    def on_step_end(self, step_idx: int, state: UniverseState) -> None: pass
    def on_teardown(self) -> None: pass
