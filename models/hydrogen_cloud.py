from __future__ import annotations

# Path settings
import os, sys
#===============================#
# Get the directory where the script is located
PATH = os.path.dirname(os.path.abspath(__file__))
# Get the parent directory of the current directory
PATH = os.path.abspath(os.path.join(PATH, '..'))
sys.path.insert(0, PATH)
#===============================#

from typing import Optional

from chargebox import Universe, UniverseConfig
from chargebox.Observers import EnergyLogger, PopulationLogger
from chargebox.Sources import ElectronRingSource, RandomProtonSource
from chargebox.tools import profile_time_and_memory

def make_hydrogen_cloud(proton_count: int = 1, electron_count: int = 5, *,
                        electrostatic_slider: float = 10.0, mode_3d: bool = False,
                        seed: Optional[int] = None, verbose: int = 0, **options) -> Universe:
    """
    The default scene of the interactive front-end: a few heavy protons in the
    middle of the box and a ring (or shell) of electrons at rest around them.
    Strong force and central gravity are on, as in the front-end defaults.
    """
    options.setdefault("strong_force_enabled", True)
    options.setdefault("gravity_enabled", True)
    config = UniverseConfig.from_ui(electrostatic_slider, mode_3d=mode_3d, **options)
    universe = Universe(config=config, seed=seed, verbose=verbose)
    universe.seed(RandomProtonSource(proton_count), ElectronRingSource(electron_count))
    return universe

@profile_time_and_memory
def run(universe: Universe, n_steps: int, every: int = 200) -> Universe:
    observers = [EnergyLogger(every), PopulationLogger(every)]
    universe.run_steps(n_steps, observers=observers, progress=True)
    return universe

if __name__ == "__main__":
    universe = make_hydrogen_cloud(seed=0, verbose=1)
    run(universe, 2000)
    print(universe)
