# Defines a shared PATH you can import everywhere.
# Here we point PATH to the *project root* (the folder holding chargebox/).
import os
#===============================#
# Get the directory where the script is located
PATH = os.path.dirname(os.path.abspath(__file__))
# Get the project root directory
PATH = os.path.abspath(os.path.join(PATH, '..'))
#===============================#
OUTPUT = os.path.abspath(os.path.join(PATH, 'output'))

__all__ = ["PATH", "OUTPUT", "Particle", "ParticleKind", "UniverseState", "UniverseConfig",
           "Step", "Observer", "Source", "Universe"]

from chargebox.config import UniverseConfig
from chargebox.State import Particle, ParticleKind, UniverseState
from chargebox.Steps.Step import Step
from chargebox.Observers.Observer import Observer
from chargebox.Sources.Source import Source
from chargebox.Core.Universe import Universe
