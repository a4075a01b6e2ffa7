from chargebox.Observers.Observer import Observer
from chargebox.Observers.Loggers import EnergyLogger, EnergyRecorder, PopulationLogger, count_population
