from chargebox.Core.Engine import Engine, TickEngine
from chargebox.Core.Universe import Universe, default_steps
