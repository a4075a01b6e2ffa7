from chargebox.physics.Forces import (
    electrostatic_force, strong_force, gravity_force, ground_gravity_force, total_force,
)
from chargebox.physics.Boundary import apply_boundary
from chargebox.physics.Energy import EnergyBreakdown, total_energy
