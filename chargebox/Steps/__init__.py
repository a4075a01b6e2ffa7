from chargebox.Steps.Step import Step
from chargebox.Steps.Absorption import PhotonAbsorption
from chargebox.Steps.Emission import PhotonEmission
from chargebox.Steps.Forces import ForceAccumulation
from chargebox.Steps.Integrator import EulerIntegrator
