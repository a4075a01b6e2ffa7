# Path settings
import os, sys
#===============================#
# Get the directory where the script is located
PATH = os.path.dirname(os.path.abspath(__file__))
# Get the parent directory of the current directory
PATH = os.path.abspath(os.path.join(PATH, '..', '..'))
sys.path.insert(0, PATH)
#===============================#

import numpy as np
import pytest

from chargebox.config import UniverseConfig
from chargebox.State import Particle, UniverseState
from chargebox.Steps.Integrator import EulerIntegrator

def make_state(particles, forces, **options):
    return UniverseState(particles=list(particles), config=UniverseConfig(**options),
                         rng=np.random.default_rng(0), forces=np.asarray(forces, dtype=np.float64))

# --- Tests ---

def test_semi_implicit_euler_update():
    electron = Particle.electron(0.5, 0.5, vx=0.1, mass=2.0)
    state = make_state([electron], [[4.0, -2.0, 0.0]], dt=0.1)

    EulerIntegrator()(state)

    assert (electron.acceleration_x, electron.acceleration_y) == (2.0, -1.0)
    assert electron.vx == pytest.approx(0.3)
    assert electron.vy == pytest.approx(-0.1)
    # position uses the *updated* velocity
    assert electron.x == pytest.approx(0.53)
    assert electron.y == pytest.approx(0.49)
    assert electron.force_x == 4.0

def test_z_frozen_in_2d_and_integrated_in_3d():
    electron = Particle.electron(0.5, 0.5, vz=0.5)
    state = make_state([electron], [[0.0, 0.0, 1.0]], dt=0.1)
    EulerIntegrator()(state)
    assert electron.z == 0.5 and electron.vz == 0.5
    assert electron.acceleration_z == 0.0

    electron = Particle.electron(0.5, 0.5)
    state = make_state([electron], [[0.0, 0.0, 1.0]], dt=0.1, mode_3d=True)
    EulerIntegrator()(state)
    assert electron.vz == pytest.approx(0.1)
    assert electron.z == pytest.approx(0.51)

def test_static_and_fixed_particles_do_not_move():
    proton = Particle.proton(0.5, 0.5)
    pinned = Particle.electron(0.2, 0.2, vx=1.0)
    pinned.fixed = True
    state = make_state([proton, pinned], [[1.0, 1.0, 0.0], [1.0, 1.0, 0.0]])

    EulerIntegrator()(state)

    assert (proton.x, proton.y, proton.vx) == (0.5, 0.5, 0.0)
    assert (pinned.x, pinned.vx) == (0.2, 1.0)
    assert proton.force_x == 0.0

def test_proton_moves_when_not_static():
    proton = Particle.proton(0.5, 0.5, mass=100.0)
    state = make_state([proton], [[10.0, 0.0, 0.0]], dt=0.1, static_protons=False)
    EulerIntegrator()(state)
    assert proton.vx == pytest.approx(0.01)
    assert proton.x == pytest.approx(0.501)

def test_photon_drifts_and_ages():
    photon = Particle.photon(0.5, 0.5, 0.5, 1.0, -1.0, 3.0, energy=1.0)
    state = make_state([photon], [[0.0, 0.0, 0.0]], dt=0.01)
    EulerIntegrator()(state)
    assert photon.x == pytest.approx(0.51)
    assert photon.y == pytest.approx(0.49)
    assert photon.z == 0.5
    assert photon.age == 1

def test_boundary_applied_after_move():
    electron = Particle.electron(0.999, 0.5, vx=1.0)
    state = make_state([electron], [[0.0, 0.0, 0.0]], dt=0.01)
    EulerIntegrator()(state)
    assert electron.x == 1.0
    assert electron.vx == 0.0

def test_force_buffer_must_match_collection():
    state = make_state([Particle.electron(0.5, 0.5)], np.zeros((0, 3)))
    with pytest.raises(RuntimeError):
        EulerIntegrator()(state)
