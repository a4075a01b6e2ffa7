# Path settings
import os, sys
#===============================#
# Get the directory where the script is located
PATH = os.path.dirname(os.path.abspath(__file__))
# Get the parent directory of the current directory
PATH = os.path.abspath(os.path.join(PATH, '..', '..'))
sys.path.insert(0, PATH)
#===============================#

import pytest

from chargebox.config import UniverseConfig
from chargebox.State import Particle, ParticleKind

def test_kind_dispatch():
    assert Particle.proton(0.1, 0.1).kind is ParticleKind.PROTON
    assert Particle.electron(0.1, 0.1).kind is ParticleKind.ELECTRON
    assert Particle.photon(0.1, 0.1, 0.5, 0.0, 0.0, 0.0, energy=0.0).kind is ParticleKind.PHOTON

def test_photon_invariants():
    photon = Particle.photon(0.1, 0.2, 0.3, 1.0, 0.0, 0.0, energy=0.5)
    assert photon.mass == 0.0 and photon.charge == 0.0
    assert photon.age == 0 and photon.is_photon

def test_defaults_put_2d_particles_on_mid_plane():
    p = Particle.electron(0.1, 0.2)
    assert p.z == 0.5 and p.vz == 0.0
    assert not p.has_emitted_photon

@pytest.mark.parametrize("factory, kwargs", [
    (Particle.proton, {"mass": 0.0}),
    (Particle.proton, {"charge": -1.0}),
    (Particle.electron, {"mass": -1.0}),
])
def test_factories_reject_broken_invariants(factory, kwargs):
    with pytest.raises(ValueError):
        factory(0.5, 0.5, **kwargs)

def test_photon_rejects_negative_energy():
    with pytest.raises(ValueError):
        Particle.photon(0.5, 0.5, 0.5, 0.0, 0.0, 0.0, energy=-1.0)

def test_speed_respects_mode():
    p = Particle.electron(0.1, 0.1, vx=3.0, vy=4.0, vz=12.0)
    assert p.speed(mode_3d=False) == 5.0
    assert p.speed() == 13.0

@pytest.mark.parametrize("kwargs", [{"size": 0.0}, {"dt": -0.1}, {"photon_min_age": -1},
                                    {"emission_speed_threshold": 0.0}, {"gravity_coefficient": -1.0}])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        UniverseConfig(**kwargs).validate()

def test_config_from_ui_scales_electrostatic_slider():
    config = UniverseConfig.from_ui(10, mode_3d=True)
    assert config.electrostatic_coefficient == pytest.approx(1e-5)
    assert config.mode_3d
    assert config.as_dict()["size"] == 1.0
