# Path settings
import os, sys
#===============================#
# Get the directory where the script is located
PATH = os.path.dirname(os.path.abspath(__file__))
# Get the parent directory of the current directory
PATH = os.path.abspath(os.path.join(PATH, '..', '..'))
sys.path.insert(0, PATH)
#===============================#

import os

import matplotlib
matplotlib.use("Agg")
import numpy as np
import pytest

from chargebox import Universe
from chargebox.State import Particle
from chargebox.Observers import EnergyLogger, EnergyRecorder, PopulationLogger, count_population
from chargebox.Observers.Plot import EnergyPlotter, SnapshotPlotter, project

# --- Fixtures ---

@pytest.fixture
def universe():
    u = Universe(1.0, 1e-3, seed=11)
    u.add_particle(Particle.proton(0.5, 0.5, charge=2.0))
    u.add_particle(Particle.electron(0.3, 0.5))
    u.add_particle(Particle.electron(0.7, 0.5))
    u.add_particle(Particle.photon(0.1, 0.1, 0.5, 1.0, 0.0, 0.0, energy=0.2))
    return u

# --- Loggers ---

def test_count_population(universe):
    c = count_population(universe.particles)
    assert (c["proton"], c["electron"], c["photon"], c["total"]) == (1, 2, 1, 4)
    assert c["positive_charge"] == 2.0
    assert c["negative_charge"] == -2.0

def test_energy_logger_prints_every_n(universe, capsys):
    universe.run_steps(5, observers=[EnergyLogger(every=2)])
    lines = [l for l in capsys.readouterr().out.splitlines() if "total_energy" in l]
    assert [l.split("]")[0] for l in lines] == ["[0", "[2", "[4"]
    assert "electrostatic=" in lines[0]

def test_population_logger(universe, capsys):
    universe.run_steps(1, observers=[PopulationLogger(every=1)])
    out = capsys.readouterr().out
    assert "[0] particles=4 electrons=2 protons=1 photons=1" in out

def test_recorder_keeps_initial_state_and_every_tick(universe):
    recorder = EnergyRecorder()
    universe.run_steps(10, observers=[recorder])
    assert recorder.steps == [-1] + list(range(10))
    assert recorder.values.shape == (11, 4)
    assert recorder.total[-1] == pytest.approx(universe.energy().total)
    assert np.allclose(recorder.values[:, 3], recorder.values[:, :3].sum(axis=1))

def test_recorder_with_zero_ticks_only_has_setup_row(universe):
    recorder = EnergyRecorder()
    universe.run_steps(0, observers=[recorder])
    assert recorder.values.shape == (1, 4)

# --- Plots ---

def test_project_views():
    particles = [Particle.electron(0.1, 0.2, z=0.3)]
    assert project(particles, "xy").tolist() == [[0.1, 0.2]]
    assert project(particles, "xz").tolist() == [[0.1, 0.3]]
    assert project(particles, "yz").tolist() == [[0.2, 0.3]]
    assert project([], "xy").shape == (0, 2)
    with pytest.raises(ValueError):
        project(particles, "zz")

def test_energy_plotter_saves_figure(universe, tmp_path):
    plotter = EnergyPlotter(every=2, output_directory=str(tmp_path))
    universe.run_steps(6, observers=[plotter])
    assert os.path.isfile(plotter.figure_path)

def test_snapshot_plotter_frames_and_gif(universe, tmp_path):
    plotter = SnapshotPlotter(every=3, view_axis="xz", output_directory=str(tmp_path))
    universe.run_steps(6, observers=[plotter])
    names = [os.path.basename(p) for p in plotter.frame_paths]
    assert names == ["particles_step_00000.png", "particles_step_00003.png", "particles_step_00006.png"]
    assert os.path.isfile(tmp_path / "particles.gif")

def test_snapshot_plotter_rejects_unknown_axis(tmp_path):
    with pytest.raises(ValueError):
        SnapshotPlotter(view_axis="ab", output_directory=str(tmp_path))
