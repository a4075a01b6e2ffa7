from __future__ import annotations

from typing import List, Sequence
import os

from chargebox import OUTPUT
from chargebox.Observers.Loggers import EnergyRecorder
from chargebox.Observers.Observer import Observer
from chargebox.State import Particle, ParticleKind, UniverseState

import numpy as np
import imageio.v2 as imageio
import matplotlib.pyplot as plt

VIEW_AXES = {"xy": ("x", "y"), "xz": ("x", "z"), "yz": ("y", "z")}


def project(particles: Sequence[Particle], view_axis: str = "xy") -> np.ndarray:
    """[N, 2] coordinates of `particles` seen along `view_axis` ('xy', 'xz' or 'yz')."""
    try:
        a, b = VIEW_AXES[view_axis]
    except KeyError:
        raise ValueError(f"unknown view axis {view_axis!r}; expected one of {sorted(VIEW_AXES)}") from None
    if not particles:
        return np.zeros((0, 2))
    return np.array([[getattr(p, a), getattr(p, b)] for p in particles], dtype=np.float64)


class EnergyPlotter(EnergyRecorder):
    """Energy breakdown over time, saved as `Energy_t.png` at teardown."""

    def __init__(self, every: int = 50, output_directory: str = OUTPUT, verbose: int = 0):
        super().__init__(every=every)
        self.output_dir = output_directory
        self.verbose = verbose
        self.figure_path = os.path.join(self.output_dir, "Energy_t.png")

    def on_teardown(self) -> None:
        values = self.values
        if values.shape[0] == 0:
            print("[WARNING]: EnergyPlotter has no samples; nothing to plot")
            return
        os.makedirs(self.output_dir, exist_ok=True)

        plt.figure(figsize=(8, 5))
        for column, label in enumerate(("kinetic", "photon", "electrostatic", "total")):
            plt.plot(self.steps, values[:, column], label=label, color=f"C{column}")
        plt.title("Energy breakdown", fontsize=14)
        plt.ylabel("Energy", fontsize=12)
        plt.xlabel("Time step", fontsize=12)
        plt.grid(True, linestyle="--", alpha=0.5)
        plt.legend(fontsize=11)
        plt.tight_layout()

        plt.savefig(self.figure_path, dpi=150)
        plt.close()
        if self.verbose: print(f"[INFO]: energy plot saved to {self.figure_path}")


class SnapshotPlotter(Observer):
    """
    Scatter snapshot of the particles on one view plane every `every` ticks.
    Frames are collected into `particles.gif` at teardown.
    """
    # ---- viz knobs ----
    SIZES = {ParticleKind.PHOTON: 8, ParticleKind.ELECTRON: 12, ParticleKind.PROTON: 40}
    COLORS = {ParticleKind.PHOTON: "#fbbf24", ParticleKind.ELECTRON: "#3b82f6", ParticleKind.PROTON: "#ef4444"}
    # -------------------

    def __init__(self, every: int = 50, view_axis: str = "xy", output_directory: str = OUTPUT,
                 make_gif: bool = True, verbose: int = 0):
        if view_axis not in VIEW_AXES:
            raise ValueError(f"unknown view axis {view_axis!r}; expected one of {sorted(VIEW_AXES)}")
        self.every = every
        self.view_axis = view_axis
        self.output_dir = output_directory
        self.make_gif = make_gif
        self.verbose = verbose

        self.frames: List[np.ndarray] = []
        self.frame_paths: List[str] = []
        self.fig = None
        self.ax = None

    def on_setup(self, initial_state: UniverseState) -> None:
        os.makedirs(self.output_dir, exist_ok=True)
        self.frames = []
        self.frame_paths = []
        self.fig = plt.figure(figsize=(6, 6))
        self.ax = self.fig.add_subplot(111)

        # Initial step
        self._draw(0, initial_state)

    def on_step_end(self, step_idx: int, state: UniverseState) -> None:
        step_idx += 1  # We had zero step on setup.
        if step_idx % self.every == 0:
            self._draw(step_idx, state)

    def _draw(self, step_idx: int, state: UniverseState) -> None:
        size = state.config.size
        self.ax.clear()
        # photons first, then electrons, then protons on top
        for kind in (ParticleKind.PHOTON, ParticleKind.ELECTRON, ParticleKind.PROTON):
            xy = project([p for p in state.particles if p.kind is kind], self.view_axis)
            if xy.shape[0]:
                self.ax.scatter(xy[:, 0], xy[:, 1], s=self.SIZES[kind], c=self.COLORS[kind], label=kind.value)

        a, b = VIEW_AXES[self.view_axis]
        self.ax.set_xlim(0, size)
        self.ax.set_ylim(size, 0)   # screen convention: y grows downwards
        self.ax.set_aspect("equal")
        self.ax.set_xlabel(a); self.ax.set_ylabel(b)
        self.ax.set_title(f"Particles, step {step_idx} (t={step_idx * state.dt:.2f})")

        frame_path = os.path.join(self.output_dir, f"particles_step_{step_idx:05d}.png")
        self.fig.savefig(frame_path, dpi=100)
        self.frame_paths.append(frame_path)
        if self.make_gif:
            self.frames.append(imageio.imread(frame_path))

    def on_teardown(self) -> None:
        plt.close(self.fig)
        if self.make_gif and self.frames:
            gif_path = os.path.join(self.output_dir, "particles.gif")
            imageio.mimsave(gif_path, self.frames, duration=0.2)
            if self.verbose: print(f"[INFO]: animation saved to {gif_path}")
