# MIT License (see LICENSE)
"""
Renderer adapters for pendulum visualization.

This module provides an abstract base class for consumers of the engine's
output and a few concrete implementations. The engine has no rendering
dependency; projecting the angle onto a canvas is left to real adapters.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys
import numpy as np

from ..types import KinematicState, PendulumParameters

if TYPE_CHECKING:
    from ..engine import IntegrationEngine


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a graphics backend (matplotlib, pygame, a web
    canvas, ...).

    Usage:
        renderer.begin_frame(engine.simulated_time)
        renderer.draw_pendulum(engine.state, store.params)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_engine(engine)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Simulated time in seconds.
        """
        ...

    @abstractmethod
    def draw_pendulum(self, state: KinematicState, params: PendulumParameters) -> None:
        """
        Draw the pendulum for the given state.

        Args:
            state: Angle and angular velocity to show.
            params: Current parameters (length, mass for bob size).
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_engine(self, engine: "IntegrationEngine") -> None:
        """Convenience: render one frame of an engine's current state."""
        self.begin_frame(engine.simulated_time)
        self.draw_pendulum(engine.state, engine.store.params)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Example output:
        === Frame t=3.0000 ===
        θ=-47.67° ω=-20.93°/s L=100.0 m=1.0
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include length and mass.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_pendulum(self, state: KinematicState, params: PendulumParameters) -> None:
        line = f"θ={state.angle_degrees:.2f}° ω={state.angular_velocity_degrees:.2f}°/s"
        if self.verbose:
            line += f" L={params.length:.1f} m={params.mass:.1f}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_pendulum(self, state: KinematicState, params: PendulumParameters) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records every rendered frame for later analysis.

    Example:
        renderer = BufferedRenderer()
        for _ in range(600):
            engine.advance(1 / 60)
            renderer.render_engine(engine)
        t, theta, omega = renderer.as_arrays()
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_pendulum(self, state: KinematicState, params: PendulumParameters) -> None:
        if self._current_frame is None:
            return
        self._current_frame["angle"] = state.angle
        self._current_frame["angular_velocity"] = state.angular_velocity

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Recorded (time, angle, angular_velocity) as float64 arrays."""
        t = np.array([f["time"] for f in self.frames], dtype=np.float64)
        th = np.array([f.get("angle", np.nan) for f in self.frames], dtype=np.float64)
        w = np.array([f.get("angular_velocity", np.nan) for f in self.frames], dtype=np.float64)
        return t, th, w
