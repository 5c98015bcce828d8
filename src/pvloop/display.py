"""Mapping from physiological units to display coordinates.

Volume runs along the horizontal axis and pressure along the vertical
axis, which points downwards as on most drawing surfaces. Pressures are
clamped to ``[0, pmax]`` so curves never leave the plot area vertically.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from .geometry import VMAX, PMAX


@dataclass(frozen=True)
class DisplayArea:
    width: float = 540.0
    height: float = 420.0
    pad_top: float = 22.0
    pad_right: float = 22.0
    pad_bottom: float = 52.0
    pad_left: float = 56.0
    vmax: float = VMAX
    pmax: float = PMAX

    @property
    def plot_width(self) -> float:
        return self.width - self.pad_left - self.pad_right

    @property
    def plot_height(self) -> float:
        return self.height - self.pad_top - self.pad_bottom

    def volume_to_x(self, volume):
        return self.pad_left + (np.asarray(volume) / self.vmax) * self.plot_width

    def pressure_to_y(self, pressure):
        p = np.clip(pressure, 0.0, self.pmax)
        return self.pad_top + self.plot_height - (p / self.pmax) * self.plot_height

    def to_display(self, points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Map an ``(n, 2)`` array of (volume, pressure) to (x, y)"""
        points = np.asarray(points, dtype=np.float64)
        return np.column_stack(
            [self.volume_to_x(points[:, 0]), self.pressure_to_y(points[:, 1])]
        )


DEFAULT_AREA = DisplayArea()
