# wire.py
# Floppy wire: a cubic bezier whose droop grows with the horizontal span.
# Not a physics sim, just a slack-looking curve.

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from geometry import midpoint


def sag_amount(start, end, base: float = 50.0) -> float:
    return abs(float(start[0]) - float(end[0])) / 2.0 + base


def control_points(start, end, base: float = 50.0):
    mid = midpoint(start, end)
    sag = sag_amount(start, end, base)
    c1 = (float(start[0]), mid[1] + sag)
    c2 = (float(end[0]), mid[1] - sag)
    return c1, c2


def cubic_bezier(p0, c1, c2, p3, steps: int) -> np.ndarray:
    """Sample a cubic bezier at steps+1 evenly spaced t values -> (steps+1, 2) float64."""
    steps = max(1, int(steps))
    t = np.linspace(0.0, 1.0, steps + 1)[:, None]
    u = 1.0 - t
    P = np.asarray([p0, c1, c2, p3], dtype=np.float64)
    pts = (u ** 3) * P[0] + 3.0 * (u ** 2) * t * P[1] + 3.0 * u * (t ** 2) * P[2] + (t ** 3) * P[3]
    # pin the ends so float error never moves them
    pts[0] = P[0]
    pts[-1] = P[3]
    return pts


@dataclass
class InteractiveWire:
    start: tuple[float, float]
    end: tuple[float, float]
    sag_base: float = 50.0

    @property
    def controls(self):
        return control_points(self.start, self.end, self.sag_base)

    def path(self, steps: int = 32) -> np.ndarray:
        c1, c2 = self.controls
        return cubic_bezier(self.start, c1, c2, self.end, steps)

    def polyline(self, steps: int = 32) -> np.ndarray:
        # int32 points for cv2.polylines
        return np.round(self.path(steps)).astype(np.int32)
