# geometry.py
# Tiny 2D helpers on (x, y) tuples. Shared by layout, gestures, wire and proximity.

from __future__ import annotations
import math


def dist(a, b) -> float:
    dx = float(a[0] - b[0])
    dy = float(a[1] - b[1])
    return math.hypot(dx, dy)


def midpoint(a, b):
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def add(a, b):
    return (a[0] + b[0], a[1] + b[1])


def sub(a, b):
    return (a[0] - b[0], a[1] - b[1])


def within_radius(p, center, radius: float) -> bool:
    # inclusive: a point exactly on the rim counts as inside
    return dist(p, center) <= radius


def viewport_center(width, height):
    return (width / 2.0, height / 2.0)


def to_px(p):
    return (int(round(p[0])), int(round(p[1])))
