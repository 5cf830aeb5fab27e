# layout.py
# Node placement:
# - terminal nodes: three bottom + three top, fixed fractions of the viewport
# - field nodes: random, non-overlapping, one random letter each

from __future__ import annotations
from dataclasses import dataclass, field
import string
import uuid

import numpy as np

from geometry import dist
from params import Params

LETTERS = string.ascii_uppercase


@dataclass(frozen=True)
class TerminalNode:
    is_bottom: bool
    index: int
    position: tuple[float, float]


@dataclass(frozen=True)
class Node:
    position: tuple[float, float]
    letter: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


class LayoutInfeasibleError(RuntimeError):
    """Raised when the requested nodes cannot be placed within the attempt cap."""

    def __init__(self, count, placed, min_separation, width, height, attempts):
        self.count = int(count)
        self.placed = int(placed)
        self.min_separation = float(min_separation)
        self.width = float(width)
        self.height = float(height)
        self.attempts = int(attempts)
        super().__init__(
            f"layout infeasible: placed {self.placed}/{self.count} nodes "
            f"(min separation {self.min_separation:g}) in a "
            f"{self.width:g}x{self.height:g} area after {self.attempts} attempts"
        )


def terminal_x(index: int, width: float, params: Params | None = None) -> float:
    p = params or Params()
    return width * p.terminal_x0 + index * width * p.terminal_dx


def terminal_positions(width, height, params: Params | None = None):
    """Return (bottom, top) lists of (x, y) for the current viewport size."""
    p = params or Params()
    w = float(width)
    h = float(height)
    bottom = [(terminal_x(i, w, p), h * p.terminal_bottom_y) for i in range(p.terminal_count)]
    top = [(terminal_x(i, w, p), h * p.terminal_top_y) for i in range(p.terminal_count)]
    return bottom, top


def terminal_nodes(width, height, params: Params | None = None) -> list[TerminalNode]:
    bottom, top = terminal_positions(width, height, params)
    nodes = [TerminalNode(True, i, pos) for i, pos in enumerate(bottom)]
    nodes += [TerminalNode(False, i, pos) for i, pos in enumerate(top)]
    return nodes


def terminal_position(is_bottom: bool, index: int, width, height, params: Params | None = None):
    bottom, top = terminal_positions(width, height, params)
    return bottom[index] if is_bottom else top[index]


def generate_field_nodes(
    width,
    height,
    count: int | None = None,
    min_separation: float | None = None,
    rng: np.random.Generator | None = None,
    params: Params | None = None,
    max_attempts: int | None = None,
) -> list[Node]:
    """
    Rejection-sample `count` nodes inside the inner 80% of the viewport.

    A candidate closer than `min_separation` to any accepted node is thrown
    away. Sampling stops after `max_attempts` candidates; running out raises
    LayoutInfeasibleError instead of returning fewer nodes.
    """
    p = params or Params()
    n = p.node_count if count is None else int(count)
    sep = p.min_separation if min_separation is None else float(min_separation)
    cap = p.max_layout_attempts if max_attempts is None else int(max_attempts)
    if rng is None:
        rng = np.random.default_rng(p.seed)

    if n <= 0:
        return []

    w = float(width)
    h = float(height)
    m = p.field_margin
    x_lo, x_hi = w * m, w * (1.0 - m)
    y_lo, y_hi = h * m, h * (1.0 - m)

    nodes: list[Node] = []
    attempts = 0
    while len(nodes) < n:
        if attempts >= cap:
            raise LayoutInfeasibleError(n, len(nodes), sep, w, h, attempts)
        attempts += 1

        pos = (float(rng.uniform(x_lo, x_hi)), float(rng.uniform(y_lo, y_hi)))
        if any(dist(other.position, pos) < sep for other in nodes):
            continue

        letter = LETTERS[int(rng.integers(0, len(LETTERS)))]
        nodes.append(Node(position=pos, letter=letter))

    return nodes
