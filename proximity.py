# proximity.py
# Circle field render state: nodes near the viewport center grow and become
# tappable. Everything here is derived from (nodes, pan, viewport) each frame.

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from geometry import add, dist, viewport_center, within_radius
from gestures import PanState
from layout import Node, generate_field_nodes
from params import Params


@dataclass(frozen=True)
class NodeRenderState:
    node: Node
    position: tuple[float, float]
    size: float
    active: bool


def effective_position(node: Node, pan_offset):
    return add(node.position, pan_offset)


def is_active(position, center, focal_radius: float) -> bool:
    return within_radius(position, center, focal_radius)


def render_state(node: Node, pan_offset, width, height, params: Params | None = None) -> NodeRenderState:
    p = params or Params()
    pos = effective_position(node, pan_offset)
    active = is_active(pos, viewport_center(width, height), p.focal_radius)
    size = p.large_size if active else p.small_size
    return NodeRenderState(node=node, position=pos, size=size, active=active)


def render_states(nodes, pan_offset, width, height, params: Params | None = None) -> list[NodeRenderState]:
    p = params or Params()
    return [render_state(n, pan_offset, width, height, p) for n in nodes]


def hit_active_node(states, point) -> NodeRenderState | None:
    # last drawn is on top
    for st in reversed(states):
        if st.active and dist(point, st.position) <= st.size / 2.0:
            return st
    return None


class CircleField:
    """
    State behind the circle view: the node field, pan, and the single popup.

    Tapping an active node selects it and shows the popup; tapping another
    one while the popup is open just swaps the selection. Closing hides the
    popup but remembers the last node.
    """

    def __init__(self, params: Params | None = None, rng: np.random.Generator | None = None):
        self.params = params or Params()
        self.rng = rng if rng is not None else np.random.default_rng(self.params.seed)
        self.nodes: list[Node] = []
        self.pan = PanState()
        self.selected: Node | None = None
        self.show_popup = False
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    def setup(self, width, height):
        """Lay out the field once, the first time the viewport size is known."""
        if self._ready:
            return
        self.nodes = generate_field_nodes(width, height, rng=self.rng, params=self.params)
        self._ready = True

    def states(self, width, height) -> list[NodeRenderState]:
        return render_states(self.nodes, self.pan.total(), width, height, self.params)

    def tap(self, point, width, height) -> bool:
        hit = hit_active_node(self.states(width, height), point)
        if hit is None:
            return False
        self.selected = hit.node
        self.show_popup = True
        return True

    def close_popup(self):
        self.show_popup = False

    def popup_node(self) -> Node | None:
        return self.selected if self.show_popup else None

    def drag_changed(self, translation):
        self.pan.drag_changed(translation)

    def drag_ended(self, translation):
        self.pan.drag_ended(translation)
