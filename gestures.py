# gestures.py
# Pointer -> gesture translation plus the two gesture-driven state machines:
# - WireGrabState: pick one terminal node, drag a wire out of it
# - PanState: committed + in-progress pan offset for the circle field

from __future__ import annotations
from dataclasses import dataclass

from geometry import add, dist, sub


@dataclass(frozen=True)
class GestureEvent:
    kind: str
    location: tuple[float, float]
    translation: tuple[float, float] = (0.0, 0.0)


class PointerTracker:
    """
    Turns raw press/move/release into tap / drag_changed / drag_ended.

    A press only becomes a drag once the pointer has travelled
    `min_distance`; releasing before that is a tap. Translation is always
    measured from the press point.
    """

    TAP = "tap"
    DRAG_CHANGED = "drag_changed"
    DRAG_ENDED = "drag_ended"

    def __init__(self, min_distance: float = 10.0):
        self.min_distance = float(min_distance)
        self._down = False
        self._dragging = False
        self._start = (0.0, 0.0)

    @property
    def is_down(self) -> bool:
        return self._down

    def press(self, p):
        self._down = True
        self._dragging = False
        self._start = (float(p[0]), float(p[1]))

    def move(self, p) -> GestureEvent | None:
        if not self._down:
            return None
        loc = (float(p[0]), float(p[1]))
        if not self._dragging and dist(loc, self._start) >= self.min_distance:
            self._dragging = True
        if not self._dragging:
            return None
        return GestureEvent(self.DRAG_CHANGED, loc, sub(loc, self._start))

    def release(self, p) -> GestureEvent | None:
        if not self._down:
            return None
        loc = (float(p[0]), float(p[1]))
        was_dragging = self._dragging
        self._down = False
        self._dragging = False
        if was_dragging:
            return GestureEvent(self.DRAG_ENDED, loc, sub(loc, self._start))
        return GestureEvent(self.TAP, loc, (0.0, 0.0))


@dataclass(frozen=True)
class Selection:
    is_bottom: bool
    index: int


class WireGrabState:
    """
    Selection + live drag point for the wire grabber.

    First selection wins: taps are ignored while a node is selected, until
    select_node() or clear() drops it. Releasing a drag drops the drag point
    but keeps the selection.
    """

    def __init__(self):
        self.selection: Selection | None = None
        self.drag_point: tuple[float, float] | None = None

    def tap_node(self, is_bottom: bool, index: int) -> bool:
        if self.selection is not None:
            return False
        self.selection = Selection(bool(is_bottom), int(index))
        return True

    def select_node(self):
        # "Select Node" button: re-enable picking, leave the drag point alone
        self.selection = None

    def clear(self):
        self.selection = None
        self.drag_point = None

    def drag_changed(self, location):
        if self.selection is not None:
            self.drag_point = (float(location[0]), float(location[1]))

    def drag_ended(self):
        self.drag_point = None

    def is_selected(self, is_bottom: bool, index: int) -> bool:
        s = self.selection
        return s is not None and s.is_bottom == bool(is_bottom) and s.index == int(index)

    def wire_endpoints(self, bottom, top):
        """(start, end) for the wire, or None when there is nothing to draw."""
        if self.selection is None or self.drag_point is None:
            return None
        nodes = bottom if self.selection.is_bottom else top
        return nodes[self.selection.index], self.drag_point


class PanState:
    """Displayed offset = committed offset + in-progress gesture offset."""

    def __init__(self):
        self.offset = (0.0, 0.0)
        self.gesture_offset = (0.0, 0.0)

    def drag_changed(self, translation):
        self.gesture_offset = (float(translation[0]), float(translation[1]))

    def drag_ended(self, translation):
        self.offset = add(self.offset, (float(translation[0]), float(translation[1])))
        self.gesture_offset = (0.0, 0.0)

    def total(self):
        return add(self.offset, self.gesture_offset)
