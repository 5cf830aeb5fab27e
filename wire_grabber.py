# wire_grabber.py
# Wire grabber screen:
# - Tap a terminal (blue bottom / red top) to pick it; first pick wins
# - Drag anywhere: a slack wire follows the pointer from the picked node
# - Release: wire disappears, pick stays
# - Buttons: Select Node (re-pick), Clear (drop pick + wire), Open Circles View

from __future__ import annotations

import cv2
import numpy as np

from geometry import dist, to_px
from gestures import PointerTracker, WireGrabState
from layout import terminal_nodes, terminal_positions
from params import Params
from ui import (
    COL_BLUE, COL_GRAY, COL_GREEN, COL_RED, COL_WHITE,
    Button, draw_button, layout_button_row, put_text,
)
from wire import InteractiveWire

# BGR
COL_BG = COL_WHITE
COL_BOTTOM = (255, 0, 0)
COL_TOP = (0, 0, 255)
COL_PICK = (0, 200, 0)
COL_WIRE = COL_GRAY
COL_HINT = (120, 120, 120)


class WireGrabberView:
    def __init__(self, params: Params | None = None):
        self.params = params or Params()
        self.state = WireGrabState()
        self.tracker = PointerTracker(self.params.min_drag_distance)

        self.btn_select = Button("Select Node", COL_GREEN)
        self.btn_clear = Button("Clear", COL_RED)
        self.btn_circles = Button("Open Circles View", COL_BLUE)
        self.buttons = [self.btn_select, self.btn_clear, self.btn_circles]
        self._pressed: Button | None = None

        # set by the Open Circles View button, consumed by the app
        self.wants_circle_view = False

        self.width = 0
        self.height = 0

    # ---------- public API ----------
    def update(self, w, h):
        self.width = int(w)
        self.height = int(h)
        layout_button_row(self.buttons, self.width)

    def on_mouse(self, event, x, y, flags=0, param=None):
        p = (float(x), float(y))

        if event == cv2.EVENT_LBUTTONDOWN:
            hit = self._button_at(p)
            if hit is not None:
                self._pressed = hit
                return
            self.tracker.press(p)

        elif event == cv2.EVENT_MOUSEMOVE:
            held = bool(flags & cv2.EVENT_FLAG_LBUTTON)
            if self._pressed is not None:
                if not held:
                    self._pressed = None
                return
            if not held:
                # button came up outside the window: end the gesture here
                if self.tracker.is_down:
                    self._handle(self.tracker.release(p))
                return
            self._handle(self.tracker.move(p))

        elif event == cv2.EVENT_LBUTTONUP:
            if self._pressed is not None:
                b = self._pressed
                self._pressed = None
                if b.contains(p):
                    self.press_button(b)
                return
            self._handle(self.tracker.release(p))

    def press_button(self, b: Button):
        if b is self.btn_select:
            self.state.select_node()
        elif b is self.btn_clear:
            self.state.clear()
        elif b is self.btn_circles:
            self.wants_circle_view = True

    def tap(self, p) -> bool:
        node = self.terminal_at(p)
        if node is None:
            return False
        return self.state.tap_node(node.is_bottom, node.index)

    def terminal_at(self, p):
        for node in terminal_nodes(self.width, self.height, self.params):
            if dist(p, node.position) <= self.params.terminal_radius:
                return node
        return None

    def render(self, frame=None):
        if frame is None:
            frame = np.full((max(1, self.height), max(1, self.width), 3), COL_BG, dtype=np.uint8)

        bottom, top = terminal_positions(self.width, self.height, self.params)
        r = int(self.params.terminal_radius)

        for is_bottom, nodes, col in ((True, bottom, COL_BOTTOM), (False, top, COL_TOP)):
            for i, pos in enumerate(nodes):
                c = to_px(pos)
                cv2.circle(frame, c, r, col, -1, cv2.LINE_AA)
                if self.state.is_selected(is_bottom, i):
                    self._tint_circle(frame, c, r, COL_PICK, 0.3)

        ends = self.state.wire_endpoints(bottom, top)
        if ends is not None:
            wire = InteractiveWire(ends[0], ends[1], self.params.wire_sag)
            pts = wire.polyline(self.params.wire_steps)
            cv2.polylines(frame, [pts], False, COL_WIRE, self.params.wire_thickness, cv2.LINE_AA)

        for b in self.buttons:
            draw_button(frame, b)

        hint = "Tap a node, then drag.  ESC quit"
        put_text(frame, hint, (12, frame.shape[0] - 12), 0.45, COL_HINT, 1, shadow=False)
        return frame

    # ---------- internals ----------
    def _button_at(self, p):
        for b in self.buttons:
            if b.contains(p):
                return b
        return None

    def _handle(self, ev):
        if ev is None:
            return
        if ev.kind == PointerTracker.TAP:
            self.tap(ev.location)
        elif ev.kind == PointerTracker.DRAG_CHANGED:
            self.state.drag_changed(ev.location)
        elif ev.kind == PointerTracker.DRAG_ENDED:
            self.state.drag_ended()

    def _tint_circle(self, frame, c, r, col, alpha):
        overlay = frame.copy()
        cv2.circle(overlay, c, r, col, -1, cv2.LINE_AA)
        cv2.addWeighted(overlay, alpha, frame, 1.0 - alpha, 0, frame)
