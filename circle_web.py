# circle_web.py
# Circle field screen: drag to pan, circles near the center grow,
# tap a grown circle for a popup with its letter.

from __future__ import annotations

import cv2
import numpy as np

from geometry import dist, to_px
from gestures import PointerTracker
from params import Params
from proximity import CircleField
from ui import COL_BLACK, COL_RED, COL_WHITE, panel, put_text_centered, scale_for_height

# BGR
COL_NODE = (255, 122, 0)
COL_NODE_RIM = COL_WHITE
COL_POPUP = (142, 142, 142)

POPUP_PAD = 16
POPUP_LETTER_PX = 34
CLOSE_RADIUS = 20


class CircleWebView:
    def __init__(self, params: Params | None = None, rng: np.random.Generator | None = None):
        self.params = params or Params()
        self.field = CircleField(self.params, rng=rng)
        self.tracker = PointerTracker(self.params.min_drag_distance)
        self.width = 0
        self.height = 0

    # ---------- public API ----------
    def update(self, w, h):
        self.width = int(w)
        self.height = int(h)
        # first known size lays out the field; may raise LayoutInfeasibleError
        self.field.setup(self.width, self.height)

    def on_mouse(self, event, x, y, flags=0, param=None):
        p = (float(x), float(y))
        if event == cv2.EVENT_LBUTTONDOWN:
            self.tracker.press(p)
        elif event == cv2.EVENT_MOUSEMOVE:
            if not flags & cv2.EVENT_FLAG_LBUTTON:
                # button came up outside the window: end the gesture here
                if self.tracker.is_down:
                    self._handle(self.tracker.release(p))
                return
            self._handle(self.tracker.move(p))
        elif event == cv2.EVENT_LBUTTONUP:
            self._handle(self.tracker.release(p))

    def tap(self, p) -> bool:
        if self.field.show_popup:
            rect, _, close_c = self.popup_layout()
            if dist(p, close_c) <= CLOSE_RADIUS:
                self.field.close_popup()
                return True
            # the panel sits on top of the circles
            x, y, w, h = rect
            if x <= p[0] <= x + w and y <= p[1] <= y + h:
                return False
        return self.field.tap(p, self.width, self.height)

    def popup_layout(self):
        """(panel_rect, letter_center, close_center) for the bottom popup."""
        w = self.width
        h = self.height
        ph = POPUP_LETTER_PX + 2 * POPUP_PAD + 2 * CLOSE_RADIUS + 2 * POPUP_PAD
        rect = (POPUP_PAD, h - POPUP_PAD - ph, w - 2 * POPUP_PAD, ph)
        cx = w / 2.0
        letter_c = (cx, rect[1] + POPUP_PAD + POPUP_LETTER_PX / 2.0)
        close_c = (cx, rect[1] + ph - POPUP_PAD - CLOSE_RADIUS)
        return rect, letter_c, close_c

    def render(self, frame=None):
        if frame is None:
            frame = np.full((max(1, self.height), max(1, self.width), 3), COL_BLACK, dtype=np.uint8)

        for st in self.field.states(self.width, self.height):
            c = to_px(st.position)
            r = int(round(st.size / 2.0))
            cv2.circle(frame, c, r, COL_NODE, -1, cv2.LINE_AA)
            cv2.circle(frame, c, r, COL_NODE_RIM, 2, cv2.LINE_AA)
            sc = scale_for_height(st.size * self.params.letter_scale, 2)
            put_text_centered(frame, st.node.letter, c, sc, COL_WHITE, 2)

        node = self.field.popup_node()
        if node is not None:
            self._draw_popup(frame, node.letter)

        return frame

    # ---------- internals ----------
    def _handle(self, ev):
        if ev is None:
            return
        if ev.kind == PointerTracker.TAP:
            self.tap(ev.location)
        elif ev.kind == PointerTracker.DRAG_CHANGED:
            self.field.drag_changed(ev.translation)
        elif ev.kind == PointerTracker.DRAG_ENDED:
            self.field.drag_ended(ev.translation)

    def _draw_popup(self, frame, letter):
        rect, letter_c, close_c = self.popup_layout()
        panel(frame, rect, COL_POPUP, 0.9, radius=10)
        put_text_centered(frame, letter, letter_c, scale_for_height(POPUP_LETTER_PX, 2), COL_WHITE, 2)
        cc = to_px(close_c)
        cv2.circle(frame, cc, CLOSE_RADIUS, COL_RED, -1, cv2.LINE_AA)
        put_text_centered(frame, "X", cc, scale_for_height(14, 2), COL_WHITE, 2)
