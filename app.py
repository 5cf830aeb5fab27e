# app.py - StringUI: wire grabber + circle field
import cv2

from circle_web import CircleWebView
from layout import LayoutInfeasibleError
from params import Params
from wire_grabber import WireGrabberView

WINDOW_NAME = "StringUI"

INIT_W = 900
INIT_H = 700
FRAME_DELAY_MS = 16

KEY_ESC = 27


class StringUIApp:
    """Owns both screens; the circle view is presented full-window over the wire grabber."""

    def __init__(self, params: Params | None = None):
        self.params = params or Params()
        self.wire_view = WireGrabberView(self.params)
        self.circle_view: CircleWebView | None = None
        self.running = True

    @property
    def current(self):
        return self.circle_view if self.circle_view is not None else self.wire_view

    def open_circle_view(self):
        # fresh state each time it is presented
        self.circle_view = CircleWebView(self.params)

    def close_circle_view(self):
        self.circle_view = None

    def on_mouse(self, event, x, y, flags, param=None):
        self.current.on_mouse(event, x, y, flags, param)

    def handle_key(self, key: int):
        if key == KEY_ESC:
            if self.circle_view is not None:
                self.close_circle_view()
            else:
                self.running = False
        elif key in (ord("q"), ord("Q")):
            self.running = False

    def step(self, w, h):
        if self.wire_view.wants_circle_view:
            self.wire_view.wants_circle_view = False
            self.open_circle_view()

        view = self.current
        try:
            view.update(w, h)
        except LayoutInfeasibleError as e:
            print(f"⚠️  Circle view unavailable: {e}")
            self.close_circle_view()
            view = self.current
            view.update(w, h)
        return view.render()


def _window_size():
    try:
        _, _, w, h = cv2.getWindowImageRect(WINDOW_NAME)
    except cv2.error:
        return INIT_W, INIT_H
    if w <= 0 or h <= 0:
        return INIT_W, INIT_H
    return w, h


def main():
    app = StringUIApp()

    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
    cv2.resizeWindow(WINDOW_NAME, INIT_W, INIT_H)
    cv2.setMouseCallback(WINDOW_NAME, app.on_mouse)

    print("\n" + "=" * 60)
    print("🧵 STRINGUI")
    print("=" * 60)
    print("\n📋 CONTROLS:")
    print("   Click a node - pick it (first pick wins)")
    print("   Drag         - pull a wire from the picked node")
    print("   Select Node  - allow a new pick | Clear - drop pick + wire")
    print("   Open Circles View - panable letter field")
    print("   ESC - close circles view / exit | Q - exit")
    print("\n" + "=" * 60 + "\n")

    while app.running:
        w, h = _window_size()
        frame = app.step(w, h)
        cv2.imshow(WINDOW_NAME, frame)

        key = cv2.waitKey(FRAME_DELAY_MS) & 0xFF
        if key != 255:
            app.handle_key(key)

        if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
            break

    cv2.destroyAllWindows()
    print("\n✅ StringUI shutdown complete")


if __name__ == "__main__":
    main()
