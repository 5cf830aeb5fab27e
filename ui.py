# ui.py
# OpenCV drawing bits shared by both views: glass panels, shadowed text,
# rounded buttons laid out in a centered row.

from __future__ import annotations
from dataclasses import dataclass

import cv2

FONT = cv2.FONT_HERSHEY_SIMPLEX

# BGR
COL_WHITE = (255, 255, 255)
COL_BLACK = (0, 0, 0)
COL_SHADOW = (25, 25, 25)
COL_GREEN = (89, 199, 52)
COL_RED = (48, 59, 255)
COL_BLUE = (255, 122, 0)
COL_GRAY = (142, 142, 142)


@dataclass
class Button:
    label: str
    color: tuple[int, int, int]
    rect: tuple[int, int, int, int] = (0, 0, 0, 0)   # x, y, w, h
    text_color: tuple[int, int, int] = COL_WHITE

    def contains(self, p) -> bool:
        x, y, w, h = self.rect
        return x <= p[0] <= x + w and y <= p[1] <= y + h


def text_size(s, scale, thick=1):
    (w, h), base = cv2.getTextSize(s, FONT, float(scale), int(thick))
    return w, h, base


def scale_for_height(px_height: float, thick=1) -> float:
    # cv2 font scale that gives glyphs roughly px_height tall
    _, h, _ = text_size("A", 1.0, thick)
    return max(0.1, float(px_height) / float(max(1, h)))


def rounded_rect(frame, rect, color, radius=10):
    x, y, w, h = (int(v) for v in rect)
    r = int(max(0, min(radius, w // 2, h // 2)))
    cv2.rectangle(frame, (x + r, y), (x + w - r, y + h), color, -1)
    cv2.rectangle(frame, (x, y + r), (x + w, y + h - r), color, -1)
    for cx, cy in ((x + r, y + r), (x + w - r, y + r), (x + r, y + h - r), (x + w - r, y + h - r)):
        cv2.circle(frame, (cx, cy), r, color, -1, cv2.LINE_AA)


def panel(frame, rect, color, alpha, radius=10):
    x, y, w, h = (int(v) for v in rect)
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(frame.shape[1], x + w)
    y1 = min(frame.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return
    overlay = frame.copy()
    rounded_rect(overlay, (x, y, w, h), color, radius)
    cv2.addWeighted(overlay, alpha, frame, 1.0 - alpha, 0, frame)


def put_text(frame, s, org, scale, color=COL_WHITE, thick=1, shadow=True):
    org = (int(org[0]), int(org[1]))
    if shadow:
        cv2.putText(frame, s, (org[0] + 1, org[1] + 1), FONT, scale, COL_SHADOW, thick + 1, cv2.LINE_AA)
    cv2.putText(frame, s, org, FONT, scale, color, thick, cv2.LINE_AA)


def put_text_centered(frame, s, center, scale, color=COL_WHITE, thick=1, shadow=False):
    w, h, _ = text_size(s, scale, thick)
    org = (int(center[0] - w / 2), int(center[1] + h / 2))
    put_text(frame, s, org, scale, color, thick, shadow)


def layout_button_row(buttons, width, top=12, pad=16, gap=10, scale=0.6):
    """Size each button to its label and center the row horizontally."""
    sizes = []
    for b in buttons:
        w, h, _ = text_size(b.label, scale, 2)
        sizes.append((w + 2 * pad, h + 2 * pad))
    total = sum(s[0] for s in sizes) + gap * max(0, len(sizes) - 1)
    x = int(max(0, (width - total) / 2))
    for b, (bw, bh) in zip(buttons, sizes):
        b.rect = (x, int(top), int(bw), int(bh))
        x += bw + gap


def draw_button(frame, b: Button, scale=0.6):
    rounded_rect(frame, b.rect, b.color, radius=10)
    x, y, w, h = b.rect
    put_text_centered(frame, b.label, (x + w / 2, y + h / 2), scale, b.text_color, 2)
