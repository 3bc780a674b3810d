"""Screen <-> curve-space mapping for a letterboxed view box."""
from __future__ import annotations

from dataclasses import dataclass

from tick_trace import Point


@dataclass(frozen=True)
class ViewTransform:
    """Uniform scale plus offset fitting the view box inside a screen rect."""

    scale: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(
        cls, view_box: tuple[float, float], rect: tuple[int, int, int, int]
    ) -> ViewTransform:
        x, y, w, h = rect
        vw, vh = view_box
        scale = min(w / vw, h / vh)
        # Center the scaled view box inside the rect.
        offset_x = x + (w - vw * scale) / 2
        offset_y = y + (h - vh * scale) / 2
        return cls(scale, offset_x, offset_y)

    def to_screen(self, p: Point) -> tuple[int, int]:
        return (
            round(self.offset_x + p[0] * self.scale),
            round(self.offset_y + p[1] * self.scale),
        )

    def to_curve(self, screen: tuple[int, int]) -> Point:
        return (
            (screen[0] - self.offset_x) / self.scale,
            (screen[1] - self.offset_y) / self.scale,
        )
