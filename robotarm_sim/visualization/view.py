"""
Pan and zoom state for the arm canvas.

Maps joint positions (centimetres) into canvas pixels.  Zoom scales the
pixels-per-centimetre factor; dragging translates everything drawn.
Nothing here feeds back into the kinematics or statics results.

Classes:
    ViewTransform: Zoom, drag translation, and the cm-to-pixel mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from robotarm_sim.robots.arm_types import Point
from robotarm_sim.utils.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_PIXELS_PER_CM,
    ORIGIN_OFFSET_X,
    ORIGIN_OFFSET_Y,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)
from robotarm_sim.utils.helpers import clamp


@dataclass
class ViewTransform:
    """Zoom and pan state of the canvas.

    Attributes:
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        pixels_per_cm: Scale at zoom 1.
        zoom: Current zoom factor in ``[ZOOM_MIN, ZOOM_MAX]``.
        translate_x: Horizontal pan offset in pixels.
        translate_y: Vertical pan offset in pixels.
        dragging: Whether a drag gesture is in progress.
    """

    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    pixels_per_cm: float = DEFAULT_PIXELS_PER_CM
    zoom: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    dragging: bool = False
    _drag_start_x: float = 0.0
    _drag_start_y: float = 0.0

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def scale(self) -> float:
        """Pixels per centimetre at the current zoom."""
        return self.pixels_per_cm * self.zoom

    @property
    def origin(self) -> Tuple[float, float]:
        """Canvas position of the base joint, before panning."""
        return (
            self.canvas_width / 2 + ORIGIN_OFFSET_X,
            self.canvas_height / 2 + ORIGIN_OFFSET_Y,
        )

    def to_pixel(self, point: Point) -> Tuple[float, float]:
        """Map a position in centimetres to canvas pixels.

        Args:
            point: Joint position (y already points down).

        Returns:
            ``(px, py)`` float pixel coordinates.
        """
        ox, oy = self.origin
        return (
            ox + point.x * self.scale + self.translate_x,
            oy + point.y * self.scale + self.translate_y,
        )

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------

    def _set_zoom(self, value: float) -> float:
        self.zoom = round(clamp(value, ZOOM_MIN, ZOOM_MAX), 2)
        return self.zoom

    def zoom_in(self) -> float:
        """Increase the zoom by one step, up to ``ZOOM_MAX``."""
        return self._set_zoom(self.zoom + ZOOM_STEP)

    def zoom_out(self) -> float:
        """Decrease the zoom by one step, down to ``ZOOM_MIN``."""
        return self._set_zoom(self.zoom - ZOOM_STEP)

    def zoom_percent(self) -> str:
        """Return the zoom as a whole percentage, e.g. ``'110%'``."""
        return f"{self.zoom * 100:.0f}%"

    # ------------------------------------------------------------------
    # Drag
    # ------------------------------------------------------------------

    def begin_drag(self, x: float, y: float) -> None:
        """Start a drag gesture at pointer position (*x*, *y*)."""
        self.dragging = True
        self._drag_start_x = x - self.translate_x
        self._drag_start_y = y - self.translate_y

    def drag_to(self, x: float, y: float) -> None:
        """Move the canvas with the pointer while dragging."""
        if not self.dragging:
            return
        self.translate_x = x - self._drag_start_x
        self.translate_y = y - self._drag_start_y

    def end_drag(self) -> None:
        """Finish the current drag gesture."""
        self.dragging = False

    def reset(self) -> None:
        """Restore zoom 1 and remove any pan offset."""
        self.zoom = 1.0
        self.translate_x = 0.0
        self.translate_y = 0.0
        self.dragging = False
