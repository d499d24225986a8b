"""
Raster renderer for the planar arm.

Draws the arm into an (H, W, 3) uint8 NumPy canvas so that frames can be
produced headless (``rgb_array``) and blitted unchanged by the Pygame
window.  Text labels are left to the window, which has fonts.

Classes:
    ArmRenderer: Draws grid, axes, base, links, joints, load and torque rings.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

import numpy as np

from robotarm_sim.robots.arm_types import JointFrame, Point
from robotarm_sim.utils.constants import (
    ACTUATED_JOINTS,
    COLOR_AXES,
    COLOR_BACKGROUND,
    COLOR_BASE,
    COLOR_GRID,
    COLOR_JOINT,
    COLOR_LOAD,
    COLOR_NO_DATA,
    COLOR_OUTLINE,
    GRID_SPACING,
    LINK_COLORS,
)
from robotarm_sim.visualization.view import ViewTransform

RGB = Tuple[int, int, int]

LINK_WIDTH: float = 6.0
BASE_JOINT_RADIUS: float = 12.0
JOINT_RADIUS: float = 10.0
LOAD_SIZE: float = 24.0
RING_OUTER_RADIUS: float = 25.0
RING_RADIUS_STEP: float = 4.0
RING_WIDTH: float = 3.0
RING_DASH: Tuple[float, float] = (5.0, 3.0)


# ---------------------------------------------------------------------------
# Raster primitives
# ---------------------------------------------------------------------------


def _fill_rect(canvas: np.ndarray, x: float, y: float, w: float, h: float, color: RGB) -> None:
    """Fill an axis-aligned rectangle, clipped to the canvas."""
    height, width = canvas.shape[:2]
    x0, y0 = max(int(round(x)), 0), max(int(round(y)), 0)
    x1, y1 = min(int(round(x + w)), width), min(int(round(y + h)), height)
    if x0 < x1 and y0 < y1:
        canvas[y0:y1, x0:x1] = color


def _stroke_rect(canvas: np.ndarray, x: float, y: float, w: float, h: float, color: RGB) -> None:
    """Draw a 1-px rectangle outline."""
    _fill_rect(canvas, x, y, w, 1, color)
    _fill_rect(canvas, x, y + h - 1, w, 1, color)
    _fill_rect(canvas, x, y, 1, h, color)
    _fill_rect(canvas, x + w - 1, y, 1, h, color)


def _fill_disc(canvas: np.ndarray, cx: float, cy: float, radius: float, color: RGB) -> None:
    """Fill a disc centred on (*cx*, *cy*)."""
    h, w = canvas.shape[:2]
    rr, cc = np.ogrid[:h, :w]
    mask = (rr - cy) ** 2 + (cc - cx) ** 2 < radius**2
    canvas[mask] = color


def _stroke_segment(
    canvas: np.ndarray,
    start: Tuple[float, float],
    end: Tuple[float, float],
    width: float,
    color: RGB,
) -> None:
    """Draw a line segment of the given stroke width.

    Pixels within ``width / 2`` of the segment are painted.  A zero-length
    segment paints nothing.
    """
    (x0, y0), (x1, y1) = start, end
    dx, dy = x1 - x0, y1 - y0
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return
    h, w = canvas.shape[:2]
    rr, cc = np.ogrid[:h, :w]
    t = np.clip(((cc - x0) * dx + (rr - y0) * dy) / length_sq, 0.0, 1.0)
    dist_sq = (cc - (x0 + t * dx)) ** 2 + (rr - (y0 + t * dy)) ** 2
    canvas[dist_sq <= (width / 2) ** 2] = color


def _stroke_ring(
    canvas: np.ndarray,
    cx: float,
    cy: float,
    radius: float,
    width: float,
    color: RGB,
    dash: Tuple[float, float] = RING_DASH,
) -> None:
    """Draw a dashed circle outline (dash and gap measured along the arc)."""
    h, w = canvas.shape[:2]
    rr, cc = np.ogrid[:h, :w]
    dist = np.sqrt((rr - cy) ** 2 + (cc - cx) ** 2)
    on_ring = np.abs(dist - radius) <= width / 2
    arc = (np.arctan2(rr - cy, cc - cx) + math.pi) * radius
    on_dash = np.mod(arc, dash[0] + dash[1]) < dash[0]
    canvas[on_ring & on_dash] = color


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


@dataclass
class ArmRenderer:
    """Draws the arm configuration onto a NumPy canvas.

    Attributes:
        view: Pan/zoom state supplying canvas size and the cm-to-pixel map.
        link_colors: Colour per link name.
    """

    view: ViewTransform = field(default_factory=ViewTransform)
    link_colors: Dict[str, RGB] = field(default_factory=lambda: dict(LINK_COLORS))

    def render(self, frame: JointFrame, ring_colors: Mapping[str, RGB] | None = None) -> np.ndarray:
        """Render one frame of the arm.

        Args:
            frame: Joint positions to draw.
            ring_colors: Torque colour per actuated joint; the neutral colour
                is used for missing joints.

        Returns:
            (H, W, 3) uint8 NumPy array.
        """
        h, w = self.view.canvas_height, self.view.canvas_width
        canvas = np.zeros((h, w, 3), dtype=np.uint8)
        pixels = self.pixel_positions(frame)
        self._draw_background(canvas)
        self._draw_grid(canvas)
        self._draw_axes(canvas)
        self._draw_base(canvas)
        self._draw_links(canvas, pixels)
        self._draw_joints(canvas, pixels)
        self._draw_load(canvas, pixels)
        self._draw_torque_rings(canvas, pixels, ring_colors or {})
        return canvas

    def pixel_positions(self, frame: JointFrame) -> Dict[str, Tuple[float, float]]:
        """Return the canvas pixel position of every labelled point."""
        return {name: self.view.to_pixel(point) for name, point in frame.items()}

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------

    def _draw_background(self, canvas: np.ndarray) -> None:
        canvas[:] = COLOR_BACKGROUND

    def _draw_grid(self, canvas: np.ndarray) -> None:
        """Draw the background grid; it pans with the arm."""
        h, w = canvas.shape[:2]
        tx, ty = self.view.translate_x, self.view.translate_y
        for i in range(h // GRID_SPACING + 1):
            _fill_rect(canvas, tx, i * GRID_SPACING + ty, w, 1, COLOR_GRID)
        for i in range(w // GRID_SPACING + 1):
            _fill_rect(canvas, i * GRID_SPACING + tx, ty, 1, h, COLOR_GRID)

    def _draw_axes(self, canvas: np.ndarray) -> None:
        """Draw the x and y axes through the base joint."""
        h, w = canvas.shape[:2]
        ox, oy = self.view.to_pixel(Point(0.0, 0.0))
        tx, ty = self.view.translate_x, self.view.translate_y
        _fill_rect(canvas, tx, oy, w, 1, COLOR_AXES)
        _fill_rect(canvas, ox, ty, 1, h, COLOR_AXES)

    def _draw_base(self, canvas: np.ndarray) -> None:
        """Draw the fixed base block under M1."""
        ox, oy = self.view.to_pixel(Point(0.0, 0.0))
        _fill_rect(canvas, ox - 50, oy - 10, 80, 30, COLOR_BASE)
        _stroke_rect(canvas, ox - 50, oy - 10, 80, 30, COLOR_OUTLINE)

    def _draw_links(self, canvas: np.ndarray, pixels: Mapping[str, Tuple[float, float]]) -> None:
        segments = (("L1", "M1", "M2"), ("L2", "M2", "M3"), ("L3", "M3", "LOAD"))
        for link, start, end in segments:
            _stroke_segment(canvas, pixels[start], pixels[end], LINK_WIDTH, self.link_colors[link])

    def _draw_joints(self, canvas: np.ndarray, pixels: Mapping[str, Tuple[float, float]]) -> None:
        for joint in ACTUATED_JOINTS:
            radius = BASE_JOINT_RADIUS if joint == "M1" else JOINT_RADIUS
            _fill_disc(canvas, *pixels[joint], radius, COLOR_JOINT)

    def _draw_load(self, canvas: np.ndarray, pixels: Mapping[str, Tuple[float, float]]) -> None:
        lx, ly = pixels["LOAD"]
        half = LOAD_SIZE / 2
        _fill_rect(canvas, lx - half, ly - half, LOAD_SIZE, LOAD_SIZE, COLOR_LOAD)
        _stroke_rect(canvas, lx - half, ly - half, LOAD_SIZE, LOAD_SIZE, COLOR_OUTLINE)

    def _draw_torque_rings(
        self,
        canvas: np.ndarray,
        pixels: Mapping[str, Tuple[float, float]],
        ring_colors: Mapping[str, RGB],
    ) -> None:
        """Draw a dashed ring per actuated joint, shrinking along the chain."""
        for index, joint in enumerate(ACTUATED_JOINTS):
            radius = RING_OUTER_RADIUS - index * RING_RADIUS_STEP
            color = ring_colors.get(joint, COLOR_NO_DATA)
            _stroke_ring(canvas, *pixels[joint], radius, RING_WIDTH, color)
