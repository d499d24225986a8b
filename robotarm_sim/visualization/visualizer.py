"""
Interactive Pygame window for the planar arm.

Blits the rendered arm canvas scaled up into a window, overlays the joint
labels and per-joint torque readouts, and shows a panel with the torque
values, the coordinate table, and the zoom level.  Mouse drag pans, the
mouse wheel zooms, and keyboard events are forwarded to the teleop.

Functions:
    label_positions: Window positions of the joint and torque labels.
    apply_view_command: Apply a teleop view command to a ``ViewTransform``.

Classes:
    ArmVisualizer: Live window rendering and input handling.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from robotarm_sim.robots.arm_types import JointFrame, TorqueResult
from robotarm_sim.teleop.keyboard_teleop import (
    CMD_QUIT,
    CMD_RESET_VIEW,
    CMD_ZOOM_IN,
    CMD_ZOOM_OUT,
    KeyboardTeleop,
)
from robotarm_sim.utils.constants import (
    ACTUATED_JOINTS,
    COLOR_PANEL,
    COLOR_TEXT,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_FPS,
    LINK_COLORS,
)
from robotarm_sim.utils.helpers import format_fixed
from robotarm_sim.visualization.report import COORDINATE_HEADER, coordinate_rows, torque_lines
from robotarm_sim.visualization.view import ViewTransform

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

# Label offsets from the labelled point, in canvas pixels
_JOINT_LABEL_OFFSETS: Dict[str, Tuple[float, float]] = {
    "M1": (-20.0, 30.0),
    "M2": (-20.0, -15.0),
    "M3": (-20.0, -15.0),
    "LOAD": (-15.0, -15.0),
}
_TORQUE_LABEL_OFFSET: Tuple[float, float] = (-40.0, -30.0)


def label_positions(
    pixels: Mapping[str, Tuple[float, float]], window_scale: float
) -> Dict[str, Tuple[int, int]]:
    """Compute window positions for the joint name labels.

    Args:
        pixels: Canvas pixel position per joint name.
        window_scale: Canvas-to-window magnification.

    Returns:
        ``{joint: (x, y)}`` integer window coordinates.
    """
    positions = {}
    for joint, (px, py) in pixels.items():
        dx, dy = _JOINT_LABEL_OFFSETS[joint]
        positions[joint] = (int((px + dx) * window_scale), int((py + dy) * window_scale))
    return positions


def apply_view_command(view: ViewTransform, command: Optional[str]) -> bool:
    """Apply a teleop command to *view*.

    Returns:
        *False* if the command asks to quit, *True* otherwise.
    """
    if command == CMD_QUIT:
        return False
    if command == CMD_ZOOM_IN:
        view.zoom_in()
    elif command == CMD_ZOOM_OUT:
        view.zoom_out()
    elif command == CMD_RESET_VIEW:
        view.reset()
    return True


@dataclass
class ArmVisualizer:
    """Pygame window showing the arm, its torques and its coordinates.

    Attributes:
        canvas_width: Width of the rendered canvas in pixels.
        canvas_height: Height of the rendered canvas in pixels.
        window_scale: Magnification of the canvas in the window.
        panel_height: Height of the numeric panel below the canvas.
        fps: Target frames per second.
        window_title: Caption displayed in the title bar.
        view: Pan/zoom state updated by mouse and key input.
        teleop: Receives keyboard events; *None* disables angle control.
    """

    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    window_scale: int = 2
    panel_height: int = 170
    fps: int = DEFAULT_FPS
    window_title: str = "Robot Arm Simulator"
    view: ViewTransform = field(default_factory=ViewTransform)
    teleop: Optional[KeyboardTeleop] = None
    _screen: Optional[Any] = None
    _clock: Optional[Any] = None
    _fonts: Dict[int, Any] = field(default_factory=dict)

    @property
    def window_size(self) -> Tuple[int, int]:
        """Window (width, height) including the panel."""
        return (
            self.canvas_width * self.window_scale,
            self.canvas_height * self.window_scale + self.panel_height,
        )

    # ------------------------------------------------------------------
    # Initialisation / teardown
    # ------------------------------------------------------------------

    def init_display(self) -> None:
        """Create the Pygame window and clock.

        Raises:
            ImportError: If Pygame is not installed.
        """
        try:
            import pygame
        except ImportError as exc:
            raise ImportError("Pygame required: pip install pygame") from exc
        pygame.init()
        self._screen = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption(self.window_title)
        self._clock = pygame.time.Clock()
        logger.info("Opened %dx%d window", *self.window_size)

    def close(self) -> None:
        """Destroy the Pygame window and quit Pygame."""
        if self._screen is None:
            return
        import pygame

        pygame.quit()
        self._screen = None
        self._clock = None
        self._fonts.clear()

    # ------------------------------------------------------------------
    # Live rendering
    # ------------------------------------------------------------------

    def _font(self, size: int) -> Any:
        import pygame

        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("monospace", size)
        return self._fonts[size]

    def _image_to_surface(self, image: np.ndarray) -> Any:
        """Convert an (H, W, 3) uint8 NumPy image to a Pygame surface."""
        import pygame

        return pygame.surfarray.make_surface(np.transpose(image, (1, 0, 2)))

    def _scale_surface(self, surface: Any) -> Any:
        """Scale the canvas surface up to the window width."""
        import pygame

        return pygame.transform.scale(
            surface,
            (self.canvas_width * self.window_scale, self.canvas_height * self.window_scale),
        )

    def _draw_text(self, text: str, pos: Tuple[int, int], color: RGB = COLOR_TEXT, size: int = 16) -> None:
        rendered = self._font(size).render(text, True, color)
        self._screen.blit(rendered, pos)

    def _draw_joint_labels(self, frame: JointFrame) -> None:
        pixels = {name: self.view.to_pixel(point) for name, point in frame.items()}
        for joint, pos in label_positions(pixels, self.window_scale).items():
            self._draw_text(joint, pos, size=20)

    def _draw_torque_labels(
        self, frame: JointFrame, torques: TorqueResult, ring_colors: Mapping[str, RGB]
    ) -> None:
        """Draw the kgf·cm readout above each actuated joint."""
        dx, dy = _TORQUE_LABEL_OFFSET
        for joint in ACTUATED_JOINTS:
            px, py = self.view.to_pixel(frame[joint])
            pos = (int((px + dx) * self.window_scale), int((py + dy) * self.window_scale))
            text = f"{format_fixed(torques[joint].kgfcm)} kgf·cm"
            self._draw_text(text, pos, ring_colors.get(joint, COLOR_TEXT), size=22)

    def _panel_lines(self, frame: JointFrame) -> List[str]:
        rows = [COORDINATE_HEADER] + coordinate_rows(frame)
        return ["{:<6}{:>10}{:>10}".format(*row) for row in rows]

    def _draw_panel(
        self, frame: JointFrame, torques: TorqueResult, ring_colors: Mapping[str, RGB]
    ) -> None:
        """Draw torque cards, the coordinate table, and the view status."""
        import pygame

        top = self.canvas_height * self.window_scale
        width = self.canvas_width * self.window_scale
        pygame.draw.rect(self._screen, COLOR_PANEL, (0, top, width, self.panel_height))
        for index, (joint, line) in enumerate(zip(ACTUATED_JOINTS, torque_lines(torques))):
            self._draw_text(line, (12, top + 8 + index * 22), ring_colors.get(joint, COLOR_TEXT))
        for index, line in enumerate(self._panel_lines(frame)):
            self._draw_text(line, (width // 2, top + 8 + index * 20))
        status = f"Zoom: {self.view.zoom_percent()}"
        if self.teleop is not None:
            link = self.teleop.selected_link
            self._draw_text(f"Link: {link}", (12, top + 84), LINK_COLORS[link])
            status += "   1/2/3 link  UP/DOWN angle  +/- zoom  R reset  drag pan"
        self._draw_text(status, (12, top + self.panel_height - 26), size=14)

    def render_frame(
        self,
        image: np.ndarray,
        frame: JointFrame,
        torques: TorqueResult,
        ring_colors: Mapping[str, RGB] | None = None,
    ) -> bool:
        """Blit one frame to the window with labels and the numeric panel.

        Args:
            image: (H, W, 3) uint8 RGB canvas from ``ArmRenderer``.
            frame: Joint positions shown in the labels and table.
            torques: Holding torques shown in the readouts.
            ring_colors: Torque colour per actuated joint.

        Returns:
            True if still running, False if the user closed the window.
        """
        if self._screen is None:
            self.init_display()
        colors = ring_colors or {}
        self._screen.blit(self._scale_surface(self._image_to_surface(image)), (0, 0))
        self._draw_joint_labels(frame)
        self._draw_torque_labels(frame, torques, colors)
        self._draw_panel(frame, torques, colors)
        return self._flip_display()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _to_canvas(self, pos: Tuple[int, int]) -> Tuple[float, float]:
        return (pos[0] / self.window_scale, pos[1] / self.window_scale)

    def handle_event(self, event: Any, pygame_module: Any) -> bool:
        """Route one Pygame event to the view or the teleop.

        Returns:
            False when the event asks to quit.
        """
        pg = pygame_module
        if event.type == pg.QUIT:
            return False
        if event.type == pg.MOUSEBUTTONDOWN and event.button == 1:
            self.view.begin_drag(*self._to_canvas(event.pos))
        elif event.type == pg.MOUSEMOTION:
            self.view.drag_to(*self._to_canvas(event.pos))
        elif event.type == pg.MOUSEBUTTONUP and event.button == 1:
            self.view.end_drag()
        elif event.type == pg.MOUSEWHEEL:
            return apply_view_command(self.view, CMD_ZOOM_IN if event.y > 0 else CMD_ZOOM_OUT)
        elif event.type in (pg.KEYDOWN, pg.KEYUP) and self.teleop is not None:
            return apply_view_command(self.view, self.teleop.handle_pygame_event(event, pg))
        return True

    def _pump_events(self) -> bool:
        """Process Pygame events and return False if the user quit."""
        import pygame

        alive = True
        for event in pygame.event.get():
            alive = self.handle_event(event, pygame) and alive
        return alive

    def _flip_display(self) -> bool:
        """Update the display, pump events, and tick the clock."""
        import pygame

        pygame.display.flip()
        alive = self._pump_events()
        if self._clock is not None:
            self._clock.tick(self.fps)
        return alive
