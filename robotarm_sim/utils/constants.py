"""
Shared constants for the robotarm_sim package.

Physical constants, joint/link naming, the default arm configuration, the
recommended input bounds enforced by the configuration layer, and the
canvas / colour defaults used by the renderers.
"""

from __future__ import annotations

from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Physical constants
# ---------------------------------------------------------------------------
GRAVITY: float = 9.81  # m/s^2
NM_TO_KGFCM: float = 10.1972
CM_PER_M: float = 100.0
DISPLAY_DIGITS: int = 2

# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------
JOINT_NAMES: Tuple[str, ...] = ("M1", "M2", "M3", "LOAD")
ACTUATED_JOINTS: Tuple[str, ...] = ("M1", "M2", "M3")
LINK_NAMES: Tuple[str, ...] = ("L1", "L2", "L3")
MASS_NAMES: Tuple[str, ...] = ("M2", "M3", "LOAD")

CATEGORY_LENGTHS: str = "lengths"
CATEGORY_ANGLES: str = "angles"
CATEGORY_MASSES: str = "masses"

# ---------------------------------------------------------------------------
# Default configuration
# ---------------------------------------------------------------------------
DEFAULT_LENGTHS: Dict[str, float] = {"L1": 25.0, "L2": 25.0, "L3": 10.0}
DEFAULT_ANGLES: Dict[str, float] = {"L1": 45.0, "L2": 0.0, "L3": -45.0}
DEFAULT_MASSES: Dict[str, float] = {"M2": 1.0, "M3": 0.5, "LOAD": 0.5}

# ---------------------------------------------------------------------------
# Recommended input bounds (inclusive)
# ---------------------------------------------------------------------------
ANGLE_BOUNDS: Tuple[float, float] = (-90.0, 90.0)
LENGTH_BOUNDS: Dict[str, Tuple[float, float]] = {
    "L1": (5.0, 50.0),
    "L2": (5.0, 50.0),
    "L3": (1.0, 30.0),
}
MASS_BOUNDS: Tuple[float, float] = (0.1, 5.0)
ANGLE_STEP: float = 1.0
MAX_ANGLE_STEP: float = 5.0

# ---------------------------------------------------------------------------
# Canvas / view defaults
# ---------------------------------------------------------------------------
DEFAULT_CANVAS_WIDTH: int = 500
DEFAULT_CANVAS_HEIGHT: int = 220
DEFAULT_PIXELS_PER_CM: float = 5.0
ORIGIN_OFFSET_X: float = -100.0
ORIGIN_OFFSET_Y: float = 50.0
GRID_SPACING: int = 20
ZOOM_MIN: float = 0.5
ZOOM_MAX: float = 2.5
ZOOM_STEP: float = 0.1
DEFAULT_FPS: int = 30

# ---------------------------------------------------------------------------
# Color palette (RGB 0-255)
# ---------------------------------------------------------------------------
COLOR_BACKGROUND: Tuple[int, int, int] = (255, 255, 255)
COLOR_GRID: Tuple[int, int, int] = (238, 238, 238)
COLOR_AXES: Tuple[int, int, int] = (153, 153, 153)
COLOR_BASE: Tuple[int, int, int] = (76, 175, 80)
COLOR_OUTLINE: Tuple[int, int, int] = (51, 51, 51)
COLOR_JOINT: Tuple[int, int, int] = (33, 33, 33)
COLOR_LOAD: Tuple[int, int, int] = (255, 193, 7)
COLOR_TEXT: Tuple[int, int, int] = (0, 0, 0)
COLOR_PANEL: Tuple[int, int, int] = (249, 250, 251)
COLOR_NO_DATA: Tuple[int, int, int] = (76, 175, 80)
LINK_COLORS: Dict[str, Tuple[int, int, int]] = {
    "L1": (255, 87, 34),
    "L2": (33, 150, 243),
    "L3": (156, 39, 176),
}
