"""
Dataclass configuration for the arm statics session.

Classes:
    ArmSimConfig: Rendering, stepping, and initial-configuration settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from robotarm_sim.utils.constants import (
    DEFAULT_ANGLES,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_FPS,
    DEFAULT_LENGTHS,
    DEFAULT_MASSES,
    DEFAULT_PIXELS_PER_CM,
    MAX_ANGLE_STEP,
)

_OBS_TYPES = ("state", "pixels_state")
_RENDER_MODES = ("rgb_array",)


@dataclass
class ArmSimConfig:
    """Configuration for ``ArmStaticsEnv``.

    Attributes:
        task: Human-readable task identifier.
        fps: Frames per second of the interactive window.
        obs_type: ``'state'`` or ``'pixels_state'`` (adds rendered pixels).
        render_mode: Gymnasium render mode; only ``'rgb_array'``.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        pixels_per_cm: Drawing scale at zoom 1.
        max_angle_step: Largest per-step angle change accepted (degrees).
        max_episode_steps: Truncate after this many steps; *None* never truncates.
        clamp_inputs: Clamp edits to the recommended input bounds.
        lengths: Initial link lengths (cm) by display name.
        angles: Initial link angles (degrees) by display name.
        masses: Initial point masses (kg) by display name.
    """

    task: str = "ArmStatics-v0"
    fps: int = DEFAULT_FPS
    obs_type: str = "state"
    render_mode: str = "rgb_array"
    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    pixels_per_cm: float = DEFAULT_PIXELS_PER_CM
    max_angle_step: float = MAX_ANGLE_STEP
    max_episode_steps: Optional[int] = None
    clamp_inputs: bool = True
    lengths: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_LENGTHS))
    angles: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_ANGLES))
    masses: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_MASSES))

    def __post_init__(self) -> None:
        """Validate enumerated and size settings.

        Raises:
            ValueError: On an unknown obs type or render mode, or a
                non-positive size, scale, fps or angle step.
        """
        if self.obs_type not in _OBS_TYPES:
            raise ValueError(f"Unknown obs_type '{self.obs_type}'. Choose from {list(_OBS_TYPES)}")
        if self.render_mode not in _RENDER_MODES:
            raise ValueError(
                f"Unknown render_mode '{self.render_mode}'. Choose from {list(_RENDER_MODES)}"
            )
        positive = {
            "canvas_width": self.canvas_width,
            "canvas_height": self.canvas_height,
            "pixels_per_cm": self.pixels_per_cm,
            "fps": self.fps,
            "max_angle_step": self.max_angle_step,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
