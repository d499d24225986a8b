"""
Interactive arm statics session (Gymnasium-compatible).

Each step applies per-link angle deltas to the arm, recomputes joint
positions and holding torques from scratch, and folds the torques into
the session's running maximum used for colouring.  Observations follow
the dictionary layout used across the simulator.

Classes:
    ArmStaticsEnv: Gymnasium environment wrapping a ``PlanarArm``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from robotarm_sim.envs.configs import ArmSimConfig
from robotarm_sim.robots.arm_types import JointFrame, TorqueResult
from robotarm_sim.robots.planar_arm import PlanarArm
from robotarm_sim.utils.constants import (
    CATEGORY_ANGLES,
    CATEGORY_LENGTHS,
    CATEGORY_MASSES,
)
from robotarm_sim.visualization.renderer import ArmRenderer
from robotarm_sim.visualization.torque_colors import TorqueColorScale
from robotarm_sim.visualization.view import ViewTransform

logger = logging.getLogger(__name__)


class ArmStaticsEnv(gym.Env):
    """Gymnasium environment for posing the 3-link planar arm.

    The action is a vector of three angle deltas in degrees (L1, L2, L3).
    The reward is the negated total holding torque in Nm, so poses that
    need less actuator effort score higher.  Episodes never terminate and
    only truncate when ``max_episode_steps`` is configured.

    The running maximum torque belongs to the session: ``reset`` restores
    the arm configuration but keeps it, a new environment starts from zero.

    Attributes:
        metadata: Gymnasium metadata with supported render modes.
        cfg: ``ArmSimConfig`` controlling rendering and the initial pose.
        arm: The arm configuration owner.
        view: Pan/zoom state of the canvas.
        color_scale: Session running maximum per joint.
    """

    metadata: Dict[str, Any] = {"render_modes": ["rgb_array"]}

    def __init__(self, cfg: ArmSimConfig | None = None) -> None:
        """Initialise the session.

        Args:
            cfg: Optional configuration; a default ``ArmSimConfig`` is used
                when *None*.
        """
        super().__init__()
        self.cfg = cfg or ArmSimConfig()
        self.render_mode = self.cfg.render_mode
        self.arm = PlanarArm(clamp_inputs=self.cfg.clamp_inputs)
        self.view = ViewTransform(
            canvas_width=self.cfg.canvas_width,
            canvas_height=self.cfg.canvas_height,
            pixels_per_cm=self.cfg.pixels_per_cm,
        )
        self.renderer = ArmRenderer(view=self.view)
        self.color_scale = TorqueColorScale()
        self._step_count = 0
        self._init_spaces()
        self._reset_arm()

    # ------------------------------------------------------------------
    # Initialisation helpers (called by __init__)
    # ------------------------------------------------------------------

    def _init_spaces(self) -> None:
        """Define action and observation Gymnasium spaces."""
        step = self.cfg.max_angle_step
        self.action_space = spaces.Box(low=-step, high=step, shape=(3,), dtype=np.float32)
        obs_dict: Dict[str, spaces.Space] = {
            "joint_pos": spaces.Box(low=-np.inf, high=np.inf, shape=(8,), dtype=np.float64),
            "angles": spaces.Box(low=-np.inf, high=np.inf, shape=(3,), dtype=np.float64),
            "torques": spaces.Box(low=0.0, high=np.inf, shape=(3,), dtype=np.float64),
        }
        if "pixels" in self.cfg.obs_type:
            h, w = self.cfg.canvas_height, self.cfg.canvas_width
            obs_dict["pixels"] = spaces.Box(low=0, high=255, shape=(h, w, 3), dtype=np.uint8)
        self.observation_space = spaces.Dict(obs_dict)

    def _reset_arm(self) -> None:
        """Restore the configured initial pose through the input validation."""
        self.arm.reset()
        initial = {
            CATEGORY_LENGTHS: self.cfg.lengths,
            CATEGORY_ANGLES: self.cfg.angles,
            CATEGORY_MASSES: self.cfg.masses,
        }
        for category, values in initial.items():
            for name, value in values.items():
                self.arm.set_param(category, name, value)
        self._recompute()

    # ------------------------------------------------------------------
    # Gymnasium API
    # ------------------------------------------------------------------

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """Restore the initial pose and return the first observation.

        Args:
            seed: Passed to Gymnasium; the session has no randomness.
            options: Optional ``{'lengths'|'angles'|'masses': {name: value}}``
                edits applied after restoring the initial pose.

        Returns:
            Tuple of (observation dict, info dict).
        """
        super().reset(seed=seed)
        self._step_count = 0
        self._reset_arm()
        for category, values in (options or {}).items():
            for name, value in values.items():
                self.arm.set_param(category, name, value)
        self._recompute()
        return self._build_observation(), self._build_info()

    def step(
        self, action: np.ndarray
    ) -> Tuple[Dict[str, np.ndarray], float, bool, bool, Dict[str, Any]]:
        """Apply angle deltas and recompute the arm.

        Args:
            action: Per-link angle deltas in degrees, clipped to the
                action space.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        deltas = np.clip(
            np.asarray(action, dtype=np.float64), self.action_space.low, self.action_space.high
        )
        self.arm.apply_angle_deltas(deltas)
        self._step_count += 1
        self._recompute()
        reward = -float(np.sum(self._torques.nm_array()))
        limit = self.cfg.max_episode_steps
        truncated = limit is not None and self._step_count >= limit
        return self._build_observation(), reward, False, truncated, self._build_info()

    def set_param(self, category: str, name: str, value: Any) -> bool:
        """Edit one length, angle or mass and recompute.

        Returns:
            *True* if the value was accepted.

        Raises:
            ValueError: If *category* or *name* is unknown.
        """
        accepted = self.arm.set_param(category, name, value)
        if accepted:
            self._recompute()
        return accepted

    @property
    def frame(self) -> JointFrame:
        """Joint positions of the current configuration."""
        return self._frame

    @property
    def torques(self) -> TorqueResult:
        """Holding torques of the current configuration."""
        return self._torques

    def ring_colors(self) -> Dict[str, Tuple[int, int, int]]:
        """Torque colour of each actuated joint against the running maximum."""
        return self.color_scale.colors(self._torques)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _recompute(self) -> None:
        """Resolve frame and torques fresh and update the running maximum."""
        self._frame = self.arm.joint_frame()
        self._torques = self.arm.torques(self._frame)
        self.color_scale.observe(self._torques)
        logger.debug(
            "Recomputed pose angles=%s torques=%s",
            self.arm.angles.to_dict(),
            self._torques.nm_array().tolist(),
        )

    def _build_observation(self) -> Dict[str, np.ndarray]:
        """Assemble the observation dictionary.

        Returns:
            Dictionary with ``'joint_pos'``, ``'angles'``, ``'torques'`` and
            optionally ``'pixels'``.
        """
        obs: Dict[str, np.ndarray] = {
            "joint_pos": self._frame.as_array().reshape(-1),
            "angles": self.arm.angles.as_array(),
            "torques": self._torques.nm_array(),
        }
        if "pixels" in self.cfg.obs_type:
            obs["pixels"] = self.render()
        return obs

    def _build_info(self) -> Dict[str, Any]:
        return {
            "frame": self._frame,
            "torques": self._torques,
            "ring_colors": self.ring_colors(),
            "running_max": dict(self.color_scale.running_max),
        }

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> np.ndarray:
        """Render the current configuration as an RGB image.

        Returns:
            (H, W, 3) uint8 NumPy array.
        """
        return self.renderer.render(self._frame, self.ring_colors())
