"""
Session-relative torque colouring.

Each actuated joint's torque is mapped onto a green-to-red gradient where
red is the highest torque observed for that joint so far in the session.
The running maximum starts at zero and only ever grows; a new session
starts from a fresh scale.

Functions:
    torque_color: Colour for a torque given an explicit running maximum.

Classes:
    TorqueColorScale: Running maximum per joint plus colour lookup.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from robotarm_sim.robots.arm_types import TorqueResult
from robotarm_sim.utils.constants import ACTUATED_JOINTS, COLOR_NO_DATA
from robotarm_sim.utils.helpers import clamp

RGB = Tuple[int, int, int]


def torque_color(torque_nm: float, running_max: float) -> RGB:
    """Map a torque onto the green-to-red gradient.

    Args:
        torque_nm: Current torque magnitude (Nm).
        running_max: Highest torque seen so far for the same joint.

    Returns:
        ``(r, g, 0)``; the neutral no-data colour while *running_max* is 0.
    """
    if running_max == 0:
        return COLOR_NO_DATA
    ratio = torque_nm / running_max
    r = min(255, math.floor(255 * ratio))
    g = min(255, math.floor(255 * (1 - ratio)))
    return (int(clamp(r, 0, 255)), int(clamp(g, 0, 255)), 0)


@dataclass
class TorqueColorScale:
    """Tracks the running maximum torque per joint for colour scaling.

    Attributes:
        running_max: Highest Nm value observed per actuated joint.
    """

    running_max: Dict[str, float] = field(
        default_factory=lambda: {joint: 0.0 for joint in ACTUATED_JOINTS}
    )

    def observe(self, torques: TorqueResult) -> Dict[str, float]:
        """Fold a new result into the running maxima.

        Args:
            torques: Latest torque result.

        Returns:
            A copy of the updated running maxima.
        """
        for joint, torque in torques.items():
            self.running_max[joint] = max(self.running_max[joint], torque.nm)
        return dict(self.running_max)

    def color_for(self, joint: str, torque_nm: float) -> RGB:
        """Return the gradient colour of *torque_nm* at *joint*."""
        return torque_color(torque_nm, self.running_max[joint])

    def colors(self, torques: TorqueResult) -> Dict[str, RGB]:
        """Return the colour of every joint in *torques*."""
        return {joint: self.color_for(joint, t.nm) for joint, t in torques.items()}
