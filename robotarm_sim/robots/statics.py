"""
Static gravitational holding torques for the 3-link planar arm.

Only gravity acts, vertically, on point masses at M2, M3 and the load; the
links themselves are massless and there is no friction or motion.  The
torque a joint must hold is the sum, over every mass further along the
chain, of ``mass * g * horizontal_distance``.  Positions are converted
from centimetres to metres before computing, so torques come out in Nm
and are additionally reported in kgf·cm.

Only the magnitude is reported, rounded to two decimals; the rotational
direction of the holding torque is discarded.

Functions:
    signed_torques: Raw signed holding torques in Nm.
    resolve_torques: Rounded torque magnitudes in Nm and kgf·cm.
"""

from __future__ import annotations

import numpy as np

from robotarm_sim.robots.arm_types import (
    JointFrame,
    JointTorque,
    LinkSet,
    MassSet,
    TorqueResult,
)
from robotarm_sim.utils.constants import GRAVITY, NM_TO_KGFCM
from robotarm_sim.utils.helpers import cm_to_m, round_fixed


def _point_masses(masses: MassSet) -> np.ndarray:
    """Return the mass carried at each of M1, M2, M3, LOAD (M1 is zero)."""
    return np.concatenate([[0.0], masses.as_array()])


def signed_torques(frame: JointFrame, masses: MassSet) -> np.ndarray:
    """Compute the signed holding torque at M1, M2 and M3.

    Args:
        frame: Joint positions in centimetres.
        masses: Point masses in kilograms.

    Returns:
        ``(3,)`` array of torques in Nm, in joint order M1, M2, M3.
    """
    xs = cm_to_m(frame.xs())
    weights = _point_masses(masses) * GRAVITY
    torques = np.zeros(3, dtype=np.float64)
    for joint in range(3):
        beyond = slice(joint + 1, None)
        torques[joint] = float(np.sum(weights[beyond] * (xs[beyond] - xs[joint])))
    return torques


def _format_torque(torque_nm: float) -> JointTorque:
    """Round a signed torque into its reported magnitude in both units."""
    magnitude = abs(float(torque_nm))
    return JointTorque(
        nm=round_fixed(magnitude),
        kgfcm=round_fixed(magnitude * NM_TO_KGFCM),
    )


def resolve_torques(
    frame: JointFrame, masses: MassSet, lengths: LinkSet | None = None
) -> TorqueResult:
    """Compute the holding-torque magnitude at every actuated joint.

    Inputs must be finite; callers validate configuration values before
    calling.

    Args:
        frame: Joint positions from ``resolve_kinematics``.
        masses: Point masses in kilograms.
        lengths: Link lengths; accepted for call-site symmetry with the
            kinematics resolver, the positions in *frame* already encode them.

    Returns:
        A ``TorqueResult`` with non-negative values rounded to 2 decimals.
    """
    m1, m2, m3 = (_format_torque(t) for t in signed_torques(frame, masses))
    return TorqueResult(m1=m1, m2=m2, m3=m3)
