"""
Forward kinematics for the 3-link planar arm.

The arm is modelled as three independently-angled link vectors summed
head to tail: every angle is absolute (measured from the global x-axis),
not relative to the previous link.  The y-component is negated so that
the result can be drawn directly in a y-down screen coordinate system;
raising an angle makes the arm visually rise.

Functions:
    link_vectors: Per-link (dx, dy) displacements.
    resolve_kinematics: Joint positions for a lengths/angles configuration.
"""

from __future__ import annotations

import numpy as np

from robotarm_sim.robots.arm_types import AngleSet, JointFrame, LinkSet, Point
from robotarm_sim.utils.helpers import deg_to_rad


def link_vectors(lengths: LinkSet, angles: AngleSet) -> np.ndarray:
    """Compute the displacement contributed by each link.

    Args:
        lengths: Link lengths in centimetres.
        angles: Absolute link angles in degrees.

    Returns:
        ``(3, 2)`` array of ``(dx, dy)`` rows in screen convention.
    """
    rad = deg_to_rad(angles.as_array())
    lens = lengths.as_array()
    dx = np.cos(rad) * lens
    dy = -np.sin(rad) * lens
    return np.stack([dx, dy], axis=1)


def resolve_kinematics(lengths: LinkSet, angles: AngleSet) -> JointFrame:
    """Compute the position of every joint and the load point.

    Pure and deterministic; any real angle is accepted and zero-length
    links simply collapse two joints onto the same point.

    Args:
        lengths: Link lengths in centimetres.
        angles: Absolute link angles in degrees.

    Returns:
        A ``JointFrame`` in the same length unit as *lengths*.
    """
    positions = np.cumsum(link_vectors(lengths, angles), axis=0)
    m2, m3, load = (Point(float(x), float(y)) for x, y in positions)
    return JointFrame(m1=Point(0.0, 0.0), m2=m2, m3=m3, load=load)
