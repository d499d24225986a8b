"""
Immutable value types for the planar arm.

Every configuration change produces fresh instances; nothing here is
mutated in place.  Field names are lowercase, display names (``"L1"``,
``"M2"``, ``"LOAD"``) are accepted for lookup so that UI and CLI code can
address values the way they are labelled on screen.

Classes:
    LinkSet: Link lengths in centimetres.
    AngleSet: Absolute link angles in degrees.
    MassSet: Point masses in kilograms.
    Point: A 2-D position in centimetres (screen convention, y down).
    JointFrame: Positions of M1, M2, M3 and LOAD.
    JointTorque: Holding-torque magnitude in Nm and kgf·cm.
    TorqueResult: Holding torques of the actuated joints M1, M2, M3.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterator, Tuple

import numpy as np

from robotarm_sim.utils.constants import (
    ACTUATED_JOINTS,
    DEFAULT_ANGLES,
    DEFAULT_LENGTHS,
    DEFAULT_MASSES,
    JOINT_NAMES,
    LINK_NAMES,
    MASS_NAMES,
)


class _NamedFields:
    """Mixin mapping display names onto dataclass fields.

    Subclasses set ``_names`` to the display names, in field order.
    """

    _names: Tuple[str, ...] = ()

    def _field_for(self, name: str) -> str:
        if name not in self._names:
            raise KeyError(f"Unknown name '{name}'. Choose from {list(self._names)}")
        return name.lower()

    def __getitem__(self, name: str) -> Any:
        return getattr(self, self._field_for(name))

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Iterate ``(display_name, value)`` pairs in chain order."""
        for name in self._names:
            yield name, self[name]

    def to_dict(self) -> dict:
        """Return a ``{display_name: value}`` dictionary."""
        return dict(self.items())

    def replace(self, name: str, value: Any) -> Any:
        """Return a copy with the value for *name* replaced.

        Raises:
            KeyError: If *name* is not one of the display names.
        """
        return dataclasses.replace(self, **{self._field_for(name): value})


@dataclass(frozen=True)
class LinkSet(_NamedFields):
    """Link lengths in centimetres.

    Attributes:
        l1: Base-to-M2 link.
        l2: M2-to-M3 link.
        l3: M3-to-load link.
    """

    l1: float = DEFAULT_LENGTHS["L1"]
    l2: float = DEFAULT_LENGTHS["L2"]
    l3: float = DEFAULT_LENGTHS["L3"]

    _names = LINK_NAMES

    def as_array(self) -> np.ndarray:
        return np.array([self.l1, self.l2, self.l3], dtype=np.float64)


@dataclass(frozen=True)
class AngleSet(_NamedFields):
    """Absolute link angles in degrees, measured from the global x-axis.

    Each angle is independent of the previous link's orientation.
    """

    l1: float = DEFAULT_ANGLES["L1"]
    l2: float = DEFAULT_ANGLES["L2"]
    l3: float = DEFAULT_ANGLES["L3"]

    _names = LINK_NAMES

    def as_array(self) -> np.ndarray:
        return np.array([self.l1, self.l2, self.l3], dtype=np.float64)


@dataclass(frozen=True)
class MassSet(_NamedFields):
    """Point masses in kilograms at M2, M3 and the load.

    The base joint M1 carries no mass.
    """

    m2: float = DEFAULT_MASSES["M2"]
    m3: float = DEFAULT_MASSES["M3"]
    load: float = DEFAULT_MASSES["LOAD"]

    _names = MASS_NAMES

    def as_array(self) -> np.ndarray:
        return np.array([self.m2, self.m3, self.load], dtype=np.float64)


@dataclass(frozen=True)
class Point:
    """A position in centimetres; y grows downward (screen convention)."""

    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class JointFrame(_NamedFields):
    """Computed positions of every labelled point along the arm.

    Attributes:
        m1: Base joint, always at the origin.
        m2: Elbow joint.
        m3: Wrist joint.
        load: End load point.
    """

    m1: Point
    m2: Point
    m3: Point
    load: Point

    _names = JOINT_NAMES

    def as_array(self) -> np.ndarray:
        """Return the positions as a ``(4, 2)`` array in chain order."""
        return np.array([p.as_tuple() for _, p in self.items()], dtype=np.float64)

    def xs(self) -> np.ndarray:
        """Return the x-coordinates as a ``(4,)`` array in chain order."""
        return self.as_array()[:, 0]


@dataclass(frozen=True)
class JointTorque:
    """Holding-torque magnitude at one joint, rounded to display precision.

    Attributes:
        nm: Torque in newton-metres.
        kgfcm: Torque in kilogram-force centimetres.
    """

    nm: float = 0.0
    kgfcm: float = 0.0


@dataclass(frozen=True)
class TorqueResult(_NamedFields):
    """Holding torques at the actuated joints M1, M2 and M3."""

    m1: JointTorque
    m2: JointTorque
    m3: JointTorque

    _names = ACTUATED_JOINTS

    def nm_array(self) -> np.ndarray:
        """Return the Nm magnitudes as a ``(3,)`` array."""
        return np.array([t.nm for _, t in self.items()], dtype=np.float64)
