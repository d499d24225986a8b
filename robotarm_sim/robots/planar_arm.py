"""
Configuration owner for the simulated 3-link planar arm.

Holds the current lengths, angles and masses, validates every user edit
before it can reach the resolvers, and recomputes joint positions and
holding torques on demand.  Non-numeric or non-finite input is rejected
and the previous value kept; accepted values are clamped to the
recommended input bounds.

Classes:
    PlanarArm: The arm configuration and its resolver front-end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np

from robotarm_sim.robots.arm_types import (
    AngleSet,
    JointFrame,
    LinkSet,
    MassSet,
    TorqueResult,
)
from robotarm_sim.robots.kinematics import resolve_kinematics
from robotarm_sim.robots.statics import resolve_torques
from robotarm_sim.utils.constants import (
    ANGLE_BOUNDS,
    CATEGORY_ANGLES,
    CATEGORY_LENGTHS,
    CATEGORY_MASSES,
    LENGTH_BOUNDS,
    LINK_NAMES,
    MASS_BOUNDS,
    MASS_NAMES,
)
from robotarm_sim.utils.helpers import clamp, coerce_finite

logger = logging.getLogger(__name__)


def _bounds_for(category: str, name: str) -> Tuple[float, float]:
    """Return the recommended (lo, hi) bounds for one parameter."""
    if category == CATEGORY_LENGTHS:
        return LENGTH_BOUNDS[name]
    if category == CATEGORY_ANGLES:
        return ANGLE_BOUNDS
    return MASS_BOUNDS


_VALID_NAMES: Dict[str, Tuple[str, ...]] = {
    CATEGORY_LENGTHS: LINK_NAMES,
    CATEGORY_ANGLES: LINK_NAMES,
    CATEGORY_MASSES: MASS_NAMES,
}


@dataclass
class PlanarArm:
    """A 3-link planar arm configuration with validated editing.

    The arm itself keeps no derived state: ``joint_frame`` and ``torques``
    call the pure resolvers fresh every time.

    Attributes:
        lengths: Current link lengths (cm).
        angles: Current absolute link angles (degrees).
        masses: Current point masses (kg).
        clamp_inputs: Clamp accepted values to the recommended bounds.
    """

    lengths: LinkSet = field(default_factory=LinkSet)
    angles: AngleSet = field(default_factory=AngleSet)
    masses: MassSet = field(default_factory=MassSet)
    clamp_inputs: bool = True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reset(
        self,
        lengths: Optional[LinkSet] = None,
        angles: Optional[AngleSet] = None,
        masses: Optional[MassSet] = None,
    ) -> None:
        """Restore the default configuration, or the values given.

        Args:
            lengths: Optional replacement link lengths.
            angles: Optional replacement angles.
            masses: Optional replacement masses.
        """
        self.lengths = lengths if lengths is not None else LinkSet()
        self.angles = angles if angles is not None else AngleSet()
        self.masses = masses if masses is not None else MassSet()

    def get_param(self, category: str, name: str) -> float:
        """Return the current value of one parameter.

        Raises:
            ValueError: If *category* or *name* is unknown.
        """
        self._validate_key(category, name)
        return self._values_for(category)[name]

    def set_param(self, category: str, name: str, value: Any) -> bool:
        """Update a single length, angle or mass from raw user input.

        Args:
            category: One of ``'lengths'``, ``'angles'``, ``'masses'``.
            name: Display name within the category (``'L1'``, ``'LOAD'``, ...).
            value: Number or numeric string.

        Returns:
            *True* if the value was accepted, *False* if it was rejected
            (non-numeric or non-finite) and the previous value kept.

        Raises:
            ValueError: If *category* or *name* is unknown.
        """
        self._validate_key(category, name)
        parsed = coerce_finite(value)
        if parsed is None:
            logger.warning("Rejected %s.%s=%r: not a finite number", category, name, value)
            return False
        if self.clamp_inputs:
            lo, hi = _bounds_for(category, name)
            clamped = clamp(parsed, lo, hi)
            if clamped != parsed:
                logger.warning("Clamped %s.%s from %s to %s", category, name, parsed, clamped)
            parsed = clamped
        self._store(category, self._values_for(category).replace(name, parsed))
        logger.debug("Set %s.%s=%s", category, name, parsed)
        return True

    def apply_angle_deltas(self, deltas: np.ndarray) -> AngleSet:
        """Add per-link angle deltas (degrees) and enforce the angle bounds.

        Args:
            deltas: Array of length 3 with the L1, L2, L3 increments.

        Returns:
            The updated ``AngleSet``.
        """
        raw = self.angles.as_array() + np.asarray(deltas, dtype=np.float64)[:3]
        if self.clamp_inputs:
            raw = np.clip(raw, ANGLE_BOUNDS[0], ANGLE_BOUNDS[1])
        self.angles = AngleSet(*(float(a) for a in raw))
        return self.angles

    def joint_frame(self) -> JointFrame:
        """Resolve the joint positions for the current configuration."""
        return resolve_kinematics(self.lengths, self.angles)

    def torques(self, frame: Optional[JointFrame] = None) -> TorqueResult:
        """Resolve the holding torques for the current configuration.

        Args:
            frame: Pre-computed joint positions; resolved when *None*.
        """
        resolved = frame if frame is not None else self.joint_frame()
        return resolve_torques(resolved, self.masses, self.lengths)

    def get_state(self) -> np.ndarray:
        """Return angles (3), lengths (3) and masses (3) as one flat vector.

        Returns:
            1-D NumPy array of shape ``(9,)``.
        """
        return np.concatenate(
            [self.angles.as_array(), self.lengths.as_array(), self.masses.as_array()]
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_key(category: str, name: str) -> None:
        """Raise if *category* / *name* does not address a parameter."""
        if category not in _VALID_NAMES:
            raise ValueError(
                f"Unknown category '{category}'. Choose from {list(_VALID_NAMES)}"
            )
        if name not in _VALID_NAMES[category]:
            raise ValueError(
                f"Unknown {category} name '{name}'. Choose from {list(_VALID_NAMES[category])}"
            )

    def _values_for(self, category: str) -> Any:
        return {
            CATEGORY_LENGTHS: self.lengths,
            CATEGORY_ANGLES: self.angles,
            CATEGORY_MASSES: self.masses,
        }[category]

    def _store(self, category: str, values: Any) -> None:
        if category == CATEGORY_LENGTHS:
            self.lengths = values
        elif category == CATEGORY_ANGLES:
            self.angles = values
        else:
            self.masses = values
