"""Shared fixtures: the reference pose used throughout the suite."""

import pytest

from robotarm_sim.robots.arm_types import AngleSet, LinkSet, MassSet


@pytest.fixture
def lengths() -> LinkSet:
    return LinkSet(25.0, 25.0, 10.0)


@pytest.fixture
def angles() -> AngleSet:
    return AngleSet(45.0, 0.0, -45.0)


@pytest.fixture
def masses() -> MassSet:
    return MassSet(1.0, 0.5, 0.5)
