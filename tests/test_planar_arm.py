"""Tests for the validated arm configuration owner."""

import logging

import numpy as np
import pytest

from robotarm_sim.robots.arm_types import AngleSet, JointTorque, LinkSet, MassSet
from robotarm_sim.robots.planar_arm import PlanarArm


@pytest.fixture
def arm() -> PlanarArm:
    return PlanarArm()


class TestSetParam:
    def test_accepts_numeric_string(self, arm):
        assert arm.set_param("angles", "L2", "30") is True
        assert arm.angles.l2 == 30.0

    def test_rejects_non_finite_and_keeps_previous(self, arm, caplog):
        with caplog.at_level(logging.WARNING, logger="robotarm_sim.robots.planar_arm"):
            assert arm.set_param("masses", "LOAD", "abc") is False
            assert arm.set_param("masses", "LOAD", float("nan")) is False
        assert arm.masses.load == 0.5
        assert "not a finite number" in caplog.text

    @pytest.mark.parametrize(
        "category, name, value, expected",
        [
            ("angles", "L1", 120.0, 90.0),
            ("angles", "L3", -95.0, -90.0),
            ("lengths", "L1", 2.0, 5.0),
            ("lengths", "L3", 45.0, 30.0),
            ("masses", "M2", 0.0, 0.1),
            ("masses", "M3", 9.0, 5.0),
        ],
    )
    def test_clamps_to_recommended_bounds(self, arm, category, name, value, expected):
        arm.set_param(category, name, value)
        assert arm.get_param(category, name) == expected

    def test_clamping_is_logged_as_warning(self, arm, caplog):
        with caplog.at_level(logging.WARNING, logger="robotarm_sim.robots.planar_arm"):
            arm.set_param("lengths", "L1", 60.0)
        assert arm.lengths.l1 == 50.0
        assert "Clamped lengths.L1 from 60.0 to 50.0" in caplog.text

    def test_clamping_can_be_disabled(self):
        arm = PlanarArm(clamp_inputs=False)
        arm.set_param("angles", "L1", 180.0)
        assert arm.angles.l1 == 180.0

    def test_unknown_category_raises(self, arm):
        with pytest.raises(ValueError, match="Unknown category"):
            arm.set_param("colors", "L1", 1.0)

    def test_unknown_name_raises(self, arm):
        with pytest.raises(ValueError, match="Unknown masses name"):
            arm.set_param("masses", "M1", 1.0)


class TestAngleDeltas:
    def test_apply_deltas(self, arm):
        angles = arm.apply_angle_deltas(np.array([5.0, -10.0, 0.0]))
        assert angles == AngleSet(50.0, -10.0, -45.0)

    def test_deltas_clipped_to_bounds(self, arm):
        arm.apply_angle_deltas(np.array([60.0, 0.0, -60.0]))
        assert arm.angles.l1 == 90.0
        assert arm.angles.l3 == -90.0


class TestResolve:
    def test_default_pose_torques(self, arm):
        torques = arm.torques()
        assert torques.m1 == JointTorque(6.27, 63.91)
        assert torques.m3 == JointTorque(0.35, 3.54)

    def test_recomputes_after_edit(self, arm):
        before = arm.joint_frame()
        arm.set_param("lengths", "L1", 30)
        after = arm.joint_frame()
        assert after.m2.x > before.m2.x
        assert before.m2.x == pytest.approx(25 * np.cos(np.pi / 4))

    def test_reset_restores_defaults(self, arm):
        arm.set_param("masses", "LOAD", 3)
        arm.set_param("angles", "L1", 0)
        arm.reset()
        assert arm.masses == MassSet()
        assert arm.angles == AngleSet()

    def test_reset_with_values(self, arm):
        arm.reset(lengths=LinkSet(10, 10, 10))
        assert arm.lengths == LinkSet(10, 10, 10)
        assert arm.angles == AngleSet()

    def test_get_state_layout(self, arm):
        state = arm.get_state()
        assert state.shape == (9,)
        assert state.tolist() == [45.0, 0.0, -45.0, 25.0, 25.0, 10.0, 1.0, 0.5, 0.5]
