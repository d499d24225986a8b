"""Tests for the forward kinematics resolver."""

import math

import pytest

from robotarm_sim.robots.arm_types import AngleSet, LinkSet, Point
from robotarm_sim.robots.kinematics import link_vectors, resolve_kinematics

HALF_SQRT2 = math.sqrt(2) / 2


class TestBaseAndDegenerateCases:
    @pytest.mark.parametrize(
        "angles", [AngleSet(0, 0, 0), AngleSet(45, 0, -45), AngleSet(-90, 90, 30)]
    )
    def test_base_is_fixed_at_origin(self, lengths, angles):
        frame = resolve_kinematics(lengths, angles)
        assert frame.m1 == Point(0.0, 0.0)

    def test_zero_angles_lay_arm_along_x(self):
        frame = resolve_kinematics(LinkSet(20, 15, 5), AngleSet(0, 0, 0))
        assert frame.m2.as_tuple() == pytest.approx((20.0, 0.0))
        assert frame.m3.as_tuple() == pytest.approx((35.0, 0.0))
        assert frame.load.as_tuple() == pytest.approx((40.0, 0.0))

    def test_zero_length_link_collapses_joints(self):
        frame = resolve_kinematics(LinkSet(0, 25, 10), AngleSet(30, 0, 0))
        assert frame.m2.as_tuple() == pytest.approx((0.0, 0.0))
        assert frame.m3.as_tuple() == pytest.approx((25.0, 0.0))


class TestReferencePose:
    def test_reference_pose_positions(self, lengths, angles):
        frame = resolve_kinematics(lengths, angles)
        a = 25 * HALF_SQRT2
        b = 10 * HALF_SQRT2
        assert frame.m2.as_tuple() == pytest.approx((a, -a))
        assert frame.m3.as_tuple() == pytest.approx((a + 25, -a))
        assert frame.load.as_tuple() == pytest.approx((a + 25 + b, -a + b))

    def test_reference_pose_pinned_to_two_decimals(self, lengths, angles):
        frame = resolve_kinematics(lengths, angles)
        rounded = {name: (round(p.x, 2), round(p.y, 2)) for name, p in frame.items()}
        assert rounded == {
            "M1": (0.0, 0.0),
            "M2": (17.68, -17.68),
            "M3": (42.68, -17.68),
            "LOAD": (49.75, -10.61),
        }

    def test_positive_angle_raises_arm_on_screen(self):
        frame = resolve_kinematics(LinkSet(10, 10, 10), AngleSet(30, 30, 30))
        assert frame.m2.y < 0
        assert frame.load.y < frame.m3.y < frame.m2.y


class TestAbsoluteAngles:
    def test_angles_do_not_accumulate(self):
        frame = resolve_kinematics(LinkSet(10, 10, 10), AngleSet(90, 0, 0))
        # L2 stays horizontal even though L1 points straight up
        assert frame.m2.as_tuple() == pytest.approx((0.0, -10.0), abs=1e-12)
        assert frame.m3.as_tuple() == pytest.approx((10.0, -10.0), abs=1e-12)
        assert frame.load.as_tuple() == pytest.approx((20.0, -10.0), abs=1e-12)

    def test_angles_outside_ui_range(self):
        frame = resolve_kinematics(LinkSet(10, 10, 10), AngleSet(180, 270, -180))
        assert frame.m2.as_tuple() == pytest.approx((-10.0, 0.0), abs=1e-12)
        assert frame.m3.as_tuple() == pytest.approx((-10.0, 10.0), abs=1e-12)
        assert frame.load.as_tuple() == pytest.approx((-20.0, 10.0), abs=1e-12)

    def test_link_vectors_shape_and_lengths(self, lengths, angles):
        vectors = link_vectors(lengths, angles)
        assert vectors.shape == (3, 2)
        norms = [math.hypot(dx, dy) for dx, dy in vectors]
        assert norms == pytest.approx([25.0, 25.0, 10.0])


class TestPurity:
    def test_idempotent_bit_identical(self, lengths, angles):
        first = resolve_kinematics(lengths, angles)
        second = resolve_kinematics(lengths, angles)
        assert first == second
        assert first.as_array().tobytes() == second.as_array().tobytes()

    def test_inputs_not_mutated(self, lengths, angles):
        resolve_kinematics(lengths, angles)
        assert lengths == LinkSet(25.0, 25.0, 10.0)
        assert angles == AngleSet(45.0, 0.0, -45.0)
