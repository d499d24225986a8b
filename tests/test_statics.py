"""Tests for the static holding-torque resolver."""

import pytest

from robotarm_sim.robots.arm_types import AngleSet, JointTorque, LinkSet, MassSet
from robotarm_sim.robots.kinematics import resolve_kinematics
from robotarm_sim.robots.statics import resolve_torques, signed_torques
from robotarm_sim.utils.constants import GRAVITY, NM_TO_KGFCM


class TestReferencePose:
    def test_golden_torques(self, lengths, angles, masses):
        frame = resolve_kinematics(lengths, angles)
        torques = resolve_torques(frame, masses, lengths)
        assert torques.m1 == JointTorque(nm=6.27, kgfcm=63.91)
        assert torques.m2 == JointTorque(nm=2.80, kgfcm=28.55)
        assert torques.m3 == JointTorque(nm=0.35, kgfcm=3.54)

    def test_signed_torques_match_formulas(self, lengths, angles, masses):
        frame = resolve_kinematics(lengths, angles)
        x2, x3, xl = frame.m2.x / 100, frame.m3.x / 100, frame.load.x / 100
        expected_m3 = masses.load * GRAVITY * (xl - x3)
        expected_m2 = masses.m3 * GRAVITY * (x3 - x2) + masses.load * GRAVITY * (xl - x2)
        expected_m1 = (
            masses.m2 * GRAVITY * x2 + masses.m3 * GRAVITY * x3 + masses.load * GRAVITY * xl
        )
        assert signed_torques(frame, masses) == pytest.approx(
            [expected_m1, expected_m2, expected_m3]
        )

    def test_kgfcm_derived_from_unrounded_torque(self, lengths, angles, masses):
        frame = resolve_kinematics(lengths, angles)
        raw = signed_torques(frame, masses)
        torques = resolve_torques(frame, masses)
        for value, (_, torque) in zip(raw, torques.items()):
            assert torque.kgfcm == round(abs(value) * NM_TO_KGFCM, 2)


class TestInvariants:
    def test_zero_masses_give_zero_torque(self, lengths, angles):
        frame = resolve_kinematics(lengths, angles)
        torques = resolve_torques(frame, MassSet(0.0, 0.0, 0.0), lengths)
        for _, torque in torques.items():
            assert torque.nm == 0.0
            assert torque.kgfcm == 0.0

    def test_load_mass_increases_every_torque(self, lengths, angles):
        frame = resolve_kinematics(lengths, angles)
        previous = None
        for load in (0.5, 1.0, 2.0):
            current = resolve_torques(frame, MassSet(1.0, 0.5, load)).nm_array()
            if previous is not None:
                assert all(current > previous)
            previous = current

    @pytest.mark.parametrize(
        "angles",
        [AngleSet(90, 90, 90), AngleSet(-90, -90, -90), AngleSet(135, 170, 200), AngleSet(10, -80, 60)],
    )
    def test_torques_never_negative(self, lengths, angles, masses):
        frame = resolve_kinematics(lengths, angles)
        for _, torque in resolve_torques(frame, masses).items():
            assert torque.nm >= 0.0
            assert torque.kgfcm >= 0.0

    def test_arm_reaching_backwards_reports_magnitude(self, masses):
        lengths = LinkSet(25.0, 25.0, 10.0)
        forward_frame = resolve_kinematics(lengths, AngleSet(30, 10, -20))
        backward_frame = resolve_kinematics(lengths, AngleSet(150, 170, 200))
        assert signed_torques(backward_frame, masses) == pytest.approx(
            -signed_torques(forward_frame, masses)
        )
        forward = resolve_torques(forward_frame, masses).nm_array()
        backward = resolve_torques(backward_frame, masses).nm_array()
        assert backward == pytest.approx(forward, abs=0.011)

    @pytest.mark.parametrize("angles", [AngleSet(0, 0, 0), AngleSet(30, -60, 15)])
    def test_units_consistent(self, lengths, angles, masses):
        torques = resolve_torques(resolve_kinematics(lengths, angles), masses)
        for _, torque in torques.items():
            assert torque.kgfcm == pytest.approx(torque.nm * NM_TO_KGFCM, abs=0.06)

    def test_vertical_arm_has_no_torque(self, masses):
        frame = resolve_kinematics(LinkSet(25, 25, 10), AngleSet(90, 90, 90))
        torques = resolve_torques(frame, masses)
        assert torques.nm_array() == pytest.approx([0.0, 0.0, 0.0])
