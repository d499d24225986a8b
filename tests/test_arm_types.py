"""Tests for the immutable arm value types."""

import dataclasses

import pytest

from robotarm_sim.robots.arm_types import AngleSet, JointFrame, LinkSet, MassSet, Point


class TestNamedAccess:
    def test_lookup_by_display_name(self, lengths, masses):
        assert lengths["L3"] == 10.0
        assert masses["LOAD"] == 0.5

    def test_unknown_name_raises(self, lengths):
        with pytest.raises(KeyError):
            lengths["L4"]

    def test_items_follow_chain_order(self, masses):
        assert list(masses.items()) == [("M2", 1.0), ("M3", 0.5), ("LOAD", 0.5)]

    def test_to_dict_uses_display_names(self):
        angles = AngleSet(10.0, 20.0, -5.0)
        assert angles.to_dict() == {"L1": 10.0, "L2": 20.0, "L3": -5.0}


class TestImmutability:
    def test_replace_returns_new_instance(self, lengths):
        longer = lengths.replace("L2", 40.0)
        assert longer.l2 == 40.0
        assert lengths.l2 == 25.0

    def test_fields_are_frozen(self, lengths):
        with pytest.raises(dataclasses.FrozenInstanceError):
            lengths.l1 = 1.0

    def test_defaults_match_reference_pose(self, lengths, angles, masses):
        assert LinkSet() == lengths
        assert AngleSet() == angles
        assert MassSet() == masses


class TestJointFrame:
    def test_as_array_layout(self):
        frame = JointFrame(Point(0, 0), Point(1, 2), Point(3, 4), Point(5, 6))
        assert frame.as_array().tolist() == [[0, 0], [1, 2], [3, 4], [5, 6]]
        assert frame.xs().tolist() == [0, 1, 3, 5]
        assert frame["LOAD"] == Point(5, 6)
