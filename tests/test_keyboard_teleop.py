"""Tests for keyboard teleoperation of the arm angles."""

from types import SimpleNamespace

import numpy as np
import pytest

from robotarm_sim.teleop.keyboard_teleop import (
    CMD_QUIT,
    CMD_RESET_VIEW,
    CMD_ZOOM_IN,
    CMD_ZOOM_OUT,
    KeyboardTeleop,
)

# Stand-in for the pygame key constants used by the teleop
FAKE_PG = SimpleNamespace(
    KEYDOWN=1, KEYUP=2,
    K_UP=10, K_DOWN=11, K_1=21, K_2=22, K_3=23,
    K_PLUS=30, K_EQUALS=31, K_KP_PLUS=32, K_MINUS=33, K_KP_MINUS=34,
    K_r=40, K_q=41, K_ESCAPE=42,
)


def _key(event_type: int, key: int) -> SimpleNamespace:
    return SimpleNamespace(type=event_type, key=key)


class TestPygameEvents:
    def test_held_up_key_drives_selected_link(self):
        teleop = KeyboardTeleop(step_deg=2.0)
        teleop.handle_pygame_event(_key(FAKE_PG.KEYDOWN, FAKE_PG.K_2), FAKE_PG)
        teleop.handle_pygame_event(_key(FAKE_PG.KEYDOWN, FAKE_PG.K_UP), FAKE_PG)
        action = teleop.get_action()
        assert action.dtype == np.float32
        assert action.tolist() == [0.0, 2.0, 0.0]
        teleop.handle_pygame_event(_key(FAKE_PG.KEYUP, FAKE_PG.K_UP), FAKE_PG)
        assert teleop.get_action().tolist() == [0.0, 0.0, 0.0]

    def test_down_key_lowers(self):
        teleop = KeyboardTeleop()
        teleop.handle_pygame_event(_key(FAKE_PG.KEYDOWN, FAKE_PG.K_DOWN), FAKE_PG)
        assert teleop.get_action().tolist() == [-1.0, 0.0, 0.0]

    @pytest.mark.parametrize(
        "key, command",
        [
            (FAKE_PG.K_PLUS, CMD_ZOOM_IN),
            (FAKE_PG.K_EQUALS, CMD_ZOOM_IN),
            (FAKE_PG.K_MINUS, CMD_ZOOM_OUT),
            (FAKE_PG.K_r, CMD_RESET_VIEW),
            (FAKE_PG.K_ESCAPE, CMD_QUIT),
            (FAKE_PG.K_q, CMD_QUIT),
        ],
    )
    def test_view_commands(self, key, command):
        teleop = KeyboardTeleop()
        assert teleop.handle_pygame_event(_key(FAKE_PG.KEYDOWN, key), FAKE_PG) == command

    def test_command_only_on_keydown(self):
        teleop = KeyboardTeleop()
        assert teleop.handle_pygame_event(_key(FAKE_PG.KEYUP, FAKE_PG.K_q), FAKE_PG) is None

    def test_non_key_event_ignored(self):
        teleop = KeyboardTeleop()
        assert teleop.handle_pygame_event(SimpleNamespace(type=99), FAKE_PG) is None


class TestTerminalInput:
    def test_select_and_move(self):
        teleop = KeyboardTeleop(step_deg=5.0)
        assert teleop.process_terminal_input("3") is True
        assert teleop.selected_link == "L3"
        teleop.process_terminal_input("s")
        assert teleop.get_action().tolist() == [0.0, 0.0, -5.0]

    def test_each_command_replaces_the_previous(self):
        teleop = KeyboardTeleop()
        teleop.process_terminal_input("w")
        teleop.process_terminal_input("x")
        assert teleop.get_action().tolist() == [0.0, 0.0, 0.0]

    def test_quit(self):
        assert KeyboardTeleop().process_terminal_input("q") is False

    def test_select_out_of_range(self):
        with pytest.raises(ValueError):
            KeyboardTeleop().select(3)
