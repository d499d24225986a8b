"""
Keyboard teleoperation of the arm angles.

Translates held arrow keys into per-link angle deltas for the selected
link, and a few single keys into view commands.  A terminal-based fallback
is provided for headless sessions where Pygame is not available.

Classes:
    KeyboardTeleop: Maps keyboard input to angle deltas and view commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from robotarm_sim.utils.constants import ANGLE_STEP, LINK_NAMES

CMD_ZOOM_IN: str = "zoom_in"
CMD_ZOOM_OUT: str = "zoom_out"
CMD_RESET_VIEW: str = "reset_view"
CMD_QUIT: str = "quit"


@dataclass
class KeyboardTeleop:
    """Maps keyboard input to angle deltas for demonstration and inspection.

    Keys ``1``/``2``/``3`` select the link whose angle is driven; while
    ``UP`` or ``DOWN`` is held that angle moves by ``step_deg`` per frame.
    ``+``/``-`` zoom, ``r`` resets the view, ``q`` or ``ESC`` quit.

    Attributes:
        step_deg: Angle change per frame while a key is held (degrees).
        selected: Index of the link currently driven (0 for L1).
        key_state: Tracks which directional keys are currently held.
    """

    step_deg: float = ANGLE_STEP
    selected: int = 0
    key_state: Dict[str, bool] = field(
        default_factory=lambda: {"up": False, "down": False}
    )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def selected_link(self) -> str:
        """Display name of the selected link (``'L1'`` .. ``'L3'``)."""
        return LINK_NAMES[self.selected]

    def select(self, index: int) -> None:
        """Drive link *index* from now on.

        Raises:
            ValueError: If *index* does not address a link.
        """
        if not 0 <= index < len(LINK_NAMES):
            raise ValueError(f"Link index {index} out of range 0..{len(LINK_NAMES) - 1}")
        self.selected = index

    def get_action(self) -> np.ndarray:
        """Return the current per-link angle deltas derived from held keys.

        Returns:
            1-D float32 array of shape ``(3,)``.
        """
        action = np.zeros(len(LINK_NAMES), dtype=np.float32)
        action[self.selected] = self._keys_to_delta()
        return action

    def handle_pygame_event(self, event: object, pygame_module: object) -> Optional[str]:
        """Update state from a Pygame KEYDOWN / KEYUP event.

        Args:
            event: Pygame event object.
            pygame_module: The ``pygame`` module (passed to avoid re-import).

        Returns:
            A view command (``'zoom_in'``, ``'zoom_out'``, ``'reset_view'``,
            ``'quit'``) or *None*.
        """
        pg = pygame_module
        if not hasattr(event, "key"):
            return None
        held = {pg.K_UP: "up", pg.K_DOWN: "down"}
        if event.key in held:
            self.key_state[held[event.key]] = event.type == pg.KEYDOWN
            return None
        if event.type != pg.KEYDOWN:
            return None
        select_keys = {pg.K_1: 0, pg.K_2: 1, pg.K_3: 2}
        if event.key in select_keys:
            self.select(select_keys[event.key])
            return None
        commands = {
            pg.K_PLUS: CMD_ZOOM_IN,
            pg.K_EQUALS: CMD_ZOOM_IN,
            pg.K_KP_PLUS: CMD_ZOOM_IN,
            pg.K_MINUS: CMD_ZOOM_OUT,
            pg.K_KP_MINUS: CMD_ZOOM_OUT,
            pg.K_r: CMD_RESET_VIEW,
            pg.K_q: CMD_QUIT,
            pg.K_ESCAPE: CMD_QUIT,
        }
        return commands.get(event.key)

    def process_terminal_input(self, char: str) -> bool:
        """Update key state from a single-character terminal command.

        Supported characters: ``1``/``2``/``3`` (select link), ``w`` (raise
        angle), ``s`` (lower angle), ``q`` (quit).  Any other character
        leaves the arm still.

        Args:
            char: Single character read from stdin.

        Returns:
            *False* if the quit character was received; *True* otherwise.
        """
        self._reset_key_state()
        if char == "q":
            return False
        if char in ("1", "2", "3"):
            self.select(int(char) - 1)
        elif char == "w":
            self.key_state["up"] = True
        elif char == "s":
            self.key_state["down"] = True
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _keys_to_delta(self) -> float:
        """Convert the current key state to a signed angle delta."""
        delta = 0.0
        if self.key_state["up"]:
            delta += self.step_deg
        if self.key_state["down"]:
            delta -= self.step_deg
        return delta

    def _reset_key_state(self) -> None:
        """Set all directional keys to *False*."""
        for key in self.key_state:
            self.key_state[key] = False
