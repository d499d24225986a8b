"""
Numeric display of joint coordinates and holding torques.

Formats a ``JointFrame`` and a ``TorqueResult`` into the 2-decimal text
shown in the window panel and printed by the command-line runner.
"""

from __future__ import annotations

from typing import List, Tuple

from robotarm_sim.robots.arm_types import JointFrame, TorqueResult
from robotarm_sim.utils.helpers import format_fixed

COORDINATE_HEADER: Tuple[str, str, str] = ("Joint", "X (cm)", "Y (cm)")


def coordinate_rows(frame: JointFrame) -> List[Tuple[str, str, str]]:
    """Return ``(joint, x, y)`` rows with 2-decimal coordinates."""
    return [(name, format_fixed(p.x), format_fixed(p.y)) for name, p in frame.items()]


def torque_lines(torques: TorqueResult) -> List[str]:
    """Return one ``'M1: 6.27 Nm | 63.91 kgf·cm'`` line per actuated joint."""
    return [
        f"{joint}: {format_fixed(t.nm)} Nm | {format_fixed(t.kgfcm)} kgf·cm"
        for joint, t in torques.items()
    ]


def _format_table(rows: List[Tuple[str, str, str]]) -> List[str]:
    table = [COORDINATE_HEADER] + rows
    widths = [max(len(row[col]) for row in table) for col in range(3)]
    lines = []
    for row in table:
        cells = [row[0].ljust(widths[0])] + [
            cell.rjust(width) for cell, width in zip(row[1:], widths[1:])
        ]
        lines.append("  ".join(cells))
    return lines


def format_report(frame: JointFrame, torques: TorqueResult) -> str:
    """Render the full torque and coordinate report as plain text.

    Args:
        frame: Joint positions.
        torques: Holding torques.

    Returns:
        Multi-line string.
    """
    lines = ["Joint torques"]
    lines += [f"  {line}" for line in torque_lines(torques)]
    lines.append("")
    lines.append("Coordinates")
    lines += [f"  {line}" for line in _format_table(coordinate_rows(frame))]
    return "\n".join(lines)
