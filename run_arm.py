#!/usr/bin/env python3
"""
Main entry point for the Planar Robot Arm Statics Simulator.

Computes the joint positions and gravitational holding torques of a 3-link
planar arm and either prints them, opens an interactive window, or drives
the arm from single-character terminal commands.

Usage examples::

    # Print coordinates and torques for the default pose
    python run_arm.py --mode report

    # Custom pose, printed
    python run_arm.py --mode report --angles 30 10 -20 --masses 1 0.5 2

    # Interactive window (drag to pan, wheel to zoom, 1/2/3 + arrows to pose)
    python run_arm.py --mode view

    # Headless control: 1/2/3 select a link, w/s move it, q quits
    python run_arm.py --mode terminal
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence

from robotarm_sim.envs.arm_statics import ArmStaticsEnv
from robotarm_sim.envs.configs import ArmSimConfig
from robotarm_sim.teleop.keyboard_teleop import KeyboardTeleop
from robotarm_sim.utils.constants import LINK_NAMES, MASS_NAMES, MAX_ANGLE_STEP
from robotarm_sim.utils.logging_config import setup_logging
from robotarm_sim.visualization.report import format_report
from robotarm_sim.visualization.visualizer import ArmVisualizer

logger = logging.getLogger("robotarm_sim.run_arm")

# ======================================================================
# Configuration builders
# ======================================================================


def _named(names: Sequence[str], values: Optional[List[float]]) -> Dict[str, float]:
    """Zip CLI values with their display names (empty when not given)."""
    return dict(zip(names, values)) if values is not None else {}


def _build_env_config(args: argparse.Namespace) -> ArmSimConfig:
    """Return the session configuration for the parsed CLI arguments.

    Args:
        args: Namespace from ``argparse``.

    Returns:
        An ``ArmSimConfig`` with CLI overrides applied on top of the defaults.
    """
    cfg = ArmSimConfig(
        fps=args.fps,
        clamp_inputs=not args.no_clamp,
        max_angle_step=max(args.step, MAX_ANGLE_STEP),
    )
    cfg.lengths.update(_named(LINK_NAMES, args.lengths))
    cfg.angles.update(_named(LINK_NAMES, args.angles))
    cfg.masses.update(_named(MASS_NAMES, args.masses))
    return cfg


# ======================================================================
# Mode runners
# ======================================================================


def _run_report(env_cfg: ArmSimConfig, args: argparse.Namespace) -> None:
    """Print the torque and coordinate report for the configured pose.

    Args:
        env_cfg: Session configuration.
        args: Parsed CLI arguments.
    """
    env = ArmStaticsEnv(env_cfg)
    print(format_report(env.frame, env.torques))


def _run_view_loop(env: ArmStaticsEnv, teleop: KeyboardTeleop, viz: ArmVisualizer) -> None:
    """Step the session with teleop actions, rendering every frame.

    Args:
        env: The arm session.
        teleop: Keyboard teleop supplying angle deltas.
        viz: Visualizer instance sharing ``env.view``.
    """
    env.reset()
    alive = True
    while alive:
        env.step(teleop.get_action())
        alive = viz.render_frame(env.render(), env.frame, env.torques, env.ring_colors())


def _run_view(env_cfg: ArmSimConfig, args: argparse.Namespace) -> None:
    """Open the interactive window.

    Args:
        env_cfg: Session configuration.
        args: Parsed CLI arguments.
    """
    env = ArmStaticsEnv(env_cfg)
    teleop = KeyboardTeleop(step_deg=args.step)
    viz = ArmVisualizer(
        canvas_width=env_cfg.canvas_width,
        canvas_height=env_cfg.canvas_height,
        fps=env_cfg.fps,
        view=env.view,
        teleop=teleop,
    )
    try:
        _run_view_loop(env, teleop, viz)
    finally:
        viz.close()
        env.close()


def _run_terminal(env_cfg: ArmSimConfig, args: argparse.Namespace) -> None:
    """Drive the arm from single-character stdin commands.

    Args:
        env_cfg: Session configuration.
        args: Parsed CLI arguments.
    """
    env = ArmStaticsEnv(env_cfg)
    teleop = KeyboardTeleop(step_deg=args.step)
    env.reset()
    print("Terminal mode: 1/2/3 select link, w/s move it, q quits.")
    print(format_report(env.frame, env.torques))
    for line in sys.stdin:
        char = line.strip()[:1]
        if not teleop.process_terminal_input(char):
            break
        env.step(teleop.get_action())
        print(f"\n[{teleop.selected_link}] angles={env.arm.angles.to_dict()}")
        print(format_report(env.frame, env.torques))


# ======================================================================
# CLI
# ======================================================================


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed ``argparse.Namespace``.
    """
    parser = argparse.ArgumentParser(description="Planar Robot Arm Statics Simulator")
    parser.add_argument("--mode", choices=["report", "view", "terminal"], default="report")
    parser.add_argument(
        "--lengths", type=float, nargs=3, metavar=LINK_NAMES, help="link lengths (cm)"
    )
    parser.add_argument(
        "--angles", type=float, nargs=3, metavar=LINK_NAMES, help="link angles (degrees)"
    )
    parser.add_argument(
        "--masses", type=float, nargs=3, metavar=MASS_NAMES, help="point masses (kg)"
    )
    parser.add_argument("--step", type=float, default=1.0, help="degrees per key step")
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument(
        "--no-clamp", action="store_true", help="do not clamp inputs to recommended bounds"
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING"
    )
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


# ======================================================================
# Dispatch
# ======================================================================


# Mapping from mode name to runner function
_MODE_DISPATCH: Dict[str, Callable[[ArmSimConfig, argparse.Namespace], None]] = {
    "report": _run_report,
    "view": _run_view,
    "terminal": _run_terminal,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulator CLI.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when *None*.

    Returns:
        Process exit code.
    """
    args = _parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    env_cfg = _build_env_config(args)
    logger.info("Mode: %s | lengths=%s angles=%s masses=%s",
                args.mode, env_cfg.lengths, env_cfg.angles, env_cfg.masses)
    _MODE_DISPATCH[args.mode](env_cfg, args)
    return 0


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
