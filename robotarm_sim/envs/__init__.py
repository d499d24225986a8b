"""
Gymnasium-compatible interactive session for the planar arm.
"""

from robotarm_sim.envs.arm_statics import ArmStaticsEnv
from robotarm_sim.envs.configs import ArmSimConfig

__all__ = [
    "ArmStaticsEnv",
    "ArmSimConfig",
]
