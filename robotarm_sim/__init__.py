"""
Planar Robot Arm Statics Simulator.

Visualizes a 3-link planar robotic arm: forward kinematics turns link
lengths and absolute joint angles into joint positions, a statics solver
derives the gravitational holding torque at every actuated joint, and a
Gymnasium-compatible session renders the configuration interactively.

Modules:
    robots: Arm data model, kinematics and statics resolvers, and the
        configuration owner that validates user input.
    envs: Gymnasium-compatible interactive session around the arm.
    teleop: Keyboard control of the joint angles and the view.
    visualization: Raster rendering, torque colouring, pan/zoom state,
        numeric reports, and the Pygame window.
    utils: Shared constants, logging setup, and helper utilities.
"""

__version__ = "0.1.0"
