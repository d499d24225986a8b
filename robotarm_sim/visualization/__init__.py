"""
Rendering, torque colouring, pan/zoom state, numeric reports, and the
interactive Pygame window.
"""
