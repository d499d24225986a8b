"""
Keyboard control of the arm's joint angles and of the canvas view.
"""
