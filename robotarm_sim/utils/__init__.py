"""
Shared constants, logging setup, and helper utilities.

Centralizes joint/link naming, physical constants, default configuration,
recommended input bounds, the colour palette, and small stateless helpers
used across the robotarm_sim package.
"""
