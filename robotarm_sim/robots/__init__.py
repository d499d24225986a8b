"""
Planar 3-link arm model: data types, kinematics and statics resolvers.

Provides the immutable configuration and result types, the two pure
resolvers that turn a configuration into joint positions and holding
torques, and the ``PlanarArm`` configuration owner.
"""
