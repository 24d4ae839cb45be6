"""Bezier path trajectories and inverse kinematics for a two-link SCARA plotter arm."""

__version__ = "0.2.0"