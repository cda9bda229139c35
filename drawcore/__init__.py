"""Tolerances, error texts, call logging, animation, shapes, commands, jigs, viewing and an engine for a 3D drawing editor."""

__version__ = "0.1.0"