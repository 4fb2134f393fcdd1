"""Geometry, window, workspace, tag and focus models for a tiling window manager."""

__version__ = "0.1.0"