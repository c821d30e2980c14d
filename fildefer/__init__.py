"""Isometric wireframe rendering of .fdf height maps into in-memory images."""

__version__ = "0.1.0"