"""Simulation of a two-sided daytime running light LED controller."""

__version__ = "0.1.0"
__all__ = ["controller", "display", "headlight", "layout", "patterns"]