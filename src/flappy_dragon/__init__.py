"""Flappy Dragon: a side-scrolling reflex arcade game."""

__version__ = "0.1.0"
