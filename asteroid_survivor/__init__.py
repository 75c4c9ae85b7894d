"""Arcade survival game: steer a ship through an ever denser asteroid stream."""

__version__ = "0.1.0"
