"""Toy robot simulator: a robot moved around a table top by text commands."""

__version__ = "1.0.0"