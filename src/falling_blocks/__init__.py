"""Falling Blocks: a terminal falling-block puzzle game with a headless engine."""

__version__ = "0.1.0"
