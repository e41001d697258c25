"""Render sorting algorithms as numbered PNG frame sequences."""

__version__ = "0.1.0"
