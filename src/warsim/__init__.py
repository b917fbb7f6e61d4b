"""Deterministic two-player War simulator."""

__version__ = "0.1.0"
