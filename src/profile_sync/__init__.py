"""Incremental GitHub profile snapshots."""

__version__ = "0.1.0"
