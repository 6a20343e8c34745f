"""Adapters for the remote platform, storage and console."""
