"""Snapshot storage adapters."""

from profile_sync.adapters.storage.json_store import JsonProfileStore

__all__ = ["JsonProfileStore"]
