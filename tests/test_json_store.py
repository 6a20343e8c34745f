"""Tests for JSON snapshot storage."""

import json
from pathlib import Path

import pytest

from profile_sync.adapters.storage import JsonProfileStore
from profile_sync.core import DecodeError


def test_read_missing_file(tmp_path: Path) -> None:
    """Test a missing snapshot reads as None."""
    store = JsonProfileStore()

    assert store.read_if_exists(tmp_path / "profile.json") is None


def test_write_exclusive_refuses_existing(tmp_path: Path) -> None:
    """Test first-time initialization never clobbers a snapshot."""
    store = JsonProfileStore()
    path = tmp_path / "profile.json"

    store.write_exclusive(path, {"activities": []})

    with pytest.raises(FileExistsError):
        store.write_exclusive(path, {"activities": [{"event_id": "1"}]})
    assert store.read_if_exists(path) == {"activities": []}


def test_overwrite_replaces_document(tmp_path: Path) -> None:
    """Test overwrite is unconditional and leaves no temp files."""
    store = JsonProfileStore()
    path = tmp_path / "nested" / "profile.json"

    store.overwrite(path, {"user": {"login": "a"}})
    store.overwrite(path, {"user": {"login": "b"}, "note": "ünïcode"})

    assert store.read_if_exists(path) == {"user": {"login": "b"}, "note": "ünïcode"}
    assert [p.name for p in path.parent.iterdir()] == ["profile.json"]


def test_written_json_is_indented(tmp_path: Path) -> None:
    store = JsonProfileStore()
    path = tmp_path / "profile.json"

    store.write_exclusive(path, {"_$meta": {"schema_version": 1}})

    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "_$meta"')
    assert json.loads(text) == {"_$meta": {"schema_version": 1}}


def test_invalid_json_is_decode_error(tmp_path: Path) -> None:
    """Test a corrupt snapshot is reported instead of silently replaced."""
    path = tmp_path / "profile.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DecodeError):
        JsonProfileStore().read_if_exists(path)


def test_empty_file_reads_as_none(tmp_path: Path) -> None:
    path = tmp_path / "profile.json"
    path.write_text("  \n", encoding="utf-8")

    assert JsonProfileStore().read_if_exists(path) is None
