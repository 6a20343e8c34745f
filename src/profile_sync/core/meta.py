"""Versioned metadata envelope stored under ``_$meta``."""

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from profile_sync.core.errors import DecodeError, SchemaVersionMismatch


PROFILE_SCHEMA_VERSION = 1
DEFAULT_AGENT = "profile-sync"

Clock = Callable[[], str]


def utc_now() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class MetaField:
    """Schema version, collection log and ignore-list of a snapshot."""

    agent: str = ""
    github_user: str = ""
    github_repository: str = ""
    ignored_repositories: list[str] = field(default_factory=list)
    schema_version: int = PROFILE_SCHEMA_VERSION
    schema_created_at: str = ""
    schema_collected_ats: list[str] = field(default_factory=list)

    @classmethod
    def fresh(
        cls,
        clock: Clock = utc_now,
        *,
        agent: str = DEFAULT_AGENT,
        github_user: str = "",
        github_repository: str = "",
        ignored_repositories: tuple[str, ...] | list[str] = (),
    ) -> "MetaField":
        """Meta for a snapshot created right now."""
        now = clock()
        return cls(
            agent=agent,
            github_user=github_user,
            github_repository=github_repository,
            ignored_repositories=list(dict.fromkeys(ignored_repositories)),
            schema_version=PROFILE_SCHEMA_VERSION,
            schema_created_at=now,
            schema_collected_ats=[now],
        )


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def validate_version(raw: Any) -> None:
    """Reject documents written with a different schema version.

    An absent or empty version passes; defaulting fills it in later.
    """
    if not isinstance(raw, dict):
        return

    version = raw.get("schema_version")
    if _is_empty(version):
        return

    if isinstance(version, bool) or (isinstance(version, float) and not version.is_integer()):
        raise DecodeError(f"_$meta.schema_version must be an integer, got {version!r}")
    try:
        found = int(version)
    except (TypeError, ValueError):
        raise DecodeError(f"_$meta.schema_version must be an integer, got {version!r}")

    if found != PROFILE_SCHEMA_VERSION:
        raise SchemaVersionMismatch(found, PROFILE_SCHEMA_VERSION)


def apply_meta_defaults(meta: MetaField, raw: Any, clock: Clock = utc_now) -> MetaField:
    """Fill version and timestamps that are absent or empty in ``raw``."""
    raw = raw if isinstance(raw, dict) else {}
    now = None
    changes: dict[str, Any] = {}

    if _is_empty(raw.get("schema_version")):
        changes["schema_version"] = PROFILE_SCHEMA_VERSION

    if _is_empty(raw.get("schema_created_at")):
        now = now or clock()
        changes["schema_created_at"] = now

    if _is_empty(raw.get("schema_collected_ats")):
        now = now or clock()
        changes["schema_collected_ats"] = [now]

    if not changes:
        return meta
    return dataclasses.replace(meta, **changes)


def advance(meta: MetaField, clock: Clock = utc_now) -> MetaField:
    """Record one more successful collection."""
    return dataclasses.replace(
        meta,
        schema_collected_ats=[*meta.schema_collected_ats, clock()],
    )
