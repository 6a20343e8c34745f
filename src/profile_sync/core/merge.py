"""Combine a previous snapshot with freshly fetched data."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Iterable

from profile_sync.core.errors import SchemaVersionMismatch
from profile_sync.core.events import GithubEvent
from profile_sync.core.meta import PROFILE_SCHEMA_VERSION, Clock, MetaField, advance, utc_now

if TYPE_CHECKING:
    from profile_sync.core.profile import Profile


def union_ordered(*groups: Iterable[str]) -> list[str]:
    """Union of string groups, keeping first-seen order."""
    return list(dict.fromkeys(item for group in groups for item in group))


def merge_events(fresh: list[GithubEvent], previous: list[GithubEvent]) -> list[GithubEvent]:
    """Deduplicate events by id, fresh copies first.

    Events without an id are dropped since they cannot be matched across runs.
    """
    seen: set[str] = set()
    merged: list[GithubEvent] = []
    for event in [*fresh, *previous]:
        if not event.event_id or event.event_id in seen:
            continue
        seen.add(event.event_id)
        merged.append(event)
    return merged


def merge_meta(
    previous: MetaField,
    fresh: MetaField,
    requested_ignores: Iterable[str],
    clock: Clock = utc_now,
) -> MetaField:
    """Roll the previous meta forward by one collection."""
    meta = advance(previous, clock)
    return dataclasses.replace(
        meta,
        ignored_repositories=union_ordered(requested_ignores, previous.ignored_repositories),
        github_user=previous.github_user or fresh.github_user,
        agent=fresh.agent or previous.agent,
    )


def merge(
    previous: Profile,
    fresh: Profile,
    requested_ignores: Iterable[str] = (),
    clock: Clock = utc_now,
) -> Profile:
    """Merge ``fresh`` into ``previous`` and return the new snapshot.

    Identity, languages and repositories come from ``fresh``; activities are
    the deduplicated union of both; meta is rolled forward from ``previous``.
    """
    version = previous.meta.schema_version
    if version != PROFILE_SCHEMA_VERSION:
        raise SchemaVersionMismatch(version, PROFILE_SCHEMA_VERSION)

    return dataclasses.replace(
        fresh,
        meta=merge_meta(previous.meta, fresh.meta, requested_ignores, clock),
        activities=merge_events(fresh.activities, previous.activities),
    )
