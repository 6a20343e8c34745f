"""Business logic use cases."""

import asyncio
import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from profile_sync.core import (
    Clock,
    Profile,
    ProfileFetcher,
    ProfileStore,
    decode_profile,
    encode_profile,
    merge_events,
    union_ordered,
    utc_now,
)
from profile_sync.core.meta import DEFAULT_AGENT


@dataclass
class SyncResult:
    """Outcome of one synchronization run."""

    previous: Profile
    current: Profile
    created: bool

    @property
    def new_activity_count(self) -> int:
        return len(self.current.new_activities(self.previous))


class ProfileSyncService:
    """Service for creating and refreshing profile snapshots."""

    def __init__(
        self,
        fetcher: ProfileFetcher,
        store: ProfileStore,
        clock: Clock = utc_now,
        agent: str = DEFAULT_AGENT,
    ) -> None:
        self.fetcher = fetcher
        self.store = store
        self.clock = clock
        self.agent = agent

    def init_profile(self, path: Path, repository: str, user: str = "") -> Profile:
        """Write an empty snapshot template; fails if ``path`` exists."""
        profile = Profile.init(self.clock, repository=repository, user=user, agent=self.agent)
        self.store.write_exclusive(path, encode_profile(profile))
        return profile

    def load_previous(self, path: Path) -> Optional[Profile]:
        """Decode the stored snapshot, or None when there is none yet."""
        raw = self.store.read_if_exists(path)
        if raw is None:
            return None
        return decode_profile(raw, self.clock)

    async def fetch_profile(self, user: str, ignored_repositories: list[str]) -> Profile:
        """Run the fetches concurrently and build a fresh profile.

        Languages are read from the same repository listing the profile stores.
        """

        async def repositories_and_languages():
            repositories = await self.fetcher.get_repositories(user)
            languages = await self.fetcher.get_languages(user, ignored_repositories, repositories)
            return repositories, languages

        identity, (repositories, languages), activities = await asyncio.gather(
            self.fetcher.get_identity(user),
            repositories_and_languages(),
            self.fetcher.get_activities(user),
        )

        print(f"  └─ Repositories: {len(repositories)}")
        print(f"  └─ Languages collected from: {len(languages)} repositories")
        print(f"  └─ Activities fetched: {len(activities)}")

        return Profile.create(
            identity,
            languages,
            repositories,
            activities,
            ignored_repositories=ignored_repositories,
            clock=self.clock,
            agent=self.agent,
        )

    async def sync(
        self,
        user: str,
        path: Path,
        ignored_repositories: Iterable[str] = (),
    ) -> SyncResult:
        """Fetch, merge with the stored snapshot and overwrite it.

        Nothing is written unless every fetch and the merge succeed.
        """
        requested = list(ignored_repositories)
        previous = self.load_previous(path)

        all_ignored = requested
        if previous is not None:
            all_ignored = union_ordered(requested, previous.meta.ignored_repositories)

        print(f"\n🐙 Fetching GitHub profile: {user}")
        fresh = await self.fetch_profile(user, all_ignored)

        if previous is None:
            current = dataclasses.replace(fresh, activities=merge_events(fresh.activities, []))
        else:
            current = fresh.update(previous, self.clock)

        self.store.overwrite(path, encode_profile(current))
        print(f"💾 Snapshot saved to {path}")

        return SyncResult(
            previous=previous if previous is not None else Profile(),
            current=current,
            created=previous is None,
        )
