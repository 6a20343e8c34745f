"""Profile aggregate: the snapshot document root."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from profile_sync.core.entities import (
    GithubUser,
    LanguageInformation,
    Repository,
    RepositorySummary,
)
from profile_sync.core.events import GithubEvent
from profile_sync.core.merge import merge
from profile_sync.core.meta import DEFAULT_AGENT, Clock, MetaField, utc_now


@dataclass(frozen=True)
class Profile:
    """Identity, languages, repositories and activity history of one user."""

    meta: MetaField = field(default_factory=MetaField, metadata={"key": "_$meta"})
    user: GithubUser = field(default_factory=GithubUser)
    languages: list[LanguageInformation] = field(default_factory=list)
    repositories: list[Repository] = field(default_factory=list)
    activities: list[GithubEvent] = field(default_factory=list)

    @classmethod
    def init(
        cls,
        clock: Clock = utc_now,
        repository: str = "",
        user: str = "",
        agent: str = DEFAULT_AGENT,
    ) -> "Profile":
        """Empty template written by the ``init`` command."""
        meta = MetaField.fresh(
            clock, agent=agent, github_user=user, github_repository=repository
        )
        return cls(meta=meta)

    @classmethod
    def create(
        cls,
        user: GithubUser,
        languages: list[LanguageInformation],
        repositories: list[Repository],
        events: list[GithubEvent],
        ignored_repositories: Iterable[str] = (),
        clock: Clock = utc_now,
        agent: str = DEFAULT_AGENT,
    ) -> "Profile":
        """Profile built from a single fetch, with no prior snapshot."""
        meta = MetaField.fresh(
            clock,
            agent=agent,
            github_user=user.login,
            ignored_repositories=list(ignored_repositories),
        )
        return cls(
            meta=meta,
            user=user,
            languages=list(languages),
            repositories=list(repositories),
            activities=list(events),
        )

    def update(self, previous: "Profile", clock: Clock = utc_now) -> "Profile":
        """Merge this freshly fetched profile into ``previous``."""
        return merge(previous, self, self.meta.ignored_repositories, clock)

    def language_names(self) -> list[str]:
        """Distinct language names across all repositories, first-seen order."""
        names: dict[str, None] = {}
        for info in self.languages:
            for language in info.languages:
                names.setdefault(language.name, None)
        return list(names)

    def language_count(self) -> int:
        return len(self.language_names())

    def language_totals(self) -> dict[str, int]:
        """Summed code size per language, largest first."""
        totals: Counter[str] = Counter()
        for info in self.languages:
            for language in info.languages:
                totals[language.name] += language.size
        return dict(totals.most_common())

    def repository_summary(self) -> RepositorySummary:
        summary = RepositorySummary()
        for repo in self.repositories:
            summary.repository_names.append(repo.name)
            summary.repository_count += 1
            summary.watchers_count += repo.watchers_count
            summary.stargazers_count += repo.stargazers_count
            summary.forks_count += repo.forks_count
        return summary

    def new_activities(self, previous: "Profile") -> list[GithubEvent]:
        """Activities that were not part of ``previous``."""
        known = {event.event_id for event in previous.activities}
        return [event for event in self.activities if event.event_id not in known]


def activity_type_counts(events: Iterable[GithubEvent]) -> dict[str, int]:
    """Number of events per type, in first-seen order."""
    counts: dict[str, int] = {}
    for event in events:
        counts[event.type] = counts.get(event.type, 0) + 1
    return counts
