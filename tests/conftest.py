"""Pytest fixtures for profile sync tests."""

import pytest

from profile_sync.core import (
    Commit,
    GithubUser,
    IssuesEvent,
    Language,
    LanguageInformation,
    MetaField,
    Profile,
    PushEvent,
    Repository,
    UnknownEvent,
)


class FakeClock:
    """Deterministic clock returning one second later on every call."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"2024-01-01T00:00:{self.calls:02d}Z"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def push(event_id: str, size: int = 1, repo: str = "octocat/hello") -> PushEvent:
    return PushEvent(
        event_id=event_id,
        created_at="2024-01-01T10:00:00Z",
        actor="octocat",
        repo=repo,
        public=True,
        ref="refs/heads/main",
        head="abc123",
        before="def456",
        size=size,
        distinct_size=size,
        commits=[Commit(sha="abc123", message="Fix bug", author="Octo Cat", distinct=True)],
    )


def issue(event_id: str, title: str = "Crash on start") -> IssuesEvent:
    return IssuesEvent(
        event_id=event_id,
        created_at="2024-01-02T10:00:00Z",
        actor="octocat",
        repo="octocat/hello",
        public=True,
        action="opened",
        number=7,
        title=title,
        state="open",
        html_url="https://github.com/octocat/hello/issues/7",
    )


@pytest.fixture
def sample_profile() -> Profile:
    """A fully populated snapshot."""
    return Profile(
        meta=MetaField(
            agent="profile-sync",
            github_user="octocat",
            github_repository="octocat/profile",
            ignored_repositories=["dotfiles"],
            schema_version=1,
            schema_created_at="2020-01-01T00:00:00Z",
            schema_collected_ats=["2020-01-01T00:00:00Z"],
        ),
        user=GithubUser(
            login="octocat",
            name="The Octocat",
            html_url="https://github.com/octocat",
            created_at="2011-01-25T18:44:36Z",
            followers=10,
            following=2,
            public_repos=2,
            public_gists=1,
        ),
        languages=[
            LanguageInformation(
                repository="hello",
                languages=[Language(name="Python", size=1200), Language(name="Shell", size=40)],
            ),
            LanguageInformation(
                repository="spoon",
                languages=[Language(name="Go", size=800), Language(name="Python", size=300)],
            ),
        ],
        repositories=[
            Repository(
                name="hello",
                full_name="octocat/hello",
                html_url="https://github.com/octocat/hello",
                description="My first repository",
                language="Python",
                watchers_count=5,
                stargazers_count=5,
                forks_count=1,
                created_at="2012-01-01T00:00:00Z",
                updated_at="2024-01-01T00:00:00Z",
            ),
            Repository(
                name="spoon",
                full_name="octocat/spoon",
                language="Go",
                fork=True,
                watchers_count=3,
                stargazers_count=3,
                forks_count=2,
            ),
        ],
        activities=[
            issue("2"),
            push("1"),
            UnknownEvent(
                event_id="9",
                type="GollumEvent",
                created_at="2023-12-31T10:00:00Z",
                actor="octocat",
                repo="octocat/hello",
                public=True,
                extra={"payload": {"pages": [{"page_name": "Home", "action": "edited"}]}},
            ),
        ],
    )
