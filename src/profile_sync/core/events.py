"""Typed GitHub activity events.

Every event shares the same identity fields; the ``type`` discriminant selects
the variant. Types that have no dedicated class decode to ``UnknownEvent``,
which keeps all remaining keys so the record can be written back unchanged.
"""

from dataclasses import dataclass, field
from typing import Any


COMMON_FIELDS = ("event_id", "type", "created_at", "actor", "repo", "public")


@dataclass(frozen=True)
class GithubEvent:
    """Base event with identity and ownership fields."""

    event_id: str = ""
    type: str = ""
    created_at: str = ""
    actor: str = ""
    repo: str = ""
    public: bool = False

    def describe(self) -> str:
        """One-line human readable summary."""
        return f"{self.type} on {self.repo}"


@dataclass(frozen=True)
class Commit:
    """Commit included in a push."""

    sha: str = ""
    message: str = ""
    author: str = ""
    distinct: bool = False


@dataclass(frozen=True)
class PushEvent(GithubEvent):
    type: str = "PushEvent"
    ref: str = ""
    head: str = ""
    before: str = ""
    size: int = 0
    distinct_size: int = 0
    commits: list[Commit] = field(default_factory=list)

    def describe(self) -> str:
        branch = self.ref.rsplit("/", 1)[-1]
        return f"pushed {self.size} commit(s) to {self.repo}:{branch}"


@dataclass(frozen=True)
class PullRequestEvent(GithubEvent):
    type: str = "PullRequestEvent"
    action: str = ""
    number: int = 0
    title: str = ""
    state: str = ""
    merged: bool = False
    html_url: str = ""
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0

    def describe(self) -> str:
        return f"{self.action} pull request {self.repo}#{self.number} {self.title}".rstrip()


@dataclass(frozen=True)
class IssuesEvent(GithubEvent):
    type: str = "IssuesEvent"
    action: str = ""
    number: int = 0
    title: str = ""
    state: str = ""
    html_url: str = ""

    def describe(self) -> str:
        return f"{self.action} issue {self.repo}#{self.number} {self.title}".rstrip()


@dataclass(frozen=True)
class IssueCommentEvent(GithubEvent):
    type: str = "IssueCommentEvent"
    action: str = ""
    issue_number: int = 0
    issue_title: str = ""
    comment_id: int = 0
    body: str = ""
    html_url: str = ""

    def describe(self) -> str:
        return f"commented on {self.repo}#{self.issue_number}"


@dataclass(frozen=True)
class ReleaseEvent(GithubEvent):
    type: str = "ReleaseEvent"
    action: str = ""
    tag_name: str = ""
    name: str = ""
    prerelease: bool = False
    draft: bool = False
    html_url: str = ""

    def describe(self) -> str:
        return f"{self.action} release {self.tag_name} of {self.repo}"


@dataclass(frozen=True)
class WatchEvent(GithubEvent):
    type: str = "WatchEvent"
    action: str = ""

    def describe(self) -> str:
        return f"starred {self.repo}"


@dataclass(frozen=True)
class ForkEvent(GithubEvent):
    type: str = "ForkEvent"
    forkee: str = ""
    forkee_url: str = ""

    def describe(self) -> str:
        return f"forked {self.repo} to {self.forkee}"


@dataclass(frozen=True)
class CreateEvent(GithubEvent):
    type: str = "CreateEvent"
    ref: str = ""
    ref_type: str = ""
    master_branch: str = ""
    description: str = ""

    def describe(self) -> str:
        if self.ref:
            return f"created {self.ref_type} {self.ref} in {self.repo}"
        return f"created {self.ref_type} {self.repo}"


@dataclass(frozen=True)
class UnknownEvent(GithubEvent):
    """Event whose discriminant has no dedicated variant.

    ``extra`` holds every key of the raw record besides the common fields,
    including the original ``payload`` when there is one. ``present_fields``
    lists the common fields the raw record actually carried, so encoding
    writes back exactly those.
    """

    extra: dict[str, Any] = field(default_factory=dict)
    present_fields: tuple[str, ...] = COMMON_FIELDS

    @property
    def payload(self) -> dict[str, Any]:
        value = self.extra.get("payload")
        return value if isinstance(value, dict) else {}


# Discriminant -> variant. Anything missing here decodes to UnknownEvent.
EVENT_TYPES: dict[str, type[GithubEvent]] = {
    "PushEvent": PushEvent,
    "PullRequestEvent": PullRequestEvent,
    "IssuesEvent": IssuesEvent,
    "IssueCommentEvent": IssueCommentEvent,
    "ReleaseEvent": ReleaseEvent,
    "WatchEvent": WatchEvent,
    "ForkEvent": ForkEvent,
    "CreateEvent": CreateEvent,
}
