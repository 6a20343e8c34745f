"""Core domain layer."""

from profile_sync.core.decoder import (
    decode,
    decode_event,
    decode_events,
    decode_profile,
    encode,
    encode_profile,
    event_from_api,
)
from profile_sync.core.entities import (
    GithubUser,
    Language,
    LanguageInformation,
    Repository,
    RepositorySummary,
)
from profile_sync.core.errors import (
    DecodeError,
    FetchError,
    ProfileSyncError,
    SchemaVersionMismatch,
)
from profile_sync.core.events import (
    EVENT_TYPES,
    Commit,
    CreateEvent,
    ForkEvent,
    GithubEvent,
    IssueCommentEvent,
    IssuesEvent,
    PullRequestEvent,
    PushEvent,
    ReleaseEvent,
    UnknownEvent,
    WatchEvent,
)
from profile_sync.core.interfaces import ProfileFetcher, ProfileStore
from profile_sync.core.merge import merge, merge_events, union_ordered
from profile_sync.core.meta import (
    PROFILE_SCHEMA_VERSION,
    Clock,
    MetaField,
    advance,
    utc_now,
    validate_version,
)
from profile_sync.core.profile import Profile, activity_type_counts

__all__ = [
    "Clock",
    "Commit",
    "CreateEvent",
    "DecodeError",
    "EVENT_TYPES",
    "FetchError",
    "ForkEvent",
    "GithubEvent",
    "GithubUser",
    "IssueCommentEvent",
    "IssuesEvent",
    "Language",
    "LanguageInformation",
    "MetaField",
    "PROFILE_SCHEMA_VERSION",
    "Profile",
    "ProfileFetcher",
    "ProfileStore",
    "ProfileSyncError",
    "PullRequestEvent",
    "PushEvent",
    "ReleaseEvent",
    "Repository",
    "RepositorySummary",
    "SchemaVersionMismatch",
    "UnknownEvent",
    "WatchEvent",
    "activity_type_counts",
    "advance",
    "decode",
    "decode_event",
    "decode_events",
    "decode_profile",
    "encode",
    "encode_profile",
    "event_from_api",
    "merge",
    "merge_events",
    "union_ordered",
    "utc_now",
    "validate_version",
]
