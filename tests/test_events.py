"""Tests for the event model and discriminant dispatch."""

import pytest

from profile_sync.core import (
    EVENT_TYPES,
    CreateEvent,
    DecodeError,
    ForkEvent,
    IssueCommentEvent,
    PullRequestEvent,
    PushEvent,
    ReleaseEvent,
    UnknownEvent,
    WatchEvent,
    decode_event,
    decode_events,
    encode,
)


@pytest.mark.parametrize("event_type", sorted(EVENT_TYPES))
def test_known_type_decodes_to_its_variant(event_type: str) -> None:
    """Test every registered discriminant selects its class."""
    event = decode_event({"event_id": "1", "type": event_type})

    assert type(event) is EVENT_TYPES[event_type]
    assert event.type == event_type
    assert event.event_id == "1"


def test_missing_fields_default_to_zero_values() -> None:
    """Test absent fields never produce None."""
    event = decode_event({"type": "PushEvent"})

    assert isinstance(event, PushEvent)
    assert event.event_id == ""
    assert event.ref == ""
    assert event.size == 0
    assert event.commits == []
    assert event.public is False


def test_push_event_decodes_nested_commits() -> None:
    """Test nested commit records are typed."""
    event = decode_event({
        "event_id": "5",
        "type": "PushEvent",
        "size": 2,
        "commits": [
            {"sha": "a1", "message": "first", "author": "Octo", "distinct": True},
            {"sha": "b2", "message": "second"},
        ],
    })

    assert len(event.commits) == 2
    assert event.commits[0].author == "Octo"
    assert event.commits[1].distinct is False


def test_unknown_type_keeps_raw_record() -> None:
    """Test an unrecognized discriminant survives decode and encode unchanged."""
    raw = {
        "event_id": "9",
        "type": "WeirdEvent",
        "created_at": "2020-02-02T00:00:00Z",
        "actor": "octocat",
        "repo": "octocat/hello",
        "public": True,
        "payload": {"foo": [1, 2], "bar": {"baz": "x"}},
        "org": "github",
    }

    event = decode_event(raw)

    assert isinstance(event, UnknownEvent)
    assert event.type == "WeirdEvent"
    assert event.payload == {"foo": [1, 2], "bar": {"baz": "x"}}
    assert encode(event) == raw


def test_unknown_type_minimal_record_encodes_unchanged() -> None:
    """Test common fields absent from the raw record are not added back."""
    raw = {"event_id": "1", "type": "WeirdEvent", "payload": {"x": 1}}

    event = decode_event(raw)

    assert event.public is False
    assert encode(event) == raw


def test_missing_type_is_unknown() -> None:
    """Test a record without a discriminant still decodes."""
    event = decode_event({"event_id": "3"})

    assert isinstance(event, UnknownEvent)
    assert event.payload == {}
    assert encode(event) == {"event_id": "3"}


@pytest.mark.parametrize("event_type", [["PushEvent"], {"name": "PushEvent"}, 7])
def test_non_string_type_is_rejected(event_type) -> None:
    """Test a discriminant that is not a string is a decode error."""
    with pytest.raises(DecodeError, match=r"\$\.type: expected a string"):
        decode_event({"event_id": "1", "type": event_type})


def test_non_object_event_is_rejected() -> None:
    """Test decode errors name the offending path."""
    with pytest.raises(DecodeError, match=r"\$\.activities\[1\]"):
        decode_events([{"type": "WatchEvent"}, "oops"])


def test_decode_events_none_is_empty() -> None:
    """Test a missing activity list decodes to an empty list."""
    assert decode_events(None) == []


def test_describe() -> None:
    """Test one-line summaries used by the reporter."""
    assert PushEvent(repo="o/r", ref="refs/heads/main", size=2).describe() == (
        "pushed 2 commit(s) to o/r:main"
    )
    assert PullRequestEvent(repo="o/r", action="opened", number=4, title="Add x").describe() == (
        "opened pull request o/r#4 Add x"
    )
    assert IssueCommentEvent(repo="o/r", issue_number=3).describe() == "commented on o/r#3"
    assert ReleaseEvent(repo="o/r", action="published", tag_name="v1.0").describe() == (
        "published release v1.0 of o/r"
    )
    assert WatchEvent(repo="o/r").describe() == "starred o/r"
    assert ForkEvent(repo="o/r", forkee="me/r").describe() == "forked o/r to me/r"
    assert CreateEvent(repo="o/r", ref="dev", ref_type="branch").describe() == (
        "created branch dev in o/r"
    )
    assert CreateEvent(repo="o/r", ref_type="repository").describe() == "created repository o/r"
    assert UnknownEvent(type="GollumEvent", repo="o/r").describe() == "GollumEvent on o/r"
