"""Mapping between raw JSON trees and the typed profile model.

``decode`` walks a dataclass's fields and resolved type hints, converting raw
values and substituting zero values for anything missing. Fields typed as
``GithubEvent`` go through the discriminant table instead, and classes listed
in ``POST_DECODE_HOOKS`` get an explicit post-processing step.
"""

import dataclasses
import typing
from typing import Any, Callable, TypeVar

from profile_sync.core.errors import DecodeError
from profile_sync.core.events import (
    COMMON_FIELDS,
    EVENT_TYPES,
    GithubEvent,
    UnknownEvent,
)
from profile_sync.core.meta import (
    Clock,
    MetaField,
    apply_meta_defaults,
    utc_now,
    validate_version,
)
from profile_sync.core.profile import Profile


T = TypeVar("T")


def _meta_hook(meta: MetaField, raw: Any, clock: Clock) -> MetaField:
    return apply_meta_defaults(meta, raw, clock)


POST_DECODE_HOOKS: dict[type, Callable[[Any, Any, Clock], Any]] = {
    MetaField: _meta_hook,
}

PRE_DECODE_CHECKS: dict[type, Callable[[Any], None]] = {
    MetaField: validate_version,
}


def field_key(f: dataclasses.Field) -> str:
    """Document key of a dataclass field."""
    return f.metadata.get("key", f.name)


def decode(cls: type[T], raw: Any, clock: Clock = utc_now, path: str = "$") -> T:
    """Decode a raw object into dataclass ``cls``."""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise DecodeError(f"{path}: expected an object, got {type(raw).__name__}")

    check = PRE_DECODE_CHECKS.get(cls)
    if check:
        check(raw)

    hints = typing.get_type_hints(cls)
    values = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        key = field_key(f)
        values[f.name] = _decode_value(hints[f.name], raw.get(key), clock, f"{path}.{key}")

    instance = cls(**values)

    hook = POST_DECODE_HOOKS.get(cls)
    if hook:
        instance = hook(instance, raw, clock)
    return instance


def _decode_value(hint: Any, value: Any, clock: Clock, path: str) -> Any:
    origin = typing.get_origin(hint)

    if origin is list:
        (item_hint,) = typing.get_args(hint) or (Any,)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DecodeError(f"{path}: expected a list, got {type(value).__name__}")
        return [
            _decode_value(item_hint, item, clock, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if origin is dict or hint is dict:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise DecodeError(f"{path}: expected an object, got {type(value).__name__}")
        return dict(value)

    if isinstance(hint, type) and issubclass(hint, GithubEvent):
        return decode_event(value, path)

    if dataclasses.is_dataclass(hint):
        return decode(hint, value, clock, path)

    if hint is bool:
        return _decode_bool(value, path)

    if hint is int:
        if value is None or value == "":
            return 0
        return _decode_int(value, path)

    if hint is float:
        if value is None or value == "":
            return 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            raise DecodeError(f"{path}: expected a number, got {value!r}")

    if hint is str:
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            raise DecodeError(f"{path}: expected a string, got {type(value).__name__}")
        return str(value)

    return value


_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no", ""}


def _decode_bool(value: Any, path: str) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise DecodeError(f"{path}: expected a boolean, got {value!r}")
    if isinstance(value, (dict, list)):
        raise DecodeError(f"{path}: expected a boolean, got {type(value).__name__}")
    return bool(value)


def _decode_int(value: Any, path: str) -> int:
    """Convert ``value`` to int without truncating fractional numbers."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise DecodeError(f"{path}: expected an integer, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise DecodeError(f"{path}: expected an integer, got {value!r}")


def _discriminant(raw: dict, path: str) -> str:
    event_type = raw.get("type")
    if event_type is None:
        return ""
    if not isinstance(event_type, str):
        raise DecodeError(f"{path}.type: expected a string, got {type(event_type).__name__}")
    return event_type


def decode_event(raw: Any, path: str = "$") -> GithubEvent:
    """Decode one snapshot activity record into its variant."""
    if not isinstance(raw, dict):
        raise DecodeError(f"{path}: expected an object, got {type(raw).__name__}")

    event_cls = EVENT_TYPES.get(_discriminant(raw, path))
    if event_cls is not None:
        return decode(event_cls, raw, path=path)

    common = {key: raw.get(key) for key in COMMON_FIELDS}
    base = decode(GithubEvent, common, path=path)
    extra = {key: value for key, value in raw.items() if key not in COMMON_FIELDS}
    return UnknownEvent(
        event_id=base.event_id,
        type=base.type,
        created_at=base.created_at,
        actor=base.actor,
        repo=base.repo,
        public=base.public,
        extra=extra,
        present_fields=tuple(key for key in COMMON_FIELDS if key in raw),
    )


def decode_events(raw: Any, path: str = "$.activities") -> list[GithubEvent]:
    """Decode a list of activity records; ``None`` yields an empty list."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DecodeError(f"{path}: expected a list, got {type(raw).__name__}")
    return [decode_event(item, f"{path}[{i}]") for i, item in enumerate(raw)]


def decode_profile(raw: Any, clock: Clock = utc_now) -> Profile:
    """Decode a snapshot document."""
    return decode(Profile, raw, clock)


# GitHub REST API events ------------------------------------------------------


def _nested(raw: dict, *keys: str) -> Any:
    value: Any = raw
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _push_payload(payload: dict) -> dict:
    commits = []
    for commit in payload.get("commits") or []:
        commits.append({
            "sha": commit.get("sha"),
            "message": commit.get("message"),
            "author": _nested(commit, "author", "name"),
            "distinct": commit.get("distinct"),
        })
    return {
        "ref": payload.get("ref"),
        "head": payload.get("head"),
        "before": payload.get("before"),
        "size": payload.get("size", len(commits)),
        "distinct_size": payload.get("distinct_size"),
        "commits": commits,
    }


def _pull_request_payload(payload: dict) -> dict:
    pull_request = payload.get("pull_request") or {}
    return {
        "action": payload.get("action"),
        "number": payload.get("number") or pull_request.get("number"),
        "title": pull_request.get("title"),
        "state": pull_request.get("state"),
        "merged": pull_request.get("merged"),
        "html_url": pull_request.get("html_url"),
        "additions": pull_request.get("additions"),
        "deletions": pull_request.get("deletions"),
        "changed_files": pull_request.get("changed_files"),
    }


def _issues_payload(payload: dict) -> dict:
    issue = payload.get("issue") or {}
    return {
        "action": payload.get("action"),
        "number": issue.get("number"),
        "title": issue.get("title"),
        "state": issue.get("state"),
        "html_url": issue.get("html_url"),
    }


def _issue_comment_payload(payload: dict) -> dict:
    issue = payload.get("issue") or {}
    comment = payload.get("comment") or {}
    return {
        "action": payload.get("action"),
        "issue_number": issue.get("number"),
        "issue_title": issue.get("title"),
        "comment_id": comment.get("id"),
        "body": comment.get("body"),
        "html_url": comment.get("html_url"),
    }


def _release_payload(payload: dict) -> dict:
    release = payload.get("release") or {}
    return {
        "action": payload.get("action"),
        "tag_name": release.get("tag_name"),
        "name": release.get("name"),
        "prerelease": release.get("prerelease"),
        "draft": release.get("draft"),
        "html_url": release.get("html_url"),
    }


def _watch_payload(payload: dict) -> dict:
    return {"action": payload.get("action")}


def _fork_payload(payload: dict) -> dict:
    forkee = payload.get("forkee") or {}
    return {
        "forkee": forkee.get("full_name"),
        "forkee_url": forkee.get("html_url"),
    }


def _create_payload(payload: dict) -> dict:
    return {
        "ref": payload.get("ref"),
        "ref_type": payload.get("ref_type"),
        "master_branch": payload.get("master_branch"),
        "description": payload.get("description"),
    }


API_PAYLOAD_READERS: dict[str, Callable[[dict], dict]] = {
    "PushEvent": _push_payload,
    "PullRequestEvent": _pull_request_payload,
    "IssuesEvent": _issues_payload,
    "IssueCommentEvent": _issue_comment_payload,
    "ReleaseEvent": _release_payload,
    "WatchEvent": _watch_payload,
    "ForkEvent": _fork_payload,
    "CreateEvent": _create_payload,
}


def event_from_api(raw: Any) -> GithubEvent:
    """Convert an event from the GitHub REST API into the typed model."""
    if not isinstance(raw, dict):
        raise DecodeError(f"event: expected an object, got {type(raw).__name__}")

    event_type = _discriminant(raw, "event")
    payload = raw.get("payload")
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise DecodeError(f"event {raw.get('id')}: payload must be an object")

    document = {
        "event_id": raw.get("id"),
        "type": event_type,
        "created_at": raw.get("created_at"),
        "actor": _nested(raw, "actor", "login"),
        "repo": _nested(raw, "repo", "name"),
        "public": raw.get("public"),
    }

    reader = API_PAYLOAD_READERS.get(event_type)
    if reader is None:
        document["payload"] = payload
    else:
        document.update(reader(payload))

    return decode_event(document)


# Encoding ---------------------------------------------------------------------


def encode(obj: Any) -> Any:
    """Convert a typed model back into a JSON-compatible tree."""
    if isinstance(obj, UnknownEvent):
        document = {key: getattr(obj, key) for key in obj.present_fields}
        document.update(obj.extra)
        return document

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field_key(f): encode(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }

    if isinstance(obj, (list, tuple)):
        return [encode(item) for item in obj]

    if isinstance(obj, dict):
        return {key: encode(value) for key, value in obj.items()}

    return obj


def encode_profile(profile: Profile) -> dict:
    """Snapshot document for ``profile``."""
    return encode(profile)
