"""Error taxonomy for profile synchronization."""


class ProfileSyncError(Exception):
    """Base class for all profile synchronization failures."""


class SchemaVersionMismatch(ProfileSyncError):
    """Raised when a snapshot was written with an unsupported schema version."""

    def __init__(self, found: int, supported: int) -> None:
        self.found = found
        self.supported = supported
        super().__init__(
            f"Invalid _$meta.schema_version: {found} (supported: {supported})"
        )


class DecodeError(ProfileSyncError):
    """Raised when a raw document cannot be mapped onto the expected entity."""


class FetchError(ProfileSyncError):
    """Raised when the GitHub API returns an error or cannot be reached."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"GitHub API error {status}: {message}")
