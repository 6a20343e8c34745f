"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from profile_sync.core.entities import GithubUser, LanguageInformation, Repository
from profile_sync.core.events import GithubEvent


class ProfileFetcher(ABC):
    """Interface for reading profile data from the remote platform.
    
    Every method either returns a complete result or raises ``FetchError``.
    """
    
    @abstractmethod
    async def get_identity(self, user: str) -> GithubUser:
        """Fetch account identity and counters."""
        pass
    
    @abstractmethod
    async def get_repositories(self, user: str) -> list[Repository]:
        """Fetch repositories owned by the user."""
        pass
    
    @abstractmethod
    async def get_languages(
        self,
        user: str,
        ignored_repositories: list[str],
        repositories: Optional[list[Repository]] = None,
    ) -> list[LanguageInformation]:
        """Fetch language breakdown for every repository not ignored.

        ``repositories`` is an already fetched listing to reuse; when omitted
        the repositories are listed again.
        """
        pass
    
    @abstractmethod
    async def get_activities(self, user: str) -> list[GithubEvent]:
        """Fetch recent public events, in the order the API returns them."""
        pass


class ProfileStore(ABC):
    """Interface for persisting snapshot documents."""
    
    @abstractmethod
    def read_if_exists(self, path: Path) -> Optional[Any]:
        """Return the parsed document, or None when there is no file."""
        pass
    
    @abstractmethod
    def write_exclusive(self, path: Path, document: Any) -> None:
        """Write a new document; fail if the file already exists."""
        pass
    
    @abstractmethod
    def overwrite(self, path: Path, document: Any) -> None:
        """Replace the document unconditionally."""
        pass
