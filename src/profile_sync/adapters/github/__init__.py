"""GitHub API adapters."""

from profile_sync.adapters.github.github_client import GitHubClient

__all__ = ["GitHubClient"]
