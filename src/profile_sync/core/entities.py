"""Current-state entities fetched from GitHub."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GithubUser:
    """Account identity and public counters."""
    
    login: str = ""
    name: str = ""
    html_url: str = ""
    created_at: str = ""
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    public_gists: int = 0


@dataclass(frozen=True)
class Repository:
    """Repository metadata as listed for the user."""
    
    name: str = ""
    full_name: str = ""
    html_url: str = ""
    description: str = ""
    language: str = ""
    fork: bool = False
    watchers_count: int = 0
    stargazers_count: int = 0
    forks_count: int = 0
    created_at: str = ""
    updated_at: str = ""


@dataclass(frozen=True)
class Language:
    """Code volume of one language inside a repository."""
    
    name: str = ""
    size: int = 0


@dataclass(frozen=True)
class LanguageInformation:
    """Language breakdown of a single repository."""
    
    repository: str = ""
    languages: list[Language] = field(default_factory=list)


@dataclass
class RepositorySummary:
    """Aggregate counters over a list of repositories."""
    
    repository_names: list[str] = field(default_factory=list)
    repository_count: int = 0
    watchers_count: int = 0
    stargazers_count: int = 0
    forks_count: int = 0
