"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class GitHubConfig:
    """GitHub API settings."""
    api_base: str = "https://api.github.com"
    timeout: float = 30.0
    per_page: int = 100
    max_event_pages: int = 3
    max_retries: int = 3
    initial_retry_delay: float = 2.0


@dataclass
class PathsConfig:
    """Path settings."""
    profile_path: Path = Path("profile.json")


@dataclass
class Settings:
    """Application settings."""

    # Token (from environment only; the CLI argument takes precedence)
    github_token: Optional[str] = None
    agent: str = "profile-sync"

    # Config sections
    github: GitHubConfig = field(default_factory=GitHubConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)

    @property
    def profile_path(self) -> Path:
        return self.paths.profile_path

    @property
    def api_base(self) -> str:
        return self.github.api_base


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(github_token=os.getenv("GITHUB_TOKEN"))

    if "agent" in config:
        settings.agent = str(config["agent"])

    if "github" in config:
        for key, value in config["github"].items():
            setattr(settings.github, key, value)

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    return settings
