"""CLI entry point for profile sync."""

import asyncio
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from profile_sync.adapters.github import GitHubClient
from profile_sync.adapters.report import SECTIONS, ConsoleReporter
from profile_sync.adapters.storage import JsonProfileStore
from profile_sync.config import Settings, get_settings
from profile_sync.core import ProfileSyncError
from profile_sync.use_cases import ProfileSyncService


app = typer.Typer(
    help="Keep an incremental local snapshot of a GitHub profile.",
    add_completion=False,
)


def _fail(message: str) -> NoReturn:
    typer.secho(f"❌ {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _build_service(settings: Settings, token: Optional[str] = None) -> ProfileSyncService:
    return ProfileSyncService(
        fetcher=GitHubClient.from_settings(settings, token),
        store=JsonProfileStore(),
        agent=settings.agent,
    )


@app.command()
def init(
    repo: str = typer.Argument(..., help="Repository the snapshot belongs to"),
    user: str = typer.Option("", "--user", "-u", help="GitHub login to record"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Snapshot path"),
    config: Path = typer.Option(Path("config.yaml"), "--config", "-c", help="Config file"),
) -> None:
    """Create an empty profile snapshot."""
    settings = get_settings(config)
    path = output or settings.profile_path
    service = _build_service(settings)

    try:
        service.init_profile(path, repo, user)
    except FileExistsError:
        _fail(f"{path} already exists")

    typer.secho(f"✓ Created {path}", fg=typer.colors.GREEN)


@app.command()
def profile(
    token: str = typer.Argument(..., help="GitHub token"),
    user: str = typer.Argument(..., help="GitHub login"),
    language: bool = typer.Option(False, "--language", "-l", help="Display language summary"),
    repository: bool = typer.Option(False, "--repository", "-r", help="Display repository summary"),
    activity: bool = typer.Option(False, "--activity", "-a", help="Display activity summary"),
    ignore: Optional[List[str]] = typer.Option(
        None, "--ignore", "-i", help="Repository to exclude from language statistics"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Snapshot path"),
    config: Path = typer.Option(Path("config.yaml"), "--config", "-c", help="Config file"),
) -> None:
    """Fetch the GitHub profile, merge it into the snapshot and save it."""
    sections = [
        name
        for name, enabled in (("language", language), ("repository", repository), ("activity", activity))
        if enabled
    ]
    asyncio.run(async_profile(token, user, sections, ignore or [], output, config))


async def async_profile(
    token: str,
    user: str,
    sections: list[str],
    ignore: list[str],
    output: Optional[Path],
    config: Path,
) -> None:
    """Async implementation of the profile command."""
    settings = get_settings(config)
    path = output or settings.profile_path
    service = _build_service(settings, token)

    try:
        result = await service.sync(user, path, ignore)
    except ProfileSyncError as e:
        _fail(str(e))

    selected = ["user", *sections] if sections else list(SECTIONS)
    ConsoleReporter().report(result.previous, result.current, selected)

    if result.created:
        typer.secho(f"\n✅ Snapshot created: {path}", fg=typer.colors.GREEN)
    else:
        typer.secho(
            f"\n✅ Snapshot updated: {path} ({result.new_activity_count} new activities)",
            fg=typer.colors.GREEN,
        )


if __name__ == "__main__":
    app()
