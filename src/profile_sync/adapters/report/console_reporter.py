"""Colorized console summary of a synchronized profile."""

from typing import Iterable, Optional

import typer

from profile_sync.core import Profile, activity_type_counts


SECTIONS = ("user", "language", "repository", "activity")


class ConsoleReporter:
    """Print user, language, repository and activity sections."""
    
    def __init__(self, max_new_activities: int = 10) -> None:
        self.max_new_activities = max_new_activities
    
    def report(
        self,
        previous: Profile,
        current: Profile,
        sections: Optional[Iterable[str]] = None,
    ) -> None:
        """Print the selected sections; all of them when none are given."""
        selected = set(sections or SECTIONS)
        
        if "user" in selected:
            self._report_user(current)
        if "language" in selected:
            self._report_languages(current)
        if "repository" in selected:
            self._report_repositories(current)
        if "activity" in selected:
            self._report_activities(previous, current)
    
    def _header(self, title: str) -> None:
        typer.secho(f"\n[{title}]", fg=typer.colors.BLUE, bold=True)
    
    def _field(self, label: str, value: object, color: str = typer.colors.GREEN) -> None:
        typer.secho(f"{label:<22}", fg=color, reverse=True, nl=False)
        typer.echo(f" {value}")
    
    def _report_user(self, profile: Profile) -> None:
        user = profile.user
        self._header("USER")
        self._field("Github User:", user.login)
        self._field("Created At:", user.created_at)
        self._field("Following:", user.following)
        self._field("Followers:", user.followers)
        self._field("Public Repos:", user.public_repos)
        self._field("Public Gists:", user.public_gists)
    
    def _report_languages(self, profile: Profile) -> None:
        self._header("LANGUAGE")
        names = profile.language_names()
        ignored = profile.meta.ignored_repositories
        
        self._field("Language Count:", len(names), typer.colors.MAGENTA)
        self._field("Languages:", ", ".join(names) or "-", typer.colors.MAGENTA)
        self._field("Ignored Repositories:", ", ".join(ignored) or "-", typer.colors.MAGENTA)
    
    def _report_repositories(self, profile: Profile) -> None:
        self._header("REPOSITORY")
        summary = profile.repository_summary()
        
        self._field("Repository Count:", summary.repository_count, typer.colors.MAGENTA)
        self._field("Stargazers:", summary.stargazers_count, typer.colors.MAGENTA)
        self._field("Watchers:", summary.watchers_count, typer.colors.MAGENTA)
        self._field("Forks:", summary.forks_count, typer.colors.MAGENTA)
    
    def _report_activities(self, previous: Profile, current: Profile) -> None:
        self._header("ACTIVITY")
        self._field("Current Activities:", len(current.activities), typer.colors.MAGENTA)
        
        new_activities = current.new_activities(previous)
        if not new_activities:
            return
        
        self._field("Previous Activities:", len(previous.activities), typer.colors.MAGENTA)
        typer.echo("New Activity Details:")
        for event_type, count in activity_type_counts(new_activities).items():
            typer.secho(f"  {event_type} ({count})", fg=typer.colors.MAGENTA)
        
        for event in new_activities[:self.max_new_activities]:
            typer.echo(f"  • {event.created_at} {event.describe()}")
        if len(new_activities) > self.max_new_activities:
            typer.echo(f"  … and {len(new_activities) - self.max_new_activities} more")
