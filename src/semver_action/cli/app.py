"""CLI entry point for semver-action."""

from __future__ import annotations

import click
from rich.console import Console

from semver_action import __version__
from semver_action.exceptions import SemverActionError


@click.group()
@click.version_option(__version__, prog_name="semver-action")
def main() -> None:
    """Semantic version tags and release notes from conventional commits."""


@main.command()
@click.option("--path", default=None, help="Repository directory (default: cwd)")
@click.option("--workers", default=None, type=int, help="Threads used to parse commits")
def run(path: str | None, workers: int | None) -> None:
    """Compute the next version, tag it and publish a release."""
    from semver_action.cli.commands.run import run_release
    from semver_action.config import load_github_settings, load_inputs
    from semver_action.forge.github import GitHubClient
    from semver_action.vcs import GitRepository

    console = Console()
    err_console = Console(stderr=True)

    try:
        inputs = load_inputs()
        settings = load_github_settings()
        repo = GitRepository(path)

        github = None
        if inputs.create_release and not inputs.dry_run:
            github = GitHubClient(inputs.token, settings.repository, settings.api_url)

        try:
            run_release(
                inputs,
                repo,
                console,
                github=github,
                output_file=settings.output_file,
                max_workers=workers,
            )
        finally:
            if github is not None:
                github.close()
    except SemverActionError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e
