"""Implementation of the 'run' command.

The run command computes the next version from the commits since the
latest version tag, then tags, releases and publishes step outputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel

from semver_action.action.outputs import ReleaseOutputs, write_outputs
from semver_action.core.changelog import generate_changelog
from semver_action.core.commits import calculate_bump, get_breaking_changes, parse_commits
from semver_action.core.version import BumpType, Version
from semver_action.exceptions import ConfigValidationError, ShallowCloneError

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from semver_action.config.models import ActionInputs
    from semver_action.forge.github import GitHubClient
    from semver_action.vcs.git import GitRepository


def run_release(
    inputs: ActionInputs,
    repo: GitRepository,
    console: Console,
    *,
    github: GitHubClient | None = None,
    output_file: Path | None = None,
    max_workers: int | None = None,
) -> ReleaseOutputs:
    """Run the release flow.

    Args:
        inputs: Validated action inputs
        repo: Git repository to release
        console: Console for standard output
        github: Client used when inputs.create_release is set
        output_file: GITHUB_OUTPUT path, None prints outputs instead
        max_workers: Thread count for commit parsing

    Returns:
        The outputs that were written

    Raises:
        SemverActionError: On any git, API, output or configuration failure
    """
    if repo.is_shallow():
        raise ShallowCloneError(
            "Shallow clone detected. Use actions/checkout with 'fetch-depth: 0' "
            "to fetch the full history."
        )

    latest_tag = repo.get_latest_semver_tag(inputs.tag_prefix)
    is_initial_release = latest_tag is None
    previous_version = latest_tag or ""

    if is_initial_release:
        console.print(
            "No existing version tags found. "
            f"Will use default version [cyan]{inputs.default_version}[/]"
        )
    else:
        console.print(f"Latest version tag: [cyan]{latest_tag}[/]")

    commits = repo.get_commits_since_tag(latest_tag)
    if not commits:
        console.print("[yellow]No new commits since last tag. Nothing to do.[/]")
        return _finish(ReleaseOutputs.skipped_result(previous_version), output_file, console)

    console.print(f"Found {len(commits)} commit(s) since last tag.")

    parsed = parse_commits(commits, max_workers=max_workers)
    bump_type = calculate_bump(parsed, bump_unknown_to_patch=inputs.bump_patch_on_unknown)

    if bump_type == BumpType.NONE:
        console.print("[yellow]No version-bumping commits found.[/]")
        return _finish(ReleaseOutputs.skipped_result(previous_version), output_file, console)

    if is_initial_release:
        next_version = inputs.initial_version
    else:
        next_version = Version.parse(previous_version).bump(bump_type)

    new_tag = str(next_version)
    changelog = generate_changelog(parsed, previous_version, new_tag)

    breaking = get_breaking_changes(parsed)
    if breaking:
        console.print(f"[red]{len(breaking)} breaking change(s)[/]")
    console.print(f"Bump type: [bold]{bump_type}[/]")
    console.print(f"New version: [green]{new_tag}[/]")

    if inputs.dry_run:
        console.print("[yellow]DRY-RUN[/] - no tag or release created.")
    else:
        console.print(f"Creating tag [green]{new_tag}[/]...")
        repo.create_tag(new_tag)
        console.print(f"Pushing tag [green]{new_tag}[/]...")
        repo.push_tag(new_tag)

        if inputs.create_release:
            if github is None:
                raise ConfigValidationError("create-release is enabled but no GitHub client is set")
            console.print("Creating GitHub release...")
            github.create_release(
                new_tag,
                new_tag,
                changelog,
                draft=inputs.release_draft,
                prerelease=inputs.release_prerelease,
            )
            console.print("  [green]✓[/] Release created")

    outputs = ReleaseOutputs(
        previous_version=previous_version,
        new_version=new_tag,
        bump_type=bump_type,
        changelog=changelog,
        skipped=False,
    )
    _finish(outputs, output_file, console)

    console.print(
        Panel(
            f"[green]{previous_version or '(none)'} → {new_tag}[/] ({bump_type})",
            title="[green]Release Complete[/]" if not inputs.dry_run else "[yellow]Dry Run[/]",
            border_style="green" if not inputs.dry_run else "yellow",
        )
    )
    return outputs


def _finish(
    outputs: ReleaseOutputs,
    output_file: Path | None,
    console: Console,
) -> ReleaseOutputs:
    write_outputs(outputs, output_file=output_file, console=console)
    return outputs
