"""Markdown changelog rendering.

Turns parsed commits into the release notes body: a heading, one section
per non-empty group and an optional comparison line between two tags.
"""

from __future__ import annotations

from collections.abc import Iterable

from semver_action.core.commits import ParsedCommit

CHANGELOG_HEADING = "## What's Changed"

BREAKING = "Breaking Changes"
FEATURES = "Features"
BUG_FIXES = "Bug Fixes"
PERFORMANCE = "Performance"
OTHER = "Other Changes"

SECTION_ORDER = (BREAKING, FEATURES, BUG_FIXES, PERFORMANCE, OTHER)

_TYPE_SECTIONS = {
    "feat": FEATURES,
    "fix": BUG_FIXES,
    "perf": PERFORMANCE,
}


def section_for(commit: ParsedCommit) -> str:
    """Name of the changelog section a commit belongs to."""
    if commit.is_breaking:
        return BREAKING
    return _TYPE_SECTIONS.get(commit.commit_type, OTHER)


def format_commit_for_changelog(commit: ParsedCommit) -> str:
    """Format a commit as a changelog bullet.

    Non-conventional commits have no description, so the first line of the
    raw message is used instead.

    Args:
        commit: Parsed commit

    Returns:
        Markdown bullet line
    """
    if not commit.is_conventional:
        return f"- {commit.subject} ({commit.short_sha})"
    if commit.scope:
        return f"- **{commit.scope}**: {commit.description} ({commit.short_sha})"
    return f"- {commit.description} ({commit.short_sha})"


def group_commits(commits: Iterable[ParsedCommit]) -> dict[str, list[ParsedCommit]]:
    """Group commits by changelog section, keeping input order in each group."""
    grouped: dict[str, list[ParsedCommit]] = {title: [] for title in SECTION_ORDER}
    for commit in commits:
        grouped[section_for(commit)].append(commit)
    return grouped


def generate_changelog(
    commits: Iterable[ParsedCommit],
    previous_label: str = "",
    new_label: str = "",
) -> str:
    """Generate release notes from parsed commits.

    Args:
        commits: Parsed commits in history order
        previous_label: Previous tag, empty for an initial release
        new_label: Tag being released

    Returns:
        Markdown changelog text
    """
    lines = [CHANGELOG_HEADING]

    for title, section_commits in group_commits(commits).items():
        if not section_commits:
            continue
        lines.append("")
        lines.append(f"### {title}")
        lines.extend(format_commit_for_changelog(c) for c in section_commits)

    if previous_label and new_label:
        lines.append("")
        lines.append(f"**Full Changelog**: {previous_label}...{new_label}")

    return "\n".join(lines) + "\n"
