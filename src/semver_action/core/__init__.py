"""Core business logic for semver-action.

This module contains the fundamental building blocks:
- Version parsing, ordering and bumping
- Conventional commit parsing
- Bump calculation from a batch of commits
- Changelog rendering
"""

from __future__ import annotations

from semver_action.core.changelog import format_commit_for_changelog, generate_changelog
from semver_action.core.commits import (
    Footer,
    ParsedCommit,
    calculate_bump,
    get_breaking_changes,
    parse_commit,
    parse_commits,
)
from semver_action.core.version import BumpType, Version, parse_version

__all__ = [
    # Version
    "BumpType",
    # Commits
    "Footer",
    "ParsedCommit",
    "Version",
    "calculate_bump",
    "format_commit_for_changelog",
    # Changelog
    "generate_changelog",
    "get_breaking_changes",
    "parse_commit",
    "parse_commits",
    "parse_version",
]
