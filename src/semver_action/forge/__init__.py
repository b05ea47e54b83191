"""Remote forge integration."""

from __future__ import annotations

from semver_action.forge.github import GitHubClient

__all__ = ["GitHubClient"]
