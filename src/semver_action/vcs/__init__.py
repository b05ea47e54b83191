"""Version control integration."""

from __future__ import annotations

from semver_action.vcs.git import Commit, GitRepository, parse_log_output

__all__ = ["Commit", "GitRepository", "parse_log_output"]
