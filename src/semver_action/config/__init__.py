"""Configuration management for semver-action."""

from __future__ import annotations

from semver_action.config.loader import load_github_settings, load_inputs
from semver_action.config.models import ActionInputs, GitHubSettings

__all__ = [
    "ActionInputs",
    "GitHubSettings",
    "load_github_settings",
    "load_inputs",
]
