"""Command-line interface for semver-action."""

from __future__ import annotations

from semver_action.cli.app import main

__all__ = ["main"]
