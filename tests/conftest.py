"""Shared fixtures for semver-action tests."""

from __future__ import annotations

import os
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from semver_action.core.commits import ParsedCommit, parse_commit
from semver_action.vcs.git import Commit, GitRepository


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove runner variables so tests never see the host's environment."""
    for name in list(os.environ):
        if name.upper().startswith(("INPUT_", "GITHUB_")):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def console() -> Console:
    """A console that records output instead of printing it."""
    return Console(record=True, width=120, force_terminal=False)


@pytest.fixture
def feat_commit() -> Commit:
    return Commit("feat1234567890", "feat(auth): add user authentication")


@pytest.fixture
def fix_commit() -> Commit:
    return Commit("fix1234567890", "fix(core): handle null response")


@pytest.fixture
def breaking_commit() -> Commit:
    return Commit(
        "break1234567890",
        "refactor(api): drop legacy endpoints\n\nBREAKING CHANGE: /v1 routes removed",
    )


@pytest.fixture
def sample_commits(
    feat_commit: Commit,
    fix_commit: Commit,
    breaking_commit: Commit,
) -> list[Commit]:
    return [
        feat_commit,
        fix_commit,
        Commit("docs1234567890", "docs: update readme"),
        Commit("chore1234567890", "chore: bump dependencies"),
        breaking_commit,
        Commit("plain1234567890", "Merge branch 'main'\n\nsome details"),
    ]


@pytest.fixture
def parsed_samples(sample_commits: list[Commit]) -> list[ParsedCommit]:
    return [parse_commit(c.sha, c.message) for c in sample_commits]


@pytest.fixture
def mock_repo(tmp_path) -> MagicMock:
    """Create a mock GitRepository with no tags and no commits."""
    repo = MagicMock(spec=GitRepository)
    repo.path = tmp_path
    repo.is_shallow.return_value = False
    repo.get_latest_semver_tag.return_value = None
    repo.get_commits_since_tag.return_value = []
    return repo
