"""Conventional commit parsing and bump calculation.

Parses commit messages following the Conventional Commits format:
    type(scope)!: description

    body

    TOKEN: value

A message whose first line does not match the header grammar is still a
valid ParsedCommit with an empty commit_type. Parsing never fails.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from semver_action.core.version import BumpType

if TYPE_CHECKING:
    from semver_action.vcs.git import Commit

HEADER_PATTERN = re.compile(r"^(\w+)(?:\(([^)]*)\))?(!)?:\s*(.+)$", re.ASCII)
FOOTER_PATTERN = re.compile(r"^([\w-]+|BREAKING CHANGE)\s*:\s*(.+)$", re.ASCII)

BREAKING_TOKENS = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})

SHORT_SHA_LENGTH = 7


@dataclass(frozen=True, slots=True)
class Footer:
    """A ``TOKEN: value`` trailer line."""

    token: str
    value: str

    @property
    def is_breaking(self) -> bool:
        return self.token.upper() in BREAKING_TOKENS


@dataclass(frozen=True, slots=True)
class ParsedCommit:
    """A commit message broken down into its conventional parts.

    Attributes:
        sha: Commit identifier
        raw_message: Full original message
        commit_type: Lower-cased type (feat, fix, ...), empty if not conventional
        scope: Scope from the header, empty if absent
        description: Header summary text
        body: Free text between header and footers
        footers: Trailer lines in input order
        is_breaking: Header had "!" or a BREAKING CHANGE footer is present
    """

    sha: str
    raw_message: str
    commit_type: str = ""
    scope: str = ""
    description: str = ""
    body: str = ""
    footers: tuple[Footer, ...] = field(default_factory=tuple)
    is_breaking: bool = False

    @classmethod
    def from_commit(cls, commit: Commit) -> ParsedCommit:
        """Parse a raw git commit."""
        return parse_commit(commit.sha, commit.message)

    @property
    def is_conventional(self) -> bool:
        return bool(self.commit_type)

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def subject(self) -> str:
        """First line of the raw message."""
        return self.raw_message.split("\n", 1)[0]


def parse_commit(sha: str, message: str) -> ParsedCommit:
    """Parse a single commit message.

    Args:
        sha: Commit identifier
        message: Full commit message

    Returns:
        ParsedCommit; commit_type is empty when the header does not match
    """
    lines = message.split("\n")
    match = HEADER_PATTERN.match(lines[0].strip())
    if match is None:
        return ParsedCommit(sha=sha, raw_message=message)

    commit_type, scope, bang, description = match.groups()

    body = ""
    footers: tuple[Footer, ...] = ()
    if len(lines) > 1:
        body, footers = _split_body_and_footers(lines[1:])

    is_breaking = bang == "!" or any(f.is_breaking for f in footers)

    return ParsedCommit(
        sha=sha,
        raw_message=message,
        commit_type=commit_type.lower(),
        scope=scope or "",
        description=description,
        body=body,
        footers=footers,
        is_breaking=is_breaking,
    )


def _split_body_and_footers(lines: list[str]) -> tuple[str, tuple[Footer, ...]]:
    """Separate the trailing footer block from the body.

    Footers are the contiguous run of footer-shaped lines at the very end.
    The backward scan stops at the first blank or non-footer line, so
    footer-shaped lines earlier in the message stay in the body.
    """
    footer_start = len(lines)
    for index in range(len(lines) - 1, -1, -1):
        stripped = lines[index].strip()
        if not stripped or not FOOTER_PATTERN.match(stripped):
            break
        footer_start = index

    footers = []
    for line in lines[footer_start:]:
        match = FOOTER_PATTERN.match(line.strip())
        if match:
            footers.append(Footer(token=match.group(1), value=match.group(2)))

    body = "\n".join(lines[:footer_start]).strip()
    return body, tuple(footers)


def parse_commits(
    commits: Iterable[Commit | tuple[str, str]],
    *,
    max_workers: int | None = None,
) -> list[ParsedCommit]:
    """Parse a batch of commits, preserving input order.

    Args:
        commits: Commit objects or (sha, message) pairs
        max_workers: Parse on a thread pool of this size when greater than 1

    Returns:
        Parsed commits in the same order as the input
    """
    pairs = [_as_pair(commit) for commit in commits]

    if max_workers is None or max_workers <= 1 or len(pairs) < 2:
        return [parse_commit(sha, message) for sha, message in pairs]

    # Executor.map yields results in submission order
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda pair: parse_commit(*pair), pairs))


def _as_pair(commit: Commit | tuple[str, str]) -> tuple[str, str]:
    if isinstance(commit, tuple):
        return commit
    return commit.sha, commit.message


def calculate_bump(
    commits: Sequence[ParsedCommit],
    *,
    bump_unknown_to_patch: bool = False,
) -> BumpType:
    """Reduce parsed commits to a single bump decision.

    Rules:
    - Any breaking commit -> MAJOR (remaining commits are not inspected)
    - feat -> at least MINOR
    - fix, perf -> at least PATCH
    - anything else, non-conventional included -> at least PATCH only when
      bump_unknown_to_patch is set

    Args:
        commits: Parsed commits in history order
        bump_unknown_to_patch: Treat unrecognized types as patch-level changes

    Returns:
        The highest bump implied by the commits
    """
    bump = BumpType.NONE

    for commit in commits:
        if commit.is_breaking:
            return BumpType.MAJOR

        if commit.commit_type == "feat":
            level = BumpType.MINOR
        elif commit.commit_type in ("fix", "perf"):
            level = BumpType.PATCH
        elif bump_unknown_to_patch:
            level = BumpType.PATCH
        else:
            level = BumpType.NONE

        bump = max(bump, level)

    return bump


def get_breaking_changes(commits: Iterable[ParsedCommit]) -> list[ParsedCommit]:
    """Get all breaking-change commits."""
    return [c for c in commits if c.is_breaking]
