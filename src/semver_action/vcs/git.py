"""Git operations via subprocess.

Only the handful of commands the release flow needs: tag discovery, commit
listing since a tag, and tag creation and pushing.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from semver_action.core.version import Version
from semver_action.exceptions import GitError, InvalidVersionFormatError

COMMIT_DELIMITER = "---SEMVER-COMMIT-END---"
LOG_FORMAT = f"%H%n%B%n{COMMIT_DELIMITER}"


@dataclass(frozen=True, slots=True)
class Commit:
    """A raw commit as listed by git log."""

    sha: str
    message: str


def parse_log_output(output: str) -> list[Commit]:
    """Split ``git log --format=LOG_FORMAT`` output into commits.

    Each block holds the sha on its first line followed by the message.
    """
    commits = []
    for block in output.split(COMMIT_DELIMITER):
        block = block.strip()
        if not block:
            continue

        sha, _, message = block.partition("\n")
        sha = sha.strip()
        if sha:
            commits.append(Commit(sha=sha, message=message.strip()))

    return commits


class GitRepository:
    """Thin wrapper around the git CLI for one working tree."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path else Path.cwd()

    def _run(self, *args: str) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitError: If git is missing or the command fails
        """
        cmd = ["git", *args]
        try:
            result = subprocess.run(
                cmd,
                cwd=self.path,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"{' '.join(cmd)} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def is_shallow(self) -> bool:
        return self._run("rev-parse", "--is-shallow-repository").strip() == "true"

    def get_latest_semver_tag(self, prefix: str = "") -> str | None:
        """Find the highest version tag starting with prefix.

        Tags that do not parse as versions are ignored.

        Args:
            prefix: Tag prefix, e.g. "v"

        Returns:
            The tag name, or None if no version tag exists
        """
        output = self._run("tag", "--list", f"{prefix}*")

        latest: Version | None = None
        latest_tag: str | None = None
        for line in output.splitlines():
            tag = line.strip()
            if not tag:
                continue
            try:
                version = Version.parse(tag)
            except InvalidVersionFormatError:
                continue
            # "v*" also lists tags such as "vnext-9.0.0"
            if version.prefix != prefix:
                continue
            if latest is None or version.compare(latest) > 0:
                latest = version
                latest_tag = tag

        return latest_tag

    def get_commits_since_tag(self, tag: str | None) -> list[Commit]:
        """List commits after tag, newest first.

        Args:
            tag: Tag to start from, or None for the full history

        Returns:
            Commits reachable from HEAD but not from tag
        """
        rev_range = f"{tag}..HEAD" if tag else "HEAD"
        output = self._run("log", f"--format={LOG_FORMAT}", rev_range)
        return parse_log_output(output)

    def create_tag(self, tag: str) -> None:
        self._run("tag", tag)

    def push_tag(self, tag: str, remote: str = "origin") -> None:
        self._run("push", remote, tag)
