"""Semantic version parsing, ordering and bump arithmetic.

A version is ``PREFIX MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` where the
prefix is any leading run of non-digit characters (usually ``""`` or
``"v"``). The prefix is kept verbatim so that ``str(Version.parse(s)) == s``
for every accepted string.

Ordering deliberately stays simple: pre-release strings are compared as
plain strings rather than per dot-separated identifier, so ``rc.10`` sorts
before ``rc.2``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from semver_action.exceptions import InvalidVersionFormatError

_IDENTIFIER = r"[A-Za-z0-9][A-Za-z0-9.]*"

VERSION_PATTERN = re.compile(
    rf"^(?P<prefix>\D*)"
    rf"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    rf"(?:-(?P<prerelease>{_IDENTIFIER}))?"
    rf"(?:\+(?P<build>{_IDENTIFIER}))?$",
    re.ASCII,
)


class BumpType(IntEnum):
    """Magnitude of a version change, ordered NONE < PATCH < MINOR < MAJOR."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release identifier (e.g. "rc.1"), empty if absent
        build_metadata: Build metadata (e.g. "build.5"), empty if absent
        prefix: Literal text before the major number (e.g. "v")
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build_metadata: str = ""
    prefix: str = ""

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string.

        Args:
            text: Version string such as "v1.2.3" or "1.0.0-rc.1+build.7"

        Returns:
            Parsed Version

        Raises:
            InvalidVersionFormatError: If the text does not match the grammar
        """
        match = VERSION_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidVersionFormatError(text)

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("prerelease") or "",
            build_metadata=match.group("build") or "",
            prefix=match.group("prefix"),
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def compare(self, other: Version) -> int:
        """Compare two versions by precedence.

        Build metadata and prefix are ignored. A release outranks a
        pre-release of the same core version; two pre-releases compare as
        plain strings.

        Returns:
            -1, 0 or 1
        """
        core = (self.major, self.minor, self.patch)
        other_core = (other.major, other.minor, other.patch)
        if core != other_core:
            return -1 if core < other_core else 1

        if self.prerelease == other.prerelease:
            return 0
        if not self.prerelease:
            return 1
        if not other.prerelease:
            return -1
        return -1 if self.prerelease < other.prerelease else 1

    def __lt__(self, other: Version) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        return self.compare(other) >= 0

    def bump_major(self) -> Version:
        return Version(self.major + 1, 0, 0, prefix=self.prefix)

    def bump_minor(self) -> Version:
        return Version(self.major, self.minor + 1, 0, prefix=self.prefix)

    def bump_patch(self) -> Version:
        return Version(self.major, self.minor, self.patch + 1, prefix=self.prefix)

    def bump(self, bump_type: BumpType) -> Version:
        """Bump according to a BumpType.

        BumpType.NONE returns the version unchanged.
        """
        if bump_type == BumpType.MAJOR:
            return self.bump_major()
        if bump_type == BumpType.MINOR:
            return self.bump_minor()
        if bump_type == BumpType.PATCH:
            return self.bump_patch()
        return self

    def __str__(self) -> str:
        text = f"{self.prefix}{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build_metadata:
            text += f"+{self.build_metadata}"
        return text


def parse_version(text: str) -> Version:
    """Parse a version string. Shortcut for Version.parse()."""
    return Version.parse(text)
