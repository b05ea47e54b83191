"""Tests for semantic version parsing, ordering and bumping."""

from __future__ import annotations

import pytest

from semver_action.core.version import BumpType, Version, parse_version
from semver_action.exceptions import InvalidVersionFormatError

VALID_VERSIONS = [
    "1.2.3",
    "v1.2.3",
    "0.0.0",
    "v10.20.30",
    "1.0.0-alpha",
    "v1.0.0-rc.1",
    "1.0.0+build.123",
    "v1.0.0-beta.2+exp.sha.5114f85",
    "release-2.0.0",
]


class TestParse:
    """Tests for Version.parse()."""

    def test_parse_with_prefix(self):
        """Prefix is captured separately from the numbers."""
        v = Version.parse("v1.2.3")

        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prefix == "v"
        assert v.prerelease == ""
        assert v.build_metadata == ""

    def test_parse_without_prefix(self):
        v = Version.parse("1.2.3")
        assert v.prefix == ""
        assert (v.major, v.minor, v.patch) == (1, 2, 3)

    def test_parse_prerelease_and_metadata(self):
        v = Version.parse("v2.0.0-rc.1+build.7")

        assert v.prerelease == "rc.1"
        assert v.build_metadata == "build.7"
        assert v.is_prerelease

    def test_parse_metadata_only(self):
        v = Version.parse("1.0.0+20240101")
        assert v.prerelease == ""
        assert v.build_metadata == "20240101"

    def test_parse_custom_prefix(self):
        """Any leading non-digit text is kept verbatim as prefix."""
        v = Version.parse("release-3.1.4")
        assert v.prefix == "release-"
        assert v.major == 3

    def test_leading_zeros_accepted(self):
        """Digit runs are converted to ints without a leading-zero check."""
        v = Version.parse("01.002.3")
        assert (v.major, v.minor, v.patch) == (1, 2, 3)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "v",
            "1.2",
            "1.2.3.4",
            "v1.2.x",
            "1.2.3-",
            "1.2.3+",
            "1.2.3-rc_1",
            "1.2.3-.rc",
            "1.2.3 ",
            "1.2.3-beta-1",
            "v١.٢.٣",
        ],
    )
    def test_invalid_versions_raise(self, text: str):
        with pytest.raises(InvalidVersionFormatError) as exc_info:
            Version.parse(text)

        assert exc_info.value.text == text

    def test_invalid_version_is_value_error(self):
        with pytest.raises(ValueError, match="Invalid version format"):
            parse_version("not-a-version")

    @pytest.mark.parametrize("text", VALID_VERSIONS)
    def test_round_trip(self, text: str):
        """Formatting a parsed version reproduces the input."""
        assert str(Version.parse(text)) == text


class TestCompare:
    """Tests for Version.compare() and ordering operators."""

    @pytest.mark.parametrize(
        ("lower", "higher"),
        [
            ("1.0.0", "2.0.0"),
            ("1.1.0", "1.2.0"),
            ("1.1.1", "1.1.2"),
            ("1.9.9", "2.0.0"),
            ("1.0.0-alpha", "1.0.0"),
            ("1.0.0-alpha", "1.0.0-beta"),
            ("0.9.0", "1.0.0-alpha"),
        ],
    )
    def test_ordering(self, lower: str, higher: str):
        a = Version.parse(lower)
        b = Version.parse(higher)

        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a < b
        assert b > a

    def test_equal_to_itself(self):
        for text in VALID_VERSIONS:
            v = Version.parse(text)
            assert v.compare(v) == 0

    def test_metadata_ignored(self):
        a = Version.parse("1.0.0+build.1")
        b = Version.parse("1.0.0+build.2")
        assert a.compare(b) == 0
        assert a <= b
        assert a >= b

    def test_prefix_ignored(self):
        assert Version.parse("v1.0.0").compare(Version.parse("1.0.0")) == 0

    def test_prerelease_compared_as_strings(self):
        """Pre-release identifiers are compared lexicographically, not numerically."""
        rc2 = Version.parse("1.0.0-rc.2")
        rc10 = Version.parse("1.0.0-rc.10")
        assert rc10.compare(rc2) == -1

    def test_sorted(self):
        versions = [Version.parse(t) for t in ["v1.0.0", "v0.1.0", "v1.0.0-rc.1", "v0.10.0"]]
        assert [str(v) for v in sorted(versions)] == [
            "v0.1.0",
            "v0.10.0",
            "v1.0.0-rc.1",
            "v1.0.0",
        ]


class TestBump:
    """Tests for bump operations."""

    def test_bump_minor_keeps_prefix(self):
        assert str(Version.parse("v1.2.3").bump_minor()) == "v1.3.0"

    def test_bump_major(self):
        assert str(Version.parse("v1.2.3").bump_major()) == "v2.0.0"

    def test_bump_patch(self):
        assert str(Version.parse("1.2.3").bump_patch()) == "1.2.4"

    @pytest.mark.parametrize("text", VALID_VERSIONS)
    def test_bumps_increase_and_clear_suffixes(self, text: str):
        v = Version.parse(text)
        for bumped in (v.bump_patch(), v.bump_minor(), v.bump_major()):
            assert bumped.compare(v) > 0
            assert bumped.prerelease == ""
            assert bumped.build_metadata == ""
            assert bumped.prefix == v.prefix

    def test_bump_prerelease_patch(self):
        """Bumping a pre-release still increments the component."""
        assert str(Version.parse("v1.0.0-rc.1+b5").bump_patch()) == "v1.0.1"

    @pytest.mark.parametrize(
        ("bump_type", "expected"),
        [
            (BumpType.MAJOR, "v2.0.0"),
            (BumpType.MINOR, "v1.3.0"),
            (BumpType.PATCH, "v1.2.4"),
            (BumpType.NONE, "v1.2.3"),
        ],
    )
    def test_bump_by_type(self, bump_type: BumpType, expected: str):
        assert str(Version.parse("v1.2.3").bump(bump_type)) == expected

    def test_version_is_immutable(self):
        v = Version.parse("1.0.0")
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore[misc]


class TestBumpType:
    """Tests for BumpType ordering and names."""

    def test_ordering(self):
        assert BumpType.NONE < BumpType.PATCH < BumpType.MINOR < BumpType.MAJOR

    def test_str(self):
        assert [str(b) for b in BumpType] == ["none", "patch", "minor", "major"]

    def test_format(self):
        assert f"{BumpType.MINOR}" == "minor"
